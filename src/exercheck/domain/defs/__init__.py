"""Definition dataclasses loaded from JSON."""

from .combatant_def import CombatantDef

__all__ = ["CombatantDef"]
