"""Factory helpers for runtime entities."""

from .combatant_factory import create_combatant, create_combatant_from_def, pick_saber_color

__all__ = [
    "create_combatant",
    "create_combatant_from_def",
    "pick_saber_color",
]
