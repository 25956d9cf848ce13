"""Repositories for JSON definitions."""

from .combatants_repo import CombatantsRepository

__all__ = ["CombatantsRepository"]
