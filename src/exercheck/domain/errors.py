"""Domain-level exceptions."""


class InvalidCombatantError(ValueError):
    """Raised when a combatant is built with a faction or colour outside its rules."""


class WeaponColorLockedError(AttributeError):
    """Raised when a combatant's saber colour is reassigned after construction."""
