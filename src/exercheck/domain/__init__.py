"""Domain exports."""

from .combatant import Combatant
from .errors import InvalidCombatantError, WeaponColorLockedError
from .fight_rules import (
    FIGHT_REFUSED,
    NOTHING_HAPPENS,
    FightPrediction,
    FightResult,
    fight,
    format_victory_message,
    predict_fight,
    resolve_fight,
)

__all__ = [
    "Combatant",
    "FIGHT_REFUSED",
    "FightPrediction",
    "FightResult",
    "InvalidCombatantError",
    "NOTHING_HAPPENS",
    "WeaponColorLockedError",
    "fight",
    "format_victory_message",
    "predict_fight",
    "resolve_fight",
]
