"""Shared enums and aliases for the core and domain layers."""
from __future__ import annotations

from enum import Enum
from typing import Literal, Tuple


class Faction(Enum):
    """Side of the Force a combatant belongs to."""

    LIGHT = "Light"
    DARK = "Dark"


class SaberColor(Enum):
    """Lightsaber colours; the value is the token used in fight messages."""

    BLUE = "Blue"
    GREEN = "Green"
    PURPLE = "Purple"
    RED = "Red"


LIGHT_SABER_COLORS: Tuple[SaberColor, ...] = (SaberColor.BLUE, SaberColor.GREEN, SaberColor.PURPLE)
DARK_SABER_COLOR = SaberColor.RED

FightOutcome = Literal["nothing_happens", "refused", "victory"]


def allowed_colors(faction: Faction) -> Tuple[SaberColor, ...]:
    """Return the closed set of saber colours a faction may wield."""
    if faction is Faction.LIGHT:
        return LIGHT_SABER_COLORS
    if faction is Faction.DARK:
        return (DARK_SABER_COLOR,)
    raise ValueError(f"Unknown faction: {faction!r}")


__all__ = [
    "DARK_SABER_COLOR",
    "Faction",
    "FightOutcome",
    "LIGHT_SABER_COLORS",
    "SaberColor",
    "allowed_colors",
]
