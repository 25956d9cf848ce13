"""Combatant definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from exercheck.core.types import Faction, SaberColor


@dataclass(slots=True)
class CombatantDef:
    """Static definition of a scenario combatant."""

    id: str
    name: str
    faction: Faction
    hit_points: int
    weapon_color: SaberColor | None = None  # None means picked at creation
