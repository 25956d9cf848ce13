"""Combatant entity for the lightsaber fight simulation."""
from __future__ import annotations

from dataclasses import dataclass

from exercheck.core.types import Faction, SaberColor, allowed_colors

from .errors import InvalidCombatantError, WeaponColorLockedError


@dataclass(slots=True)
class Combatant:
    """A named Force user with hit points, a faction and a saber colour.

    The saber colour is fixed at construction; ``hit_points`` only changes as a
    side effect of a fight.
    """

    name: str
    hit_points: int
    faction: Faction
    weapon_color: SaberColor

    def __post_init__(self) -> None:
        if not isinstance(self.faction, Faction):
            raise InvalidCombatantError(f"{self.name}: unknown faction {self.faction!r}.")
        if self.weapon_color not in allowed_colors(self.faction):
            raise InvalidCombatantError(
                f"{self.name}: {self.faction.value} side cannot wield a {self.weapon_color!r} lightsaber."
            )

    def __setattr__(self, key: str, value: object) -> None:
        if key == "weapon_color" and hasattr(self, "weapon_color"):
            raise WeaponColorLockedError(f"{self.name} already wields a {self.weapon_color.value} lightsaber.")
        object.__setattr__(self, key, value)

    @property
    def is_defeated(self) -> bool:
        return self.hit_points <= 0

    @property
    def is_alive(self) -> bool:
        return not self.is_defeated
