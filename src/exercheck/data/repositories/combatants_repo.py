"""Combatants repository."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from exercheck.core.types import Faction, SaberColor, allowed_colors
from exercheck.data.errors import DataValidationError
from exercheck.data.repositories.base import RepositoryBase
from exercheck.domain.defs import CombatantDef


class CombatantsRepository(RepositoryBase[CombatantDef]):
    """Loads and validates scenario combatant definitions."""

    kind = "combatant"

    def __init__(self, base_path: Path | str | None = None) -> None:
        super().__init__("combatants.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CombatantDef]:
        combatants: Dict[str, CombatantDef] = {}
        for raw_id, payload in raw.items():
            context = f"combatant '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "faction", "hit_points"},
                context,
                optional_fields={"weapon_color"},
            )

            name = self._require_str(data["name"], f"{context} name")
            hit_points = self._require_int(data["hit_points"], f"{context} hit_points")
            faction = self._parse_faction(data["faction"], context)
            weapon_color = None
            if data.get("weapon_color") is not None:
                weapon_color = self._parse_color(data["weapon_color"], context)
                if weapon_color not in allowed_colors(faction):
                    raise DataValidationError(
                        f"{context} cannot wield {weapon_color.value} on the {faction.value} side."
                    )

            combatants[raw_id] = CombatantDef(
                id=raw_id,
                name=name,
                faction=faction,
                hit_points=hit_points,
                weapon_color=weapon_color,
            )
        return combatants

    def _parse_faction(self, value: object, context: str) -> Faction:
        token = self._require_str(value, f"{context} faction")
        try:
            return Faction(token)
        except ValueError as exc:
            choices = [faction.value for faction in Faction]
            raise DataValidationError(f"{context} faction must be one of {choices}.") from exc

    def _parse_color(self, value: object, context: str) -> SaberColor:
        token = self._require_str(value, f"{context} weapon_color")
        try:
            return SaberColor(token)
        except ValueError as exc:
            choices = [color.value for color in SaberColor]
            raise DataValidationError(f"{context} weapon_color must be one of {choices}.") from exc
