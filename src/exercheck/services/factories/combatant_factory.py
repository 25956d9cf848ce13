"""Factory for creating combatants with their saber colour picked once."""
from __future__ import annotations

from exercheck.core.rng import RNG
from exercheck.core.types import DARK_SABER_COLOR, LIGHT_SABER_COLORS, Faction, SaberColor
from exercheck.data.errors import DataReferenceError
from exercheck.data.repositories import CombatantsRepository
from exercheck.domain import Combatant, InvalidCombatantError
from exercheck.services.errors import FactoryError


def pick_saber_color(faction: Faction, rng: RNG) -> SaberColor:
    """Dark side always wields red; light side draws one of its colours from ``rng``."""
    if faction is Faction.DARK:
        return DARK_SABER_COLOR
    return rng.choice(LIGHT_SABER_COLORS)


def create_combatant(name: str, hit_points: int, faction: Faction, rng: RNG) -> Combatant:
    """Create a combatant whose saber colour is chosen by faction."""
    if not isinstance(faction, Faction):
        raise FactoryError(f"Cannot create '{name}': unknown faction {faction!r}.")
    return Combatant(
        name=name,
        hit_points=hit_points,
        faction=faction,
        weapon_color=pick_saber_color(faction, rng),
    )


def create_combatant_from_def(
    combatant_id: str,
    combatants_repo: CombatantsRepository,
    rng: RNG,
) -> Combatant:
    """Instantiate a combatant from its JSON definition."""
    try:
        combatant_def = combatants_repo.get(combatant_id)
    except DataReferenceError as exc:
        raise FactoryError(f"Combatant '{combatant_id}' not found.") from exc

    if combatant_def.weapon_color is None:
        return create_combatant(combatant_def.name, combatant_def.hit_points, combatant_def.faction, rng)
    try:
        return Combatant(
            name=combatant_def.name,
            hit_points=combatant_def.hit_points,
            faction=combatant_def.faction,
            weapon_color=combatant_def.weapon_color,
        )
    except InvalidCombatantError as exc:
        raise FactoryError(f"Combatant '{combatant_id}' is invalid: {exc}") from exc
