import json
from pathlib import Path

import pytest

from exercheck.core.rng import RNG
from exercheck.core.types import LIGHT_SABER_COLORS, Faction, SaberColor
from exercheck.data.repositories import CombatantsRepository
from exercheck.services.errors import FactoryError
from exercheck.services.factories import create_combatant_from_def


def test_create_combatant_from_def_picks_light_color(tmp_path: Path) -> None:
    repo = _seed_repo(tmp_path, {"luke": {"name": "Luke Skywalker", "faction": "Light", "hit_points": 10}})

    luke = create_combatant_from_def("luke", combatants_repo=repo, rng=RNG(5))

    assert luke.name == "Luke Skywalker"
    assert luke.faction is Faction.LIGHT
    assert luke.hit_points == 10
    assert luke.weapon_color in LIGHT_SABER_COLORS


def test_create_combatant_from_def_same_seed_same_color(tmp_path: Path) -> None:
    repo = _seed_repo(tmp_path, {"luke": {"name": "Luke Skywalker", "faction": "Light", "hit_points": 10}})

    first = create_combatant_from_def("luke", combatants_repo=repo, rng=RNG(31))
    second = create_combatant_from_def("luke", combatants_repo=repo, rng=RNG(31))

    assert first.weapon_color is second.weapon_color


def test_create_combatant_from_def_keeps_fixed_color(tmp_path: Path) -> None:
    repo = _seed_repo(
        tmp_path,
        {"mace": {"name": "Mace Windu", "faction": "Light", "hit_points": 12, "weapon_color": "Purple"}},
    )

    mace = create_combatant_from_def("mace", combatants_repo=repo, rng=RNG(1))

    assert mace.weapon_color is SaberColor.PURPLE


def test_create_combatant_from_def_dark_side_is_red(tmp_path: Path) -> None:
    repo = _seed_repo(tmp_path, {"maul": {"name": "Darth Maul", "faction": "Dark", "hit_points": 10}})

    maul = create_combatant_from_def("maul", combatants_repo=repo, rng=RNG(1))

    assert maul.weapon_color is SaberColor.RED


def test_create_combatant_from_def_unknown_id(tmp_path: Path) -> None:
    repo = _seed_repo(tmp_path, {})

    with pytest.raises(FactoryError):
        create_combatant_from_def("yoda", combatants_repo=repo, rng=RNG(1))


def _seed_repo(tmp_path: Path, payload: dict) -> CombatantsRepository:
    (tmp_path / "combatants.json").write_text(json.dumps(payload), encoding="utf-8")
    return CombatantsRepository(base_path=tmp_path)
