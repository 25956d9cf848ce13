from __future__ import annotations

from typing import List

import pytest

from exercheck.core.rng import RNG
from exercheck.core.types import Faction, SaberColor
from exercheck.data.repositories import CombatantsRepository
from exercheck.domain import FIGHT_REFUSED, Combatant, InvalidCombatantError
from exercheck.services.errors import ScenarioError
from exercheck.services.expectations import ASCII_MARKERS, summarize
from exercheck.services.scenario_service import ScenarioRoster, build_reference_roster, grade_scenario, run_scenario

PASS = "\U0001F44D"
FAIL = "\U0001F44E"


def _roster(light_color: SaberColor = SaberColor.GREEN) -> List[Combatant]:
    return [
        Combatant(name="Luke Skywalker", hit_points=10, faction=Faction.LIGHT, weapon_color=light_color),
        Combatant(name="Obi-Wan Kenobi", hit_points=8, faction=Faction.LIGHT, weapon_color=SaberColor.BLUE),
        Combatant(name="Darth Vader", hit_points=9, faction=Faction.DARK, weapon_color=SaberColor.RED),
        Combatant(name="Darth Maul", hit_points=10, faction=Faction.DARK, weapon_color=SaberColor.RED),
    ]


def test_reference_scenario_all_checks_pass() -> None:
    luke, obiwan, vader, maul = combatants = _roster()

    lines = run_scenario(combatants)

    assert lines == [
        f"Darth Vader wields a Red lightsaber {PASS}",
        f"Darth Maul wields a Red lightsaber {PASS}",
        f"Luke Skywalker wields a light side lightsaber {PASS}",
        f"Obi-Wan Kenobi wields a light side lightsaber {PASS}",
        f"Luke Skywalker refuses to fight Obi-Wan Kenobi {PASS}",
        f"Darth Vader fights Darth Maul {PASS}",
        f"Darth Maul is defeated {PASS}",
        f"Darth Vader has 14 hit points {PASS}",
        f"Obi-Wan Kenobi fights Darth Vader {PASS}",
        f"Obi-Wan Kenobi is defeated {PASS}",
        f"Darth Vader has 6 hit points {PASS}",
        f"Luke Skywalker fights Darth Vader {PASS}",
        f"Darth Vader is defeated {PASS}",
        f"Luke Skywalker has 4 hit points {PASS}",
        f"Luke Skywalker fighting the defeated Darth Vader does nothing {PASS}",
    ]
    assert luke.hit_points == 4
    assert obiwan.is_defeated and vader.is_defeated and maul.is_defeated


def test_final_check_can_be_left_out_of_report() -> None:
    lines = run_scenario(_roster(), report_final_check=False)

    assert len(lines) == 14
    assert lines[-1] == f"Luke Skywalker has 4 hit points {PASS}"


def test_report_uses_requested_markers() -> None:
    lines = run_scenario(_roster(), markers=ASCII_MARKERS)

    assert all(line.endswith(" [PASS]") for line in lines)


def test_broken_fight_implementation_is_reported() -> None:
    def always_refuse(attacker: Combatant, defender: Combatant) -> str:
        return FIGHT_REFUSED

    lines = run_scenario(_roster(), fight_fn=always_refuse)

    assert summarize(grade_scenario(_roster(), fight_fn=always_refuse)) == (5, 15)
    assert lines[5] == f"Darth Vader fights Darth Maul {FAIL}"
    assert lines[7] == f"Darth Vader has 14 hit points {FAIL}"
    assert lines[-1].endswith(FAIL)


def test_dark_duel_with_higher_winner_is_reported() -> None:
    from exercheck.domain import fight

    def higher_always_wins(attacker: Combatant, defender: Combatant) -> str:
        if attacker.faction is Faction.DARK and defender.faction is Faction.DARK:
            winner, loser = (attacker, defender) if attacker.hit_points >= defender.hit_points else (defender, attacker)
            winner.hit_points += loser.hit_points // 2
            loser.hit_points = 0
            return f"{attacker.name} fights {defender.name} with Red lightsaber! {winner.name} wins!"
        return fight(attacker, defender)

    lines = run_scenario(_roster(), fight_fn=higher_always_wins)

    assert lines[5] == f"Darth Vader fights Darth Maul {FAIL}"
    assert lines[6] == f"Darth Maul is defeated {FAIL}"
    # Vader is already down, so the following fights must leave everyone untouched.
    assert lines[8] == f"Obi-Wan Kenobi fights Darth Vader {PASS}"
    assert lines[9] == f"Obi-Wan Kenobi keeps 8 hit points {PASS}"
    assert lines[10] == f"Darth Vader keeps 0 hit points {PASS}"


def test_roster_requires_exactly_four_combatants() -> None:
    with pytest.raises(ScenarioError):
        run_scenario(_roster()[:3])


def test_roster_requires_light_then_dark_roles() -> None:
    luke, obiwan, vader, maul = _roster()

    with pytest.raises(ScenarioError):
        run_scenario([vader, obiwan, luke, maul])


def test_roster_rejects_non_combatants() -> None:
    luke, obiwan, vader, _ = _roster()

    with pytest.raises(ScenarioError):
        ScenarioRoster.from_sequence([luke, obiwan, vader, "Darth Maul"])  # type: ignore[list-item]


def test_named_roster_is_accepted() -> None:
    roster = ScenarioRoster(*_roster())

    assert ScenarioRoster.from_sequence(roster) is roster
    assert summarize(grade_scenario(roster)) == (15, 15)


def test_reference_roster_from_definitions_passes_for_any_seed() -> None:
    repo = CombatantsRepository()
    for seed in (1, 2, 3, 99):
        roster = build_reference_roster(repo, RNG(seed))
        assert [c.name for c in roster] == ["Luke Skywalker", "Obi-Wan Kenobi", "Darth Vader", "Darth Maul"]
        assert summarize(grade_scenario(roster)) == (15, 15)


@pytest.mark.parametrize("light_color", [SaberColor.BLUE, SaberColor.GREEN, SaberColor.PURPLE])
def test_saber_color_checks_hold_for_every_constructible_roster(light_color: SaberColor) -> None:
    results = grade_scenario(_roster(light_color))

    assert [result.passed for result in results[:4]] == [True, True, True, True]


def test_out_of_faction_color_is_rejected_before_grading() -> None:
    with pytest.raises(InvalidCombatantError):
        Combatant(name="Luke Skywalker", hit_points=10, faction=Faction.LIGHT, weapon_color=SaberColor.RED)


def test_grade_scenario_matches_rendered_report() -> None:
    results = grade_scenario(_roster(), report_final_check=False)

    assert [result.render(ASCII_MARKERS) for result in results] == run_scenario(
        _roster(), report_final_check=False, markers=ASCII_MARKERS
    )
