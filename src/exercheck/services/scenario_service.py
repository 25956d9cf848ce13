"""Graded lightsaber scenario: a fixed battery of checks against a fight implementation."""
from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Sequence

from exercheck.core.rng import RNG
from exercheck.core.types import DARK_SABER_COLOR, LIGHT_SABER_COLORS, Faction
from exercheck.data.repositories import CombatantsRepository
from exercheck.domain import FIGHT_REFUSED, NOTHING_HAPPENS, Combatant, fight, predict_fight
from exercheck.services.errors import ScenarioError
from exercheck.services.expectations import DEFAULT_MARKERS, ExpectationResult, Markers, check
from exercheck.services.factories import create_combatant_from_def

logger = logging.getLogger(__name__)

FightFn = Callable[[Combatant, Combatant], str]

REFERENCE_ROSTER_IDS = ("luke", "obiwan", "darthvader", "darthmaul")


class ScenarioRoster(NamedTuple):
    """The four scenario roles: two light side users followed by two dark side users."""

    light_1: Combatant
    light_2: Combatant
    dark_1: Combatant
    dark_2: Combatant

    @classmethod
    def from_sequence(cls, combatants: Sequence[Combatant]) -> ScenarioRoster:
        if isinstance(combatants, cls):
            roster = combatants
        else:
            if len(combatants) != 4:
                raise ScenarioError(f"A scenario needs exactly 4 combatants, got {len(combatants)}.")
            roster = cls(*combatants)
        _validate_roles(roster)
        return roster


def _validate_roles(roster: ScenarioRoster) -> None:
    expected = (Faction.LIGHT, Faction.LIGHT, Faction.DARK, Faction.DARK)
    for role, combatant, faction in zip(roster._fields, roster, expected):
        if not isinstance(combatant, Combatant):
            raise ScenarioError(f"{role} must be a Combatant, got {type(combatant).__name__}.")
        if combatant.faction is not faction:
            raise ScenarioError(f"{role} ({combatant.name}) must be on the {faction.value} side.")


def build_reference_roster(combatants_repo: CombatantsRepository, rng: RNG) -> ScenarioRoster:
    """Create Luke, Obi-Wan, Vader and Maul from their definitions."""
    combatants = [create_combatant_from_def(def_id, combatants_repo, rng) for def_id in REFERENCE_ROSTER_IDS]
    return ScenarioRoster.from_sequence(combatants)


def run_scenario(
    combatants: Sequence[Combatant],
    *,
    fight_fn: FightFn = fight,
    report_final_check: bool = True,
    markers: Markers = DEFAULT_MARKERS,
) -> List[str]:
    """Run the ordered checks against ``fight_fn`` and return the rendered report lines."""
    results = grade_scenario(combatants, fight_fn=fight_fn, report_final_check=report_final_check)
    return [result.render(markers) for result in results]


def grade_scenario(
    combatants: Sequence[Combatant],
    *,
    fight_fn: FightFn = fight,
    report_final_check: bool = True,
) -> List[ExpectationResult]:
    """Run the ordered checks against ``fight_fn`` and return the unrendered results.

    Fights mutate the given combatants, so every run needs a fresh roster.

    The four saber colour checks always pass for a roster that reaches this point:
    ``Combatant`` rejects a colour outside its faction's set at construction and the
    roster roles fix the factions. They stay in the report so it lists every rule.
    """
    roster = ScenarioRoster.from_sequence(combatants)
    results: List[ExpectationResult] = []

    for dark in (roster.dark_1, roster.dark_2):
        results.append(
            check(
                dark.weapon_color is DARK_SABER_COLOR,
                f"{dark.name} wields a {DARK_SABER_COLOR.value} lightsaber",
            )
        )
    for light in (roster.light_1, roster.light_2):
        results.append(
            check(light.weapon_color in LIGHT_SABER_COLORS, f"{light.name} wields a light side lightsaber")
        )

    refusal = fight_fn(roster.light_1, roster.light_2)
    logger.debug("%s vs %s: %s", roster.light_1.name, roster.light_2.name, refusal)
    results.append(check(refusal == FIGHT_REFUSED, f"{roster.light_1.name} refuses to fight {roster.light_2.name}"))

    results.extend(_check_duel(roster.dark_1, roster.dark_2, fight_fn))
    results.extend(_check_duel(roster.light_2, roster.dark_1, fight_fn))
    results.extend(_check_duel(roster.light_1, roster.dark_1, fight_fn))

    aftermath = fight_fn(roster.light_1, roster.dark_1)
    logger.debug("%s vs defeated %s: %s", roster.light_1.name, roster.dark_1.name, aftermath)
    final_check = check(
        aftermath == NOTHING_HAPPENS,
        f"{roster.light_1.name} fighting the defeated {roster.dark_1.name} does nothing",
    )
    if report_final_check:
        results.append(final_check)

    logger.debug("scenario finished: %d/%d checks passed", sum(r.passed for r in results), len(results))
    return results


def _check_duel(attacker: Combatant, defender: Combatant, fight_fn: FightFn) -> List[ExpectationResult]:
    """Fight once and return three checks: the message plus the resulting hit points."""
    prediction = predict_fight(attacker, defender)
    attacker_start, defender_start = attacker.hit_points, defender.hit_points
    message = fight_fn(attacker, defender)
    logger.debug("%s vs %s: %s", attacker.name, defender.name, message)

    results = [check(message == prediction.message, f"{attacker.name} fights {defender.name}")]
    if prediction.winner is None or prediction.loser is None:
        # An earlier fight went wrong; nobody should change.
        results.append(check(attacker.hit_points == attacker_start, f"{attacker.name} keeps {attacker_start} hit points"))
        results.append(check(defender.hit_points == defender_start, f"{defender.name} keeps {defender_start} hit points"))
        return results

    expected_hp = prediction.winner_hit_points_after
    results.append(check(prediction.loser.is_defeated, f"{prediction.loser.name} is defeated"))
    results.append(
        check(prediction.winner.hit_points == expected_hp, f"{prediction.winner.name} has {expected_hp} hit points")
    )
    return results
