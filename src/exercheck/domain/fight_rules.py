"""Rule table for resolving a lightsaber fight between two combatants."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from exercheck.core.types import Faction, FightOutcome

from .combatant import Combatant

NOTHING_HAPPENS = "Nothing happens."
FIGHT_REFUSED = "Fight refused."


@dataclass(frozen=True, slots=True)
class FightPrediction:
    """Outcome of a fight computed from the combatants' current hit points."""

    outcome: FightOutcome
    message: str
    winner: Combatant | None = None
    loser: Combatant | None = None
    winner_hit_points_after: int | None = None


@dataclass(frozen=True, slots=True)
class FightResult:
    """Outcome of a fight after hit points have been applied."""

    outcome: FightOutcome
    message: str
    winner_name: str | None = None
    loser_name: str | None = None


def format_victory_message(attacker: Combatant, defender: Combatant, winner: Combatant) -> str:
    return (
        f"{attacker.name} fights {defender.name} with {attacker.weapon_color.value} lightsaber! "
        f"{winner.name} wins!"
    )


def _refuse(attacker: Combatant, defender: Combatant) -> FightPrediction:
    del attacker, defender
    return FightPrediction(outcome="refused", message=FIGHT_REFUSED)


def _dark_duel(attacker: Combatant, defender: Combatant) -> FightPrediction:
    # Lower hit points wins; the attacker keeps ties.
    if defender.hit_points < attacker.hit_points:
        winner, loser = defender, attacker
    else:
        winner, loser = attacker, defender
    return FightPrediction(
        outcome="victory",
        message=format_victory_message(attacker, defender, winner),
        winner=winner,
        loser=loser,
        winner_hit_points_after=winner.hit_points + loser.hit_points // 2,
    )


def _light_vs_dark(attacker: Combatant, defender: Combatant) -> FightPrediction:
    # Higher hit points wins; the attacker keeps ties.
    if defender.hit_points > attacker.hit_points:
        winner, loser = defender, attacker
    else:
        winner, loser = attacker, defender
    return FightPrediction(
        outcome="victory",
        message=format_victory_message(attacker, defender, winner),
        winner=winner,
        loser=loser,
        winner_hit_points_after=winner.hit_points - loser.hit_points,
    )


_RULES: Dict[Tuple[Faction, Faction], Callable[[Combatant, Combatant], FightPrediction]] = {
    (Faction.LIGHT, Faction.LIGHT): _refuse,
    (Faction.DARK, Faction.DARK): _dark_duel,
    (Faction.LIGHT, Faction.DARK): _light_vs_dark,
    (Faction.DARK, Faction.LIGHT): _light_vs_dark,
}


def predict_fight(attacker: Combatant, defender: Combatant) -> FightPrediction:
    """Compute the outcome of ``attacker`` fighting ``defender`` without mutating either."""
    if defender.is_defeated or attacker.is_defeated:
        return FightPrediction(outcome="nothing_happens", message=NOTHING_HAPPENS)
    if attacker is defender:
        return FightPrediction(outcome="refused", message=FIGHT_REFUSED)
    rule = _RULES[(attacker.faction, defender.faction)]
    return rule(attacker, defender)


def resolve_fight(attacker: Combatant, defender: Combatant) -> FightResult:
    """Fight, apply the hit point changes and return the structured result."""
    prediction = predict_fight(attacker, defender)
    if prediction.outcome != "victory":
        return FightResult(outcome=prediction.outcome, message=prediction.message)

    assert prediction.winner is not None and prediction.loser is not None
    assert prediction.winner_hit_points_after is not None
    prediction.winner.hit_points = prediction.winner_hit_points_after
    prediction.loser.hit_points = 0
    return FightResult(
        outcome="victory",
        message=prediction.message,
        winner_name=prediction.winner.name,
        loser_name=prediction.loser.name,
    )


def fight(attacker: Combatant, defender: Combatant) -> str:
    """Fight ``defender`` and return the exact outcome message."""
    return resolve_fight(attacker, defender).message
