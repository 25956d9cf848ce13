"""Service layer exports."""

from .errors import FactoryError, LearnerImportError, ScenarioError
from .expectations import (
    ASCII_MARKERS,
    DEFAULT_MARKERS,
    EMOJI_MARKERS,
    ExpectationResult,
    Markers,
    check,
    expect,
    markers_for_style,
    summarize,
)
from .scenario_service import (
    REFERENCE_ROSTER_IDS,
    FightFn,
    ScenarioRoster,
    build_reference_roster,
    grade_scenario,
    run_scenario,
)
from .learner_loader import FIGHT_ENV_VAR, learner_target_from_env, load_fight_fn
from .spy_registry import Spyable, collect

__all__ = [
    "ASCII_MARKERS",
    "DEFAULT_MARKERS",
    "EMOJI_MARKERS",
    "ExpectationResult",
    "FIGHT_ENV_VAR",
    "FactoryError",
    "FightFn",
    "LearnerImportError",
    "Markers",
    "REFERENCE_ROSTER_IDS",
    "ScenarioError",
    "ScenarioRoster",
    "Spyable",
    "build_reference_roster",
    "check",
    "collect",
    "expect",
    "grade_scenario",
    "learner_target_from_env",
    "load_fight_fn",
    "markers_for_style",
    "run_scenario",
    "summarize",
]
