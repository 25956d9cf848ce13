"""Resolve a learner's fight implementation from a ``module:function`` target."""
from __future__ import annotations

import logging
import os
from importlib import import_module

from exercheck.services.errors import LearnerImportError
from exercheck.services.scenario_service import FightFn

logger = logging.getLogger(__name__)

FIGHT_ENV_VAR = "EXERCHECK_FIGHT"


def load_fight_fn(target: str) -> FightFn:
    """Import ``module:function`` and return the callable."""
    module_name, sep, attr_name = target.strip().partition(":")
    if not sep or not module_name or not attr_name:
        raise LearnerImportError(f"Expected 'module:function', got {target!r}.")
    try:
        module = import_module(module_name)
    except ImportError as exc:
        raise LearnerImportError(f"Cannot import learner module '{module_name}': {exc}") from exc
    try:
        fight_fn = getattr(module, attr_name)
    except AttributeError as exc:
        raise LearnerImportError(f"Module '{module_name}' has no attribute '{attr_name}'.") from exc
    if not callable(fight_fn):
        raise LearnerImportError(f"'{target}' is not callable.")
    logger.debug("loaded learner fight implementation %s", target)
    return fight_fn


def learner_target_from_env() -> str | None:
    """Return the ``EXERCHECK_FIGHT`` target, or None when grading the built-in rules."""
    return os.getenv(FIGHT_ENV_VAR) or None
