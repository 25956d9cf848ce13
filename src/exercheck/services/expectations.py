"""Expectation checks rendered as pass/fail report lines."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Tuple

MarkerStyle = Literal["emoji", "ascii"]


@dataclass(frozen=True, slots=True)
class Markers:
    """Pair of glyphs appended to passing and failing lines."""

    passed: str
    failed: str


EMOJI_MARKERS = Markers(passed="\N{THUMBS UP SIGN}", failed="\N{THUMBS DOWN SIGN}")
ASCII_MARKERS = Markers(passed="[PASS]", failed="[FAIL]")
DEFAULT_MARKERS = EMOJI_MARKERS


def markers_for_style(style: MarkerStyle) -> Markers:
    return ASCII_MARKERS if style == "ascii" else EMOJI_MARKERS


@dataclass(frozen=True, slots=True)
class ExpectationResult:
    """A single named boolean check."""

    message: str
    passed: bool

    def render(self, markers: Markers = DEFAULT_MARKERS) -> str:
        marker = markers.passed if self.passed else markers.failed
        return f"{self.message} {marker}"


def check(assertion: bool, message: str) -> ExpectationResult:
    return ExpectationResult(message=message, passed=bool(assertion))


def expect(assertion: bool, message: str, markers: Markers = DEFAULT_MARKERS) -> str:
    """Return ``message`` followed by the pass or fail marker."""
    return check(assertion, message).render(markers)


def summarize(results: Iterable[ExpectationResult]) -> Tuple[int, int]:
    """Return ``(passed, total)`` for a batch of checks."""
    passed = total = 0
    for result in results:
        total += 1
        if result.passed:
            passed += 1
    return passed, total
