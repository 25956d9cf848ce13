"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence


def debug_enabled() -> bool:
    """Return True only when EXERCHECK_DEBUG is explicitly set to '1'."""
    return os.getenv("EXERCHECK_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_report(title: str, lines: Iterable[str]) -> None:
    render_heading(title)
    for line in lines:
        print(line)


def render_summary(passed: int, total: int) -> None:
    if passed == total:
        print(f"\nAll {total} checks passed. You've solved it!")
    else:
        print(f"\n{passed}/{total} checks passed.")
