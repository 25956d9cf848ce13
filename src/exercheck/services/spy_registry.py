"""Collector for anything that exposes personal information."""
from __future__ import annotations

from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Spyable(Protocol):
    """Capability of any object whose personal information can be collected."""

    personal_information: str

    def send_info_to_nsa(self) -> None:
        ...


def collect(entities: Sequence[Spyable]) -> List[str]:
    """Return a count header followed by each entity's information, in input order."""
    lines = [f"Collected {len(entities)} juicy bits of personal info!"]
    lines.extend(entity.personal_information for entity in entities)
    return lines
