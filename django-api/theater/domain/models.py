"""Domain models for invoices and the play catalog.

These are pure domain objects with no API input rules.
Django ORM models are in theater/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Play:
    """Domain representation of a Play.

    The genre is kept as supplied by the catalog source and resolved
    to a Genre when the performance is priced.
    """

    name: str
    genre: str


@dataclass(frozen=True)
class Performance:
    """A single performance of a play, referenced by catalog key."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Invoice:
    """Domain representation of an Invoice."""

    customer: str
    performances: tuple[Performance, ...] = ()


def build_catalog(plays: Mapping[str, Play]) -> Mapping[str, Play]:
    """Return a read-only view of play ID -> Play."""
    return MappingProxyType(dict(plays))
