"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from theater.domain.errors import UnknownGenreError


class Genre(Enum):
    """Play genres that have a pricing rule."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def lookup(cls, value: str) -> Self | None:
        """Return the genre matching ``value`` exactly, or None."""
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_string(cls, value: str) -> Self:
        genre = cls.lookup(value)
        if genre is None:
            raise UnknownGenreError(value)
        return genre


@dataclass(frozen=True)
class InvoiceId:
    """Unique identifier for a stored Invoice."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Invoice ID must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))
