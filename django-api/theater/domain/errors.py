"""Domain error codes for the theater module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_GENRE = "UNKNOWN_GENRE"
    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    INVOICE_NOT_FOUND = "INVOICE_NOT_FOUND"
    INVALID_INVOICE_ID = "INVALID_INVOICE_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownGenreError(DomainError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, genre: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_GENRE,
            message=f"unknown type: {genre}",
        )
        self.genre = genre


class UnknownPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY,
            message=f"unknown play: {play_id}",
        )
        self.play_id = play_id


class InvoiceNotFoundError(DomainError):
    """Raised when an invoice is not found."""

    def __init__(self, invoice_id: int) -> None:
        super().__init__(
            code=ErrorCode.INVOICE_NOT_FOUND,
            message="Invoice not found",
        )
        self.invoice_id = invoice_id


class InvalidInvoiceIdError(DomainError):
    """Raised when an invoice ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INVOICE_ID,
            message="Invalid invoice ID format",
        )
