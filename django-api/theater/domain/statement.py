"""Statement computation and plain-text rendering.

A statement is computed in full before any text is produced, so a
pricing or lookup failure never leaves a partial report behind.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from theater.domain.errors import UnknownPlayError
from theater.domain.formatting import usd
from theater.domain.models import Invoice, Performance, Play
from theater.domain.pricing import amount_for, volume_credits_for


@dataclass(frozen=True)
class StatementLine:
    """Computed charge for one performance."""

    play_name: str
    amount: int
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class Statement:
    """Computed statement for an invoice, amounts in cents."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    total_volume_credits: int


def _play_for(performance: Performance, plays: Mapping[str, Play]) -> Play:
    try:
        return plays[performance.play_id]
    except KeyError:
        raise UnknownPlayError(performance.play_id) from None


def build_statement(invoice: Invoice, plays: Mapping[str, Play]) -> Statement:
    """Compute per-performance charges and totals for an invoice.

    Raises:
        UnknownPlayError: If a performance references a play not in ``plays``.
        UnknownGenreError: If a referenced play has an unpriced genre.
    """
    lines = []
    for performance in invoice.performances:
        play = _play_for(performance, plays)
        lines.append(
            StatementLine(
                play_name=play.name,
                amount=amount_for(performance, play),
                audience=performance.audience,
                volume_credits=volume_credits_for(performance, play),
            )
        )
    return Statement(
        customer=invoice.customer,
        lines=tuple(lines),
        total_amount=sum(line.amount for line in lines),
        total_volume_credits=sum(line.volume_credits for line in lines),
    )


def render_plain_text(statement: Statement) -> str:
    result = f"Statement for {statement.customer}\n"
    for line in statement.lines:
        result += f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)\n"
    result += f"Amount owed is {usd(statement.total_amount)}\n"
    result += f"You earned {statement.total_volume_credits} credits\n"
    return result


def statement(invoice: Invoice, plays: Mapping[str, Play]) -> str:
    """Return the text statement for ``invoice`` priced against ``plays``."""
    return render_plain_text(build_statement(invoice, plays))
