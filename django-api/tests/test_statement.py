"""Unit tests for statement computation and rendering.

Run with: pytest tests/test_statement.py -v
"""

import pytest

from theater.domain import Invoice, Performance, Play, build_catalog, build_statement, statement
from theater.domain.errors import UnknownGenreError, UnknownPlayError


def single(genre: str, audience: int) -> tuple[Invoice, dict]:
    plays = build_catalog({"play": Play(name="The Play", genre=genre)})
    return Invoice(customer="BigCo", performances=(Performance("play", audience),)), plays


class TestStatement:
    """Tests for the plain-text statement."""

    def test_full_invoice(self, invoice, plays):
        """The classic three-performance invoice renders every line and total."""
        assert statement(invoice, plays) == (
            "Statement for BigCo\n"
            "  Hamlet: $650.00 (55 seats)\n"
            "  As You Like It: $580.00 (35 seats)\n"
            "  Othello: $500.00 (40 seats)\n"
            "Amount owed is $1,730.00\n"
            "You earned 47 credits\n"
        )

    def test_tragedy_at_threshold(self):
        """A 30-seat tragedy costs $400 and earns no credits."""
        assert statement(*single("tragedy", 30)) == (
            "Statement for BigCo\n"
            "  The Play: $400.00 (30 seats)\n"
            "Amount owed is $400.00\n"
            "You earned 0 credits\n"
        )

    def test_comedy_at_threshold(self):
        """A 20-seat comedy costs $360 and earns 4 credits."""
        text = statement(*single("comedy", 20))
        assert "  The Play: $360.00 (20 seats)\n" in text
        assert text.endswith("Amount owed is $360.00\nYou earned 4 credits\n")

    def test_tragedy_over_threshold(self):
        """A 35-seat tragedy costs $450 and earns 5 credits."""
        text = statement(*single("tragedy", 35))
        assert "  The Play: $450.00 (35 seats)\n" in text
        assert text.endswith("You earned 5 credits\n")

    def test_comedy_over_threshold(self):
        """A 25-seat comedy costs $500 and earns 5 credits."""
        text = statement(*single("comedy", 25))
        assert "  The Play: $500.00 (25 seats)\n" in text
        assert text.endswith("You earned 5 credits\n")

    def test_empty_invoice(self):
        """An invoice with no performances owes nothing."""
        assert statement(Invoice(customer="Acme"), build_catalog({})) == (
            "Statement for Acme\n"
            "Amount owed is $0.00\n"
            "You earned 0 credits\n"
        )

    def test_lines_follow_invoice_order(self, plays):
        """Statement lines preserve performance order."""
        invoice = Invoice(
            customer="BigCo",
            performances=(Performance("othello", 10), Performance("hamlet", 10)),
        )
        lines = statement(invoice, plays).splitlines()
        assert lines[1].startswith("  Othello:")
        assert lines[2].startswith("  Hamlet:")

    def test_unknown_genre_aborts_statement(self, plays):
        """An unpriced genre anywhere in the invoice raises UnknownGenreError."""
        catalog = build_catalog({**plays, "henry-v": Play(name="Henry V", genre="history")})
        invoice = Invoice(
            customer="BigCo",
            performances=(Performance("hamlet", 55), Performance("henry-v", 10)),
        )
        with pytest.raises(UnknownGenreError):
            statement(invoice, catalog)

    def test_unknown_play_aborts_statement(self, plays):
        """A performance of a play missing from the catalog raises UnknownPlayError."""
        invoice = Invoice(
            customer="BigCo",
            performances=(Performance("hamlet", 55), Performance("macbeth", 10)),
        )
        with pytest.raises(UnknownPlayError) as exc_info:
            statement(invoice, plays)
        assert exc_info.value.play_id == "macbeth"


class TestBuildStatement:
    """Tests for the computed statement totals."""

    def test_totals_are_exact_sums(self, invoice, plays):
        """Totals are summed from integer cents, not formatted strings."""
        result = build_statement(invoice, plays)
        assert [line.amount for line in result.lines] == [65000, 58000, 50000]
        assert result.total_amount == sum(line.amount for line in result.lines) == 173000
        assert [line.volume_credits for line in result.lines] == [25, 12, 10]
        assert result.total_volume_credits == 47

    def test_lines_carry_play_name_and_audience(self, invoice, plays):
        """Each line names its play and keeps the audience size."""
        first = build_statement(invoice, plays).lines[0]
        assert first.play_name == "Hamlet"
        assert first.audience == 55

    def test_inputs_are_not_mutated(self, invoice, plays):
        """Building a statement leaves the invoice and catalog untouched."""
        before = (invoice, dict(plays))
        build_statement(invoice, plays)
        build_statement(invoice, plays)
        assert (invoice, dict(plays)) == before
