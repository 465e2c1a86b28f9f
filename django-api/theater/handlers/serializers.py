"""Serializers for invoice payloads and statement responses.

Input field names follow the invoices.json / plays.json fixture shapes
(``playID``, ``type``).
"""

from collections.abc import Mapping

from rest_framework import serializers

from theater.domain import Invoice, Performance, Play, build_catalog
from theater.domain.formatting import usd
from theater.domain.statement import render_plain_text


class PlaySerializer(serializers.Serializer):
    """Serializer for a catalog entry."""

    name = serializers.CharField(trim_whitespace=False)
    type = serializers.CharField(trim_whitespace=False)


class PerformanceSerializer(serializers.Serializer):
    """Serializer for an invoiced performance."""

    playID = serializers.CharField(trim_whitespace=False)
    audience = serializers.IntegerField(min_value=0)


class InvoiceSerializer(serializers.Serializer):
    """Serializer for an invoice."""

    customer = serializers.CharField(trim_whitespace=False)
    performances = PerformanceSerializer(many=True)


class StatementRequestSerializer(serializers.Serializer):
    """Serializer for an ad-hoc statement request: invoice plus catalog."""

    invoice = InvoiceSerializer()
    plays = serializers.DictField(child=PlaySerializer())

    def to_domain(self) -> tuple[Invoice, Mapping[str, Play]]:
        data = self.validated_data
        invoice = Invoice(
            customer=data["invoice"]["customer"],
            performances=tuple(
                Performance(play_id=p["playID"], audience=p["audience"])
                for p in data["invoice"]["performances"]
            ),
        )
        plays = build_catalog(
            {
                play_id: Play(name=play["name"], genre=play["type"])
                for play_id, play in data["plays"].items()
            }
        )
        return invoice, plays


class StatementLineSerializer(serializers.Serializer):
    """Serializer for StatementLine domain model."""

    play_name = serializers.CharField()
    amount = serializers.IntegerField()
    formatted_amount = serializers.SerializerMethodField()
    audience = serializers.IntegerField()
    volume_credits = serializers.IntegerField()

    def get_formatted_amount(self, obj) -> str:
        return usd(obj.amount)


class StatementSerializer(serializers.Serializer):
    """Serializer for Statement domain model."""

    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.IntegerField()
    formatted_total_amount = serializers.SerializerMethodField()
    total_volume_credits = serializers.IntegerField()
    text = serializers.SerializerMethodField()

    def get_formatted_total_amount(self, obj) -> str:
        return usd(obj.total_amount)

    def get_text(self, obj) -> str:
        return render_plain_text(obj)
