"""Serializers for parsing invoice payloads and presenting statements.

Input serializers turn untrusted, JSON-shaped data into domain models; this is
where raw genre tags are checked. StatementSerializer presents a computed
Statement with amounts in dollars.
"""

from collections.abc import Mapping
from typing import Any

from rest_framework import serializers

from theater.domain import Genre, Invoice, Performance, Play, UnknownPlayTypeError


class PlaySerializer(serializers.Serializer):
    """Serializer for Play domain model."""

    name = serializers.CharField(max_length=255)
    type = serializers.CharField()

    def validate_type(self, value: str) -> Genre:
        try:
            return Genre.parse(value)
        except UnknownPlayTypeError as exc:
            raise serializers.ValidationError(exc.message, code="unknown_play_type")

    def create(self, validated_data: dict[str, Any]) -> Play:
        return Play(**validated_data)


class PerformanceSerializer(serializers.Serializer):
    """Serializer for Performance domain model."""

    playID = serializers.CharField(source="play_id", max_length=100)
    audience = serializers.IntegerField()

    def create(self, validated_data: dict[str, Any]) -> Performance:
        return Performance(**validated_data)


class InvoiceSerializer(serializers.Serializer):
    """Serializer for Invoice domain model."""

    customer = serializers.CharField()
    performances = PerformanceSerializer(many=True, allow_empty=True)

    def create(self, validated_data: dict[str, Any]) -> Invoice:
        return Invoice(
            customer=validated_data["customer"],
            performances=tuple(
                Performance(**item) for item in validated_data["performances"]
            ),
        )


class StatementLineSerializer(serializers.Serializer):
    """Serializer for StatementLine domain model."""

    play = serializers.CharField(source="play.name")
    audience = serializers.IntegerField()
    amount = serializers.DecimalField(
        max_digits=14, decimal_places=2, source="amount.to_major"
    )
    volume_credits = serializers.IntegerField()


class StatementSerializer(serializers.Serializer):
    """Serializer for a computed Statement."""

    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.DecimalField(
        max_digits=14, decimal_places=2, source="total_amount.to_major"
    )
    volume_credits = serializers.IntegerField(source="total_volume_credits")


def parse_play_catalog(data: Any) -> dict[str, Play]:
    """Parse a mapping of play ID to play payload.

    Raises:
        ValidationError: Errors keyed by play ID.
    """
    if not isinstance(data, Mapping):
        raise serializers.ValidationError(
            "Expected a mapping of play IDs to plays.", code="invalid"
        )
    plays: dict[str, Play] = {}
    errors: dict[str, Any] = {}
    for play_id, payload in data.items():
        serializer = PlaySerializer(data=payload)
        if serializer.is_valid():
            plays[play_id] = serializer.save()
        else:
            errors[play_id] = serializer.errors
    if errors:
        raise serializers.ValidationError(errors)
    return plays


def parse_invoice(data: Any) -> Invoice:
    """Parse an invoice payload.

    Raises:
        ValidationError: If the payload is malformed.
    """
    serializer = InvoiceSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.save()
