"""Pricing configuration read from Django settings.

Set ``THEATER_PRICING`` to a dict of ``PricingRules`` field names to override
individual parameters, e.g. ``{"tragedy_base_amount": 45000}``.
"""

from dataclasses import fields

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from theater.domain import PricingRules


def get_pricing_rules() -> PricingRules:
    overrides = getattr(settings, "THEATER_PRICING", None) or {}
    known = {field.name for field in fields(PricingRules)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ImproperlyConfigured(
            f"THEATER_PRICING has unknown keys: {', '.join(unknown)}"
        )
    for key, value in overrides.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ImproperlyConfigured(f"THEATER_PRICING[{key!r}] must be an integer")
    try:
        return PricingRules(**overrides)
    except ValueError as exc:
        raise ImproperlyConfigured(f"THEATER_PRICING is invalid: {exc}") from exc
