from theater.domain.errors import DomainError, PlayNotFoundError, UnknownPlayTypeError
from theater.domain.models import Invoice, Performance, Play, Statement, StatementLine
from theater.domain.pricing import PricingRules, amount_for, volume_credits_for
from theater.domain.value_objects import Genre, Money

__all__ = [
    "Invoice",
    "Performance",
    "Play",
    "Statement",
    "StatementLine",
    "Genre",
    "Money",
    "PricingRules",
    "amount_for",
    "volume_credits_for",
    "DomainError",
    "PlayNotFoundError",
    "UnknownPlayTypeError",
]
