"""Pricing and volume-credit rules for performances.

Amounts are integer cents. Both operations depend only on the play's genre
and the audience size of the performance.
"""

from dataclasses import dataclass

from theater.domain.errors import UnknownPlayTypeError
from theater.domain.value_objects import CENTS_PER_DOLLAR, Genre

TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5

__all__ = [
    "CENTS_PER_DOLLAR",
    "PricingRules",
    "DEFAULT_RULES",
    "amount_for",
    "volume_credits_for",
]


@dataclass(frozen=True)
class PricingRules:
    """Tiered pricing parameters per genre."""

    tragedy_base_amount: int = TRAGEDY_BASE_AMOUNT
    tragedy_audience_threshold: int = TRAGEDY_AUDIENCE_THRESHOLD
    tragedy_over_base_capacity_per_person: int = TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON
    comedy_base_amount: int = COMEDY_BASE_AMOUNT
    comedy_audience_threshold: int = COMEDY_AUDIENCE_THRESHOLD
    comedy_over_base_capacity_amount: int = COMEDY_OVER_BASE_CAPACITY_AMOUNT
    comedy_over_base_capacity_per_person: int = COMEDY_OVER_BASE_CAPACITY_PER_PERSON
    comedy_amount_per_audience: int = COMEDY_AMOUNT_PER_AUDIENCE
    base_volume_credit_threshold: int = BASE_VOLUME_CREDIT_THRESHOLD
    comedy_extra_volume_factor: int = COMEDY_EXTRA_VOLUME_FACTOR

    def __post_init__(self) -> None:
        if self.comedy_extra_volume_factor <= 0:
            raise ValueError("Comedy extra volume factor must be positive")

    def amount_for(self, play_type: Genre | str, audience: int) -> int:
        """Return the amount owed for one performance, in cents.

        Raises:
            UnknownPlayTypeError: If play_type is not a supported genre.
        """
        match Genre.parse(play_type):
            case Genre.TRAGEDY:
                result = self.tragedy_base_amount
                if audience > self.tragedy_audience_threshold:
                    result += self.tragedy_over_base_capacity_per_person * (
                        audience - self.tragedy_audience_threshold
                    )
            case Genre.COMEDY:
                result = self.comedy_base_amount
                if audience > self.comedy_audience_threshold:
                    result += self.comedy_over_base_capacity_amount + (
                        self.comedy_over_base_capacity_per_person
                        * (audience - self.comedy_audience_threshold)
                    )
                result += self.comedy_amount_per_audience * audience
            case _:
                raise UnknownPlayTypeError(str(play_type))
        return result

    def volume_credits_for(self, play_type: Genre | str, audience: int) -> int:
        """Return the loyalty credits earned by one performance.

        The genre is not validated here; an unknown tag earns base credits.
        """
        result = max(audience - self.base_volume_credit_threshold, 0)
        # comedy bonus, fractions dropped
        if play_type == Genre.COMEDY:
            result += audience // self.comedy_extra_volume_factor
        return result


DEFAULT_RULES = PricingRules()


def amount_for(play_type: Genre | str, audience: int) -> int:
    return DEFAULT_RULES.amount_for(play_type, audience)


def volume_credits_for(play_type: Genre | str, audience: int) -> int:
    return DEFAULT_RULES.volume_credits_for(play_type, audience)
