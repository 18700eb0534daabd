"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self

from theater.domain.errors import UnknownPlayTypeError

CENTS_PER_DOLLAR = 100


class Genre(str, Enum):
    """Genre tag of a play; selects the pricing formula."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Return the genre for a raw tag.

        Raises:
            UnknownPlayTypeError: If the tag is not a supported genre.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(str(value)) from None


@dataclass(frozen=True)
class Money:
    """Monetary amount held as integer cents."""

    cents: int

    @classmethod
    def zero(cls) -> Self:
        return cls(cents=0)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def to_major(self) -> Decimal:
        """Amount in dollars, exact."""
        return Decimal(self.cents) / CENTS_PER_DOLLAR
