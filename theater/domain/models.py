"""Domain models for invoices and the statements computed from them.

These are pure domain objects with no API input rules.
The Django ORM model for the play catalog is in theater/models.py.
"""

from dataclasses import dataclass

from theater.domain.value_objects import Genre, Money


@dataclass(frozen=True)
class Play:
    """Catalog entry for a play."""

    name: str
    type: Genre


@dataclass(frozen=True)
class Performance:
    """One booked showing of a play."""

    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    """A customer's bill; performances are kept in rendering order."""

    customer: str
    performances: tuple[Performance, ...] = ()


@dataclass(frozen=True)
class StatementLine:
    """Priced result for a single performance."""

    play: Play
    audience: int
    amount: Money
    volume_credits: int


@dataclass(frozen=True)
class Statement:
    """Computed billing statement for an invoice. Never persisted."""

    customer: str
    lines: tuple[StatementLine, ...] = ()

    @property
    def total_amount(self) -> Money:
        return sum((line.amount for line in self.lines), Money.zero())

    @property
    def total_volume_credits(self) -> int:
        return sum(line.volume_credits for line in self.lines)
