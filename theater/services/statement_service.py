"""Statement service - pricing orchestration and text rendering.

Services:
- Depend only on interfaces (stores)
- Resolve every performance before producing any output
- Raise domain errors, never partial statements
"""

from collections.abc import Mapping

import structlog

from theater.domain import (
    Invoice,
    Money,
    Play,
    PlayNotFoundError,
    PricingRules,
    Statement,
    StatementLine,
)
from theater.domain.pricing import DEFAULT_RULES
from theater.services.formatting import CurrencyFormatter, usd
from theater.stores import InMemoryPlayCatalog, PlayCatalog

logger = structlog.get_logger(__name__)


class StatementService:
    """Service for building and rendering invoice statements."""

    def __init__(
        self,
        catalog: PlayCatalog,
        rules: PricingRules | None = None,
        formatter: CurrencyFormatter = usd,
    ) -> None:
        self._catalog = catalog
        self._rules = rules or DEFAULT_RULES
        self._formatter = formatter

    def build_statement(self, invoice: Invoice) -> Statement:
        """Price every performance of the invoice.

        Raises:
            PlayNotFoundError: If a performance's play is not in the catalog.
            UnknownPlayTypeError: If a play's genre is not supported.
        """
        lines = []
        for performance in invoice.performances:
            play = self._catalog.get_play(performance.play_id)
            if play is None:
                raise PlayNotFoundError(performance.play_id)
            amount = self._rules.amount_for(play.type, performance.audience)
            credits = self._rules.volume_credits_for(play.type, performance.audience)
            logger.debug(
                "statement.performance_priced",
                play_id=performance.play_id,
                audience=performance.audience,
                amount_cents=amount,
                volume_credits=credits,
            )
            lines.append(
                StatementLine(
                    play=play,
                    audience=performance.audience,
                    amount=Money(cents=amount),
                    volume_credits=credits,
                )
            )
        return Statement(customer=invoice.customer, lines=tuple(lines))

    def render(self, invoice: Invoice) -> str:
        """Return the text statement for an invoice."""
        statement = self.build_statement(invoice)
        text = render_text(statement, self._formatter)
        logger.info(
            "statement.rendered",
            customer=statement.customer,
            performances=len(statement.lines),
            total_cents=statement.total_amount.cents,
            volume_credits=statement.total_volume_credits,
        )
        return text


def render_text(statement: Statement, formatter: CurrencyFormatter = usd) -> str:
    result = [f"Statement for {statement.customer}"]
    for line in statement.lines:
        result.append(
            f"  {line.play.name}: {formatter(line.amount.to_major())} ({line.audience} seats)"
        )
    result.append(f"Amount owed is {formatter(statement.total_amount.to_major())}")
    result.append(f"You earned {statement.total_volume_credits} credits")
    return "".join(f"{item}\n" for item in result)


def render_statement(
    invoice: Invoice,
    plays: Mapping[str, Play] | PlayCatalog,
    rules: PricingRules | None = None,
    formatter: CurrencyFormatter = usd,
) -> str:
    """Render an invoice against a play mapping or catalog."""
    catalog = plays if isinstance(plays, PlayCatalog) else InMemoryPlayCatalog(plays)
    return StatementService(catalog, rules=rules, formatter=formatter).render(invoice)
