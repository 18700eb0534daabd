from theater.services.formatting import usd
from theater.services.statement_service import StatementService, render_statement, render_text

__all__ = ["StatementService", "render_statement", "render_text", "usd"]
