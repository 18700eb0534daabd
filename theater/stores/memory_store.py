"""In-memory play catalog backed by a mapping."""

from collections.abc import Mapping

from theater.domain import Play
from theater.stores.interfaces import PlayCatalog


class InMemoryPlayCatalog(PlayCatalog):
    """Catalog over a caller-supplied mapping of play ID to Play."""

    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._plays = dict(plays)

    def get_play(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)
