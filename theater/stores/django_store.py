"""Django ORM implementation of the PlayCatalog."""

from theater import models
from theater.domain import Genre, Play
from theater.stores.interfaces import PlayCatalog


class DjangoPlayCatalog(PlayCatalog):
    """Database-backed play catalog using Django ORM."""

    def get_play(self, play_id: str) -> Play | None:
        record = models.Play.objects.filter(play_id=play_id).first()
        if record is None:
            return None
        return Play(name=record.name, type=Genre.parse(record.type))
