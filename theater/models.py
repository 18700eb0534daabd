"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.db import models

from theater.domain import Genre


class Play(models.Model):
    """Persistence model for the play catalog."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    play_id = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=255)
    type = models.CharField(
        max_length=20,
        choices=[(genre.value, genre.value.title()) for genre in Genre],
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
