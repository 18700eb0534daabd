from django.contrib import admin

from theater.models import Play


@admin.register(Play)
class PlayAdmin(admin.ModelAdmin):
    list_display = ["play_id", "name", "type", "created_at"]
    list_filter = ["type"]
    search_fields = ["play_id", "name"]
