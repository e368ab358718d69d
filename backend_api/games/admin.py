from django.contrib import admin

from .models import RankOrderAttempt, RankOrderGame, RankOrderItem, SlidingPuzzle, SlidingPuzzleScore


class RankOrderItemInline(admin.TabularInline):
    model = RankOrderItem
    extra = 0
    fields = ("correct_position", "item_key", "content", "image_url")
    ordering = ("correct_position",)


@admin.register(RankOrderGame)
class RankOrderGameAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "time_limit_secs", "show_images", "creator_id", "created_at")
    list_filter = ("show_images",)
    search_fields = ("title", "creator_id")
    inlines = [RankOrderItemInline]
    readonly_fields = ("created_at", "updated_at")


@admin.register(RankOrderAttempt)
class RankOrderAttemptAdmin(admin.ModelAdmin):
    list_display = ("puzzle", "player_name", "score", "max_score", "correct_count", "is_correct", "time_taken_secs", "created_at")
    list_filter = ("is_correct",)
    search_fields = ("player_name", "puzzle__title")
    ordering = ("puzzle", "-score")


@admin.register(SlidingPuzzle)
class SlidingPuzzleAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "grid_size", "difficulty", "category", "is_active", "created_at")
    list_filter = ("is_active", "difficulty", "grid_size")
    search_fields = ("title", "category")
    readonly_fields = ("created_at", "updated_at")


@admin.register(SlidingPuzzleScore)
class SlidingPuzzleScoreAdmin(admin.ModelAdmin):
    list_display = ("puzzle", "player_name", "moves", "time_spent_secs", "completed", "created_at")
    list_filter = ("completed",)
    search_fields = ("player_name", "puzzle__title")
    ordering = ("puzzle", "moves", "time_spent_secs")
