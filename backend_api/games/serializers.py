from __future__ import annotations

from typing import Any, Dict, List

from rest_framework import serializers

from .models import SlidingPuzzle

MIN_ITEMS = 2
MAX_ITEMS = 20


# PUBLIC_INTERFACE
class RankOrderItemSerializer(serializers.Serializer):
    """One item of an ordering puzzle as sent by the puzzle author."""

    id = serializers.CharField(max_length=64)
    content = serializers.CharField(max_length=255)
    image_url = serializers.URLField(required=False, allow_blank=True, max_length=200, default="")
    correct_position = serializers.IntegerField(min_value=1)


# PUBLIC_INTERFACE
class CreateRankOrderSerializer(serializers.Serializer):
    """Request payload to create an ordering puzzle.

    Fields:
    - title (required, 3..100 chars)
    - description (optional, <= 500 chars)
    - items (required, 2..20): id, content, optional image_url, correct_position
    - time_limit_secs (optional, positive)
    - show_images (optional, default false)
    - creator_id (optional): opaque creator identifier
    """

    title = serializers.CharField(min_length=3, max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, max_length=500, default="")
    items = RankOrderItemSerializer(many=True)
    time_limit_secs = serializers.IntegerField(required=False, min_value=1, allow_null=True, default=None)
    show_images = serializers.BooleanField(required=False, default=False)
    creator_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)

    def validate_items(self, items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if len(items) < MIN_ITEMS:
            raise serializers.ValidationError(f"At least {MIN_ITEMS} items are required.")
        if len(items) > MAX_ITEMS:
            raise serializers.ValidationError(f"Maximum {MAX_ITEMS} items allowed.")

        ids = [item["id"] for item in items]
        if len(set(ids)) != len(ids):
            raise serializers.ValidationError("Each item must have a unique id.")

        positions = [item["correct_position"] for item in items]
        if len(set(positions)) != len(positions):
            raise serializers.ValidationError("Each item must have a unique order number.")
        if sorted(positions) != list(range(1, len(positions) + 1)):
            raise serializers.ValidationError("Order numbers must be sequential starting from 1.")
        return items


# PUBLIC_INTERFACE
class SubmitRankOrderSerializer(serializers.Serializer):
    """Request payload to submit an ordering attempt.

    Ids are not checked against the puzzle here; unknown or blank ids simply
    score as misplaced.
    """

    ordered_item_ids = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        allow_empty=False,
    )
    time_taken_secs = serializers.IntegerField(required=False, min_value=0, allow_null=True, default=None)
    player_name = serializers.CharField(required=False, allow_blank=True, max_length=64, default="")


# PUBLIC_INTERFACE
class PlayItemSerializer(serializers.Serializer):
    id = serializers.CharField()
    content = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)


# PUBLIC_INTERFACE
class PlayViewSerializer(serializers.Serializer):
    """Response payload for playing an ordering puzzle (no answers included)."""

    puzzle_id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    items = PlayItemSerializer(many=True)
    time_limit_secs = serializers.IntegerField(allow_null=True)
    show_images = serializers.BooleanField()


# PUBLIC_INTERFACE
class AttemptResultSerializer(serializers.Serializer):
    """Response payload after scoring an ordering attempt."""

    attempt_id = serializers.IntegerField()
    score = serializers.IntegerField()
    max_score = serializers.IntegerField()
    # Score breakdown
    base_score = serializers.IntegerField()
    time_bonus = serializers.IntegerField()
    correct_order = serializers.ListField(child=serializers.DictField())
    user_order = serializers.ListField(child=serializers.CharField())
    is_correct = serializers.BooleanField()
    correct_count = serializers.IntegerField()


# PUBLIC_INTERFACE
class SubmitScoreSerializer(serializers.Serializer):
    """Request payload to record a sliding-puzzle attempt."""

    player_name = serializers.CharField(min_length=1, max_length=50)
    moves = serializers.IntegerField(min_value=1)
    time_spent_secs = serializers.IntegerField(min_value=1)
    completed = serializers.BooleanField(required=False, default=True)


# PUBLIC_INTERFACE
class SlidingPuzzleSerializer(serializers.ModelSerializer):
    """Sliding puzzle catalogue entry."""

    class Meta:
        model = SlidingPuzzle
        fields = [
            "id",
            "title",
            "description",
            "grid_size",
            "difficulty",
            "category",
            "image_url",
            "is_active",
            "created_at",
        ]


# PUBLIC_INTERFACE
class SlidingScoreSerializer(serializers.Serializer):
    """Response payload for a recorded sliding-puzzle attempt."""

    id = serializers.IntegerField()
    puzzle_id = serializers.IntegerField()
    player_name = serializers.CharField()
    moves = serializers.IntegerField()
    time_spent_secs = serializers.IntegerField()
    completed = serializers.BooleanField()
    created_at = serializers.DateTimeField()


# PUBLIC_INTERFACE
class LeaderboardEntrySerializer(serializers.Serializer):
    """Leaderboard entry; moves is set for sliding puzzles, score for ordering puzzles."""

    position = serializers.IntegerField()
    player_name = serializers.CharField(allow_blank=True)
    moves = serializers.IntegerField(allow_null=True)
    score = serializers.IntegerField(allow_null=True)
    time_spent_secs = serializers.IntegerField(allow_null=True)
    completed = serializers.BooleanField()
