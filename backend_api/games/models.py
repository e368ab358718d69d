from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from games.puzzles import MIN_GRID_SIZE, RankOrderPuzzle
from games.puzzles import RankOrderItem as RankOrderItemValue
from games.puzzles import SlidingPuzzle as SlidingPuzzleValue


# PUBLIC_INTERFACE
class TimeStampedModel(models.Model):
    """Abstract base model providing created/updated timestamps.

    Notes:
        Keep this abstract model free of any logic that would access the Django
        app registry or execute queries at module import time.
    """
    created_at = models.DateTimeField(auto_now_add=True, help_text="Time when the record was created.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Time when the record was last updated.")

    class Meta:
        abstract = True


# PUBLIC_INTERFACE
class RankOrderGame(TimeStampedModel):
    """An item-ordering puzzle.

    Fields:
    - title / description: display text
    - time_limit_secs: optional time limit; enables the time bonus
    - show_images: whether the client should render item images
    - creator_id: opaque id of whoever created the puzzle, passed through untouched
    """
    title = models.CharField(max_length=100)
    description = models.TextField(max_length=500, blank=True, default="")
    time_limit_secs = models.PositiveIntegerField(null=True, blank=True, help_text="Optional time limit in seconds.")
    show_images = models.BooleanField(default=False)
    creator_id = models.CharField(max_length=64, null=True, blank=True, help_text="Opaque creator identifier.")

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Rank Order Game"
        verbose_name_plural = "Rank Order Games"

    def to_definition(self) -> RankOrderPuzzle:
        """Build the immutable engine definition from this row and its items."""
        items = tuple(
            RankOrderItemValue(
                id=item.item_key,
                content=item.content,
                correct_position=item.correct_position,
                image_url=item.image_url or None,
            )
            for item in self.items.all()
        )
        return RankOrderPuzzle(
            id=str(self.pk),
            title=self.title,
            description=self.description,
            items=items,
            time_limit_secs=self.time_limit_secs,
            show_images=self.show_images,
        )

    def __str__(self) -> str:  # pragma: no cover
        return self.title


# PUBLIC_INTERFACE
class RankOrderItem(models.Model):
    """One item of a RankOrderGame.

    item_key is the client-facing id, unique within its game; correct_position
    is 1-based and unique within its game.
    """
    game = models.ForeignKey(RankOrderGame, on_delete=models.CASCADE, related_name="items")
    item_key = models.CharField(max_length=64)
    content = models.CharField(max_length=255)
    image_url = models.URLField(blank=True, default="")
    correct_position = models.PositiveSmallIntegerField()

    class Meta:
        ordering = ["correct_position"]
        unique_together = (("game", "item_key"), ("game", "correct_position"))
        verbose_name = "Rank Order Item"
        verbose_name_plural = "Rank Order Items"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.correct_position}. {self.content}"


# PUBLIC_INTERFACE
class RankOrderAttempt(TimeStampedModel):
    """A scored ordering attempt, kept for the leaderboard."""
    puzzle = models.ForeignKey(RankOrderGame, on_delete=models.CASCADE, related_name="attempts")
    player_name = models.CharField(max_length=64, blank=True, default="")
    score = models.PositiveIntegerField()
    max_score = models.PositiveIntegerField()
    correct_count = models.PositiveSmallIntegerField()
    is_correct = models.BooleanField(default=False)
    time_taken_secs = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["created_at", "id"]
        verbose_name = "Rank Order Attempt"
        verbose_name_plural = "Rank Order Attempts"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.player_name or 'anonymous'}: {self.score}/{self.max_score}"


# PUBLIC_INTERFACE
class SlidingPuzzle(TimeStampedModel):
    """A sliding-tile puzzle.

    Fields:
    - grid_size: tiles per side (>= 2)
    - difficulty / category: catalogue metadata
    - image_url: optional picture split into tiles by the client
    - is_active: soft-delete flag; inactive puzzles are hidden from listings
    """
    DIFFICULTY_CHOICES = (
        ("easy", "Easy"),
        ("medium", "Medium"),
        ("hard", "Hard"),
    )

    title = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    grid_size = models.PositiveSmallIntegerField(
        default=3,
        validators=[MinValueValidator(MIN_GRID_SIZE)],
        help_text="Tiles per side.",
    )
    difficulty = models.CharField(max_length=16, choices=DIFFICULTY_CHOICES, default="medium")
    category = models.CharField(max_length=64, blank=True, default="")
    image_url = models.URLField(blank=True, default="")
    is_active = models.BooleanField(default=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Sliding Puzzle"
        verbose_name_plural = "Sliding Puzzles"

    def to_definition(self) -> SlidingPuzzleValue:
        return SlidingPuzzleValue(
            id=str(self.pk),
            title=self.title,
            grid_size=self.grid_size,
            description=self.description,
            difficulty=self.difficulty,
            category=self.category,
            image_url=self.image_url or None,
            is_active=self.is_active,
        )

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.title} ({self.grid_size}x{self.grid_size})"


# PUBLIC_INTERFACE
class SlidingPuzzleScore(TimeStampedModel):
    """A self-reported sliding-puzzle attempt."""
    puzzle = models.ForeignKey(SlidingPuzzle, on_delete=models.CASCADE, related_name="scores")
    player_name = models.CharField(max_length=50)
    moves = models.PositiveIntegerField()
    time_spent_secs = models.PositiveIntegerField()
    completed = models.BooleanField(default=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [models.Index(fields=["puzzle", "completed"], name="games_sliding_completed_idx")]
        verbose_name = "Sliding Puzzle Score"
        verbose_name_plural = "Sliding Puzzle Scores"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.player_name}: {self.moves} moves in {self.time_spent_secs}s"
