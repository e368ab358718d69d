from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple

MIN_GRID_SIZE = 2


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class RankOrderItem:
    """A single item of an ordering puzzle.

    correct_position is 1-based; across a puzzle the positions form a
    contiguous permutation of 1..N.
    """

    id: str
    content: str
    correct_position: int
    image_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class RankOrderPuzzle:
    """Canonical definition of an ordering puzzle.

    Fields:
    - id: opaque identifier assigned at creation
    - title / description: display text
    - items: tuple of RankOrderItem (stored order carries no meaning)
    - time_limit_secs: optional positive limit; no time bonus without it
    - show_images: display flag only, never used for scoring
    """

    id: str
    title: str
    items: Tuple[RankOrderItem, ...] = field(default_factory=tuple)
    description: str = ""
    time_limit_secs: Optional[int] = None
    show_images: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence but always store a tuple
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def canonical_order(self) -> List[RankOrderItem]:
        """Items sorted by correct_position (the ground truth order)."""
        return sorted(self.items, key=lambda item: item.correct_position)

    def item_ids(self) -> List[str]:
        return [item.id for item in self.canonical_order()]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RankOrderPuzzle":
        time_limit = data.get("time_limit_secs")
        items = tuple(
            RankOrderItem(
                id=str(raw["id"]),
                content=raw.get("content", ""),
                correct_position=int(raw["correct_position"]),
                image_url=raw.get("image_url") or None,
            )
            for raw in data.get("items", [])
        )
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title", ""),
            description=data.get("description") or "",
            items=items,
            time_limit_secs=int(time_limit) if time_limit not in (None, "") else None,
            show_images=bool(data.get("show_images", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "items": [item.to_dict() for item in self.items],
            "time_limit_secs": self.time_limit_secs,
            "show_images": self.show_images,
        }


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class SlidingPuzzle:
    """Canonical definition of a sliding-tile puzzle."""

    id: str
    title: str
    grid_size: int
    description: str = ""
    difficulty: str = "medium"
    category: str = ""
    image_url: Optional[str] = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE} for a sliding puzzle.")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlidingPuzzle":
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title", ""),
            grid_size=int(data["grid_size"]),
            description=data.get("description") or "",
            difficulty=data.get("difficulty") or "medium",
            category=data.get("category") or "",
            image_url=data.get("image_url") or None,
            is_active=bool(data.get("is_active", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class RankOrderSubmission:
    """A player's ordering attempt: item ids in the order they chose."""

    ordered_item_ids: Tuple[str, ...]
    time_taken_secs: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.ordered_item_ids, tuple):
            object.__setattr__(self, "ordered_item_ids", tuple(self.ordered_item_ids))


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class PlayItem:
    """Player-facing item; carries no solution data."""

    id: str
    content: str
    image_url: Optional[str] = None


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class PlayView:
    """Player-facing projection of an ordering puzzle. Never persisted."""

    puzzle_id: str
    title: str
    description: str
    items: Tuple[PlayItem, ...]
    time_limit_secs: Optional[int] = None
    show_images: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "puzzle_id": self.puzzle_id,
            "title": self.title,
            "description": self.description,
            "items": [asdict(item) for item in self.items],
            "time_limit_secs": self.time_limit_secs,
            "show_images": self.show_images,
        }


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class AttemptResult:
    """Outcome of scoring one ordering attempt.

    score = base_score + time_bonus; max_score is the best achievable
    score for the puzzle, independent of this attempt.
    """

    score: int
    max_score: int
    base_score: int
    time_bonus: int
    correct_order: Tuple[RankOrderItem, ...]
    user_order: Tuple[str, ...]
    is_correct: bool
    correct_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "base_score": self.base_score,
            "time_bonus": self.time_bonus,
            "correct_order": [item.to_dict() for item in self.correct_order],
            "user_order": list(self.user_order),
            "is_correct": self.is_correct,
            "correct_count": self.correct_count,
        }


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class SlidingAttempt:
    """Raw attempt row for a sliding puzzle; completion is self-reported."""

    puzzle_id: str
    player_name: str
    moves: int
    time_spent_secs: int
    completed: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class LeaderboardEntry:
    """Read-only leaderboard row; position is 1-based and computed per read."""

    position: int
    player_name: str
    time_spent_secs: Optional[int]
    completed: bool
    moves: Optional[int] = None
    score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

