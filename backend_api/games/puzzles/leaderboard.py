from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable

from .definitions import LeaderboardEntry

DEFAULT_LIMIT = 10


# Duck-typed rows so Django model instances and engine dataclasses both rank.
@runtime_checkable
class _SlidingAttemptLike(Protocol):
    """Minimal interface required from a sliding-puzzle attempt row."""
    puzzle_id: Any
    player_name: str
    moves: int
    time_spent_secs: int
    completed: bool


@runtime_checkable
class _ScoredAttemptLike(Protocol):
    """Minimal interface required from an ordering-puzzle attempt row."""
    puzzle_id: Any
    player_name: str
    score: int
    time_taken_secs: Optional[int]


# PUBLIC_INTERFACE
def normalize_limit(value: Any, default: int = DEFAULT_LIMIT) -> int:
    """Coerce a requested leaderboard size to a positive integer.

    Strings are parsed; None, booleans, non-numeric or non-positive values
    fall back to default.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        limit = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return limit if limit > 0 else default


def _same_puzzle(row: Any, puzzle_id: Any) -> bool:
    return str(row.puzzle_id) == str(puzzle_id)


# PUBLIC_INTERFACE
def rank(puzzle_id: Any, attempts: Iterable[_SlidingAttemptLike], limit: Any = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
    """Rank completed sliding-puzzle attempts for one puzzle.

    Order: fewer moves first, then less time spent. Rows equal on both keys
    keep their input order (sorted() is stable). At most `limit` entries are
    returned; an invalid limit falls back to DEFAULT_LIMIT.
    """
    size = normalize_limit(limit)
    eligible = [a for a in attempts if a.completed and _same_puzzle(a, puzzle_id)]
    ordered = sorted(eligible, key=lambda a: (a.moves, a.time_spent_secs))
    return [
        LeaderboardEntry(
            position=idx,
            player_name=a.player_name,
            moves=a.moves,
            time_spent_secs=a.time_spent_secs,
            completed=True,
        )
        for idx, a in enumerate(ordered[:size], start=1)
    ]


# PUBLIC_INTERFACE
def rank_by_score(puzzle_id: Any, attempts: Iterable[_ScoredAttemptLike], limit: Any = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
    """Rank ordering-puzzle attempts for one puzzle.

    Order: higher score first, then less time taken; attempts without a
    recorded time sort after timed ones with the same score.
    """
    size = normalize_limit(limit)
    eligible = [a for a in attempts if _same_puzzle(a, puzzle_id)]

    def _key(a):
        taken = a.time_taken_secs if a.time_taken_secs is not None else math.inf
        return (-a.score, taken)

    ordered = sorted(eligible, key=_key)
    return [
        LeaderboardEntry(
            position=idx,
            player_name=a.player_name,
            score=a.score,
            time_spent_secs=a.time_taken_secs,
            completed=bool(getattr(a, "is_correct", True)),
        )
        for idx, a in enumerate(ordered[:size], start=1)
    ]
