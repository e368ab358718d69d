from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Protocol

from .definitions import (
    AttemptResult,
    LeaderboardEntry,
    PlayView,
    RankOrderPuzzle,
    RankOrderSubmission,
    SlidingAttempt,
)
from .leaderboard import DEFAULT_LIMIT, rank, rank_by_score
from .projector import project
from .scoring import evaluate
from .sliding import submit_score


class Engine(Protocol):
    """Protocol for puzzle engines."""

    puzzle_type: str

    # PUBLIC_INTERFACE
    def leaderboard(self, puzzle_id: Any, attempts: Iterable[Any], limit: Any = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
        """Rank stored attempts for one puzzle, best first."""


@dataclass
class RankOrderEngine:
    """Item-ordering puzzle engine.

    The player receives a shuffled view without the answer, submits item ids
    in their chosen order and is scored per matching position.
    """

    puzzle_type: str = "rank_order"

    # PUBLIC_INTERFACE
    def play_view(self, definition: RankOrderPuzzle, rng=None) -> PlayView:
        return project(definition, rng=rng)

    # PUBLIC_INTERFACE
    def evaluate(self, definition: RankOrderPuzzle, submission: RankOrderSubmission) -> AttemptResult:
        return evaluate(definition, submission)

    # PUBLIC_INTERFACE
    def leaderboard(self, puzzle_id: Any, attempts: Iterable[Any], limit: Any = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
        return rank_by_score(puzzle_id, attempts, limit)


@dataclass
class SlidingPuzzleEngine:
    """Sliding-tile puzzle engine.

    Completion and move count are reported by the client and not replayed
    server side, so the leaderboard trusts whatever was submitted.
    """

    puzzle_type: str = "sliding_puzzle"

    # PUBLIC_INTERFACE
    def submit(self, puzzle_id: Any, player_name: str, moves: int, time_spent_secs: int, completed: bool = True) -> SlidingAttempt:
        return submit_score(puzzle_id, player_name, moves, time_spent_secs, completed)

    # PUBLIC_INTERFACE
    def leaderboard(self, puzzle_id: Any, attempts: Iterable[Any], limit: Any = DEFAULT_LIMIT) -> List[LeaderboardEntry]:
        return rank(puzzle_id, attempts, limit)
