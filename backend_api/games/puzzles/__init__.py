"""
Puzzle engines: definitions, play views, scoring and leaderboards.

Exports:
- RankOrderPuzzle / SlidingPuzzle definition values and submission types
- project for building answer-free play views
- evaluate for scoring ordering attempts
- submit_score for accepting sliding-puzzle attempts
- rank / rank_by_score for leaderboards
- EngineRegistry and get_engine for resolving engines by puzzle type

These modules are framework-agnostic and perform no I/O, so views or
services can call them without importing request objects or models.
"""

from .definitions import (
    MIN_GRID_SIZE,
    AttemptResult,
    LeaderboardEntry,
    PlayItem,
    PlayView,
    RankOrderItem,
    RankOrderPuzzle,
    RankOrderSubmission,
    SlidingAttempt,
    SlidingPuzzle,
)
from .engines import RankOrderEngine, SlidingPuzzleEngine
from .leaderboard import DEFAULT_LIMIT, normalize_limit, rank, rank_by_score
from .projector import project
from .registry import EngineRegistry, get_engine
from .scoring import compute_time_bonus, evaluate, max_score_for
from .sliding import submit_score

__all__ = [
    "MIN_GRID_SIZE",
    "AttemptResult",
    "LeaderboardEntry",
    "PlayItem",
    "PlayView",
    "RankOrderItem",
    "RankOrderPuzzle",
    "RankOrderSubmission",
    "SlidingAttempt",
    "SlidingPuzzle",
    "RankOrderEngine",
    "SlidingPuzzleEngine",
    "DEFAULT_LIMIT",
    "normalize_limit",
    "rank",
    "rank_by_score",
    "project",
    "EngineRegistry",
    "get_engine",
    "compute_time_bonus",
    "evaluate",
    "max_score_for",
    "submit_score",
]
