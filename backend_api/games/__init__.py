"""
Games app initializer.

Re-exports the puzzle engine entry points so callers can import from games
directly, e.g.:

    from games import get_engine, evaluate, rank
"""

# PUBLIC_INTERFACE
from .puzzles import (
    RankOrderEngine,
    SlidingPuzzleEngine,
    EngineRegistry,
    get_engine,
    project,
    evaluate,
    rank,
    rank_by_score,
)

__all__ = [
    "RankOrderEngine",
    "SlidingPuzzleEngine",
    "EngineRegistry",
    "get_engine",
    "project",
    "evaluate",
    "rank",
    "rank_by_score",
]
