from __future__ import annotations

from typing import Dict, List, Type

from .engines import Engine, RankOrderEngine, SlidingPuzzleEngine


# PUBLIC_INTERFACE
class EngineRegistry:
    """Registry mapping puzzle type identifiers to engine classes."""

    _registry: Dict[str, Type[Engine]] = {
        "rank_order": RankOrderEngine,
        "sliding_puzzle": SlidingPuzzleEngine,
    }

    @staticmethod
    def _key(puzzle_type: str) -> str:
        return (puzzle_type or "").strip().lower().replace("-", "_")

    @classmethod
    def get(cls, puzzle_type: str) -> Type[Engine]:
        """Return an engine class for a given puzzle type, or raise KeyError."""
        key = cls._key(puzzle_type)
        if key not in cls._registry:
            raise KeyError(f"Unknown puzzle type: {puzzle_type!r}")
        return cls._registry[key]

    @classmethod
    def register(cls, puzzle_type: str, engine_cls) -> None:
        """Register or override an engine class for a given puzzle type."""
        key = cls._key(puzzle_type)
        if not key:
            raise ValueError("puzzle_type must be a non-empty string")
        cls._registry[key] = engine_cls

    @classmethod
    def types(cls) -> List[str]:
        return sorted(cls._registry)


# PUBLIC_INTERFACE
def get_engine(puzzle_type: str) -> Engine:
    """Instantiate the engine registered for puzzle_type.

    Example:
        engine = get_engine("rank_order")
        result = engine.evaluate(definition, submission)
    """
    return EngineRegistry.get(puzzle_type)()
