import logging
from typing import Any, Dict, List, Tuple

from django.db import transaction

from .models import RankOrderGame, RankOrderItem, SlidingPuzzle

logger = logging.getLogger(__name__)

DEFAULT_RANK_ORDER: Dict[str, Any] = {
    "title": "Sort Life Cycle of Flowering Plant",
    "description": "Arrange the stages in correct order",
    "time_limit_secs": 120,
    "items": [
        "Seed Production",
        "Germination",
        "Growth",
        "Flower Production",
        "Pollination",
        "Fertilisation",
        "Seed Dispersal",
    ],
}

DEFAULT_SLIDING: List[Dict[str, Any]] = [
    {"title": "Warm-up", "grid_size": 3, "difficulty": "easy", "category": "classic"},
    {"title": "Fifteen", "grid_size": 4, "difficulty": "medium", "category": "classic"},
    {"title": "Big Board", "grid_size": 5, "difficulty": "hard", "category": "classic"},
]


# PUBLIC_INTERFACE
def ensure_seed_puzzles() -> Tuple[int, int]:
    """Ensure there is at least one playable puzzle of each type.

    Returns (rank order games inserted, sliding puzzles inserted); each is 0
    when that table already had rows.
    """
    games_added = 0
    sliding_added = 0
    with transaction.atomic():
        if not RankOrderGame.objects.exists():
            seed = DEFAULT_RANK_ORDER
            game = RankOrderGame.objects.create(
                title=seed["title"],
                description=seed["description"],
                time_limit_secs=seed["time_limit_secs"],
            )
            RankOrderItem.objects.bulk_create([
                RankOrderItem(game=game, item_key=str(pos), content=content, correct_position=pos)
                for pos, content in enumerate(seed["items"], start=1)
            ])
            games_added = 1

        if not SlidingPuzzle.objects.exists():
            SlidingPuzzle.objects.bulk_create([SlidingPuzzle(**row) for row in DEFAULT_SLIDING])
            sliding_added = len(DEFAULT_SLIDING)

    logger.info("Seeded %d rank order game(s) and %d sliding puzzle(s)", games_added, sliding_added)
    return games_added, sliding_added
