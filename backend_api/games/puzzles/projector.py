from __future__ import annotations

import random
from typing import Any, List, Optional, Protocol

from .definitions import PlayItem, PlayView, RankOrderPuzzle


class _Shuffler(Protocol):
    """Anything exposing an in-place shuffle (random module, random.Random)."""

    def shuffle(self, x: List[Any]) -> None: ...


# PUBLIC_INTERFACE
def project(definition: RankOrderPuzzle, rng: Optional[_Shuffler] = None) -> PlayView:
    """Build the player-facing view of an ordering puzzle.

    correct_position is dropped from every item and the presentation order
    is shuffled on every call, so two calls may return different orders.
    The definition is left untouched.

    Parameters:
        definition: canonical puzzle definition.
        rng: optional random source used for the shuffle; defaults to the
             module-level random generator (unseeded).

    Raises:
        ValueError: if definition is None.
    """
    if definition is None:
        raise ValueError("A puzzle definition is required to build a play view.")

    items = [PlayItem(id=item.id, content=item.content, image_url=item.image_url) for item in definition.items]
    (rng or random).shuffle(items)

    return PlayView(
        puzzle_id=definition.id,
        title=definition.title,
        description=definition.description,
        items=tuple(items),
        time_limit_secs=definition.time_limit_secs,
        show_images=definition.show_images,
    )
