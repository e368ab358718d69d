from __future__ import annotations

from .definitions import SlidingAttempt


# PUBLIC_INTERFACE
def submit_score(
    puzzle_id,
    player_name: str,
    moves: int,
    time_spent_secs: int,
    completed: bool = True,
) -> SlidingAttempt:
    """Accept a sliding-puzzle attempt as reported by the client.

    No answer checking happens here: the move count and the completed flag
    are trusted as sent. Ranking is left to leaderboard.rank().

    Raises:
        ValueError: if puzzle_id is None.
    """
    if puzzle_id is None:
        raise ValueError("A puzzle id is required to record a sliding attempt.")
    return SlidingAttempt(
        puzzle_id=str(puzzle_id),
        player_name=player_name,
        moves=int(moves),
        time_spent_secs=int(time_spent_secs),
        completed=bool(completed),
    )
