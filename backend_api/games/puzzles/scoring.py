from __future__ import annotations

import logging
import math
from typing import Optional

from .definitions import AttemptResult, RankOrderPuzzle, RankOrderSubmission

logger = logging.getLogger(__name__)

POINTS_PER_ITEM = 100
TIME_BONUS_PER_SECOND = 10


# PUBLIC_INTERFACE
def compute_time_bonus(time_limit_secs: Optional[int], time_taken_secs: Optional[int]) -> int:
    """Bonus for finishing under the limit: 10 points per second remaining.

    Returns 0 when either value is missing or the limit was exceeded.
    """
    if time_limit_secs is None or time_taken_secs is None:
        return 0
    remaining = max(0, time_limit_secs - time_taken_secs)
    return int(math.floor(remaining * TIME_BONUS_PER_SECOND))


# PUBLIC_INTERFACE
def max_score_for(definition: RankOrderPuzzle) -> int:
    """Best achievable score: every item placed plus an instantaneous solve."""
    max_base = len(definition.items) * POINTS_PER_ITEM
    max_bonus = (definition.time_limit_secs or 0) * TIME_BONUS_PER_SECOND
    return max_base + max_bonus


def _count_matches(expected_ids, submitted_ids) -> int:
    # zip stops at the shorter sequence; extra or missing ids never count
    return sum(1 for want, got in zip(expected_ids, submitted_ids) if want == got)


# PUBLIC_INTERFACE
def evaluate(definition: RankOrderPuzzle, submission: RankOrderSubmission) -> AttemptResult:
    """Score an ordering attempt against its canonical definition.

    Positions are compared one by one against the items sorted by
    correct_position. Each matching position is worth 100 points. The time
    bonus is granted only to a fully correct attempt when both the puzzle
    time limit and the attempt time are known.

    Unknown or duplicated ids in the submission are not an error; they just
    fail to match at their position.

    Raises:
        ValueError: if definition or submission is None.
    """
    if definition is None:
        raise ValueError("A puzzle definition is required to score an attempt.")
    if submission is None:
        raise ValueError("A submission is required to score an attempt.")

    canonical = definition.canonical_order()
    expected_ids = [item.id for item in canonical]
    user_order = tuple(submission.ordered_item_ids)

    correct_count = _count_matches(expected_ids, user_order)
    is_correct = correct_count == len(expected_ids)

    base_score = correct_count * POINTS_PER_ITEM
    time_bonus = 0
    if is_correct:
        time_bonus = compute_time_bonus(definition.time_limit_secs, submission.time_taken_secs)

    result = AttemptResult(
        score=base_score + time_bonus,
        max_score=max_score_for(definition),
        base_score=base_score,
        time_bonus=time_bonus,
        correct_order=tuple(canonical),
        user_order=user_order,
        is_correct=is_correct,
        correct_count=correct_count,
    )
    logger.debug(
        "Scored puzzle %s: %d/%d correct, score=%d (bonus=%d)",
        definition.id, correct_count, len(expected_ids), result.score, time_bonus,
    )
    return result
