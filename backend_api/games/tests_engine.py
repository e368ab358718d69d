import random

from django.test import SimpleTestCase

from games.puzzles import (
    EngineRegistry,
    RankOrderEngine,
    RankOrderItem,
    RankOrderPuzzle,
    RankOrderSubmission,
    SlidingAttempt,
    SlidingPuzzle,
    SlidingPuzzleEngine,
    compute_time_bonus,
    evaluate,
    get_engine,
    max_score_for,
    normalize_limit,
    project,
    rank,
    rank_by_score,
    submit_score,
)

STAGES = [
    "Seed Production",
    "Germination",
    "Growth",
    "Flower Production",
    "Pollination",
    "Fertilisation",
    "Seed Dispersal",
]
CANONICAL = ["1", "2", "3", "4", "5", "6", "7"]


def make_puzzle(time_limit_secs=120):
    # Stored out of order so scoring has to sort by correct_position
    items = [RankOrderItem(id=str(pos), content=text, correct_position=pos) for pos, text in enumerate(STAGES, start=1)]
    items.reverse()
    return RankOrderPuzzle(
        id="plant-cycle",
        title="Sort Life Cycle of Flowering Plant",
        description="Arrange the stages in correct order",
        items=items,
        time_limit_secs=time_limit_secs,
    )


class _ReverseShuffler:
    """Deterministic stand-in for random.shuffle."""

    def shuffle(self, items):
        items.reverse()


class PuzzleDefinitionTests(SimpleTestCase):
    def test_canonical_order_sorts_by_correct_position(self):
        puzzle = make_puzzle()
        self.assertEqual(puzzle.item_ids(), CANONICAL)
        self.assertIsInstance(puzzle.items, tuple)

    def test_from_dict_and_to_dict(self):
        puzzle = RankOrderPuzzle.from_dict({
            "id": 5,
            "title": "Tiny",
            "items": [
                {"id": "b", "content": "B", "correct_position": 2},
                {"id": "a", "content": "A", "correct_position": 1, "image_url": ""},
            ],
        })
        self.assertEqual(puzzle.id, "5")
        self.assertEqual(puzzle.item_ids(), ["a", "b"])
        self.assertIsNone(puzzle.items[1].image_url)
        self.assertIsNone(puzzle.time_limit_secs)
        self.assertEqual(puzzle.to_dict()["items"][0]["correct_position"], 2)

    def test_from_dict_coerces_time_limit(self):
        data = make_puzzle().to_dict()
        data["time_limit_secs"] = "120"
        puzzle = RankOrderPuzzle.from_dict(data)
        self.assertEqual(puzzle.time_limit_secs, 120)
        result = evaluate(puzzle, RankOrderSubmission(CANONICAL, time_taken_secs=90))
        self.assertEqual(result.time_bonus, 300)
        self.assertEqual(result.max_score, 1900)

    def test_sliding_puzzle_requires_grid_of_two(self):
        with self.assertRaises(ValueError):
            SlidingPuzzle(id="1", title="Too small", grid_size=1)
        puzzle = SlidingPuzzle.from_dict({"id": 3, "title": "Fifteen", "grid_size": "4"})
        self.assertEqual(puzzle.grid_size, 4)
        self.assertTrue(puzzle.is_active)


class ProjectorTests(SimpleTestCase):
    def test_play_view_hides_correct_position(self):
        view = project(make_puzzle())
        for item in view.to_dict()["items"]:
            self.assertNotIn("correct_position", item)
        self.assertEqual(sorted(i.id for i in view.items), CANONICAL)
        self.assertEqual(view.time_limit_secs, 120)

    def test_injected_rng_controls_order(self):
        puzzle = make_puzzle()
        view = project(puzzle, rng=_ReverseShuffler())
        # stored order is 7..1, reversing it gives 1..7
        self.assertEqual([i.id for i in view.items], CANONICAL)

    def test_seeded_random_is_a_permutation(self):
        view = project(make_puzzle(), rng=random.Random(42))
        self.assertEqual(sorted(i.id for i in view.items), CANONICAL)

    def test_definition_is_not_mutated(self):
        puzzle = make_puzzle()
        before = puzzle.to_dict()
        project(puzzle)
        project(puzzle, rng=_ReverseShuffler())
        self.assertEqual(puzzle.to_dict(), before)

    def test_empty_puzzle_gives_empty_view(self):
        view = project(RankOrderPuzzle(id="empty", title="Empty"))
        self.assertEqual(view.items, ())

    def test_missing_definition_raises(self):
        with self.assertRaises(ValueError):
            project(None)


class ScoringTests(SimpleTestCase):
    def test_fully_correct_with_time_bonus(self):
        result = evaluate(make_puzzle(), RankOrderSubmission(CANONICAL, time_taken_secs=90))
        self.assertEqual(result.correct_count, 7)
        self.assertEqual(result.base_score, 700)
        self.assertEqual(result.time_bonus, 300)
        self.assertEqual(result.score, 1000)
        self.assertEqual(result.max_score, 1900)
        self.assertTrue(result.is_correct)

    def test_swapped_pair_without_time(self):
        submission = RankOrderSubmission(["2", "1", "3", "4", "5", "6", "7"])
        result = evaluate(make_puzzle(), submission)
        self.assertEqual(result.correct_count, 5)
        self.assertEqual(result.score, 500)
        self.assertEqual(result.time_bonus, 0)
        self.assertFalse(result.is_correct)

    def test_no_time_bonus_when_incorrect(self):
        submission = RankOrderSubmission(["2", "1", "3", "4", "5", "6", "7"], time_taken_secs=10)
        result = evaluate(make_puzzle(), submission)
        self.assertEqual(result.time_bonus, 0)
        self.assertEqual(result.score, 500)

    def test_no_time_limit_means_no_bonus(self):
        result = evaluate(make_puzzle(time_limit_secs=None), RankOrderSubmission(CANONICAL, time_taken_secs=5))
        self.assertEqual(result.score, 700)
        self.assertEqual(result.max_score, 700)
        self.assertTrue(result.is_correct)

    def test_over_time_limit_earns_no_bonus(self):
        result = evaluate(make_puzzle(), RankOrderSubmission(CANONICAL, time_taken_secs=300))
        self.assertEqual(result.time_bonus, 0)
        self.assertEqual(result.score, 700)

    def test_instant_solve_reaches_max_score(self):
        result = evaluate(make_puzzle(), RankOrderSubmission(CANONICAL, time_taken_secs=0))
        self.assertEqual(result.score, result.max_score)

    def test_unknown_and_short_submissions_degrade_to_wrong(self):
        result = evaluate(make_puzzle(), RankOrderSubmission(["1", "nope", "3"]))
        self.assertEqual(result.correct_count, 2)
        self.assertFalse(result.is_correct)
        self.assertEqual(result.user_order, ("1", "nope", "3"))

        empty = evaluate(make_puzzle(), RankOrderSubmission([]))
        self.assertEqual(empty.correct_count, 0)
        self.assertEqual(empty.score, 0)

    def test_extra_trailing_ids_are_ignored(self):
        result = evaluate(make_puzzle(), RankOrderSubmission(CANONICAL + ["8"]))
        self.assertEqual(result.correct_count, 7)
        self.assertTrue(result.is_correct)

    def test_adjacent_swap_costs_at_most_two(self):
        puzzle = make_puzzle()
        for i in range(len(CANONICAL) - 1):
            order = list(CANONICAL)
            order[i], order[i + 1] = order[i + 1], order[i]
            result = evaluate(puzzle, RankOrderSubmission(order))
            self.assertGreaterEqual(result.correct_count, len(CANONICAL) - 2)

    def test_result_echoes_canonical_order(self):
        result = evaluate(make_puzzle(), RankOrderSubmission(["7"]))
        self.assertEqual([item.id for item in result.correct_order], CANONICAL)
        self.assertEqual(result.to_dict()["correct_order"][0]["content"], "Seed Production")

    def test_evaluate_is_deterministic(self):
        puzzle = make_puzzle()
        submission = RankOrderSubmission(["3", "2", "1"], time_taken_secs=40)
        self.assertEqual(evaluate(puzzle, submission), evaluate(puzzle, submission))

    def test_missing_definition_raises(self):
        with self.assertRaises(ValueError):
            evaluate(None, RankOrderSubmission(CANONICAL))

    def test_time_bonus_helpers(self):
        self.assertEqual(compute_time_bonus(120, 90), 300)
        self.assertEqual(compute_time_bonus(10, 7.5), 25)
        self.assertEqual(compute_time_bonus(None, 10), 0)
        self.assertEqual(compute_time_bonus(60, None), 0)
        self.assertEqual(max_score_for(make_puzzle()), 1900)


class SlidingTests(SimpleTestCase):
    def test_submit_score_accepts_reported_values(self):
        attempt = submit_score(12, "alice", 30, 95)
        self.assertEqual(attempt, SlidingAttempt(puzzle_id="12", player_name="alice", moves=30, time_spent_secs=95, completed=True))

    def test_submit_score_keeps_incomplete_flag(self):
        attempt = submit_score("p1", "bob", 4, 10, completed=False)
        self.assertFalse(attempt.completed)

    def test_submit_score_requires_puzzle(self):
        with self.assertRaises(ValueError):
            submit_score(None, "carol", 1, 1)


class LeaderboardTests(SimpleTestCase):
    def _attempt(self, name, moves, secs, completed=True, puzzle_id="p1"):
        return SlidingAttempt(puzzle_id=puzzle_id, player_name=name, moves=moves, time_spent_secs=secs, completed=completed)

    def test_moves_then_time(self):
        attempts = [
            self._attempt("a", 20, 60),
            self._attempt("b", 18, 80),
            self._attempt("c", 18, 50),
        ]
        ranked = rank("p1", attempts, 2)
        self.assertEqual([(e.moves, e.time_spent_secs) for e in ranked], [(18, 50), (18, 80)])
        self.assertEqual([e.position for e in ranked], [1, 2])

    def test_only_completed_attempts_for_the_puzzle(self):
        attempts = [
            self._attempt("quitter", 1, 1, completed=False),
            self._attempt("other", 2, 2, puzzle_id="p2"),
            self._attempt("finisher", 50, 200),
        ]
        ranked = rank("p1", attempts)
        self.assertEqual([e.player_name for e in ranked], ["finisher"])
        self.assertTrue(all(e.completed for e in ranked))

    def test_equal_keys_keep_input_order(self):
        attempts = [self._attempt(name, 10, 10) for name in ("first", "second", "third")]
        self.assertEqual([e.player_name for e in rank("p1", attempts)], ["first", "second", "third"])

    def test_invalid_limit_falls_back_to_default(self):
        attempts = [self._attempt(f"p{i}", i + 1, 10) for i in range(15)]
        self.assertEqual(len(rank("p1", attempts, 0)), 10)
        self.assertEqual(len(rank("p1", attempts, "abc")), 10)
        self.assertEqual(len(rank("p1", attempts, "3")), 3)

    def test_normalize_limit(self):
        self.assertEqual(normalize_limit(None), 10)
        self.assertEqual(normalize_limit(-3), 10)
        self.assertEqual(normalize_limit(True), 10)
        self.assertEqual(normalize_limit("7"), 7)
        self.assertEqual(normalize_limit("x", default=5), 5)

    def test_rank_by_score(self):
        class Row:
            def __init__(self, name, score, secs):
                self.puzzle_id = 1
                self.player_name = name
                self.score = score
                self.time_taken_secs = secs
                self.is_correct = score >= 700

        rows = [Row("slow", 1000, 90), Row("untimed", 1000, None), Row("fast", 1000, 30), Row("wrong", 500, 10)]
        ranked = rank_by_score(1, rows)
        self.assertEqual([e.player_name for e in ranked], ["fast", "slow", "untimed", "wrong"])
        self.assertFalse(ranked[-1].completed)
        self.assertIsNone(ranked[0].moves)


class RegistryTests(SimpleTestCase):
    def test_get_engine(self):
        self.assertIsInstance(get_engine("rank_order"), RankOrderEngine)
        self.assertIsInstance(get_engine("Sliding-Puzzle"), SlidingPuzzleEngine)

    def test_unknown_type(self):
        with self.assertRaises(KeyError):
            get_engine("crossword")
        with self.assertRaises(ValueError):
            EngineRegistry.register("  ", RankOrderEngine)

    def test_types(self):
        self.assertEqual(EngineRegistry.types(), ["rank_order", "sliding_puzzle"])
