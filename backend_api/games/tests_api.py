from io import StringIO

from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.urls import reverse
from rest_framework.test import APITestCase

from games.models import RankOrderAttempt, RankOrderGame, SlidingPuzzle, SlidingPuzzleScore

STAGES = [
    "Seed Production",
    "Germination",
    "Growth",
    "Flower Production",
    "Pollination",
    "Fertilisation",
    "Seed Dispersal",
]


def rank_order_payload(**overrides):
    payload = {
        "title": "Sort Life Cycle of Flowering Plant",
        "description": "Arrange the stages in correct order",
        "items": [
            {"id": str(pos), "content": text, "correct_position": pos}
            for pos, text in enumerate(STAGES, start=1)
        ],
        "time_limit_secs": 120,
    }
    payload.update(overrides)
    return payload


class RankOrderFlowTests(APITestCase):
    def _create(self, **overrides):
        resp = self.client.post(reverse("rank-order-create"), rank_order_payload(**overrides), format="json")
        self.assertEqual(resp.status_code, 201)
        return resp.json()["id"]

    def test_create_and_play_hides_answers(self):
        game_id = self._create()
        self.assertEqual(RankOrderGame.objects.get(pk=game_id).items.count(), 7)

        resp = self.client.get(reverse("rank-order-play", kwargs={"game_id": game_id}))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["time_limit_secs"], 120)
        self.assertEqual(len(data["items"]), 7)
        for item in data["items"]:
            self.assertNotIn("correct_position", item)
        self.assertEqual(sorted(i["id"] for i in data["items"]), sorted(str(p) for p in range(1, 8)))

    def test_submit_correct_order_with_time(self):
        game_id = self._create()
        body = {"ordered_item_ids": [str(p) for p in range(1, 8)], "time_taken_secs": 90, "player_name": "alice"}
        resp = self.client.post(reverse("rank-order-submit", kwargs={"game_id": game_id}), body, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["correct_count"], 7)
        self.assertEqual(data["score"], 1000)
        self.assertEqual(data["max_score"], 1900)
        self.assertEqual(data["time_bonus"], 300)
        self.assertTrue(data["is_correct"])
        self.assertEqual([i["id"] for i in data["correct_order"]], [str(p) for p in range(1, 8)])

        attempt = RankOrderAttempt.objects.get(pk=data["attempt_id"])
        self.assertEqual(attempt.score, 1000)
        self.assertEqual(attempt.player_name, "alice")

    def test_submit_swapped_order(self):
        game_id = self._create()
        body = {"ordered_item_ids": ["2", "1", "3", "4", "5", "6", "7"]}
        data = self.client.post(reverse("rank-order-submit", kwargs={"game_id": game_id}), body, format="json").json()
        self.assertEqual(data["correct_count"], 5)
        self.assertEqual(data["score"], 500)
        self.assertFalse(data["is_correct"])

    def test_submit_with_unknown_ids_is_not_an_error(self):
        game_id = self._create()
        body = {"ordered_item_ids": ["x", "y"]}
        resp = self.client.post(reverse("rank-order-submit", kwargs={"game_id": game_id}), body, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["correct_count"], 0)

    def test_blank_id_scores_as_misplaced(self):
        items = [
            {"id": "a", "content": "A", "correct_position": 1},
            {"id": "b", "content": "B", "correct_position": 2},
        ]
        game_id = self._create(items=items)
        body = {"ordered_item_ids": ["a", ""]}
        resp = self.client.post(reverse("rank-order-submit", kwargs={"game_id": game_id}), body, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["correct_count"], 1)
        self.assertFalse(resp.json()["is_correct"])

    def test_submit_requires_ids(self):
        game_id = self._create()
        resp = self.client.post(reverse("rank-order-submit", kwargs={"game_id": game_id}), {"ordered_item_ids": []}, format="json")
        self.assertEqual(resp.status_code, 400)

    def test_leaderboard_orders_by_score_then_time(self):
        game_id = self._create()
        url = reverse("rank-order-submit", kwargs={"game_id": game_id})
        correct = [str(p) for p in range(1, 8)]
        self.client.post(url, {"ordered_item_ids": correct, "time_taken_secs": 100, "player_name": "slow"}, format="json")
        self.client.post(url, {"ordered_item_ids": correct, "time_taken_secs": 20, "player_name": "fast"}, format="json")
        self.client.post(url, {"ordered_item_ids": ["7"], "player_name": "guess"}, format="json")

        resp = self.client.get(reverse("rank-order-leaderboard", kwargs={"game_id": game_id}), {"limit": 2})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([e["player_name"] for e in resp.json()], ["fast", "slow"])

    def test_missing_game(self):
        self.assertEqual(self.client.get(reverse("rank-order-play", kwargs={"game_id": 999})).status_code, 404)
        resp = self.client.post(reverse("rank-order-submit", kwargs={"game_id": 999}), {"ordered_item_ids": ["1"]}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.get(reverse("rank-order-leaderboard", kwargs={"game_id": 999})).status_code, 404)


class RankOrderValidationTests(APITestCase):
    def _validate(self, payload):
        return self.client.post(reverse("rank-order-validate"), payload, format="json")

    def test_valid_payload(self):
        resp = self._validate(rank_order_payload())
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()["data"]["show_images"])
        self.assertFalse(RankOrderGame.objects.exists())

    def test_duplicate_positions_rejected(self):
        items = [
            {"id": "a", "content": "A", "correct_position": 1},
            {"id": "b", "content": "B", "correct_position": 1},
        ]
        self.assertEqual(self._validate(rank_order_payload(items=items)).status_code, 400)

    def test_gap_in_positions_rejected(self):
        items = [
            {"id": "a", "content": "A", "correct_position": 1},
            {"id": "b", "content": "B", "correct_position": 3},
        ]
        self.assertEqual(self._validate(rank_order_payload(items=items)).status_code, 400)

    def test_duplicate_ids_rejected(self):
        items = [
            {"id": "a", "content": "A", "correct_position": 1},
            {"id": "a", "content": "B", "correct_position": 2},
        ]
        self.assertEqual(self._validate(rank_order_payload(items=items)).status_code, 400)

    def test_single_item_rejected(self):
        items = [{"id": "a", "content": "A", "correct_position": 1}]
        self.assertEqual(self._validate(rank_order_payload(items=items)).status_code, 400)

    def test_short_title_rejected(self):
        self.assertEqual(self._validate(rank_order_payload(title="ab")).status_code, 400)

    def test_long_image_url_rejected(self):
        url = "https://example.com/" + "a" * 200
        items = [
            {"id": "a", "content": "A", "correct_position": 1, "image_url": url},
            {"id": "b", "content": "B", "correct_position": 2},
        ]
        self.assertEqual(self._validate(rank_order_payload(items=items)).status_code, 400)

    def test_title_is_trimmed(self):
        resp = self._validate(rank_order_payload(title="  Plants  "))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["title"], "Plants")
        self.assertEqual(self._validate(rank_order_payload(title="   ab   ")).status_code, 400)


class SlidingPuzzleTests(APITestCase):
    def setUp(self):
        self.puzzle = SlidingPuzzle.objects.create(title="Fifteen", grid_size=4, difficulty="medium", category="classic")

    def test_list_hides_inactive(self):
        SlidingPuzzle.objects.create(title="Retired", grid_size=3, is_active=False)
        resp = self.client.get(reverse("sliding-puzzle-list"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["title"] for p in resp.json()], ["Fifteen"])

    def test_detail(self):
        resp = self.client.get(reverse("sliding-puzzle-detail", kwargs={"puzzle_id": self.puzzle.pk}))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["grid_size"], 4)
        self.assertEqual(self.client.get(reverse("sliding-puzzle-detail", kwargs={"puzzle_id": 999})).status_code, 404)

    def test_submit_score(self):
        url = reverse("sliding-puzzle-score", kwargs={"puzzle_id": self.puzzle.pk})
        resp = self.client.post(url, {"player_name": "alice", "moves": 42, "time_spent_secs": 75}, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["moves"], 42)
        self.assertTrue(data["completed"])
        self.assertEqual(SlidingPuzzleScore.objects.filter(puzzle=self.puzzle).count(), 1)

    def test_submit_score_validation(self):
        url = reverse("sliding-puzzle-score", kwargs={"puzzle_id": self.puzzle.pk})
        self.assertEqual(self.client.post(url, {"player_name": "   ", "moves": 3, "time_spent_secs": 5}, format="json").status_code, 400)
        self.assertEqual(self.client.post(url, {"player_name": "", "moves": 3, "time_spent_secs": 5}, format="json").status_code, 400)
        self.assertEqual(self.client.post(url, {"player_name": "bob", "moves": 0, "time_spent_secs": 5}, format="json").status_code, 400)
        self.assertEqual(self.client.post(url, {"player_name": "bob", "moves": "many", "time_spent_secs": 5}, format="json").status_code, 400)
        missing = reverse("sliding-puzzle-score", kwargs={"puzzle_id": 999})
        self.assertEqual(self.client.post(missing, {"player_name": "bob", "moves": 3, "time_spent_secs": 5}, format="json").status_code, 404)

    def test_grid_below_two_is_not_playable(self):
        bad = SlidingPuzzle.objects.create(title="Bad", grid_size=1)
        with self.assertRaises(ValidationError):
            bad.full_clean()

        self.assertEqual(self.client.get(reverse("sliding-puzzle-detail", kwargs={"puzzle_id": bad.pk})).status_code, 404)
        titles = [p["title"] for p in self.client.get(reverse("sliding-puzzle-list")).json()]
        self.assertNotIn("Bad", titles)
        url = reverse("sliding-puzzle-score", kwargs={"puzzle_id": bad.pk})
        resp = self.client.post(url, {"player_name": "bob", "moves": 3, "time_spent_secs": 5}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertFalse(SlidingPuzzleScore.objects.filter(puzzle=bad).exists())

    def test_leaderboard(self):
        url = reverse("sliding-puzzle-score", kwargs={"puzzle_id": self.puzzle.pk})
        for name, moves, secs, completed in [
            ("a", 20, 60, True),
            ("b", 18, 80, True),
            ("c", 18, 50, True),
            ("quitter", 5, 5, False),
        ]:
            body = {"player_name": name, "moves": moves, "time_spent_secs": secs, "completed": completed}
            self.client.post(url, body, format="json")

        board_url = reverse("sliding-puzzle-leaderboard", kwargs={"puzzle_id": self.puzzle.pk})
        resp = self.client.get(board_url, {"limit": 2})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual([(e["moves"], e["time_spent_secs"]) for e in data], [(18, 50), (18, 80)])
        self.assertEqual([e["position"] for e in data], [1, 2])

        full = self.client.get(board_url, {"limit": "bogus"}).json()
        self.assertEqual([e["player_name"] for e in full], ["c", "b", "a"])


class MetaAndSeedTests(APITestCase):
    def test_health_and_puzzle_types(self):
        self.assertEqual(self.client.get(reverse("Health")).status_code, 200)
        resp = self.client.get(reverse("get-puzzle-types"))
        self.assertEqual(resp.json(), ["rank_order", "sliding_puzzle"])

    def test_seed_command_is_idempotent(self):
        out = StringIO()
        call_command("seed_puzzles", stdout=out)
        self.assertIn("Seeded", out.getvalue())
        self.assertEqual(RankOrderGame.objects.count(), 1)
        self.assertEqual(SlidingPuzzle.objects.count(), 3)

        game = RankOrderGame.objects.get()
        self.assertEqual(game.to_definition().item_ids(), [str(p) for p in range(1, 8)])

        out = StringIO()
        call_command("seed_puzzles", stdout=out)
        self.assertIn("No action taken", out.getvalue())
        self.assertEqual(SlidingPuzzle.objects.count(), 3)
