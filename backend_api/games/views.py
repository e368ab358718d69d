from __future__ import annotations

import logging
from typing import Any, Dict

from django.conf import settings
from django.db import transaction
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema

from .models import RankOrderAttempt, RankOrderGame, RankOrderItem, SlidingPuzzle, SlidingPuzzleScore
from .serializers import (
    AttemptResultSerializer,
    CreateRankOrderSerializer,
    LeaderboardEntrySerializer,
    PlayViewSerializer,
    SlidingPuzzleSerializer,
    SlidingScoreSerializer,
    SubmitRankOrderSerializer,
    SubmitScoreSerializer,
)
from games.puzzles import MIN_GRID_SIZE, EngineRegistry, RankOrderSubmission, get_engine, normalize_limit

logger = logging.getLogger(__name__)

_limit_param = openapi.Parameter(
    "limit", openapi.IN_QUERY, type=openapi.TYPE_INTEGER, required=False,
    description="Maximum number of entries (default 10).",
)


def _leaderboard_limit(request) -> int:
    """Requested leaderboard size, falling back to the default and capped at the max."""
    default = settings.LEADERBOARD_DEFAULT_LIMIT
    limit = normalize_limit(request.GET.get("limit"), default=default)
    return min(limit, settings.LEADERBOARD_MAX_LIMIT)


def _get_rank_order_game(game_id: int):
    return RankOrderGame.objects.prefetch_related("items").filter(pk=game_id).first()


def _not_found(what: str) -> Response:
    return Response({"error": f"{what} not found."}, status=status.HTTP_404_NOT_FOUND)


def _get_sliding_puzzle(puzzle_id: int):
    """Fetch a sliding puzzle row whose definition is playable, else None."""
    puzzle = SlidingPuzzle.objects.filter(pk=puzzle_id).first()
    if not puzzle:
        return None
    try:
        puzzle.to_definition()
    except ValueError as e:
        logger.warning("Sliding puzzle %s is not playable: %s", puzzle_id, e)
        return None
    return puzzle


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_puzzle_types",
    operation_summary="List available puzzle types",
    operation_description="Returns supported puzzle types.",
    tags=["meta"],
    responses={200: openapi.Response("OK", schema=openapi.Schema(type=openapi.TYPE_ARRAY, items=openapi.Items(type=openapi.TYPE_STRING)))},
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_puzzle_types(request):
    """List available puzzle engine types."""
    return Response(EngineRegistry.types(), status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="validate_rank_order",
    operation_summary="Validate ordering puzzle data",
    operation_description="Validate a creation payload without storing it.",
    request_body=CreateRankOrderSerializer,
    tags=["rank-order"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def validate_rank_order(request):
    """Check an ordering puzzle payload; 400 with field errors if invalid."""
    serializer = CreateRankOrderSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    return Response(
        {"message": "Rank Order game data is valid", "data": serializer.data},
        status=status.HTTP_200_OK,
    )


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="create_rank_order",
    operation_summary="Create an ordering puzzle",
    operation_description="""
Create an ordering puzzle from a list of items and their correct positions.

Request body:
- title (string, required)
- description (string, optional)
- items (list, required): id, content, image_url (optional), correct_position
- time_limit_secs (int, optional)
- show_images (bool, optional)
- creator_id (string, optional)

Response:
- id of the created puzzle and the number of items
""",
    request_body=CreateRankOrderSerializer,
    tags=["rank-order"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def create_rank_order(request):
    """Persist a validated ordering puzzle and its items."""
    serializer = CreateRankOrderSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    with transaction.atomic():
        game = RankOrderGame.objects.create(
            title=vd["title"],
            description=vd.get("description") or "",
            time_limit_secs=vd.get("time_limit_secs"),
            show_images=vd.get("show_images", False),
            creator_id=vd.get("creator_id"),
        )
        RankOrderItem.objects.bulk_create([
            RankOrderItem(
                game=game,
                item_key=item["id"],
                content=item["content"],
                image_url=item.get("image_url") or "",
                correct_position=item["correct_position"],
            )
            for item in vd["items"]
        ])

    logger.info("Created rank order game %s with %d items", game.pk, len(vd["items"]))
    return Response({"id": game.pk, "item_count": len(vd["items"])}, status=status.HTTP_201_CREATED)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="play_rank_order",
    operation_summary="Get an ordering puzzle for play",
    operation_description="Returns the puzzle items in shuffled order without their correct positions.",
    responses={200: PlayViewSerializer},
    tags=["rank-order"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def play_rank_order(request, game_id: int):
    """Play view of an ordering puzzle; answers are withheld."""
    game = _get_rank_order_game(game_id)
    if not game:
        return _not_found("Game")

    engine = get_engine("rank_order")
    view = engine.play_view(game.to_definition())
    return Response(PlayViewSerializer(view.to_dict()).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="submit_rank_order",
    operation_summary="Submit an ordering attempt",
    operation_description="""
Score an ordering attempt. Each item in its correct position earns 100 points;
a fully correct attempt within the time limit earns 10 points per second left.

Request body:
- ordered_item_ids (list of string, required)
- time_taken_secs (int, optional)
- player_name (string, optional)

Response includes the score breakdown and the correct order for review.
""",
    request_body=SubmitRankOrderSerializer,
    responses={200: AttemptResultSerializer},
    tags=["rank-order"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def submit_rank_order(request, game_id: int):
    """Score an ordering attempt and store it for the leaderboard."""
    game = _get_rank_order_game(game_id)
    if not game:
        return _not_found("Game")

    serializer = SubmitRankOrderSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    submission = RankOrderSubmission(
        ordered_item_ids=tuple(vd["ordered_item_ids"]),
        time_taken_secs=vd.get("time_taken_secs"),
    )
    result = get_engine("rank_order").evaluate(game.to_definition(), submission)

    attempt = RankOrderAttempt.objects.create(
        puzzle=game,
        player_name=vd.get("player_name") or "",
        score=result.score,
        max_score=result.max_score,
        correct_count=result.correct_count,
        is_correct=result.is_correct,
        time_taken_secs=submission.time_taken_secs,
    )
    logger.info(
        "Rank order attempt %s on game %s: %d/%d correct, score %d",
        attempt.pk, game.pk, result.correct_count, len(result.correct_order), result.score,
    )

    resp: Dict[str, Any] = {"attempt_id": attempt.pk, **result.to_dict()}
    return Response(AttemptResultSerializer(resp).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="rank_order_leaderboard",
    operation_summary="Leaderboard of an ordering puzzle",
    operation_description="Attempts sorted by score (desc), then time taken (asc).",
    manual_parameters=[_limit_param],
    responses={200: LeaderboardEntrySerializer(many=True)},
    tags=["rank-order"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def rank_order_leaderboard(request, game_id: int):
    """Leaderboard for one ordering puzzle, ranked at read time."""
    if not RankOrderGame.objects.filter(pk=game_id).exists():
        return _not_found("Game")

    attempts = RankOrderAttempt.objects.filter(puzzle_id=game_id)
    entries = get_engine("rank_order").leaderboard(game_id, attempts, _leaderboard_limit(request))
    serializer = LeaderboardEntrySerializer([e.to_dict() for e in entries], many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="list_sliding_puzzles",
    operation_summary="List active sliding puzzles",
    operation_description="Active sliding puzzles, newest first.",
    responses={200: SlidingPuzzleSerializer(many=True)},
    tags=["sliding-puzzle"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def list_sliding_puzzles(request):
    """List active sliding puzzles."""
    qs = SlidingPuzzle.objects.filter(is_active=True, grid_size__gte=MIN_GRID_SIZE).order_by("-created_at", "-id")
    return Response(SlidingPuzzleSerializer(qs, many=True).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="sliding_puzzle_detail",
    operation_summary="Get a sliding puzzle",
    responses={200: SlidingPuzzleSerializer},
    tags=["sliding-puzzle"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_sliding_puzzle(request, puzzle_id: int):
    """Retrieve a sliding puzzle by ID."""
    puzzle = _get_sliding_puzzle(puzzle_id)
    if not puzzle:
        return _not_found("Puzzle")
    return Response(SlidingPuzzleSerializer(puzzle).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="submit_sliding_score",
    operation_summary="Submit a sliding-puzzle score",
    operation_description="""
Record a sliding-puzzle attempt. Moves and completion are reported by the
client and are not replayed on the server.

Request body:
- player_name (string, required)
- moves (int, required)
- time_spent_secs (int, required)
- completed (bool, optional, default true)
""",
    request_body=SubmitScoreSerializer,
    responses={200: SlidingScoreSerializer},
    tags=["sliding-puzzle"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def submit_sliding_score(request, puzzle_id: int):
    """Store a self-reported sliding-puzzle attempt."""
    puzzle = _get_sliding_puzzle(puzzle_id)
    if not puzzle:
        return _not_found("Puzzle")

    serializer = SubmitScoreSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data

    attempt = get_engine("sliding_puzzle").submit(
        puzzle.to_definition().id, vd["player_name"], vd["moves"], vd["time_spent_secs"], vd.get("completed", True),
    )
    row = SlidingPuzzleScore.objects.create(
        puzzle=puzzle,
        player_name=attempt.player_name,
        moves=attempt.moves,
        time_spent_secs=attempt.time_spent_secs,
        completed=attempt.completed,
    )
    logger.info(
        "Sliding score %s on puzzle %s: %d moves in %ds (completed=%s)",
        row.pk, puzzle.pk, row.moves, row.time_spent_secs, row.completed,
    )
    return Response(SlidingScoreSerializer(row).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="sliding_puzzle_leaderboard",
    operation_summary="Leaderboard of a sliding puzzle",
    operation_description="Completed attempts sorted by moves (asc), then time spent (asc).",
    manual_parameters=[_limit_param],
    responses={200: LeaderboardEntrySerializer(many=True)},
    tags=["sliding-puzzle"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def sliding_puzzle_leaderboard(request, puzzle_id: int):
    """Leaderboard for one sliding puzzle, ranked at read time."""
    if not SlidingPuzzle.objects.filter(pk=puzzle_id).exists():
        return _not_found("Puzzle")

    attempts = SlidingPuzzleScore.objects.filter(puzzle_id=puzzle_id, completed=True)
    entries = get_engine("sliding_puzzle").leaderboard(puzzle_id, attempts, _leaderboard_limit(request))
    serializer = LeaderboardEntrySerializer([e.to_dict() for e in entries], many=True)
    return Response(serializer.data, status=status.HTTP_200_OK)
