from django.urls import path
from .views import (
    health,
    get_puzzle_types,
    validate_rank_order,
    create_rank_order,
    play_rank_order,
    submit_rank_order,
    rank_order_leaderboard,
    list_sliding_puzzles,
    get_sliding_puzzle,
    submit_sliding_score,
    sliding_puzzle_leaderboard,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('puzzle-types', get_puzzle_types, name='get-puzzle-types'),
    path('rank-order', create_rank_order, name='rank-order-create'),
    path('rank-order/validate', validate_rank_order, name='rank-order-validate'),
    path('rank-order/<int:game_id>', play_rank_order, name='rank-order-play'),
    path('rank-order/<int:game_id>/submit', submit_rank_order, name='rank-order-submit'),
    path('rank-order/<int:game_id>/leaderboard', rank_order_leaderboard, name='rank-order-leaderboard'),
    path('sliding-puzzles', list_sliding_puzzles, name='sliding-puzzle-list'),
    path('sliding-puzzles/<int:puzzle_id>', get_sliding_puzzle, name='sliding-puzzle-detail'),
    path('sliding-puzzles/<int:puzzle_id>/score', submit_sliding_score, name='sliding-puzzle-score'),
    path('sliding-puzzles/<int:puzzle_id>/leaderboard', sliding_puzzle_leaderboard, name='sliding-puzzle-leaderboard'),
]
