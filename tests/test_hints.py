import pytest

from brick_solver import BRICKS, Board, Hint, hints, solve
from tests.conftest import LEFT_BLOCK, RIGHT_BLOCK


def test_ties_are_ordered_by_pattern(two_block_board, two_rectangles):
    ranked = hints(two_block_board, two_rectangles)
    assert ranked == [Hint(RIGHT_BLOCK, 2), Hint(LEFT_BLOCK, 2)]


def test_unsolvable_board_has_no_hints(two_block_board):
    assert hints(two_block_board, (BRICKS[0], BRICKS[0])) == []


def test_hint_counts_follow_solutions(two_block_board):
    ranked = hints(two_block_board, (BRICKS[3],))
    assert len(ranked) == 4
    assert sum(h.occurrence_count for h in ranked) == len(list(solve(two_block_board, (BRICKS[3],))))


@pytest.mark.slow
def test_hints_july_29():
    board = Board.for_date(29, 7)
    ranked = hints(board)
    solutions = len(list(solve(board)))
    assert len(ranked) == 155
    assert ranked[0].occurrence_count == 12
    assert ranked[-1].occurrence_count == 1
    assert sum(h.occurrence_count for h in ranked) == len(BRICKS) * solutions
    counts = [h.occurrence_count for h in ranked]
    assert counts == sorted(counts, reverse=True)
    for higher, lower in zip(ranked, ranked[1:]):
        if higher.occurrence_count == lower.occurrence_count:
            assert higher.placement < lower.placement
