import pytest

from brick_solver import BRICKS, FULL_MASK, Board

RECTANGLE = BRICKS[3]
# The 2x3 rectangle lying flat in the Jan..Mar and Apr..Jun halves of the top two rows.
LEFT_BLOCK = RECTANGLE.patterns[0]
RIGHT_BLOCK = LEFT_BLOCK >> 3


@pytest.fixture
def two_block_board():
    """Board whose only free cells are the twelve month cells."""
    return Board(FULL_MASK ^ (LEFT_BLOCK | RIGHT_BLOCK))


@pytest.fixture
def two_rectangles():
    return (RECTANGLE, RECTANGLE)
