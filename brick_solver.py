import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

logger = logging.getLogger(__name__)

# The board is an 8x8 grid packed into a 64 bit word. Address 0 is the most
# significant bit, rows run top to bottom one byte each:
#
#   row 0: Jan..Jun  (addresses 0-5)     row 4: days 15-21 (32-38)
#   row 1: Jul..Dec  (addresses 8-13)    row 5: days 22-28 (40-46)
#   row 2: days 1-7  (16-22)             row 6: days 29-31 (48-50)
#   row 3: days 8-14 (24-30)             row 7: unused
#
# Every address outside the calendar is a guard cell and starts occupied.
# Placements are produced by right-shifting a pattern, so a shift that would
# wrap a brick across a row edge always lands on a guard and gets rejected.
GRID_WIDTH = 8
GRID_CELLS = 64
FULL_MASK = (1 << GRID_CELLS) - 1
GUARD_MASK = 0b00000011_00000011_00000001_00000001_00000001_00000001_00011111_11111111

# Largest right shift that keeps a pattern anchored at the top-left inside the grid.
MAX_OFFSET = 42

MONTHS = (1, 12)
DAYS = (1, 31)


def address_bit(address: int) -> int:
    """Returns the single-bit mask of a grid address."""
    return 1 << (GRID_CELLS - 1) >> address


def month_address(month: int) -> int:
    if not MONTHS[0] <= month <= MONTHS[1]:
        raise InvalidDateComponent('month', month, MONTHS)
    # Jan..Jun sit on row 0, Jul..Dec on row 1.
    return month - 1 if month <= 6 else month + 1


def day_address(day: int) -> int:
    if not DAYS[0] <= day <= DAYS[1]:
        raise InvalidDateComponent('day', day, DAYS)
    week, weekday = divmod(day - 1, 7)
    return 2 * GRID_WIDTH + week * GRID_WIDTH + weekday


class InvalidDateComponent(ValueError):
    """A day or month outside the range printed on the board."""

    def __init__(self, component: str, value: int, valid_range: tuple[int, int]):
        self.component = component
        self.value = value
        self.valid_range = valid_range
        low, high = valid_range
        super().__init__(f'Invalid {component} {value}. Valid {component}s: {low}-{high}')


@dataclass(frozen=True)
class Brick:
    # Every distinct rotation/reflection of the piece, anchored at address 0.
    patterns: tuple[int, ...]
    # All translations of all patterns, orientation-major then offset ascending.
    placements: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.patterns:
            raise ValueError('A brick needs at least one orientation pattern')
        candidates = [pattern >> offset for pattern in self.patterns for offset in range(MAX_OFFSET + 1)]
        object.__setattr__(self, 'placements', np.array(candidates, dtype=np.uint64))

    @property
    def size(self) -> int:
        return bin(self.patterns[0]).count('1')


def _brick(*patterns: int) -> Brick:
    return Brick(tuple(patterns))


# Authored by hand, one entry per distinct footprint. Each literal is written
# with one byte per row and then shifted up so its first row is row 0.
BRICKS: tuple[Brick, ...] = (
    # S
    _brick(
        0b01100000_01000000_11000000 << (5 * 8),
        0b11000000_01000000_01100000 << (5 * 8),
        0b10000000_11100000_00100000 << (5 * 8),
        0b00100000_11100000_10000000 << (5 * 8),
    ),
    # long L
    _brick(
        0b00010000_11110000 << (6 * 8),
        0b10000000_11110000 << (6 * 8),
        0b11110000_00010000 << (6 * 8),
        0b11110000_10000000 << (6 * 8),
        0b10000000_10000000_10000000_11000000 << (4 * 8),
        0b01000000_01000000_01000000_11000000 << (4 * 8),
        0b11000000_10000000_10000000_10000000 << (4 * 8),
        0b11000000_01000000_01000000_01000000 << (4 * 8),
    ),
    # V
    _brick(
        0b11100000_10000000_10000000 << (5 * 8),
        0b11100000_00100000_00100000 << (5 * 8),
        0b00100000_00100000_11100000 << (5 * 8),
        0b10000000_10000000_11100000 << (5 * 8),
    ),
    # 2x3 rectangle
    _brick(
        0b11100000_11100000 << (6 * 8),
        0b11000000_11000000_11000000 << (5 * 8),
    ),
    # U
    _brick(
        0b11100000_10100000 << (6 * 8),
        0b10100000_11100000 << (6 * 8),
        0b11000000_10000000_11000000 << (5 * 8),
        0b11000000_01000000_11000000 << (5 * 8),
    ),
    # P
    _brick(
        0b11100000_11000000 << (6 * 8),
        0b11000000_11100000 << (6 * 8),
        0b11100000_01100000 << (6 * 8),
        0b01100000_11100000 << (6 * 8),
        0b11000000_11000000_10000000 << (5 * 8),
        0b11000000_11000000_01000000 << (5 * 8),
        0b10000000_11000000_11000000 << (5 * 8),
        0b01000000_11000000_11000000 << (5 * 8),
    ),
    # Y
    _brick(
        0b11110000_01000000 << (6 * 8),
        0b11110000_00100000 << (6 * 8),
        0b01000000_11110000 << (6 * 8),
        0b00100000_11110000 << (6 * 8),
        0b10000000_11000000_10000000_10000000 << (4 * 8),
        0b10000000_10000000_11000000_10000000 << (4 * 8),
        0b01000000_11000000_01000000_01000000 << (4 * 8),
        0b01000000_01000000_11000000_01000000 << (4 * 8),
    ),
    # N
    _brick(
        0b11100000_00110000 << (6 * 8),
        0b01110000_11000000 << (6 * 8),
        0b11000000_01110000 << (6 * 8),
        0b00110000_11100000 << (6 * 8),
        0b10000000_10000000_11000000_01000000 << (4 * 8),
        0b01000000_11000000_10000000_10000000 << (4 * 8),
        0b10000000_11000000_01000000_01000000 << (4 * 8),
        0b01000000_01000000_11000000_10000000 << (4 * 8),
    ),
)


@dataclass(frozen=True)
class Board:
    """Occupancy of the grid plus the placements that produced it.

    Boards are never mutated: placing a brick returns a new Board, so sibling
    branches of the search never see each other's placements.
    """
    occupancy: int
    placed: tuple[int, ...] = ()

    @classmethod
    def empty(cls) -> 'Board':
        """The calendar with only the guard cells occupied."""
        return cls(GUARD_MASK)

    @classmethod
    def for_date(cls, day: int, month: int) -> 'Board':
        """Board with the month and day cells blocked.

        Only the numeric ranges are checked, so dates such as Feb 30 are accepted.
        """
        try:
            occupancy = GUARD_MASK | address_bit(month_address(month)) | address_bit(day_address(day))
        except InvalidDateComponent as e:
            logger.debug('Rejected date day=%r month=%r: %s', day, month, e)
            raise
        return cls(occupancy)

    def is_occupied(self, address: int) -> bool:
        return bool(self.occupancy & address_bit(address))

    def is_free(self, address: int) -> bool:
        return not self.is_occupied(address)

    @property
    def free_cells(self) -> int:
        return GRID_CELLS - bin(self.occupancy).count('1')

    def valid_placements(self, brick: Brick) -> Iterator['Board']:
        """Yields a new Board for every placement of the brick that fits.

        Orientations are tried in catalog order and offsets in increasing order.
        """
        candidates = brick.placements
        fits = candidates[(candidates & np.uint64(self.occupancy)) == 0]
        for placement in fits.tolist():
            yield Board(self.occupancy | placement, self.placed + (placement,))


@dataclass(frozen=True)
class SolvedBoard:
    # One placement per brick, in catalog order.
    placed: tuple[int, ...]
    # States visited by the whole search up to and including this solution.
    exploration_count: int


@dataclass(frozen=True)
class Hint:
    placement: int
    occurrence_count: int


class Search:
    """Depth-first search over brick placements driven by an explicit stack.

    Iterating yields SolvedBoards one at a time; the stack is kept between items,
    so a consumer can stop early and the remaining branches are simply dropped.
    A finished Search stays exhausted; build a new one to search again.
    """

    def __init__(self, board: Board, bricks: Sequence[Brick] = BRICKS):
        self.bricks = tuple(bricks)
        # Frames are (board, index of the next brick to place).
        self.stack: list[tuple[Board, int]] = [(board, 0)]
        self.explored = 0
        self.solutions = 0
        self.exhausted = False
        logger.debug('Search started: %d free cells, %d bricks', board.free_cells, len(self.bricks))

    def __iter__(self) -> 'Search':
        return self

    def __next__(self) -> SolvedBoard:
        stack = self.stack
        bricks = self.bricks
        depth_limit = len(bricks)
        while stack:
            board, depth = stack.pop()
            self.explored += 1
            if depth == depth_limit:
                self.solutions += 1
                return SolvedBoard(board.placed, self.explored)
            stack.extend((child, depth + 1) for child in board.valid_placements(bricks[depth]))
        if not self.exhausted:
            self.exhausted = True
            logger.debug('Search exhausted: %d solutions, %d states explored', self.solutions, self.explored)
        raise StopIteration


def solve(board: Board, bricks: Sequence[Brick] = BRICKS) -> Search:
    """Lazily yields every complete tiling of the board."""
    return Search(board, bricks)


def hints(board: Board, bricks: Sequence[Brick] = BRICKS) -> list[Hint]:
    """Ranks placements by the number of complete solutions that contain them.

    Needs the full solution set, so the search is run to exhaustion first.
    Placements with the same count are ordered by pattern value.
    """
    placed = [placement for solution in solve(board, bricks) for placement in solution.placed]
    patterns, counts = np.unique(np.array(placed, dtype=np.uint64), return_counts=True)
    # unique() sorts by pattern, a stable sort keeps that order within equal counts.
    order = np.argsort(-counts, kind='stable')
    ranked = [Hint(pattern, count) for pattern, count in zip(patterns[order].tolist(), counts[order].tolist())]
    logger.debug('Ranked %d distinct placements', len(ranked))
    return ranked
