import numpy as np

from brick_solver import GRID_WIDTH, address_bit, day_address, month_address

# Number of logical cells in each row of the calendar, left aligned.
ROW_WIDTHS = (6, 6, 7, 7, 7, 7, 3)

MONTH_LABELS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

_LABELS: dict[int, str] = {}
for _month, _label in enumerate(MONTH_LABELS, start=1):
    _LABELS[month_address(_month)] = _label
for _day in range(1, 32):
    _LABELS[day_address(_day)] = str(_day)


def cell_label(address: int) -> str:
    """Calendar label printed on the cell at a grid address."""
    try:
        return _LABELS[address]
    except KeyError:
        raise ValueError(f'Address {address} is not a calendar cell') from None


def logical_addresses() -> list[int]:
    return [y * GRID_WIDTH + x for y, width in enumerate(ROW_WIDTHS) for x in range(width)]


def solution_grid(placed) -> np.ndarray:
    """8x8 grid holding the 1-based brick number covering each address, 0 where uncovered."""
    grid = np.zeros((GRID_WIDTH, GRID_WIDTH), dtype=np.int8)
    for brick_number, placement in enumerate(placed, start=1):
        for address in range(GRID_WIDTH * GRID_WIDTH):
            if placement & address_bit(address):
                grid[divmod(address, GRID_WIDTH)] = brick_number
    return grid


def _grid_str(sgrid: np.ndarray) -> str:
    r = ''
    for y, width in enumerate(ROW_WIDTHS):
        for x in range(width):
            r += sgrid[y, x]
        r += '\n'
    return r


def solution_str(placed) -> str:
    """Multiline drawing of a solved board; the uncovered month and day show as 'O'."""
    grid = solution_grid(placed)
    sgrid = np.where(grid > 0, grid.astype(str), 'O')
    return _grid_str(sgrid)


def placement_str(placement: int) -> str:
    """Multiline drawing of a single placement, used to show hints."""
    sgrid = np.where(solution_grid([placement]) > 0, 'X', '.')
    return _grid_str(sgrid)
