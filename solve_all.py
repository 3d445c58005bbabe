import datetime
import logging

from brick_solver import Board, solve
from config import CFG, configure_logging

logger = logging.getLogger(__name__)


def count_solutions(day: int, month: int) -> tuple[int, int]:
    """Returns (solutions, states explored) for a fully searched date."""
    search = solve(Board.for_date(day, month))
    solutions = sum(1 for _ in search)
    return solutions, search.explored


def sweep(year: int) -> list[tuple[int, int, int, int]]:
    """Solves every date of the year; rows are (month, day, solutions, states explored)."""
    results = []
    d = datetime.date(year, 1, 1)
    while d.year == year:
        solutions, explored = count_solutions(d.day, d.month)
        print(f'{d.month:02d}/{d.day:02d}: {solutions} solutions ({explored} states)')
        results.append((d.month, d.day, solutions, explored))
        d += datetime.timedelta(days=1)
    return results


def main() -> int:
    configure_logging()
    logger.info('Sweeping every date of %d', CFG.SWEEP_YEAR)
    results = sweep(CFG.SWEEP_YEAR)
    fewest = min(solutions for _, _, solutions, _ in results)
    hardest = ', '.join(f'{month:02d}/{day:02d}' for month, day, solutions, _ in results if solutions == fewest)
    print(f'Total: {sum(solutions for _, _, solutions, _ in results)} solutions')
    print(f'Fewest solutions ({fewest}): {hardest}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
