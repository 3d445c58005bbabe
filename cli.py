import argparse
import datetime
import itertools
import logging
import time

from brick_solver import Board, InvalidDateComponent, hints, month_address, solve
from config import CFG, configure_logging
from render import cell_label, placement_str, solution_str

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    today = datetime.date.today()
    argparser = argparse.ArgumentParser(prog='calendar-bricks', description='Calendar brick puzzle solver')
    argparser.add_argument('-d', '--day', type=int, default=today.day,
                           help='Day of month to solve for (1-31). Defaults to today.')
    argparser.add_argument('-m', '--month', type=int, default=today.month,
                           help='Month to solve for (1-12). Defaults to the current month.')
    argparser.add_argument('--hints', type=int, default=CFG.HINTS, metavar='N',
                           help='Print the N placements found in most solutions instead of solving.')
    argparser.add_argument('--limit', type=int, default=CFG.MAX_SOLUTIONS, metavar='N',
                           help='Stop after N solutions (0 prints all of them).')
    return argparser


def print_solutions(board: Board, limit: int) -> int:
    start = time.perf_counter()
    solutions = solve(board)
    if limit > 0:
        solutions = itertools.islice(solutions, limit)
    count = 0
    for count, solved in enumerate(solutions, start=1):
        elapsed = time.perf_counter() - start
        print(f'Solution {count} (time used: {elapsed:.2f}s, states explored: {solved.exploration_count}):')
        print(solution_str(solved.placed))
    if count == 0:
        print('No solutions.')
    return count


def print_hints(board: Board, count: int) -> int:
    ranked = hints(board)
    if not ranked:
        print('No hints.')
        return 0
    for rank, hint in enumerate(ranked[:count], start=1):
        print(f'Hint {rank}: placement used in {hint.occurrence_count} solutions')
        print(placement_str(hint.placement))
    return len(ranked)


def main(argv=None) -> int:
    argparser = build_parser()
    args = argparser.parse_args(argv)
    configure_logging()
    try:
        board = Board.for_date(args.day, args.month)
    except InvalidDateComponent as e:
        argparser.error(str(e))
    print(f'Solving for {cell_label(month_address(args.month))} {args.day}')
    if args.hints > 0:
        found = print_hints(board, args.hints)
        logger.info('%d distinct placements ranked', found)
    else:
        found = print_solutions(board, args.limit)
        logger.info('%d solutions printed', found)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
