"""
castfill - Entry Point

Loads a puzzle map, solves it, and prints the moves and the solved board.

Example:
    python main.py maps/example.map
    python main.py --text "1.\\n1.\\n.1"
    python main.py maps/backtrack.map --image solution.png --debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from castfill.solver import (
    Board,
    ParseError,
    Solution,
    get_default_strategy_name,
    get_strategy_info,
    run_strategy,
)
from castfill.settings import load_settings
from castfill.debug import save_board_image, save_debug_image

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_BAD_INPUT = 2


def setup_logging(level: str) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("solver.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def load_board(path: Optional[str] = None, text: Optional[str] = None) -> Board:
    """
    Load a board from a map file or inline text.

    Args:
        path: Map file path
        text: Inline board text, literal "\\n" sequences separate rows

    Returns:
        Parsed Board

    Raises:
        ParseError: If the map contains an invalid character
        OSError: If the map file can't be read
    """
    if text is not None:
        source = text.replace("\\n", "\n")
    else:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()

    # Map files saved on Windows
    source = source.replace("\r\n", "\n")
    return Board.parse(source)


def log_progress(percent: float, message: str) -> None:
    """Progress callback for strategies, logged at DEBUG."""
    logger.debug(f"Progress {percent * 100:.0f}%: {message}")


def print_solution(solution: Solution) -> None:
    """Print moves in play order followed by the solved board."""
    print(f"Solution ({solution.move_count} moves):")
    for i, move in enumerate(solution.moves):
        print(f"  {i + 1}. {move}")
    if solution.final_board is not None:
        print()
        print(solution.final_board.render())


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="castfill - Solver for the line fill number puzzle"
    )
    parser.add_argument(
        "map",
        nargs="?",
        help="Path to a map file"
    )
    parser.add_argument(
        "--text", "-t",
        help="Board text given inline, rows separated by \\n"
    )
    parser.add_argument(
        "--strategy", "-s",
        help="Solving strategy: " + "; ".join(
            f"{info['name']} = {info['description']}" for info in get_strategy_info()
        )
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Give up after this many seconds (default: no limit)"
    )
    parser.add_argument(
        "--image", "-i",
        help="Save the board with the solution drawn on it to this PNG path"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save a debug image"
    )
    args = parser.parse_args(argv)
    if not args.list_strategies and (args.map is None) == (args.text is None):
        parser.error("give exactly one of MAP or --text")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """
    Load, solve and print a puzzle.

    Returns:
        Exit code: 0 solved, 1 no solution or cancelled, 2 bad input
    """
    args = parse_args(argv)

    if args.list_strategies:
        default = get_default_strategy_name()
        for info in get_strategy_info():
            marker = " (default)" if info["name"] == default else ""
            print(f"{info['name']}{marker}: {info['description']}")
        return 0

    settings = load_settings()

    setup_logging("DEBUG" if args.debug else settings.get("log_level", "INFO"))

    try:
        board = load_board(args.map, args.text)
    except ParseError as e:
        logger.error(f"Invalid map: {e}")
        return EXIT_BAD_INPUT
    except OSError as e:
        logger.error(f"Failed to read map: {e}")
        return EXIT_BAD_INPUT

    strategy_name = args.strategy or settings.get("strategy_name") or get_default_strategy_name()
    timeout = args.timeout if args.timeout is not None else settings.get("timeout_sec")
    try:
        solution = run_strategy(
            strategy_name, board,
            timeout_sec=timeout,
            progress_callback=log_progress,
        )
    except ValueError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    if args.debug:
        path = save_debug_image(board, solution.moves, Path(settings.get("debug_image_dir", "debug")))
        logger.info(f"Debug image saved: {path}")

    if solution.was_cancelled:
        print(f"Gave up after {solution.metrics.computation_time_ms / 1000:.1f}s")
        return EXIT_UNSOLVED

    if not solution.is_complete:
        print("No solution")
        return EXIT_UNSOLVED

    print_solution(solution)

    if args.image:
        save_board_image(board, Path(args.image), solution.moves)
        logger.info(f"Solution image saved: {args.image}")

    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
