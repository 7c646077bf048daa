"""
Debug Image Utilities

Functions for drawing boards and solutions to PNG and managing debug output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from .solver import Board, CellState, Move
from .solver.solution import Solution

logger = logging.getLogger(__name__)

# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Layout in pixels
CELL_SIZE = 32
MARGIN = 10
ARROW_LENGTH = 10
ARROW_HALF_WIDTH = 6

CELL_COLORS = {
    CellState.BLOCKED: "#303030",
    CellState.EMPTY: "#ffffff",
    CellState.FILLED: "#9e9e9e",
    CellState.PLAYABLE: "#bbdefb",
}

MOVE_COLORS = ["#d32f2f", "#388e3c", "#1976d2", "#f57c00", "#7b1fa2", "#0097a7"]


def draw_board(board: Board, moves: Optional[Sequence[Move]] = None) -> Image.Image:
    """
    Draw a board, and optionally a move sequence, to an image.

    Each cell is a square colored by state, playable cells show their
    count. Moves are drawn as arrows from the origin to the last cell
    they fill, numbered in play order.

    Args:
        board: Board to draw
        moves: Moves in play order, must be playable from board

    Returns:
        RGB PIL Image
    """
    width = max(board.width, 1) * CELL_SIZE + 2 * MARGIN
    height = max(board.rows, 1) * CELL_SIZE + 2 * MARGIN
    image = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(image)

    # Try to load a font, fall back to default
    try:
        font = ImageFont.truetype("arial.ttf", 16)
    except OSError:
        font = ImageFont.load_default()

    for y, row in enumerate(board.grid):
        for x, cell in enumerate(row):
            left, top = _cell_origin(x, y)
            draw.rectangle(
                [left, top, left + CELL_SIZE - 1, top + CELL_SIZE - 1],
                fill=CELL_COLORS[cell.state],
                outline="#757575",
            )
            if cell.state is CellState.PLAYABLE:
                draw.text((left + 10, top + 7), cell.to_char(), fill="black", font=font)

    if moves:
        states = Solution.replay(board, list(moves))
        for i, move in enumerate(moves):
            color = MOVE_COLORS[i % len(MOVE_COLORS)]
            start = _cell_center(move.x, move.y)
            end = _cell_center(*_ray_end(states[i], move))
            draw.line([start, end], fill=color, width=3)
            draw.polygon(_arrowhead(end, move.dx, move.dy), fill=color)
            draw.text((start[0] - 12, start[1] - 14), str(i + 1), fill=color, font=font)

    return image


def save_board_image(
    board: Board,
    path: Path,
    moves: Optional[Sequence[Move]] = None
) -> Path:
    """
    Save a board drawing as PNG.

    Args:
        board: Board to draw
        path: Output file path
        moves: Optional moves to overlay

    Returns:
        Path the image was written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    draw_board(board, moves).save(path, "PNG")
    logger.debug(f"Board image saved: {path}")
    return path


def save_debug_image(
    board: Board,
    moves: Optional[Sequence[Move]] = None,
    debug_dir: Path = DEBUG_DIR
) -> Path:
    """
    Save a timestamped debug image and prune old ones.

    Args:
        board: Board to draw
        moves: Optional moves to overlay
        debug_dir: Directory for debug images

    Returns:
        Path of the new image
    """
    debug_dir = Path(debug_dir)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
    path = save_board_image(board, debug_dir / f"debug_{timestamp}.png", moves)
    _cleanup_debug_images(debug_dir)
    return path


def _cleanup_debug_images(debug_dir: Path) -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not debug_dir.exists():
        return

    # Get all debug images sorted by modification time
    debug_files: List[Path] = sorted(
        debug_dir.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove old debug image {old_file}: {e}")


def _ray_end(board: Board, move: Move) -> Tuple[int, int]:
    """Last cell a legal move fills on board."""
    x, y = move.x, move.y
    filled = 0
    while filled < move.count:
        x += move.dx
        y += move.dy
        if board.cell_at(x, y).state is CellState.EMPTY:
            filled += 1
    return x, y


def _arrowhead(tip: Tuple[int, int], dx: int, dy: int) -> List[Tuple[int, int]]:
    """Triangle pointing along (dx, dy) with its point at tip."""
    x, y = tip
    back_x, back_y = x - dx * ARROW_LENGTH, y - dy * ARROW_LENGTH
    # Perpendicular to the direction is (-dy, dx)
    return [
        (x, y),
        (back_x - dy * ARROW_HALF_WIDTH, back_y + dx * ARROW_HALF_WIDTH),
        (back_x + dy * ARROW_HALF_WIDTH, back_y - dx * ARROW_HALF_WIDTH),
    ]


def _cell_origin(x: int, y: int) -> Tuple[int, int]:
    return MARGIN + x * CELL_SIZE, MARGIN + y * CELL_SIZE


def _cell_center(x: int, y: int) -> Tuple[int, int]:
    left, top = _cell_origin(x, y)
    return left + CELL_SIZE // 2, top + CELL_SIZE // 2
