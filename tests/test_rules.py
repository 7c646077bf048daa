"""
Test script for move rules

Covers:
1. Legality walk (empties counted, filled cells bridged, blocked/edge stop)
2. Legal move generation order and the dead-end short-circuit
3. Move application and illegal-move rejection

Usage:
    python tests/test_rules.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from castfill.solver import (
    Board,
    CellState,
    IllegalMoveError,
    Move,
    create_strategy,
    is_legal,
    legal_moves,
    parse,
)

RIGHT, LEFT, DOWN, UP = (1, 0), (-1, 0), (0, 1), (0, -1)


def make_move(board: Board, x: int, y: int, direction) -> Move:
    """Build a move from the cell at (x, y)."""
    dx, dy = direction
    return Move(x=x, y=y, dx=dx, dy=dy, count=board.cell_at(x, y).count)


def test_legality_walk():
    """Empties count, filled and playable cells are bridged, blocked stops."""
    print("\n" + "="*60)
    print("TEST: Legality Walk")
    print("="*60)

    board = parse("21..")
    # Passes over the playable '1' to reach two empties
    assert is_legal(board, make_move(board, 0, 0, RIGHT))
    assert not is_legal(board, make_move(board, 0, 0, LEFT))

    board = parse("3.. .")
    assert not is_legal(board, make_move(board, 0, 0, RIGHT)), "blocked cell stops the ray"

    board = parse("3..")
    assert not is_legal(board, make_move(board, 0, 0, RIGHT)), "edge stops the ray"

    board = parse("1\n.")
    assert is_legal(board, make_move(board, 0, 0, DOWN))
    assert not is_legal(board, make_move(board, 0, 0, UP))

    # Ragged: row 1 is too short for a downward ray from column 2
    board = parse("..1\n.\n..")
    assert not is_legal(board, make_move(board, 2, 0, DOWN))

    print("  [PASS] Legality walk tests")


def test_legality_bridges_filled():
    """Cells filled by an earlier move don't block the ray."""
    board = parse("2.1..")
    board.apply_move(make_move(board, 2, 0, RIGHT))
    assert board.render() == "2.XX."

    # Needs (1,0) and (4,0), bridging the two filled cells
    assert is_legal(board, make_move(board, 0, 0, RIGHT))


def test_generation_order():
    """Moves come out row-major, then right, left, down, up."""
    print("\n" + "="*60)
    print("TEST: Move Generation")
    print("="*60)

    board = parse("1.\n1.\n.1")
    moves = legal_moves(board)

    expected = [
        (0, 0, RIGHT), (0, 0, DOWN),
        (0, 1, RIGHT), (0, 1, DOWN),
        (1, 2, LEFT), (1, 2, UP),
    ]
    assert [(m.x, m.y, m.direction) for m in moves] == expected
    assert all(m.count == 1 for m in moves)

    for move in moves:
        print(f"    {move}")

    # Strategies expose the same generator
    assert create_strategy("backtrack").find_all_valid_moves(board) == moves

    print("  [PASS] Move generation tests")


def test_dead_end_short_circuit():
    """One stuck playable cell empties the whole move list."""
    print("\n" + "="*60)
    print("TEST: Dead End")
    print("="*60)

    # (0,0) can move right, but (0,1) has nowhere to go
    board = parse("1.\n1 ")
    assert is_legal(board, make_move(board, 0, 0, RIGHT))
    assert legal_moves(board) == []

    assert legal_moves(parse("1 ")) == []

    # No playable cells at all
    assert legal_moves(parse(". ")) == []

    print("  [PASS] Dead end tests")


def test_apply_move():
    """Apply fills the origin and exactly count empties along the ray."""
    print("\n" + "="*60)
    print("TEST: Apply Move")
    print("="*60)

    board = parse("3.1..\n. ...")
    before = board.copy()
    move = make_move(board, 0, 0, RIGHT)

    board.apply_move(move)
    print(f"  {before.render()!r} -> {board.render()!r}")

    assert board.render() == "XX1XX\n. ..."
    assert board.cell_at(0, 0).state is CellState.FILLED
    # The playable '1' was stepped over, not consumed
    assert board.cell_at(2, 0).is_playable

    changed = [
        (x, y)
        for y, row in enumerate(before.grid)
        for x, cell in enumerate(row)
        if board.cell_at(x, y) != cell
    ]
    assert changed == [(0, 0), (1, 0), (3, 0), (4, 0)]
    assert board.count_state(CellState.FILLED) == 1 + move.count

    print("  [PASS] Apply move tests")


def test_apply_vertical_move():
    board = parse(".\n2\n.\n.")
    board.apply_move(make_move(board, 0, 1, DOWN))
    assert board.render() == ".\nX\nX\nX"


def test_apply_illegal_move():
    """Illegal moves raise and leave the board untouched."""
    print("\n" + "="*60)
    print("TEST: Illegal Move")
    print("="*60)

    board = parse("1 .")
    before = board.copy()

    try:
        board.apply_move(make_move(board, 0, 0, RIGHT))
    except IllegalMoveError as e:
        print(f"  Raised: {e}")
    else:
        raise AssertionError("illegal move should raise")

    assert board == before
    assert not issubclass(IllegalMoveError, ValueError)

    print("  [PASS] Illegal move tests")


def test_apply_rejects_bad_origin():
    """Moves must start on a playable cell with the same count."""
    print("\n" + "="*60)
    print("TEST: Bad Origin")
    print("="*60)

    cases = [
        # Off the board: x=-1 must not wrap to the last cell of the row
        (".2", Move(x=-1, y=0, dx=1, dy=0, count=1)),
        (".2", Move(x=0, y=5, dx=1, dy=0, count=1)),
        # Blocked and empty origins
        (" .", Move(x=0, y=0, dx=1, dy=0, count=1)),
        ("..", Move(x=0, y=0, dx=1, dy=0, count=1)),
        # Count doesn't match the origin cell
        ("2..", Move(x=0, y=0, dx=1, dy=0, count=1)),
    ]

    for text, move in cases:
        board = parse(text)
        try:
            board.apply_move(move)
        except IllegalMoveError as e:
            print(f"  {text!r} {move}: {e}")
        else:
            raise AssertionError(f"{move} on {text!r} should raise")
        assert board.render() == text

    print("  [PASS] Bad origin tests")


def test_move_rejects_bad_direction():
    try:
        Move(x=0, y=0, dx=1, dy=1, count=1)
    except ValueError:
        return
    raise AssertionError("diagonal move should be rejected")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# MOVE RULE TESTS")
    print("#"*60)

    tests = [
        ("Legality Walk", test_legality_walk),
        ("Bridging", test_legality_bridges_filled),
        ("Move Generation", test_generation_order),
        ("Dead End", test_dead_end_short_circuit),
        ("Apply Move", test_apply_move),
        ("Vertical Move", test_apply_vertical_move),
        ("Illegal Move", test_apply_illegal_move),
        ("Bad Origin", test_apply_rejects_bad_origin),
        ("Bad Direction", test_move_rejects_bad_direction),
    ]

    all_passed = True
    for name, test in tests:
        try:
            test()
            passed = True
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            passed = False
        print(f"  {name}: [{'PASS' if passed else 'FAIL'}]")
        all_passed = all_passed and passed

    print()
    print("All tests PASSED!" if all_passed else "Some tests FAILED!")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
