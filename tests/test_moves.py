import pytest
from lightsout_core.parser import parse_board_str
from lightsout_core.moves import (
    SENTINEL, Move, MoveCatalog, PathMoves, iter_bits, successors,
)
from lightsout_core.state import Board, popcount

CENTER = """
...
.X.
...
"""


def test_masks_3x3():
    cat = MoveCatalog(3)
    assert cat.mask_for(0) == 0b000001011  # (0,0) (0,1) (1,0)
    assert cat.mask_for(1) == 0b000010111  # (0,0) (0,1) (0,2) (1,1)
    assert cat.mask_for(4) == 0b010111010  # plus around the center
    assert cat.mask_for(8) == 0b110100000


def test_mask_sizes_5x5():
    cat = MoveCatalog(5)
    sizes = [popcount(m) for m in cat.masks]
    assert sizes[0] == sizes[4] == sizes[20] == sizes[24] == 3
    assert sizes[2] == 4 and sizes[12] == 5
    assert sum(sizes) == 4 * 3 + 12 * 4 + 9 * 5


def test_toggle_self_inverse():
    cat = MoveCatalog(3)
    for b in range(1 << 9):
        for cell in range(9):
            assert cat.apply(cat.apply(b, cell), cell) == b


def test_apply_move_on_board():
    cat = MoveCatalog(3)
    b = parse_board_str(CENTER)
    after = cat.apply_move(b, Move(1, 1))
    assert sorted(after.lit_cells()) == [(0, 1), (1, 0), (1, 2), (2, 1)]
    assert cat.apply_move(after, Move(1, 1)) == b


def test_move_cell_mapping():
    cat = MoveCatalog(5)
    assert cat.cell_of(Move(2, 3)) == 13
    assert cat.move_of(13) == Move(2, 3)
    with pytest.raises(ValueError):
        cat.cell_of(SENTINEL)


def test_sentinel():
    assert SENTINEL.is_sentinel
    assert not Move(0, 0).is_sentinel
    assert SENTINEL != Move(0, 0)
    assert Move(1, 2) == Move(1, 2)


def test_path_moves_copy_on_write():
    empty = PathMoves()
    one = empty.with_move(4)
    two = one.with_move(7)
    assert not empty.has_played(4)
    assert one.has_played(4) and not one.has_played(7)
    assert two.has_played(4) and two.has_played(7)
    assert len(empty) == 0 and len(two) == 2
    assert two.cells() == [4, 7]


def test_iter_bits():
    assert list(iter_bits(0)) == []
    assert list(iter_bits(0b10110)) == [1, 2, 4]


def test_successors_productive_only():
    cat = MoveCatalog(3)
    b = parse_board_str(CENTER).lit
    cells = [c for c, _ in successors(b, PathMoves(), cat)]
    assert cells == [1, 3, 4, 5, 7]
    for c, nb in successors(b, PathMoves(), cat):
        assert nb == b ^ cat.mask_for(c)


def test_successors_skip_played():
    cat = MoveCatalog(3)
    b = parse_board_str(CENTER).lit
    cells = [c for c, _ in successors(b, PathMoves().with_move(4), cat)]
    assert cells == [1, 3, 5, 7]


def test_successors_empty_board():
    cat = MoveCatalog(4)
    assert list(successors(Board.empty(4).lit, PathMoves(), cat)) == []
