import numpy as np
from lightsout_core.algebra import build_A, is_solvable, min_moves, min_weight_presses
from lightsout_core.moves import Move, MoveCatalog
from lightsout_core.state import Board


def test_effect_matrix_matches_catalog():
    for n in (2, 3, 5):
        A = build_A(n)
        cat = MoveCatalog(n)
        assert (A == A.T).all()
        for j in range(n * n):
            col = sum(int(A[i, j]) << i for i in range(n * n))
            assert col == cat.mask_for(j)


def test_every_3x3_board_solvable():
    assert all(is_solvable(Board(3, lit)) for lit in range(1 << 9))


def test_center_presses():
    presses = min_weight_presses(Board.from_cells(3, [(1, 1)]))
    assert presses == [Move(0, 1), Move(1, 0), Move(1, 1), Move(1, 2), Move(2, 1)]


def test_4x4_has_unsolvable_boards():
    unsolvable = [c for c in range(16) if not is_solvable(Board(4, 1 << c))]
    assert unsolvable
    assert min_moves(Board(4, 1 << unsolvable[0])) is None


def test_reference_puzzle_needs_8():
    b = Board.from_cells(5, [(1, 0), (2, 1), (3, 1), (4, 1), (4, 3), (4, 4)])
    assert is_solvable(b)
    assert min_moves(b) == 8
    # quiet pattern: pressing it changes nothing
    quiet = np.array([1, 0, 1, 0, 1] * 2 + [0] * 5 + [1, 0, 1, 0, 1] * 2, dtype=np.uint8)
    assert not ((build_A(5) @ quiet) % 2).any()
