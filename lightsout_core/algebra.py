from __future__ import annotations

import itertools
from typing import List, Optional, Tuple

import numpy as np

from .moves import OFFSETS, Move
from .state import Board, check_size


def build_A(n: int) -> np.ndarray:
    """Return the (n*n)x(n*n) effect matrix A over GF(2).
    Column j encodes the cells toggled when pressing cell j.
    """
    check_size(n)
    N = n * n
    A = np.zeros((N, N), dtype=np.uint8)
    for r in range(n):
        for c in range(n):
            j = r * n + c
            for dr, dc in OFFSETS:
                rr, cc = r + dr, c + dc
                if 0 <= rr < n and 0 <= cc < n:
                    A[rr * n + cc, j] = 1
    return A


def board_vector(board: Board) -> np.ndarray:
    return np.array(
        [(board.lit >> i) & 1 for i in range(board.cells)], dtype=np.uint8
    )


def gf2_rref_augmented(
    A: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, List[int]]:
    """Return RREF of augmented matrix [A|b] over GF(2) and list of pivot columns."""
    A = (A % 2).astype(np.uint8)
    b = (b % 2).astype(np.uint8).reshape(-1, 1)
    m, n = A.shape
    M = np.concatenate([A.copy(), b.copy()], axis=1)

    row = 0
    pivcols: List[int] = []
    for col in range(n):
        nz = np.nonzero(M[row:, col])[0]
        if nz.size == 0:
            continue
        pivot = row + int(nz[0])
        if pivot != row:
            M[[row, pivot]] = M[[pivot, row]]
        # Gauss-Jordan: clear the column in every other row
        others = np.nonzero(M[:, col])[0]
        for r in others:
            if r != row:
                M[r, :] ^= M[row, :]
        pivcols.append(col)
        row += 1
        if row == m:
            break
    return M, pivcols


def gf2_solve_with_nullspace(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], List[np.ndarray], bool]:
    """Solve A x = b over GF(2), and return a nullspace basis of A.

    Returns:
        x0: one particular solution (free variables set to 0) or None if inconsistent
        basis: nullspace basis vectors v with A v = 0
        solvable: bool
    """
    m, n = A.shape
    R, pivcols = gf2_rref_augmented(A, b)
    R_A = R[:, :n]
    R_b = R[:, n]

    # 0...0 | 1 rows
    if np.any((R_A.sum(axis=1) == 0) & (R_b == 1)):
        return None, [], False

    # fully reduced: each pivot row reads x_pc = r_b ^ sum over free columns
    x0 = np.zeros((n,), dtype=np.uint8)
    for ri, pc in enumerate(pivcols):
        x0[pc] = R_b[ri]

    frees = [j for j in range(n) if j not in pivcols]
    basis: List[np.ndarray] = []
    for f in frees:
        v = np.zeros((n,), dtype=np.uint8)
        v[f] = 1
        for ri, pc in enumerate(pivcols):
            v[pc] = R_A[ri, f]
        basis.append(v)

    return x0, basis, True


def gf2_min_weight_solution(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], bool]:
    """Return the minimum-Hamming-weight solution to A x = b (if solvable)."""
    x0, basis, ok = gf2_solve_with_nullspace(A, b)
    if not ok or x0 is None:
        return None, False
    best = x0.copy()
    best_w = int(best.sum())
    k = len(basis)
    for r in range(1, k + 1):
        for combo in itertools.combinations(range(k), r):
            cand = x0.copy()
            for idx in combo:
                cand ^= basis[idx]
            w = int(cand.sum())
            if w < best_w:
                best, best_w = cand, w
    return best, True


def is_solvable(board: Board) -> bool:
    _, _, ok = gf2_solve_with_nullspace(build_A(board.size), board_vector(board))
    return ok


def min_weight_presses(board: Board) -> Optional[List[Move]]:
    """Cells of a minimum press set clearing the board, row-major; None if unsolvable."""
    x, ok = gf2_min_weight_solution(build_A(board.size), board_vector(board))
    if not ok or x is None:
        return None
    return [Move(int(i) // board.size, int(i) % board.size) for i in np.nonzero(x)[0]]


def min_moves(board: Board) -> Optional[int]:
    presses = min_weight_presses(board)
    return None if presses is None else len(presses)
