import os
import random

from lightsout_core.algebra import is_solvable
from scripts.make_puzzles import scramble
from scripts.run_batch import FIELDS, _run_one

SMALL_PACK = os.path.join(os.path.dirname(__file__), "..", "lightsout_core", "puzzles", "examples", "small.txt")


def test_scramble_is_solvable_and_seeded():
    a = scramble(4, 5, random.Random(7))
    b = scramble(4, 5, random.Random(7))
    assert a == b
    assert a.size == 4
    assert is_solvable(a)


def test_run_one_row():
    row = _run_one((f"{SMALL_PACK}#1", None, None, None))
    assert set(row) == set(FIELDS)
    assert row["success"] is True
    assert row["solution_len"] == 1
    assert row["moves"] == "1,1"


def test_run_one_bad_id():
    row = _run_one((f"{SMALL_PACK}#99", None, None, None))
    assert row["success"] is False
    assert row["reason"].startswith("error:")
