"""Tests for the render module."""

from lightsout_core.parser import parse_board_str
from lightsout_core.render import render_ascii, render_solution
from lightsout_core.moves import Move
from search.bfs import solve

CENTER = """
...
.X.
...
"""


def test_render_basic_board():
    b = parse_board_str(CENTER)
    rendered = render_ascii(b)
    lines = rendered.splitlines()
    assert len(lines) == 5
    assert lines[0] == lines[-1] == "+---------+"
    assert lines[2] == "|    X    |"
    assert "[" not in rendered


def test_render_highlights_move():
    b = parse_board_str(CENTER)
    lines = render_ascii(b, Move(1, 1)).splitlines()
    assert lines[2] == "|   [X]   |"
    lines = render_ascii(b, Move(0, 0)).splitlines()
    assert lines[1] == "|[ ]      |"


def test_render_solution():
    b = parse_board_str(CENTER)
    res = solve(b)
    text = render_solution(b, res["steps"])
    assert text.startswith("-- start (1 lit) --")
    for i in range(1, res["solution_len"] + 1):
        assert f"-- move {i}:" in text
    assert text.rstrip().endswith("+---------+")
    assert "-- done --" in text
