import xml.etree.ElementTree as ET

import pytest

from spartysudoku.item import Point
from spartysudoku.solution import Solution

XML_CONTENT = (
    '<game col="6" row="3">3 2 4 8 7 6 0 1 5 7 5 6 2 0 1 4 8 3 0 8 1 4 3 5 7 6 2 '
    "6 4 8 0 2 7 3 5 1 2 7 5 3 1 8 6 0 4 1 3 0 6 5 4 8 2 7 5 6 7 1 4 0 2 3 8 "
    "8 1 2 7 6 3 5 4 0 4 0 3 5 8 2 1 7 6</game>"
)

EXPECTED = [
    [3, 2, 4, 8, 7, 6, 0, 1, 5],
    [7, 5, 6, 2, 0, 1, 4, 8, 3],
    [0, 8, 1, 4, 3, 5, 7, 6, 2],
    [6, 4, 8, 0, 2, 7, 3, 5, 1],
    [2, 7, 5, 3, 1, 8, 6, 0, 4],
    [1, 3, 0, 6, 5, 4, 8, 2, 7],
    [5, 6, 7, 1, 4, 0, 2, 3, 8],
    [8, 1, 2, 7, 6, 3, 5, 4, 0],
    [4, 0, 3, 5, 8, 2, 1, 7, 6],
]


@pytest.fixture
def loaded():
    root = ET.fromstring(XML_CONTENT)
    assert root.tag == "game"
    solution = Solution(None)
    solution.load(root)
    return solution


def test_load_solution(loaded):
    assert loaded.numbers == EXPECTED


def test_value_matches_grid(loaded):
    for row in range(9):
        for col in range(9):
            assert loaded.value(row, col) == EXPECTED[row][col]


def test_board_position(loaded):
    assert loaded.board_position == Point(6, 3)


def test_empty_solution_is_zero():
    solution = Solution()
    assert solution.numbers == [[0] * 9 for _ in range(9)]
    assert solution.board_position == Point(0, 0)


def test_non_numeric_value_rejected():
    node = ET.fromstring('<game col="0" row="0">1 2 x</game>')
    with pytest.raises(ValueError):
        Solution().load(node)


def test_too_many_values_rejected():
    node = ET.fromstring('<game col="0" row="0">' + " ".join(["1"] * 82) + "</game>")
    with pytest.raises(ValueError):
        Solution().load(node)