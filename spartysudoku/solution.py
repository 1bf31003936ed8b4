"""The expected solution of a level's sudoku board."""

from __future__ import annotations

from typing import Any
from xml.etree.ElementTree import Element

from .item import BOARD_SIZE, Point


class Solution:
    """A 9x9 grid of expected values and where the board starts in tiles."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self.board_position = Point(0, 0)
        self.numbers = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def load(self, node: Element) -> None:
        """Read the board origin and the solution values from a ``game`` node."""
        tokens = (node.text or "").split()
        if len(tokens) > BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"solution holds {len(tokens)} values, at most "
                f"{BOARD_SIZE * BOARD_SIZE} fit on the board"
            )
        try:
            values = [int(token) for token in tokens]
            col = int(node.get("col", "0"))
            row = int(node.get("row", "0"))
        except ValueError as exc:
            raise ValueError(f"malformed solution: {exc}") from exc

        self.board_position = Point(col, row)
        for index, value in enumerate(values):
            self.numbers[index // BOARD_SIZE][index % BOARD_SIZE] = value

    def value(self, row: int, col: int) -> int:
        """The expected value at the given board row and column."""
        return self.numbers[row][col]