"""An action sudoku game played in a pygame window, in which Sparty eats digits and places them on the board."""

__version__ = "0.1.0"