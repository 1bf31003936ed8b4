"""Level clock that tracks elapsed minutes and seconds."""

from __future__ import annotations

from typing import Any

from .item import WHITE, Graphics

SCOREBOARD_TEXT_SIZE = 64
SCOREBOARD_TOP_LEFT = (10, 10)


class Clock:
    """Elapsed time since the level started, shown as ``M:SS``."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self.minutes = 0.0
        self.seconds = 0.0
        self._score = ""

    @property
    def score(self) -> str:
        """The recorded final score, empty until one is recorded."""
        return self._score

    def set_time(self, milliseconds: int) -> None:
        """Set the clock from a stopwatch reading in milliseconds."""
        whole = abs(int(milliseconds)) // 1000
        self.seconds = float(whole if milliseconds >= 0 else -whole)
        self.minutes = self.seconds / 60
        if self.seconds >= 60:
            self.seconds -= self.minutes * 60

    def add_time(self, elapsed: float) -> None:
        """Advance the clock by ``elapsed`` seconds."""
        self.seconds += elapsed
        if self.seconds >= 60:
            self.seconds -= 60
            self.minutes += 1

    def seconds_text(self) -> str:
        """Seconds as a string, zero padded below ten."""
        text = str(int(self.seconds))
        return "0" + text if self.seconds < 10 else text

    def minutes_text(self) -> str:
        """Whole minutes as a string."""
        return str(int(self.minutes))

    def reset(self) -> None:
        """Set the clock back to zero."""
        self.minutes = 0.0
        self.seconds = 0.0

    def record_score(self) -> None:
        """Remember the current time as the final score."""
        self._score = f"{self.minutes_text()}:{self.seconds_text()}"

    def draw(self, graphics: Graphics, final: bool = False) -> None:
        """Draw the running time, or the final score when ``final`` is set."""
        graphics.set_font(SCOREBOARD_TEXT_SIZE, WHITE)
        if final:
            text = self._score
        else:
            text = f"{self.minutes_text()}:{self.seconds_text()}"
        graphics.draw_text(text, *SCOREBOARD_TOP_LEFT)