"""The game: level state, items, board checking and player input."""

from __future__ import annotations

import os
import random
from typing import Any

import pygame

from .clock import Clock
from .error_message import ImFullMessage
from .item import BLACK, BOARD_SIZE, GREEN, WHITE, Graphics, Item, Point
from .loader import create_item, declaration_asset_path, read_level
from .scenery import Spotlight
from .solution import Solution
from .sparty import Sparty
from .visitor import (
    AudioVisitor,
    ContainerVisitor,
    InteractiveVisitor,
    NumbersVisitor,
    Visitor,
)
from .xray import XRay

BACKGROUND_IMAGE = "images/background.png"

LEVEL_FILES = {
    1: "LevelFiles/Level1.xml",
    2: "LevelFiles/level2.xml",
    3: "LevelFiles/level3.xml",
}

WIN_TEXT = "Level Complete!"
LOSE_TEXT = "Incorrect!"

KEY_SPACE = 32
KEY_ZERO = 48
KEY_NINE = 57
KEY_B = 66

# A value no number in the game carries; marks an empty board cell.
EMPTY_CELL = 9

STARTUP_SECONDS = "03"
END_SCREEN_SECONDS = 3

TITLE_FONT_SIZE = 75
GUIDE_FONT_SIZE = 50
END_FONT_SIZE = 96

GUIDE_LINES = ("Space = Eat", "0-8 = Regurgitate", "B = Headbutt")


class Game:
    """One running game: the loaded level, its items and the player's progress."""

    def __init__(self) -> None:
        self.items: list[Item] = []
        self.error_messages: list[ImFullMessage] = []
        self.sparty: Sparty | None = None
        self.xray: XRay | None = None
        self.spotlight: Spotlight | None = None
        self.spotlight_location = Point(0, 0)
        self.solution = Solution(self)
        self.clock = Clock(self)
        self.random = random.Random()

        self.declarations: dict[str, Any] = {}
        self._image_paths: dict[str, str] = {}
        self._images: dict[str, Any] = {}

        self._background_image: Any = None
        self._background_missing = False
        self._background_blank = False

        self.scale = 1.0
        self.x_offset = 0.0
        self.y_offset = 0.0
        self.pixel_width = 0.0
        self.pixel_height = 0.0

        self.tile_width = 1
        self.tile_height = 1
        self.game_width = 0.0
        self.game_height = 0.0

        self.board = [[0] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.startup = True
        self.current_level = 1
        self.level_won = False
        self.level_lost = False
        self.finish_time = -1

    @property
    def width(self) -> float:
        """Width of the playing area in virtual pixels."""
        return self.pixel_width

    @property
    def height(self) -> float:
        """Height of the playing area in virtual pixels."""
        return self.pixel_height

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def image(self, declaration_id: str) -> Any:
        """The image declared under ``declaration_id``, loaded on first use."""
        cached = self._images.get(declaration_id)
        if cached is None:
            try:
                path = self._image_paths[declaration_id]
            except KeyError:
                raise KeyError(f"no image declared for id {declaration_id!r}") from None
            cached = pygame.image.load(path)
            self._images[declaration_id] = cached
        return cached

    def accept(self, visitor: Visitor) -> None:
        """Offer every item to ``visitor``."""
        for item in list(self.items):
            item.accept(visitor)

    def _background(self) -> Any:
        if self._background_image is None and not self._background_missing:
            try:
                image = pygame.image.load(BACKGROUND_IMAGE)
            except (pygame.error, OSError):
                self._background_missing = True
                return None
            if self._background_blank:
                image.fill(BLACK)
            self._background_image = image
        return self._background_image

    def _fit(self, width: float, height: float) -> None:
        if self.pixel_width <= 0 or self.pixel_height <= 0:
            self.scale, self.x_offset, self.y_offset = 1.0, 0.0, 0.0
            return
        self.scale = min(width / self.pixel_width, height / self.pixel_height)
        self.x_offset = (width - self.pixel_width * self.scale) / 2.0
        self.y_offset = 0.0
        if height > self.pixel_height * self.scale:
            self.y_offset = (height - self.pixel_height * self.scale) / 2.0

    def draw(self, graphics: Graphics, width: float, height: float) -> None:
        """Draw the whole game scaled to fit a window of the given size."""
        self.pixel_width = self.game_width * self.tile_width
        self.pixel_height = self.game_height * self.tile_height
        self._fit(width, height)

        graphics.push_state()
        try:
            graphics.translate(self.x_offset, self.y_offset)
            graphics.scale(self.scale, self.scale)

            background = self._background()
            if background is not None:
                graphics.draw_image(
                    background, 0, 0, background.get_width(), background.get_height()
                )

            if self.spotlight is not None:
                self.spotlight.set_location(
                    self.spotlight_location.x - self.spotlight.width / 2,
                    self.spotlight_location.y - self.spotlight.height / 2,
                )

            for item in self.items:
                if item is self.sparty or item is self.spotlight:
                    continue
                item.draw(graphics)
            if self.sparty is not None:
                self.sparty.draw(graphics)
            if self.spotlight is not None:
                self.spotlight.draw(graphics)
            for message in self.error_messages:
                message.draw(graphics)

            if self.startup and not self.level_won and not self.level_lost:
                self.tutorial_prompt(graphics)
                if not self.items:
                    self.load(LEVEL_FILES[1])
                if self.clock.seconds_text() == STARTUP_SECONDS:
                    self.startup = False
                    self.clock.reset()
            else:
                self.clock.draw(graphics, self.startup)

            if self.level_won or self.level_lost:
                self.startup = True
                self.draw_end_screen(graphics, WIN_TEXT if self.level_won else LOSE_TEXT)
                self._advance_after_end()
        finally:
            graphics.pop_state()

    def _advance_after_end(self) -> None:
        seconds = int(self.clock.seconds_text())
        if self.finish_time == -1:
            self.finish_time = seconds + END_SCREEN_SECONDS
        if seconds != self.finish_time:
            return
        self.finish_time = -1
        level = self.current_level
        if level in (1, 2):
            next_level = level + 1 if self.level_won else level
        else:
            next_level = 3
        self.set_level(LEVEL_FILES[next_level])
        self.current_level = next_level

    def update(self, elapsed: float) -> None:
        """Advance the clock, Sparty and messages, then check the board."""
        self.clock.add_time(elapsed)
        if self.sparty is not None:
            self.sparty.update(elapsed)

        for message in self.error_messages:
            message.update(elapsed)
        self.error_messages = [m for m in self.error_messages if not m.should_be_deleted]

        if not self.startup:
            self.update_board()
            self.check_solution()

    def _to_virtual(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.x_offset) / self.scale, (y - self.y_offset) / self.scale

    def mouse_move(self, x: float, y: float) -> None:
        """Move the spotlight to the mouse position given in window pixels."""
        virtual_x, virtual_y = self._to_virtual(x, y)
        if self.within_width(virtual_x) and self.within_height(virtual_y):
            self.spotlight_location = Point(int(virtual_x), int(virtual_y))

    def left_down(self, x: float, y: float) -> None:
        """Send Sparty towards a click given in window pixels."""
        if self.startup or self.level_won:
            return
        virtual_x, virtual_y = self._to_virtual(x, y)
        if (
            self.sparty is not None
            and self.within_width(virtual_x)
            and self.within_height(virtual_y)
        ):
            self.sparty.move_to_point(Point(int(virtual_x), int(virtual_y)))

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Replace the current level with the one in ``filename``.

        Raises LevelError when the file cannot be read; the game is then unchanged.
        """
        level = read_level(filename)
        self.clear()

        self.tile_width = level.tile_width
        self.tile_height = level.tile_height
        self.game_width = level.width
        self.game_height = level.height

        self.declarations = dict(level.declarations)
        for declaration_id, declaration in self.declarations.items():
            if declaration.tag != "audio":
                self._image_paths[declaration_id] = declaration_asset_path(declaration)
                self._images.pop(declaration_id, None)

        for node in level.items:
            item = create_item(self, self.declarations.get(node.get("id", "")), node)
            if item is None:
                continue
            if isinstance(item, XRay):
                self.xray = item
            elif isinstance(item, Sparty):
                self.sparty = item
            elif isinstance(item, Spotlight):
                self.spotlight = item
            self.add_item(item)

        if level.solution is not None:
            self.solution.load(level.solution)

        self.startup = True

    def clear(self) -> None:
        """Remove every item and forget the level's declarations."""
        self.declarations.clear()

        audio_visitor = AudioVisitor()
        self.accept(audio_visitor)
        if audio_visitor.audio is not None:
            audio_visitor.audio.stop()

        self.items.clear()
        self._background_blank = True
        if self._background_image is not None:
            self._background_image.fill(BLACK)
        self.level_won = False
        self.level_lost = False
        self.sparty = None
        self.spotlight = None
        self.xray = None

    def within_width(self, x: float) -> bool:
        return 0 <= x <= self.pixel_width

    def within_height(self, y: float) -> bool:
        return 0 <= y <= self.pixel_height

    def set_level(self, filename: str) -> None:
        """Start the level in ``filename``; its first digit names the level."""
        self.clear()
        self.startup = True
        digit = next((char for char in str(filename) if char.isdigit()), None)
        if digit is not None:
            self.current_level = int(digit)
        self.clock.reset()
        self.load(filename)

    def key_down(self, key_code: int) -> None:
        """Handle a key: space eats, digits put a number down, B headbutts."""
        if self.startup or self.level_won or self.sparty is None:
            return
        sparty = self.sparty

        if key_code == KEY_SPACE:
            sparty.make_eat()
            if not sparty.is_moving():
                self._eat(sparty.target_point)
        elif KEY_ZERO <= key_code <= KEY_NINE:
            if not sparty.is_moving():
                self._regurgitate(sparty, key_code - KEY_ZERO)
        elif key_code == KEY_B:
            sparty.make_headbutt()
            if not sparty.is_moving():
                target = sparty.target_point
                visitor = ContainerVisitor()
                self.accept(visitor)
                for container in visitor.containers:
                    if container.hit_test(target.x, target.y):
                        container.release()

    def _eat(self, target: Point) -> None:
        if self.xray is None:
            return
        visitor = InteractiveVisitor()
        self.accept(visitor)
        if self.xray.is_full():
            self.error_messages.append(
                ImFullMessage(Point(int(self.width / 2), int(self.height)))
            )
            return
        for item in visitor.found:
            if self.xray.contains(item):
                continue
            if item.hit_test(target.x, target.y):
                self.xray.add(item)
                break

    def _regurgitate(self, sparty: Sparty, value: int) -> None:
        if self.xray is None:
            return
        x = int(sparty.target_point.x)
        y = int(sparty.target_point.y)
        origin = self.solution.board_position
        col = int(origin.x * self.tile_width)
        row = int(origin.y * self.tile_height)

        item = self.xray.find(value)
        if item is None:
            return

        numbers = NumbersVisitor()
        self.accept(numbers)
        if any(number.hit_test(x, y) for number in numbers.found):
            return

        sparty.make_eat()
        if (
            col <= x <= col + self.tile_width * BOARD_SIZE
            and row <= y <= row + self.tile_height * BOARD_SIZE
        ):
            snapped_x = int(x / self.tile_width) * self.tile_width
            snapped_y = int(y / self.tile_height) * self.tile_height
            item.set_location(snapped_x, snapped_y)
        else:
            item.set_location(x, y)
        self.xray.remove(item)

    def startup_text(self) -> str:
        """Heading shown while a level starts."""
        if self.current_level in (1, 2, 3):
            return f"Level {self.current_level} Begin"
        return "Unknown Level"

    def tutorial_prompt(self, graphics: Graphics) -> None:
        """Draw the box naming the level and the keys to use."""
        graphics.set_brush(WHITE)
        graphics.set_pen(BLACK)

        rect_width = self.pixel_width / 1.5
        rect_height = self.pixel_height / 2.5
        rect_x = self.pixel_width / 2 - rect_width / 2
        rect_y = self.pixel_height / 2 - rect_height / 2
        graphics.draw_rectangle(rect_x, rect_y, rect_width, rect_height)
        centre_x = rect_x + rect_width / 2

        graphics.set_font(TITLE_FONT_SIZE, GREEN)
        title = self.startup_text()
        title_width, title_height = graphics.text_extent(title)
        graphics.draw_text(title, centre_x - title_width / 2, rect_y)

        graphics.set_font(GUIDE_FONT_SIZE, BLACK)
        line_height = graphics.text_extent(GUIDE_LINES[0])[1]
        for index, line in enumerate(GUIDE_LINES):
            line_width = graphics.text_extent(line)[0]
            graphics.draw_text(
                line,
                centre_x - line_width / 2,
                rect_y + title_height + line_height * index,
            )

    def draw_end_screen(self, graphics: Graphics, text: str) -> None:
        """Draw ``text`` centred on the playing area."""
        graphics.set_font(END_FONT_SIZE, GREEN)
        text_width, text_height = graphics.text_extent(text)
        x = int((int(self.width) - text_width) / 2)
        y = int((int(self.height) - text_height) / 2)
        graphics.draw_text(text, x, y)

    def update_board(self) -> None:
        """Record which number sits on each board cell; empty cells hold 9."""
        origin = self.solution.board_position
        visitor = NumbersVisitor()
        self.accept(visitor)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                x = (origin.x + col) * self.tile_width
                y = (origin.y + row) * self.tile_height
                value = EMPTY_CELL
                for number in visitor.found:
                    if number.hit_test(x, y):
                        value = number.value
                self.board[row][col] = value

    def check_solution(self) -> None:
        """Mark the level won when the board matches, lost when it is full and wrong."""
        identical = True
        full = True
        for expected_row, actual_row in zip(self.solution.numbers, self.board):
            mismatch = next(
                (actual for expected, actual in zip(expected_row, actual_row)
                 if expected != actual),
                None,
            )
            if mismatch is not None:
                identical = False
                if mismatch == EMPTY_CELL:
                    full = False
        if identical:
            self.level_won = True
        if full and not identical:
            self.level_lost = True
        self.clock.record_score()

    def solve(self) -> None:
        """Move free interactive numbers onto every empty board cell."""
        origin = self.solution.board_position
        visitor = InteractiveVisitor()
        self.accept(visitor)
        self.update_board()

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.board[row][col] != EMPTY_CELL:
                    continue
                wanted = self.solution.value(row, col)
                for item in visitor.found:
                    if item.value != wanted or item.on_board(origin):
                        continue
                    if self.xray is not None and self.xray.contains(item):
                        continue
                    item.set_location(
                        (origin.x + col) * self.tile_width,
                        (origin.y + row) * self.tile_height,
                    )
                    break