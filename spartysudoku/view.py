"""The game window: drawing, input handling, menu commands and the entry point."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable

import pygame

from .game import LEVEL_FILES, Game
from .item import BLACK, WHITE, Colour
from .loader import LevelError

WINDOW_TITLE = "Game"
WINDOW_SIZE = (900, 700)
FRAME_RATE = 120

ABOUT_TEXT = "Welcome to Sparty Action Sudoku!"
NOTICE_FONT_SIZE = 24
NOTICE_MARGIN = 10


class MenuCommand(Enum):
    """Commands the window's menu and shortcuts offer."""

    OPEN = "open"
    EXIT = "exit"
    SOLVE = "solve"
    ABOUT = "about"
    LEVEL_ONE = "level-1"
    LEVEL_TWO = "level-2"
    LEVEL_THREE = "level-3"


_LEVEL_COMMANDS = {
    MenuCommand.LEVEL_ONE: 1,
    MenuCommand.LEVEL_TWO: 2,
    MenuCommand.LEVEL_THREE: 3,
}


@dataclass(frozen=True)
class _Transform:
    """An affine transform: x' = a*x + c*y + e, y' = b*x + d*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f

    def translated(self, dx: float, dy: float) -> _Transform:
        return replace(
            self,
            e=self.e + self.a * dx + self.c * dy,
            f=self.f + self.b * dx + self.d * dy,
        )

    def scaled(self, sx: float, sy: float) -> _Transform:
        return replace(self, a=self.a * sx, b=self.b * sx, c=self.c * sy, d=self.d * sy)

    def rotated(self, angle: float) -> _Transform:
        cos, sin = math.cos(angle), math.sin(angle)
        return replace(
            self,
            a=self.a * cos + self.c * sin,
            b=self.b * cos + self.d * sin,
            c=self.c * cos - self.a * sin,
            d=self.d * cos - self.b * sin,
        )

    @property
    def x_scale(self) -> float:
        return math.hypot(self.a, self.b)

    @property
    def y_scale(self) -> float:
        return math.hypot(self.c, self.d)

    @property
    def angle(self) -> float:
        return math.atan2(self.b, self.a)


@dataclass(frozen=True)
class _State:
    transform: _Transform = field(default_factory=_Transform)
    brush: Colour = WHITE
    pen: Colour = BLACK
    pen_width: int = 1
    font_size: int = 12
    font_colour: Colour = BLACK
    bold: bool = True


class PygameGraphics:
    """Draws the game onto a pygame surface with a stack of transforms."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._state = _State()
        self._stack: list[_State] = []
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def push_state(self) -> None:
        self._stack.append(self._state)

    def pop_state(self) -> None:
        if not self._stack:
            raise IndexError("pop_state without a matching push_state")
        self._state = self._stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._state = replace(self._state, transform=self._state.transform.translated(dx, dy))

    def scale(self, sx: float, sy: float) -> None:
        self._state = replace(self._state, transform=self._state.transform.scaled(sx, sy))

    def rotate(self, angle: float) -> None:
        self._state = replace(self._state, transform=self._state.transform.rotated(angle))

    def set_brush(self, colour: Colour) -> None:
        self._state = replace(self._state, brush=colour)

    def set_pen(self, colour: Colour, width: int = 1) -> None:
        self._state = replace(self._state, pen=colour, pen_width=width)

    def set_font(self, size: int, colour: Colour, bold: bool = True) -> None:
        self._state = replace(self._state, font_size=size, font_colour=colour, bold=bold)

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        size = max(1, int(size))
        key = (size, bold)
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self._fonts[key] = font
        return font

    def draw_rectangle(self, x: float, y: float, width: float, height: float) -> None:
        """Fill a rectangle with the brush and outline it with the pen."""
        transform = self._state.transform
        corners = [
            transform.apply(x, y),
            transform.apply(x + width, y),
            transform.apply(x + width, y + height),
            transform.apply(x, y + height),
        ]
        pygame.draw.polygon(self.surface, self._state.brush, corners)
        outline = max(1, round(self._state.pen_width * transform.x_scale))
        pygame.draw.polygon(self.surface, self._state.pen, corners, outline)

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None:
        """Draw ``image`` stretched to the given box, following the transform."""
        transform = self._state.transform
        size = (round(width * transform.x_scale), round(height * transform.y_scale))
        if size[0] <= 0 or size[1] <= 0:
            return
        picture = pygame.transform.scale(image, size)
        angle = transform.angle
        if abs(angle) > 1e-9:
            picture = pygame.transform.rotate(picture, -math.degrees(angle))
        centre_x, centre_y = transform.apply(x + width / 2, y + height / 2)
        self.surface.blit(
            picture,
            (centre_x - picture.get_width() / 2, centre_y - picture.get_height() / 2),
        )

    def draw_text(self, text: str, x: float, y: float) -> None:
        transform = self._state.transform
        font = self._font(self._state.font_size * transform.y_scale, self._state.bold)
        rendered = font.render(text, True, self._state.font_colour)
        self.surface.blit(rendered, transform.apply(x, y))

    def text_extent(self, text: str) -> tuple[float, float]:
        """Width and height of ``text`` in the current font, before transforming."""
        width, height = self._font(self._state.font_size, self._state.bold).size(text)
        return float(width), float(height)


def _ask_for_level_file() -> str | None:
    """Ask the user for a level file; None when cancelled or no dialog exists."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError:
        return None
    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        return None
    try:
        root.withdraw()
        path = filedialog.askopenfilename(
            parent=root,
            title="Load Game file",
            filetypes=[("Game Files", "*.xml")],
        )
    finally:
        root.destroy()
    return path or None


def _shortcut(key: int, mod: int) -> MenuCommand | None:
    """The menu command bound to a key combination, if any."""
    if key == pygame.K_F1:
        return MenuCommand.ABOUT
    if mod & pygame.KMOD_ALT and key == pygame.K_x:
        return MenuCommand.EXIT
    if mod & pygame.KMOD_CTRL:
        return {
            pygame.K_f: MenuCommand.OPEN,
            pygame.K_o: MenuCommand.SOLVE,
            pygame.K_1: MenuCommand.LEVEL_ONE,
            pygame.K_2: MenuCommand.LEVEL_TWO,
            pygame.K_3: MenuCommand.LEVEL_THREE,
        }.get(key)
    return None


def _game_key_code(key: int) -> int:
    """Key codes as the game expects them: letters upper case, digits as ASCII."""
    if pygame.K_a <= key <= pygame.K_z:
        return key - pygame.K_a + ord("A")
    return key


class GameView:
    """Owns a game, feeds it time and input, and paints it each frame."""

    def __init__(
        self,
        game: Game | None = None,
        *,
        timer: Callable[[], float] = time.monotonic,
        choose_file: Callable[[], str | os.PathLike[str] | None] | None = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self._timer = timer
        self._last_time = timer()
        self._choose_file = choose_file if choose_file is not None else _ask_for_level_file
        self.running = True
        self.notice: str | None = None

    def paint(self, surface: pygame.Surface) -> None:
        """Advance the game by the time since the last paint and draw it."""
        surface.fill(BLACK)
        now = self._timer()
        elapsed = now - self._last_time
        self._last_time = now

        width, height = surface.get_size()
        if min(width, height) == 0:
            return

        graphics = PygameGraphics(surface)
        graphics.push_state()
        try:
            self.game.update(elapsed)
            self.game.draw(graphics, width, height)
        except LevelError as exc:
            self.notice = str(exc)
        finally:
            graphics.pop_state()

        if self.notice:
            graphics.set_font(NOTICE_FONT_SIZE, WHITE, bold=False)
            text_height = graphics.text_extent(self.notice)[1]
            graphics.draw_text(self.notice, NOTICE_MARGIN, height - text_height - NOTICE_MARGIN)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route one pygame event; returns whether the window keeps running."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            self.game.mouse_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.notice:
                self.notice = None
            elif event.button == 1:
                self.game.left_down(*event.pos)
        elif event.type == pygame.KEYDOWN:
            if self.notice:
                self.notice = None
            else:
                command = _shortcut(event.key, event.dict.get("mod", 0))
                if command is not None:
                    self.run_command(command)
                else:
                    self.game.key_down(_game_key_code(event.key))
        return self.running

    def _open(self, path: str | os.PathLike[str]) -> None:
        try:
            self.game.load(path)
        except LevelError as exc:
            self.notice = str(exc)

    def run_command(self, command: MenuCommand) -> None:
        """Carry out a menu command."""
        if command is MenuCommand.EXIT:
            self.running = False
        elif command is MenuCommand.ABOUT:
            self.notice = ABOUT_TEXT
        elif command is MenuCommand.OPEN:
            path = self._choose_file()
            if path:
                self._open(path)
        elif command is MenuCommand.SOLVE:
            self.game.solve()
        else:
            try:
                self.game.set_level(LEVEL_FILES[_LEVEL_COMMANDS[command]])
            except LevelError as exc:
                self.notice = str(exc)

    def run(self) -> int:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            frames = pygame.time.Clock()
            self.running = True
            self._last_time = self._timer()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.paint(surface)
                pygame.display.flip()
                frames.tick(FRAME_RATE)
        finally:
            self.game.clear()
            pygame.quit()
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="spartysudoku", description="Sparty Action Sudoku.")
    parser.add_argument("--level", type=int, choices=sorted(LEVEL_FILES), help="level to start on")
    parser.add_argument("file", nargs="?", help="level file to open")
    args = parser.parse_args(argv)

    pygame.init()
    view = GameView()
    if args.level is not None:
        command = next(c for c, n in _LEVEL_COMMANDS.items() if n == args.level)
        view.run_command(command)
    elif args.file:
        view._open(args.file)
    if view.notice:
        print(view.notice, file=sys.stderr)
    return view.run()