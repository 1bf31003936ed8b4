"""Items that dress the level: background, spotlight and music."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.etree.ElementTree import Element

import pygame

from .item import Graphics, Item

if TYPE_CHECKING:
    from .visitor import Visitor


def _load_sound(path: str) -> Any:
    """Load a sound, or return None when it cannot be played."""
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError, NotImplementedError):
        return None


class Background(Item):
    """A background image placed on the level."""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_background(self)


class Spotlight(Item):
    """A spotlight image that follows the mouse."""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_spotlight(self)


class AudioPlayer(Item):
    """Background music that restarts each time its length has passed."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        super().__init__(game, declaration, node)
        self.path = "audio/" + declaration.get("file", "")
        self.length = float(declaration.get("length", "0"))
        self.sound = _load_sound(self.path)
        self.clock = game.clock
        self.start_time = -1
        self.end_time = -1

    def draw(self, graphics: Graphics) -> None:
        """Play the sound when a loop is due; nothing is drawn."""
        if self.sound is None:
            return
        if self.start_time == -1:
            self.start_time = int(self.clock.seconds_text())
            self.end_time = int(self.start_time + self.length)
            self.sound.play()
        if int(self.clock.seconds_text()) >= self.end_time:
            self.start_time = -1

    def stop(self) -> None:
        if self.sound is not None:
            self.sound.stop()

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_audio_player(self)