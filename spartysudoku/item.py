"""Base class for everything placed in the game, and the drawing interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol
from xml.etree.ElementTree import Element

if TYPE_CHECKING:
    from .visitor import Visitor

Colour = tuple[int, int, int]

WHITE: Colour = (255, 255, 255)
BLACK: Colour = (0, 0, 0)
RED: Colour = (255, 0, 0)
GREEN: Colour = (77, 167, 57)

BOARD_SIZE = 9


@dataclass(frozen=True)
class Point:
    """A position in virtual pixels or in tiles."""

    x: float = 0
    y: float = 0


class Graphics(Protocol):
    """The drawing operations the game needs from a graphics back end."""

    def push_state(self) -> None: ...

    def pop_state(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def set_brush(self, colour: Colour) -> None: ...

    def set_pen(self, colour: Colour, width: int = 1) -> None: ...

    def set_font(self, size: int, colour: Colour, bold: bool = True) -> None: ...

    def draw_rectangle(self, x: float, y: float, width: float, height: float) -> None: ...

    def draw_image(self, image: Any, x: float, y: float, width: float, height: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def text_extent(self, text: str) -> tuple[float, float]: ...


class Item(ABC):
    """An object in the game, drawn from the image of its declaration."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        self.game = game
        self.declaration = declaration
        self.declaration_id = node.get("id", "")
        self.position = Point(0.0, 0.0)

    @property
    def image(self) -> Any:
        """The image loaded for this item's declaration."""
        return self.game.image(self.declaration_id)

    @property
    def width(self) -> float:
        return float(self.image.get_width())

    @property
    def height(self) -> float:
        return float(self.image.get_height())

    @property
    def x(self) -> float:
        """Left edge where the item is drawn."""
        return self.position.x

    @property
    def y(self) -> float:
        """Top edge where the item is drawn."""
        return self.position.y

    def set_location(self, x: float, y: float) -> None:
        self.position = Point(x, y)

    def draw(self, graphics: Graphics) -> None:
        """Draw the item's image at its location."""
        graphics.draw_image(self.image, self.x, self.y, self.width, self.height)

    def on_board(self, point: Point) -> bool:
        """Whether the item covers a cell of the board whose origin tile is ``point``."""
        tile_width = self.game.tile_width
        tile_height = self.game.tile_height
        return any(
            self.hit_test((point.x + col) * tile_width, (point.y + row) * tile_height)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
        )

    def hit_test(self, x: float, y: float) -> bool:
        """Whether the point lies within the item's bounds."""
        left, top = self.position.x, self.position.y
        return left <= x < left + self.width and top <= y < top + self.height

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Pass this item to the matching method of ``visitor``."""