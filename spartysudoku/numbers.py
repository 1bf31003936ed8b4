"""Numbers on the board: fixed given numbers and numbers Sparty can eat."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.etree.ElementTree import Element

from .item import Graphics, Item

if TYPE_CHECKING:
    from .visitor import Visitor

XRAY_SCALE = 0.6


class Number(Item):
    """An item that carries a digit value from its declaration."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        super().__init__(game, declaration, node)
        self.value = int(declaration.get("value", "0"))


class GivenNumber(Number):
    """A number fixed on the board from the start of the level."""

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_given(self)


class InteractNumber(Number):
    """A number that Sparty can eat, carry and put down again."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        super().__init__(game, declaration, node)
        self.in_xray = False

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_interact(self)

    def draw(self, graphics: Graphics) -> None:
        """Draw the number, shrunk while it sits in the x-ray."""
        if self.in_xray:
            graphics.draw_image(
                self.image,
                self.x,
                self.y,
                self.width * XRAY_SCALE,
                self.height * XRAY_SCALE,
            )
        else:
            super().draw(graphics)