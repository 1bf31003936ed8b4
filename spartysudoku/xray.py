"""The x-ray showing the numbers in Sparty's stomach."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.etree.ElementTree import Element

from .item import Graphics, Item

if TYPE_CHECKING:
    from .numbers import InteractNumber
    from .visitor import Visitor

XRAY_CAPACITY = 7


class XRay(Item):
    """Holds up to seven eaten numbers, scattered inside its image."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        super().__init__(game, declaration, node)
        self.capacity = XRAY_CAPACITY
        self._stomach: list[InteractNumber] = []

    @property
    def items(self) -> tuple[InteractNumber, ...]:
        """The numbers currently held, in the order they were eaten."""
        return tuple(self._stomach)

    def draw(self, graphics: Graphics) -> None:
        super().draw(graphics)

    def add(self, item: InteractNumber) -> None:
        """Put a number in the stomach at a random free spot; ignored when full."""
        if len(self._stomach) >= self.capacity:
            return

        rng = self.game.random
        low_x, high_x = self.x, self.x + self.width - item.width
        low_y, high_y = self.y, self.y + self.height - item.height

        while True:
            x = rng.uniform(low_x, high_x)
            y = rng.uniform(low_y, high_y)
            if not any(held.hit_test(x, y) for held in self._stomach):
                item.set_location(x, y)
                break

        self._stomach.append(item)
        item.in_xray = True

    def contains(self, item: InteractNumber) -> bool:
        return any(held is item for held in self._stomach)

    def remove(self, item: InteractNumber) -> None:
        """Take a number out of the stomach if it is there."""
        for index, held in enumerate(self._stomach):
            if held is item:
                item.in_xray = False
                del self._stomach[index]
                return

    def find(self, value: int) -> InteractNumber | None:
        """The first held number with the given value, or None."""
        return next((held for held in self._stomach if held.value == value), None)

    def is_full(self) -> bool:
        return len(self._stomach) == self.capacity

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_xray(self)