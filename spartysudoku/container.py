"""Containers that hold numbers until Sparty headbutts them open."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.etree.ElementTree import Element

import pygame

from .item import Graphics, Item
from .numbers import InteractNumber

if TYPE_CHECKING:
    from .visitor import Visitor


def _coordinate(node: Element, name: str) -> float:
    """A numeric attribute of ``node``, zero when it is absent."""
    text = node.get(name, "0")
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"attribute {name}={text!r} is not a number") from exc


class Container(Item):
    """A box drawn in two layers with numbers hidden between them."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        super().__init__(game, declaration, node)
        self.back_image = pygame.image.load("images/" + declaration.get("image", ""))
        self.front_image = pygame.image.load("images/" + declaration.get("front", ""))
        self._items: list[Item] = []

        for child in node:
            child_id = child.get("id", "0")
            child_declaration = game.declarations.get(child_id)
            if child_declaration is None:
                raise ValueError(f"container holds undeclared item {child_id!r}")
            number = InteractNumber(game, child_declaration, child)
            number.set_location(
                _coordinate(child, "col") * game.tile_width,
                _coordinate(child, "row") * game.tile_height,
            )
            self._items.append(number)

    @property
    def items(self) -> tuple[Item, ...]:
        """The items currently inside the container."""
        return tuple(self._items)

    @property
    def width(self) -> float:
        return float(self.back_image.get_width())

    @property
    def height(self) -> float:
        return float(self.back_image.get_height())

    def set_location(self, x: float, y: float) -> None:
        """Move the container; its contents stay where they are."""
        super().set_location(x, y)

    def add(self, item: Item) -> None:
        """Put an item inside the container at a random spot within its back image."""
        self._items.append(item)
        rng = self.game.random
        item.set_location(
            rng.uniform(self.x, self.x + self.width),
            rng.uniform(self.y, self.y + self.height),
        )

    def release(self) -> None:
        """Scatter every contained item above the container and hand it to the game."""
        game = self.game
        rng = game.random
        tile_width = game.tile_width
        tile_height = game.tile_height
        for item in self._items:
            item.set_location(
                rng.uniform(self.x - tile_width * 2, self.x + self.width + tile_width),
                rng.uniform(self.y - tile_height * 2, self.y),
            )
            game.add_item(item)
        self._items.clear()

    def draw(self, graphics: Graphics) -> None:
        """Draw the back, then the contents, then the front over them."""
        super().draw(graphics)
        for item in self._items:
            item.draw(graphics)
        graphics.draw_image(
            self.front_image,
            self.x,
            self.y,
            self.front_image.get_width(),
            self.front_image.get_height(),
        )

    def hit_test(self, x: float, y: float) -> bool:
        """Whether the point lies strictly inside the front image."""
        return (
            self.x < x < self.x + self.front_image.get_width()
            and self.y < y < self.y + self.front_image.get_height()
        )

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_container(self)