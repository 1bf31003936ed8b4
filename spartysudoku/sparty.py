"""Sparty, the character the player moves around the board."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any
from xml.etree.ElementTree import Element

import pygame

from .item import Graphics, Item, Point

if TYPE_CHECKING:
    from .visitor import Visitor

MAX_SPEED = 400.0
EATING_TIME = 0.5
HEADBUTT_TIME = 0.5


def _swing_angle(elapsed: float, duration: float, full_angle: float) -> float:
    """Angle that rises to ``full_angle`` halfway through and falls back."""
    half = duration / 2
    if elapsed < half:
        return elapsed / half * full_angle
    return (duration - elapsed) / half * full_angle


class Sparty(Item):
    """The player's character: a head and a mouth that move and animate."""

    def __init__(self, game: Any, declaration: Element, node: Element) -> None:
        super().__init__(game, declaration, node)
        self.mouth_image_path = "images/" + declaration.get("image2", "")
        self._mouth_image: Any = None

        self.head_pivot_angle = float(declaration.get("head-pivot-angle", "0"))
        self.head_pivot = Point(
            int(declaration.get("head-pivot-x", "0")),
            int(declaration.get("head-pivot-y", "0")),
        )
        self.mouth_pivot_angle = float(declaration.get("mouth-pivot-angle", "0"))
        self.mouth_pivot = Point(
            int(declaration.get("mouth-pivot-x", "0")),
            int(declaration.get("mouth-pivot-y", "0")),
        )
        self.target_offset = Point(
            int(declaration.get("target-x", "0")),
            int(declaration.get("target-y", "0")),
        )
        self.front = int(declaration.get("front", "1"))

        self.eating = False
        self._eating_elapsed = 0.0
        self.headbutting = False
        self._headbutt_elapsed = 0.0
        self.mouth_angle = 0.0
        self.head_angle = 0.0
        self.target_point = Point(0, 0)

    @property
    def mouth_image(self) -> Any:
        """The mouth image, loaded on first use."""
        if self._mouth_image is None:
            self._mouth_image = pygame.image.load(self.mouth_image_path)
        return self._mouth_image

    @property
    def x(self) -> float:
        return self.position.x - self.target_offset.x

    @property
    def y(self) -> float:
        return self.position.y - self.height + self.target_offset.y

    def move_to_point(self, target: Point) -> None:
        """Set the point Sparty walks towards."""
        self.target_point = Point(int(target.x), int(target.y))

    def make_eat(self) -> None:
        self.eating = True

    def make_headbutt(self) -> None:
        self.headbutting = True

    def is_moving(self) -> bool:
        return (
            self.position.x != self.target_point.x
            or self.position.y != self.target_point.y
        )

    def draw(self, graphics: Graphics) -> None:
        """Draw head and mouth, each rotated about its pivot."""
        mouth = self.mouth_image
        mouth_width = mouth.get_width()
        mouth_height = mouth.get_height()
        head_x = self.x + self.head_pivot.x
        head_y = self.y + self.head_pivot.y
        mouth_x = self.x + self.mouth_pivot.x
        mouth_y = self.y + self.mouth_pivot.y

        graphics.push_state()
        graphics.translate(head_x, head_y)
        graphics.rotate(self.head_angle)
        graphics.translate(-head_x, -head_y)

        if self.front == 2:
            super().draw(graphics)

        graphics.push_state()
        graphics.translate(mouth_x, mouth_y)
        graphics.rotate(self.mouth_angle)
        graphics.translate(-mouth_x, -mouth_y)
        graphics.draw_image(mouth, self.x, self.y, mouth_width, mouth_height)
        graphics.pop_state()

        if self.front == 1:
            super().draw(graphics)

        graphics.pop_state()

    def update(self, elapsed: float) -> None:
        """Move towards the target and advance the eating and headbutt swings."""
        target = self.target_point
        delta_x = target.x - self.position.x
        delta_y = target.y - self.position.y
        length = math.hypot(delta_x, delta_y)
        step = MAX_SPEED * elapsed

        if length <= step:
            self.set_location(float(target.x), float(target.y))
        else:
            factor = step / length
            new_x = self.position.x + delta_x * factor
            new_y = self.position.y + delta_y * factor
            new_x = min(new_x, float(self.game.width - self.width / 2))
            new_y = min(new_y, float(self.game.height - self.height / 2))
            self.set_location(new_x, new_y)

        if self.eating:
            self._eating_elapsed += elapsed
            self.mouth_angle = _swing_angle(
                self._eating_elapsed, EATING_TIME, self.mouth_pivot_angle
            )
            if self._eating_elapsed >= EATING_TIME:
                self._eating_elapsed = 0.0
                self.eating = False
                self.mouth_angle = 0.0

        if self.headbutting:
            self._headbutt_elapsed += elapsed
            self.head_angle = _swing_angle(
                self._headbutt_elapsed, HEADBUTT_TIME, self.head_pivot_angle
            )
            if self._headbutt_elapsed >= HEADBUTT_TIME:
                self._headbutt_elapsed = 0.0
                self.headbutting = False
                self.head_angle = 0.0

    def accept(self, visitor: Visitor) -> None:
        visitor.visit_sparty(self)