"""The floating "I'm Full!" message shown when the x-ray has no room."""

from __future__ import annotations

from .item import BLACK, RED, WHITE, Graphics, Point

MESSAGE_TEXT = "I'm Full!"
MESSAGE_SPEED = 200.0
MESSAGE_WIDTH = 100.0
MESSAGE_HEIGHT = 50.0
MESSAGE_FONT_SIZE = 24


class ImFullMessage:
    """A message box that rises up the screen until it leaves the top."""

    def __init__(self, position: Point) -> None:
        self.position = Point(int(position.x), int(position.y))
        self._delete_me = False

    @property
    def should_be_deleted(self) -> bool:
        """True once the message has risen above the top of the game."""
        return self._delete_me

    def update(self, elapsed: float) -> None:
        """Move the message up by the distance covered in ``elapsed`` seconds."""
        new_y = int(self.position.y - MESSAGE_SPEED * elapsed)
        self.position = Point(self.position.x, new_y)
        if new_y < 0:
            self._delete_me = True

    def draw(self, graphics: Graphics) -> None:
        """Draw a white box with the red message centred in it."""
        left = int(self.position.x - MESSAGE_WIDTH / 2)
        top = int(self.position.y - MESSAGE_HEIGHT / 2)
        width, height = int(MESSAGE_WIDTH), int(MESSAGE_HEIGHT)

        graphics.set_brush(WHITE)
        graphics.set_pen(BLACK, 2)
        graphics.draw_rectangle(left, top, width, height)

        graphics.set_font(MESSAGE_FONT_SIZE, RED, bold=False)
        text_width, text_height = graphics.text_extent(MESSAGE_TEXT)
        text_x = int(left + (width - text_width) / 2)
        text_y = int(top + (height - text_height) / 2)
        graphics.draw_text(MESSAGE_TEXT, text_x, text_y)