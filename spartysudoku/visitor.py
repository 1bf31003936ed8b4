"""Visitors that walk the game's items and collect those of one kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .container import Container
    from .numbers import GivenNumber, InteractNumber, Number
    from .scenery import AudioPlayer, Background, Spotlight
    from .sparty import Sparty
    from .xray import XRay


class Visitor:
    """Base visitor; items a subclass does not collect are noted in ``ignored``."""

    def __init__(self) -> None:
        self.ignored: list[Any] = []

    def _ignore(self, item: Any) -> None:
        self.ignored.append(item)

    def visit_interact(self, item: InteractNumber) -> None:
        """Visit a number that Sparty can eat."""
        self._ignore(item)

    def visit_given(self, item: GivenNumber) -> None:
        """Visit a fixed number on the board."""
        self._ignore(item)

    def visit_background(self, item: Background) -> None:
        """Visit a background item."""
        self._ignore(item)

    def visit_container(self, item: Container) -> None:
        """Visit a container."""
        self._ignore(item)

    def visit_xray(self, item: XRay) -> None:
        """Visit the x-ray."""
        self._ignore(item)

    def visit_sparty(self, item: Sparty) -> None:
        """Visit Sparty."""
        self._ignore(item)

    def visit_audio_player(self, item: AudioPlayer) -> None:
        """Visit the audio player."""
        self._ignore(item)

    def visit_spotlight(self, item: Spotlight) -> None:
        """Visit the spotlight."""
        self._ignore(item)


class ContainerVisitor(Visitor):
    """Collects every container."""

    def __init__(self) -> None:
        super().__init__()
        self.containers: list[Container] = []

    def visit_container(self, item: Container) -> None:
        self.containers.append(item)


class InteractiveVisitor(Visitor):
    """Collects every number that can be eaten."""

    def __init__(self) -> None:
        super().__init__()
        self.found: list[InteractNumber] = []

    def visit_interact(self, item: InteractNumber) -> None:
        self.found.append(item)


class NumbersVisitor(Visitor):
    """Collects every number, given or interactive, in visiting order."""

    def __init__(self) -> None:
        super().__init__()
        self.found: list[Number] = []

    def visit_interact(self, item: InteractNumber) -> None:
        self.found.append(item)

    def visit_given(self, item: GivenNumber) -> None:
        self.found.append(item)


class AudioVisitor(Visitor):
    """Finds the audio player; the last one visited wins."""

    def __init__(self) -> None:
        super().__init__()
        self.audio: AudioPlayer | None = None

    def visit_audio_player(self, item: AudioPlayer) -> None:
        self.audio = item