"""Reading level files and building the items they declare."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from .container import Container
from .item import Item, Point
from .numbers import GivenNumber, InteractNumber
from .scenery import AudioPlayer, Background, Spotlight
from .sparty import Sparty
from .xray import XRay

_ITEM_TYPES: dict[str, type[Item]] = {
    "given": GivenNumber,
    "digit": InteractNumber,
    "background": Background,
    "container": Container,
    "xray": XRay,
    "sparty": Sparty,
    "spotlight": Spotlight,
    "audio": AudioPlayer,
}

# Items whose row gives the tile their bottom edge sits on.
_BOTTOM_ALIGNED = frozenset({"background", "container", "xray"})


class LevelError(ValueError):
    """A level file that cannot be read or holds invalid data."""


@dataclass
class LevelFile:
    """The contents of a level file."""

    tile_width: int = 1
    tile_height: int = 1
    width: float = 1.0
    height: float = 1.0
    declarations: dict[str, Element] = field(default_factory=dict)
    items: list[Element] = field(default_factory=list)
    solution: Element | None = None


def _number(node: Element, name: str, default: str, kind: type) -> Any:
    text = node.get(name, default)
    try:
        return kind(text)
    except ValueError as exc:
        raise LevelError(f"attribute {name}={text!r} of <{node.tag}> is invalid") from exc


def read_level(filename: str | os.PathLike[str]) -> LevelFile:
    """Parse a level file into its dimensions, declarations, items and solution."""
    try:
        root = ElementTree.parse(filename).getroot()
    except (OSError, ElementTree.ParseError) as exc:
        raise LevelError(f"Unable to load Game file: {exc}") from exc

    level = LevelFile(
        tile_width=_number(root, "tilewidth", "1", int),
        tile_height=_number(root, "tileheight", "1", int),
        width=_number(root, "width", "1", float),
        height=_number(root, "height", "1", float),
    )
    for child in root:
        if child.tag == "declarations":
            for declaration in child:
                level.declarations[declaration.get("id", "0")] = declaration
        elif child.tag == "items":
            level.items.extend(child)
        elif child.tag == "game":
            level.solution = child
    return level


def declaration_asset_path(declaration: Element) -> str:
    """The image or sound file a declaration refers to."""
    if declaration.tag == "sparty":
        return "images/" + declaration.get("image1", "")
    if declaration.tag == "audio":
        return "audio/" + declaration.get("file", "")
    return "images/" + declaration.get("image", "")


def create_item(game: Any, declaration: Element | None, node: Element) -> Item | None:
    """Build and place the item an ``items`` entry describes; None for unknown kinds."""
    name = node.tag
    kind = _ITEM_TYPES.get(name)
    if kind is None:
        return None
    if declaration is None:
        raise LevelError(f"<{name}> refers to undeclared id {node.get('id', '')!r}")

    item = kind(game, declaration, node)
    if name == "audio":
        return item

    col = _number(node, "col", "0", float)
    row = _number(node, "row", "0", float)
    height = _number(declaration, "height", "0", float)
    tile_width = game.tile_width
    tile_height = game.tile_height

    if name in _BOTTOM_ALIGNED:
        item.set_location(col * tile_height, (row + 1) * tile_height - height)
    else:
        item.set_location(col * tile_height, row * tile_height)
        if isinstance(item, Sparty):
            item.set_location(col * tile_width, row * tile_height)
            item.move_to_point(Point(col * tile_width, row * tile_height))
    return item