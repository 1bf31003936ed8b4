import xml.etree.ElementTree as ET

import pytest

from spartysudoku.item import Point
from spartysudoku.numbers import XRAY_SCALE, GivenNumber, InteractNumber, Number
from spartysudoku.visitor import InteractiveVisitor, NumbersVisitor


class FakeImage:
    def __init__(self, width, height):
        self._width = width
        self._height = height

    def get_width(self):
        return self._width

    def get_height(self):
        return self._height


class FakeGame:
    tile_width = 48
    tile_height = 48

    def __init__(self):
        self.images = {"n5": FakeImage(48, 48)}

    def image(self, declaration_id):
        return self.images[declaration_id]


class RecordingGraphics:
    def __init__(self):
        self.calls = []

    def draw_image(self, image, x, y, width, height):
        self.calls.append((image, x, y, width, height))


def make(cls, value="5", game=None):
    declaration = ET.fromstring(f'<digit id="n5" value="{value}" image="5r.png"/>')
    node = ET.fromstring('<digit id="n5" col="1" row="2"/>')
    return cls(game or FakeGame(), declaration, node)


def test_value_read_from_declaration():
    assert make(GivenNumber, "7").value == 7


def test_missing_value_defaults_to_zero():
    declaration = ET.fromstring('<digit id="n5" image="5r.png"/>')
    node = ET.fromstring('<digit id="n5"/>')
    assert InteractNumber(FakeGame(), declaration, node).value == 0


def test_malformed_value_raises():
    with pytest.raises(ValueError):
        make(GivenNumber, "five")


def test_value_can_be_changed():
    number = make(InteractNumber, "2")
    number.value = 8
    assert number.value == 8


def test_number_itself_is_abstract():
    with pytest.raises(TypeError):
        make(Number)


def test_declaration_id_taken_from_node():
    assert make(GivenNumber).declaration_id == "n5"


def test_given_number_visits_as_given():
    given = make(GivenNumber)
    numbers = NumbersVisitor()
    interactive = InteractiveVisitor()
    given.accept(numbers)
    given.accept(interactive)
    assert numbers.found == [given]
    assert interactive.found == []


def test_interact_number_visits_as_interact():
    number = make(InteractNumber)
    numbers = NumbersVisitor()
    interactive = InteractiveVisitor()
    number.accept(numbers)
    number.accept(interactive)
    assert numbers.found == [number]
    assert interactive.found == [number]


def test_interact_number_starts_outside_xray():
    assert make(InteractNumber).in_xray is False


def test_draw_full_size_outside_xray():
    game = FakeGame()
    number = make(InteractNumber, game=game)
    number.set_location(10, 20)
    graphics = RecordingGraphics()
    number.draw(graphics)
    assert graphics.calls == [(game.images["n5"], 10, 20, 48.0, 48.0)]


def test_draw_shrunk_inside_xray():
    number = make(InteractNumber)
    number.set_location(10, 20)
    number.in_xray = True
    graphics = RecordingGraphics()
    number.draw(graphics)
    (_, x, y, width, height), = graphics.calls
    assert (x, y) == (10, 20)
    assert width / number.width == pytest.approx(XRAY_SCALE)
    assert height / number.height == pytest.approx(XRAY_SCALE)


def test_on_board_when_covering_a_cell():
    number = make(GivenNumber)
    number.set_location(3 * 48, 4 * 48)
    assert number.on_board(Point(0, 0)) is True


def test_not_on_board_when_far_away():
    number = make(GivenNumber)
    number.set_location(20 * 48, 20 * 48)
    assert number.on_board(Point(0, 0)) is False