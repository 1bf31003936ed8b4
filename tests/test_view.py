import pygame
import pytest

from spartysudoku.item import WHITE, Point
from spartysudoku.view import ABOUT_TEXT, GameView, MenuCommand, PygameGraphics, main

LEVEL_XML = """<level width="9" height="9" tilewidth="10" tileheight="10">
  <declarations>
    <given id="g1" image="g1.bmp" value="1"/>
    <digit id="d2" image="d2.bmp" value="2"/>
    <sparty id="sp" image1="head.bmp" image2="mouth.bmp" front="1"/>
    <xray id="xr" image="xray.bmp" height="20"/>
  </declarations>
  <items>
    <given id="g1" col="0" row="0"/>
    <digit id="d2" col="3" row="3"/>
    <sparty id="sp" col="4" row="4"/>
    <xray id="xr" col="0" row="8"/>
  </items>
</level>
"""

ITEM_COUNT = 4


def _save_image(path, size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture
def level_dir(tmp_path, monkeypatch):
    images = tmp_path / "images"
    images.mkdir()
    for name in ("g1.bmp", "d2.bmp", "head.bmp", "mouth.bmp"):
        _save_image(images / name, (10, 10), (200, 50, 50))
    _save_image(images / "xray.bmp", (20, 20), (50, 50, 200))
    levels = tmp_path / "LevelFiles"
    levels.mkdir()
    for name in ("Level1.xml", "level2.xml", "level3.xml"):
        (levels / name).write_text(LEVEL_XML)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def playing_view(level_dir):
    view = GameView(choose_file=lambda: None)
    view.game.load("LevelFiles/Level1.xml")
    view.game.startup = False
    view.game.pixel_width = 90
    view.game.pixel_height = 90
    return view


def _key(key, mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod)


def test_exit_command_stops_running():
    view = GameView(choose_file=lambda: None)
    view.run_command(MenuCommand.EXIT)
    assert view.running is False


def test_quit_event_stops_running():
    view = GameView(choose_file=lambda: None)
    assert view.handle_event(pygame.event.Event(pygame.QUIT)) is False


def test_about_command_sets_notice():
    view = GameView(choose_file=lambda: None)
    view.run_command(MenuCommand.ABOUT)
    assert view.notice == ABOUT_TEXT


def test_level_command_loads_level(level_dir):
    view = GameView(choose_file=lambda: None)
    view.run_command(MenuCommand.LEVEL_TWO)
    assert view.game.current_level == 2
    assert len(view.game.items) == ITEM_COUNT


def test_missing_level_reports_notice(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    view = GameView(choose_file=lambda: None)
    view.run_command(MenuCommand.LEVEL_ONE)
    assert view.notice.startswith("Unable to load Game file")


def test_open_command_loads_chosen_file(level_dir):
    view = GameView(choose_file=lambda: level_dir / "LevelFiles" / "level3.xml")
    view.run_command(MenuCommand.OPEN)
    assert len(view.game.items) == ITEM_COUNT


def test_open_cancelled_leaves_game_empty(level_dir):
    view = GameView(choose_file=lambda: None)
    view.run_command(MenuCommand.OPEN)
    assert view.game.items == []


def test_space_makes_sparty_eat(playing_view):
    playing_view.handle_event(_key(pygame.K_SPACE))
    assert playing_view.game.sparty.eating is True


def test_b_key_makes_sparty_headbutt(playing_view):
    playing_view.handle_event(_key(pygame.K_b))
    assert playing_view.game.sparty.headbutting is True


def test_keys_ignored_during_startup(playing_view):
    playing_view.game.startup = True
    playing_view.handle_event(_key(pygame.K_b))
    assert playing_view.game.sparty.headbutting is False


def test_notice_swallows_next_key(playing_view):
    playing_view.run_command(MenuCommand.ABOUT)
    playing_view.handle_event(_key(pygame.K_b))
    assert playing_view.notice is None
    assert playing_view.game.sparty.headbutting is False


def test_left_click_moves_sparty(playing_view):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(25, 35))
    playing_view.handle_event(event)
    assert playing_view.game.sparty.target_point == Point(25, 35)


def test_right_click_does_not_move_sparty(playing_view):
    before = playing_view.game.sparty.target_point
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(25, 35))
    playing_view.handle_event(event)
    assert playing_view.game.sparty.target_point == before


def test_mouse_motion_moves_spotlight_location(playing_view):
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(25, 35), rel=(0, 0), buttons=(0, 0, 0))
    playing_view.handle_event(event)
    assert playing_view.game.spotlight_location == Point(25, 35)


def test_ctrl_digit_shortcut_selects_level(playing_view):
    playing_view.handle_event(_key(pygame.K_2, pygame.KMOD_LCTRL))
    assert playing_view.game.current_level == 2


def test_alt_x_shortcut_exits(playing_view):
    playing_view.handle_event(_key(pygame.K_x, pygame.KMOD_LALT))
    assert playing_view.running is False


def test_f1_shortcut_shows_about(playing_view):
    playing_view.handle_event(_key(pygame.K_F1))
    assert playing_view.notice == ABOUT_TEXT


def test_paint_zero_size_does_not_advance_clock(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    times = iter([0.0, 2.0])
    view = GameView(timer=lambda: next(times), choose_file=lambda: None)
    view.paint(pygame.Surface((0, 10)))
    assert view.game.clock.seconds_text() == "00"


def test_paint_advances_clock(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    times = iter([0.0, 2.0])
    view = GameView(timer=lambda: next(times), choose_file=lambda: None)
    view.paint(pygame.Surface((90, 90)))
    assert view.game.clock.seconds_text() == "02"
    assert view.notice.startswith("Unable to load Game file")


def test_first_paint_loads_level_one(level_dir):
    times = iter([0.0, 0.5])
    view = GameView(timer=lambda: next(times), choose_file=lambda: None)
    view.paint(pygame.Surface((90, 90)))
    assert len(view.game.items) == ITEM_COUNT
    assert view.notice is None


def test_graphics_translate_rectangle():
    surface = pygame.Surface((20, 20))
    graphics = PygameGraphics(surface)
    graphics.set_brush(WHITE)
    graphics.translate(5, 5)
    graphics.draw_rectangle(0, 0, 4, 4)
    assert tuple(surface.get_at((6, 6)))[:3] == WHITE
    assert tuple(surface.get_at((1, 1)))[:3] == (0, 0, 0)


def test_graphics_scale_rectangle():
    surface = pygame.Surface((20, 20))
    graphics = PygameGraphics(surface)
    graphics.set_brush(WHITE)
    graphics.scale(2, 2)
    graphics.draw_rectangle(0, 0, 3, 3)
    assert tuple(surface.get_at((3, 3)))[:3] == WHITE
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)


def test_graphics_pop_restores_transform():
    surface = pygame.Surface((20, 20))
    graphics = PygameGraphics(surface)
    graphics.set_brush(WHITE)
    graphics.push_state()
    graphics.translate(10, 10)
    graphics.pop_state()
    graphics.draw_rectangle(0, 0, 4, 4)
    assert tuple(surface.get_at((2, 2)))[:3] == WHITE
    assert tuple(surface.get_at((12, 12)))[:3] == (0, 0, 0)


def test_graphics_pop_without_push_raises():
    graphics = PygameGraphics(pygame.Surface((5, 5)))
    with pytest.raises(IndexError):
        graphics.pop_state()


def test_graphics_draw_image_translated():
    surface = pygame.Surface((20, 20))
    image = pygame.Surface((4, 4))
    image.fill(WHITE)
    graphics = PygameGraphics(surface)
    graphics.translate(5, 5)
    graphics.draw_image(image, 0, 0, 4, 4)
    assert tuple(surface.get_at((6, 6)))[:3] == WHITE
    assert tuple(surface.get_at((2, 2)))[:3] == (0, 0, 0)


def test_graphics_text_extent_grows_with_text():
    graphics = PygameGraphics(pygame.Surface((5, 5)))
    graphics.set_font(24, WHITE)
    short_width, short_height = graphics.text_extent("I")
    long_width, long_height = graphics.text_extent("I'm Full!")
    assert long_width > short_width > 0
    assert long_height == short_height


def test_main_rejects_unknown_level():
    with pytest.raises(SystemExit) as excinfo:
        main(["--level", "4"])
    assert excinfo.value.code == 2