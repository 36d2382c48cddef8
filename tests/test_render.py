import pygame
import pytest

from solong.game import Direction, Game, Outcome
from solong.mapcheck import parse_map
from solong.render import (
    TEXTURE_FILES,
    TILE,
    Renderer,
    key_to_direction,
    moves_label_x,
    sprite_index,
    wall_index,
)
from solong.xpm import XpmError

MAP_TEXT = "11111\n1PCE1\n11111\n"
BIG_MAP_TEXT = "1111111\n1P0C001\n1011101\n10000E1\n1111111\n"


def _xpm(index):
    header = '/* XPM */\nstatic char *img[] = {\n"32 32 1 1",\n'
    color = f'". c #{index:02x}80c0",\n'
    rows = "".join('"' + "." * 32 + '",\n' for _ in range(32))
    return header + color + rows + "};\n"


@pytest.fixture
def texture_dir(tmp_path):
    for index, name in TEXTURE_FILES.items():
        (tmp_path / name).write_text(_xpm(index))
    return tmp_path


def _game(text):
    return Game(parse_map(text.splitlines(keepends=True)))


def _texture_at(surface, col, row):
    red, green, blue, _ = surface.get_at((col * TILE + TILE - 1, row * TILE + TILE - 1))
    assert (green, blue) == (0x80, 0xC0)
    return TEXTURE_FILES[red]


def test_isolated_wall_uses_all_sides_texture():
    rows = ["000", "010", "000"]
    assert TEXTURE_FILES[wall_index(rows, 1, 1)] == "wall26.xpm"


def test_enclosed_wall_uses_plain_texture():
    rows = ["111", "111", "111"]
    assert TEXTURE_FILES[wall_index(rows, 1, 1)] == "wall.xpm"


def test_top_left_corner_texture():
    rows = ["111", "1P1", "111"]
    assert TEXTURE_FILES[wall_index(rows, 0, 0)] == "wall8.xpm"


@pytest.mark.parametrize("text", [MAP_TEXT, BIG_MAP_TEXT])
def test_every_wall_has_a_texture(text):
    rows = parse_map(text.splitlines(keepends=True)).rows
    for r, row in enumerate(rows):
        for c, tile in enumerate(row):
            if tile == "1":
                assert wall_index(rows, r, c) in TEXTURE_FILES


@pytest.mark.parametrize(
    "col, expected",
    [
        (1, "p_down.xpm"),
        (2, "collectable.xpm"),
        (3, "exit.xpm"),
        (4, "trap.xpm"),
        (5, "open.xpm"),
    ],
)
def test_sprite_index_for_tiles(col, expected):
    rows = ["1111111", "1PCET01", "1111111"]
    assert TEXTURE_FILES[sprite_index(rows, 1, col)] == expected


def test_unknown_tile_draws_nothing():
    assert sprite_index(["Q"], 0, 0) is None


@pytest.mark.parametrize("direction", list(Direction))
def test_animation_tiles_all_have_sprites(direction):
    game = _game(BIG_MAP_TEXT)
    for origin, target, _ in game.animation_frames(direction, "C"):
        assert sprite_index([origin + target], 0, 0) in TEXTURE_FILES
        assert sprite_index([origin + target], 0, 1) in TEXTURE_FILES


def test_moves_label_small_maps():
    assert moves_label_x(1) == 10
    assert moves_label_x(3) == 10


def test_moves_label_grows_with_width():
    positions = [moves_label_x(width) for width in range(4, 40)]
    assert positions == sorted(positions)
    assert moves_label_x(13) == 124


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_w, Direction.UP),
        (pygame.K_UP, Direction.UP),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_d, Direction.RIGHT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ],
)
def test_key_to_direction(key, direction):
    assert key_to_direction(key) is direction


@pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q, pygame.K_SPACE])
def test_other_keys_move_nothing(key):
    assert key_to_direction(key) is None


def test_draw_matches_sprite_indices(texture_dir):
    game = _game(BIG_MAP_TEXT)
    surface = Renderer(game, texture_dir).draw()
    assert surface.get_size() == (game.width * TILE, game.height * TILE)
    rows = game.rows
    for r, row in enumerate(rows):
        for c in range(len(row)):
            assert _texture_at(surface, c, r) == TEXTURE_FILES[sprite_index(rows, r, c)]


def test_draw_shows_initial_tiles(texture_dir):
    surface = Renderer(_game(MAP_TEXT), texture_dir).draw()
    assert _texture_at(surface, 1, 1) == "p_down.xpm"
    assert _texture_at(surface, 2, 1) == "collectable.xpm"
    assert _texture_at(surface, 3, 1) == "exit.xpm"


def test_draw_follows_a_move(texture_dir):
    game = _game(MAP_TEXT)
    renderer = Renderer(game, texture_dir)
    assert game.move(Direction.RIGHT).outcome is Outcome.MOVED
    surface = renderer.draw()
    assert _texture_at(surface, 2, 1) == "p_right.xpm"
    assert _texture_at(surface, 1, 1) == "open.xpm"


def test_missing_textures_raise(tmp_path):
    with pytest.raises(XpmError):
        Renderer(_game(MAP_TEXT), tmp_path)