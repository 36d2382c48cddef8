"""Drawing the game with its textures and running the interactive window."""

from __future__ import annotations

import os
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import (  # noqa: E402
    MOV_DOWN1,
    MOV_DOWN1_2,
    MOV_DOWN2,
    MOV_DOWN2_2,
    MOV_LEFT1,
    MOV_LEFT1_2,
    MOV_LEFT2,
    MOV_LEFT2_2,
    MOV_RIGHT1,
    MOV_RIGHT1_2,
    MOV_RIGHT2,
    MOV_RIGHT2_2,
    MOV_UP1,
    MOV_UP1_2,
    MOV_UP2,
    MOV_UP2_2,
    Direction,
    Game,
    MoveResult,
    Outcome,
)
from .mapcheck import COLLECTIBLE, EXIT, FLOOR, PLAYER, TRAP, WALL  # noqa: E402
from .xpm import XpmImage, load_xpm  # noqa: E402

TILE = 32
"""Side of one map tile in pixels."""

LOST_SPRITE = 40
LOST_DELAY = 5.0
LABEL_COLOR = (0, 0, 3)
LABEL_BASELINE = 20
WINDOW_TITLE = "Window"

TEXTURE_FILES: dict[int, str] = {
    0: "wall.xpm",
    3: "wall3.xpm",
    5: "wall5.xpm",
    7: "wall7.xpm",
    11: "wall11.xpm",
    15: "wall15.xpm",
    21: "wall21.xpm",
    19: "wall19.xpm",
    23: "wall23.xpm",
    8: "wall8.xpm",
    12: "wall12.xpm",
    16: "wall16.xpm",
    10: "wall10.xpm",
    14: "wall14.xpm",
    18: "wall18.xpm",
    28: "exit.xpm",
    29: "open.xpm",
    26: "wall26.xpm",
    22: "collectable.xpm",
    24: "trap.xpm",
    40: "wasted.xpm",
    1: "p_down.xpm",
    2: "p_left.xpm",
    4: "p_right.xpm",
    6: "p_up.xpm",
    9: "mov_left1.xpm",
    13: "mov_left1_2.xpm",
    17: "mov_left2.xpm",
    20: "mov_left2_2.xpm",
    25: "mov_up1.xpm",
    27: "mov_up1_2.xpm",
    30: "mov_up2.xpm",
    31: "mov_up2_2.xpm",
    32: "mov_down1.xpm",
    33: "mov_down1_2.xpm",
    34: "mov_down2.xpm",
    35: "mov_down2_2.xpm",
    36: "mov_right1.xpm",
    37: "mov_right1_2.xpm",
    38: "mov_right2.xpm",
    39: "mov_right2_2.xpm",
}
"""Texture file for each sprite index."""

_TILE_SPRITES: dict[str, int] = {
    FLOOR: 29,
    EXIT: 28,
    COLLECTIBLE: 22,
    TRAP: 24,
    "U": 6,
    "D": 1,
    PLAYER: 1,
    "R": 4,
    "L": 2,
    MOV_LEFT1: 9,
    MOV_LEFT1_2: 13,
    MOV_LEFT2: 17,
    MOV_LEFT2_2: 20,
    MOV_UP1: 25,
    MOV_UP1_2: 27,
    MOV_UP2: 30,
    MOV_UP2_2: 31,
    MOV_DOWN1: 32,
    MOV_DOWN1_2: 33,
    MOV_DOWN2: 34,
    MOV_DOWN2_2: 35,
    MOV_RIGHT1: 36,
    MOV_RIGHT1_2: 37,
    MOV_RIGHT2: 38,
    MOV_RIGHT2_2: 39,
}

_KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def _is_wall(rows: list[str], row: int, col: int) -> bool:
    return 0 <= row < len(rows) and 0 <= col < len(rows[row]) and rows[row][col] == WALL


def wall_index(rows: list[str], row: int, col: int) -> int:
    """Return the sprite index of a wall tile, chosen by which neighbours are not wall."""
    count = 0
    if not _is_wall(rows, row - 1, col):
        count += 5
    if not _is_wall(rows, row + 1, col):
        count += 11
    if not _is_wall(rows, row, col - 1):
        count += 3
    if not _is_wall(rows, row, col + 1):
        count += 7
    return count


def sprite_index(rows: list[str], row: int, col: int) -> int | None:
    """Return the sprite index drawn for a tile, or None if nothing is drawn."""
    tile = rows[row][col]
    if tile == WALL:
        return wall_index(rows, row, col)
    return _TILE_SPRITES.get(tile)


def moves_label_x(width: int) -> int:
    """Return the x position of the move counter for a map of the given column count."""
    line_length = width + 1
    if line_length < 5:
        return 10
    return (line_length // 2) * TILE - 100


def key_to_direction(key: int) -> Direction | None:
    """Return the direction bound to a key, or None if the key moves nothing."""
    return _KEY_DIRECTIONS.get(key)


def _surface_from_xpm(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.rows):
        for x, value in enumerate(row):
            alpha = 255 - ((value >> 24) & 0xFF)
            surface.set_at(
                (x, y),
                ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha),
            )
    return surface


class Renderer:
    """Draws a game onto an off-screen surface and runs it in a window."""

    def __init__(self, game: Game, texture_dir: str | Path = "textures") -> None:
        self.game = game
        directory = Path(texture_dir)
        self.textures = {
            index: _surface_from_xpm(load_xpm(directory / name))
            for index, name in TEXTURE_FILES.items()
        }
        self.surface = pygame.Surface((game.width * TILE, game.height * TILE))
        pygame.font.init()
        self._font = pygame.font.Font(None, 18)

    def draw(self) -> pygame.Surface:
        """Draw every tile and the move counter; return the drawn surface."""
        return self._paint(self.game.moves)

    def _paint(self, moves: int) -> pygame.Surface:
        rows = self.game.rows
        for i, row in enumerate(rows):
            for j in range(min(self.game.width, len(row))):
                index = sprite_index(rows, i, j)
                if index is not None:
                    self.surface.blit(self.textures[index], (j * TILE, i * TILE))
        x = moves_label_x(self.game.width)
        self._text("Moves:", x)
        self._text(str(moves), x + 50)
        return self.surface

    def _text(self, text: str, x: int) -> None:
        label = self._font.render(text, False, LABEL_COLOR)
        self.surface.blit(label, (x, LABEL_BASELINE - self._font.get_ascent()))

    @staticmethod
    def _present(screen: pygame.Surface, surface: pygame.Surface) -> None:
        screen.blit(surface, (0, 0))
        pygame.display.flip()

    def _animate(self, screen: pygame.Surface, result: MoveResult) -> None:
        (ox, oy), (tx, ty) = result.origin, result.target
        for origin_tile, target_tile, delay in result.frames:
            self.game.grid[oy][ox] = origin_tile
            self.game.grid[ty][tx] = target_tile
            # The counter is updated only once the step has been shown.
            self._present(screen, self._paint(self.game.moves - 1))
            time.sleep(delay)

    def _show_lost(self, screen: pygame.Surface) -> None:
        self.surface.fill((0, 0, 0))
        wasted = self.textures[LOST_SPRITE]
        position = (
            self.game.width * 16 - wasted.get_width() // 2,
            (self.game.height - 1) * 16 - wasted.get_height() // 2,
        )
        self.surface.blit(wasted, position)
        self._present(screen, self.surface)
        time.sleep(LOST_DELAY)

    def run(self) -> Outcome | None:
        """Open the window and play until the player wins, loses or quits."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.surface.get_size())
            pygame.display.set_caption(WINDOW_TITLE)
            self._present(screen, self.draw())
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return None
                    if event.type != pygame.KEYUP:
                        continue
                    if event.key == pygame.K_ESCAPE:
                        return None
                    direction = key_to_direction(event.key)
                    if direction is None:
                        continue
                    result = self.game.move(direction)
                    if result.outcome is Outcome.MOVED:
                        self._animate(screen, result)
                    elif result.outcome is Outcome.WON:
                        return Outcome.WON
                    elif result.outcome is Outcome.LOST:
                        self._show_lost(screen)
                        return Outcome.LOST
                self._present(screen, self.surface)
                clock.tick(30)
        finally:
            pygame.quit()