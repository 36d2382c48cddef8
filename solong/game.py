"""Game state: moving the player, collecting, winning, losing and move animations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .mapcheck import COLLECTIBLE, EXIT, FLOOR, TRAP, GameMap

MOV_LEFT1 = "G"
MOV_LEFT1_2 = "I"
MOV_LEFT2 = "H"
MOV_LEFT2_2 = "J"
MOV_RIGHT1 = "A"
MOV_RIGHT1_2 = "V"
MOV_RIGHT2 = "B"
MOV_RIGHT2_2 = "F"
MOV_UP1 = "K"
MOV_UP1_2 = "M"
MOV_UP2 = "W"
MOV_UP2_2 = "N"
MOV_DOWN1 = "Z"
MOV_DOWN1_2 = "X"
MOV_DOWN2 = "Y"
MOV_DOWN2_2 = "S"

FRAME_DELAY = 0.1
"""Seconds each animation frame stays on screen."""


class Direction(enum.Enum):
    """A move direction with its (dx, dy) step and the player's facing tile."""

    UP = (0, -1, "U", (MOV_UP1, MOV_UP2), (MOV_UP1_2, MOV_UP2_2))
    DOWN = (0, 1, "D", (MOV_DOWN1, MOV_DOWN2), (MOV_DOWN1_2, MOV_DOWN2_2))
    LEFT = (-1, 0, "L", (MOV_LEFT1, MOV_LEFT2), (MOV_LEFT1_2, MOV_LEFT2_2))
    RIGHT = (1, 0, "R", (MOV_RIGHT1, MOV_RIGHT2), (MOV_RIGHT1_2, MOV_RIGHT2_2))

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def facing(self) -> str:
        return self.value[2]


class Outcome(enum.Enum):
    """What a move attempt led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"


Frame = tuple[str, str, float]


@dataclass
class MoveResult:
    """The outcome of a move and, when the player moved, its animation.

    Each frame is (origin tile, target tile, delay in seconds).
    """

    outcome: Outcome
    origin: tuple[int, int]
    target: tuple[int, int]
    frames: list[Frame] = field(default_factory=list)


class Game:
    """The running state of one game on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.grid = [list(row) for row in game_map.grid]
        self.width = game_map.width
        self.height = game_map.height
        self.x, self.y = game_map.player_pos
        self.exit_pos = game_map.exit_pos
        self.collectibles = game_map.collectibles
        self.moves = 0

    @property
    def rows(self) -> list[str]:
        """The current grid as strings."""
        return ["".join(row) for row in self.grid]

    def cell(self, x: int, y: int) -> str:
        """Return the tile at column x, row y."""
        if not (0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def animation_frames(self, direction: Direction, target: str) -> list[Frame]:
        """Return the frames shown while the player steps onto a tile holding target."""
        first, second = direction.value[3], direction.value[4]
        third_delay = 0.15 if direction is Direction.RIGHT else FRAME_DELAY
        return [
            (direction.facing, target, FRAME_DELAY),
            (first[0], first[1], FRAME_DELAY),
            (second[0], second[1], third_delay),
            (FLOOR, direction.facing, FRAME_DELAY),
        ]

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one tile; count the move if it happened."""
        origin = (self.x, self.y)
        target = (self.x + direction.dx, self.y + direction.dy)
        tile = self.cell(*target)
        if tile in (FLOOR, COLLECTIBLE):
            frames = self.animation_frames(direction, tile)
            self.grid[self.y][self.x] = FLOOR
            self.x, self.y = target
            self.grid[self.y][self.x] = direction.facing
            if tile == COLLECTIBLE:
                self.collectibles -= 1
            self.moves += 1
            return MoveResult(Outcome.MOVED, origin, target, frames)
        if tile == EXIT and self.collectibles == 0:
            return MoveResult(Outcome.WON, origin, target)
        if tile == TRAP:
            return MoveResult(Outcome.LOST, origin, target)
        return MoveResult(Outcome.BLOCKED, origin, target)