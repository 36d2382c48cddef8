"""Loading and validation of game maps: layout, walls, contents and reachability."""

from __future__ import annotations

import enum
import re
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
TRAP = "T"

_ALLOWED = frozenset("10PCET\n")
_PASSABLE = frozenset((FLOOR, COLLECTIBLE, EXIT))
_SETTLED = frozenset((WALL, TRAP))
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class MapErrorKind(enum.IntEnum):
    """Why a map was rejected."""

    LAYOUT = 1
    NOT_CLOSED = 2
    COUNTS = 3
    IMPOSSIBLE = 4
    UNREADABLE = 6


_MESSAGES = {
    MapErrorKind.LAYOUT: "map has bad characters or uneven line lengths",
    MapErrorKind.NOT_CLOSED: "map is not closed by walls",
    MapErrorKind.COUNTS: "map needs one player, one exit and at least one collectible",
    MapErrorKind.IMPOSSIBLE: "map cannot be completed",
    MapErrorKind.UNREADABLE: "map file cannot be read",
}


class MapError(Exception):
    """Raised when a map file is unreadable or invalid."""

    def __init__(self, kind: MapErrorKind, message: str | None = None) -> None:
        super().__init__(message or _MESSAGES[kind])
        self.kind = kind


@dataclass
class GameMap:
    """A validated map; width counts the columns of a row."""

    grid: list[list[str]]
    width: int
    height: int
    player_pos: tuple[int, int]
    exit_pos: tuple[int, int]
    collectibles: int

    @property
    def rows(self) -> list[str]:
        """The grid as a list of strings."""
        return ["".join(row) for row in self.grid]


def check_characters(line: str) -> bool:
    """Return True if line holds only map characters and newlines."""
    return set(line) <= _ALLOWED


def read_lines(path: str | Path) -> list[str]:
    """Read a map file into lines, each keeping its trailing newline."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(MapErrorKind.UNREADABLE, f"cannot read {path}") from exc
    return _LINE.findall(data.decode("latin-1"))


def _cell(rows: list[str], row: int, col: int) -> str:
    if 0 <= row < len(rows) and 0 <= col < len(rows[row]):
        return rows[row][col]
    return ""


def check_closed(rows: list[str], width: int) -> bool:
    """Return True if the border of the map is wall.

    The top and bottom rows are checked up to, but not including, the last
    column; the side columns are checked on every row in between.
    """
    if not rows:
        return False
    last = width - 1
    bottom = len(rows) - 1
    for row in (0, bottom):
        if any(_cell(rows, row, col) != WALL for col in range(last)):
            return False
    return all(
        _cell(rows, row, 0) == WALL and _cell(rows, row, last) == WALL
        for row in range(1, bottom)
    )


def check_counts(rows: list[str]) -> bool:
    """Return True for exactly one player, one exit and at least one collectible."""
    text = "".join(rows)
    return (
        text.count(COLLECTIBLE) > 0
        and text.count(PLAYER) == 1
        and text.count(EXIT) == 1
    )


def check_possible(rows: list[str]) -> bool:
    """Return True if every floor, collectible and exit is reachable from the player.

    Traps block the way; the exit does not. The first column is not examined.
    """
    start = next(
        (
            (r, c)
            for r, row in enumerate(rows)
            for c, ch in enumerate(row)
            if c >= 1 and ch == PLAYER
        ),
        None,
    )
    if start is None:
        return False
    reached = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if r < 1 or c < 1:
            continue
        for nr, nc in ((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)):
            if (nr, nc) not in reached and _cell(rows, nr, nc) in _PASSABLE:
                reached.add((nr, nc))
                queue.append((nr, nc))
    return all(
        ch in _SETTLED or (r, c) in reached
        for r, row in enumerate(rows)
        for c, ch in enumerate(row)
        if c >= 1
    )


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate map lines (with their newlines) and build a GameMap."""
    lines = list(lines)
    if not lines:
        raise MapError(MapErrorKind.LAYOUT)
    expected = len(lines[0])
    if any(len(line) != expected or not check_characters(line) for line in lines):
        raise MapError(MapErrorKind.LAYOUT)
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    width = expected - 1
    if not check_closed(rows, width):
        raise MapError(MapErrorKind.NOT_CLOSED)
    if not check_counts(rows):
        raise MapError(MapErrorKind.COUNTS)
    if not check_possible(rows):
        raise MapError(MapErrorKind.IMPOSSIBLE)

    player_pos = exit_pos = (0, 0)
    collectibles = 0
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == PLAYER:
                player_pos = (x, y)
            elif ch == EXIT:
                exit_pos = (x, y)
            elif ch == COLLECTIBLE:
                collectibles += 1
    return GameMap(
        grid=[list(row) for row in rows],
        width=width,
        height=len(rows),
        player_pos=player_pos,
        exit_pos=exit_pos,
        collectibles=collectibles,
    )


def load_map(path: str | Path) -> GameMap:
    """Read and validate a map file."""
    return parse_map(read_lines(path))