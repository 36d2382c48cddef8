"""Command line entry point: validate a .ber map and play it."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from .game import Game
from .mapcheck import MapError, MapErrorKind, load_map
from .render import Renderer
from .xpm import XpmError

NO_FILE = "You need to give A file!\n"
TOO_MANY_FILES = "You need to give ONE file!\n"
NOT_BER = "not .ber"
MAP_EXTENSION = ".ber"
TEXTURE_DIR = Path("textures")

_MESSAGES = {
    MapErrorKind.UNREADABLE: "ERROR!\nYou gave me a bad arquive!!!!!\n",
    MapErrorKind.LAYOUT: "ERROR!\nYou gave me a map with Bad characters or length\n",
    MapErrorKind.NOT_CLOSED: "ERROR!\nYou gave me a Open map! Can't play this shit!\n",
    MapErrorKind.COUNTS: "ERROR!\nYou gave me a bad quantity of charcters\n",
    MapErrorKind.IMPOSSIBLE: "ERROR!\nHow do you want me to play an IMPOSSIBLE map?\n",
}


def error_message(kind: MapErrorKind | int) -> str:
    """Return the text printed for a rejected map."""
    return _MESSAGES[MapErrorKind(kind)]


def main(argv: Sequence[str] | None = None) -> int:
    """Check the map given on the command line and, if it is valid, play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write(NO_FILE)
        return 0
    if len(args) > 1:
        sys.stdout.write(TOO_MANY_FILES)
        return 0
    path = args[0]
    if not path.endswith(MAP_EXTENSION):
        sys.stdout.write(NOT_BER)
        return len(NOT_BER)
    try:
        game_map = load_map(path)
    except MapError as exc:
        sys.stdout.write(error_message(exc.kind))
        return 0
    try:
        renderer = Renderer(Game(game_map), TEXTURE_DIR)
    except XpmError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    renderer.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())