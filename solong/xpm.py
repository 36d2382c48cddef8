"""Reader for XPM pixmaps, the text image format used for the game's textures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .colors import NONE_COLOR, text_to_rgb

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour ``None``: fully transparent."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when an XPM image cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; each pixel is a 32-bit 0xAARRGGBB value."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the value of the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_outside_quotes(text: str, needle: str) -> int:
    """Return the first position of needle that is not inside double quotes, or -1."""
    if not needle or len(needle) > len(text):
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, span: int) -> str:
    span = max(0, min(span, len(text) - start))
    return text[:start] + " " * span + text[start + span:]


def strip_comments(text: str) -> str:
    """Overwrite C-style comments outside quotes with spaces, keeping the length."""
    while (begin := find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        span = end - begin + 2 if end != -1 else 3
        text = _blank(text, begin, span)
    while (begin := find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        span = end - begin + 1 if end != -1 else 2
        text = _blank(text, begin, span)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in text."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == NONE_COLOR else color & 0xFFFFFFFF


def _next_line(source: Iterator[str], what: str) -> str:
    line = next(source, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Build an image from the header, colour and pixel strings of an XPM file."""
    source = iter(lines)
    words = split_words(_next_line(source, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        words = split_words(line[cpp:])
        try:
            at = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        suffix = words[at + 2] if at + 2 < len(words) else None
        color = text_to_rgb(words[at + 1], suffix)
        key = line[:cpp]
        if last_wins:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[x * cpp:(x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the full text of an XPM file."""
    return parse_xpm_lines(quoted_lines(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and parse an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm_text(text)