"""Bitmap fonts described by text-format ``.fnt`` files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from planegfx.image import Image

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_CHAR_FIELDS = {
    "x": "x",
    "y": "y",
    "width": "width",
    "height": "height",
    "xoffset": "x_offset",
    "yoffset": "y_offset",
    "xadvance": "x_advance",
    "page": "page",
}

_COMMON_FIELDS = {
    "lineHeight": "line_height",
    "scaleW": "image_width",
    "scaleH": "image_height",
    "pages": "pages_count",
}


def _leading_int(value: str) -> int | None:
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def _split_field(token: str) -> tuple[str, str]:
    key, sep, value = token.partition("=")
    return (key, value) if sep else (token, token)


@dataclass
class Character:
    """Where one glyph sits in a page image and how it is placed."""

    id: int = -1
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    x_offset: int = 0
    y_offset: int = 0
    x_advance: int = 0
    page: int = 0


@dataclass
class FontInformation:
    """Font-wide metrics and the names of the page images."""

    font_size: int = 0
    font_name: str = ""
    line_height: int = 0
    image_width: int = 0
    image_height: int = 0
    pages_count: int = 0
    page_names: list[str] = field(default_factory=list)


def _code(character_id: str | int) -> int:
    if isinstance(character_id, str):
        if len(character_id) != 1:
            raise ValueError("a character id must be a single character")
        return ord(character_id)
    return int(character_id)


class BitmapFont:
    """Glyph metrics and page images of a bitmap font."""

    def __init__(self) -> None:
        self.information = FontInformation()
        self._characters: dict[int, Character] = {}
        self._pages: list[Image] = []

    def parse(self, lines: Iterable[str]) -> None:
        """Read ``info``, ``common``, ``page`` and ``char`` lines of a font file."""
        info = self.information
        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            tag, fields = tokens[0], tokens[1:]
            if tag == "info":
                self._parse_info(line, fields)
            elif tag == "common":
                for token in fields:
                    key, value = _split_field(token)
                    number = _leading_int(value)
                    if key in _COMMON_FIELDS and number is not None:
                        setattr(info, _COMMON_FIELDS[key], number)
            elif tag == "page":
                for token in fields:
                    key, value = _split_field(token)
                    if key == "file":
                        info.page_names.append(_strip_quotes(value))
            elif tag == "char":
                glyph = self._parse_char(fields)
                self._characters[glyph.id] = glyph

    def _parse_info(self, line: str, fields: list[str]) -> None:
        for token in fields:
            key, value = _split_field(token)
            if key == "face":
                first = line.find('"')
                second = line.find('"', first + 1)
                if first != -1 and second != -1:
                    self.information.font_name = line[first + 1:second]
            elif key == "size":
                number = _leading_int(value)
                if number is not None:
                    self.information.font_size = number

    @staticmethod
    def _parse_char(fields: list[str]) -> Character:
        glyph = Character()
        for token in fields:
            key, value = _split_field(token)
            if key == "id":
                number = _leading_int(value)
                if number is None:
                    raise ValueError(f"invalid character id: {value!r}")
                glyph.id = number
            elif key in _CHAR_FIELDS:
                number = _leading_int(value)
                if number is not None:
                    setattr(glyph, _CHAR_FIELDS[key], number)
        return glyph

    def load_from_file(
        self,
        filename: str | os.PathLike[str],
        asset_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        """Parse a font file and load its page images.

        Page images are looked up in ``asset_dir``, which defaults to the
        directory holding the font file.
        """
        path = Path(filename)
        with path.open(encoding="utf-8") as stream:
            self.parse(stream)
        directory = Path(asset_dir) if asset_dir is not None else path.parent
        count = self.information.pages_count
        names = self.information.page_names
        if len(names) < count:
            raise ValueError(f"font declares {count} pages but names {len(names)}")
        self._pages = [Image.load(directory / name) for name in names[:count]]

    def get_character(self, character_id: str | int) -> Character:
        """Return the glyph for a character, or a default glyph if absent."""
        return self._characters.get(_code(character_id), Character())

    def has_character(self, character_id: str | int) -> bool:
        """Return whether the font has a glyph for the character."""
        return _code(character_id) in self._characters

    def page_image(self, page_index: int) -> Image:
        """Return the loaded image of one page."""
        if not 0 <= page_index < min(self.information.pages_count, len(self._pages)):
            raise IndexError(f"no loaded page {page_index}")
        return self._pages[page_index]