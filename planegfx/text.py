"""Lay out a string of text as textured triangles, one mesh per font page."""

from __future__ import annotations

from planegfx.bitmap_font import BitmapFont
from planegfx.mesh import Mesh, ShapePattern

_TAB_WIDTH = 4


class Text:
    """A string and the font it is drawn with; meshes are rebuilt on change."""

    def __init__(self, string: str = "", font: BitmapFont | None = None) -> None:
        self._string = string
        self._font = font
        self._meshes: list[Mesh] | None = None

    @property
    def string(self) -> str:
        return self._string

    @string.setter
    def string(self, text_string: str) -> None:
        if text_string != self._string:
            self._string = text_string
            self._meshes = None

    @property
    def font(self) -> BitmapFont | None:
        return self._font

    @font.setter
    def font(self, text_font: BitmapFont) -> None:
        self._font = text_font
        self._meshes = None

    def page_meshes(self) -> dict[int, Mesh]:
        """Return the mesh of every font page that has glyphs, by page index."""
        if self._font is None:
            raise ValueError("text has no font")
        if self._meshes is None:
            self._meshes = self._build(self._font)
        return {page: mesh for page, mesh in enumerate(self._meshes) if len(mesh)}

    def _space_advance(self, font: BitmapFont) -> int:
        if font.has_character(" "):
            return font.get_character(" ").x_advance
        return font.information.font_size

    def _build(self, font: BitmapFont) -> list[Mesh]:
        info = font.information
        meshes = [Mesh() for _ in range(info.pages_count)]
        cursor_x = 0.0
        cursor_y = 0.0
        for char in self._string:
            if char == " ":
                cursor_x += self._space_advance(font)
            elif char == "\t":
                cursor_x += _TAB_WIDTH * self._space_advance(font)
            elif char == "\n":
                cursor_y -= info.line_height
                cursor_x = 0.0
            else:
                glyph = font.get_character(char)
                left = cursor_x + glyph.x_offset
                right = left + glyph.width
                bottom = -(glyph.y_offset + glyph.height) + info.line_height + cursor_y
                top = bottom + glyph.height

                tex_left = glyph.x / info.image_width
                tex_top = 1.0 - glyph.y / info.image_height
                tex_right = (glyph.x + glyph.width) / info.image_width
                tex_bottom = 1.0 - (glyph.y + glyph.height) / info.image_height

                if not 0 <= glyph.page < len(meshes):
                    raise IndexError(f"glyph {char!r} is on missing page {glyph.page}")
                mesh = meshes[glyph.page]
                mesh.pattern = ShapePattern.TRIANGLES
                corners = (
                    (left, top, tex_left, tex_top),
                    (right, top, tex_right, tex_top),
                    (left, bottom, tex_left, tex_bottom),
                    (right, top, tex_right, tex_top),
                    (left, bottom, tex_left, tex_bottom),
                    (right, bottom, tex_right, tex_bottom),
                )
                for x, y, u, v in corners:
                    mesh.add_point(x, y)
                    mesh.add_texture_coordinate(u, v)
                cursor_x += glyph.x_advance
        return meshes