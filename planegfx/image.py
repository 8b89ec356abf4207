"""RGBA images that can be loaded from and saved to image files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from PIL import Image as _PILImage

from planegfx.color import ColorInChar


def _blank() -> ColorInChar:
    return ColorInChar(0, 0, 0, 0)


@dataclass
class Image:
    """A grid of eight-bit RGBA pixels, stored row by row."""

    width: int = 0
    height: int = 0
    pixels: list[ColorInChar] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions cannot be negative")
        expected = self.width * self.height
        if not self.pixels:
            self.pixels = [_blank() for _ in range(expected)]
        elif len(self.pixels) != expected:
            raise ValueError(
                f"{len(self.pixels)} pixels given for a {self.width}x{self.height} image"
            )

    @classmethod
    def load(cls, source: str | os.PathLike[str]) -> Image:
        """Load an image file, with its bottom row first."""
        with _PILImage.open(source) as opened:
            rgba = opened.convert("RGBA").transpose(_PILImage.Transpose.FLIP_TOP_BOTTOM)
            width, height = rgba.size
            data = rgba.tobytes()
        pixels = [ColorInChar(*data[i:i + 4]) for i in range(0, len(data), 4)]
        return cls(width, height, pixels)

    def resize_pixels(self, width: int, height: int) -> None:
        """Change the dimensions, keeping existing pixels and padding with blanks."""
        if width < 0 or height < 0 or (width == 0 and height == 0):
            raise ValueError("image dimensions must be non-negative and not both zero")
        self.width = width
        self.height = height
        count = width * height
        kept = self.pixels[:count]
        self.pixels = kept + [_blank() for _ in range(count - len(kept))]

    def save_png(self, file_path: str | os.PathLike[str]) -> None:
        """Write the pixels to a PNG file, first stored row at the top.

        An image without pixels writes nothing.
        """
        if not self.pixels:
            return
        out = _PILImage.frombytes("RGBA", (self.width, self.height), self.pixel_bytes())
        out.save(file_path, format="PNG")

    def pixel_bytes(self) -> bytes:
        """Return the pixels as packed RGBA bytes."""
        return bytes(channel for p in self.pixels for channel in (p.r, p.g, p.b, p.a))

    def flip_vertically(self) -> None:
        """Reverse the order of the rows."""
        if not self.pixels:
            return
        w = self.width
        rows = [self.pixels[r * w:(r + 1) * w] for r in range(self.height)]
        self.pixels = [p for row in reversed(rows) for p in row]