"""Floating-point and eight-bit RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp_unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


def _check_byte(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")
    return value


@dataclass
class Color4f:
    """An RGBA colour with channels clamped to ``[0, 1]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __post_init__(self) -> None:
        self.r = _clamp_unit(self.r)
        self.g = _clamp_unit(self.g)
        self.b = _clamp_unit(self.b)
        self.a = _clamp_unit(self.a)

    @classmethod
    def gray(cls, intensity: float, alpha: float = 1.0) -> Color4f:
        """Build a grey with the same intensity in every colour channel."""
        level = _clamp_unit(intensity)
        return cls(level, level, level, alpha)


@dataclass
class ColorInChar:
    """An RGBA colour with eight-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        self.r = _check_byte("r", self.r)
        self.g = _check_byte("g", self.g)
        self.b = _check_byte("b", self.b)
        self.a = _check_byte("a", self.a)

    @classmethod
    def gray(cls, intensity: int, alpha: int = 255) -> ColorInChar:
        """Build a grey with the same intensity in every colour channel."""
        return cls(intensity, intensity, intensity, alpha)


def to4f(eight_bit_color: ColorInChar) -> Color4f:
    """Convert an eight-bit colour to its floating-point form."""
    return Color4f(
        eight_bit_color.r / 255.0,
        eight_bit_color.g / 255.0,
        eight_bit_color.b / 255.0,
        eight_bit_color.a / 255.0,
    )