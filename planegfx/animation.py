"""Frame selection for sprite-sheet animations."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class SpriteSheet:
    """A grid of frames and the number of frames to advance per second."""

    frame_x: int
    frame_y: int
    animate_speed: float


class Animation:
    """Steps through the frames of a sprite sheet over time."""

    def __init__(self, sprite_sheet: SpriteSheet) -> None:
        self.sprite_sheet = replace(sprite_sheet)
        self.frame_index = 0
        self.base_time = 0.0

    def animate(self, dt: float) -> int:
        """Advance by ``dt`` seconds and return the frame to draw now."""
        shown = self.frame_index
        frame_count = self.sprite_sheet.frame_x * self.sprite_sheet.frame_y
        self.frame_index = int(self.base_time) % frame_count
        self.base_time += self.sprite_sheet.animate_speed * dt
        return shown

    def change_animation(self, new_count: int) -> None:
        """Change the number of frames along the sheet's x axis."""
        self.sprite_sheet.frame_x = new_count