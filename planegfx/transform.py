"""Translation, rotation and scale of an object, with optional parent."""

from __future__ import annotations

from dataclasses import dataclass, field

from planegfx.mat3 import Mat3, build_rotation, build_scaling, build_translation
from planegfx.vec2 import Vec2


@dataclass(eq=False)
class Transform:
    """A 2D transform; a parent's transform is applied after this one."""

    translation: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    rotation: float = 0.0
    depth: float = 0.0
    parent: Transform | None = None

    def model_to_world(self) -> Mat3:
        """Return the matrix from model space to world space."""
        local = (
            build_translation(self.translation.x, self.translation.y)
            * build_rotation(self.rotation)
            * build_scaling(self.scale.x, self.scale.y)
        )
        if self.parent is not None:
            return self.parent.model_to_world() * local
        return local

    def world_to_model(self) -> Mat3:
        """Return the matrix from world space back to model space."""
        local_inverse = (
            build_scaling(1 / self.scale.x, 1 / self.scale.y)
            * build_rotation(-self.rotation)
            * build_translation(-self.translation.x, -self.translation.y)
        )
        if self.parent is not None:
            return local_inverse * self.parent.world_to_model()
        return local_inverse

    def world_depth(self) -> float:
        """Return this depth plus the depths of all parents."""
        if self.parent is not None:
            return self.depth + self.parent.world_depth()
        return self.depth