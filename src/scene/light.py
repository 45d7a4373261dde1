# scene/light.py
from dataclasses import dataclass
from core.vector import Vector3

@dataclass(frozen=True)
class Light:
    """
    A directional or point light. For a directional light `pos` is the
    direction toward the light; for a point light it is a world position.
    """
    pos: Vector3
    color: Vector3
    is_directional: bool = False

    @staticmethod
    def directional(direction: Vector3, color: Vector3) -> "Light":
        return Light(direction, color, True)

    @staticmethod
    def point(position: Vector3, color: Vector3) -> "Light":
        return Light(position, color, False)

    def direction_from(self, point: Vector3) -> Vector3:
        """Unit vector from `point` toward the light."""
        if self.is_directional:
            return self.pos.normalize()
        return (self.pos - point).normalize()

    def distance_from(self, point: Vector3) -> float:
        if self.is_directional:
            return float("inf")
        return (self.pos - point).length()
