# core/ray.py
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    @staticmethod
    def offset(origin: Vector3, direction: Vector3, epsilon: float) -> "Ray":
        """
        Returns a ray whose origin is nudged `epsilon` along `direction`, used for
        secondary rays so they do not hit the surface they start on.
        """
        return Ray(origin + direction * epsilon, direction)

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
