# geometry/triangle.py
from typing import Optional
import numpy as np
from core.vector import Vector3
from geometry.hittable import Shape
from geometry.kernels import ray_triangle_intersect
from core.transforms import transform_normal
from materials.material import Material

class Triangle(Shape):
    """Represents a single flat triangle with an object-to-world transform."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material: Material,
                 transform: Optional[np.ndarray] = None):
        super().__init__(material, transform)
        # Vertices
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2

        # Face normal in object space; zero for a degenerate triangle
        edge1 = v1 - v0
        edge2 = v2 - v0
        self.face_normal = edge1.cross(edge2).normalize()
        self._world_normal = transform_normal(self.inverse_transpose, self.face_normal)

        self._v0 = v0.to_array()
        self._v1 = v1.to_array()
        self._v2 = v2.to_array()
        self._normal = self.face_normal.to_array()

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[float]:
        t = ray_triangle_intersect(self.inverse, origin.to_array(), direction.to_array(),
                                   self._v0, self._v1, self._v2, self._normal)
        return t if t > 0 else None

    def normal(self, point: Vector3) -> Vector3:
        return self._world_normal

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
