# geometry/sphere.py
from typing import Optional
import numpy as np
from core.vector import Vector3
from core.transforms import transform_point, transform_normal
from geometry.hittable import Shape
from geometry.kernels import ray_sphere_intersect
from materials.material import Material

class Sphere(Shape):
    """
    Represents a sphere defined by its object-space center and radius, placed
    in the world by an affine transform (so it may be an ellipsoid).
    """
    def __init__(self, center: Vector3, radius: float, material: Material,
                 transform: Optional[np.ndarray] = None):
        super().__init__(material, transform)
        self.center = center
        self.radius = float(radius)
        self._center = center.to_array()

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[float]:
        t = ray_sphere_intersect(self.inverse, origin.to_array(), direction.to_array(),
                                 self._center, self.radius)
        return t if t > 0 else None

    def normal(self, point: Vector3) -> Vector3:
        local = transform_point(self.inverse, point)
        outward = (local - self.center).normalize()
        return transform_normal(self.inverse_transpose, outward)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
