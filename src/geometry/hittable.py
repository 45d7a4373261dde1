# geometry/hittable.py
from typing import Optional
import numpy as np
from core.vector import Vector3
from core.ray import Ray
from materials.material import Material

class HitRecord:
    """
    Records the nearest ray-shape intersection: which shape, and how far along the ray.
    """
    __slots__ = ("shape", "t")

    def __init__(self, shape: "Shape", t: float):
        self.shape = shape  # Shape that was hit
        self.t = t          # Ray parameter at intersection

    def point(self, ray: Ray) -> Vector3:
        return ray.at(self.t)

    def __repr__(self) -> str:
        return f"HitRecord({self.shape!r}, t={self.t})"

class Shape:
    """
    Base class for renderable primitives. Owns the object-to-world transform
    (with its inverse and inverse-transpose computed once) and the material.
    Subclasses implement intersect() and normal().
    """
    def __init__(self, material: Material, transform: Optional[np.ndarray] = None):
        self.material = material
        if transform is None:
            transform = np.identity(4)
        self.transform = np.ascontiguousarray(transform, dtype=np.float64)
        self.inverse = np.ascontiguousarray(np.linalg.inv(self.transform))
        self.inverse_transpose = np.ascontiguousarray(self.inverse.T)

    def intersect(self, origin: Vector3, direction: Vector3) -> Optional[float]:
        """
        Distance along the ray to the nearest strictly positive hit, or None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal(self, point: Vector3) -> Vector3:
        """
        Unit world-space surface normal at the world-space `point`.
        """
        raise NotImplementedError("normal() must be implemented by subclasses.")

    @property
    def ambient(self) -> Vector3:
        return self.material.ambient

    @property
    def diffuse(self) -> Vector3:
        return self.material.diffuse

    @property
    def specular(self) -> Vector3:
        return self.material.specular

    @property
    def emission(self) -> Vector3:
        return self.material.emission

    @property
    def shininess(self) -> float:
        return self.material.shininess
