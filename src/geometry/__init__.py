from geometry.hittable import HitRecord, Shape
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from geometry.world import nearest_hit, is_visible

__all__ = ["HitRecord", "Shape", "Sphere", "Triangle", "nearest_hit", "is_visible"]
