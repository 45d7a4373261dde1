# geometry/world.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import HitRecord
from renderer.settings import SHADOW_EPSILON


def nearest_hit(origin: Vector3, direction: Vector3, scene) -> Optional[HitRecord]:
    """
    Brute-force scan over every shape in the scene. Keeps the smallest strictly
    positive distance; on an exact tie the earlier shape wins.
    """
    hit_record = None
    closest_so_far = 0.0
    for shape in scene.shapes:
        t = shape.intersect(origin, direction)
        if t is None or t <= 0:
            continue
        if hit_record is None or t < closest_so_far:
            closest_so_far = t
            hit_record = HitRecord(shape, t)
    return hit_record

def is_visible(point: Vector3, light, scene, epsilon: float = SHADOW_EPSILON) -> bool:
    """
    Shadow test. A directional light is visible when nothing lies along its
    direction; a point light is also visible when the first occluder is at or
    beyond the light itself.
    """
    l = light.direction_from(point)
    shadow_ray = Ray.offset(point, l, epsilon)
    hit = nearest_hit(shadow_ray.origin, shadow_ray.direction, scene)
    if hit is None:
        return True
    if light.is_directional:
        return False
    return hit.t >= light.distance_from(point)
