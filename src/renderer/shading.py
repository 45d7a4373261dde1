# renderer/shading.py
from core.vector import Vector3
from core.ray import Ray
from core.utils import mirror, clamp_color
from geometry.world import nearest_hit, is_visible
from renderer.settings import RenderSettings

DEFAULT_SETTINGS = RenderSettings()

def shade(eye: Vector3, point: Vector3, shape, depth: int, scene,
          settings: RenderSettings = DEFAULT_SETTINGS) -> Vector3:
    """
    Color seen from `eye` at `point` on `shape`.

    Phong terms are summed over every light that `point` can see; point lights
    are divided by the scene's attenuation polynomial. While `depth` is
    positive the mirror ray is followed and whatever it hits is shaded one
    level deeper, scaled by the specular color. Channels are clamped to 1.
    """
    color = shape.ambient + shape.emission
    n = shape.normal(point)
    e = (eye - point).normalize()

    for light in scene.lights:
        if not is_visible(point, light, scene, settings.shadow_epsilon):
            continue
        l = light.direction_from(point)
        h = (l + e).normalize()

        lambert = shape.diffuse * light.color * max(n.dot(l), 0.0)
        phong = shape.specular * light.color * (max(n.dot(h), 0.0) ** shape.shininess)
        if not light.is_directional:
            atten = scene.attenuate(light.distance_from(point))
            lambert = lambert / atten
            phong = phong / atten
        color = color + lambert + phong

    if depth > 0:
        r = mirror(e, n)
        reflected = Ray.offset(point, r, settings.reflection_epsilon)
        hit = nearest_hit(reflected.origin, reflected.direction, scene)
        if hit is not None:
            bounce = shade(point, point + r * hit.t, hit.shape, depth - 1, scene, settings)
            color = color + shape.specular * bounce

    return clamp_color(color)
