# core/utils.py
from core.vector import Vector3

def mirror(e: Vector3, n: Vector3) -> Vector3:
    """
    Mirrors the unit vector e (pointing away from the surface) about the normal n.
    The result also points away from the surface.
    """
    return (n * (2 * n.dot(e)) - e).normalize()

def clamp_color(color: Vector3, maximum: float = 1.0) -> Vector3:
    """
    Clamps each channel of a color to at most `maximum`.
    """
    return Vector3(min(color.x, maximum), min(color.y, maximum), min(color.z, maximum))
