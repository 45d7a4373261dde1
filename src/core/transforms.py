# core/transforms.py
import math
import numpy as np
from core.vector import Vector3

def identity() -> np.ndarray:
    return np.identity(4, dtype=np.float64)

def translate(tx: float, ty: float, tz: float) -> np.ndarray:
    m = identity()
    m[:3, 3] = (tx, ty, tz)
    return m

def scale(sx: float, sy: float, sz: float) -> np.ndarray:
    return np.diag((sx, sy, sz, 1.0)).astype(np.float64)

def rotate(degrees: float, axis: Vector3) -> np.ndarray:
    """
    Rotation by `degrees` about `axis` (Rodrigues' formula), as a 4x4 matrix.
    """
    a = axis.normalize().to_array()
    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)

    skew = np.array((
        (0.0, -a[2], a[1]),
        (a[2], 0.0, -a[0]),
        (-a[1], a[0], 0.0),
    ))
    r = np.identity(3) * cos_t + np.outer(a, a) * (1 - cos_t) + skew * sin_t

    m = identity()
    m[:3, :3] = r
    return m

def up_vector(up: Vector3, view: Vector3) -> Vector3:
    """
    Orthogonalizes `up` against the view direction for the camera basis.

    The result is unit length and perpendicular to `view`, computed as
    (up x view) x view. That vector points opposite the requested up, so with
    u = up x w and v = w x u the camera's u runs left to right across the
    picture and v runs top to bottom: pixel row 0 of the frame buffer is the
    bottom row of the picture.
    """
    x = up.cross(view)
    y = x.cross(view)
    return y.normalize()

def transform_point(m: np.ndarray, p: Vector3) -> Vector3:
    return Vector3.from_array(m @ np.array((p.x, p.y, p.z, 1.0)))

def transform_direction(m: np.ndarray, d: Vector3) -> Vector3:
    return Vector3.from_array(m @ np.array((d.x, d.y, d.z, 0.0)))

def transform_normal(inverse_transpose: np.ndarray, n: Vector3) -> Vector3:
    """
    Takes an object-space normal to world space. Expects the inverse-transpose
    of the object-to-world matrix.
    """
    return transform_direction(inverse_transpose, n).normalize()
