# geometry/kernels.py

from numba import njit
import math

MISS = -1.0

@njit
def to_object_space(inverse, origin, direction):
    """Applies the world-to-object matrix to a ray (origin as a point, direction as a vector)."""
    o0 = inverse[0, 0] * origin[0] + inverse[0, 1] * origin[1] + inverse[0, 2] * origin[2] + inverse[0, 3]
    o1 = inverse[1, 0] * origin[0] + inverse[1, 1] * origin[1] + inverse[1, 2] * origin[2] + inverse[1, 3]
    o2 = inverse[2, 0] * origin[0] + inverse[2, 1] * origin[1] + inverse[2, 2] * origin[2] + inverse[2, 3]
    d0 = inverse[0, 0] * direction[0] + inverse[0, 1] * direction[1] + inverse[0, 2] * direction[2]
    d1 = inverse[1, 0] * direction[0] + inverse[1, 1] * direction[1] + inverse[1, 2] * direction[2]
    d2 = inverse[2, 0] * direction[0] + inverse[2, 1] * direction[1] + inverse[2, 2] * direction[2]
    return o0, o1, o2, d0, d1, d2

@njit
def ray_sphere_intersect(inverse, origin, direction, center, radius):
    """
    Ray-sphere intersection in the sphere's object space.
    Returns the smallest strictly positive root, or -1.0 for a miss.
    """
    o0, o1, o2, d0, d1, d2 = to_object_space(inverse, origin, direction)
    oc0 = o0 - center[0]
    oc1 = o1 - center[1]
    oc2 = o2 - center[2]

    a = d0 * d0 + d1 * d1 + d2 * d2
    if a == 0.0:
        return MISS
    b = 2.0 * (d0 * oc0 + d1 * oc1 + d2 * oc2)
    c = oc0 * oc0 + oc1 * oc1 + oc2 * oc2 - radius * radius

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return MISS

    sqrtd = math.sqrt(discriminant)
    t_near = (-b - sqrtd) / (2.0 * a)
    t_far = (-b + sqrtd) / (2.0 * a)
    if t_near > 0.0:
        return t_near
    if t_far > 0.0:
        return t_far
    return MISS

@njit
def ray_triangle_intersect(inverse, origin, direction, v0, v1, v2, normal):
    """
    Ray-triangle intersection in the triangle's object space: plane hit, then
    barycentric coordinates from sub-triangle areas projected on the normal.
    Returns t, or -1.0 for a miss, a parallel ray or a zero-area triangle.
    """
    o0, o1, o2, d0, d1, d2 = to_object_space(inverse, origin, direction)
    n0 = normal[0]
    n1 = normal[1]
    n2 = normal[2]

    d_dot_n = d0 * n0 + d1 * n1 + d2 * n2
    if d_dot_n == 0.0:
        return MISS

    plane = v0[0] * n0 + v0[1] * n1 + v0[2] * n2
    t = (plane - (o0 * n0 + o1 * n1 + o2 * n2)) / d_dot_n
    if t <= 0.0:
        return MISS

    p0 = o0 + d0 * t
    p1 = o1 + d1 * t
    p2 = o2 + d2 * t

    area = signed_area(v0[0], v0[1], v0[2], v1[0], v1[1], v1[2], v2[0], v2[1], v2[2], n0, n1, n2)
    if area == 0.0:
        return MISS

    alpha = signed_area(p0, p1, p2, v1[0], v1[1], v1[2], v2[0], v2[1], v2[2], n0, n1, n2) / area
    beta = signed_area(p0, p1, p2, v2[0], v2[1], v2[2], v0[0], v0[1], v0[2], n0, n1, n2) / area
    if alpha >= 0.0 and alpha <= 1.0 and beta >= 0.0 and beta <= 1.0 and alpha + beta <= 1.0:
        return t
    return MISS

@njit
def signed_area(ax, ay, az, bx, by, bz, cx, cy, cz, n0, n1, n2):
    """n . ((b - a) x (c - a)): twice the area of abc, signed by the normal."""
    e1x = bx - ax
    e1y = by - ay
    e1z = bz - az
    e2x = cx - ax
    e2y = cy - ay
    e2z = cz - az
    return (n0 * (e1y * e2z - e1z * e2y)
            + n1 * (e1z * e2x - e1x * e2z)
            + n2 * (e1x * e2y - e1y * e2x))
