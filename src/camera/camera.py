# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera. Produces one primary ray through the center of each pixel.
    """
    def __init__(self, eye: Vector3, center: Vector3, up: Vector3,
                 fov_y: float, width: int, height: int):
        self.eye = eye
        self.center = center
        self.up = up
        self.fov_y = fov_y
        self.width = width
        self.height = height
        self.update_camera()

    @classmethod
    def from_scene(cls, scene) -> "Camera":
        return cls(scene.eye, scene.center, scene.up, scene.fov_y, scene.width, scene.height)

    def update_camera(self):
        """Updates the camera's basis vectors and the half-extents of the image plane."""
        self.w = (self.center - self.eye).normalize()
        self.u = self.up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.tan_half_fov_y = math.tan(self.fov_y / 2)
        self.fov_x = 2 * math.atan(self.tan_half_fov_y * self.width / self.height)
        self.tan_half_fov_x = math.tan(self.fov_x / 2)

    def get_direction(self, i: float, j: float) -> Vector3:
        """Unit direction through image-plane coordinates (i, j), in pixels."""
        half_w = self.width / 2
        half_h = self.height / 2
        alpha = self.tan_half_fov_x * (i - half_w) / half_w
        beta = self.tan_half_fov_y * -(j - half_h) / half_h
        return (self.u * alpha + self.v * beta + self.w).normalize()

    def get_ray(self, i: int, j: int) -> Ray:
        """Primary ray through the center of pixel (i, j)."""
        return Ray(self.eye, self.get_direction(i + 0.5, j + 0.5))
