# scene/scene.py
import math
from dataclasses import dataclass, field
from typing import Tuple
from core.vector import Vector3
from scene.light import Light

DEFAULT_ATTENUATION = (1.0, 0.0, 0.0)
DEFAULT_MAX_DEPTH = 5
DEFAULT_OUTPUT = "output.png"

def check_attenuation(coefficients):
    """
    Point-light falloff must stay positive at every distance: no negative
    coefficient, and not all of them zero.
    """
    if any(k < 0 for k in coefficients):
        raise ValueError(f"attenuation coefficients must be non-negative, got {tuple(coefficients)}")
    if not any(k > 0 for k in coefficients):
        raise ValueError("attenuation needs at least one positive coefficient")

@dataclass(frozen=True)
class Scene:
    """
    Everything the renderer needs for one frame. Built once and only read
    while rendering, which is what lets worker processes share it freely.

    `up` must already be orthogonalized against `center - eye`
    (see core.transforms.up_vector).
    """
    width: int
    height: int
    eye: Vector3
    center: Vector3
    up: Vector3
    fov_y: float = math.radians(45)
    max_depth: int = DEFAULT_MAX_DEPTH
    attenuation: Tuple[float, float, float] = DEFAULT_ATTENUATION
    shapes: tuple = field(default_factory=tuple)
    lights: Tuple[Light, ...] = field(default_factory=tuple)
    output_file: str = DEFAULT_OUTPUT

    def __post_init__(self):
        # Callers may hand in lists; freeze them.
        object.__setattr__(self, "shapes", tuple(self.shapes))
        object.__setattr__(self, "lights", tuple(self.lights))
        object.__setattr__(self, "attenuation", tuple(float(k) for k in self.attenuation))
        check_attenuation(self.attenuation)

    def attenuate(self, distance: float) -> float:
        """Point-light falloff divisor at `distance`."""
        constant, linear, quadratic = self.attenuation
        return constant + linear * distance + quadratic * distance * distance
