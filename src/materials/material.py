# materials/material.py
from core.vector import Vector3

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Phong material: ambient, diffuse, specular and emission colors plus the
    specular exponent. The specular color also scales mirror reflections.
    """
    __slots__ = ("ambient", "diffuse", "specular", "emission", "shininess")

    def __init__(self, ambient: Vector3 = BLACK, diffuse: Vector3 = BLACK,
                 specular: Vector3 = BLACK, emission: Vector3 = BLACK,
                 shininess: float = 0.0):
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.emission = emission
        self.shininess = shininess

    def __getstate__(self):
        return (self.ambient, self.diffuse, self.specular, self.emission, self.shininess)

    def __setstate__(self, state):
        self.ambient, self.diffuse, self.specular, self.emission, self.shininess = state

    def __repr__(self) -> str:
        return (f"Material(ambient={self.ambient!r}, diffuse={self.diffuse!r}, "
                f"specular={self.specular!r}, emission={self.emission!r}, "
                f"shininess={self.shininess})")
