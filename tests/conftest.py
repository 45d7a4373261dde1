import math
import pytest

from core.vector import Vector3
from core.transforms import up_vector
from geometry.sphere import Sphere
from materials.material import Material
from scene.light import Light
from scene.scene import Scene


def make_scene(shapes=(), lights=(), width=21, height=21, eye=Vector3(0, 0, 5),
               center=Vector3(0, 0, 0), fov_deg=45.0, max_depth=0, attenuation=(1, 0, 0)):
    up = up_vector(Vector3(0, 1, 0), center - eye)
    return Scene(width=width, height=height, eye=eye, center=center, up=up,
                 fov_y=math.radians(fov_deg), max_depth=max_depth,
                 attenuation=attenuation, shapes=shapes, lights=lights)


@pytest.fixture
def matte():
    return Material(ambient=Vector3(0.1, 0.1, 0.1), diffuse=Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def sphere_scene(matte):
    """Unit sphere at the origin lit head-on by a white directional light."""
    sphere = Sphere(Vector3(0, 0, 0), 1.0, matte)
    light = Light.directional(Vector3(0, 0, 1), Vector3(1, 1, 1))
    return make_scene(shapes=[sphere], lights=[light])
