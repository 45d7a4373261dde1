import numpy as np
import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from materials.material import Material
from renderer.settings import RenderSettings
from renderer.shading import shade
from scene.light import Light
from conftest import make_scene

EYE = Vector3(0, 0, 5)
POLE = Vector3(0, 0, 1)
WHITE = Vector3(1, 1, 1)


def color_of(v):
    return v.to_array()


def test_ambient_plus_emission_without_lights():
    mat = Material(ambient=Vector3(0.1, 0.2, 0.3), emission=Vector3(0.1, 0.1, 0.1))
    sphere = Sphere(Vector3(0, 0, 0), 1.0, mat)
    color = shade(EYE, POLE, sphere, 0, make_scene(shapes=[sphere]))
    assert np.allclose(color_of(color), (0.2, 0.3, 0.4))


def test_full_diffuse_head_on(sphere_scene):
    sphere = sphere_scene.shapes[0]
    color = shade(EYE, POLE, sphere, 0, sphere_scene)
    assert np.allclose(color_of(color), (0.6, 0.6, 0.6))


def test_diffuse_falls_off_with_angle(matte):
    sphere = Sphere(Vector3(0, 0, 0), 1.0, matte)
    light = Light.directional(Vector3(1, 0, 1), WHITE)
    scene = make_scene(shapes=[sphere], lights=[light])
    color = shade(EYE, POLE, sphere, 0, scene)
    expected = 0.1 + 0.5 * np.sqrt(0.5)
    assert np.allclose(color_of(color), (expected,) * 3)


def test_light_behind_surface_adds_nothing(matte):
    sphere = Sphere(Vector3(0, 0, 0), 1.0, matte)
    light = Light.directional(Vector3(0, 0, -1), WHITE)
    scene = make_scene(shapes=[sphere], lights=[light])
    color = shade(EYE, POLE, sphere, 0, scene)
    assert np.allclose(color_of(color), (0.1, 0.1, 0.1))


def test_shadowed_point_gets_only_ambient(matte):
    floor = Triangle(Vector3(-10, -10, 0), Vector3(10, -10, 0), Vector3(0, 10, 0), matte)
    blocker = Sphere(Vector3(0, 0, 3), 1.0, matte)
    light = Light.point(Vector3(0, 0, 6), WHITE)
    scene = make_scene(shapes=[floor, blocker], lights=[light])
    color = shade(Vector3(5, 0, 5), Vector3(0, 0, 0), floor, 0, scene)
    assert np.allclose(color_of(color), (0.1, 0.1, 0.1))


def test_point_light_attenuation(matte):
    floor = Triangle(Vector3(-10, -10, 0), Vector3(10, -10, 0), Vector3(0, 10, 0), matte)
    light = Light.point(Vector3(0, 0, 2), WHITE)
    scene = make_scene(shapes=[floor], lights=[light], attenuation=(1, 0.5, 0.25))
    color = shade(EYE, Vector3(0, 0, 0), floor, 0, scene)
    # d = 2: 1 + 0.5 * 2 + 0.25 * 4 = 3
    assert np.allclose(color_of(color), (0.1 + 0.5 / 3,) * 3)


def test_directional_light_not_attenuated(matte):
    floor = Triangle(Vector3(-10, -10, 0), Vector3(10, -10, 0), Vector3(0, 10, 0), matte)
    light = Light.directional(Vector3(0, 0, 1), WHITE)
    scene = make_scene(shapes=[floor], lights=[light], attenuation=(1, 0.5, 0.25))
    color = shade(EYE, Vector3(0, 0, 0), floor, 0, scene)
    assert np.allclose(color_of(color), (0.6, 0.6, 0.6))


def test_specular_highlight():
    mat = Material(specular=Vector3(0.5, 0.5, 0.5), shininess=20)
    sphere = Sphere(Vector3(0, 0, 0), 1.0, mat)
    light = Light.directional(Vector3(0, 0, 1), WHITE)
    scene = make_scene(shapes=[sphere], lights=[light])
    # Eye, light and normal aligned: n.h == 1.
    color = shade(EYE, POLE, sphere, 0, scene)
    assert np.allclose(color_of(color), (0.5, 0.5, 0.5))


def test_bright_lights_are_clamped(matte):
    sphere = Sphere(Vector3(0, 0, 0), 1.0, matte)
    lights = [Light.directional(Vector3(0, 0, 1), Vector3(100, 50, 0.5))] * 3
    scene = make_scene(shapes=[sphere], lights=lights)
    color = color_of(shade(EYE, POLE, sphere, 0, scene))
    assert np.all(color <= 1.0)
    assert np.all(color >= 0.0)
    assert color[0] == pytest.approx(1.0)
    assert color[2] == pytest.approx(0.1 + 3 * 0.25)


def mirror_pair():
    mirror = Material(specular=Vector3(0.5, 0.5, 0.5))
    glowing = Material(emission=Vector3(0.8, 0.4, 0.2))
    floor = Triangle(Vector3(-10, -10, 0), Vector3(10, -10, 0), Vector3(0, 10, 0), mirror)
    # Sits straight above the floor point the eye looks at.
    above = Sphere(Vector3(0, 0, 3), 1.0, glowing)
    return floor, above


def test_no_reflection_at_depth_zero():
    floor, above = mirror_pair()
    scene = make_scene(shapes=[floor, above], max_depth=0)
    color = shade(Vector3(0, 0, 10), Vector3(0, 0, 0), floor, 0, scene)
    assert np.allclose(color_of(color), (0, 0, 0))


def test_reflection_adds_specular_times_reflected_color():
    floor, above = mirror_pair()
    scene = make_scene(shapes=[floor, above], max_depth=1)
    color = shade(Vector3(0, 0, 10), Vector3(0, 0, 0), floor, 1, scene)
    assert np.allclose(color_of(color), (0.4, 0.2, 0.1))


def test_empty_reflection_contributes_nothing():
    floor, _ = mirror_pair()
    scene = make_scene(shapes=[floor], max_depth=3)
    color = shade(Vector3(0, 0, 10), Vector3(0, 0, 0), floor, 3, scene)
    assert np.allclose(color_of(color), (0, 0, 0))


def test_epsilons_come_from_settings(matte):
    sphere = Sphere(Vector3(0, 0, 0), 1.0, matte)
    light = Light.directional(Vector3(0, 0, 1), WHITE)
    scene = make_scene(shapes=[sphere], lights=[light])
    # A point just inside the surface shadows itself unless the offset clears the shell.
    inside = Vector3(0, 0, 0.999)
    dark = shade(EYE, inside, sphere, 0, scene, RenderSettings(shadow_epsilon=0.0))
    lit = shade(EYE, inside, sphere, 0, scene, RenderSettings(shadow_epsilon=0.01))
    assert np.allclose(color_of(dark), (0.1, 0.1, 0.1))
    assert color_of(lit)[0] > 0.5


@pytest.mark.parametrize("depth,expected", [(1, 0.15), (2, 0.175)])
def test_facing_mirrors_stop_at_depth(depth, expected):
    # Each bounce adds specular * (what the other mirror shows one level down).
    mat = Material(specular=Vector3(0.5, 0.5, 0.5), emission=Vector3(0.1, 0.1, 0.1))
    floor = Triangle(Vector3(-10, -10, 0), Vector3(10, -10, 0), Vector3(0, 10, 0), mat)
    ceiling = Triangle(Vector3(-10, -10, 2), Vector3(0, 10, 2), Vector3(10, -10, 2), mat)
    scene = make_scene(shapes=[floor, ceiling], max_depth=depth)
    color = shade(Vector3(0, 0, 10), Vector3(0, 0, 0), floor, depth, scene)
    assert np.allclose(color_of(color), (expected,) * 3)


@pytest.mark.parametrize("attenuation", [(0, 0, 0), (1, -0.5, 0)])
def test_scene_rejects_unusable_attenuation(attenuation):
    with pytest.raises(ValueError):
        make_scene(attenuation=attenuation)
