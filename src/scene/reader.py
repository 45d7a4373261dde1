# scene/reader.py
import logging
import math
from typing import Dict, List
import numpy as np
from core.vector import Vector3
from core import transforms
from geometry.sphere import Sphere
from geometry.triangle import Triangle
from materials.material import Material
from scene.light import Light
from scene.scene import Scene, DEFAULT_ATTENUATION, DEFAULT_MAX_DEPTH, DEFAULT_OUTPUT, check_attenuation

logger = logging.getLogger(__name__)

DEFAULT_AMBIENT = Vector3(0.2, 0.2, 0.2)

# Number of numeric arguments each command takes.
ARITY: Dict[str, int] = {
    "size": 2,
    "maxdepth": 1,
    "camera": 10,
    "attenuation": 3,
    "maxverts": 1,
    "sphere": 4,
    "vertex": 3,
    "tri": 3,
    "translate": 3,
    "scale": 3,
    "rotate": 4,
    "pushTransform": 0,
    "popTransform": 0,
    "directional": 6,
    "point": 6,
    "ambient": 3,
    "diffuse": 3,
    "specular": 3,
    "emission": 3,
    "shininess": 1,
}

class SceneFormatError(ValueError):
    """A scene file line could not be understood."""
    def __init__(self, filename: str, line_num: int, message: str):
        super().__init__(f"{filename}:{line_num}: {message}")
        self.filename = filename
        self.line_num = line_num

class _SceneBuilder:
    """Mutable state while reading: current material, transform stack, vertices."""
    def __init__(self):
        self.width = 0
        self.height = 0
        self.max_depth = DEFAULT_MAX_DEPTH
        self.output_file = DEFAULT_OUTPUT
        self.attenuation = DEFAULT_ATTENUATION
        self.eye = Vector3(0, 0, 0)
        self.center = Vector3(0, 0, -1)
        self.up = Vector3(0, 1, 0)
        self.fov_y = math.radians(45)
        self.shapes: List = []
        self.lights: List[Light] = []

        self.ambient = DEFAULT_AMBIENT
        self.diffuse = Vector3(0, 0, 0)
        self.specular = Vector3(0, 0, 0)
        self.emission = Vector3(0, 0, 0)
        self.shininess = 0.0
        self.vertices: List[Vector3] = []
        self.stack: List[np.ndarray] = [transforms.identity()]

    def material(self) -> Material:
        return Material(self.ambient, self.diffuse, self.specular, self.emission, self.shininess)

    def right_multiply(self, m: np.ndarray):
        self.stack[-1] = self.stack[-1] @ m

    def vertex(self, index: float) -> Vector3:
        i = int(index)
        if i < 0 or i >= len(self.vertices):
            raise ValueError(f"vertex index {i} out of range ({len(self.vertices)} vertices defined)")
        return self.vertices[i]

    def apply(self, cmd: str, args: List[float]):
        if cmd == "size":
            self.width, self.height = int(args[0]), int(args[1])
        elif cmd == "maxdepth":
            self.max_depth = int(args[0])
        elif cmd == "camera":
            self.eye = Vector3(*args[0:3])
            self.center = Vector3(*args[3:6])
            self.up = transforms.up_vector(Vector3(*args[6:9]), self.center - self.eye)
            self.fov_y = math.radians(args[9])
        elif cmd == "attenuation":
            check_attenuation(args)
            self.attenuation = tuple(args)
        elif cmd == "maxverts":
            pass
        elif cmd == "sphere":
            self.shapes.append(Sphere(Vector3(*args[0:3]), args[3], self.material(), self.stack[-1]))
        elif cmd == "vertex":
            self.vertices.append(Vector3(*args))
        elif cmd == "tri":
            # Counter-clockwise winding faces the viewer: normal is (b - a) x (c - a).
            a, b, c = (self.vertex(k) for k in args)
            self.shapes.append(Triangle(a, b, c, self.material(), self.stack[-1]))
        elif cmd == "translate":
            self.right_multiply(transforms.translate(*args))
        elif cmd == "scale":
            self.right_multiply(transforms.scale(*args))
        elif cmd == "rotate":
            self.right_multiply(transforms.rotate(args[3], Vector3(*args[0:3])))
        elif cmd == "pushTransform":
            self.stack.append(self.stack[-1].copy())
        elif cmd == "popTransform":
            if len(self.stack) == 1:
                raise ValueError("popTransform without matching pushTransform")
            self.stack.pop()
        elif cmd == "directional":
            self.lights.append(Light.directional(Vector3(*args[0:3]), Vector3(*args[3:6])))
        elif cmd == "point":
            self.lights.append(Light.point(Vector3(*args[0:3]), Vector3(*args[3:6])))
        elif cmd == "ambient":
            self.ambient = Vector3(*args)
        elif cmd == "diffuse":
            self.diffuse = Vector3(*args)
        elif cmd == "specular":
            self.specular = Vector3(*args)
        elif cmd == "emission":
            self.emission = Vector3(*args)
        elif cmd == "shininess":
            self.shininess = args[0]

    def build(self) -> Scene:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("scene has no positive 'size'")
        return Scene(
            width=self.width,
            height=self.height,
            eye=self.eye,
            center=self.center,
            up=self.up,
            fov_y=self.fov_y,
            max_depth=self.max_depth,
            attenuation=self.attenuation,
            shapes=self.shapes,
            lights=self.lights,
            output_file=self.output_file,
        )

def parse_scene(lines, filename: str = "<scene>") -> Scene:
    """
    Builds a Scene from the lines of a scene description.

    Raises SceneFormatError for lines that cannot be applied. Unknown commands
    are logged and skipped.
    """
    builder = _SceneBuilder()
    line_num = 0
    for line_num, line in enumerate(lines, 1):
        values = line.split()
        if not values or values[0].startswith('#'):  # Skip blanks and comments
            continue

        cmd = values[0]
        if cmd == "output":
            if len(values) != 2:
                raise SceneFormatError(filename, line_num, "output expects a single file name")
            builder.output_file = values[1]
            continue
        if cmd not in ARITY:
            logger.warning("%s:%d: unknown command %r, skipping", filename, line_num, cmd)
            continue
        if len(values) - 1 != ARITY[cmd]:
            raise SceneFormatError(filename, line_num,
                                   f"{cmd} expects {ARITY[cmd]} arguments, got {len(values) - 1}")
        try:
            args = [float(v) for v in values[1:]]
            builder.apply(cmd, args)
        except (ValueError, np.linalg.LinAlgError) as e:
            raise SceneFormatError(filename, line_num, str(e)) from e

    try:
        scene = builder.build()
    except ValueError as e:
        raise SceneFormatError(filename, line_num, str(e)) from e
    logger.debug("Loaded %s: %d shapes, %d lights", filename, len(scene.shapes), len(scene.lights))
    return scene

def read_scene(filename: str) -> Scene:
    """Reads a scene description file."""
    with open(filename, 'r') as f:
        return parse_scene(f, filename)
