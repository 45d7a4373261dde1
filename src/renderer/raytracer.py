# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Tuple
import numpy as np
from tqdm import tqdm
from camera.camera import Camera
from geometry.world import nearest_hit
from renderer.settings import BLOCKS_PER_WORKER, RenderSettings
from renderer.shading import shade

logger = logging.getLogger(__name__)

# Per-process state, set once by the pool initializer and read-only afterwards.
_worker_scene = None
_worker_settings = None

def _init_worker(scene, settings: RenderSettings):
    global _worker_scene, _worker_settings
    _worker_scene = scene
    _worker_settings = settings

def _render_block_in_worker(x0: int, x1: int) -> Tuple[int, np.ndarray]:
    return x0, render_columns(_worker_scene, x0, x1, _worker_settings)

def render_columns(scene, x0: int, x1: int, settings: RenderSettings) -> np.ndarray:
    """
    Renders columns [x0, x1) of the frame. Returns a (x1 - x0, height, 3) block;
    pixels whose primary ray hits nothing stay black.
    """
    camera = Camera.from_scene(scene)
    block = np.zeros((x1 - x0, scene.height, 3), dtype=np.float64)
    for i in range(x0, x1):
        for j in range(scene.height):
            ray = camera.get_ray(i, j)
            hit = nearest_hit(ray.origin, ray.direction, scene)
            if hit is None:
                continue
            color = shade(scene.eye, hit.point(ray), hit.shape, scene.max_depth, scene, settings)
            block[i - x0, j] = (color.x, color.y, color.z)
    return block

def partition_columns(width: int, block_width: int) -> List[Tuple[int, int]]:
    """Splits [0, width) into contiguous, disjoint [x0, x1) column ranges."""
    return [(x0, min(x0 + block_width, width)) for x0 in range(0, width, block_width)]

class Renderer:
    """
    Renders a Scene into a (width, height, 3) float buffer in [0, 1].

    Columns are split into blocks and rendered on a bounded process pool. The
    scene is copied into each worker once, through the pool initializer.
    Buffer index [i, j] is column i, row j, with row 0 at the bottom of the
    picture.
    """
    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()

    def render(self, scene) -> np.ndarray:
        frame = np.zeros((scene.width, scene.height, 3), dtype=np.float64)
        workers = min(self.settings.resolved_workers(), max(scene.width, 1))
        block_width = self.settings.columns_per_task or max(1, math.ceil(scene.width / (workers * BLOCKS_PER_WORKER)))
        blocks = partition_columns(scene.width, block_width)

        logger.info("Rendering %dx%d, %d shapes, %d lights, depth %d on %d worker(s)",
                    scene.width, scene.height, len(scene.shapes), len(scene.lights),
                    scene.max_depth, workers)
        start = time.perf_counter()

        progress = tqdm(total=len(blocks), unit="block", desc="Rendering",
                        disable=not self.settings.show_progress)
        try:
            if workers == 1:
                for x0, x1 in blocks:
                    frame[x0:x1] = render_columns(scene, x0, x1, self.settings)
                    progress.update(1)
            else:
                with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                         initargs=(scene, self.settings)) as exe:
                    futures = [exe.submit(_render_block_in_worker, x0, x1) for x0, x1 in blocks]
                    for future in as_completed(futures):
                        x0, block = future.result()
                        frame[x0:x0 + block.shape[0]] = block
                        progress.update(1)
        finally:
            progress.close()

        logger.info("Rendered frame in %.2fs", time.perf_counter() - start)
        return frame

def render(scene, settings: Optional[RenderSettings] = None) -> np.ndarray:
    """Convenience wrapper: Renderer(settings).render(scene)."""
    return Renderer(settings).render(scene)
