# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Optional
import numpy as np
from core.utils import task_rng
from renderer.integrator import SKY, trace

logger = logging.getLogger(__name__)

# Row callback: (row_index, row_pixels) -> False to stop the render early
RowCallback = Callable[[int, np.ndarray], Optional[bool]]

class Renderer:
    """
    Drives trace() over an image, one row per task.

    Every row draws from its own generator seeded with (seed, row), so the
    accumulated image is identical for any number of workers. The world
    and camera are only read, never modified, while rendering.
    """
    def __init__(self, world, camera, width: int, height: int, samples: int = 16,
                 max_depth: int = 50, seed: int = 42, background=SKY,
                 debug_normals: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if samples <= 0:
            raise ValueError(f"samples per pixel must be positive, got {samples}")
        self.world = world
        self.camera = camera
        self.width = width
        self.height = height
        self.samples = samples
        self.max_depth = max_depth
        self.seed = seed
        self.background = background
        self.debug_normals = debug_normals

    def render_row(self, j: int) -> np.ndarray:
        """
        Sum of `samples` linear RGB estimates for every pixel of row j
        (row 0 is the top of the image). Returns a (width, 3) array.
        """
        rng = task_rng(self.seed, j)
        row = np.zeros((self.width, 3), dtype=np.float64)
        # Image rows run top-down, camera t runs bottom-up
        y = self.height - 1 - j
        du = max(self.width - 1, 1)
        dv = max(self.height - 1, 1)
        for i in range(self.width):
            r = g = b = 0.0
            for _ in range(self.samples):
                s = (i + rng.random()) / du
                t = (y + rng.random()) / dv
                ray = self.camera.get_ray(s, t, rng)
                color = trace(ray, self.world, rng, self.max_depth,
                              self.background, self.debug_normals)
                r += color.x
                g += color.y
                b += color.z
            row[i, 0] = r
            row[i, 1] = g
            row[i, 2] = b
        return row

    def render(self, workers: int = 1, on_row: RowCallback = None) -> np.ndarray:
        """
        Render every row and return the (height, width, 3) accumulation
        buffer of summed samples.

        With workers > 1 rows are farmed out to a process pool. `on_row` is
        called as each row finishes; returning False abandons the rows that
        have not started yet (their pixels stay black).
        """
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    self.width, self.height, self.samples, self.max_depth, workers)
        start = time.time()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)

        if workers <= 1:
            for j in range(self.height):
                image[j] = self.render_row(j)
                if on_row is not None and on_row(j, image[j]) is False:
                    logger.info("Render stopped after row %d", j)
                    break
        else:
            self._render_parallel(image, workers, on_row)

        logger.info("Render finished in %.2fs", time.time() - start)
        return image

    def _render_parallel(self, image: np.ndarray, workers: int, on_row: RowCallback):
        # The renderer (and with it the scene) is pickled once per worker
        with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                 initargs=(self,)) as pool:
            futures = [pool.submit(_render_row_in_worker, j) for j in range(self.height)]
            for future in as_completed(futures):
                j, row = future.result()
                image[j] = row
                if on_row is not None and on_row(j, image[j]) is False:
                    logger.info("Render stopped, cancelling pending rows")
                    pool.shutdown(wait=True, cancel_futures=True)
                    break

_worker_renderer: Optional[Renderer] = None

def _init_worker(renderer: Renderer):
    global _worker_renderer
    _worker_renderer = renderer

def _render_row_in_worker(j: int):
    return j, _worker_renderer.render_row(j)
