# renderer/raytracer.py
import logging
import random
import sys
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Optional, TextIO
import numpy as np
from tqdm import tqdm
from pathtracer.config import RenderSettings
from pathtracer.core.vector import Color
from pathtracer.geometry.world import HittableList
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.ppm import write_ppm
from pathtracer.renderer.tone_mapping import reinhard_tone_mapping, to_bytes

logger = logging.getLogger(__name__)

def render_row(world, camera, settings: RenderSettings, row: int, row_seed: int,
               background_color: Optional[Color] = None) -> np.ndarray:
    """
    Render one scanline. `row` counts from the top of the image.

    Returns a (width, 3) array with the mean of the samples of every pixel.
    All randomness comes from a private generator seeded with `row_seed`.
    """
    rng = random.Random(row_seed)
    width, height = settings.width, settings.height
    spp = settings.samples_per_pixel
    # Viewport t grows upward, image rows grow downward.
    j = height - 1 - row
    pixels = np.zeros((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(spp):
            s = (i + rng.random()) / width
            t = (j + rng.random()) / height
            ray = camera.get_ray(s, t, rng)
            color = ray_color(ray, world, settings.max_depth, rng, background_color)
            r += color.x
            g += color.y
            b += color.z
        pixels[i] = (r / spp, g / spp, b / spp)
    return pixels

# Per-process render state, installed once by the pool initializer so the
# scene is pickled once per worker rather than once per row.
_worker_state = None

def _init_worker(world, camera, settings, background_color):
    global _worker_state
    _worker_state = (world, camera, settings, background_color)

def _render_row_task(row: int, row_seed: int) -> np.ndarray:
    world, camera, settings, background_color = _worker_state
    return render_row(world, camera, settings, row, row_seed, background_color)

class Renderer:
    """
    CPU path tracer. Every scanline is an independent task; rows are
    collected in order so the output is the same for any number of workers.
    """
    def __init__(self, settings: RenderSettings = None):
        self.settings = settings if settings is not None else RenderSettings()

    def row_seeds(self):
        """One seed per scanline, derived from the settings seed."""
        children = np.random.SeedSequence(self.settings.seed).spawn(self.settings.height)
        return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]

    def prepare_world(self, world, camera):
        """
        Wrap a HittableList in a BVH built for the camera's shutter interval.
        Other hittables are used as they are.
        """
        if isinstance(world, HittableList):
            if len(world) == 0:
                raise ValueError("Cannot render an empty scene")
            started = time.perf_counter()
            bvh = world.build_bvh(camera.time0, camera.time1,
                                  random.Random(self.settings.seed))
            logger.info("Built BVH for %d objects (depth %d) in %.3fs",
                        len(world), bvh.depth(), time.perf_counter() - started)
            return bvh
        return world

    def render(self, world, camera, background_color: Optional[Color] = None) -> np.ndarray:
        """
        Render the scene and return the averaged linear colors as a
        (height, width, 3) float array, top row first.
        """
        settings = self.settings
        scene = self.prepare_world(world, camera)
        seeds = self.row_seeds()
        rows = range(settings.height)
        workers = min(settings.worker_count, settings.height)

        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    settings.width, settings.height, settings.samples_per_pixel,
                    settings.max_depth, workers)
        started = time.perf_counter()

        image = np.zeros((settings.height, settings.width, 3), dtype=np.float64)
        progress = tqdm(total=settings.height, desc="Scanlines", unit="row",
                        file=sys.stderr, disable=not settings.progress)
        with progress:
            if workers <= 1:
                for row in rows:
                    image[row] = render_row(scene, camera, settings, row, seeds[row],
                                            background_color)
                    progress.update(1)
            else:
                with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                         initargs=(scene, camera, settings,
                                                   background_color)) as executor:
                    # map() yields in submission order, so each row lands in place
                    for row, pixels in zip(rows, executor.map(_render_row_task, rows, seeds)):
                        image[row] = pixels
                        progress.update(1)

        logger.info("Render finished in %.2fs", time.perf_counter() - started)
        return image

    def to_image(self, pixels: np.ndarray) -> np.ndarray:
        """Convert averaged colors to 8-bit channels using the settings."""
        if self.settings.tone_map:
            pixels = reinhard_tone_mapping(pixels)
        return to_bytes(pixels, self.settings.gamma)

    def render_to_ppm(self, stream: TextIO, world, camera,
                      background_color: Optional[Color] = None) -> np.ndarray:
        """Render and write the result as a P3 image; returns the 8-bit image."""
        image = self.to_image(self.render(world, camera, background_color))
        write_ppm(stream, image)
        return image
