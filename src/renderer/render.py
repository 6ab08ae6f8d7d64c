# renderer/render.py
import logging
import time
from typing import Callable, Optional

import numpy as np

from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.image import ImageBuffer
from renderer.integrator import ray_color
from renderer.settings import RenderSettings
from renderer.tone_mapping import gamma_correct_and_quantize

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

class Renderer:
    """
    Single-threaded sampling loop: averages samples_per_pixel jittered
    camera rays per pixel and returns an 8-bit image.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings
        self.width = settings.image_width
        self.height = settings.image_height
        self.buffer = ImageBuffer(self.width, self.height)

    def render_linear(self, world: Hittable, camera: Camera, rng,
                      progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Renders into the accumulation buffer and returns the averaged
        linear image of shape (height, width, 3).
        """
        samples = self.settings.samples_per_pixel
        max_depth = self.settings.max_depth
        # Single-pixel images would otherwise divide by zero.
        s_scale = max(self.width - 1, 1)
        t_scale = max(self.height - 1, 1)

        self.buffer.clear()
        start = time.perf_counter()
        for j in range(self.height):
            # Image rows run top-down; camera t runs bottom-up.
            scanline = self.height - 1 - j
            for i in range(self.width):
                for _ in range(samples):
                    s = (i + rng.uniform(0.0, 1.0)) / s_scale
                    t = (scanline + rng.uniform(0.0, 1.0)) / t_scale
                    ray = camera.new_ray(s, t, rng)
                    self.buffer.add_sample(i, j, ray_color(ray, world, max_depth, rng))
            logger.debug("Scanlines remaining: %d", self.height - 1 - j)
            if progress is not None:
                progress(j + 1, self.height)

        elapsed = time.perf_counter() - start
        logger.info("Rendered %dx%d at %d spp in %.2fs",
                    self.width, self.height, samples, elapsed)
        return self.buffer.resolve(samples)

    def render(self, world: Hittable, camera: Camera, rng,
               progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Renders and returns a uint8 image of shape (height, width, 3).
        """
        linear = self.render_linear(world, camera, rng, progress)
        return gamma_correct_and_quantize(linear)
