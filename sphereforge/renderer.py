"""
Renderer module - the heart of the ray tracer.

Implements:
- Normal-visualization shading (the default) and recursive path tracing
- Multi-threaded tile-based rendering with per-tile random streams
- Per-pixel delivery to a caller supplied sink
- 8-bit image output
"""

from __future__ import annotations
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple
import numpy as np

from .vec3 import Vec3, Color
from .ray import Ray
from .camera import Camera
from .interval import Interval
from .shapes import Hittable, hit_scan
from .color import RGB8, normal_to_color, to_rgb8, to_rgb8_array

logger = logging.getLogger(__name__)

PixelSink = Callable[[int, int, RGB8], None]
Tile = Tuple[int, int, int, int]
Scene = Iterable[Hittable]

# Lower bound for bounced rays so they do not re-hit their own surface
SHADOW_ACNE_EPSILON = 0.001


class ShadingMode(Enum):
    """How a primary ray is turned into a color."""
    NORMALS = "normals"
    PATH = "path"


@dataclass
class RenderSettings:
    """Configuration for the renderer.

    Image size and samples per pixel come from the Camera.
    """
    shading: ShadingMode = ShadingMode.NORMALS
    max_depth: int = 50
    tile_size: int = 32
    num_threads: int = 0  # 0 = auto-detect
    seed: Optional[int] = None

    def __post_init__(self):
        self.shading = ShadingMode(self.shading)
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.tile_size < 1:
            raise ValueError(f"tile_size must be at least 1, got {self.tile_size}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads must not be negative, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Tile-parallel renderer."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(
        self,
        scene: Scene,
        camera: Camera,
        sink: Optional[PixelSink] = None
    ) -> np.ndarray:
        """Render the scene and deliver every pixel.

        Args:
            scene: The hittables to render, e.g. a HittableList or a plain list
            camera: The camera to render from
            sink: Called once per pixel with (x, y, (r, g, b)), row by row

        Returns:
            8-bit image as numpy array of shape (height, width, 3)
        """
        hdr_image = self.render_hdr(scene, camera)
        image = self.to_ldr(hdr_image)

        if sink is not None:
            for y in range(camera.image_height):
                for x in range(camera.image_width):
                    sink(x, y, to_rgb8(Vec3.from_array(hdr_image[y, x])))

        return image

    def render_hdr(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Render the scene to averaged linear colors.

        Args:
            scene: The hittables to render, e.g. a HittableList or a plain list
            camera: The camera to render from

        Returns:
            Linear image as float64 array of shape (height, width, 3)
        """
        width = camera.image_width
        height = camera.image_height
        samples = camera.samples_per_pixel

        image = np.zeros((height, width, 3), dtype=np.float64)

        tiles = self._generate_tiles(width, height)
        total_tiles = len(tiles)
        completed_tiles = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        # One independent stream per tile, so a seed reproduces the same
        # image whatever the thread count.
        seeds = np.random.SeedSequence(self.settings.seed).spawn(total_tiles)

        logger.debug(
            "Rendering %dx%d, %d spp, %s shading, %d tiles on %d threads",
            width, height, samples, self.settings.shading.value,
            total_tiles, self.settings.num_threads
        )

        def render_tile(index: int) -> Tuple[Tile, np.ndarray]:
            """Render a single tile."""
            x0, y0, x1, y1 = tile = tiles[index]
            rng = np.random.default_rng(seeds[index])
            tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float64)

            for j in range(y0, y1):
                for i in range(x0, x1):
                    pixel_color = Color(0, 0, 0)
                    for _ in range(samples):
                        ray = camera.get_ray(i, j, rng)
                        pixel_color = pixel_color + self.ray_color(ray, scene, rng)

                    tile_image[j - y0, i - x0] = (pixel_color * camera.pixel_samples_scale).to_array()

            with progress_lock:
                completed_tiles[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed_tiles[0] / total_tiles)

            return tile, tile_image

        if self.settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_tile, range(total_tiles)))
        else:
            results = [render_tile(index) for index in range(total_tiles)]

        # Combine tiles into final image
        for (x0, y0, x1, y1), tile_image in results:
            image[y0:y1, x0:x1] = tile_image

        logger.debug("Render of %d tiles finished", total_tiles)
        return image

    def ray_color(
        self,
        ray: Ray,
        scene: Scene,
        rng: Optional[np.random.Generator] = None
    ) -> Color:
        """Compute the linear color seen along a primary ray."""
        if self.settings.shading is ShadingMode.PATH:
            return self._path_color(ray, scene, self.settings.max_depth, rng)
        return self._normal_color(ray, scene)

    def _normal_color(self, ray: Ray, scene: Scene) -> Color:
        """Color the first surface hit by its normal, or the sky on a miss."""
        hit_record = hit_scan(ray, Interval(0.0, float('inf')), scene)
        if hit_record is None:
            return ray.sky_color()
        return normal_to_color(hit_record.normal)

    def _path_color(
        self,
        ray: Ray,
        scene: Scene,
        depth: int,
        rng: Optional[np.random.Generator]
    ) -> Color:
        """Compute the color for a ray by following material scattering.

        Args:
            ray: The ray to trace
            scene: The scene to trace against
            depth: Remaining bounces
            rng: Random generator for scattering

        Returns:
            The computed color for this ray
        """
        if depth <= 0:
            return Color(0, 0, 0)

        hit_record = hit_scan(ray, Interval(SHADOW_ACNE_EPSILON, float('inf')), scene)
        if hit_record is None:
            return ray.sky_color()

        material = hit_record.material
        if material is None:
            return normal_to_color(hit_record.normal)

        scatter_result = material.scatter(ray, hit_record, rng)
        if scatter_result is None:
            return Color(0, 0, 0)

        return scatter_result.attenuation * self._path_color(
            scatter_result.scattered_ray, scene, depth - 1, rng
        )

    def _generate_tiles(self, width: int, height: int) -> List[Tile]:
        """Generate tiles for parallel rendering.

        Args:
            width: Image width
            height: Image height

        Returns:
            List of tiles as (x0, y0, x1, y1) tuples, row-major
        """
        tile_size = self.settings.tile_size
        tiles = []

        for y in range(0, height, tile_size):
            for x in range(0, width, tile_size):
                x1 = min(x + tile_size, width)
                y1 = min(y + tile_size, height)
                tiles.append((x, y, x1, y1))

        return tiles

    @staticmethod
    def to_ldr(hdr_image: np.ndarray) -> np.ndarray:
        """Convert a linear image to gamma-corrected 8-bit.

        Args:
            hdr_image: Linear image array (float64)

        Returns:
            LDR image as uint8 array
        """
        return to_rgb8_array(hdr_image)

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save image to file.

        Args:
            image: Image array, linear float or uint8
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        if image.dtype != np.uint8:
            image = self.to_ldr(image)

        PILImage.fromarray(image).save(filename)
        logger.debug("Saved %dx%d image to %s", image.shape[1], image.shape[0], filename)
