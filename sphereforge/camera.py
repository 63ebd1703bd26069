"""
Camera module for generating primary rays.

The camera sits at the world origin looking down -Z through a viewport
2 units tall, one unit in front of it. Rays are jittered within each pixel
so several samples per pixel average into an antialiased color.
"""

from __future__ import annotations
from typing import Optional
import numpy as np

from .vec3 import Vec3, Point3, resolve_rng
from .ray import Ray

VIEWPORT_HEIGHT = 2.0
FOCAL_LENGTH = 1.0


def sample_square(rng: Optional[np.random.Generator] = None) -> Vec3:
    """Random offset (x, y, 0) with x and y in [-0.5, 0.5)."""
    x, y = resolve_rng(rng).random(2)
    return Vec3(x - 0.5, y - 0.5, 0.0)


class Camera:
    """A fixed pinhole camera with derived viewport geometry."""

    def __init__(
        self,
        image_width: int,
        aspect_ratio: float = 16.0 / 9.0,
        samples_per_pixel: int = 10
    ):
        """Create a camera.

        Args:
            image_width: Rendered image width in pixels
            aspect_ratio: Requested width / height ratio
            samples_per_pixel: Number of jittered rays averaged per pixel

        Raises:
            ValueError: If any argument is out of range
        """
        if image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {image_width}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")

        self._image_width = int(image_width)
        self._aspect_ratio = aspect_ratio
        self._samples_per_pixel = int(samples_per_pixel)
        self._image_height = max(1, int(self._image_width / aspect_ratio))

        # Use the actual image ratio, which absorbs the height rounding
        self._viewport_height = VIEWPORT_HEIGHT
        self._viewport_width = VIEWPORT_HEIGHT * (self._image_width / self._image_height)
        self._focal_length = FOCAL_LENGTH
        self._center = Point3(0, 0, 0)

        # Vectors across the horizontal and down the vertical viewport edges
        self._viewport_u = Vec3(self._viewport_width, 0, 0)
        self._viewport_v = Vec3(0, -self._viewport_height, 0)

        self._pixel_delta_u = self._viewport_u / self._image_width
        self._pixel_delta_v = self._viewport_v / self._image_height

        self._viewport_upper_left = (
            self._center
            - Vec3(0, 0, self._focal_length)
            - self._viewport_u / 2
            - self._viewport_v / 2
        )
        # Pixel centers sit half a step inside the viewport corner
        self._pixel00_loc = (
            self._viewport_upper_left
            + (self._pixel_delta_u + self._pixel_delta_v) * 0.5
        )

        self._pixel_samples_scale = 1.0 / self._samples_per_pixel

    @property
    def image_width(self) -> int:
        return self._image_width

    @property
    def image_height(self) -> int:
        return self._image_height

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def samples_per_pixel(self) -> int:
        return self._samples_per_pixel

    @property
    def pixel_samples_scale(self) -> float:
        return self._pixel_samples_scale

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    @property
    def focal_length(self) -> float:
        return self._focal_length

    @property
    def center(self) -> Point3:
        return self._center

    @property
    def pixel_delta_u(self) -> Vec3:
        return self._pixel_delta_u

    @property
    def pixel_delta_v(self) -> Vec3:
        return self._pixel_delta_v

    @property
    def viewport_upper_left(self) -> Point3:
        return self._viewport_upper_left

    @property
    def pixel00_loc(self) -> Point3:
        return self._pixel00_loc

    def get_ray(self, i: int, j: int, rng: Optional[np.random.Generator] = None) -> Ray:
        """Generate a jittered ray through pixel (i, j).

        Args:
            i: Pixel column, 0 = left
            j: Pixel row, 0 = top
            rng: Random generator for the jitter (process default if None)

        Returns:
            A ray from the camera center through a random point of the pixel
        """
        offset = sample_square(rng)
        pixel_sample = (
            self._pixel00_loc
            + self._pixel_delta_u * (i + offset.x)
            + self._pixel_delta_v * (j + offset.y)
        )
        return Ray(self._center, pixel_sample - self._center)

    def __repr__(self) -> str:
        return (
            f"Camera({self._image_width}x{self._image_height}, "
            f"samples_per_pixel={self._samples_per_pixel})"
        )
