"""
SphereForge - A Python Ray Tracing Renderer

A small sphere ray tracer with:
- Closest-hit scene scanning over spheres
- Lambertian and metal materials
- Jittered multi-sample antialiasing
- Normal-visualization and path-traced shading
- Multi-threaded tile rendering with reproducible seeding
"""

__version__ = "0.1.0"
__author__ = "SphereForge Team"

from .vec3 import Vec3, Point3, Color
from .interval import Interval
from .ray import Ray
from .color import normal_to_color, linear_to_gamma, to_rgb8, to_rgb8_array
from .shapes import Sphere, HittableList, HitRecord, Hittable, hit_scan
from .materials import Material, ScatterResult, Lambertian, Metal
from .camera import Camera, sample_square
from .renderer import Renderer, RenderSettings, ShadingMode, PixelSink
