"""
Geometric shapes for the ray tracer.

Each shape must implement the Hittable protocol with a `hit` method.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, TYPE_CHECKING
import math
import weakref

from .vec3 import Vec3, Point3
from .ray import Ray
from .interval import Interval

if TYPE_CHECKING:
    from .materials import Material


@dataclass
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        point: The intersection point in world space
        normal: The unit surface normal, always pointing against the ray
        t: The ray parameter at intersection
        front_face: True if ray hit from outside the object
        material_ref: Weak reference to the material of the object hit

    The record does not keep its material alive; the scene owns it.
    """
    point: Point3
    normal: Vec3
    t: float
    front_face: bool
    material_ref: Optional[weakref.ref] = None

    @classmethod
    def from_outward_normal(
        cls,
        ray: Ray,
        t: float,
        point: Point3,
        outward_normal: Vec3,
        material: Optional[Material] = None
    ) -> HitRecord:
        """Build a record and orient its normal against the ray."""
        record = cls(
            point=point,
            normal=outward_normal,
            t=t,
            front_face=True,
            material_ref=weakref.ref(material) if material is not None else None
        )
        record.set_face_normal(ray, outward_normal)
        return record

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Set the normal to always point against the ray direction.

        Args:
            ray: The incoming ray
            outward_normal: The unit geometric normal pointing outward from surface
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    @property
    def material(self) -> Optional[Material]:
        """The material at the hit point.

        Raises:
            ReferenceError: If the material no longer exists
        """
        if self.material_ref is None:
            return None
        material = self.material_ref()
        if material is None:
            raise ReferenceError("material of hit object no longer exists")
        return material


class Hittable(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_range: Interval) -> Optional[HitRecord]:
        """Test if ray intersects this object.

        Implementations report only hits whose t lies strictly inside
        `t_range`, and the nearest one when several do.

        Args:
            ray: The ray to test
            t_range: Accepted values of the ray parameter

        Returns:
            HitRecord if intersection found, None otherwise
        """
        pass


class Sphere(Hittable):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float, material: Optional[Material] = None):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere (negative values are clamped to 0)
            material: Material for shading, may be shared with other spheres
        """
        self._center = center
        self._radius = max(0.0, float(radius))
        self._material = material

    @property
    def center(self) -> Point3:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def material(self) -> Optional[Material]:
        return self._material

    def hit(self, ray: Ray, t_range: Interval) -> Optional[HitRecord]:
        """Test ray-sphere intersection using the quadratic formula.

        With oc = C - O, the equation |O + tD - C|² = r² becomes
        t²(D·D) - 2t(D·oc) + (oc·oc - r²) = 0, solved here with h = D·oc.
        """
        if self._radius == 0.0:
            return None

        oc = self._center - ray.origin
        a = ray.direction.length_squared()
        # A ray without direction has no parameter to solve for
        if a == 0.0:
            return None
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self._radius * self._radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Find the nearest root in the acceptable range
        root = (h - sqrtd) / a
        if not t_range.contains(root, inclusive=False):
            root = (h + sqrtd) / a
            if not t_range.contains(root, inclusive=False):
                return None

        point = ray.at(root)
        # Dividing by the radius yields unit length without a normalize
        outward_normal = (point - self._center) / self._radius

        return HitRecord.from_outward_normal(
            ray, root, point, outward_normal, self._material
        )

    def __repr__(self) -> str:
        return f"Sphere(center={self._center}, radius={self._radius})"


def hit_scan(ray: Ray, t_range: Interval, hittables: Iterable[Hittable]) -> Optional[HitRecord]:
    """Find the closest hit among `hittables` in a single pass.

    Every hit narrows the upper bound of the search to its t, so later
    objects only register when they are strictly closer.

    Args:
        ray: The ray to trace
        t_range: Initial range of accepted ray parameters
        hittables: Objects to test, in any order

    Returns:
        The nearest HitRecord, or None if nothing is hit
    """
    closest: Optional[HitRecord] = None
    search = t_range

    for obj in hittables:
        record = obj.hit(ray, search)
        if record is not None:
            search = t_range.with_high(record.t)
            closest = record

    return closest


class HittableList(Hittable):
    """An ordered collection of hittable objects forming a scene."""

    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable) -> None:
        """Add an object to the list."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all objects."""
        self.objects.clear()

    def hit(self, ray: Ray, t_range: Interval) -> Optional[HitRecord]:
        """Find the closest hit among all objects."""
        return hit_scan(ray, t_range, self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)
