"""
Ray class for representing rays in 3D space.

A ray is defined by an origin point and a direction vector.
Ray(t) = origin + t * direction
"""

from __future__ import annotations
from .vec3 import Vec3, Point3, Color

SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


class Ray:
    """A ray with origin and direction.

    The parametric form is: P(t) = origin + t * direction.
    The direction is kept as given; its magnitude is part of the
    intersection math.
    """

    __slots__ = ('_origin', '_direction')

    def __init__(self, origin: Point3, direction: Vec3):
        """Create a ray with given origin and direction.

        Args:
            origin: The starting point of the ray
            direction: The direction vector (not normalized)
        """
        self._origin = origin
        self._direction = direction

    @property
    def origin(self) -> Point3:
        return self._origin

    @property
    def direction(self) -> Vec3:
        return self._direction

    def at(self, t: float) -> Point3:
        """Get the point along the ray at parameter t.

        Args:
            t: The parameter value (distance if direction is normalized)

        Returns:
            The point at origin + t * direction
        """
        return self._origin + self._direction * t

    def sky_color(self) -> Color:
        """Color of the sky seen along this ray.

        The normalized direction's height is mapped from [-1, 1] to [0, 1]
        and used to blend from white (looking down) to sky blue (looking up).
        Because of the normalization the x and z components weigh in too.
        """
        unit_direction = self._direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return SKY_WHITE * (1.0 - a) + SKY_BLUE * a

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin}, direction={self._direction})"
