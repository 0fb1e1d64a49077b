#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/intersect.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
from typing import NamedTuple, Optional

from .math_utils import Vec3


class Ray:
    """Origin point plus a (unit) direction."""
    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Vec3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def __repr__(self):
        return f"Ray({self.origin!r} -> {self.direction!r})"


class Hit(NamedTuple):
    color: int
    distance: float


def intersect_sphere(ray: Ray, sphere, nearest: bool = False) -> Optional[Hit]:
    """
    Geometric ray/sphere test.

    L is the vector from the ray origin to the sphere center and tc its
    projection on the ray.  A negative tc means the center lies behind the
    origin and counts as a miss, even when the origin sits inside a sphere
    trailing backward.  Otherwise d (distance from the center to the ray)
    is compared to the radius and the half chord t1c gives the two roots
    tc - t1c and tc + t1c.

    The larger root is reported by default (far surface).  With
    nearest=True the smaller root is reported unless it is negative, i.e.
    the origin is inside the sphere.

    Returns Hit(color, distance) or None.
    """
    l = sphere.center - ray.origin
    tc = l.dot(ray.direction)
    if tc < 0.0:
        return None

    # Right triangle L, d, tc; rounding can push the radicand just below 0
    d = math.sqrt(max(0.0, l.dot(l) - tc * tc))
    if d > sphere.radius:
        return None

    t1c = math.sqrt(sphere.radius * sphere.radius - d * d)
    t_near = tc - t1c
    t_far = tc + t1c

    if nearest and t_near >= 0.0:
        t = t_near
    else:
        t = max(t_near, t_far)
    return Hit(sphere.color, t)
