#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .color import BACKGROUND
from .intersect import intersect_sphere
from .math_utils import Vec3, Mat4

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class Sphere:
    """
    A flat-colored sphere.

    color is a positive display color index; BACKGROUND (0) is reserved and
    rejected.  A zero radius is accepted: the sphere is only ever hit by a
    ray passing exactly through its center.
    """
    __slots__ = ('center', 'radius', 'color')

    def __init__(self, center: Vec3, radius: float, color: int):
        if color <= BACKGROUND:
            raise ValueError(f"sphere color must be >= 1, got {color}")
        if radius < 0:
            raise ValueError(f"sphere radius must be >= 0, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.color = int(color)

    def __repr__(self):
        return f"Sphere({self.center!r}, r={self.radius:.2f}, color={self.color})"

    def intersect(self, ray, nearest: bool = False):
        return intersect_sphere(ray, self, nearest=nearest)

    def overlaps(self, center: Vec3, radius: float) -> bool:
        """True when a sphere of `radius` at `center` strictly overlaps this one."""
        return self.center.distance_to(center) < self.radius + radius


class Area:
    """Axis-aligned box that sphere centers are kept inside."""
    __slots__ = ('min_x', 'max_x', 'min_y', 'max_y', 'min_z', 'max_z')

    def __init__(self, min_x: float, max_x: float, min_y: float, max_y: float,
                 min_z: float, max_z: float):
        self.min_x, self.max_x = float(min_x), float(max_x)
        self.min_y, self.max_y = float(min_y), float(max_y)
        self.min_z, self.max_z = float(min_z), float(max_z)
        for axis, name in enumerate("xyz"):
            lo, hi = self.bounds(axis)
            if lo > hi:
                raise ValueError(f"area {name} bounds inverted: min {lo} > max {hi}")

    def __repr__(self):
        return (f"Area(x=[{self.min_x}, {self.max_x}], y=[{self.min_y}, {self.max_y}], "
                f"z=[{self.min_z}, {self.max_z}])")

    def bounds(self, axis: int):
        if axis == 0: return self.min_x, self.max_x
        if axis == 1: return self.min_y, self.max_y
        if axis == 2: return self.min_z, self.max_z
        raise IndexError("Area axis out of range")

    def clamp(self, axis: int, value: float):
        """Return (value clamped to the axis bounds, whether it was clamped)."""
        lo, hi = self.bounds(axis)
        if value < lo:
            return lo, True
        if value > hi:
            return hi, True
        return value, False


class SphereSlot:
    """An occupied scene slot: the sphere plus its per-frame displacement."""
    __slots__ = ('sphere', 'velocity')

    def __init__(self, sphere: Sphere, velocity: Vec3):
        self.sphere = sphere
        self.velocity = velocity

    def __repr__(self):
        return f"SphereSlot({self.sphere!r}, v={self.velocity!r})"


class Scene:
    """
    Arena of sphere slots plus the camera, focal factor and bounding area.

    Each slot is either None (empty) or a SphereSlot.  A slot index is the
    identity of a sphere for as long as it lives: adding at an occupied
    index replaces it in place, removing leaves a tombstone.  `count` is
    bookkeeping; iteration always goes through occupied().
    """

    def __init__(self, area: Area, camera: Vec3, focal: float,
                 capacity: int = DEFAULT_CAPACITY):
        self.capacity = capacity
        self.initialize(area, camera, focal)

    def initialize(self, area: Area, camera: Vec3, focal: float):
        """Set bounds, camera and focal factor; empty every slot."""
        self.area = area
        self.camera = camera
        self.focal = float(focal)
        self.slots = [None] * self.capacity
        self.count = 0

    def __len__(self):
        return self.count

    def add(self, index: int, sphere: Sphere, velocity: Vec3):
        """Store a sphere at `index`.  Out-of-range indices are ignored."""
        if index < 0 or index >= self.capacity:
            logger.debug("ignoring sphere at slot %d (capacity %d)", index, self.capacity)
            return
        if self.slots[index] is None:
            self.count += 1
        self.slots[index] = SphereSlot(sphere, velocity)

    def remove(self, index: int):
        if index < 0 or index >= self.capacity:
            return
        if self.slots[index] is not None:
            self.slots[index] = None
            self.count -= 1

    def get(self, index: int):
        if index < 0 or index >= self.capacity:
            return None
        return self.slots[index]

    def occupied(self):
        """Yield (index, SphereSlot) for every occupied slot, in slot order."""
        for index, slot in enumerate(self.slots):
            if slot is not None:
                yield index, slot

    def rotate_y(self, angle: float):
        """Rotate every sphere center around the Y axis through the origin."""
        rot = Mat4.rotation_y(angle)
        for _, slot in self.occupied():
            slot.sphere.center = rot.mul_vec3(slot.sphere.center)
