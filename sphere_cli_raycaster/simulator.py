#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/simulator.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .math_utils import Vec3
from .scene import Scene

logger = logging.getLogger(__name__)


class Simulator:
    """
    Moves spheres by their velocity, bouncing them off each other and off
    the scene area.

    Every sphere is updated against the centers all spheres had at the start
    of the frame: the new states are computed first and committed together,
    so the result does not depend on slot order.
    """

    def update(self, scene: Scene) -> int:
        """Advance the scene by one frame.  Returns the number of collisions."""
        occupied = list(scene.occupied())
        if not occupied:
            return 0

        pending = []
        collisions = 0
        for index, slot in occupied:
            sphere = slot.sphere
            tentative = sphere.center + slot.velocity

            if self._collides(index, tentative, sphere.radius, occupied):
                collisions += 1
                pending.append((slot, sphere.center, -slot.velocity))
                continue

            center, velocity = self._move_within(scene, sphere.center, slot.velocity)
            pending.append((slot, center, velocity))

        for slot, center, velocity in pending:
            slot.sphere.center = center
            slot.velocity = velocity

        if collisions:
            logger.debug("frame resolved %d sphere collisions", collisions)
        return collisions

    @staticmethod
    def _collides(index, center, radius, occupied) -> bool:
        for other_index, other in occupied:
            if other_index == index:
                continue
            if other.sphere.overlaps(center, radius):
                return True
        return False

    @staticmethod
    def _move_within(scene: Scene, center: Vec3, velocity: Vec3):
        """Move axis by axis, clamping to the area and reflecting on contact."""
        coords = list(center)
        speed = list(velocity)
        for axis in range(3):
            coords[axis], clamped = scene.area.clamp(axis, coords[axis] + speed[axis])
            if clamped:
                speed[axis] = -speed[axis]
        return Vec3(*coords), Vec3(*speed)
