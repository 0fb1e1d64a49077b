#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .color import BACKGROUND
from .intersect import Ray
from .math_utils import Vec3
from .picture import Picture
from .scene import Scene

HIT_POLICIES = ("farthest", "nearest")


class Renderer:
    """
    Brute-force ray caster.

    render(scene, picture) fires one ray per pixel from the camera, tests
    it against every occupied sphere and writes the winning color index
    into the picture.  The scene is only read.

    Hit policy:
      "farthest"  each sphere reports its far root and the largest distance
                  wins (the default)
      "nearest"   each sphere reports its near root and the smallest
                  distance wins (front-most surface)

    `aspect` stretches the vertical pixel offset to compensate for
    terminal cells being taller than wide; 1.0 leaves it untouched.
    """

    def __init__(self, hit_policy: str = "farthest", aspect: float = 1.0):
        if hit_policy not in HIT_POLICIES:
            raise ValueError(f"unknown hit policy {hit_policy!r}, expected one of {HIT_POLICIES}")
        self.hit_policy = hit_policy
        self.aspect = float(aspect)

    def camera_ray(self, scene: Scene, picture: Picture, i: int, j: int) -> Ray:
        """Ray from the camera through pixel (row i, column j)."""
        cam = scene.camera
        pixel_x = j - picture.width / 2.0
        pixel_y = (i - picture.height / 2.0) * self.aspect
        direction = Vec3((cam.x - pixel_x) * scene.focal,
                         (cam.y - pixel_y) * scene.focal,
                         1.0)
        return Ray(cam, direction.normalize())

    def cast(self, scene: Scene, ray: Ray) -> int:
        """Color of the winning sphere along `ray`, BACKGROUND on a miss."""
        if self.hit_policy == "nearest":
            best = math.inf
            color = BACKGROUND
            for _, slot in scene.occupied():
                hit = slot.sphere.intersect(ray, nearest=True)
                if hit is not None and hit.distance < best:
                    best = hit.distance
                    color = hit.color
            return color

        # Running maximum starts at 0: a hit must be strictly further away
        best = 0.0
        color = BACKGROUND
        for _, slot in scene.occupied():
            hit = slot.sphere.intersect(ray)
            if hit is not None and best < hit.distance:
                best = hit.distance
                color = hit.color
        return color

    def render(self, scene: Scene, picture: Picture) -> Picture:
        """Overwrite every pixel of `picture` with the scene as seen from the camera."""
        pixels = picture.pixels
        width = picture.width
        for i in range(picture.height):
            row = i * width
            for j in range(width):
                pixels[row + j] = self.cast(scene, self.camera_ray(scene, picture, i, j))
        return picture
