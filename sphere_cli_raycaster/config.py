#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .display import BORDER
from .math_utils import Vec3
from .renderer import HIT_POLICIES
from .scene import Area, Scene, Sphere, DEFAULT_CAPACITY

MODES = ("bounce", "rotate")

@dataclass
class RenderConfig:
    """Configuration for the animation: window, camera, timing and output."""
    width: int = 80
    height: int = 24
    focal: float = 0.015
    camera: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -50.0))
    aspect: float = 2.0
    step_time: float = 0.1
    duration: float = 10.0
    mode: str = "bounce"
    rotation: float = math.pi / 20.0
    hit_policy: str = "farthest"
    use_color: bool = True
    capacity: int = DEFAULT_CAPACITY
    palette: Optional[List[Tuple[int, int, int]]] = None

    def __post_init__(self):
        if self.width <= BORDER or self.height <= BORDER:
            raise ValueError(f"window {self.width}x{self.height} leaves no room inside the border")
        # The frame loop advances its clock by step_time
        if self.step_time <= 0:
            raise ValueError(f"step time must be > 0 seconds, got {self.step_time}")
        if self.duration < 0:
            raise ValueError(f"duration must be >= 0 seconds, got {self.duration}")
        if self.mode not in MODES:
            raise ValueError(f"unknown mode {self.mode!r}, expected one of {MODES}")
        if self.hit_policy not in HIT_POLICIES:
            raise ValueError(f"unknown hit policy {self.hit_policy!r}, expected one of {HIT_POLICIES}")

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Guess terminal capabilities from TERM and return a config.
        Accurate color detection requires curses initialization, so this is
        a pre-init guess; init_colors() has the final word.
        """
        term = os.environ.get('TERM', '').lower()
        is_dumb = term in ('dumb', 'unknown')
        overrides.setdefault('use_color', not is_dumb)
        return cls(**overrides)


# Classic four-sphere layout, each with its own velocity
_DEFAULT_SPHERES = [
    (Vec3(0.0, 0.0, 0.0), 8.0, 1, Vec3(0.6, 0.4, 0.0)),
    (Vec3(20.0, 0.0, 0.0), 6.0, 2, Vec3(-1.0, 0.3, 0.5)),
    (Vec3(-10.0, 10.0, 0.0), 6.0, 3, Vec3(0.8, -0.6, -0.4)),
    (Vec3(-25.0, -15.0, 0.0), 10.0, 4, Vec3(0.5, 0.7, 0.3)),
]

DEFAULT_AREA = (-40.0, 40.0, -20.0, 20.0, -20.0, 20.0)

def default_scene(config: RenderConfig) -> Scene:
    """Four-sphere demo scene, one sphere per slot 0-3."""
    scene = Scene(Area(*DEFAULT_AREA), config.camera, config.focal,
                  capacity=config.capacity)
    for index, (center, radius, color, velocity) in enumerate(_DEFAULT_SPHERES):
        scene.add(index, Sphere(center, radius, color), velocity)
    return scene
