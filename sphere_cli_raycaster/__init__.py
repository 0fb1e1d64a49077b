#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vec3, Mat4
from .color import BACKGROUND, parse_hex_color, init_colors
from .picture import Picture
from .intersect import Ray, Hit, intersect_sphere
from .scene import Area, Scene, Sphere, SphereSlot
from .renderer import Renderer
from .simulator import Simulator
from .config import RenderConfig, default_scene
from .errors import RaycasterError, TerminalSizeError, NoColorSupportError
