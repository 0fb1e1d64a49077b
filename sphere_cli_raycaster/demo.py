#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import time

from .color import init_colors
from .config import RenderConfig, default_scene
from .display import check_size, draw_picture, picture_size
from .picture import Picture
from .renderer import Renderer
from .simulator import Simulator

logger = logging.getLogger(__name__)


class Animation:
    """
    Scene, picture and the per-frame pipeline, without any terminal I/O.

    step() advances the scene (bounce or rotate), render() refreshes the
    picture from it.
    """

    def __init__(self, config: RenderConfig, scene=None):
        self.config = config
        self.scene = scene if scene is not None else default_scene(config)
        self.renderer = Renderer(hit_policy=config.hit_policy, aspect=config.aspect)
        self.simulator = Simulator()
        self.picture = Picture(*picture_size(config.height, config.width))
        self.frame = 0
        self.collisions = 0

    def step(self):
        if self.config.mode == "rotate":
            self.scene.rotate_y(self.config.rotation)
            self.collisions = 0
        else:
            self.collisions = self.simulator.update(self.scene)
        self.frame += 1

    def render(self) -> Picture:
        return self.renderer.render(self.scene, self.picture)

    def toggle_hit_policy(self):
        policy = "nearest" if self.renderer.hit_policy == "farthest" else "farthest"
        self.renderer.hit_policy = policy
        logger.info("hit policy switched to %s", policy)


class DemoApp:
    """
    Curses harness: bordered window, timed frame loop, key handling.

    Keys: q quits, p pauses the simulation, h switches the hit policy.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self.running = True
        self.paused = False

        # ── Terminal checks before anything is drawn ────────────────────
        check_size(stdscr, config.height, config.width)
        self.attrs = init_colors(config.palette, config.use_color)
        self.use_glyphs = not self.attrs

        # ── Curses setup ────────────────────────────────────────────────
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.nodelay(True)
        stdscr.refresh()

        self.animation = Animation(config)

        # ── Bordered window with the picture inside ─────────────────────
        self.window = curses.newwin(config.height, config.width, 0, 0)
        self.window.box()
        ph, pw = self.animation.picture.height, self.animation.picture.width
        self.display = self.window.derwin(ph, pw, 1, 1)

        logger.info("picture %dx%d, %d spheres, mode %s, hit policy %s",
                    pw, ph, len(self.animation.scene), config.mode, config.hit_policy)

    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        if key == ord('q'):
            self.running = False
        elif key == ord('p'):
            self.paused = not self.paused
        elif key == ord('h'):
            self.animation.toggle_hit_policy()

    def draw(self, ms: float = 0.0):
        anim = self.animation
        self.display.erase()
        draw_picture(self.display, anim.picture, self.attrs, self.use_glyphs)

        title = (f" frame {anim.frame}"
                 f" | spheres {len(anim.scene)}"
                 f" | hits {anim.collisions}"
                 f" | {anim.renderer.hit_policy}"
                 f" | {ms:.1f}ms ")
        if self.paused:
            title += "| paused "
        self.window.box()
        try:
            self.window.addstr(0, 2, title[:max(0, self.config.width - 4)], curses.A_BOLD)
        except curses.error:
            pass

        self.window.noutrefresh()
        self.display.noutrefresh()
        curses.doupdate()

    def run(self):
        config = self.config
        anim = self.animation

        anim.render()
        self.draw()

        timer = 0.0
        while self.running and timer < config.duration:
            start_time = time.time()

            self.handle_input()
            if not self.paused:
                anim.step()
            anim.render()

            ms = (time.time() - start_time) * 1000
            self.draw(ms)
            logger.debug("frame %d rendered in %.1fms", anim.frame, ms)

            time.sleep(config.step_time)
            timer += config.step_time

        logger.info("stopped after %d frames", anim.frame)


def main(stdscr, config):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config)
    app.run()
