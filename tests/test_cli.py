import contextlib
import io
import logging
import sys
import unittest
from unittest import mock

from sphere_cli_raycaster import cli
from sphere_cli_raycaster.errors import TerminalSizeError
from sphere_cli_raycaster.logging_config import LOGGER_NAME
from sphere_cli_raycaster.math_utils import Vec3


class ParseArgsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = cli.build_config(cli.parse_args([]))
        self.assertEqual((config.width, config.height), (80, 24))
        self.assertEqual(config.hit_policy, "farthest")
        self.assertEqual(config.mode, "bounce")
        self.assertIsNone(config.palette)

    def test_overrides(self) -> None:
        args = cli.parse_args([
            "--width", "100", "--height", "30", "--camera", "1,2,-40",
            "--nearest-hit", "--mono", "--mode", "rotate",
            "--palette", "FF0000,00FF00", "--step", "0.05",
        ])
        config = cli.build_config(args)
        self.assertEqual((config.width, config.height), (100, 30))
        self.assertEqual(config.camera, Vec3(1, 2, -40))
        self.assertEqual(config.hit_policy, "nearest")
        self.assertFalse(config.use_color)
        self.assertEqual(config.mode, "rotate")
        self.assertEqual(config.palette, [(255, 0, 0), (0, 255, 0)])
        self.assertEqual(config.step_time, 0.05)

    def test_bad_values_exit(self) -> None:
        for argv in (["--mode", "spin"], ["--camera", "1,2"], ["--palette", "red"]):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    cli.parse_args(argv)


class MainTests(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger(LOGGER_NAME).handlers.clear()

    def run_main(self, argv, side_effect=None):
        stderr = io.StringIO()
        with mock.patch.object(cli.curses, "wrapper", side_effect=side_effect) as wrapper, \
                contextlib.redirect_stderr(stderr):
            code = cli.main(argv)
        return code, stderr.getvalue(), wrapper

    def test_success(self) -> None:
        code, _, wrapper = self.run_main([])
        self.assertEqual(code, 0)
        wrapper.assert_called_once()

    def test_terminal_too_small(self) -> None:
        code, err, _ = self.run_main([], TerminalSizeError((24, 80), (20, 60)))
        self.assertEqual(code, 1)
        self.assertIn("need 80x24", err)
        self.assertIn("have 60x20", err)

    def test_picture_allocation_failure(self) -> None:
        code, err, _ = self.run_main([], MemoryError())
        self.assertEqual(code, 1)
        self.assertIn("picture buffer", err)

    def test_interrupt_is_clean_exit(self) -> None:
        code, _, _ = self.run_main([], KeyboardInterrupt())
        self.assertEqual(code, 0)

    def test_invalid_window(self) -> None:
        code, err, wrapper = self.run_main(["--width", "1"])
        self.assertEqual(code, 2)
        self.assertIn("border", err)
        wrapper.assert_not_called()

    def test_non_positive_step(self) -> None:
        for step in ("0", "-0.5"):
            code, err, wrapper = self.run_main(["--step", step])
            self.assertEqual(code, 2)
            self.assertIn("step time", err)
            wrapper.assert_not_called()

    def test_log_records_wait_for_terminal_restore(self) -> None:
        seen_during_session = []

        def session(func):
            logging.getLogger(LOGGER_NAME + ".color").warning("pair 3 unavailable")
            seen_during_session.append(sys.stderr.getvalue())

        code, err, _ = self.run_main([], session)
        self.assertEqual(code, 0)
        self.assertEqual(seen_during_session, [""])
        self.assertIn("pair 3 unavailable", err)


if __name__ == "__main__":
    unittest.main()
