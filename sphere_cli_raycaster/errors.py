#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class RaycasterError(Exception):
    """Base class for errors reported to the user by the CLI."""


class TerminalSizeError(RaycasterError):
    """The terminal is smaller than the picture plus its border."""

    def __init__(self, required, actual):
        self.required = required
        self.actual = actual
        super().__init__(
            f"Terminal too small: need {required[1]}x{required[0]} "
            f"(columns x lines), have {actual[1]}x{actual[0]}"
        )


class NoColorSupportError(RaycasterError):
    """Color output requested on a terminal without colors."""
