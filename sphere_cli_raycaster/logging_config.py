#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import logging.handlers
import sys
from contextlib import contextmanager
from typing import Optional

LOGGER_NAME = "sphere_cli_raycaster"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    The console handler writes to stderr.  While curses owns the terminal
    wrap the session in hold_console() so records are written only after
    the screen is restored.  Pass a log_file to stream them to disk instead.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug("Logging initialized.")
    return logger


class _HeldRecords(logging.handlers.MemoryHandler):
    """MemoryHandler that never flushes on its own; keeps the newest `capacity` records."""

    def shouldFlush(self, record):
        if len(self.buffer) > self.capacity:
            del self.buffer[0]
        return False


@contextmanager
def hold_console(logger_name: str = LOGGER_NAME, capacity: int = 1000):
    """
    Buffer console log records while curses owns the terminal.

    Every console StreamHandler on the logger is swapped for a MemoryHandler
    for the duration of the block.  On exit the buffered records are written
    to the original handler, after curses.wrapper has restored the screen.
    File handlers keep writing as usual.
    """
    logger = logging.getLogger(logger_name)
    # FileHandler subclasses StreamHandler; only plain console handlers are held
    consoles = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    held = []
    for handler in consoles:
        memory = _HeldRecords(capacity, target=handler)
        memory.setLevel(handler.level)
        logger.removeHandler(handler)
        logger.addHandler(memory)
        held.append((memory, handler))
    try:
        yield logger
    finally:
        for memory, handler in held:
            logger.removeHandler(memory)
            memory.close()
            logger.addHandler(handler)
