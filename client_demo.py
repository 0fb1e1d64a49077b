#!/usr/bin/env python3
#
# PROJECT: sphere-cli-raycaster
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sphere_cli_raycaster.cli import main


if __name__ == "__main__":
    sys.exit(main())
