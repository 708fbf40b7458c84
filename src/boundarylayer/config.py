"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers scattered
   throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (sample data) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Absolute path to the bundled velocity samples.
    FREE_STREAM_VELOCITY (float): Reference velocity U∞.
    THRESHOLD_FRACTION (float): Fraction of U∞ that defines the BL edge.
    STATION_TOLERANCE (float): Absolute tolerance for the current-point lookup.
    SLIDER_STEP (float): Resolution of the station slider.
"""
import logging
import sys
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/boundarylayer/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "data.csv")

# Physics
FREE_STREAM_VELOCITY: float = 1.0
THRESHOLD_FRACTION: float = 0.99

# View
STATION_TOLERANCE: float = 0.01
SLIDER_STEP: float = 0.01

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
