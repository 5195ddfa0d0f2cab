"""
Configuration & Path Management
===============================
Global constants of the editor and resolution of bundled resources.

Resources are looked up next to the source tree in development and inside
the PyInstaller bundle (sys._MEIPASS) when the app is frozen.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    FONT_PATH (str): Absolute path to the optional bundled editor font.
    FONT_SIZE (int): Point size of the editor font, also the caret height in pixels.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/algebrapad/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
FONT_PATH: str = os.path.join(ASSETS_PATH, "fonts", "LiberationMono-Regular.ttf")
FONT_FAMILY: str = "Liberation Mono"

FONT_SIZE: int = 20
CARET_WIDTH: int = 4
DIVIDER_THICKNESS: int = 2

WINDOW_TITLE: str = "lil fun algebra thing"
WINDOW_SIZE: tuple[int, int] = (640, 480)
