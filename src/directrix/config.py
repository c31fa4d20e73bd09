"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sampling step, window geometry,
   colors) scattered throughout the code.
2. Startup: The window and default site geometry are the only externally
   observable configuration; they are fixed once at startup from here.

Exports:
    PARABOLA_X_STEP (int): Horizontal distance between parabola samples.
    WINDOW_INIT_WIDTH, WINDOW_INIT_HEIGHT (int): Initial canvas size.
"""
from typing import Tuple

Rgba = Tuple[float, float, float, float]

# Application identity
APP_ID: str = "org.bytetrail.dtx"
ORG_ID: str = "bytetrail"
ORG_DOMAIN: str = "bytetrail.org"
WINDOW_TITLE: str = "Directrix"

# Canvas & sampling
PARABOLA_X_STEP: int = 5
WINDOW_INIT_WIDTH: int = 600
WINDOW_INIT_HEIGHT: int = 400
DIRECTRIX_INIT_OFFSET: float = 10.0

# Markers
FOCUS_MARKER_RADIUS: float = 2.0
DIRECTRIX_START_X: float = 1.0

FOCUS_COLOR: Rgba = (1.0, 0.0, 0.0, 1.0)
DIRECTRIX_COLOR: Rgba = (0.0, 0.0, 0.0, 1.0)
PARABOLA_COLOR: Rgba = (0.0, 1.0, 0.0, 1.0)
LABEL_COLOR: Rgba = (0.0, 0.0, 0.0, 1.0)

# Labels (baseline positions, canvas units)
LABEL_FONT_FAMILY: str = "Monospace"
LABEL_FONT_SIZE: float = 12.0
FOCUS_LABEL_POS: Tuple[float, float] = (8.0, 20.0)
DIRECTRIX_LABEL_POS: Tuple[float, float] = (8.0, 34.0)

# Logging (environment overrides, e.g. DIRECTRIX_LOG_LEVEL=DEBUG to trace
# every pointer-driven focus/directrix move)
LOG_LEVEL_ENV: str = "DIRECTRIX_LOG_LEVEL"
LOG_FILE_ENV: str = "DIRECTRIX_LOG_FILE"
DEFAULT_LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
