"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (buffer size, demo scene size)
   scattered throughout the code.
2. Deployment: Defaults can be overridden through SOFTRASTER_* environment
   variables without touching the code.

Exports:
    BUFFER_SIZE (int): Side length of the square pixel buffer.
    DEMO_TRIANGLE_COUNT (int): Number of triangles in a random demo scene.
    DEMO_PROJECTION_SCALE (float): Maps unit-square triangles into pixel space.
    WINDOW_TITLE (str): Title of the display window.
"""
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "SOFTRASTER_"


def get_env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read SOFTRASTER_<name> from the environment."""
    return os.environ.get(ENV_PREFIX + name, default)


def get_env_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    """
    Read SOFTRASTER_<name> as an integer, falling back to `default`
    when the variable is unset, not a number or below `minimum`.
    """
    raw = get_env_str(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={raw!r}: not an integer, using {default}.")
        return default
    if minimum is not None and value < minimum:
        logger.warning(f"Ignoring {ENV_PREFIX + name}={value}: must be at least {minimum}, using {default}.")
        return default
    return value


# Global Constants
BUFFER_SIZE: int = get_env_int("BUFFER_SIZE", 600, minimum=1)
DEMO_TRIANGLE_COUNT: int = get_env_int("TRIANGLE_COUNT", 20, minimum=0)
DEMO_PROJECTION_SCALE: float = 512.0
WINDOW_TITLE: str = "ThreeD Window"
LOG_LEVEL: str = get_env_str("LOG_LEVEL", "INFO")
