"""
Headless presenter that saves frames as binary PPM (P6) images.
"""
from __future__ import annotations

import logging
import os
from typing import Union

logger = logging.getLogger(__name__)


class PpmPresenter:
    """Writes every presented frame to `path`, replacing the previous one."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = os.fspath(path)
        self.frames_written = 0

    def present(self, data: bytes, width: int, height: int) -> None:
        expected = 3 * width * height
        if len(data) != expected:
            raise ValueError(
                f"Frame of {width}x{height} needs {expected} bytes, got {len(data)}."
            )

        with open(self.path, "wb") as f:
            # Header: magic number, dimensions, max channel value
            f.write(f"P6\n{width} {height}\n255\n".encode("ascii"))
            f.write(data)

        self.frames_written += 1
        logger.info(f"Frame saved to: {self.path}")
