"""
Application Initialization
==========================
This module builds the Scene, picks a presenter and runs it.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Instantiates the Scene (Model).
3. Either renders once into a PPM file (headless) or opens the Qt window
   (View) and starts the event loop.
"""
import argparse
import logging
import sys
from typing import List, Optional

from softraster import config
from softraster.controller.commands import SceneController
from softraster.logging_config import setup_logging
from softraster.model.generators import make_triangle_source
from softraster.model.scene import Scene
from softraster.view.ppm import PpmPresenter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="softraster",
        description="Rasterize a random scene of solid-colored triangles on the CPU.",
    )
    parser.add_argument("--size", type=int, default=config.BUFFER_SIZE,
                        help="side length of the square pixel buffer (default: %(default)s)")
    parser.add_argument("--count", type=int, default=config.DEMO_TRIANGLE_COUNT,
                        help="number of random triangles (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible scene")
    parser.add_argument("--output", metavar="PATH", default=None,
                        help="render once into a PPM file instead of opening a window")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help="logging level (default: %(default)s)")
    parser.add_argument("--log-file", default=None,
                        help="also write logs to this file")
    return parser


def build_scene(args: argparse.Namespace) -> Scene:
    source = make_triangle_source(
        count=args.count,
        scale=config.DEMO_PROJECTION_SCALE * args.size / config.BUFFER_SIZE,
        seed=args.seed,
    )
    return Scene(size=args.size, triangle_source=source)


def run_headless(scene: Scene, output: str) -> None:
    controller = SceneController(scene, PpmPresenter(output))
    controller.render()


def run_window(scene: Scene) -> int:
    from PySide6.QtWidgets import QApplication
    from softraster.view.main_window import RasterWindow

    app = QApplication.instance() or QApplication(sys.argv)
    window = RasterWindow(scene)
    window.controller.render()
    window.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        parser.error(str(e))

    try:
        # 2. Initialize the Scene
        scene = build_scene(args)

        # 3. Present it
        if args.output:
            run_headless(scene, args.output)
            return 0
        return run_window(scene)
    except (OSError, ValueError) as e:
        logger.exception(f"softraster failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
