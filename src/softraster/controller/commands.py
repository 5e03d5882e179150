"""
Scene Commands
==============
Connects a Scene to whatever shows its pixels.

Why is this file needed?
------------------------
1. Decoupling: The Scene knows nothing about windows or files. A Presenter
   only receives finished bytes.
2. Input mapping: Key presses from any front end are turned into the same
   three commands (render, new scene, quit).

Classes:
    Presenter: Protocol implemented by every output target.
    SceneCommand: The commands a front end can send.
    SceneController: Runs commands against a Scene and presents the result.
"""
from __future__ import annotations

import enum
import logging
from typing import Dict, Optional, Protocol

from softraster.model.scene import Scene

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    def present(self, data: bytes, width: int, height: int) -> None:
        """Show one frame of row-major RGB bytes."""
        ...


class SceneCommand(enum.Enum):
    RENDER = "render"
    RESET = "reset"
    QUIT = "quit"


KEY_BINDINGS: Dict[str, SceneCommand] = {
    "r": SceneCommand.RENDER,
    "t": SceneCommand.RESET,
    "q": SceneCommand.QUIT,
}


def command_for_key(key: str) -> Optional[SceneCommand]:
    """Map a key name to its command; unbound keys give None."""
    return KEY_BINDINGS.get(key.lower())


class SceneController:
    """
    Runs render/reset commands on a Scene and pushes each new frame to a Presenter.
    """
    def __init__(self, scene: Scene, presenter: Presenter) -> None:
        self.scene = scene
        self.presenter = presenter

    def present(self) -> None:
        self.presenter.present(self.scene.export(), self.scene.size, self.scene.size)

    def render(self) -> None:
        """Re-rasterize the current triangles onto the current buffer."""
        self.scene.render()
        self.present()

    def reset(self) -> None:
        """Start a new scene and show it right away."""
        self.scene.reset()
        self.scene.render()
        self.present()

    def dispatch(self, command: SceneCommand) -> bool:
        """
        Execute a command.

        Returns:
            False when the command asks the front end to stop, True otherwise.
        """
        logger.debug(f"Dispatching {command.value}")
        if command is SceneCommand.RENDER:
            self.render()
        elif command is SceneCommand.RESET:
            self.reset()
        elif command is SceneCommand.QUIT:
            return False
        return True
