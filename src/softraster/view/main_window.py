"""
Main Window (View)
==================
Qt window that displays the scene buffer and forwards key presses.

Keys:
    R: render the current triangles again
    T: new random scene
    Q: quit
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QKeyEvent, QPixmap
from PySide6.QtWidgets import QLabel, QMainWindow, QWidget

from softraster import config
from softraster.controller.commands import SceneController, command_for_key
from softraster.model.scene import Scene

logger = logging.getLogger(__name__)


class RasterWindow(QMainWindow):
    """
    Shows the exported RGB bytes of a Scene as an image.
    Implements the Presenter protocol, so the controller can push frames to it.
    """
    def __init__(self, scene: Scene, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(config.WINDOW_TITLE)

        self.image_label = QLabel(self)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(self.image_label)
        self.setFixedSize(scene.size, scene.size)

        self.controller = SceneController(scene, self)
        self.last_image: Optional[QImage] = None

    def present(self, data: bytes, width: int, height: int) -> None:
        # QImage does not own the buffer, copy() detaches it from `data`
        image = QImage(data, width, height, 3 * width, QImage.Format.Format_RGB888).copy()
        self.last_image = image
        self.image_label.setPixmap(QPixmap.fromImage(image))

    def keyPressEvent(self, event: QKeyEvent) -> None:
        command = command_for_key(event.text()) if event.text() else None
        if command is None:
            super().keyPressEvent(event)
            return

        if not self.controller.dispatch(command):
            logger.info("Quit requested.")
            self.close()
