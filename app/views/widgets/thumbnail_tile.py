"""Clickable thumbnail cell: image on top, display filename below."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QImage, QMouseEvent, QPixmap
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from app.views.constants import OBJ_THUMB, OBJ_THUMB_FILENAME


class ThumbnailTile(QFrame):
    """A gallery cell bound to `(group_index, item_index)`."""

    clicked = Signal(int, int)

    def __init__(
        self,
        group_index: int,
        item_index: int,
        caption: str,
        side: int,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName(OBJ_THUMB)
        self.setCursor(Qt.PointingHandCursor)
        self._group_index = group_index
        self._item_index = item_index
        self._side = side

        self._image = QLabel(self)
        self._image.setAlignment(Qt.AlignCenter)
        self._image.setFixedSize(side, side)

        self._caption = QLabel(caption, self)
        self._caption.setObjectName(OBJ_THUMB_FILENAME)
        self._caption.setAlignment(Qt.AlignCenter)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.addWidget(self._image)
        layout.addWidget(self._caption)

    def has_image(self) -> bool:
        """True once a thumbnail has been placed."""
        pixmap = self._image.pixmap()
        return pixmap is not None and not pixmap.isNull()

    def set_image(self, image: QImage) -> None:
        pix = QPixmap.fromImage(image)
        self._image.setPixmap(
            pix.scaled(self._side, self._side, Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt override
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self._group_index, self._item_index)
        super().mouseReleaseEvent(event)
