from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, QRunnable, QThreadPool
from loguru import logger

from app.views.constants import TOKEN_THUMB, TOKEN_VIEWER


class _ImageTask(QRunnable):
    """QRunnable for background image loading.

    Emits `receiver.imageLoaded(token, src, image)` upon completion. The
    receiver is expected to own a Qt `Signal(str, str, object)` named
    `imageLoaded`.
    """

    def __init__(
        self, *, src: str, side: int, is_preview: bool, service: Any, receiver: QObject, token: str
    ) -> None:
        super().__init__()
        self._src = src
        self._side = side
        self._is_preview = is_preview
        self._service = service
        self._receiver = receiver
        self._token = token

    def run(self) -> None:  # type: ignore[override]
        try:
            if self._is_preview:
                img = self._service.get_preview(self._src, self._side)
            else:
                img = self._service.get_thumbnail(self._src, self._side)
        except Exception as ex:  # pragma: no cover - GUI background task
            logger.error("Image task failed for {}: {}", self._src, ex)
            img = None
        self._receiver.imageLoaded.emit(self._token, self._src, img)  # type: ignore[attr-defined]


class ImageTaskRunner:
    """Dispatches image load tasks to the global thread pool.

    Tokens carry the render generation so results for a screen that has
    since been rebuilt can be recognised and dropped:
    - Thumbnail: "thumb|{generation}|{group}|{item}"
    - Viewer:    "viewer|{generation}"
    """

    def __init__(self, *, service: Any, receiver: QObject) -> None:
        self._service = service
        self._receiver = receiver
        self._pool = QThreadPool.globalInstance()

    def _start(self, *, src: str, side: int, is_preview: bool, token: str) -> str:
        if self._service is None:
            return token
        task = _ImageTask(
            src=src,
            side=side,
            is_preview=is_preview,
            service=self._service,
            receiver=self._receiver,
            token=token,
        )
        self._pool.start(task)
        return token

    def request_thumbnail(
        self, src: str, side: int, generation: int, group_index: int, item_index: int
    ) -> str:
        """Request a gallery thumbnail. Returns the token string."""
        token = f"{TOKEN_THUMB}|{generation}|{group_index}|{item_index}"
        return self._start(src=src, side=side, is_preview=False, token=token)

    def request_preview(self, src: str, side: int, generation: int) -> str:
        """Request the viewer image. Returns the token string."""
        token = f"{TOKEN_VIEWER}|{generation}"
        return self._start(src=src, side=side, is_preview=True, token=token)
