"""MainWindow: hosts the three viewer screens."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QUrl, Signal
from PySide6.QtGui import QAction, QDesktopServices
from PySide6.QtWidgets import QMainWindow
from loguru import logger

from app.views.components.screen_controller import ScreenController
from app.views.constants import (
    DEFAULT_GALLERY_COLUMNS,
    DEFAULT_PREVIEW_MAX_SIDE,
    DEFAULT_THUMB_SIZE,
    WINDOW_TITLE,
)
from app.views.image_tasks import ImageTaskRunner
from app.views.layout.layout_manager import LayoutManager
from infrastructure.logging import find_latest_log_file


class MainWindow(QMainWindow):
    """Main application window.

    Owns the layout and the screen controller; all navigation decisions are
    made by the view model.
    """

    # Emitted from worker threads; delivered on the GUI thread.
    imageLoaded = Signal(str, str, object)  # token, src, QImage

    def __init__(
        self,
        vm: Any,
        image_service: Any | None = None,
        settings: Any | None = None,
    ) -> None:
        """Initialize MainWindow.

        Args:
            vm: ViewModel exposing the navigation events and `screen`
            image_service: Image service used by background loaders
            settings: Settings instance for configuration
        """
        super().__init__()
        self._vm = vm
        self._img = image_service
        self._settings = settings

        thumb_size = DEFAULT_THUMB_SIZE
        preview_max_side = DEFAULT_PREVIEW_MAX_SIDE
        columns = DEFAULT_GALLERY_COLUMNS
        show_back = True
        if self._settings is not None:
            thumb_size = self._settings.get_int("thumbnail_size", DEFAULT_THUMB_SIZE)
            preview_max_side = self._settings.get_int("preview_max_side", DEFAULT_PREVIEW_MAX_SIDE)
            columns = self._settings.get_int("gallery.columns", DEFAULT_GALLERY_COLUMNS)
            show_back = bool(self._settings.get("viewer.back_button", True))

        self.setWindowTitle(WINDOW_TITLE)
        self.layout_manager = LayoutManager(self)
        central, ctx = self.layout_manager.setup_main_layout(show_back_button=show_back)
        self.setCentralWidget(central)
        self.layout_manager.setup_initial_window_size()

        self._runner = ImageTaskRunner(service=self._img, receiver=self)
        self.screen_controller = ScreenController(
            ctx,
            self._vm,
            self._runner,
            thumb_size=thumb_size,
            preview_max_side=preview_max_side,
            columns=columns,
        )
        self.screen_controller.connect_controls()
        self.imageLoaded.connect(self.screen_controller.on_image_loaded)

        self._setup_menus()

    def _setup_menus(self) -> None:
        help_menu = self.menuBar().addMenu("&Help")
        open_log = QAction("Open Latest Log", self)
        open_log.triggered.connect(self._open_latest_log)
        help_menu.addAction(open_log)

    def _open_latest_log(self) -> None:
        log_file = find_latest_log_file()
        if log_file is None:
            self.statusBar().showMessage("No log file found", 3000)
            return
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(str(log_file))):
            logger.warning("Could not open log file {}", log_file)

    def show_current_screen(self) -> None:
        """Render whatever screen the view model is currently on."""
        self.screen_controller.show(self._vm.screen)
