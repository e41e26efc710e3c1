"""LayoutManager: Builds the three stacked screens and the shared controls."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from app.views.constants import (
    BACK_CAPTION,
    HOME_CAPTION,
    OBJ_VIEWER_CONTEXT,
    OBJ_VIEWER_FILENAME,
)
from app.views.screen_context import ScreenContext


class LayoutManager:
    """Creates the main window layout.

    The window consists of a top bar holding the home control and a stacked
    widget with one page per screen:
    - Category list (scrollable column of buttons)
    - Gallery (title plus scrollable container of group sections)
    - Viewer (context line, image, filename, back control)
    """

    WINDOW_SIZE_RATIO = 0.6

    def __init__(self, main_window: QMainWindow) -> None:
        """Initialize with main window reference.

        Args:
            main_window: The QMainWindow to manage layout for
        """
        self.window = main_window

    @staticmethod
    def _scrollable(inner: QWidget) -> QScrollArea:
        area = QScrollArea()
        area.setWidgetResizable(True)
        area.setWidget(inner)
        return area

    def _build_category_page(self) -> tuple[QWidget, QVBoxLayout]:
        inner = QWidget()
        column = QVBoxLayout(inner)
        column.setAlignment(Qt.AlignTop)
        return self._scrollable(inner), column

    def _build_gallery_page(self) -> tuple[QWidget, QLabel, QVBoxLayout]:
        page = QWidget()
        root = QVBoxLayout(page)
        title = QLabel()
        title.setAlignment(Qt.AlignCenter)
        font = title.font()
        font.setPointSize(font.pointSize() + 6)
        font.setBold(True)
        title.setFont(font)
        root.addWidget(title)

        inner = QWidget()
        container = QVBoxLayout(inner)
        container.setAlignment(Qt.AlignTop)
        root.addWidget(self._scrollable(inner), 1)
        return page, title, container

    def _build_viewer_page(self) -> tuple[QWidget, QLabel, QLabel, QLabel, QPushButton]:
        page = QWidget()
        root = QVBoxLayout(page)

        context = QLabel()
        context.setObjectName(OBJ_VIEWER_CONTEXT)
        context.setAlignment(Qt.AlignCenter)
        root.addWidget(context)

        image = QLabel()
        image.setAlignment(Qt.AlignCenter)
        image.setMinimumSize(200, 200)
        root.addWidget(image, 1)

        filename = QLabel()
        filename.setObjectName(OBJ_VIEWER_FILENAME)
        filename.setAlignment(Qt.AlignCenter)
        root.addWidget(filename)

        bottom = QHBoxLayout()
        bottom.addStretch(1)
        back = QPushButton(BACK_CAPTION)
        back.setObjectName("back-button")
        bottom.addWidget(back)
        root.addLayout(bottom)
        return page, context, filename, image, back

    def setup_main_layout(self, show_back_button: bool = True) -> tuple[QWidget, ScreenContext]:
        """Create the central widget and the context referencing its controls.

        Args:
            show_back_button: When False, the viewer has no back control and
                the context carries None for it.

        Returns:
            Central widget and the populated `ScreenContext`
        """
        central = QWidget(self.window)
        root = QVBoxLayout(central)

        top = QHBoxLayout()
        home = QPushButton(HOME_CAPTION)
        home.setObjectName("home-button")
        top.addWidget(home)
        top.addStretch(1)
        root.addLayout(top)

        stack = QStackedWidget()
        category_page, category_list = self._build_category_page()
        gallery_page, gallery_title, gallery_container = self._build_gallery_page()
        viewer_page, viewer_context, viewer_filename, viewer_image, back = self._build_viewer_page()
        stack.addWidget(category_page)
        stack.addWidget(gallery_page)
        stack.addWidget(viewer_page)
        root.addWidget(stack, 1)

        if not show_back_button:
            back.hide()
            back = None

        ctx = ScreenContext(
            stack=stack,
            category_list=category_list,
            gallery_title=gallery_title,
            gallery_container=gallery_container,
            viewer_image=viewer_image,
            viewer_filename=viewer_filename,
            viewer_context=viewer_context,
            home_button=home,
            back_button=back,
        )
        return central, ctx

    def setup_initial_window_size(self) -> None:
        """Setup initial window size based on screen dimensions."""
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        rect = screen.availableGeometry()
        self.window.resize(
            int(rect.width() * self.WINDOW_SIZE_RATIO),
            int(rect.height() * self.WINDOW_SIZE_RATIO),
        )
