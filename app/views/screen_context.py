"""Widget references shared by the screen controller.

Built once by `LayoutManager` when the window is set up and passed
explicitly to the controller. Controls that a deployment does not need may
be left as None; the controller then skips them.
"""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtWidgets import QAbstractButton, QLabel, QStackedWidget, QVBoxLayout


@dataclass
class ScreenContext:
    stack: QStackedWidget

    # Category screen
    category_list: QVBoxLayout

    # Gallery screen
    gallery_title: QLabel
    gallery_container: QVBoxLayout

    # Viewer screen
    viewer_image: QLabel
    viewer_filename: QLabel
    viewer_context: QLabel

    # Optional controls
    home_button: QAbstractButton | None = None
    back_button: QAbstractButton | None = None
