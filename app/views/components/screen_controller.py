"""ScreenController: Renders screen descriptors into the stacked screens."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QGridLayout, QLabel, QLayout, QPushButton, QWidget
from loguru import logger

from app.views.constants import (
    DEFAULT_GALLERY_COLUMNS,
    DEFAULT_PREVIEW_MAX_SIDE,
    DEFAULT_THUMB_SIZE,
    GRID_SPACING_PX,
    OBJ_CATEGORY_CARD,
    OBJ_GROUP_TITLE,
    OBJ_SUBGROUP_TITLE,
    SCREEN_PAGES,
    TOKEN_THUMB,
    TOKEN_VIEWER,
)
from app.views.image_tasks import ImageTaskRunner
from app.views.screen_context import ScreenContext
from app.views.widgets.thumbnail_tile import ThumbnailTile
from core.services.interfaces import (
    CategoryScreen,
    GalleryBlock,
    GalleryScreen,
    ScreenDescriptor,
    ScreenName,
    ViewerScreen,
)
from core.services.label_service import category_button_text


def _clear_layout(layout: QLayout) -> None:
    """Remove and schedule deletion of every widget and sub-layout in `layout`."""
    while layout.count():
        child = layout.takeAt(0)
        widget = child.widget()
        if widget is not None:
            widget.deleteLater()
        elif child.layout() is not None:
            _clear_layout(child.layout())


class ScreenController:
    """Connects the view model to the widgets referenced by a `ScreenContext`.

    Every user action is forwarded to the view model as one of the four
    navigation events and the returned descriptor is rendered in full.
    """

    def __init__(
        self,
        ctx: ScreenContext,
        vm: Any,
        runner: ImageTaskRunner,
        *,
        thumb_size: int = DEFAULT_THUMB_SIZE,
        preview_max_side: int = DEFAULT_PREVIEW_MAX_SIDE,
        columns: int = DEFAULT_GALLERY_COLUMNS,
    ) -> None:
        self.ctx = ctx
        self.vm = vm
        self._runner = runner
        self._thumb_size = thumb_size
        self._preview_max_side = preview_max_side
        self._columns = max(1, columns)
        # Incremented on every render; image results from older renders are dropped.
        self._generation = 0
        self._tiles: dict[tuple[int, int], ThumbnailTile] = {}

    def connect_controls(self) -> None:
        """Wire the optional home/back controls; absent controls are skipped."""
        if self.ctx.home_button is not None:
            self.ctx.home_button.clicked.connect(lambda: self.show(self.vm.navigate_home()))
        if self.ctx.back_button is not None:
            self.ctx.back_button.clicked.connect(lambda: self.show(self.vm.navigate_back()))

    # Rendering

    def show(self, screen: ScreenDescriptor) -> None:
        """Render `screen` and raise its page."""
        self._generation += 1
        self._tiles.clear()
        if isinstance(screen, GalleryScreen):
            self._render_gallery(screen)
        elif isinstance(screen, ViewerScreen):
            self._render_viewer(screen)
        else:
            self._render_categories(screen)

        self.ctx.stack.setCurrentIndex(SCREEN_PAGES[screen.name])
        if self.ctx.home_button is not None:
            self.ctx.home_button.setVisible(screen.name is not ScreenName.CATEGORY)

    def _render_categories(self, screen: CategoryScreen) -> None:
        _clear_layout(self.ctx.category_list)
        for entry in screen.entries:
            btn = QPushButton(category_button_text(entry.display_title, entry.photo_count))
            btn.setObjectName(OBJ_CATEGORY_CARD)
            btn.clicked.connect(lambda _=False, key=entry.key: self._on_category_clicked(key))
            self.ctx.category_list.addWidget(btn)

    def _render_gallery(self, screen: GalleryScreen) -> None:
        self.ctx.gallery_title.setText(screen.display_title)
        container = self.ctx.gallery_container
        _clear_layout(container)

        for group in screen.ordered_groups:
            heading = QLabel(group.heading)
            heading.setObjectName(OBJ_GROUP_TITLE)
            container.addWidget(heading)
            for block in group.blocks:
                if block.sub_heading is not None:
                    sub = QLabel(block.sub_heading)
                    sub.setObjectName(OBJ_SUBGROUP_TITLE)
                    container.addWidget(sub)
                container.addWidget(self._build_grid(group.group_index, block))

    def _build_grid(self, group_index: int, block: GalleryBlock) -> QWidget:
        grid_widget = QWidget()
        grid = QGridLayout(grid_widget)
        grid.setSpacing(GRID_SPACING_PX)
        grid.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        for pos, item in enumerate(block.items):
            tile = ThumbnailTile(
                group_index, item.original_index, item.display_filename, self._thumb_size
            )
            tile.clicked.connect(self._on_tile_clicked)
            grid.addWidget(tile, pos // self._columns, pos % self._columns)
            self._tiles[(group_index, item.original_index)] = tile
            self._runner.request_thumbnail(
                item.src, self._thumb_size, self._generation, group_index, item.original_index
            )
        return grid_widget

    def _render_viewer(self, screen: ViewerScreen) -> None:
        self.ctx.viewer_image.clear()
        self.ctx.viewer_image.setToolTip(screen.alt_text)
        self.ctx.viewer_image.setAccessibleName(screen.alt_text)
        self.ctx.viewer_filename.setText(screen.display_filename)
        self.ctx.viewer_context.setText(screen.breadcrumb)
        self._runner.request_preview(screen.src, self._preview_max_side, self._generation)

    def tile_for(self, group_index: int, item_index: int) -> ThumbnailTile | None:
        """Tile of the current gallery render showing `(group_index, item_index)`."""
        return self._tiles.get((group_index, item_index))

    # Callbacks

    def _on_category_clicked(self, key: str) -> None:
        self.show(self.vm.select_category(key))

    def _on_tile_clicked(self, group_index: int, item_index: int) -> None:
        self.show(self.vm.select_item(group_index, item_index))

    def on_image_loaded(self, token: str, src: str, image: QImage | None) -> None:
        """Place a finished background image, ignoring results for stale renders."""
        if image is None or image.isNull():
            return
        parts = token.split("|")
        try:
            kind, generation = parts[0], int(parts[1])
        except (IndexError, ValueError):
            logger.warning("Unexpected image token: {}", token)
            return
        if generation != self._generation:
            return

        if kind == TOKEN_VIEWER:
            label = self.ctx.viewer_image
            pix = QPixmap.fromImage(image)
            if label.width() > 0 and label.height() > 0:
                pix = pix.scaled(label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
            label.setPixmap(pix)
        elif kind == TOKEN_THUMB and len(parts) == 4:
            tile = self.tile_for(int(parts[2]), int(parts[3]))
            if tile is not None:
                tile.set_image(image)
        else:
            logger.debug("Unhandled image token {} for {}", token, src)
