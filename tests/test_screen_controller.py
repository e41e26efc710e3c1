"""Tests for the screen controller: optional controls and stale image results."""

from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication, QMainWindow
import pytest

from app.viewmodels.main_vm import MainVM
from app.views.components.screen_controller import ScreenController
from app.views.constants import SCREEN_PAGES
from app.views.layout.layout_manager import LayoutManager
from core.services.interfaces import ScreenName


class _RecordingRunner:
    """Stands in for ImageTaskRunner; records requests instead of loading."""

    def __init__(self):
        self.thumbnails: list[tuple[str, int, int, int]] = []
        self.previews: list[tuple[str, int]] = []

    def request_thumbnail(self, src, side, generation, group_index, item_index):
        self.thumbnails.append((src, generation, group_index, item_index))
        return f"thumb|{generation}|{group_index}|{item_index}"

    def request_preview(self, src, side, generation):
        self.previews.append((src, generation))
        return f"viewer|{generation}"


def _image() -> QImage:
    img = QImage(8, 8, QImage.Format_ARGB32)
    img.fill(QColor(10, 20, 30))
    return img


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def host(qapp, collection):
    window = QMainWindow()
    central, ctx = LayoutManager(window).setup_main_layout(show_back_button=False)
    window.setCentralWidget(central)
    runner = _RecordingRunner()
    vm = MainVM(repo=None, collection=collection)
    controller = ScreenController(ctx, vm, runner, thumb_size=32)
    controller.connect_controls()
    yield ctx, vm, runner, controller
    window.deleteLater()


class TestOptionalControls:
    def test_missing_back_button_is_skipped(self, host):
        """Without a back control the context carries None and wiring still succeeds."""
        ctx, _, _, controller = host
        assert ctx.back_button is None
        assert ctx.home_button is not None
        controller.connect_controls()

    def test_home_works_without_back_button(self, host):
        ctx, vm, _, controller = host
        controller.show(vm.select_category("c1"))
        assert ctx.stack.currentIndex() == SCREEN_PAGES[ScreenName.GALLERY]

        ctx.home_button.click()
        assert vm.screen_name is ScreenName.CATEGORY
        assert vm.selection.is_empty
        assert ctx.stack.currentIndex() == SCREEN_PAGES[ScreenName.CATEGORY]


class TestImageResults:
    def test_stale_thumbnail_is_dropped(self, host):
        """Results stamped with an older render generation never reach the tiles."""
        _, vm, runner, controller = host
        controller.show(vm.select_category("c1"))
        src, generation, group_index, item_index = runner.thumbnails[-1]
        tile = controller.tile_for(group_index, item_index)
        assert tile is not None

        stale = f"thumb|{generation - 1}|{group_index}|{item_index}"
        current = f"thumb|{generation}|{group_index}|{item_index}"

        controller.on_image_loaded(stale, src, _image())
        assert not tile.has_image()

        controller.on_image_loaded(current, src, _image())
        assert tile.has_image()

    def test_thumbnails_requested_with_original_indices(self, host):
        _, vm, runner, controller = host
        controller.show(vm.select_category("c1"))
        requested = {(g, i) for _, _, g, i in runner.thumbnails}
        # group 1 is sub-partitioned; its unparseable photo (index 3) is not shown
        assert requested == {(3, 0), (1, 0), (1, 2), (1, 1), (0, 0), (0, 1)}

    def test_stale_viewer_image_is_dropped(self, host):
        ctx, vm, runner, controller = host
        controller.show(vm.select_category("c1"))
        controller.show(vm.select_item(1, 2))
        assert ctx.viewer_context.text() == "1次会・2次会 / 全体歓談 / 1"
        assert ctx.viewer_filename.text() == "002.jpg"
        src, generation = runner.previews[-1]

        controller.on_image_loaded(f"viewer|{generation - 1}", src, _image())
        assert ctx.viewer_image.pixmap().isNull()

        controller.on_image_loaded(f"viewer|{generation}", src, _image())
        assert not ctx.viewer_image.pixmap().isNull()

    def test_null_image_is_ignored(self, host):
        _, vm, runner, controller = host
        controller.show(vm.select_category("c1"))
        src, generation, group_index, item_index = runner.thumbnails[0]
        controller.on_image_loaded(f"thumb|{generation}|{group_index}|{item_index}", src, None)
        assert not controller.tile_for(group_index, item_index).has_image()
