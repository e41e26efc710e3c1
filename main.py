from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.main_window import MainWindow
from infrastructure.image_service import ImageService
from infrastructure.index_repository import PhotoIndexRepository
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = settings.get("logging.dir")
    level = str(settings.get("logging.level", "INFO"))
    init_logging(str(log_dir) if log_dir else None, level=level)

    app = QApplication(sys.argv)

    index_path = settings.resolve_path("index_path", "photos_index.json")
    repo = PhotoIndexRepository()
    vm = MainVM(repo)
    vm.load_index(str(index_path))

    img = ImageService(
        base_dir=index_path.parent,
        mem_cache_size=settings.get_int("thumbnail_mem_cache", 512),
    )
    win = MainWindow(vm=vm, image_service=img, settings=settings)
    win.show_current_screen()
    win.statusBar().showMessage("Ready", 2000)
    win.show()
    logger.info("Viewer started with {}", index_path)

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
