"""Image loading, scaling and in-memory caching for thumbnails and previews.

Qt decodes the common formats; Pillow is used as a fallback for anything Qt
cannot read (for example CMYK JPEGs or less common TIFF variants). Failures
degrade to a grey placeholder so the gallery never shows broken cells.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
import threading

from PIL import Image, ImageOps
from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QColor, QImage, QImageReader
from loguru import logger

PLACEHOLDER_SIDE = 64


@dataclass
class _MemCacheItem:
    key: str
    image: QImage


class _LRUCache:
    def __init__(self, capacity: int) -> None:
        self._cap = max(1, int(capacity or 1))
        self._data: OrderedDict[str, _MemCacheItem] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> QImage | None:
        """Return cached QImage for key, moving it to the MRU position."""
        with self._lock:
            item = self._data.get(key)
            if not item:
                return None
            self._data.move_to_end(key)
            return item.image

    def put(self, key: str, image: QImage) -> None:
        """Insert or update `key` with `image`, evicting LRU when over capacity."""
        with self._lock:
            self._data[key] = _MemCacheItem(key, image)
            self._data.move_to_end(key)
            while len(self._data) > self._cap:
                self._data.popitem(last=False)


def _scaled_size(width: int, height: int, side: int) -> QSize:
    """Size bounded by `side` on the longer edge, never upscaled."""
    if width >= height:
        nw = min(side, width)
        nh = max(1, int(height * (nw / max(1, width))))
    else:
        nh = min(side, height)
        nw = max(1, int(width * (nh / max(1, height))))
    return QSize(nw, nh)


def placeholder_image() -> QImage:
    img = QImage(PLACEHOLDER_SIDE, PLACEHOLDER_SIDE, QImage.Format_ARGB32)
    img.fill(QColor(220, 220, 220))
    return img


class ImageService:
    """Resolve index `src` references and return bounded QImages."""

    def __init__(self, base_dir: str | Path | None = None, mem_cache_size: int = 512) -> None:
        """Create the service.

        Args:
            base_dir: Directory that relative `src` references are resolved
                against (the directory of the photo index).
            mem_cache_size: Maximum number of decoded images kept in memory.
        """
        self._base_dir = Path(base_dir) if base_dir is not None else None
        self._mem_cache = _LRUCache(mem_cache_size)

    def resolve(self, src: str) -> Path:
        """Return the filesystem path for an index `src`."""
        path = Path(src)
        if not path.is_absolute() and self._base_dir is not None:
            path = self._base_dir / path
        return path

    def get_thumbnail(self, src: str, side: int) -> QImage:
        """Return thumbnail image for `src` with max side `side`."""
        return self._get_image(src, side)

    def get_preview(self, src: str, max_side: int) -> QImage:
        """Return preview image for `src` bounded by `max_side`."""
        return self._get_image(src, max_side)

    def _get_image(self, src: str, requested_side: int) -> QImage:
        key = f"{src}|{int(requested_side)}"
        img = self._mem_cache.get(key)
        if img is not None and not img.isNull():
            return img

        path = self.resolve(src)
        img = self._load_via_qt(path, requested_side)
        if img is None or img.isNull():
            img = self._load_via_pillow(path, requested_side)
        if img is None or img.isNull():
            logger.debug("Image decode failed, using placeholder: {}", path)
            img = placeholder_image()

        self._mem_cache.put(key, img)
        return img

    def _load_via_qt(self, path: Path, requested_side: int) -> QImage | None:
        reader = QImageReader(str(path))
        reader.setAutoTransform(True)
        orig = reader.size()
        if requested_side > 0 and orig.isValid() and orig.width() > 0 and orig.height() > 0:
            reader.setScaledSize(_scaled_size(orig.width(), orig.height(), requested_side))
        img = reader.read()
        if img.isNull():
            logger.debug("Qt read failed for {}: {}", path, reader.errorString())
            return None
        if requested_side > 0 and max(img.width(), img.height()) > requested_side:
            img = img.scaled(
                requested_side, requested_side, Qt.KeepAspectRatio, Qt.SmoothTransformation
            )
        return img

    def _load_via_pillow(self, path: Path, requested_side: int) -> QImage | None:
        try:
            with Image.open(path) as im:
                im = ImageOps.exif_transpose(im)
                if requested_side > 0:
                    im.thumbnail((requested_side, requested_side))
                im = im.convert("RGBA")
                data = im.tobytes("raw", "RGBA")
                qimg = QImage(data, im.width, im.height, im.width * 4, QImage.Format_RGBA8888)
                # Detach from the Python buffer
                return qimg.copy()
        except (OSError, ValueError) as ex:
            logger.debug("Pillow read failed for {}: {}", path, ex)
            return None
