"""Loading of the generated photo index.

The index generator writes either plain JSON or a script for the browser
viewer of the form::

    window.PHOTOS_INDEX = { "categories": { ... } };

Both are accepted. The shape is validated strictly: a malformed index is a
precondition violation and raises `ValueError` instead of being repaired.
"""

from __future__ import annotations

import json
from pathlib import Path
import re
from typing import Any

from loguru import logger

from core.models import Category, PhotoGroup, PhotoIndex, PhotoItem

_SCRIPT_ASSIGN_RE = re.compile(
    r"^\s*(?:window\.|var\s+|let\s+|const\s+)?PHOTOS_INDEX\s*=\s*", re.MULTILINE
)


def _strip_script_wrapper(text: str) -> str:
    """Return the JSON payload of a `PHOTOS_INDEX = {...};` script, or `text` unchanged."""
    m = _SCRIPT_ASSIGN_RE.search(text)
    if not m:
        return text
    body = text[m.end() :]
    # Drop the trailing `;` and anything after the object, such as comments.
    end = body.rfind("}")
    if end >= 0:
        body = body[: end + 1]
    return body.strip()


def _require(node: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(node, dict) or key not in node:
        raise ValueError(f"{where}: missing '{key}'")
    value = node[key]
    if not isinstance(value, kind):
        raise ValueError(f"{where}: '{key}' must be {kind.__name__}, got {type(value).__name__}")
    return value


def _parse_item(raw: Any, where: str) -> PhotoItem:
    return PhotoItem(
        filename=_require(raw, "filename", str, where),
        src=_require(raw, "src", str, where),
    )


def _parse_group(raw: Any, where: str) -> PhotoGroup:
    name = _require(raw, "name", str, where)
    photos = _require(raw, "photos", list, where)
    return PhotoGroup(
        name=name,
        photos=tuple(_parse_item(p, f"{where}.photos[{i}]") for i, p in enumerate(photos)),
    )


def _parse_category(key: str, raw: Any) -> Category:
    where = f"categories[{key!r}]"
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: expected object, got {type(raw).__name__}")
    title = raw.get("title") or ""
    if not isinstance(title, str):
        raise ValueError(f"{where}: 'title' must be str")
    groups = _require(raw, "groups", list, where)
    return Category(
        title=title,
        groups=tuple(_parse_group(g, f"{where}.groups[{i}]") for i, g in enumerate(groups)),
    )


def parse_index(data: Any) -> dict[str, Category]:
    """Convert decoded index data into `Category` models keyed by category key."""
    categories = _require(data, "categories", dict, "index")
    return {str(key): _parse_category(str(key), raw) for key, raw in categories.items()}


class PhotoIndexRepository:
    """Load the photo index from a JSON or `photos_index.js` file."""

    def load(self, index_path: str | Path) -> PhotoIndex:
        """Read and validate the index at `index_path`.

        Raises:
            FileNotFoundError: The file does not exist.
            ValueError: The content is not valid JSON or has the wrong shape.
        """
        path = Path(index_path)
        if not path.exists():
            raise FileNotFoundError(f"photo index not found: {path}")

        text = path.read_text(encoding="utf-8-sig")
        try:
            data = json.loads(_strip_script_wrapper(text))
        except json.JSONDecodeError as ex:
            logger.error("Photo index is not valid JSON: {} ({})", path, ex)
            raise ValueError(f"photo index is not valid JSON: {path}: {ex}") from ex

        try:
            categories = parse_index(data)
        except ValueError as ex:
            logger.error("Malformed photo index {}: {}", path, ex)
            raise

        index = PhotoIndex(categories=categories, source_path=str(path))
        logger.info(
            "Loaded photo index {} | categories={} photos={}",
            path,
            index.category_count,
            index.photo_count,
        )
        return index
