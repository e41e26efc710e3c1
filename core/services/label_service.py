"""Human-facing labels derived from raw index identifiers.

All functions are pure and accept None in place of an empty string.

Examples:
    "1.1次会・2次会" -> "1次会・2次会"   (category_title)
    "1.9.集合写真"   -> "【集合写真】"   (group_heading)
    "1.5.全体歓談"   -> "全体歓談"       (group_context_label)
    "1.2.X_009.jpg"  -> "009.jpg"        (display_filename)
"""

from __future__ import annotations

BREADCRUMB_SEPARATOR = " / "
# Sub id used for photos that do not live in a real sub-folder.
NO_SUB_FOLDER_ID = "X"


def category_title(raw_title: str | None, fallback_key: str | None = None) -> str:
    """Strip the numeric prefix of a category title, falling back to its key."""
    base = raw_title or fallback_key or ""
    _, sep, rest = base.partition(".")
    return rest if sep else base


def group_context_label(group_name: str | None) -> str:
    """Return the label part of a group name (everything after the second dot)."""
    name = group_name or ""
    parts = name.split(".")
    if len(parts) >= 3:
        return ".".join(parts[2:])
    return name


def group_heading(group_name: str | None) -> str:
    """Gallery heading for a group, wrapped in lenticular brackets."""
    return f"【{group_context_label(group_name)}】"


def display_filename(filename: str | None) -> str:
    """Drop everything up to and including the first underscore."""
    base = filename or ""
    _, sep, rest = base.partition("_")
    return rest if sep else base


def sub_block_heading(sub_id: str) -> str:
    """Gallery sub-section heading, e.g. "■ 1-1"."""
    return f"■ {sub_id}"


def build_breadcrumb(category_label: str, group_label: str, sub_id: str | None) -> str:
    """Join the viewer context parts, skipping empty ones and the no-sub-folder id."""
    parts: list[str] = []
    if category_label:
        parts.append(category_label)
    if group_label:
        parts.append(group_label)
    if sub_id and sub_id != NO_SUB_FOLDER_ID:
        parts.append(sub_id)
    return BREADCRUMB_SEPARATOR.join(parts)


def category_button_text(display_title: str, photo_count: int) -> str:
    """Category list label with the photo count, e.g. "忘年会（12枚）"."""
    if photo_count > 0:
        return f"{display_title}（{photo_count}枚）"
    return display_title
