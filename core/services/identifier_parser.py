"""Parsing of the naming convention embedded in index identifiers.

Leaf filenames follow ``<catID>.<grpID>.<subID>_<seq>.<ext>`` (for example
``1.6.1-1_001.jpg`` or ``1.7.バスケット_003.JPG``) and group names follow
``<catID>.<grpID>.<label>``. Both parsers are total: malformed input maps to
``None`` or to the "sort last" sentinel instead of raising.
"""

from __future__ import annotations

import re
import sys

# Sort key for group names without a numeric group id.
UNORDERED_GROUP_KEY: int = sys.maxsize

LEAF_NAME_RE = re.compile(r"([^.]+)\.([^.]+)\.([^_]+)_([0-9]{3})\.([A-Za-z0-9]+)")
_DIGITS_RE = re.compile(r"[0-9]+")


def parse_leaf_sub_id(filename: str | None) -> str | None:
    """Return the sub id (third segment) of a leaf filename, or None if it does not match."""
    m = LEAF_NAME_RE.fullmatch(filename or "")
    if not m:
        return None
    return m.group(3)


def parse_group_order_key(group_name: str | None) -> int:
    """Return the numeric group id of `group_name`, or `UNORDERED_GROUP_KEY`."""
    parts = (group_name or "").split(".")
    if len(parts) >= 2 and _DIGITS_RE.fullmatch(parts[1]):
        return min(int(parts[1]), UNORDERED_GROUP_KEY)
    return UNORDERED_GROUP_KEY
