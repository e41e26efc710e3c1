"""Split a group's photos into sub-blocks keyed by the filename sub id."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from core.models import PhotoItem
from core.services.identifier_parser import parse_leaf_sub_id


@dataclass(frozen=True)
class IndexedItem:
    """A photo together with its index in the group's original `photos`."""

    item: PhotoItem
    original_index: int


@dataclass
class SubBlock:
    """Photos of one group sharing the same sub id, in first-seen order."""

    sub_id: str
    items: list[IndexedItem] = field(default_factory=list)


def partition_by_sub_id(photos: Sequence[PhotoItem]) -> list[SubBlock] | None:
    """Partition `photos` by sub id.

    Returns None when fewer than two distinct sub ids are present, meaning
    the group renders as one flat grid. Photos whose filename does not follow
    the naming convention are left out of every block.
    """
    blocks: dict[str, SubBlock] = {}
    for index, photo in enumerate(photos):
        sub_id = parse_leaf_sub_id(photo.filename)
        if not sub_id:
            continue
        block = blocks.get(sub_id)
        if block is None:
            block = blocks[sub_id] = SubBlock(sub_id=sub_id)
        block.items.append(IndexedItem(item=photo, original_index=index))

    if len(blocks) <= 1:
        return None
    # dicts keep insertion order, so blocks come out in first-seen order
    return list(blocks.values())
