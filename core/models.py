"""Core domain models for the photo index: categories, groups and items."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PhotoItem:
    """A single photo entry of the generated index."""

    filename: str
    # Opaque reference to the image (path or URL); never parsed.
    src: str


@dataclass(frozen=True)
class PhotoGroup:
    """A named cluster of photos, named `<categoryId>.<groupId>.<label>`."""

    name: str
    photos: tuple[PhotoItem, ...] = ()


@dataclass(frozen=True)
class Category:
    """Top-level grouping shown on the first screen."""

    title: str
    groups: tuple[PhotoGroup, ...] = ()

    @property
    def photo_count(self) -> int:
        """Total number of photos across all groups."""
        return sum(len(g.photos) for g in self.groups)


# Category key -> Category, loaded once and never mutated.
Collection = Mapping[str, Category]


@dataclass(frozen=True)
class Selection:
    """Current navigation selection; indices are only valid for the loaded collection."""

    category_key: str | None = None
    group_index: int | None = None
    item_index: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.category_key is None and self.group_index is None and self.item_index is None


EMPTY_SELECTION = Selection()


@dataclass
class PhotoIndex:
    """Loaded index as returned by the repository."""

    categories: dict[str, Category] = field(default_factory=dict)
    source_path: str | None = None

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @property
    def photo_count(self) -> int:
        return sum(c.photo_count for c in self.categories.values())
