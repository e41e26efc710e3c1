"""Core service interfaces and shared data structures.

This module defines the screen descriptors handed to the presentation layer,
the navigation events it reports back, and the errors raised when an event
violates the navigation contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.models import PhotoItem


class ScreenName(str, Enum):
    """The three screens of the viewer."""

    CATEGORY = "category"
    GALLERY = "gallery"
    VIEWER = "viewer"


# Events


@dataclass(frozen=True)
class SelectCategory:
    key: str


@dataclass(frozen=True)
class SelectItem:
    group_index: int
    item_index: int


@dataclass(frozen=True)
class NavigateHome:
    pass


@dataclass(frozen=True)
class NavigateBack:
    pass


NavigationEvent = SelectCategory | SelectItem | NavigateHome | NavigateBack


# Screen descriptors


@dataclass(frozen=True)
class CategoryEntry:
    """One row of the category list.

    Attributes:
        key: Category key in the collection.
        display_title: Title with its numeric prefix removed.
        photo_count: Number of photos across all groups of the category.
    """

    key: str
    display_title: str
    photo_count: int


@dataclass(frozen=True)
class CategoryScreen:
    entries: tuple[CategoryEntry, ...]

    name = ScreenName.CATEGORY


@dataclass(frozen=True)
class GalleryItem:
    """A thumbnail cell.

    Attributes:
        src: Image reference, passed through untouched.
        display_filename: Filename without its `<cat>.<grp>.<sub>_` prefix.
        original_index: Index into the group's original `photos`.
    """

    src: str
    display_filename: str
    original_index: int


@dataclass(frozen=True)
class GalleryBlock:
    """A grid of thumbnails; `sub_heading` is None for an unpartitioned group."""

    sub_heading: str | None
    items: tuple[GalleryItem, ...]


@dataclass(frozen=True)
class GalleryGroup:
    """A group heading with its grids.

    Attributes:
        group_index: Index into the category's original `groups`.
        heading: Bracketed group label, e.g. "【集合写真】".
        blocks: One unlabelled block, or one labelled block per sub id.
    """

    group_index: int
    heading: str
    blocks: tuple[GalleryBlock, ...]


@dataclass(frozen=True)
class GalleryScreen:
    category_key: str
    display_title: str
    ordered_groups: tuple[GalleryGroup, ...]

    name = ScreenName.GALLERY


@dataclass(frozen=True)
class ViewerScreen:
    """Single photo view.

    Attributes:
        src: Image reference.
        alt_text: Raw filename, used as alternative text.
        display_filename: Filename without its prefix.
        breadcrumb: "category / group / sub id" context line.
        category_title: Formatted category title.
        group_label: Group label without numeric prefix or brackets.
        sub_id: Parsed sub id of the filename, or None.
        item: The resolved photo.
    """

    src: str
    alt_text: str
    display_filename: str
    breadcrumb: str
    category_title: str
    group_label: str
    sub_id: str | None
    item: PhotoItem

    name = ScreenName.VIEWER


ScreenDescriptor = CategoryScreen | GalleryScreen | ViewerScreen


# Errors


class NavigationError(Exception):
    """Base class for navigation contract violations."""


class SelectionOutOfRangeError(NavigationError, LookupError):
    """An event referenced a category key or index absent from the collection."""


class InvalidTransitionError(NavigationError):
    """An event is not accepted on the current screen."""

    def __init__(self, screen: ScreenName, event: object) -> None:
        super().__init__(f"{type(event).__name__} is not accepted on the {screen.value} screen")
        self.screen = screen
        self.event = event
