"""Three-screen navigation: Category -> Gallery -> Viewer.

`transition` is a pure function over `NavigationState`; `render` turns a
state into the screen descriptor for the presentation layer. The Gallery is
recomputed from the collection on every render, so returning from the Viewer
only needs the category key, never the previously rendered content.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.models import EMPTY_SELECTION, Category, Collection, PhotoGroup, PhotoItem, Selection
from core.services.identifier_parser import parse_leaf_sub_id
from core.services.interfaces import (
    CategoryEntry,
    CategoryScreen,
    GalleryBlock,
    GalleryGroup,
    GalleryItem,
    GalleryScreen,
    InvalidTransitionError,
    NavigateBack,
    NavigateHome,
    NavigationEvent,
    ScreenDescriptor,
    ScreenName,
    SelectCategory,
    SelectionOutOfRangeError,
    SelectItem,
    ViewerScreen,
)
from core.services.label_service import (
    build_breadcrumb,
    category_title,
    display_filename,
    group_context_label,
    group_heading,
    sub_block_heading,
)
from core.services.partition_service import partition_by_sub_id
from core.services.sort_service import order_groups


@dataclass(frozen=True)
class NavigationState:
    screen: ScreenName = ScreenName.CATEGORY
    selection: Selection = EMPTY_SELECTION


INITIAL_STATE = NavigationState()


# Lookups with explicit bounds checks


def resolve_category(collection: Collection, key: str | None) -> Category:
    if key is None or key not in collection:
        raise SelectionOutOfRangeError(f"Unknown category key: {key!r}")
    return collection[key]


def resolve_group(category: Category, group_index: int | None) -> PhotoGroup:
    if not isinstance(group_index, int) or not 0 <= group_index < len(category.groups):
        raise SelectionOutOfRangeError(
            f"Group index {group_index!r} out of range (0..{len(category.groups) - 1})"
        )
    return category.groups[group_index]


def resolve_item(group: PhotoGroup, item_index: int | None) -> PhotoItem:
    if not isinstance(item_index, int) or not 0 <= item_index < len(group.photos):
        raise SelectionOutOfRangeError(
            f"Item index {item_index!r} out of range for group {group.name!r} "
            f"(0..{len(group.photos) - 1})"
        )
    return group.photos[item_index]


# Screen builders


def build_category_screen(collection: Collection) -> CategoryScreen:
    """Category list sorted by key."""
    entries = tuple(
        CategoryEntry(
            key=key,
            display_title=category_title(collection[key].title, key),
            photo_count=collection[key].photo_count,
        )
        for key in sorted(collection)
    )
    return CategoryScreen(entries=entries)


def _gallery_item(photo: PhotoItem, index: int) -> GalleryItem:
    return GalleryItem(
        src=photo.src,
        display_filename=display_filename(photo.filename),
        original_index=index,
    )


def build_gallery_group(group_index: int, group: PhotoGroup) -> GalleryGroup:
    """Lay out one group as a flat grid or as one grid per sub id."""
    sub_blocks = partition_by_sub_id(group.photos)
    if sub_blocks is None:
        blocks: tuple[GalleryBlock, ...] = (
            GalleryBlock(
                sub_heading=None,
                items=tuple(_gallery_item(p, i) for i, p in enumerate(group.photos)),
            ),
        )
    else:
        blocks = tuple(
            GalleryBlock(
                sub_heading=sub_block_heading(block.sub_id),
                items=tuple(_gallery_item(e.item, e.original_index) for e in block.items),
            )
            for block in sub_blocks
        )
    return GalleryGroup(group_index=group_index, heading=group_heading(group.name), blocks=blocks)


def build_gallery_screen(collection: Collection, category_key: str) -> GalleryScreen:
    """Compute the full gallery layout for `category_key`."""
    category = resolve_category(collection, category_key)
    groups = category.groups
    return GalleryScreen(
        category_key=category_key,
        display_title=category_title(category.title, category_key),
        ordered_groups=tuple(build_gallery_group(idx, groups[idx]) for idx in order_groups(groups)),
    )


def build_viewer_screen(collection: Collection, selection: Selection) -> ViewerScreen:
    """Resolve the selected photo and derive the viewer texts."""
    category = resolve_category(collection, selection.category_key)
    group = resolve_group(category, selection.group_index)
    photo = resolve_item(group, selection.item_index)

    title = category_title(category.title, selection.category_key)
    group_label = group_context_label(group.name)
    sub_id = parse_leaf_sub_id(photo.filename)
    return ViewerScreen(
        src=photo.src,
        alt_text=photo.filename or "",
        display_filename=display_filename(photo.filename),
        breadcrumb=build_breadcrumb(title, group_label, sub_id),
        category_title=title,
        group_label=group_label,
        sub_id=sub_id,
        item=photo,
    )


# Transitions


def transition(
    state: NavigationState, event: NavigationEvent, collection: Collection
) -> NavigationState:
    """Return the state reached from `state` on `event`.

    Raises:
        SelectionOutOfRangeError: The event references a key or index absent
            from `collection`.
        InvalidTransitionError: The event is not accepted on the current screen.
    """
    screen = state.screen

    if isinstance(event, NavigateHome):
        # Also accepted on Category, where it leaves the state unchanged.
        return INITIAL_STATE

    if isinstance(event, SelectCategory):
        if screen is ScreenName.CATEGORY:
            resolve_category(collection, event.key)
            return NavigationState(ScreenName.GALLERY, Selection(category_key=event.key))

    elif isinstance(event, SelectItem):
        if screen is ScreenName.GALLERY:
            key = state.selection.category_key
            group = resolve_group(resolve_category(collection, key), event.group_index)
            resolve_item(group, event.item_index)
            return NavigationState(
                ScreenName.VIEWER,
                Selection(
                    category_key=key,
                    group_index=event.group_index,
                    item_index=event.item_index,
                ),
            )

    elif isinstance(event, NavigateBack):
        if screen is ScreenName.VIEWER:
            key = state.selection.category_key
            resolve_category(collection, key)
            return NavigationState(ScreenName.GALLERY, Selection(category_key=key))

    raise InvalidTransitionError(screen, event)


def render(state: NavigationState, collection: Collection) -> ScreenDescriptor:
    """Build the descriptor for `state`, revalidating the stored selection."""
    if state.screen is ScreenName.GALLERY:
        return build_gallery_screen(collection, state.selection.category_key)
    if state.screen is ScreenName.VIEWER:
        return build_viewer_screen(collection, state.selection)
    return build_category_screen(collection)
