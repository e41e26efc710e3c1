"""ViewModel owning the navigation state of the three-screen viewer."""

from __future__ import annotations

from loguru import logger

from core.models import Collection, PhotoIndex, Selection
from core.services.interfaces import (
    NavigateBack,
    NavigateHome,
    NavigationError,
    NavigationEvent,
    ScreenDescriptor,
    ScreenName,
    SelectCategory,
    SelectItem,
)
from core.services.navigation_service import INITIAL_STATE, NavigationState, render, transition


class MainVM:
    """Main application view-model.

    Holds the loaded collection and the current selection, applies the
    navigation events reported by the view and exposes the descriptor of the
    screen to show.
    """

    def __init__(self, repo, collection: Collection | None = None) -> None:
        """Create a MainVM.

        Args:
            repo: Repository with a `load(path)` method returning a `PhotoIndex`.
            collection: Already loaded collection (skips `load_index`).
        """
        self._repo = repo
        self._collection: Collection = collection if collection is not None else {}
        self._source_path: str | None = None
        self._state: NavigationState = INITIAL_STATE
        self._screen: ScreenDescriptor = render(self._state, self._collection)

    def load_index(self, path: str) -> None:
        """Load the photo index at `path` and return to the category list."""
        index: PhotoIndex = self._repo.load(path)
        self._collection = index.categories
        self._source_path = index.source_path
        self._state = INITIAL_STATE
        self._screen = render(self._state, self._collection)

    def get_source_path(self) -> str | None:
        """Return the last-loaded index path, if available."""
        return self._source_path

    @property
    def screen_name(self) -> ScreenName:
        return self._state.screen

    @property
    def selection(self) -> Selection:
        return self._state.selection

    @property
    def screen(self) -> ScreenDescriptor:
        """Descriptor of the screen currently shown."""
        return self._screen

    # Events reported by the view

    def select_category(self, key: str) -> ScreenDescriptor:
        return self.dispatch(SelectCategory(key))

    def select_item(self, group_index: int, item_index: int) -> ScreenDescriptor:
        return self.dispatch(SelectItem(group_index, item_index))

    def navigate_home(self) -> ScreenDescriptor:
        return self.dispatch(NavigateHome())

    def navigate_back(self) -> ScreenDescriptor:
        return self.dispatch(NavigateBack())

    def dispatch(self, event: NavigationEvent) -> ScreenDescriptor:
        """Apply `event` and return the new screen descriptor.

        The state is only replaced once the new screen rendered successfully,
        so a rejected event leaves the current screen intact.
        """
        try:
            new_state = transition(self._state, event, self._collection)
            screen = render(new_state, self._collection)
        except NavigationError as ex:
            logger.error(
                "Navigation rejected: {} on {} | selection={} | {}",
                event,
                self._state.screen.value,
                self._state.selection,
                ex,
            )
            raise

        logger.info(
            "Navigate {} -> {} via {}",
            self._state.screen.value,
            new_state.screen.value,
            type(event).__name__,
        )
        self._state = new_state
        self._screen = screen
        return screen

    def refresh(self) -> ScreenDescriptor:
        """Re-render the current screen from the collection."""
        self._screen = render(self._state, self._collection)
        return self._screen
