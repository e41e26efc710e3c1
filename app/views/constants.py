"""
UI/view constants centralized for reuse across view modules.

Only magic numbers, object names and fixed captions live here; every text
derived from the photo index comes from the core label service.
"""

from __future__ import annotations

from core.services.interfaces import ScreenName

WINDOW_TITLE: str = "Album Viewer"

# Stacked widget page order
SCREEN_PAGES: dict[ScreenName, int] = {
    ScreenName.CATEGORY: 0,
    ScreenName.GALLERY: 1,
    ScreenName.VIEWER: 2,
}

# Control captions
HOME_CAPTION: str = "🏠"
BACK_CAPTION: str = "🔙"

# Object names used by the stylesheet
OBJ_CATEGORY_CARD: str = "category-card"
OBJ_GROUP_TITLE: str = "gallery-group-title"
OBJ_SUBGROUP_TITLE: str = "gallery-subgroup-title"
OBJ_THUMB: str = "thumb"
OBJ_THUMB_FILENAME: str = "thumb-filename"
OBJ_VIEWER_CONTEXT: str = "viewer-context"
OBJ_VIEWER_FILENAME: str = "viewer-filename"

# Grid / preview defaults, overridable by settings.json
DEFAULT_THUMB_SIZE: int = 240
DEFAULT_PREVIEW_MAX_SIDE: int = 1600
DEFAULT_GALLERY_COLUMNS: int = 4
GRID_SPACING_PX: int = 8

# Image task token prefixes
TOKEN_THUMB: str = "thumb"
TOKEN_VIEWER: str = "viewer"
