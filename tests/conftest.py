"""Shared fixtures: a small in-memory photo index."""

from __future__ import annotations

import os

import pytest

from core.models import Category, PhotoGroup, PhotoItem

# Qt widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def make_group(name: str, *filenames: str) -> PhotoGroup:
    return PhotoGroup(
        name=name,
        photos=tuple(PhotoItem(filename=f, src=f"photos/{f}") for f in filenames),
    )


@pytest.fixture
def party_category() -> Category:
    """Category with unordered groups, a sub-partitioned group and an empty one."""
    return Category(
        title="1.1次会・2次会",
        groups=(
            make_group("1.9.集合写真", "1.9.X_001.jpg", "1.9.X_002.jpg"),
            make_group(
                "1.5.全体歓談",
                "1.5.1_001.jpg",
                "1.5.2_001.jpg",
                "1.5.1_002.jpg",
                "snapshot.jpg",
            ),
            make_group("misc"),
            make_group("1.2.乾杯", "1.2.X_009.jpg"),
        ),
    )


@pytest.fixture
def collection(party_category) -> dict[str, Category]:
    return {
        "c1": party_category,
        "c0": Category(
            title="忘年会",
            groups=(make_group("2.1.全体歓談", "2.1.X_001.jpg", "2.1.1_002.jpg"),),
        ),
    }
