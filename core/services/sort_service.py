"""Display ordering for `PhotoGroup` collections.

Groups are ordered by the numeric group id embedded in their name. The
underlying sequence is never reordered; callers receive a permutation of
indices so click handling can still resolve back to the original group.
"""

from __future__ import annotations

from collections.abc import Sequence

from core.models import PhotoGroup
from core.services.identifier_parser import parse_group_order_key


def order_groups(groups: Sequence[PhotoGroup]) -> list[int]:
    """Return group indices sorted by group id.

    Groups sharing a key (including every unparseable name) keep their
    original relative order.
    """
    keys = [parse_group_order_key(g.name if g is not None else None) for g in groups]
    # sorted() is stable
    return sorted(range(len(groups)), key=lambda idx: keys[idx])
