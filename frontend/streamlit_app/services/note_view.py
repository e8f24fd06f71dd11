# frontend/streamlit_app/services/note_view.py
# SPDX-License-Identifier: Apache-2.0
"""Filtered and sorted projection of a note collection.

`project` is pure: it never mutates its inputs and always returns a new tuple,
so identical `(collection, view_state)` pairs give identical results.
"""

from __future__ import annotations

import locale
import logging
import unicodedata
from collections.abc import Iterable

from core.models import Note, SortKey, ViewState

log = logging.getLogger(__name__)


def use_system_collation() -> None:
    """Adopt the user's collation locale for title ordering (entry points only)."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        log.warning("Keeping the C collation locale: %s", e)


def matches(note: Note, query: str) -> bool:
    """True when `note` has a title and `query` is empty or found in title/content."""
    if not note.title:
        return False
    q = query.lower()
    return not q or q in note.title.lower() or q in note.content.lower()


def title_key(title: str) -> tuple[str, str]:
    """Collation key for title order: accents and case are compared last."""
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return locale.strxfrm(base.casefold()), locale.strxfrm(title)


def project(collection: Iterable[Note], view_state: ViewState) -> tuple[Note, ...]:
    """Return the notes of `collection` visible under `view_state`, in display order.

    Sorting is stable, so ties keep their collection order.
    """
    visible = [n for n in collection if matches(n, view_state.search_query)]
    key = SortKey(view_state.sort_key)
    if key is SortKey.NEWEST:
        visible.sort(key=lambda n: n.timestamp, reverse=True)
    elif key is SortKey.OLDEST:
        visible.sort(key=lambda n: n.timestamp)
    else:
        visible.sort(key=lambda n: title_key(n.title))
    return tuple(visible)
