# frontend/streamlit_app/core/constants.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Notes-contract method names and presentation lookup tables.

This module centralizes:
  1) **Contract surface**: the ARC-4 method names the client calls. A binding
     is only built when the ABI descriptor provides every one of them.
  2) **Presentation tables**: sort/view labels shown by the UI and the small
     numeric limits used by note cards.

Constants are typed `Final` to communicate immutability.
"""

from typing import Final

# ---------------------------------------------------------------------------
# Contract surface
# ---------------------------------------------------------------------------

METHOD_ADD_NOTE: Final[str] = "add_note"
METHOD_DELETE_NOTE: Final[str] = "delete_note"
METHOD_GET_MY_NOTES: Final[str] = "get_my_notes"

#: Every method a notes ABI must expose for `bind()` to succeed.
REQUIRED_METHODS: Final[tuple[str, ...]] = (
    METHOD_ADD_NOTE,
    METHOD_DELETE_NOTE,
    METHOD_GET_MY_NOTES,
)

# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------

#: Sort key value → dropdown label. Ordering is the dropdown order.
SORT_LABELS: Final[dict[str, str]] = {
    "newest": "Newest First",
    "oldest": "Oldest First",
    "title": "By Title",
}

#: View mode value → toggle label.
VIEW_MODE_LABELS: Final[dict[str, str]] = {
    "grid": "Grid",
    "list": "List",
}

#: Number of columns used by the grid layout.
GRID_COLUMNS: Final[int] = 3

#: Card previews show at most this many characters of note content.
PREVIEW_MAX_CHARS: Final[int] = 150

#: Shown before a delete is submitted.
DELETE_PROMPT: Final[str] = "Are you sure you want to delete this note?"


def sort_label(key: str) -> str:
    """
    Return the dropdown label for a sort key value.

    Unknown values are returned unchanged so a stale widget value still
    renders something readable.

    Examples:
        >>> sort_label("title")
        'By Title'
        >>> sort_label("mystery")
        'mystery'
    """
    return SORT_LABELS.get(key, key)
