# frontend/streamlit_app/core/state.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Session-scoped widget state helpers for the Ledger Notes Streamlit app.

This module centralizes the **default values** we expect to exist in
`st.session_state` for the widgets of the notes board, and the reset that
`disconnect()` needs so the search box, sort dropdown, editor draft and pending-delete
prompt come back empty for the next account.

The authoritative UI state lives in `SessionController` (ViewState and
PanelState); these keys only back the Streamlit widgets that feed it.

Design notes
------------
- Defaults are primitive and safe to serialize. Never put mnemonics or
  client objects here.
- `ensure_defaults()` is idempotent: existing values are preserved.
- `reset_view_keys()` overwrites the view keys with their defaults.
"""

from collections.abc import Mapping
from typing import Any, Final

import streamlit as st

# Key holding the `SessionController` instance for this browser session.
SESSION_KEY: Final[str] = "NOTES_SESSION"

SEARCH_KEY: Final[str] = "NOTES_SEARCH"
SORT_KEY: Final[str] = "NOTES_SORT"
VIEW_MODE_KEY: Final[str] = "NOTES_VIEW_MODE"
# Position awaiting an explicit yes/no before the delete is submitted.
PENDING_DELETE_KEY: Final[str] = "NOTES_PENDING_DELETE"
# (level, message) shown once on the next render of the board.
FLASH_KEY: Final[str] = "NOTES_FLASH"
# Unsaved editor draft; cleared with the view keys so it never outlives an account.
EDITOR_TITLE_KEY: Final[str] = "NOTES_EDITOR_TITLE"
EDITOR_CONTENT_KEY: Final[str] = "NOTES_EDITOR_CONTENT"

# Canonical set of widget keys and their initial values.
DEFAULTS: Final[Mapping[str, Any]] = {
    SEARCH_KEY: "",
    SORT_KEY: "newest",
    VIEW_MODE_KEY: "grid",
    PENDING_DELETE_KEY: None,
    FLASH_KEY: None,
    EDITOR_TITLE_KEY: "",
    EDITOR_CONTENT_KEY: "",
}

__all__ = [
    "DEFAULTS",
    "EDITOR_CONTENT_KEY",
    "EDITOR_TITLE_KEY",
    "FLASH_KEY",
    "PENDING_DELETE_KEY",
    "SEARCH_KEY",
    "SESSION_KEY",
    "SORT_KEY",
    "VIEW_MODE_KEY",
    "ensure_defaults",
    "reset_view_keys",
]


def ensure_defaults() -> None:
    """Ensure all expected session keys exist with sane defaults.

    Safe to call on every rerun.
    """
    for key, default_value in DEFAULTS.items():
        st.session_state.setdefault(key, default_value)


def reset_view_keys() -> None:
    """Restore every widget key to its default (used on disconnect)."""
    for key, default_value in DEFAULTS.items():
        st.session_state[key] = default_value
