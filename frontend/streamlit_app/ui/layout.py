# frontend/streamlit_app/ui/layout.py
# SPDX-License-Identifier: Apache-2.0
"""Layout helpers for the Ledger Notes Streamlit app.

- `configure_page`: consistent browser title, wide layout and in-app title.
- `note_slots`: containers for the note cards, either a grid of columns or a
  vertical list depending on the board's view mode.

Call `configure_page()` exactly once at the top of the entrypoint; Streamlit
requires `st.set_page_config` before any other element.
"""

from __future__ import annotations

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

from core.constants import GRID_COLUMNS
from core.models import ViewMode


def configure_page(title: str) -> None:
    """Configure global Streamlit page options and render the main title."""
    st.set_page_config(page_title=title, page_icon="📝", layout="wide")
    st.title(f"📝 {title}")


def note_slots(count: int, mode: ViewMode) -> list[DeltaGenerator]:
    """Return one container per note, laid out for `mode`.

    In list mode each note gets its own stacked container. In grid mode the
    notes are dealt row by row into `GRID_COLUMNS` columns, so slot `i` lives
    in column `i % GRID_COLUMNS`.

    Args:
      count: Number of notes to place.
      mode: `ViewMode.GRID` or `ViewMode.LIST`.
    """
    if count <= 0:
        return []
    if ViewMode(mode) is ViewMode.LIST:
        return [st.container() for _ in range(count)]

    columns = st.columns(GRID_COLUMNS)
    return [columns[i % GRID_COLUMNS].container() for i in range(count)]
