# frontend/streamlit_app/ui/keys.py
# SPDX-License-Identifier: Apache-2.0
"""Namespaced Streamlit widget keys.

Note cards render one "Open" and one "Delete" button per note, and the board,
editor and sidebar all have text inputs. Every widget gets an explicit key
built here so that identical labels never collide and per-widget state stays
stable across reruns.

Usage
-----
    from ui.keys import k

    st.button("Delete", key=k("card", f"delete_{note.position}"))

Conventions
-----------
- `page` is a short, stable namespace ("board", "card", "editor", "sidebar").
- `name` identifies the widget within that namespace. Position-derived names
  are fine because cards are rebuilt after every reload.
"""

from __future__ import annotations


def k(page: str, name: str) -> str:
    """Return a stable, namespaced widget key of the form "<page>:<name>"."""
    return f"{page}:{name}"
