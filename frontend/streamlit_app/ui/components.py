# frontend/streamlit_app/ui/components.py
# SPDX-License-Identifier: Apache-2.0
"""Reusable Streamlit UI components for the notes board.

This module keeps presentation helpers small and side-effect free where
possible so they can be unit-tested without a running Streamlit server.

Currently provided:
  • short_addr(): elided account address for headers and the sidebar.
  • format_relative_date() / format_full_date(): note timestamps.
  • truncate_content(): card preview text.
  • note_card(): one note rendered as a bordered card with open/delete actions.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone, tzinfo

import streamlit as st

from core.constants import PREVIEW_MAX_CHARS
from core.models import Note
from ui.keys import k

# How many characters to show from the start/end of an address when eliding.
_ADDR_PREFIX = 6
_ADDR_SUFFIX = 4


def short_addr(
    addr: str | None, *, prefix: int = _ADDR_PREFIX, suffix: int = _ADDR_SUFFIX
) -> str:
    """Return a human-friendly shortened form of an account address.

    Examples:
      "ABCDEF…WXYZ" for a typical Algorand 58-char address.

    Args:
      addr: Full address string.
      prefix: Number of leading characters to retain.
      suffix: Number of trailing characters to retain.

    Returns:
      A shortened representation. If the address is already short, it is
      returned unchanged. None/empty inputs yield "—".
    """
    if not addr:
        return "—"
    if len(addr) <= prefix + suffix + 1:
        return addr
    return f"{addr[:prefix]}…{addr[-suffix:]}"


def format_relative_date(
    timestamp: int, now: datetime | None = None, tz: tzinfo | None = None
) -> str:
    """Describe a note timestamp relative to `now` (UTC).

    "Just now" under a minute, then minutes, hours and days up to a week.
    Older notes show "Mon D" in `tz` (the local timezone of the process when None),
    with the year appended when it differs from the current one.
    """
    now = now or datetime.now(timezone.utc)
    date = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
    seconds = (now - date).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    local, local_now = date.astimezone(tz), now.astimezone(tz)
    label = f"{local:%b} {local.day}"
    return label if local.year == local_now.year else f"{label}, {local.year}"


def format_full_date(timestamp: int) -> str:
    """Absolute UTC timestamp for the detail view."""
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S UTC"
    )


def truncate_content(text: str, max_length: int = PREVIEW_MAX_CHARS) -> str:
    """Cut `text` to `max_length` characters, appending "..." when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def note_card(
    note: Note,
    *,
    on_open: Callable[[int], None],
    on_delete: Callable[[int], None],
    disabled: bool = False,
) -> None:
    """Render a note card. Buttons report the note's snapshot position."""
    with st.container(border=True):
        st.markdown(f"**{note.title}**")
        st.caption(format_relative_date(note.timestamp))
        st.write(truncate_content(note.content))
        open_col, delete_col = st.columns(2)
        with open_col:
            st.button(
                "Open",
                key=k("card", f"open_{note.position}"),
                on_click=on_open,
                args=(note.position,),
                use_container_width=True,
            )
        with delete_col:
            st.button(
                "Delete",
                key=k("card", f"delete_{note.position}"),
                on_click=on_delete,
                args=(note.position,),
                disabled=disabled,
                use_container_width=True,
            )
