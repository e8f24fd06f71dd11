# frontend/streamlit_app/screens/notes.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit screen: Notes board

Purpose
-------
Everything the connected user does with their notes:
  • Search, sort and switch between grid and list layout
  • Create a note in the editor (with markdown preview)
  • Open a note to read it in full
  • Delete a note after an explicit yes/no confirmation
  • Reload the collection from the ledger

Design Notes
------------
- The screen holds no business logic. Widget values are pushed into the
  `SessionController` (ViewState/PanelState) and the cards are rendered from
  `session.visible_notes()`.
- Mutations run in button callbacks. Their outcome is stored as a one-shot
  flash message and shown on the rerun that follows, after the repository has
  already reloaded.
- Delete buttons only record the position to delete. The transaction is
  submitted from the confirmation prompt, and the repository re-checks that
  the confirmed position is the one it is deleting.

Error Handling
--------------
Every `NotesError` is surfaced with `st.error()`; nothing is retried.
"""

import streamlit as st

from core.constants import DELETE_PROMPT, SORT_LABELS, VIEW_MODE_LABELS, sort_label
from core.errors import LoadError, NotesError
from core.models import ViewMode
from core.state import (
    EDITOR_CONTENT_KEY,
    EDITOR_TITLE_KEY,
    FLASH_KEY,
    PENDING_DELETE_KEY,
    SEARCH_KEY,
    SORT_KEY,
    VIEW_MODE_KEY,
)
from services.session import SessionController
from ui.components import format_full_date, note_card, short_addr
from ui.keys import k
from ui.layout import note_slots
from ui.markdown import render_markdown

# ─────────────────────────────────────────────────────────────────────────────
# Callbacks
# ─────────────────────────────────────────────────────────────────────────────


def _flash(level: str, message: str) -> None:
    st.session_state[FLASH_KEY] = (level, message)


def _on_save(session: SessionController) -> None:
    ss = st.session_state
    try:
        session.repository.add(
            ss.get(EDITOR_TITLE_KEY, ""), ss.get(EDITOR_CONTENT_KEY, "")
        )
    except NotesError as e:
        _flash("error", str(e))
        return
    ss[EDITOR_TITLE_KEY] = ""
    ss[EDITOR_CONTENT_KEY] = ""
    session.close_editor()
    _flash("success", "Note saved on-chain.")


def _on_request_delete(position: int) -> None:
    st.session_state[PENDING_DELETE_KEY] = position


def _on_confirm_delete(session: SessionController, position: int) -> None:
    ss = st.session_state
    try:
        deleted = session.repository.delete(
            position, confirm=lambda note: ss.get(PENDING_DELETE_KEY) == note.position
        )
    except NotesError as e:
        _flash("error", str(e))
        ss[PENDING_DELETE_KEY] = None
        return
    ss[PENDING_DELETE_KEY] = None
    if deleted:
        session.clear_selection()
        _flash("success", "Note deleted.")


def _on_cancel_delete() -> None:
    st.session_state[PENDING_DELETE_KEY] = None


def _on_reload(session: SessionController) -> None:
    try:
        session.repository.load()
    except LoadError as e:
        _flash("error", str(e))


# ─────────────────────────────────────────────────────────────────────────────
# Sections
# ─────────────────────────────────────────────────────────────────────────────


def _toolbar(session: SessionController) -> None:
    search_col, sort_col, mode_col, new_col, reload_col = st.columns([4, 2, 2, 1, 1])
    with search_col:
        st.text_input("Search notes...", key=SEARCH_KEY, label_visibility="collapsed",
                      placeholder="Search notes...")
    with sort_col:
        st.selectbox("Sort", list(SORT_LABELS), key=SORT_KEY,
                     format_func=sort_label, label_visibility="collapsed")
    with mode_col:
        st.radio("View", list(VIEW_MODE_LABELS), key=VIEW_MODE_KEY, horizontal=True,
                 format_func=VIEW_MODE_LABELS.get, label_visibility="collapsed")
    with new_col:
        st.button("New Note", key=k("board", "new"), on_click=session.open_editor,
                  use_container_width=True)
    with reload_col:
        st.button("Reload", key=k("board", "reload"), on_click=_on_reload,
                  args=(session,), use_container_width=True)

    ss = st.session_state
    session.set_search(ss[SEARCH_KEY])
    session.set_sort(ss[SORT_KEY])
    session.set_view_mode(ss[VIEW_MODE_KEY])


def _editor(session: SessionController) -> None:
    with st.container(border=True):
        st.subheader("Create New Note")
        # Inputs stay rendered while previewing so Streamlit keeps their state.
        title = st.text_input("Title", key=EDITOR_TITLE_KEY, placeholder="Note title...")
        content = st.text_area("Content", key=EDITOR_CONTENT_KEY, height=240,
                               placeholder="Start writing your note... You can use markdown formatting!")
        if st.toggle("Preview", key=k("editor", "preview")):
            st.markdown(f"### {title}")
            st.markdown(render_markdown(content), unsafe_allow_html=True)
        save_col, cancel_col = st.columns(2)
        with save_col:
            st.button("Save Note", key=k("editor", "save"), type="primary",
                      on_click=_on_save, args=(session,), use_container_width=True)
        with cancel_col:
            st.button("Cancel", key=k("editor", "cancel"), on_click=session.close_editor,
                      use_container_width=True)


def _delete_prompt(session: SessionController, position: int) -> None:
    note = session.repository.note_at(position)
    if note is None:
        st.session_state[PENDING_DELETE_KEY] = None
        return
    st.warning(f"{DELETE_PROMPT}  \n**{note.title}**")
    yes_col, no_col = st.columns(2)
    with yes_col:
        st.button("Yes, delete", key=k("board", "confirm_delete"), type="primary",
                  on_click=_on_confirm_delete, args=(session, position),
                  use_container_width=True)
    with no_col:
        st.button("Cancel", key=k("board", "cancel_delete"), on_click=_on_cancel_delete,
                  use_container_width=True)


def _detail(session: SessionController) -> None:
    note = session.selected_note()
    if note is None:
        return
    with st.container(border=True):
        st.subheader(note.title)
        st.caption(format_full_date(note.timestamp))
        st.markdown(render_markdown(note.content), unsafe_allow_html=True)
        close_col, delete_col = st.columns(2)
        with close_col:
            st.button("Close", key=k("detail", "close"), on_click=session.clear_selection,
                      use_container_width=True)
        with delete_col:
            st.button("Delete Note", key=k("detail", "delete"), on_click=_on_request_delete,
                      args=(note.position,),
                      disabled=session.repository.busy, use_container_width=True)


def _board(session: SessionController) -> None:
    notes = session.visible_notes()
    if not notes:
        searching = bool(session.view_state.search_query)
        st.markdown("## 📝")
        st.subheader("No notes found" if searching else "No notes yet")
        st.caption("Try adjusting your search query" if searching
                   else "Create your first note to get started")
        return

    busy = session.repository.busy
    slots = note_slots(len(notes), session.panel.view_mode)
    for slot, note in zip(slots, notes):
        with slot:
            note_card(note, on_open=session.select, on_delete=_on_request_delete,
                      disabled=busy)


def render(ctx: dict) -> None:
    """Render the notes board for the connected account."""
    session: SessionController = ctx["session"]
    ss = st.session_state

    st.header(f"My Notes · `{short_addr(session.account)}`")

    flash = ss.get(FLASH_KEY)
    if flash:
        level, message = flash
        (st.success if level == "success" else st.error)(message)
        ss[FLASH_KEY] = None

    error = session.repository.last_error
    if isinstance(error, LoadError):
        st.error(f"{error} Showing the last loaded notes.")

    _toolbar(session)

    if session.panel.editor_open:
        _editor(session)

    pending = ss.get(PENDING_DELETE_KEY)
    if pending is not None:
        _delete_prompt(session, int(pending))

    _detail(session)

    if session.panel.view_mode is ViewMode.LIST:
        st.caption(f"{len(session.visible_notes())} of {len(session.notes())} notes")
    _board(session)
