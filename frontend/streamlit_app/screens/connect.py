# frontend/streamlit_app/screens/connect.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit screen: Connect

Landing screen shown while no account is connected. It explains what the app
does and points the user at the sidebar signer. Connecting itself happens in
`ui.sidebar`, so this screen performs no remote call.
"""

from typing import Final

import streamlit as st

from core.models import ViewMode
from ui.layout import note_slots

FEATURES: Final[list[tuple[str, str, str]]] = [
    ("🔒", "Secure & Decentralized", "Your notes live in an Algorand application, owned by your account."),
    ("📝", "Markdown Preview", "Headings, bold, italic and inline code render in the preview."),
    ("🌐", "Ledger Native", "Every create and delete is a confirmed transaction you signed."),
    ("✨", "Search & Sort", "Filter by title or content and order by date or title."),
]


def render(ctx: dict) -> None:
    """Render the landing screen."""
    st.header("Ledger Notes")
    st.write(
        "Your decentralized note-taking app. Paste a **TestNet** account mnemonic in "
        "the sidebar and press **Connect Wallet** to load your notes."
    )
    if not ctx["settings"].NOTES_APP_ID:
        st.warning("NOTES_APP_ID is not set; connecting will fail until it is configured.")

    for slot, (icon, title, text) in zip(note_slots(len(FEATURES), ViewMode.GRID), FEATURES):
        with slot:
            st.markdown(f"### {icon} {title}")
            st.caption(text)
