# frontend/streamlit_app/ui/sidebar.py
# SPDX-License-Identifier: Apache-2.0
"""Sidebar composition for the Ledger Notes app.

The sidebar is the signer bridge of the UI: it holds the account mnemonic,
the Connect/Disconnect actions and the live account status. It also owns the
per-browser-session `SessionController` stored in `st.session_state`.

Security & Privacy
------------------
- **TestNet only.** The mnemonic is a password field whose value lives in the
  Streamlit process memory for the lifetime of the session. It is read by the
  account provider on demand and never logged.

Behavior
--------
- Connect errors are shown inline with `st.sidebar.error` and are not retried.
- Disconnect runs as a button callback, before any board widget is built, so
  the search/sort widgets can be reset to their defaults in the same rerun.
- Balance lookups that fail degrade to a warning indicator.

Returns
-------
`render_sidebar_and_status()` returns a context dictionary:
- `settings`: the loaded settings dataclass instance.
- `session`: the `SessionController` for this browser session.
- `account`: the connected address or `None`.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from core.clients import get_algod
from core.config import settings
from core.errors import NotesError
from core.state import SESSION_KEY, ensure_defaults, reset_view_keys
from services.algorand import algo_balance, fmt_algos
from services.session import SessionController, build_session
from ui.components import short_addr
from ui.keys import k

MNEMONIC_KEY = k("sidebar", "mnemonic")


def get_session() -> SessionController:
    """Return this browser session's controller, creating it on first use."""
    ss = st.session_state
    if SESSION_KEY not in ss:
        ss[SESSION_KEY] = build_session(lambda: ss.get(MNEMONIC_KEY), get_algod(), settings)
    return ss[SESSION_KEY]


def _on_disconnect() -> None:
    get_session().disconnect()
    reset_view_keys()


def _account_row(addr: str | None) -> None:
    """Render the connected account with its live balance."""
    if not addr:
        st.sidebar.write("**Account**: —")
        return
    try:
        bal = algo_balance(get_algod(), addr)
        st.sidebar.write(f"**Account**  `{short_addr(addr)}`  ✅ {fmt_algos(bal)}")
    except Exception:
        st.sidebar.write(f"**Account**  `{short_addr(addr)}`  ⚠️ n/a")


def render_sidebar_and_status() -> dict[str, Any]:
    """Render the sidebar and return a context dict for page use."""
    ensure_defaults()
    session = get_session()

    st.sidebar.header("Wallet (TestNet only)")
    st.sidebar.text_input(
        "Account mnemonic",
        value=settings.NOTES_MNEMONIC,
        type="password",
        key=MNEMONIC_KEY,
        disabled=session.connected,
    )

    if session.connected:
        st.sidebar.button(
            "Disconnect",
            key=k("sidebar", "disconnect"),
            on_click=_on_disconnect,
            use_container_width=True,
        )
    elif st.sidebar.button(
        "Connect Wallet", key=k("sidebar", "connect"), use_container_width=True
    ):
        try:
            session.connect()
        except NotesError as e:
            st.sidebar.error(f"Failed to connect wallet: {e}")

    st.sidebar.markdown("### Status")
    _account_row(session.account)
    signals = session.status_signals()
    st.sidebar.markdown(
        f"Session: `{signals['status']}`  \n"
        f"Notes App ID: `{settings.NOTES_APP_ID}`  \n"
        f"Notes loaded: `{signals['note_count']}`"
    )
    st.sidebar.markdown("[TestNet Faucet](https://bank.testnet.algorand.network/)")

    return dict(settings=settings, session=session, account=session.account)
