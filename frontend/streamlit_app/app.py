# frontend/streamlit_app/app.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

__doc__ = """Ledger Notes — Streamlit client.

This module is the Streamlit entrypoint. It wires up logging, the page
chrome, the sidebar (signer + session) and one of two screens:

  1) Connect  — landing screen while no account is connected.
  2) Notes    — search/sort/create/open/delete for the connected account.

Design notes:
* We import sibling packages (core/, services/, ui/, screens/) by adding this
  directory to sys.path. This avoids requiring an installed package layout
  when launched with `streamlit run`.
* Screen modules render their own UI, must use namespaced widget keys (see
  ui/keys.py) and are side-effect free on import.
* Keep this file intentionally thin. State lives in services/session.py and
  ledger access in services/algorand.py.
"""

# ────────────────────── sys.path bootstrap for local packages ─────────────────
import pathlib
import sys

APP_DIR = pathlib.Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))
# ──────────────────────────────────────────────────────────────────────────────

import logging

from core.config import settings
from screens import connect, notes
from services.note_view import use_system_collation
from ui.layout import configure_page
from ui.sidebar import render_sidebar_and_status

logging.basicConfig(
    level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)-8s: %(message)s"
)
use_system_collation()

configure_page(title="Ledger Notes")

# The sidebar returns a context dict ("ctx") with the settings and the
# per-session controller; it is passed to the screen explicitly.
ctx: dict = render_sidebar_and_status()

if ctx["session"].connected:
    notes.render(ctx)
else:
    connect.render(ctx)
