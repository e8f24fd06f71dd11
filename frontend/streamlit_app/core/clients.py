# frontend/streamlit_app/core/clients.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Client factories for the Algorand node used by the Ledger Notes client.

- `new_algod()` → a fresh `algosdk.v2client.algod.AlgodClient`; used by the
  CLI and by tests that need an uncached instance.
- `get_algod()` → the same client, wrapped with `@st.cache_resource` so the
  Streamlit app keeps a single instance across reruns instead of re-creating
  sockets and TLS sessions on every interaction.

Configuration comes from `core.config.settings`. Tokens are never logged.

Failure behavior:
  * Construction performs no health check; network/auth errors surface when
    the first request is executed and are wrapped by the calling component.
  * If credentials or endpoints change at runtime, clear Streamlit's resource
    cache to force re-creation.
"""

import streamlit as st
from algosdk.v2client import algod

from .config import settings


def new_algod() -> algod.AlgodClient:
    """Construct an Algod client from `settings` (uncached)."""
    return algod.AlgodClient(settings.ALGOD_TOKEN, settings.ALGOD_URL)


@st.cache_resource(show_spinner=False)
def get_algod() -> algod.AlgodClient:
    """
    Construct (once) and return a cached Algod client for the Streamlit app.

    Streamlit:
        `cache_resource` ensures a single instance is reused across reruns.
        Spinner is disabled because construction is fast and synchronous.
    """
    return new_algod()
