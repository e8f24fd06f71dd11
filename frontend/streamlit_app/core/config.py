# frontend/streamlit_app/core/config.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Centralized, immutable application configuration for the Ledger Notes client.

This module defines a frozen `Settings` dataclass whose fields are populated
from environment variables (loaded via python-dotenv if a `.env` file is
present). The resulting singleton `settings` is imported by the Streamlit app
and the CLI so that no other module reads `os.getenv` directly.

Design goals
------------
- **Single source of truth**: the algod endpoint, the notes application id,
  the ABI descriptor location and the confirmation window all live here.
- **Immutability**: `@dataclass(frozen=True)` prevents accidental mutation at
  runtime. Changes require process restart (or re-instantiation in tests).
- **Fast import**: Only minimal work at import time (dotenv load + dataclass
  construction). No network calls here.

Security notes
--------------
- `NOTES_MNEMONIC` is a convenience for TestNet demos only. It pre-fills the
  signer field of the sidebar and the CLI. Never commit a real mnemonic.

Testing
-------
- Set environment variables **before** importing this module, or build a
  fresh `Settings()` after monkeypatching the environment:
      >>> import importlib, os
      >>> os.environ["NOTES_APP_ID"] = "1234"
      >>> import core.config as cfg
      >>> importlib.reload(cfg)
      >>> assert cfg.settings.NOTES_APP_ID == 1234
"""

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

# `override=False` by default, so pre-set env vars take precedence.
load_dotenv()

#: ARC-4 contract descriptor shipped next to this module.
DEFAULT_ABI_PATH = pathlib.Path(__file__).resolve().parent / "notes_abi.json"


def _env_int(name: str, default: int) -> int:
    """Read an integer env var; blank or malformed values fall back to `default`."""
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Each attribute is populated from the corresponding environment variable;
    when unset, a documented default is used.
    """

    # --- Algod (consensus node) endpoint configuration -----------------------
    ALGOD_URL: str = os.getenv("ALGOD_URL", "https://testnet-api.algonode.cloud")
    # Public providers accept any token; the placeholder satisfies the SDK.
    ALGOD_TOKEN: str = os.getenv("ALGOD_TOKEN", "a" * 64)

    # --- Notes application ----------------------------------------------------
    # Application id of the deployed notes contract. 0 means "not configured".
    NOTES_APP_ID: int = _env_int("NOTES_APP_ID", 0)
    # Path to the ARC-4 JSON descriptor of the notes contract.
    NOTES_ABI_PATH: str = os.getenv("NOTES_ABI_PATH", str(DEFAULT_ABI_PATH))

    # --- Signer ---------------------------------------------------------------
    # Optional TestNet mnemonic used to pre-fill the signer input.
    NOTES_MNEMONIC: str = os.getenv("NOTES_MNEMONIC", "")

    # --- Transactions ----------------------------------------------------------
    # Rounds to wait for a submitted transaction before giving up.
    CONFIRMATION_ROUNDS: int = _env_int("CONFIRMATION_ROUNDS", 4)

    # --- Logging ----------------------------------------------------------------
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# Singleton settings object imported by consumers.
settings = Settings()
