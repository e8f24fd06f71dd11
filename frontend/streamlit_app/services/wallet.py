# frontend/streamlit_app/services/wallet.py
# SPDX-License-Identifier: Apache-2.0
"""Signer bridge between the notes session and whatever holds the keys.

The session only ever talks to an :class:`AccountProvider`: it asks for the
active account and for a signer bound to it. Signing itself is delegated to
``algosdk`` signer objects; nothing here builds or signs transactions.

:class:`MnemonicAccountProvider` is the TestNet-demo implementation: the
mnemonic comes from a callable (the sidebar password field, an env var, a CLI
prompt) and is read fresh on every request, so clearing the field is the same
as unplugging the wallet.

Security
--------
Mnemonics are handled in-memory only and never logged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from algosdk import account, mnemonic
from algosdk.atomic_transaction_composer import (
    AccountTransactionSigner,
    TransactionSigner,
)

from core.errors import WalletConnectionError

log = logging.getLogger(__name__)


class AccountProvider(Protocol):
    """Opaque signer capability used by `SessionController`."""

    def request_account(self) -> str: ...

    def signer_for(self, account_addr: str) -> TransactionSigner: ...


class MnemonicAccountProvider:
    """Account provider backed by a 25-word Algorand mnemonic."""

    def __init__(self, mnemonic_source: Callable[[], str | None]) -> None:
        self._source = mnemonic_source

    def _private_key(self) -> str:
        mn = (self._source() or "").strip()
        if not mn:
            raise WalletConnectionError("No signer available: enter an account mnemonic.")
        try:
            return mnemonic.to_private_key(mn)
        except Exception as e:
            raise WalletConnectionError("Signer rejected the request: invalid mnemonic.") from e

    def request_account(self) -> str:
        addr = account.address_from_private_key(self._private_key())
        log.info("Signer provided account %s…%s", addr[:6], addr[-4:])
        return addr

    def signer_for(self, account_addr: str) -> TransactionSigner:
        sk = self._private_key()
        if account.address_from_private_key(sk) != account_addr:
            raise WalletConnectionError(
                "Signer no longer controls the requested account; reconnect."
            )
        return AccountTransactionSigner(sk)
