# frontend/streamlit_app/services/session.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Session controller: account lifecycle plus the UI state of one user session.

State machine
-------------
    DISCONNECTED → CONNECTING → CONNECTED → DISCONNECTED

There is no reconnecting state. Losing the signer while connected keeps the
session connected; the next remote call fails and reports its own error.

Ownership
---------
- Account, contract binding and `NoteRepository`: built on connect, rebuilt
  on account change, discarded on disconnect. Never shared across accounts.
- `ViewState` (search + sort) and `PanelState` (layout, editor, selection):
  replaced by value, reset to defaults on disconnect.

`disconnect()` is pure teardown and never touches the network.
"""

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from algosdk.atomic_transaction_composer import TransactionSigner

from core.errors import BindingError, LoadError, WalletConnectionError
from core.models import (
    Note,
    PanelState,
    SessionStatus,
    SortKey,
    ViewMode,
    ViewState,
)
from services.algorand import bind, load_contract_abi
from services.note_view import project
from services.repository import NoteRepository, NoteStore
from services.wallet import AccountProvider, MnemonicAccountProvider

log = logging.getLogger(__name__)

#: Builds the contract binding for (account, signer); raises BindingError.
Binder = Callable[[str, TransactionSigner], NoteStore]


class SessionController:
    """Owns the account lifecycle and per-session UI state."""

    def __init__(
        self,
        provider: AccountProvider,
        binder: Binder,
        *,
        repository_factory: Callable[[NoteStore], NoteRepository] = NoteRepository,
    ) -> None:
        self._provider = provider
        self._binder = binder
        self._repository_factory = repository_factory
        self.status = SessionStatus.DISCONNECTED
        self.account: str | None = None
        self.binding: NoteStore | None = None
        self.repository: NoteRepository | None = None
        self.view_state = ViewState()
        self.panel = PanelState()

    @property
    def connected(self) -> bool:
        return self.status is SessionStatus.CONNECTED

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> NoteRepository:
        """Request an account and attach a repository to it.

        Raises:
            WalletConnectionError: no signer, or the request was rejected.
            BindingError: the contract handle could not be built; the
                session is torn down.
        """
        previous = self.status
        self.status = SessionStatus.CONNECTING
        try:
            account_addr = self._provider.request_account()
        except Exception:
            # Any provider failure leaves the session where it was.
            self.status = previous if previous is SessionStatus.CONNECTED else SessionStatus.DISCONNECTED
            log.warning("Wallet connection failed")
            raise
        if previous is SessionStatus.CONNECTED and account_addr == self.account:
            self.status = SessionStatus.CONNECTED
            return self.repository
        return self._attach(account_addr)

    def account_changed(self, account_addr: str | None) -> NoteRepository | None:
        """React to the signer switching accounts (None means it went away)."""
        if not account_addr:
            self.disconnect()
            return None
        if self.connected and account_addr == self.account:
            return self.repository
        self.status = SessionStatus.CONNECTING
        return self._attach(account_addr)

    def disconnect(self) -> None:
        """Drop account, binding, notes and UI state. No remote call."""
        if self.account:
            log.info("Disconnecting %s", self.account)
        self.account = None
        self.binding = None
        self.repository = None
        self.view_state = ViewState()
        self.panel = PanelState()
        self.status = SessionStatus.DISCONNECTED

    def _attach(self, account_addr: str) -> NoteRepository:
        # The previous account's state must not leak into the new one.
        self.binding = None
        self.repository = None
        self.panel = dataclasses.replace(self.panel, editor_open=False, selected_position=None)
        try:
            signer = self._provider.signer_for(account_addr)
            binding = self._binder(account_addr, signer)
        except (BindingError, WalletConnectionError) as e:
            log.error("Cannot bind notes contract for %s: %s", account_addr, e)
            self.disconnect()
            raise
        except Exception as e:
            log.error("Cannot bind notes contract for %s: %s", account_addr, e)
            self.disconnect()
            raise BindingError(f"Cannot bind notes contract: {e}") from e
        self.account = account_addr
        self.binding = binding
        self.repository = self._repository_factory(binding)
        self.status = SessionStatus.CONNECTED
        log.info("Connected %s", account_addr)
        try:
            self.repository.load()
        except LoadError:
            # Kept on repository.last_error; the session stays connected.
            log.warning("Initial load for %s failed", account_addr)
        return self.repository

    # ------------------------------------------------------------------
    # View / panel state
    # ------------------------------------------------------------------

    def set_search(self, query: str) -> None:
        self.view_state = dataclasses.replace(self.view_state, search_query=query or "")

    def set_sort(self, key: SortKey | str) -> None:
        self.view_state = dataclasses.replace(self.view_state, sort_key=SortKey(key))

    def set_view_mode(self, mode: ViewMode | str) -> None:
        self.panel = dataclasses.replace(self.panel, view_mode=ViewMode(mode))

    def open_editor(self) -> None:
        self.panel = dataclasses.replace(self.panel, editor_open=True)

    def close_editor(self) -> None:
        self.panel = dataclasses.replace(self.panel, editor_open=False)

    def select(self, position: int) -> None:
        self.panel = dataclasses.replace(self.panel, selected_position=int(position))

    def clear_selection(self) -> None:
        self.panel = dataclasses.replace(self.panel, selected_position=None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def notes(self) -> tuple[Note, ...]:
        return self.repository.notes if self.repository else ()

    def visible_notes(self) -> tuple[Note, ...]:
        """The repository collection filtered and sorted by the current view."""
        return project(self.notes(), self.view_state)

    def selected_note(self) -> Note | None:
        pos = self.panel.selected_position
        if pos is None or self.repository is None:
            return None
        return self.repository.note_at(pos)

    def status_signals(self) -> dict[str, Any]:
        """Loading/error signals for the presentation layer."""
        repo = self.repository
        return dict(
            status=self.status.value,
            account=self.account,
            busy=bool(repo and repo.busy),
            error=repo.last_error if repo else None,
            note_count=len(self.notes()),
        )


def build_session(
    mnemonic_source: Callable[[], str | None],
    client: Any,
    settings: Any,
) -> SessionController:
    """Wire a controller to the mnemonic signer and the configured notes app.

    The ABI is read at bind time so a bad `NOTES_ABI_PATH` surfaces as a
    `BindingError` on connect rather than at import.
    """

    def binder(account_addr: str, signer: TransactionSigner) -> NoteStore:
        return bind(
            account_addr,
            settings.NOTES_APP_ID,
            load_contract_abi(settings.NOTES_ABI_PATH),
            signer,
            client,
            confirmation_rounds=settings.CONFIRMATION_ROUNDS,
        )

    return SessionController(MnemonicAccountProvider(mnemonic_source), binder)
