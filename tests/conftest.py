"""Shared fakes for the notes core tests.

`FakeStore` behaves like the notes contract: notes are a list, a create
appends with the next timestamp, a delete pops the index (later notes shift),
and changes only become visible once the transaction is confirmed.
"""

from __future__ import annotations

import pytest

from core.errors import ChainError, WalletConnectionError
from core.models import TransactionHandle
from services.session import SessionController

ACCOUNT_A = "A" * 58
ACCOUNT_B = "B" * 58


class FakeStore:
    def __init__(self, notes=None, account=ACCOUNT_A):
        self.account = account
        self.remote = [tuple(n) for n in (notes or [])]
        self.calls = []
        self.next_timestamp = 2000
        self.fail_list = False
        self.fail_submit = False
        self.fail_confirm = False
        self.before_confirm = None
        self._pending = None

    def list_notes(self):
        self.calls.append("list")
        if self.fail_list:
            raise RuntimeError("node unreachable")
        return list(self.remote)

    def _handle(self, action, apply):
        self._pending = apply
        return TransactionHandle(txid=f"TX{len(self.calls)}", action=action)

    def create_note(self, title, content):
        self.calls.append(("create", title, content))
        if self.fail_submit:
            raise RuntimeError("signer rejected")

        def apply():
            self.remote.append((title, content, self.next_timestamp))
            self.next_timestamp += 1000

        return self._handle("add_note", apply)

    def delete_note(self, position):
        self.calls.append(("delete", position))
        if self.fail_submit:
            raise RuntimeError("signer rejected")
        return self._handle("delete_note", lambda: self.remote.pop(position))

    def await_confirmation(self, handle):
        self.calls.append(("confirm", handle.txid))
        if self.before_confirm is not None:
            self.before_confirm()
        if self.fail_confirm:
            handle.mark_failed("rejected")
            raise ChainError("transaction rejected")
        self._pending()
        handle.mark_confirmed(42)
        return handle

    def remote_calls(self):
        return [c for c in self.calls if c != "list"]


class FakeProvider:
    """Account provider returning a fixed account, or failing like a missing wallet."""

    def __init__(self, account=ACCOUNT_A, error=None):
        self.account = account
        self.error = error
        self.requests = 0

    def request_account(self):
        self.requests += 1
        if self.error is not None:
            raise self.error
        return self.account

    def signer_for(self, account_addr):
        return f"signer:{account_addr}"


class RecordingBinder:
    """Binder producing one FakeStore per account and remembering them."""

    def __init__(self, notes=None, error=None):
        self.notes = notes or []
        self.error = error
        self.stores = {}
        self.bound = []

    def __call__(self, account_addr, signer):
        self.bound.append((account_addr, signer))
        if self.error is not None:
            raise self.error
        store = self.stores.get(account_addr)
        if store is None:
            store = FakeStore(self.notes, account=account_addr)
            self.stores[account_addr] = store
        return store


@pytest.fixture
def store():
    return FakeStore([("A", "hi", 1000)])


@pytest.fixture
def binder():
    return RecordingBinder([("A", "hi", 1000)])


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def session(provider, binder):
    return SessionController(provider, binder)


@pytest.fixture
def no_wallet():
    return FakeProvider(error=WalletConnectionError("No signer available"))
