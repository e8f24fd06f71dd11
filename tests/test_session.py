"""Tests for SessionController lifecycle and UI state ownership."""

import pytest

from conftest import ACCOUNT_A, ACCOUNT_B, FakeProvider, RecordingBinder
from core.errors import BindingError, LoadError, WalletConnectionError
from core.models import PanelState, SessionStatus, SortKey, ViewMode, ViewState
from services.session import SessionController


def test_connect_binds_and_loads(session, binder):
    repo = session.connect()

    assert session.status is SessionStatus.CONNECTED
    assert session.account == ACCOUNT_A
    assert binder.bound == [(ACCOUNT_A, f"signer:{ACCOUNT_A}")]
    assert session.repository is repo
    assert [n.title for n in repo.notes] == ["A"]


def test_connect_without_signer(no_wallet, binder):
    session = SessionController(no_wallet, binder)

    with pytest.raises(WalletConnectionError) as exc:
        session.connect()

    assert isinstance(exc.value, ConnectionError)
    assert session.status is SessionStatus.DISCONNECTED
    assert session.repository is None
    assert binder.bound == []
    assert no_wallet.requests == 1


def test_unexpected_provider_failure_restores_status(binder):
    session = SessionController(FakeProvider(error=RuntimeError("bridge crashed")), binder)

    with pytest.raises(RuntimeError):
        session.connect()

    assert session.status is SessionStatus.DISCONNECTED
    assert session.repository is None


def test_unexpected_provider_failure_keeps_connected_session(session, provider):
    repo = session.connect()
    provider.error = RuntimeError("bridge crashed")

    with pytest.raises(RuntimeError):
        session.connect()

    assert session.status is SessionStatus.CONNECTED
    assert session.repository is repo


def test_binding_error_forces_disconnect(provider):
    binder = RecordingBinder(error=BindingError("application 0 not configured"))
    session = SessionController(provider, binder)

    with pytest.raises(BindingError):
        session.connect()

    assert session.status is SessionStatus.DISCONNECTED
    assert session.account is None
    assert session.binding is None


def test_unexpected_binder_failure_becomes_binding_error(provider):
    session = SessionController(provider, RecordingBinder(error=RuntimeError("boom")))

    with pytest.raises(BindingError):
        session.connect()

    assert session.status is SessionStatus.DISCONNECTED


def test_initial_load_failure_keeps_session_connected(provider):
    class FailingBinder(RecordingBinder):
        def __call__(self, account_addr, signer):
            store = super().__call__(account_addr, signer)
            store.fail_list = True
            return store

    session = SessionController(provider, FailingBinder([("A", "hi", 1000)]))

    repo = session.connect()

    assert session.connected
    assert repo.notes == ()
    assert isinstance(repo.last_error, LoadError)
    assert session.status_signals()["error"] is repo.last_error


def test_disconnect_is_pure_teardown(session, binder):
    session.connect()
    store = binder.stores[ACCOUNT_A]
    calls_before = list(store.calls)
    session.set_search("hi")
    session.set_sort("title")
    session.set_view_mode("list")
    session.open_editor()
    session.select(0)

    session.disconnect()

    assert store.calls == calls_before
    assert session.status is SessionStatus.DISCONNECTED
    assert session.account is None
    assert session.binding is None
    assert session.repository is None
    assert session.view_state == ViewState()
    assert session.panel == PanelState()
    assert session.notes() == ()


def test_reconnect_same_account_keeps_repository(session, binder):
    repo = session.connect()

    assert session.connect() is repo
    assert len(binder.bound) == 1


def test_failed_reconnect_keeps_connected_session(binder):
    provider = FakeProvider()
    session = SessionController(provider, binder)
    repo = session.connect()

    provider.error = WalletConnectionError("user rejected")
    with pytest.raises(WalletConnectionError):
        session.connect()

    assert session.connected
    assert session.repository is repo


def test_account_change_rebuilds_binding(session, binder):
    first = session.connect()
    session.select(0)

    second = session.account_changed(ACCOUNT_B)

    assert second is not first
    assert session.account == ACCOUNT_B
    assert session.binding is binder.stores[ACCOUNT_B]
    assert binder.stores[ACCOUNT_A] is not binder.stores[ACCOUNT_B]
    assert session.panel.selected_position is None


def test_account_change_to_none_disconnects(session):
    session.connect()

    assert session.account_changed(None) is None
    assert session.status is SessionStatus.DISCONNECTED


def test_visible_notes_follow_view_state(provider):
    binder = RecordingBinder([("A", "hi", 1000), ("B", "yo", 2000), ("", "gone", 3000)])
    session = SessionController(provider, binder)
    session.connect()

    assert [n.title for n in session.visible_notes()] == ["B", "A"]

    session.set_sort(SortKey.OLDEST)
    assert [n.title for n in session.visible_notes()] == ["A", "B"]

    session.set_search("YO")
    assert [n.title for n in session.visible_notes()] == ["B"]


def test_panel_state_transitions(session):
    session.connect()

    session.set_view_mode(ViewMode.LIST)
    session.open_editor()
    assert session.panel == PanelState(view_mode=ViewMode.LIST, editor_open=True)

    session.close_editor()
    session.select(0)
    assert session.selected_note().title == "A"

    session.clear_selection()
    assert session.selected_note() is None


def test_status_signals_when_disconnected(session):
    signals = session.status_signals()

    assert signals == dict(
        status="disconnected", account=None, busy=False, error=None, note_count=0
    )
