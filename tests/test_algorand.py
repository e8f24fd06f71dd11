"""Tests for the Algorand contract binding that need no network."""

import json

import pytest
from algosdk import account, mnemonic
from algosdk.atomic_transaction_composer import AccountTransactionSigner

import services.algorand as algorand
from core.config import DEFAULT_ABI_PATH
from core.constants import REQUIRED_METHODS
from core.errors import BindingError, ChainError
from core.models import TransactionHandle, TxState
from services.algorand import (
    AlgorandNoteContract,
    addr_from_mn,
    bind,
    fmt_algos,
    load_contract_abi,
    missing_methods,
)


class FakeAlgod:
    def __init__(self, app_error=None):
        self.app_error = app_error
        self.app_lookups = []

    def application_info(self, app_id):
        self.app_lookups.append(app_id)
        if self.app_error is not None:
            raise self.app_error
        return {"id": app_id, "params": {}}


@pytest.fixture
def keypair():
    return account.generate_account()


@pytest.fixture
def contract():
    return load_contract_abi(DEFAULT_ABI_PATH)


def test_bundled_abi_defines_required_methods(contract):
    assert missing_methods(contract) == []
    assert {m.name for m in contract.methods} >= set(REQUIRED_METHODS)
    listing = contract.get_method_by_name("get_my_notes")
    assert str(listing.returns.type) == "(string,string,uint64)[]"


def test_load_missing_abi_file(tmp_path):
    with pytest.raises(BindingError):
        load_contract_abi(tmp_path / "absent.json")


def test_load_malformed_abi(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    with pytest.raises(BindingError):
        load_contract_abi(path)


def test_incomplete_abi_reports_missing_methods(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(
        json.dumps(
            {
                "name": "Partial",
                "methods": [
                    {"name": "add_note", "args": [
                        {"type": "string", "name": "title"},
                        {"type": "string", "name": "content"},
                    ], "returns": {"type": "void"}},
                ],
            }
        )
    )

    partial = load_contract_abi(path)

    assert missing_methods(partial) == ["delete_note", "get_my_notes"]


def test_bind_requires_configured_app(contract, keypair):
    sk, addr = keypair
    client = FakeAlgod()

    with pytest.raises(BindingError, match="NOTES_APP_ID"):
        bind(addr, 0, contract, AccountTransactionSigner(sk), client)

    assert client.app_lookups == []


def test_bind_rejects_invalid_address(contract, keypair):
    sk, _ = keypair

    with pytest.raises(BindingError, match="Invalid"):
        bind("not-an-address", 77, contract, AccountTransactionSigner(sk), FakeAlgod())


def test_bind_fails_when_app_unreachable(contract, keypair):
    sk, addr = keypair
    client = FakeAlgod(app_error=RuntimeError("application does not exist"))

    with pytest.raises(BindingError, match="not reachable"):
        bind(addr, 77, contract, AccountTransactionSigner(sk), client)


def test_bind_success(contract, keypair):
    sk, addr = keypair
    client = FakeAlgod()

    binding = bind(addr, 77, contract, AccountTransactionSigner(sk), client)

    assert binding.account == addr
    assert binding.app_id == 77
    assert client.app_lookups == [77]


def _binding(contract, keypair, rounds=4):
    sk, addr = keypair
    return AlgorandNoteContract(
        FakeAlgod(),
        app_id=77,
        contract=contract,
        sender=addr,
        signer=AccountTransactionSigner(sk),
        confirmation_rounds=rounds,
    )


def test_await_confirmation_marks_confirmed(monkeypatch, contract, keypair):
    seen = []

    def fake_wait(client, txid, rounds):
        seen.append((txid, rounds))
        return {"confirmed-round": 1234}

    monkeypatch.setattr(algorand, "wait_for_confirmation", fake_wait)
    binding = _binding(contract, keypair, rounds=6)
    handle = TransactionHandle(txid="TXID", action="add_note")

    assert binding.await_confirmation(handle) is handle

    assert seen == [("TXID", 6)]
    assert handle.state is TxState.CONFIRMED
    assert handle.confirmed_round == 1234


def test_await_confirmation_failure_raises_chain_error(monkeypatch, contract, keypair):
    def fake_wait(client, txid, rounds):
        raise Exception(f"Transaction not confirmed after {rounds} rounds")

    monkeypatch.setattr(algorand, "wait_for_confirmation", fake_wait)
    binding = _binding(contract, keypair)
    handle = TransactionHandle(txid="TXID", action="delete_note")

    with pytest.raises(ChainError):
        binding.await_confirmation(handle)

    assert handle.state is TxState.FAILED
    assert "not confirmed" in handle.error


def test_addr_from_mn(keypair):
    sk, addr = keypair

    assert addr_from_mn(mnemonic.from_private_key(sk)) == addr
    assert addr_from_mn("") is None
    assert addr_from_mn("garbage words") is None


def test_fmt_algos():
    assert fmt_algos(1_500_000) == "1.500000 ALGO"
