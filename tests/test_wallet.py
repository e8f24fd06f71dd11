"""Tests for the mnemonic-backed account provider."""

import pytest
from algosdk import account, mnemonic
from algosdk.atomic_transaction_composer import AccountTransactionSigner

from core.errors import WalletConnectionError
from services.wallet import MnemonicAccountProvider


@pytest.fixture
def keypair():
    sk, addr = account.generate_account()
    return mnemonic.from_private_key(sk), addr


def test_request_account_derives_address(keypair):
    mn, addr = keypair
    provider = MnemonicAccountProvider(lambda: mn)

    assert provider.request_account() == addr


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_mnemonic_means_no_signer(value):
    provider = MnemonicAccountProvider(lambda: value)

    with pytest.raises(WalletConnectionError, match="No signer"):
        provider.request_account()


def test_invalid_mnemonic_is_rejected():
    provider = MnemonicAccountProvider(lambda: "not a real mnemonic at all")

    with pytest.raises(WalletConnectionError, match="invalid mnemonic"):
        provider.request_account()


def test_signer_for_matching_account(keypair):
    mn, addr = keypair
    provider = MnemonicAccountProvider(lambda: mn)

    signer = provider.signer_for(addr)

    assert isinstance(signer, AccountTransactionSigner)


def test_signer_for_other_account_fails(keypair):
    mn, _ = keypair
    _, other = account.generate_account()
    provider = MnemonicAccountProvider(lambda: mn)

    with pytest.raises(WalletConnectionError):
        provider.signer_for(other)


def test_mnemonic_is_read_on_every_request(keypair):
    mn, addr = keypair
    holder = {"mn": mn}
    provider = MnemonicAccountProvider(lambda: holder["mn"])
    assert provider.request_account() == addr

    holder["mn"] = ""
    with pytest.raises(WalletConnectionError):
        provider.request_account()
