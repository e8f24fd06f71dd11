# frontend/streamlit_app/services/algorand.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Algorand service utilities for the Ledger Notes client.

This module centralizes the Algorand helpers the notes core relies on:
  • Address/secret conversions and balance formatting for the sidebar
  • Loading the ARC-4 descriptor of the notes application
  • `bind()` and `AlgorandNoteContract`, the per-account contract binding that
    reads notes (simulated call), submits create/delete calls, and waits for
    their confirmation

Design principles
-----------------
- No hidden side effects; functions do only what they say.
- Reads never cost a fee: `get_my_notes` is executed through algod's
  simulate endpoint, so nothing is committed to the ledger.
- Every ledger failure is re-raised as a typed `core.errors` exception with
  the SDK exception chained.

Notes
-----
Each application call references the box named by the sender's raw 32-byte
address, which is where the notes contract keeps that account's list.
"""

import json
import logging
import pathlib

from algosdk import abi, account, encoding, mnemonic
from algosdk.atomic_transaction_composer import (
    AtomicTransactionComposer,
    TransactionSigner,
)
from algosdk.transaction import wait_for_confirmation
from algosdk.v2client import algod

from core.constants import (
    METHOD_ADD_NOTE,
    METHOD_DELETE_NOTE,
    METHOD_GET_MY_NOTES,
    REQUIRED_METHODS,
)
from core.errors import BindingError, ChainError
from core.models import TransactionHandle

log = logging.getLogger(__name__)

# =============================================================================
# Address & balance utilities
# =============================================================================


def _addr32(addr: str) -> bytes:
    """Decode a bech32 (58-char) Algorand address into 32 raw bytes, with checks."""
    try:
        raw = encoding.decode_address(addr)
    except Exception as e:
        raise ValueError(f"Invalid Algorand address: {addr}") from e
    if len(raw) != 32:
        raise ValueError(f"Address did not decode to 32 bytes: {addr}")
    return raw


def addr_from_mn(mn: str | None) -> str | None:
    """Derive an Algorand address from a 25-word mnemonic (or None on bad input)."""
    if not mn:
        return None
    try:
        return account.address_from_private_key(mnemonic.to_private_key(mn))
    except Exception:
        return None


def algo_balance(c: algod.AlgodClient, addr: str) -> int:
    """Return the microalgo balance for an address."""
    return int(c.account_info(addr)["amount"])


def fmt_algos(micro: int) -> str:
    """Format µAlgos into a human string."""
    return f"{micro / 1_000_000:.6f} ALGO"


# =============================================================================
# Contract descriptor
# =============================================================================


def load_contract_abi(path: str | pathlib.Path) -> abi.Contract:
    """Read an ARC-4 JSON descriptor from disk.

    Raises:
        BindingError: when the file is missing or is not a valid descriptor.
    """
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
        return abi.Contract.undictify(json.loads(text))
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise BindingError(f"Cannot load notes ABI from {path}: {e}") from e


def missing_methods(contract: abi.Contract) -> list[str]:
    """Return the required notes methods the descriptor does not define."""
    names = {m.name for m in contract.methods}
    return [name for name in REQUIRED_METHODS if name not in names]


# =============================================================================
# Contract binding
# =============================================================================


class AlgorandNoteContract:
    """Notes application bound to one account and its signer.

    Never shared across accounts; the session builds a new one per account.
    """

    def __init__(
        self,
        client: algod.AlgodClient,
        *,
        app_id: int,
        contract: abi.Contract,
        sender: str,
        signer: TransactionSigner,
        confirmation_rounds: int = 4,
    ) -> None:
        self._client = client
        self._contract = contract
        self._signer = signer
        self._rounds = int(confirmation_rounds)
        self.app_id = int(app_id)
        self.account = sender
        self._box = _addr32(sender)

    def _composer(self, method_name: str, args: list) -> AtomicTransactionComposer:
        atc = AtomicTransactionComposer()
        atc.add_method_call(
            app_id=self.app_id,
            method=self._contract.get_method_by_name(method_name),
            sender=self.account,
            sp=self._client.suggested_params(),
            signer=self._signer,
            method_args=args,
            boxes=[(self.app_id, self._box)],
        )
        return atc

    def list_notes(self) -> list:
        """Return the account's notes as `(title, content, timestamp)` tuples."""
        resp = self._composer(METHOD_GET_MY_NOTES, []).simulate(self._client)
        if resp.failure_message:
            raise ChainError(f"{METHOD_GET_MY_NOTES} failed: {resp.failure_message}")
        result = resp.abi_results[0]
        if result.decode_error:
            raise ChainError(f"Undecodable {METHOD_GET_MY_NOTES} result") from result.decode_error
        return list(result.return_value or [])

    def _submit(self, method_name: str, args: list) -> TransactionHandle:
        txids = self._composer(method_name, args).submit(self._client)
        log.info("Submitted %s for %s: txid=%s", method_name, self.account, txids[0])
        return TransactionHandle(txid=txids[0], action=method_name)

    def create_note(self, title: str, content: str) -> TransactionHandle:
        return self._submit(METHOD_ADD_NOTE, [title, content])

    def delete_note(self, position: int) -> TransactionHandle:
        return self._submit(METHOD_DELETE_NOTE, [int(position)])

    def await_confirmation(self, handle: TransactionHandle) -> TransactionHandle:
        """Block until `handle` is confirmed; raise `ChainError` otherwise."""
        try:
            resp = wait_for_confirmation(self._client, handle.txid, self._rounds)
        except Exception as e:
            handle.mark_failed(str(e))
            raise ChainError(f"{handle.action} {handle.txid} not confirmed: {e}") from e
        handle.mark_confirmed(resp.get("confirmed-round"))
        log.info("Confirmed %s in round %s", handle.txid, handle.confirmed_round)
        return handle


def bind(
    account_addr: str,
    app_id: int,
    contract: abi.Contract,
    signer: TransactionSigner,
    client: algod.AlgodClient,
    *,
    confirmation_rounds: int = 4,
) -> AlgorandNoteContract:
    """Build the contract binding for `account_addr`.

    Raises:
        BindingError: app id not configured, descriptor incomplete, invalid
            account address, or the application cannot be found on the node.
    """
    if int(app_id) <= 0:
        raise BindingError("Notes application id is not configured (NOTES_APP_ID).")
    missing = missing_methods(contract)
    if missing:
        raise BindingError(f"Notes ABI lacks required methods: {', '.join(missing)}")
    if not encoding.is_valid_address(account_addr):
        raise BindingError(f"Invalid Algorand address: {account_addr}")
    try:
        client.application_info(int(app_id))
    except Exception as e:
        raise BindingError(f"Notes application {app_id} is not reachable: {e}") from e
    return AlgorandNoteContract(
        client,
        app_id=app_id,
        contract=contract,
        sender=account_addr,
        signer=signer,
        confirmation_rounds=confirmation_rounds,
    )
