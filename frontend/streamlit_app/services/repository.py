# frontend/streamlit_app/services/repository.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Note repository: the single owner of the active account's note collection.

Every operation wraps one remote call of the bound contract:

  • `load()`   → read the account's notes and install them wholesale
  • `add()`    → submit `add_note`, wait for confirmation, reload
  • `delete()` → ask for confirmation, submit `delete_note`, wait, reload

Consistency rules
-----------------
- The collection is an immutable tuple replaced in one assignment; a failed
  read or write never leaves it partially updated.
- Nothing is appended or removed locally. The contract assigns timestamps and
  positions, so the repository always reloads after a confirmed mutation.
- One lock per repository serializes calls. Mutations never wait for it: a
  second `add`/`delete` while anything is in flight raises `BusyError`.
  `load()` waits its turn. This keeps two unordered reloads from installing
  a stale collection over a fresh one.
- A submitted transaction cannot be cancelled. Its outcome is always applied
  (reload on success, typed error on failure).
"""

import contextlib
import logging
import threading
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Protocol

from core.errors import BusyError, LoadError, MutationError, NotesError, ValidationError
from core.models import Note, TransactionHandle, TxState

log = logging.getLogger(__name__)


class NoteStore(Protocol):
    """Remote note store as reached through a contract binding."""

    account: str

    def list_notes(self) -> Sequence[Any]: ...

    def create_note(self, title: str, content: str) -> TransactionHandle: ...

    def delete_note(self, position: int) -> TransactionHandle: ...

    def await_confirmation(self, handle: TransactionHandle) -> TransactionHandle: ...


#: Called with the note about to be deleted; return True to proceed.
ConfirmDelete = Callable[[Note], bool]


class NoteRepository:
    """Owns the note collection of one bound account."""

    def __init__(self, binding: NoteStore) -> None:
        self._binding = binding
        self._notes: tuple[Note, ...] = ()
        self._lock = threading.Lock()
        self.last_error: NotesError | None = None
        self.last_transaction: TransactionHandle | None = None

    @property
    def account(self) -> str:
        return self._binding.account

    @property
    def notes(self) -> tuple[Note, ...]:
        """Current collection; treat as read-only between calls."""
        return self._notes

    @property
    def busy(self) -> bool:
        """True while a load or mutation holds the single-flight lock."""
        return self._lock.locked()

    def note_at(self, position: int) -> Note | None:
        for note in self._notes:
            if note.position == position:
                return note
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def load(self) -> tuple[Note, ...]:
        """Replace the collection with the contract's current list.

        Raises:
            LoadError: the read failed; the previous collection is kept.
        """
        with self._lock:
            return self._reload()

    def add(self, title: str, content: str) -> tuple[Note, ...]:
        """Create a note remotely, then reload.

        Raises:
            ValidationError: empty title or content (no remote call).
            BusyError: another call is in flight.
            MutationError: submission or confirmation failed.
            LoadError: the note was created but the reload failed.
        """
        if not (title or "").strip() or not (content or "").strip():
            err = ValidationError("Please fill in both title and content.")
            self.last_error = err
            raise err
        with self._single_flight("add"):
            self._mutate("add", lambda: self._binding.create_note(title, content))
            return self._reload()

    def delete(self, position: int, confirm: ConfirmDelete) -> bool:
        """Delete the note at `position` of the current snapshot, then reload.

        `confirm` is asked before anything is submitted. The lock is held
        while it runs, so the snapshot `position` refers to cannot change.
        Positions cached from before this call are invalid afterwards.

        Returns:
            True if the note was deleted, False if the user declined.

        Raises:
            ValidationError: `position` is not in the current snapshot.
            BusyError: another call is in flight.
            MutationError: submission or confirmation failed.
            LoadError: the note was deleted but the reload failed.
        """
        with self._single_flight("delete"):
            note = self.note_at(position)
            if note is None:
                err = ValidationError(f"No note at position {position}; reload and retry.")
                self.last_error = err
                raise err
            if not confirm(note):
                log.info("Delete of position %s declined", position)
                return False
            self._mutate("delete", lambda: self._binding.delete_note(position))
            self._reload()
            return True

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def _single_flight(self, action: str) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            err = BusyError(f"Cannot {action} while another operation is in progress.")
            self.last_error = err
            raise err
        try:
            yield
        finally:
            self._lock.release()

    def _reload(self) -> tuple[Note, ...]:
        try:
            raw = self._binding.list_notes()
            notes = tuple(Note.from_remote(i, entry) for i, entry in enumerate(raw))
        except Exception as e:
            log.warning("Loading notes for %s failed: %s", self.account, e)
            err = LoadError(f"Failed to load notes: {e}")
            self.last_error = err
            raise err from e
        self._notes = notes
        self.last_error = None
        log.info("Loaded %d notes for %s", len(notes), self.account)
        return notes

    def _mutate(self, action: str, submit: Callable[[], TransactionHandle]) -> None:
        handle = None
        try:
            handle = submit()
            self.last_transaction = handle
            self._binding.await_confirmation(handle)
        except Exception as e:
            if handle is not None and handle.state is not TxState.FAILED:
                handle.mark_failed(str(e))
            log.warning("Failed to %s note for %s: %s", action, self.account, e)
            err = MutationError(f"Failed to {action} note: {e}")
            self.last_error = err
            raise err from e

