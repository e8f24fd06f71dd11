# frontend/streamlit_app/core/errors.py
# SPDX-License-Identifier: Apache-2.0
"""Typed failures raised by the notes session, repository and contract binding.

Every remote failure is caught by the component that issued the call and
re-raised as one of these types with the original exception chained, so the
presentation layer only has to handle :class:`NotesError`.

Recoverability
--------------
- :class:`WalletConnectionError`: retry ``connect()``.
- :class:`BindingError`: fatal for the session; the controller disconnects.
- :class:`LoadError`: the previous collection is kept; retry ``load()``.
- :class:`ValidationError`: rejected locally, nothing reached the network.
- :class:`MutationError`: the write failed or was not confirmed; the
  collection is unchanged and the user must retry.
- :class:`BusyError`: another mutation is in flight; retry once it resolves.
"""

from __future__ import annotations


class NotesError(Exception):
    """Base class for every error surfaced to the presentation layer."""


class WalletConnectionError(NotesError, ConnectionError):
    """No signer is available, or the account request was rejected."""


class BindingError(NotesError):
    """A contract handle could not be constructed for the active account."""


class LoadError(NotesError):
    """Reading the account's notes failed."""


class ValidationError(NotesError, ValueError):
    """Input rejected before any remote call was made."""


class MutationError(NotesError):
    """A create/delete was not submitted or not confirmed."""


class BusyError(NotesError):
    """A mutation was attempted while another one was still in flight."""


class ChainError(NotesError):
    """A submitted transaction was rejected or never confirmed."""
