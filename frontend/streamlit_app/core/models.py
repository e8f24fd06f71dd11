# frontend/streamlit_app/core/models.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Value types shared by the notes core and the presentation layer.

- `Note`: one entry of the on-chain list, tagged with its load-time position.
- `ViewState` / `PanelState`: pure UI state, replaced by value.
- `TransactionHandle`: lifecycle of one submitted create/delete.
- `SessionStatus`: the controller's account lifecycle.

Notes on positions
------------------
`Note.position` is the index the contract reported at load time. It is the
deletion key, but it is NOT a stable identity: deleting a note shifts every
later note down by one. Any position must be used against the snapshot it
came from.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    TITLE = "title"


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"


class SessionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class TxState(str, Enum):
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


def normalize_timestamp(value: Any) -> int:
    """
    Coerce a remote timestamp (uint64, numeric string, float) to integer seconds.

    Raises:
        ValueError: for booleans, negatives or values that are not numbers.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid note timestamp: {value!r}")
    try:
        ts = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid note timestamp: {value!r}") from e
    if ts < 0:
        raise ValueError(f"Negative note timestamp: {ts}")
    return ts


@dataclass(frozen=True)
class Note:
    """A note as reported by the contract at load time."""

    title: str
    content: str
    timestamp: int
    position: int

    @classmethod
    def from_remote(cls, position: int, raw: Sequence[Any] | Mapping[str, Any]) -> Note:
        """Build a Note from an ABI tuple `(title, content, timestamp)` or a mapping."""
        if isinstance(raw, Mapping):
            title, content, ts = raw["title"], raw["content"], raw["timestamp"]
        else:
            title, content, ts = raw
        return cls(
            title=str(title),
            content=str(content),
            timestamp=normalize_timestamp(ts),
            position=int(position),
        )


@dataclass(frozen=True)
class ViewState:
    """Search query + sort key fed into `services.note_view.project`."""

    search_query: str = ""
    sort_key: SortKey = SortKey.NEWEST


@dataclass(frozen=True)
class PanelState:
    """Layout and modal flags of the notes board."""

    view_mode: ViewMode = ViewMode.GRID
    editor_open: bool = False
    selected_position: int | None = None


@dataclass
class TransactionHandle:
    """An in-flight create/delete; lives only for the duration of one call."""

    txid: str
    action: str
    state: TxState = TxState.SUBMITTED
    confirmed_round: int | None = None
    error: str | None = field(default=None, repr=False)

    def mark_confirmed(self, confirmed_round: int | None) -> None:
        self.state = TxState.CONFIRMED
        self.confirmed_round = confirmed_round

    def mark_failed(self, reason: str) -> None:
        self.state = TxState.FAILED
        self.error = reason
