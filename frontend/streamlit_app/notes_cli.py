# frontend/streamlit_app/notes_cli.py
# SPDX-License-Identifier: Apache-2.0
#
# Purpose
# -------
# Command-line client for the notes application, sharing the session,
# repository and projection used by the Streamlit app.
#
# Usage
# -----
#   python notes_cli.py list   [--search TEXT] [--sort newest|oldest|title]
#   python notes_cli.py add    --title "Groceries" --content "eggs, milk"
#   python notes_cli.py delete --position 3 [--yes]
#
# Conventions
# -----------
# * `--position` is the position printed by `list`. Positions shift after
#   every delete, so run `list` again before deleting another note.
# * Targets Algorand **TestNet** by default (override via .env).
#
# Security
# --------
# * The mnemonic defaults to NOTES_MNEMONIC from .env. Never commit it.

from __future__ import annotations

import argparse
import logging
import sys

from core.clients import new_algod
from core.config import settings
from core.constants import DELETE_PROMPT
from core.errors import NotesError
from core.models import Note, SortKey, ViewState
from services.note_view import project, use_system_collation
from services.session import SessionController, build_session
from ui.components import format_full_date


def _prompt_confirm(note: Note) -> bool:
    """Blocking y/N prompt on stdin."""
    answer = input(f"{DELETE_PROMPT} [{note.position}] {note.title!r} (y/N): ")
    return answer.strip().lower() in ("y", "yes")


def _print_notes(notes: tuple[Note, ...]) -> None:
    if not notes:
        print("No notes found.")
        return
    for note in notes:
        print(f"[{note.position}] {format_full_date(note.timestamp)}  {note.title}")
        for line in note.content.splitlines():
            print(f"      {line}")


def _connect(mn: str) -> SessionController:
    session = build_session(lambda: mn, new_algod(), settings)
    repo = session.connect()
    if repo.last_error is not None:
        raise repo.last_error
    return session


def run(args: argparse.Namespace) -> int:
    """Dispatch one subcommand; raises NotesError on failure."""
    session = _connect(args.mnemonic)
    repo = session.repository

    if args.cmd == "list":
        view = ViewState(search_query=args.search, sort_key=SortKey(args.sort))
        _print_notes(project(repo.notes, view))
    elif args.cmd == "add":
        repo.add(args.title, args.content)
        print(f"✅ Note saved ({len(repo.notes)} notes on-chain)")
    elif args.cmd == "delete":
        confirm = (lambda note: True) if args.yes else _prompt_confirm
        if repo.delete(args.position, confirm):
            print(f"✅ Deleted note at position {args.position}")
        else:
            print("Cancelled.")
    session.disconnect()
    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Ledger Notes client (TestNet defaults).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument(
        "--mnemonic",
        type=str,
        default=settings.NOTES_MNEMONIC,
        help="25-word mnemonic of the notes owner; defaults to NOTES_MNEMONIC from .env",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ls = sub.add_parser("list", help="List notes")
    ls.add_argument("--search", default="", help="Case-insensitive title/content filter")
    ls.add_argument("--sort", default="newest", choices=[k.value for k in SortKey])

    add = sub.add_parser("add", help="Create a note and wait for confirmation")
    add.add_argument("--title", required=True)
    add.add_argument("--content", required=True)

    rm = sub.add_parser("delete", help="Delete the note at a listed position")
    rm.add_argument("--position", type=int, required=True)
    rm.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entrypoint for CLI execution."""
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)-8s: %(message)s"
    )
    use_system_collation()
    args = _parse_args(argv)
    try:
        sys.exit(run(args))
    except NotesError as e:
        # Single-line error for scripting/CI environments.
        raise SystemExit(f"{args.cmd} failed: {e}") from e


if __name__ == "__main__":
    main()
