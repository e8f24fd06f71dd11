# frontend/streamlit_app/ui/markdown.py
# SPDX-License-Identifier: Apache-2.0
"""Tiny markdown-to-HTML preview used by the note editor and detail view.

Only a handful of substitutions are supported: `#`/`##`/`###` headings,
`**bold**`, `*italic*`, `` `code` `` and line breaks. Input is HTML-escaped
first so note content can never inject markup.
"""

from __future__ import annotations

import html
import re

# Ordered: longer heading prefixes must be tried first.
_SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^### (.*)$", re.MULTILINE), r'<h3 class="note-h3">\1</h3>'),
    (re.compile(r"^## (.*)$", re.MULTILINE), r'<h2 class="note-h2">\1</h2>'),
    (re.compile(r"^# (.*)$", re.MULTILINE), r'<h1 class="note-h1">\1</h1>'),
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"`([^`]+)`"), r"<code>\1</code>"),
    (re.compile(r"\n"), "<br />"),
]


def render_markdown(text: str) -> str:
    """Return an HTML fragment for `text`.

    Examples:
        >>> render_markdown("# Hi\\n**bold**")
        '<h1 class="note-h1">Hi</h1><br /><strong>bold</strong>'
    """
    out = html.escape(text or "", quote=False)
    for pattern, repl in _SUBSTITUTIONS:
        out = pattern.sub(repl, out)
    return out
