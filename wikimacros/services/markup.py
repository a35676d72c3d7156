#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Markdown conversion shared by the page renderer and the macros.

Page bodies keep raw HTML so macro output survives.  Inline fragments
(footnote text) escape raw HTML and lose their ``<p>`` wrapper.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import Callable, Optional

import mistune
from mistune.plugins.formatting import strikethrough
from mistune.plugins.table import table
from mistune.plugins.url import url


# -----------------------------------------------------------------------------

_markdown: Optional[Callable[[str], str]] = None
_inline: Optional[Callable[[str], str]] = None

_PARAGRAPH_RE = re.compile(r"^<p>(.*)</p>\s*$", re.DOTALL)


def markdown_to_html(text: str) -> str:
    global _markdown
    if _markdown is None:
        _markdown = mistune.create_markdown(
            renderer=mistune.HTMLRenderer(escape=False),
            plugins=[table, strikethrough, url],
        )
    return _markdown(text)


def inline_markdown(text: str) -> str:
    """``"**a** b"`` → ``"<strong>a</strong> b"``; raw HTML is escaped."""
    global _inline
    if _inline is None:
        _inline = mistune.create_markdown(escape=True, plugins=[strikethrough, url])
    out = _inline(text)
    m = _PARAGRAPH_RE.match(out)
    return m.group(1) if m else out.strip()


# -----------------------------------------------------------------------------
