#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page renderer: macro expansion followed by markup conversion.

``markdown`` content goes through mistune with raw HTML passed along
untouched, so macro output survives.  ``html`` content is only expanded.
Each render should get its own MacroContext so footnote numbering
restarts per page.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
from typing import Callable, Optional

from wikimacros.services.macros import MacroContext, MacroEngine
from wikimacros.services.markup import markdown_to_html


# -----------------------------------------------------------------------------

_CONVERTERS: dict[str, Callable[[str], str]] = {
    "markdown": markdown_to_html,
    "html":     lambda text: text,
}


# -----------------------------------------------------------------------------

async def render_page(
    content: str,
    ctx: MacroContext,
    fmt: str = "markdown",
    engine: Optional[MacroEngine] = None,
) -> str:
    """Expand the macros in *content* and convert the result to HTML.

    An unknown *fmt* renders the raw content escaped inside ``<pre>``.
    """
    convert = _CONVERTERS.get(fmt.lower())
    if convert is None:
        return f"<pre>{html.escape(content)}</pre>"

    expanded = await (engine or MacroEngine()).expand(content, ctx)
    return convert(expanded)


# -----------------------------------------------------------------------------
