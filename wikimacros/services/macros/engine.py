#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
MacroEngine
===========
Scans wiki text for ``[[Name]]`` and ``[[Name(args)]]`` directives and
replaces each with its macro's output, in document order.

Directives naming an unregistered macro are left untouched so ordinary
``[[Page Title]]`` wiki links survive for the markup renderer.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from typing import Optional

from .context import MacroContext
from .registry import MacroRegistry, macro_registry

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Pattern explanation:
#   [[Name]]          bare form, args None
#   [[Name(...)]]     args run to the first ")]]"
# Names start with a letter; letters and digits only.
# -----------------------------------------------------------------------------
_MACRO_PATTERN = re.compile(
    r"\[\[([A-Za-z][A-Za-z0-9]*)(?:\((.*?)\))?\]\]",
    re.DOTALL,
)


class MacroEngine:
    """
    Expand all macros embedded in a piece of wiki text.

    Usage::

        engine = MacroEngine()
        html = await engine.expand(raw_text, ctx)
    """

    def __init__(self, registry: Optional[MacroRegistry] = None) -> None:
        self._registry = registry or macro_registry

    async def expand(self, text: str, ctx: MacroContext) -> str:
        if not text:
            return text

        result_parts: list[str] = []
        last_end = 0

        for match in _MACRO_PATTERN.finditer(text):
            macro = self._registry.get(match.group(1))
            if macro is None:
                continue

            result_parts.append(text[last_end:match.start()])
            log.debug("Expanding %s(%s)", macro.name, match.group(2))
            result_parts.append(await macro.render(match.group(2), ctx))
            last_end = match.end()

        result_parts.append(text[last_end:])
        return "".join(result_parts)
