#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Macro registry: name → macro instance.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .context import MacroContext

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

class Macro:
    """
    Base class for wiki macros.

    Subclasses set ``name`` and ``description`` and implement ``render``.
    ``args`` is the text between the parentheses of ``[[Name(args)]]``, or
    None for the bare ``[[Name]]`` form.
    """

    name: str = ""
    description: str = ""

    async def render(self, args: Optional[str], ctx: "MacroContext") -> str:
        raise NotImplementedError


# -----------------------------------------------------------------------------

class MacroRegistry:

    def __init__(self) -> None:
        self._macros: dict[str, Macro] = {}

    def register(self, macro_cls: type[Macro]) -> type[Macro]:
        """Class decorator: instantiate *macro_cls* and register it by name."""
        macro = macro_cls()
        if macro.name in self._macros:
            log.warning("Macro %s registered twice; keeping the latest", macro.name)
        self._macros[macro.name] = macro
        return macro_cls

    def get(self, name: str) -> Optional[Macro]:
        return self._macros.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._macros

    def names(self) -> list[str]:
        return sorted(self._macros)

    def describe(self) -> list[dict[str, str]]:
        return [
            {"name": name, "description": self._macros[name].description}
            for name in self.names()
        ]


# -----------------------------------------------------------------------------

macro_registry = MacroRegistry()
