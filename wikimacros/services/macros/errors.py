#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Macro failures.

A macro never lets these escape into the page render: it catches them and
puts a short bracketed message in place of its output.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


class MacroError(Exception):
    """Base class; ``reason`` is the text shown to the reader."""

    reason = "failed"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.reason)
        self.detail = detail


class PageNotFound(MacroError):
    reason = "Wiki page not found"


class ResourceNotFound(MacroError):
    reason = "File not found"


class UnsupportedType(MacroError):
    reason = "File provided is not an allowed image type"
