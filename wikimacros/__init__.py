"""
WikiMacros — bracketed wiki macros ([[Image(...)]], [[Footnote(...)]], ...)
expanded to HTML fragments.
"""

from wikimacros._version import __version__

__all__ = ["__version__"]
