"""
Macro subsystem public API.

Importing this package registers the built-in macros (Image, FileIndex,
Footnote, Twitter) with ``macro_registry``.
"""

from .context import AttachmentRef, MacroContext, PageRef
from .engine import MacroEngine
from .errors import MacroError, PageNotFound, ResourceNotFound, UnsupportedType
from .registry import Macro, MacroRegistry, macro_registry
from . import macro_fileindex, macro_footnote, macro_image, macro_twitter  # noqa: F401

__all__ = [
    "AttachmentRef",
    "Macro",
    "MacroContext",
    "MacroEngine",
    "MacroError",
    "MacroRegistry",
    "PageNotFound",
    "PageRef",
    "ResourceNotFound",
    "UnsupportedType",
    "macro_registry",
]
