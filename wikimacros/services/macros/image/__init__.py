"""
Image macro pipeline: scan → resolve → locate → compile.
"""

from .compiler import compile_html
from .locator import locate
from .model import Alignment, AttributeModel, Length, LinkMode, ResolvedResource, Token
from .resolver import resolve
from .scanner import scan, split_file_spec

__all__ = [
    "Alignment", "AttributeModel", "Length", "LinkMode", "ResolvedResource", "Token",
    "compile_html", "locate", "resolve", "scan", "split_file_spec",
]
