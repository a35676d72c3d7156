#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Attribute model for the Image macro
===================================
The normalized result of parsing the macro's argument string, plus the token
and resolved-resource types that flow through the pipeline::

    argument text ─► scan() ─► [Token] ─► resolve() ─► AttributeModel
    file spec     ─► locate() ─► ResolvedResource
    AttributeModel + ResolvedResource ─► compile_html() ─► str

``styles`` and ``html_attrs`` are plain dicts: insertion order is part of
the output (the generated ``style`` attribute lists declarations in the
order the arguments set them).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# -----------------------------------------------------------------------------

class Alignment(str, Enum):
    LEFT   = "left"
    RIGHT  = "right"
    TOP    = "top"
    BOTTOM = "bottom"
    CENTER = "center"

    @classmethod
    def parse(cls, text: str) -> Optional["Alignment"]:
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


class LinkMode(str, Enum):
    DEFAULT  = "default"    # link to the image itself (its internal route)
    NONE     = "none"
    EXTERNAL = "external"   # link to AttributeModel.link_target


# -----------------------------------------------------------------------------

_LENGTH_RE = re.compile(r"^([0-9]+)(px|%|em)?$", re.IGNORECASE)


@dataclass(frozen=True)
class Length:
    value: int
    unit: str = "px"

    @classmethod
    def parse(cls, text: str) -> Optional["Length"]:
        """``"120"`` → 120px, ``"25%"`` → 25%, anything else → None."""
        m = _LENGTH_RE.match(text.strip())
        if not m:
            return None
        return cls(int(m.group(1)), (m.group(2) or "px").lower())

    def __str__(self) -> str:
        return f"{self.value}{self.unit}"


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Token:
    """One unit of the argument language.

    Positional tokens have ``key=None``; pairs carry the lowercased key and
    the unquoted value.
    """
    text: str
    key: Optional[str] = None

    @property
    def is_pair(self) -> bool:
        return self.key is not None

    @classmethod
    def positional(cls, text: str) -> "Token":
        return cls(text.strip().lower())

    @classmethod
    def pair(cls, key: str, value: str) -> "Token":
        return cls(value.strip(), key.strip().lower())


# -----------------------------------------------------------------------------

@dataclass
class AttributeModel:
    size: Optional[Length] = None
    alignment: Optional[Alignment] = None
    styles: dict[str, str] = field(default_factory=dict)
    link: LinkMode = LinkMode.DEFAULT
    link_target: str = ""
    rel_external: bool = False
    caption: Optional[str] = None
    no_figure: bool = False
    html_attrs: dict[str, str] = field(default_factory=dict)

    def set_style(self, key: str, value: str) -> None:
        self.styles[key.strip().lower()] = value

    def set_attr(self, key: str, value: str) -> None:
        self.html_attrs[key.strip().lower()] = value

    def unlink(self) -> None:
        self.link = LinkMode.NONE
        self.link_target = ""
        self.rel_external = False

    @property
    def style_text(self) -> str:
        """``styles`` rendered as ``key:value; key:value``."""
        return "; ".join(f"{k}:{v}" for k, v in self.styles.items())


# -----------------------------------------------------------------------------

@dataclass
class ResolvedResource:
    filename: str
    path: str
    display_link: str
    exists: bool
    alternate_path: str = ""
    description: str = ""
