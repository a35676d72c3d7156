#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Attribute resolver: folds scanned tokens into an AttributeModel.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import Iterable, Optional

from .model import Alignment, AttributeModel, Length, LinkMode, Token


# -----------------------------------------------------------------------------

# Scheme anywhere in the value, e.g. link=http://example.com/x or
# link='see mailto:someone@example.com'
URL_RE = re.compile(
    r"[^=\"']*(https?:|mailto:|ftp:|gopher:|news:|file:)"
    r"([^ |\\/\"']*\/)*([^ |\t\n\/\"']*[A-Za-z0-9\/?=&~_])"
)

_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def _intval(text: str) -> int:
    """Leading integer of *text*, 0 when there is none (``"3px"`` → 3)."""
    m = _INT_RE.match(text)
    return int(m.group(1)) if m else 0


# -----------------------------------------------------------------------------

def apply_size(model: AttributeModel, length: Length) -> None:
    model.size = length
    model.set_style("width", str(length))
    # the width attribute is always read as pixels
    if length.unit == "px":
        model.set_attr("width", str(length.value))
    else:
        model.html_attrs.pop("width", None)


def apply_alignment(model: AttributeModel, alignment: Alignment) -> None:
    model.alignment = alignment
    if alignment is Alignment.CENTER:
        model.set_style("display", "block")
        model.set_style("margin-left", "auto")
        model.set_style("margin-right", "auto")
    elif alignment is Alignment.LEFT:
        model.set_style("float", "left")
        model.set_style("margin-right", "1em")
    elif alignment is Alignment.RIGHT:
        model.set_style("float", "right")
        model.set_style("margin-left", "1em")
    # top / bottom are accepted but carry no style


def apply_link(model: AttributeModel, target: str) -> None:
    if model.no_figure:
        return
    if not target:
        model.unlink()
        return
    model.link = LinkMode.EXTERNAL
    model.link_target = target
    model.rel_external = URL_RE.search(target) is not None


# -----------------------------------------------------------------------------

def _apply_positional(model: AttributeModel, word: str) -> None:
    length = Length.parse(word)
    if length is not None:
        apply_size(model, length)
        return

    if word == "nolink":
        model.unlink()
        return

    if word == "nofigure":
        model.no_figure = True
        model.unlink()
        return

    alignment = Alignment.parse(word)
    if alignment is not None:
        apply_alignment(model, alignment)


def _apply_pair(model: AttributeModel, key: str, value: str) -> None:
    if key in ("width", "height"):
        length = Length.parse(value)
        if length is not None:
            apply_size(model, length)
            # a unitless height is also kept as the height attribute
            if key == "height" and value.isdigit():
                model.set_attr("height", value)
            return

    if key == "link":
        apply_link(model, value)
    elif key == "align":
        alignment = Alignment.parse(value)
        if alignment is not None:
            apply_alignment(model, alignment)
    elif key == "border":
        model.set_style("border", f"#ccc {_intval(value)}px solid")
    elif key == "desc":
        model.caption = value
    else:
        model.set_attr(key, value)


# -----------------------------------------------------------------------------

def apply_token(model: AttributeModel, token: Token) -> AttributeModel:
    if token.is_pair:
        _apply_pair(model, token.key, token.text)
    else:
        _apply_positional(model, token.text)
    return model


def resolve(tokens: Iterable[Token], model: Optional[AttributeModel] = None) -> AttributeModel:
    """Fold *tokens* in order into *model* (a fresh one by default)."""
    model = model if model is not None else AttributeModel()
    for token in tokens:
        apply_token(model, token)
    return model
