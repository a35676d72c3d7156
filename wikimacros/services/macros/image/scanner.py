#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Token scanner for the Image macro arguments
===========================================
Three independent passes over the same argument text, in this order:

  1. positional   ``120px``  ``25%``  ``right``  ``nolink``  ``nofigure``
  2. quoted pair  ``desc="My caption, with commas"``  ``alt='x'``
  3. bare pair    ``width=120``  ``link=http://example.com`` (value ends at a comma or space)

Each pass looks only for its own pattern class, so a fragment can be picked
up by more than one pass (``320`` inside ``desc="a 320 wide shot"`` is also
a positional size).  Tokens are returned pass by pass; folding them in that
order gives the later passes precedence.

Keys outside ``PAIR_KEYS`` are not matched and drop out silently.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

from .model import Token


# -----------------------------------------------------------------------------

PAIR_KEYS = (
    "alt", "altimage", "desc", "title", "width", "height", "align",
    "border", "longdesc", "class", "id", "usemap", "link",
)

_KEYS = "|".join(PAIR_KEYS)

# A token starts after a comma, a space or the start of the text and ends
# before a comma, a space or the end.  Lookarounds keep the delimiters
# available to the neighbouring token.
_POSITIONAL_RE = re.compile(
    r"(?<![^, ])(left|right|top|center|bottom|nofigure|nolink|[0-9]+(?:px|%|em)?)(?=[, ]|$)",
    re.IGNORECASE,
)
_QUOTED_PAIR_RE = re.compile(
    rf"(?<![^, ])({_KEYS})=[\"']([^\"]*)[\"']",
    re.IGNORECASE,
)
_BARE_PAIR_RE = re.compile(
    rf"(?<![^, ])({_KEYS})=([^\"', ]*)(?=[, ]|$)",
    re.IGNORECASE,
)


# -----------------------------------------------------------------------------

def scan_positional(text: str) -> list[Token]:
    return [Token.positional(m.group(1)) for m in _POSITIONAL_RE.finditer(text)]


def scan_quoted_pairs(text: str) -> list[Token]:
    return [Token.pair(m.group(1), m.group(2)) for m in _QUOTED_PAIR_RE.finditer(text)]


def scan_bare_pairs(text: str) -> list[Token]:
    return [Token.pair(m.group(1), m.group(2)) for m in _BARE_PAIR_RE.finditer(text)]


# -----------------------------------------------------------------------------

def scan(text: str) -> list[Token]:
    """Split the argument text that follows the file spec into tokens."""
    if not text:
        return []
    return scan_positional(text) + scan_quoted_pairs(text) + scan_bare_pairs(text)


# -----------------------------------------------------------------------------

def split_file_spec(args: str) -> tuple[str, str]:
    """Split raw macro arguments into ``(file_spec, rest)``.

    *rest* keeps its leading comma so the first option is delimited like
    every other one.
    """
    head, sep, tail = args.partition(",")
    return head.strip(), sep + tail
