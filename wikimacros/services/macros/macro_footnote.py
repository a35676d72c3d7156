#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Footnote macro
--------------
[[Footnote(I am a footnote)]]                 reference a new footnote
[[Footnote(reflabel | I am another footnote)]] labelled footnote
[[Footnote(reflabel)]]                        reuse the footnote labelled reflabel
[[Footnote]]                                  emit the collected footnote list

References are numbered in order of first use.  Every reference gets its
own anchor (``fndef-<n>``) so the list can link back to each one.
Footnote text is inline markdown; raw HTML in it is escaped.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from wikimacros.services.markup import inline_markdown
from .registry import Macro, macro_registry

if TYPE_CHECKING:
    from .context import MacroContext


# -----------------------------------------------------------------------------

@dataclass
class Footnote:
    content: str
    refs: list[str] = field(default_factory=list)


@dataclass
class FootnoteSession:
    """Footnotes collected during one page render."""

    footnotes: list[Footnote] = field(default_factory=list)
    stubs: list[str] = field(default_factory=list)
    count: int = 0

    def reference(self, stub: str, note: str) -> tuple[int, str]:
        """Record a reference; return ``(footnote number, reference anchor)``."""
        self.count += 1
        anchor = f"fndef-{self.count}"
        if stub in self.stubs:
            number = self.stubs.index(stub) + 1
            self.footnotes[number - 1].refs.append(anchor)
            return number, anchor

        self.stubs.append(stub)
        self.footnotes.append(Footnote(content=note, refs=[anchor]))
        return len(self.footnotes), anchor

    def reset(self) -> None:
        self.footnotes.clear()
        self.stubs.clear()
        self.count = 0


# -----------------------------------------------------------------------------

def _sup(number: int, anchor: str) -> str:
    return (
        f'<sup id="{anchor}" class="tex2jax_ignore">'
        f'<a href="#fnref-{number}">&#91;{number}&#93;</a></sup>'
    )


def _footnote_list(session: FootnoteSession) -> str:
    out = ['<ol class="footnotes">']
    for i, note in enumerate(session.footnotes, 1):
        out.append("<li>")
        if len(note.refs) > 1:
            out.append("^ ")
            for letter, ref in zip(string.ascii_lowercase, note.refs):
                out.append(f'<sup class="tex2jax_ignore"><a href="#{ref}">{letter}</a></sup> ')
        elif note.refs:
            out.append(f'<a href="#{note.refs[0]}">^</a> ')
        out.append(f'<span id="fnref-{i}"></span>{note.content}')
        out.append("</li>")
    out.append("</ol>")
    return "".join(out)


# -----------------------------------------------------------------------------

@macro_registry.register
class FootnoteMacro(Macro):
    name = "Footnote"
    description = (
        "Add a footnote, or explicitly display collected footnotes when no args "
        "are given. `[[Footnote(label | text)]]` labels a footnote so later "
        "`[[Footnote(label)]]` calls reference the same one."
    )

    async def render(self, args: Optional[str], ctx: "MacroContext") -> str:
        session = ctx.footnotes

        if not args or not args.strip():
            html_list = _footnote_list(session)
            session.reset()
            return html_list

        stub, _, note = args.partition("|")
        stub = stub.strip()
        note = note.strip() or stub

        number, anchor = session.reference(stub, inline_markdown(note))
        return _sup(number, anchor)
