#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Image macro
-----------
Embeds an image attached to a wiki page.

[[Image(photo.jpg)]]                        simplest
[[Image(OtherPage:foo.bmp)]]                file attached to OtherPage
[[Image(42)]]                               attachment by id
[[Image(photo.jpg, desc="My caption")]]     caption text
[[Image(photo.jpg, 120px)]]                 width
[[Image(photo.jpg, right)]]                 aligned by keyword
[[Image(photo.jpg, nolink)]]                no link to the image
[[Image(photo.jpg, nofigure)]]              no figure border, not clickable
[[Image(photo.jpg, align=right)]]           aligned by attribute
[[Image(photo.jpg, 120px, class=mypic)]]    width and a CSS class
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
import logging
from typing import TYPE_CHECKING, Optional

from .errors import MacroError
from .image import compile_html, locate, resolve, scan, split_file_spec
from .registry import Macro, macro_registry

if TYPE_CHECKING:
    from .context import MacroContext

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def failure(args: str, error: MacroError) -> str:
    return f"(Image({html.escape(args, quote=False)}) failed - {error.reason})"


@macro_registry.register
class ImageMacro(Macro):
    name = "Image"
    description = (
        "Embed an image in wiki-formatted text. The first argument is the file "
        "specification, either as `file` for the current page or `Page:file` for "
        "`file` located on the wiki page with name `Page`. The remaining arguments "
        "are optional: a size (`120`, `25%`), an alignment (`left`, `right`, `top`, "
        "`bottom`, `center`), `nolink`, `nofigure`, `link=...` and `key=value` "
        "attributes (align, border, width, height, alt, desc, title, longdesc, "
        "class, id, usemap). `border` can only be a number."
    )

    async def render(self, args: Optional[str], ctx: "MacroContext") -> str:
        # bare [[Image]] / [[Image()]]
        if not args:
            return ""

        spec, options = split_file_spec(args)
        if not spec:
            return ""

        model = resolve(scan(options))
        try:
            resource = await locate(ctx, spec)
        except MacroError as exc:
            log.info("Image(%s) failed: %s", args, exc)
            return failure(args, exc)

        return compile_html(model, resource)
