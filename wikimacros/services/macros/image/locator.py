#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Resource locator: turns the Image macro's file spec into a ResolvedResource.

Accepted file specs::

    42                       attachment id
    http://example.com/a.png absolute URL (no existence check)
    photo.jpg                file attached to the current page
    OtherPage:photo.jpg      file attached to the page titled OtherPage
    /app/site/media/logo.png path below the site root

Uploads are stored at ``<app_root>/<filepath>/<page id>/<file>``.  Older
group folders were created with zero-padded ids (``/groups/0042/wiki``), so
a file that is missing at the primary path is also looked for with the
first numeric segment normalized (``/groups/42/wiki``).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import os
import re
from typing import TYPE_CHECKING, Optional

from ..errors import PageNotFound, ResourceNotFound, UnsupportedType
from .model import ResolvedResource

if TYPE_CHECKING:
    from ..context import MacroContext

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

_NUMBER_RE = re.compile(r"[0-9]+")


SCHEME_RE = re.compile(r"^(https?:|mailto:|ftp:|gopher:|news:|file:)")

# Same as SCHEME_RE but anywhere after a non-attribute character; also
# accepts feed: links
_EMBEDDED_URL_RE = re.compile(
    r"[^=\"'](https?:|mailto:|ftp:|gopher:|feed:|news:|file:)"
    r"([^ |\\/\"']*\/)*([^ |\t\n\/\"']*[A-Za-z0-9\/?=&~_])"
)


def is_number(text: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts "²" which int() rejects."""
    return _NUMBER_RE.fullmatch(text) is not None


def is_url(spec: str) -> bool:
    return SCHEME_RE.match(spec) is not None


def extension(filename: str) -> str:
    """Lowercased text after the last dot, '' when there is none."""
    _, dot, ext = filename.rpartition(".")
    return ext.lower() if dot else ""


def normalize_numeric_segment(filepath: str) -> str:
    """Strip leading zeros from the first all-digit segment of *filepath*."""
    bits = filepath.split("/")
    for i, bit in enumerate(bits):
        if is_number(bit):
            bits[i] = str(int(bit))
            break
    return "/".join(bits)


# -----------------------------------------------------------------------------

def file_path(ctx: "MacroContext", filename: str, pageid: Optional[int], alternate: bool = False) -> str:
    """Filesystem path of *filename* as stored for page *pageid*."""
    settings = ctx.settings
    if filename.startswith("/"):
        return str(settings.site_root) + filename

    filepath = ctx.upload_filepath
    if alternate:
        filepath = normalize_numeric_segment(filepath)

    path = os.path.join(str(settings.app_root), filepath.strip("/"))
    if pageid:
        path = os.path.join(path, str(pageid))
    return os.path.join(path, filename)


async def display_link(ctx: "MacroContext", filename: str, pageid: Optional[int]) -> str:
    """URL placed in the ``src`` / default ``href`` of the image."""
    if is_url(filename) or _EMBEDDED_URL_RE.search(filename) or filename.startswith("/"):
        return filename

    filename = filename.strip("/")

    if ctx.printable:
        return file_path(ctx, filename, pageid)

    if pageid:
        if pageid > 0:
            page = await ctx.pages.get_page(pageid) if ctx.pages else None
            if page is None:
                raise PageNotFound(f"page id {pageid}")
            link = page.link
        else:
            # unsaved page: uploads are staged under its temporary id
            return ctx.route(f"/app/site/wiki/{pageid}/{filename}")
    else:
        option = ctx.route_option
        link = "/" + (option[4:] if option.startswith("com_") else option) + "/"
        if ctx.scope:
            link += ctx.scope.strip("/") + "/"
        link += ctx.pagename

    return ctx.route(link.rstrip("/") + "/Image:" + filename)


# -----------------------------------------------------------------------------

async def locate(ctx: "MacroContext", spec: str) -> ResolvedResource:
    """Resolve *spec*; raises a MacroError subclass when it cannot be used."""
    pageid = ctx.pageid
    description = ""

    if is_number(spec):
        attachment = await ctx.attachments.resolve_attachment(int(spec)) if ctx.attachments else None
        if attachment is None:
            raise ResourceNotFound(f"attachment {spec}")
        filename = attachment.filename
        description = attachment.description
        pageid = attachment.page_id
        checked = True
    elif is_url(spec):
        filename = spec
        checked = False
    else:
        filename = spec
        if ":" in spec:
            title, filename = spec.split(":", 1)
            page = await ctx.pages.resolve_page(title) if ctx.pages else None
            if page is None:
                raise PageNotFound(title)
            pageid = page.id
        checked = True

    primary = file_path(ctx, filename, pageid) if checked else filename
    alternate = file_path(ctx, filename, pageid, alternate=True) if checked else ""

    if checked and not (os.path.exists(primary) or os.path.exists(alternate)):
        log.info("Image not found: %s (also tried %s)", primary, alternate)
        raise ResourceNotFound(primary)

    if extension(filename) not in ctx.settings.image_extensions:
        raise UnsupportedType(filename)

    return ResolvedResource(
        filename=filename,
        path=primary,
        alternate_path=alternate,
        display_link=await display_link(ctx, filename, pageid),
        exists=True,
        description=description,
    )
