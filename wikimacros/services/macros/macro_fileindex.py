#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
FileIndex macro
---------------
[[FileIndex]]          list every file attached to the current page
[[FileIndex(report)]]  only files whose name starts with "report"

Files are listed oldest first with their size, uploader, age and
description.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
import os
import re
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from .registry import Macro, macro_registry

if TYPE_CHECKING:
    from .context import AttachmentRef, MacroContext


# -----------------------------------------------------------------------------

_TAG_RE = re.compile(r"<[^>]*>")

_UNITS = ["b", "Kb", "Mb", "Gb", "Tb"]


def format_bytes(size: int, precision: int = 2) -> str:
    """``1536`` → ``1.5 Kb``."""
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"


def relative_date(when: datetime, now: Optional[datetime] = None) -> str:
    """Human age of *when*: ``"3 days ago"``, ``"just now"``."""
    now = now or datetime.now(tz=timezone.utc)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    seconds = int((now - when).total_seconds())
    if seconds < 60:
        return "just now"
    for length, label in ((31536000, "year"), (2592000, "month"), (604800, "week"),
                          (86400, "day"), (3600, "hour"), (60, "minute")):
        if seconds >= length:
            n = seconds // length
            return f"{n} {label}{'' if n == 1 else 's'} ago"
    return "just now"


# -----------------------------------------------------------------------------

def _item(att: "AttachmentRef", ctx: "MacroContext") -> str:
    settings = ctx.settings
    filepath = ctx.upload_filepath.strip("/")
    link  = ctx.route(f"/{filepath}/{att.page_id}/{att.filename}")
    fpath = os.path.join(str(settings.app_root), filepath, str(att.page_id), att.filename)

    size = format_bytes(os.path.getsize(fpath)) if os.path.exists(fpath) else "-- file not found --"
    out = f'<li><a href="{html.escape(link)}">{html.escape(att.filename)}</a> ({size}) '
    if att.uploader_id:
        out += (
            f'- added by <a href="{html.escape(ctx.member_link(att.uploader_id))}">'
            f'{html.escape(att.uploader_name)}</a> '
        )
    if att.created_at:
        out += relative_date(att.created_at) + ". "
    if att.description:
        out += f'<span>"{html.escape(att.description, quote=False)}"</span>'
    return out + "</li>\n"


# -----------------------------------------------------------------------------

@macro_registry.register
class FileIndexMacro(Macro):
    name = "FileIndex"
    description = (
        "Inserts a list of all files and images attached to this page "
        "into the output. Accepts a prefix string as parameter: if provided, only "
        "files with names that start with the prefix are included in the resulting "
        "list. If this parameter is omitted, all files are listed."
    )

    async def render(self, args: Optional[str], ctx: "MacroContext") -> str:
        prefix = _TAG_RE.sub("", args or "").strip()

        rows: list = []
        if ctx.attachments is not None and ctx.pageid:
            rows = await ctx.attachments.list_for_page(ctx.pageid, prefix)

        if not rows:
            return f"(No {html.escape(prefix)} files to display)"

        return "<ul>" + "".join(_item(att, ctx) for att in rows) + "</ul>"
