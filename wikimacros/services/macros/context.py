#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
MacroContext: per-render state passed to every macro.

Macros reach pages, attachments and routes only through the collaborators
held here, so a render can be driven by the SQL-backed directories in
``wikimacros.services.directory`` or by in-memory fakes.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

from wikimacros.core.config import Settings, get_settings
from wikimacros.core.routing import build_route, member_route
from .macro_footnote import FootnoteSession


# -----------------------------------------------------------------------------
# Collaborator records
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PageRef:
    id: int
    title: str
    link: str


@dataclass(frozen=True)
class AttachmentRef:
    id: int
    page_id: int
    filename: str
    description: str = ""
    created_at: Optional[datetime] = None
    uploader_id: Optional[int] = None
    uploader_name: str = ""


# -----------------------------------------------------------------------------
# Collaborator interfaces
# -----------------------------------------------------------------------------

class PageDirectory(Protocol):
    async def resolve_page(self, title: str) -> Optional[PageRef]: ...

    async def get_page(self, page_id: int) -> Optional[PageRef]: ...


class AttachmentDirectory(Protocol):
    async def resolve_attachment(self, attachment_id: int) -> Optional[AttachmentRef]: ...

    async def list_for_page(self, page_id: int, prefix: str = "") -> list[AttachmentRef]: ...


# -----------------------------------------------------------------------------

@dataclass
class MacroContext:
    """
    Carries the render-time context into every macro call.

    Attributes
    ----------
    pagename : str
        URL name of the page being rendered.
    pageid : int | None
        Id of the page being rendered; negative for a page that has not
        been saved yet, None when rendering outside a page.
    scope : str
        Hierarchical prefix of the page (``groups/physics``).
    option : str
        Component name; its ``com_`` suffix is the route prefix for pages
        rendered without an id.
    filepath : str
        Upload path override (e.g. a group's wiki folder); empty means the
        configured ``wiki_filepath``.
    printable : bool
        Rendering for PDF export; image links point at filesystem paths.
    pages / attachments
        Collaborators answering page and attachment lookups.
    """

    pagename: str = ""
    pageid: Optional[int] = None
    scope: str = ""
    option: str = ""
    filepath: str = ""
    printable: bool = False
    base_url: Optional[str] = None
    pages: Optional[PageDirectory] = None
    attachments: Optional[AttachmentDirectory] = None
    settings: Settings = field(default_factory=get_settings)
    footnotes: FootnoteSession = field(default_factory=FootnoteSession)

    # ------------------------------------------------------------------ helpers

    @property
    def upload_filepath(self) -> str:
        return self.filepath or self.settings.wiki_filepath

    @property
    def route_option(self) -> str:
        return self.option or self.settings.wiki_option

    def route(self, path: str) -> str:
        base = self.settings.base_url if self.base_url is None else self.base_url
        return build_route(path, base)

    def member_link(self, user_id: int) -> str:
        base = self.settings.base_url if self.base_url is None else self.base_url
        return member_route(user_id, base)
