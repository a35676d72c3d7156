#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
SQL-backed page and attachment directories, the lookups macros use to
resolve ``Page:file`` and numeric attachment specs.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from wikimacros.models import Attachment, Page
from wikimacros.services.macros.context import AttachmentRef, MacroContext, PageRef


# -----------------------------------------------------------------------------

def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _page_ref(page: Page) -> PageRef:
    return PageRef(id=page.id, title=page.title, link=page.link())


def _attachment_ref(att: Attachment) -> AttachmentRef:
    return AttachmentRef(
        id=att.id,
        page_id=att.page_id,
        filename=att.filename,
        description=att.description,
        created_at=att.created_at,
        uploader_id=att.created_by,
        uploader_name=att.uploader.name if att.uploader else "",
    )


# -----------------------------------------------------------------------------

class SqlPageDirectory:

    def __init__(self, db: AsyncSession, scope: str = "") -> None:
        self.db = db
        self.scope = scope

    async def resolve_page(self, title: str) -> Optional[PageRef]:
        """Find a page by title (or page name) within the directory's scope."""
        title = title.strip()
        result = await self.db.execute(
            select(Page)
            .where(
                Page.scope == self.scope,
                (Page.title == title) | (Page.pagename == title),
            )
            .order_by(Page.id)
            .limit(1)
        )
        page = result.scalar_one_or_none()
        return _page_ref(page) if page else None

    async def get_page(self, page_id: int) -> Optional[PageRef]:
        page = await self.db.get(Page, page_id)
        return _page_ref(page) if page else None


# -----------------------------------------------------------------------------

class SqlAttachmentDirectory:

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def resolve_attachment(self, attachment_id: int) -> Optional[AttachmentRef]:
        result = await self.db.execute(
            select(Attachment)
            .where(Attachment.id == attachment_id)
            .options(selectinload(Attachment.uploader))
        )
        att = result.scalar_one_or_none()
        return _attachment_ref(att) if att else None

    async def list_for_page(self, page_id: int, prefix: str = "") -> list[AttachmentRef]:
        query = (
            select(Attachment)
            .where(Attachment.page_id == page_id)
            .options(selectinload(Attachment.uploader))
            .order_by(Attachment.created_at, Attachment.id)
        )
        if prefix:
            pattern = _escape_like(prefix.lower()) + "%"
            query = query.where(func.lower(Attachment.filename).like(pattern, escape="\\"))
        result = await self.db.execute(query)
        return [_attachment_ref(a) for a in result.scalars().all()]


# -----------------------------------------------------------------------------

def sql_context(
    db: AsyncSession,
    pagename: str = "",
    pageid: Optional[int] = None,
    scope: str = "",
    printable: bool = False,
) -> MacroContext:
    """MacroContext whose collaborators answer from *db*."""
    return MacroContext(
        pagename=pagename,
        pageid=pageid,
        scope=scope,
        printable=printable,
        pages=SqlPageDirectory(db, scope),
        attachments=SqlAttachmentDirectory(db),
    )
