#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Page service: create and look up the pages macros attach files to.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wikimacros.models import Page
from wikimacros.schemas import PageCreate


# -----------------------------------------------------------------------------

def pagename_for(title: str) -> str:
    """Convert a page title to its URL name: ``"Lab Notes"`` → ``"LabNotes"``."""
    words = re.sub(r"[^\w\s-]", "", title).split()
    return "".join(w[:1].upper() + w[1:] for w in words)


# -----------------------------------------------------------------------------

async def create_page(db: AsyncSession, data: PageCreate) -> Page:
    pagename = data.pagename or pagename_for(data.title)

    exists = await db.execute(
        select(Page).where(Page.scope == data.scope, Page.pagename == pagename)
    )
    if exists.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Page '{pagename}' already exists",
        )

    page = Page(title=data.title, pagename=pagename, scope=data.scope, content=data.content)
    db.add(page)
    await db.flush()
    await db.refresh(page)
    return page


# -----------------------------------------------------------------------------

async def get_page(db: AsyncSession, page_id: int) -> Page:
    page = await db.get(Page, page_id)
    if not page:
        raise HTTPException(status_code=404, detail=f"Page {page_id} not found")
    return page


# -----------------------------------------------------------------------------

async def get_page_by_path(db: AsyncSession, path: str) -> Page:
    """Look up a page by ``scope/pagename`` as it appears in page links."""
    scope, _, pagename = path.strip("/").rpartition("/")
    result = await db.execute(
        select(Page).where(Page.scope == scope, Page.pagename == pagename)
    )
    page = result.scalar_one_or_none()
    if not page:
        raise HTTPException(status_code=404, detail=f"Page '{path}' not found")
    return page


# -----------------------------------------------------------------------------
