#!/usr/bin/env python
#
#
# ----------------------------------------------------------------------------
"""
Image router
============
GET /wiki/{scope/pagename}/Image:{filename}   — the file an Image macro links to
"""
# ----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from wikimacros.core.database import get_db
from wikimacros.services import pages as page_svc
from wikimacros.services.attachments import storage_path
from wikimacros.services.macros.image.locator import extension


# ----------------------------------------------------------------------------

router = APIRouter(tags=["images"])


# ----------------------------------------------------------------------------

@router.get("/wiki/{page_path:path}/Image:{filename}")
async def serve_image(
    page_path: str,
    filename: str,
    db: AsyncSession = Depends(get_db),
):
    page = await page_svc.get_page_by_path(db, page_path)
    abs_path = storage_path(page.id, filename)
    if not abs_path.is_file():
        raise HTTPException(status_code=404, detail="File not found on disk")
    media_type = "image/svg+xml" if extension(filename) == "svg" else None
    return FileResponse(str(abs_path), media_type=media_type, filename=filename)


# ----------------------------------------------------------------------------
