#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Attachment service: upload and list files attached to a page.

Files are written to ``<app_root>/<wiki_filepath>/<page id>/<filename>``,
the layout the Image and FileIndex macros read from.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import HTTPException, UploadFile, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wikimacros.core.config import get_settings
from wikimacros.core.routing import build_route
from wikimacros.models import Attachment
from .pages import get_page

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def storage_path(page_id: int, filename: str) -> Path:
    return get_settings().upload_root / str(page_id) / filename


# -----------------------------------------------------------------------------

async def upload_attachment(
    db: AsyncSession,
    page_id: int,
    file: UploadFile,
    description: str = "",
    uploaded_by: Optional[int] = None,
) -> Attachment:
    settings = get_settings()

    page = await get_page(db, page_id)

    data = await file.read()
    if len(data) > settings.max_attachment_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds maximum size of {settings.max_attachment_bytes // 1024 // 1024} MB",
        )

    filename = Path(file.filename or "upload").name
    abs_path = storage_path(page.id, filename)
    abs_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiofiles.open(abs_path, "wb") as f:
        await f.write(data)
    log.info("Stored %s (%d bytes) for page %s", filename, len(data), page.id)

    # Upsert: replace existing attachment with same filename
    existing = await db.execute(
        select(Attachment).where(
            Attachment.page_id == page.id,
            Attachment.filename == filename,
        )
    )
    att = existing.scalar_one_or_none()
    if att:
        att.size_bytes  = len(data)
        att.description = description
        att.created_by  = uploaded_by
    else:
        att = Attachment(
            page_id=page.id,
            filename=filename,
            description=description,
            size_bytes=len(data),
            created_by=uploaded_by,
        )
        db.add(att)

    await db.flush()
    await db.refresh(att)
    return att


# -----------------------------------------------------------------------------

async def list_attachments(db: AsyncSession, page_id: int) -> list[Attachment]:
    await get_page(db, page_id)
    result = await db.execute(
        select(Attachment)
        .where(Attachment.page_id == page_id)
        .order_by(Attachment.filename)
    )
    return list(result.scalars().all())


# -----------------------------------------------------------------------------

def attachment_url(att: Attachment) -> str:
    filepath = get_settings().wiki_filepath.strip("/")
    return build_route(f"/{filepath}/{att.page_id}/{att.filename}")


# -----------------------------------------------------------------------------
