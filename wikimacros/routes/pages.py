#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pages router
============
POST /api/v1/pages                          — create page
GET  /api/v1/pages/{page_id}                — page metadata
GET  /api/v1/pages/{page_id}/rendered       — page content with macros expanded
GET  /api/v1/pages/{page_id}/attachments    — list attachments
POST /api/v1/pages/{page_id}/attachments    — upload attachment
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from wikimacros.core.database import get_db
from wikimacros.models import Attachment, Page
from wikimacros.schemas import (
    CONTENT_FORMATS,
    AttachmentResponse, PageCreate, PageResponse, RenderResponse,
)
from wikimacros.services import attachments as att_svc
from wikimacros.services import pages as page_svc
from wikimacros.services.directory import sql_context
from wikimacros.services.renderer import render_page


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/pages", tags=["pages"])


# ── Create ───────────────────────────────────────────────────────────────────

@router.post("", response_model=PageResponse, status_code=201)
async def create_page(
    body: PageCreate,
    db: AsyncSession = Depends(get_db),
):
    page = await page_svc.create_page(db, body)
    return _page_dict(page)


# ── Read ─────────────────────────────────────────────────────────────────────

@router.get("/{page_id}", response_model=PageResponse)
async def get_page(
    page_id: int,
    db: AsyncSession = Depends(get_db),
):
    return _page_dict(await page_svc.get_page(db, page_id))


@router.get("/{page_id}/rendered", response_model=RenderResponse)
async def get_rendered_page(
    page_id: int,
    format:  str  = Query(default="markdown", pattern=f"^({'|'.join(CONTENT_FORMATS)})$"),
    printable: bool = Query(default=False),
    db: AsyncSession = Depends(get_db),
):
    page = await page_svc.get_page(db, page_id)
    ctx = sql_context(db, pagename=page.pagename, pageid=page.id, scope=page.scope, printable=printable)
    return {"html": await render_page(page.content, ctx, format), "format": format}


# ── Attachments ──────────────────────────────────────────────────────────────

@router.get("/{page_id}/attachments", response_model=list[AttachmentResponse])
async def list_page_attachments(
    page_id: int,
    db: AsyncSession = Depends(get_db),
):
    return [_att_dict(a) for a in await att_svc.list_attachments(db, page_id)]


@router.post("/{page_id}/attachments", response_model=AttachmentResponse, status_code=201)
async def upload_page_attachment(
    page_id: int,
    file: UploadFile,
    description: str           = Form(default=""),
    uploaded_by: Optional[int] = Form(default=None),
    db: AsyncSession           = Depends(get_db),
):
    att = await att_svc.upload_attachment(db, page_id, file, description=description, uploaded_by=uploaded_by)
    return _att_dict(att)


# -----------------------------------------------------------------------------

def _page_dict(page: Page) -> dict:
    return {
        "id":         page.id,
        "title":      page.title,
        "pagename":   page.pagename,
        "scope":      page.scope,
        "link":       page.link(),
        "created_at": page.created_at,
    }


def _att_dict(att: Attachment) -> dict:
    return {
        "id":          att.id,
        "page_id":     att.page_id,
        "filename":    att.filename,
        "description": att.description,
        "size_bytes":  att.size_bytes,
        "created_by":  att.created_by,
        "created_at":  att.created_at,
        "url":         att_svc.attachment_url(att),
    }


# -----------------------------------------------------------------------------
