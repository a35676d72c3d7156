#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoints: macro expansion for the editor preview.

POST /api/v1/render   {"content": "...", "format": "markdown", "pageid": 3}
GET  /api/v1/macros   — available macros and their help text
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wikimacros.core.database import get_db
from wikimacros.schemas import MacroInfo, RenderRequest, RenderResponse
from wikimacros.services.directory import sql_context
from wikimacros.services.macros import macro_registry
from wikimacros.services.renderer import render_page


# -----------------------------------------------------------------------------

router = APIRouter(tags=["render"])


# -----------------------------------------------------------------------------

@router.post("/render", response_model=RenderResponse)
async def render_preview(
    body: RenderRequest,
    db:   AsyncSession = Depends(get_db),
):
    """Rendered HTML for a snippet of wiki text, for the live editor preview."""
    ctx = sql_context(
        db,
        pagename=body.pagename,
        pageid=body.pageid,
        scope=body.scope,
        printable=body.printable,
    )
    html = await render_page(body.content, ctx, body.format)
    return {"html": html, "format": body.format}


# -----------------------------------------------------------------------------

@router.get("/macros", response_model=list[MacroInfo])
async def list_macros():
    return macro_registry.describe()


# -----------------------------------------------------------------------------
