#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -----------------------------------------------------------------------------

CONTENT_FORMATS = ("markdown", "html")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PageCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=512)
    pagename: str = Field(default="", max_length=512)
    scope: str = Field(default="", max_length=255)
    content: str = ""

    @field_validator("scope")
    @classmethod
    def strip_scope(cls, v: str) -> str:
        return v.strip("/")


class PageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    pagename: str
    scope: str
    link: str
    created_at: datetime


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Attachments
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AttachmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    page_id: int
    filename: str
    description: str
    size_bytes: int
    created_by: Optional[int] = None
    created_at: datetime
    url: str = ""


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderRequest(BaseModel):
    content: str = Field(default="", max_length=1_000_000)
    format: str = "markdown"
    pagename: str = ""
    pageid: Optional[int] = None
    scope: str = ""
    printable: bool = False

    @field_validator("format")
    @classmethod
    def known_format(cls, v: str) -> str:
        v = v.lower()
        if v not in CONTENT_FORMATS:
            raise ValueError(f"format must be one of {', '.join(CONTENT_FORMATS)}")
        return v


class RenderResponse(BaseModel):
    html: str
    format: str


class MacroInfo(BaseModel):
    name: str
    description: str
