#!/usr/bin/env python
#
#
# ----------------------------------------------------------------------------
"""
ORM Models for WikiMacros
=========================

Tables
------
users        — members credited as attachment uploaders
pages        — wiki pages, the integer id doubles as the upload folder name
attachments  — files uploaded to a page

Macros resolve ``Page:file`` specs by page title and bare numeric specs by
attachment id, so both tables use integer primary keys.
Timestamps stored in UTC.
"""
# ----------------------------------------------------------------------------

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger, DateTime, ForeignKey, Integer,
    String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wikimacros.core.database import Base


# ----------------------------------------------------------------------------

def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# users
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class User(Base):
    __tablename__ = "users"

    id:         Mapped[int]      = mapped_column(Integer, primary_key=True, autoincrement=True)
    username:   Mapped[str]      = mapped_column(String(64), unique=True, nullable=False, index=True)
    name:       Mapped[str]      = mapped_column(String(128), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    attachments: Mapped[list["Attachment"]] = relationship(back_populates="uploader")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# pages
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Page(Base):
    """
    A wiki page.  ``scope`` is the hierarchical prefix the page lives under
    (e.g. ``groups/physics``) and ``pagename`` its URL name.
    """
    __tablename__ = "pages"
    __table_args__ = (
        UniqueConstraint("scope", "pagename", name="uq_pages_scope_name"),
    )

    id:         Mapped[int]      = mapped_column(Integer, primary_key=True, autoincrement=True)
    title:      Mapped[str]      = mapped_column(String(512), nullable=False, index=True)
    pagename:   Mapped[str]      = mapped_column(String(512), nullable=False, index=True)
    scope:      Mapped[str]      = mapped_column(String(255), nullable=False, default="")
    content:    Mapped[str]      = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    attachments: Mapped[list["Attachment"]] = relationship(
        back_populates="page",
        cascade="all, delete-orphan",
    )

    def link(self) -> str:
        """Site path of the page, e.g. ``/wiki/groups/physics/Lab``."""
        scope = self.scope.strip("/")
        return "/wiki/" + (f"{scope}/" if scope else "") + self.pagename


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# attachments
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Attachment(Base):
    __tablename__ = "attachments"
    __table_args__ = (
        UniqueConstraint("page_id", "filename", name="uq_attachments_page_file"),
    )

    id:          Mapped[int]        = mapped_column(Integer, primary_key=True, autoincrement=True)
    page_id:     Mapped[int]        = mapped_column(Integer, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False, index=True)
    filename:    Mapped[str]        = mapped_column(String(255), nullable=False)
    description: Mapped[str]        = mapped_column(String(512), default="", nullable=False)
    size_bytes:  Mapped[int]        = mapped_column(BigInteger, default=0, nullable=False)
    created_by:  Mapped[int | None] = mapped_column(Integer, ForeignKey("users.id"), nullable=True)
    created_at:  Mapped[datetime]   = mapped_column(DateTime(timezone=True), default=_utcnow)

    page:     Mapped["Page"]        = relationship(back_populates="attachments")
    uploader: Mapped["User | None"] = relationship(back_populates="attachments")
