#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures for WikiMacros tests.

Macro tests run against in-memory page/attachment directories and a
temporary upload root; HTTP tests use an in-memory SQLite database so no
external services are needed.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from wikimacros.core.config import Settings, get_settings
from wikimacros.core.database import Base, get_db
from wikimacros.services.macros import AttachmentRef, MacroContext, PageRef


# -----------------------------------------------------------------------------

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


# -----------------------------------------------------------------------------
# In-memory collaborators
# -----------------------------------------------------------------------------

class FakePages:
    def __init__(self, *pages: PageRef) -> None:
        self.pages = {p.id: p for p in pages}

    async def resolve_page(self, title: str) -> Optional[PageRef]:
        return next((p for p in self.pages.values() if p.title == title), None)

    async def get_page(self, page_id: int) -> Optional[PageRef]:
        return self.pages.get(page_id)


class FakeAttachments:
    def __init__(self, *attachments: AttachmentRef) -> None:
        self.attachments = {a.id: a for a in attachments}

    async def resolve_attachment(self, attachment_id: int) -> Optional[AttachmentRef]:
        return self.attachments.get(attachment_id)

    async def list_for_page(self, page_id: int, prefix: str = "") -> list[AttachmentRef]:
        return [
            a for a in self.attachments.values()
            if a.page_id == page_id and a.filename.lower().startswith(prefix.lower())
        ]


LAB     = PageRef(id=3, title="Lab", link="/wiki/Lab")
GALLERY = PageRef(id=8, title="Gallery", link="/wiki/groups/physics/Gallery")


def put_file(root: Path, page_id: int, filename: str, data: bytes = b"x",
             filepath: str = "site/wiki") -> Path:
    """Create an uploaded file where the macros expect it."""
    path = root / filepath / str(page_id) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


# -----------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(_env_file=None, app_root=tmp_path, site_root=tmp_path / "root", base_url="")


@pytest.fixture
def ctx(settings) -> MacroContext:
    """Context for rendering page 3 ("Lab") with a couple of attachments."""
    return MacroContext(
        pagename="Lab",
        pageid=3,
        pages=FakePages(LAB, GALLERY),
        attachments=FakeAttachments(
            AttachmentRef(id=11, page_id=3, filename="bench.png", description="The bench"),
            AttachmentRef(id=12, page_id=3, filename="notes.txt"),
            AttachmentRef(id=13, page_id=3, filename="ghost.png"),
        ),
        settings=settings,
    )


# -----------------------------------------------------------------------------
# Database / HTTP
# -----------------------------------------------------------------------------

@pytest.fixture
def app_settings(tmp_path, monkeypatch):
    """Point the cached application settings at a temporary upload root."""
    monkeypatch.setenv("APP_ROOT", str(tmp_path))
    monkeypatch.setenv("BASE_URL", "")
    monkeypatch.setenv("ENVIRONMENT", "testing")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    engine = create_async_engine(
        TEST_DB_URL,
        echo=False,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session_factory(db_engine):
    """One sessionmaker for the HTTP client and direct test sessions."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(db_session_factory):
    """Direct DB session for test setup."""
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(app_settings, db_engine, db_session_factory):
    """HTTP test client wired to an isolated in-memory DB."""
    from wikimacros.main import create_app

    async def override_get_db():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Helper functions for tests
# -----------------------------------------------------------------------------

async def create_page(client: AsyncClient, title: str = "Lab Notes", content: str = "",
                      scope: str = "") -> dict:
    resp = await client.post("/api/v1/pages", json={
        "title": title, "content": content, "scope": scope,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


async def upload(client: AsyncClient, page_id: int, filename: str,
                 data: bytes = b"\x89PNG\r\n", description: str = "") -> dict:
    resp = await client.post(
        f"/api/v1/pages/{page_id}/attachments",
        files={"file": (filename, data, "application/octet-stream")},
        data={"description": description},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


# -----------------------------------------------------------------------------
