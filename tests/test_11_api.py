#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the HTTP API: pages, attachments, render preview and image route."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.conftest import create_page, upload


# -----------------------------------------------------------------------------

PNG = b"\x89PNG\r\n\x1a\n"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_list_macros(client: AsyncClient):
    resp = await client.get("/api/v1/macros")
    assert resp.status_code == 200
    assert [m["name"] for m in resp.json()] == ["FileIndex", "Footnote", "Image", "Twitter"]


# ── Pages ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_page(client: AsyncClient):
    page = await create_page(client, "Lab Notes", scope="/groups/physics/")
    assert page["pagename"] == "LabNotes"
    assert page["scope"] == "groups/physics"
    assert page["link"] == "/wiki/groups/physics/LabNotes"

    resp = await client.get(f"/api/v1/pages/{page['id']}")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Lab Notes"


@pytest.mark.asyncio
async def test_duplicate_page(client: AsyncClient):
    await create_page(client, "Lab Notes")
    resp = await client.post("/api/v1/pages", json={"title": "Lab Notes"})
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_missing_page(client: AsyncClient):
    resp = await client.get("/api/v1/pages/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Page 999 not found"


# ── Attachments ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_upload_and_list(client: AsyncClient, app_settings):
    page = await create_page(client)
    att = await upload(client, page["id"], "photo.png", PNG, description="Bench")
    assert att["filename"] == "photo.png"
    assert att["size_bytes"] == len(PNG)
    assert att["url"] == f"/site/wiki/{page['id']}/photo.png"
    assert (app_settings.upload_root / str(page["id"]) / "photo.png").read_bytes() == PNG

    resp = await client.get(f"/api/v1/pages/{page['id']}/attachments")
    assert [a["filename"] for a in resp.json()] == ["photo.png"]


@pytest.mark.asyncio
async def test_reupload_replaces(client: AsyncClient):
    page = await create_page(client)
    first = await upload(client, page["id"], "photo.png", b"one")
    second = await upload(client, page["id"], "photo.png", b"three")
    assert second["id"] == first["id"]
    assert second["size_bytes"] == 5


@pytest.mark.asyncio
async def test_upload_to_missing_page(client: AsyncClient):
    resp = await client.post(
        "/api/v1/pages/999/attachments",
        files={"file": ("photo.png", PNG, "image/png")},
    )
    assert resp.status_code == 404


# ── Rendering ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_render_image(client: AsyncClient):
    page = await create_page(client)
    await upload(client, page["id"], "photo.png", PNG)
    resp = await client.post("/api/v1/render", json={
        "content": "[[Image(photo.png, right)]]",
        "format": "html",
        "pagename": "LabNotes",
        "pageid": page["id"],
    })
    assert resp.status_code == 200
    assert resp.json()["html"] == (
        '<span class="figure" style="float:right; margin-left:1em">'
        '<a rel="lightbox" href="/wiki/LabNotes/Image:photo.png">'
        '<img src="/wiki/LabNotes/Image:photo.png" alt="photo.png" /></a></span>'
    )


@pytest.mark.asyncio
async def test_render_attachment_by_id(client: AsyncClient):
    page = await create_page(client)
    att = await upload(client, page["id"], "photo.png", PNG, description="Bench")
    resp = await client.post("/api/v1/render", json={
        "content": f"[[Image({att['id']})]]",
        "format": "html",
    })
    html = resp.json()["html"]
    assert 'alt="Bench"' in html
    assert '<span class="figcaption">Bench</span>' in html
    assert 'src="/wiki/LabNotes/Image:photo.png"' in html


@pytest.mark.asyncio
async def test_render_other_page(client: AsyncClient):
    lab = await create_page(client)
    gallery = await create_page(client, "Gallery")
    await upload(client, gallery["id"], "chart.png", PNG)
    resp = await client.post("/api/v1/render", json={
        "content": "[[Image(Gallery:chart.png)]] [[Image(Nowhere:chart.png)]]",
        "format": "html",
        "pagename": "LabNotes",
        "pageid": lab["id"],
    })
    html = resp.json()["html"]
    assert 'src="/wiki/Gallery/Image:chart.png"' in html
    assert html.endswith("(Image(Nowhere:chart.png) failed - Wiki page not found)")


@pytest.mark.asyncio
async def test_render_markdown(client: AsyncClient):
    resp = await client.post("/api/v1/render", json={"content": "**bold**[[Footnote(n)]]"})
    data = resp.json()
    assert data["format"] == "markdown"
    assert data["html"].startswith("<p><strong>bold</strong><sup")


@pytest.mark.asyncio
async def test_render_bad_format(client: AsyncClient):
    resp = await client.post("/api/v1/render", json={"content": "x", "format": "rst"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_rendered_page_file_index(client: AsyncClient):
    page = await create_page(client, content="[[FileIndex]]")
    await upload(client, page["id"], "photo.png", PNG, description="Bench")
    resp = await client.get(f"/api/v1/pages/{page['id']}/rendered", params={"format": "html"})
    assert resp.status_code == 200
    html = resp.json()["html"]
    assert html.startswith(f'<ul><li><a href="/site/wiki/{page["id"]}/photo.png">photo.png</a> (8 b) ')
    assert '<span>"Bench"</span></li>' in html


@pytest.mark.asyncio
async def test_rendered_page_printable(client: AsyncClient, app_settings):
    page = await create_page(client, content="[[Image(photo.png, nolink)]]")
    await upload(client, page["id"], "photo.png", PNG)
    resp = await client.get(
        f"/api/v1/pages/{page['id']}/rendered",
        params={"format": "html", "printable": "true"},
    )
    path = app_settings.upload_root / str(page["id"]) / "photo.png"
    assert f'src="{path}"' in resp.json()["html"]


# ── Image route ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_image_route(client: AsyncClient):
    page = await create_page(client, scope="groups/physics")
    await upload(client, page["id"], "photo.png", PNG)

    resp = await client.get("/wiki/groups/physics/LabNotes/Image:photo.png")
    assert resp.status_code == 200
    assert resp.content == PNG

    resp = await client.get("/wiki/groups/physics/LabNotes/Image:other.png")
    assert resp.status_code == 404

    resp = await client.get("/wiki/Elsewhere/Image:photo.png")
    assert resp.status_code == 404


# -----------------------------------------------------------------------------
