#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
WikiMacros HTTP service.

    uvicorn wikimacros.main:app --reload

Serves the render preview, page/attachment management and the
``/wiki/<page>/Image:<file>`` links that Image macros emit.  Uploaded files
are also reachable directly under ``/<wiki_filepath>/<page id>/<file>``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from wikimacros.core.config import Settings, get_settings
from wikimacros.core.database import create_all_tables, init_db
from wikimacros.routes import images, pages, render

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    init_db(settings.database_url)
    await create_all_tables()
    settings.upload_root.mkdir(parents=True, exist_ok=True)
    log.info("%s %s serving uploads from %s", settings.app_name, settings.app_version, settings.upload_root)
    yield
    log.info("%s shutting down", settings.app_name)


# ── Wiring ───────────────────────────────────────────────────────────────────

def _mount_routes(app: FastAPI, settings: Settings) -> None:
    api = "/api/v1"
    app.include_router(pages.router, prefix=api)
    app.include_router(render.router, prefix=api)
    # macro links are site paths, not API paths
    app.include_router(images.router)

    app.mount(
        "/" + settings.wiki_filepath.strip("/"),
        StaticFiles(directory=str(settings.upload_root), check_dir=False),
        name="uploads",
    )

    @app.get("/api/health", tags=["system"])
    async def health():
        return {"status": "ok", "app": settings.app_name, "version": settings.app_version}


def _add_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(404)
    async def not_found(request: Request, exc):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": getattr(exc, "detail", None) or "Not found"},
        )

    @app.exception_handler(500)
    async def server_error(request: Request, exc):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


# -----------------------------------------------------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Expands [[Image]], [[FileIndex]], [[Footnote]] and [[Twitter]] wiki macros to HTML.",
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    _mount_routes(app, settings)
    _add_error_handlers(app)
    return app


app = create_app()


# -----------------------------------------------------------------------------
