#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
"""
Expand wiki macros in a text file and print the HTML.

    python scripts/expand.py page.txt --page 3
    python scripts/expand.py page.txt --page 3 --format html --printable
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from wikimacros.core.config import get_settings
from wikimacros.core.database import create_all_tables, init_db, session_scope
from wikimacros.models import Page
from wikimacros.services.directory import sql_context
from wikimacros.services.renderer import render_page


# -----------------------------------------------------------------------------

async def expand(source: Path, page_id: int | None, fmt: str, printable: bool) -> str:
    settings = get_settings()
    init_db(settings.database_url)
    await create_all_tables()

    async with session_scope() as db:
        page = await db.get(Page, page_id) if page_id else None
        if page_id and page is None:
            raise SystemExit(f"No page with id {page_id}")
        ctx = sql_context(
            db,
            pagename=page.pagename if page else source.stem,
            pageid=page.id if page else None,
            scope=page.scope if page else "",
            printable=printable,
        )
        return await render_page(source.read_text(encoding="utf-8"), ctx, fmt)


# -----------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Expand wiki macros in FILE")
    parser.add_argument("file", type=Path)
    parser.add_argument("--page", type=int, default=None, help="id of the page the text belongs to")
    parser.add_argument("--format", default="markdown", choices=["markdown", "html"])
    parser.add_argument("--printable", action="store_true", help="link images by filesystem path")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print(asyncio.run(expand(args.file, args.page, args.format, args.printable)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
