#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Route builder: turns site-relative paths into the URLs placed in generated
HTML.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from urllib.parse import quote

from .config import get_settings


# -----------------------------------------------------------------------------

def build_route(path: str, base_url: str | None = None) -> str:
    """Return the public URL for site path *path*.

    Absolute URLs are returned untouched.  Spaces and other unsafe
    characters in the path are percent-encoded; ``/``, ``:`` and query
    characters are kept.
    """
    if "://" in path:
        return path
    if base_url is None:
        base_url = get_settings().base_url
    path = "/" + path.lstrip("/")
    return base_url.rstrip("/") + quote(path, safe="/:?=&%@#~")


# -----------------------------------------------------------------------------

def member_route(user_id: int, base_url: str | None = None) -> str:
    return build_route(f"/members/{user_id}", base_url)


# -----------------------------------------------------------------------------
