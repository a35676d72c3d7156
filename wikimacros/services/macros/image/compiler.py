#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
HTML compiler for the Image macro.

Output shape::

    <span class="figure" style="float:right; margin-left:1em">
      <a rel="lightbox" href="/wiki/Page/Image:photo.jpg">
        <img src="/wiki/Page/Image:photo.jpg" alt="photo.jpg" />
      </a>
      <span class="figcaption">Caption</span>
    </span>

(emitted without the whitespace).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html

from .model import AttributeModel, LinkMode, ResolvedResource


# Attributes that never end up on the <img> tag
_SKIP_ATTRS = {"href", "rel", "desc", "style", "alt", "src"}


# -----------------------------------------------------------------------------

def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def alt_text(model: AttributeModel, resource: ResolvedResource) -> str:
    return (
        model.html_attrs.get("alt")
        or model.caption
        or resource.description
        or resource.filename
    )


def img_tag(model: AttributeModel, resource: ResolvedResource) -> str:
    attrs = [f'alt="{_escape(alt_text(model, resource))}"']
    for key, value in model.html_attrs.items():
        value = value.strip('"')
        if key in _SKIP_ATTRS or not value:
            continue
        attrs.append(f'{key}="{_escape(value)}"')
    return f'<img src="{_escape(resource.display_link)}" {" ".join(attrs)} />'


# -----------------------------------------------------------------------------

def compile_html(model: AttributeModel, resource: ResolvedResource) -> str:
    """Render the figure for *resource* styled by *model*."""
    style = model.style_text
    span  = "<span"
    if not model.no_figure:
        span += ' class="figure"'
    if style:
        span += f' style="{_escape(style)}"'
    parts = [span + ">"]

    img = img_tag(model, resource)
    if model.link is LinkMode.NONE:
        parts.append(img)
    else:
        href = model.link_target if model.link is LinkMode.EXTERNAL else resource.display_link
        rel  = "external" if model.rel_external else "lightbox"
        parts.append(f'<a rel="{rel}" href="{_escape(href)}">{img}</a>')

    caption = model.caption or resource.description
    if caption:
        parts.append(f'<span class="figcaption">{_escape(caption)}</span>')

    parts.append("</span>")
    return "".join(parts)
