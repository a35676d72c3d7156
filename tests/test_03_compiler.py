#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for Image macro HTML output."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from wikimacros.services.macros.image import compile_html, resolve, scan
from wikimacros.services.macros.image.compiler import alt_text, img_tag
from wikimacros.services.macros.image.model import AttributeModel, ResolvedResource


# -----------------------------------------------------------------------------

LINK = "/wiki/Lab/Image:photo.jpg"


@pytest.fixture
def resource() -> ResolvedResource:
    return ResolvedResource(
        filename="photo.jpg",
        path="/data/site/wiki/3/photo.jpg",
        display_link=LINK,
        exists=True,
    )


def html_for(options: str, resource: ResolvedResource) -> str:
    return compile_html(resolve(scan(options)), resource)


# -----------------------------------------------------------------------------

def test_plain_figure(resource):
    assert html_for("", resource) == (
        f'<span class="figure"><a rel="lightbox" href="{LINK}">'
        f'<img src="{LINK}" alt="photo.jpg" /></a></span>'
    )


def test_right_aligned_figure(resource):
    assert html_for(", right", resource) == (
        f'<span class="figure" style="float:right; margin-left:1em">'
        f'<a rel="lightbox" href="{LINK}"><img src="{LINK}" alt="photo.jpg" /></a></span>'
    )


def test_nolink_has_no_anchor(resource):
    out = html_for(", nolink", resource)
    assert "<a " not in out
    assert out == f'<span class="figure"><img src="{LINK}" alt="photo.jpg" /></span>'


def test_nofigure_drops_class_and_anchor(resource):
    assert html_for(", nofigure", resource) == f'<span><img src="{LINK}" alt="photo.jpg" /></span>'


def test_external_link(resource):
    out = html_for(", link=http://example.com/page", resource)
    assert f'<a rel="external" href="http://example.com/page"><img src="{LINK}"' in out


def test_internal_link_target(resource):
    out = html_for(", link=/wiki/Other", resource)
    assert '<a rel="lightbox" href="/wiki/Other">' in out


def test_caption_is_escaped(resource):
    out = html_for(', desc="Bench & <vise>"', resource)
    assert 'alt="Bench &amp; &lt;vise&gt;"' in out
    assert '<span class="figcaption">Bench &amp; &lt;vise&gt;</span></span>' in out


def test_description_used_when_no_caption(resource):
    resource.description = "From the archive"
    out = html_for("", resource)
    assert 'alt="From the archive"' in out
    assert '<span class="figcaption">From the archive</span>' in out


def test_size_attribute_on_img(resource):
    out = html_for(", 120px, class=mypic", resource)
    assert out.startswith('<span class="figure" style="width:120px">')
    assert f'<img src="{LINK}" alt="photo.jpg" width="120" class="mypic" />' in out


# ── <img> attributes ─────────────────────────────────────────────────────────

def test_alt_attribute_wins(resource):
    model = AttributeModel(caption="Caption", html_attrs={"alt": "Alt text"})
    assert alt_text(model, resource) == "Alt text"
    assert img_tag(model, resource) == f'<img src="{LINK}" alt="Alt text" />'


def test_empty_and_reserved_attributes_skipped(resource):
    model = AttributeModel(html_attrs={"title": "", "src": "x.png", "style": "color:red", "id": "f1"})
    assert img_tag(model, resource) == f'<img src="{LINK}" alt="photo.jpg" id="f1" />'


def test_attribute_values_escaped(resource):
    model = AttributeModel(html_attrs={"title": "a<b"})
    assert 'title="a&lt;b"' in img_tag(model, resource)


# -----------------------------------------------------------------------------
