#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the Twitter macro."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from wikimacros.services.macros import macro_registry
from wikimacros.services.macros.macro_twitter import INVALID, WIDGET_SCRIPT


# -----------------------------------------------------------------------------

@pytest.fixture
def twitter(ctx):
    macro = macro_registry.get("Twitter")

    async def render(args):
        return await macro.render(args, ctx)
    return render


# -----------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_user_timeline(twitter):
    assert await twitter("@hubzero, 2") == (
        '<a class="twitter-timeline" data-widget-id="346714310770302976" '
        'href="https://twitter.com/hubzero" data-screen-name="hubzero" '
        'width="100%" height="500" data-chrome="" data-tweet-limit="2">'
        "Loading Tweets...</a>\n" + WIDGET_SCRIPT
    )


@pytest.mark.asyncio
async def test_numeric_name_is_widget_id(twitter):
    out = await twitter("1234")
    assert 'data-widget-id="1234"' in out
    assert "346714310770302976" not in out


@pytest.mark.asyncio
async def test_options(twitter):
    out = await twitter('@hubzero, widgetid="99", chrome="noheader", width="300", height="400"')
    assert 'data-widget-id="99"' in out
    assert "data-screen-name" not in out
    assert 'width="300" height="400" data-chrome="noheader"' in out
    assert "data-tweet-limit" not in out


@pytest.mark.asyncio
async def test_defaults_from_settings(twitter, ctx):
    ctx.settings.twitter_height = "250"
    assert 'height="250"' in await twitter("@hubzero")


@pytest.mark.asyncio
@pytest.mark.parametrize("args", [None, "", "  ", "#hashtag"])
async def test_invalid(twitter, args):
    assert await twitter(args) == INVALID


# -----------------------------------------------------------------------------
