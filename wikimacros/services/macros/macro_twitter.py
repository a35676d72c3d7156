#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Twitter macro
-------------
[[Twitter(@hubzeroplatform, 2)]]                 user timeline, two tweets
[[Twitter(346714310770302976)]]                  widget id (numeric)
[[Twitter(@name, widgetid="1234", chrome="noheader", width="300", height="400")]]
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING, Optional

from .registry import Macro, macro_registry

if TYPE_CHECKING:
    from .context import MacroContext


# -----------------------------------------------------------------------------

_WIDGET_ID_RE = re.compile(r'widgetid="([^"]*)"')
_CHROME_RE    = re.compile(r'chrome="([^"]*)"')
_WIDTH_RE     = re.compile(r'width="([^"]*)"')
_HEIGHT_RE    = re.compile(r'height="([^"]*)"')

WIDGET_SCRIPT = (
    "<script>!function(d,s,id) {var js,fjs=d.getElementsByTagName(s)[0],"
    "p=/^http:/.test(d.location)?'http':'https';if (!d.getElementById(id)) "
    "{js=d.createElement(s);js.id=id;js.src=p+\"://platform.twitter.com/widgets.js\";"
    "fjs.parentNode.insertBefore(js,fjs);}}(document,\"script\",\"twitter-wjs\");</script>"
)

INVALID = "(Please enter a valid Twitter Username/ID or Widget ID)"


def _option(pattern: re.Pattern, text: str, default: str = "") -> str:
    m = pattern.search(text)
    return m.group(1) if m else default


# -----------------------------------------------------------------------------

@macro_registry.register
class TwitterMacro(Macro):
    name = "Twitter"
    description = (
        "Embeds a Twitter feed into the page. Can be a user feed (@hubzero) or a "
        "Twitter widget ID, followed by a comma and the number of tweets to display."
    )

    async def render(self, args: Optional[str], ctx: "MacroContext") -> str:
        args = args or ""
        settings = ctx.settings
        parts = [p.strip() for p in args.split(",")]

        screen_name = parts[0].lstrip("@")
        widget_id   = _option(_WIDGET_ID_RE, args)
        chrome      = _option(_CHROME_RE, args)
        width       = _option(_WIDTH_RE, args, settings.twitter_width)
        height      = _option(_HEIGHT_RE, args, settings.twitter_height)

        if (not screen_name and not widget_id) or "#" in screen_name:
            return INVALID

        atts = [f'data-widget-id="{settings.twitter_widget_id}"']

        # Twitter does not allow numeric user names: this is a widget id
        if screen_name.isdigit():
            atts = [f'data-widget-id="{screen_name}"']
            screen_name = ""

        if widget_id:
            atts = [f'data-widget-id="{html.escape(widget_id)}"']
        else:
            name = html.escape(screen_name)
            atts.append(f'href="https://twitter.com/{name}"')
            atts.append(f'data-screen-name="{name}"')

        atts.append(f'width="{html.escape(width)}"')
        atts.append(f'height="{html.escape(height)}"')
        atts.append(f'data-chrome="{html.escape(chrome)}"')

        if len(parts) > 1 and parts[1].isdigit():
            atts.append(f'data-tweet-limit="{parts[1]}"')

        return f'<a class="twitter-timeline" {" ".join(atts)}>Loading Tweets...</a>\n{WIDGET_SCRIPT}'
