from __future__ import annotations

import html
import re
from urllib.parse import urljoin

from botapigen.config import DEFAULT_BASE_URL

_EMPHASIS = re.compile(r"</?em>")
_STRONG = re.compile(r"</?strong>")
_CODE = re.compile(r"</?code>")
_LINK = re.compile(r'<a\s[^>]*?href="([^"]*)"[^>]*>(.*?)</a>', re.DOTALL)


def parse_text(text: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Turn inline reference markup into annotated plain text.

    ``<em>`` becomes ``_``, ``<strong>`` becomes ``**``, ``<code>`` becomes
    a backtick, ``&lt;``/``&gt;`` are decoded and every link becomes
    ``[text](absolute-url)`` with its ``href`` resolved against *base_url*.
    Anything else is left untouched.

    Example::

        parse_text('See <a href="#update">Update</a>')
        # 'See [Update](https://core.telegram.org/bots/api#update)'
    """
    text = _EMPHASIS.sub("_", text)
    text = _STRONG.sub("**", text)
    text = _CODE.sub("`", text)
    text = text.replace("&lt;", "<").replace("&gt;", ">")
    return _LINK.sub(
        lambda m: f"[{m.group(2)}]({urljoin(base_url, html.unescape(m.group(1)))})",
        text,
    )
