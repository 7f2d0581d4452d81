"""Description sanitizing for apiDoc's HTML-rendered text."""

import html
import re

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(text: str | None) -> str:
    """Remove HTML tags and entities, e.g. ``<p>Find &amp; list</p>`` -> ``Find & list``."""
    if not text:
        return ""
    return html.unescape(_TAG_RE.sub("", text)).strip()
