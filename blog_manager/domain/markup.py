"""Lightweight markup -> HTML used by the preview page.

Substitutions run left to right in a fixed order. Headings and list items
are anchored at line start so "## x" is never read as "# x", and links skip
a leading "!" so image syntax survives until its own pass. Links and images
only keep http(s), mailto and relative targets; anything else renders as
its text.
"""
from __future__ import annotations

import html
import re

_SAFE_SCHEMES = frozenset({"http", "https", "mailto"})
_URL_SCHEME = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
# browsers drop these before parsing a scheme ("java\tscript:")
_URL_IGNORED = re.compile(r"[\x00-\x20\x7f]")


def _is_safe_url(url: str) -> bool:
    match = _URL_SCHEME.match(_URL_IGNORED.sub("", url))
    return match is None or match.group(1).lower() in _SAFE_SCHEMES


def _link(match: re.Match) -> str:
    text, url = match.group(1), match.group(2)
    if not _is_safe_url(url):
        return text
    return f'<a href="{url}" target="_blank" rel="noopener noreferrer">{text}</a>'


def _image(match: re.Match) -> str:
    alt, url = match.group(1), match.group(2)
    if not _is_safe_url(url):
        return alt
    return f'<img src="{url}" alt="{alt}" class="max-w-full h-auto" />'


_SUBSTITUTIONS = (
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^- (.*)$", re.MULTILINE), r"<li>\1</li>"),
    (re.compile(r"(?<!!)\[(.*?)\]\((.*?)\)"), _link),
    (re.compile(r"!\[(.*?)\]\((.*?)\)"), _image),
)

# Block elements already end their line; no <br /> after them.
_BLOCK_LINE_END = re.compile(r"(</h[1-3]>|</li>)\n")


def render_markup(text: str | None) -> str:
    """Escape raw HTML, then apply the inline markup substitutions."""
    output = html.escape((text or "").replace("\r\n", "\n"))
    for pattern, replacement in _SUBSTITUTIONS:
        output = pattern.sub(replacement, output)
    output = _BLOCK_LINE_END.sub(r"\1", output)
    return output.replace("\n", "<br />")
