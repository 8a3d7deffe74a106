"""Index HTML document and response.

The index document is the HTML shell served for every client-side route.
Snippets are spliced into its ``<head>`` the same way the injection
middleware splices markup into full-page responses: before the first
closing tag, leaving the rest of the markup untouched.
"""

import re
from dataclasses import dataclass
from html import escape

_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)
_HTML_OPEN = re.compile(r"<html(?:\s[^>]*)?>", re.IGNORECASE)


def script_element(text: str, *, marker: str | None = None) -> str:
    """Return an inline ``<script>`` element with *text* as its content.

    *text* is inserted verbatim. Callers must make sure it cannot contain
    ``</script``.
    """
    attrs = f' data-waypost="{escape(marker, quote=True)}"' if marker else ""
    return f"<script{attrs}>{text}</script>"


class IndexDocument:
    """Mutable HTML document for the index page.

    Usage::

        doc = IndexDocument("<html><head><title>App</title></head><body></body></html>")
        doc.append_to_head('<script>window.x = 1;</script>')
        str(doc)
    """

    __slots__ = ("_head_markup", "_html")

    def __init__(self, html: str = "") -> None:
        self._html = html
        self._head_markup: list[str] = []

    @property
    def head_markup(self) -> tuple[str, ...]:
        """Snippets appended to the head, in order."""
        return tuple(self._head_markup)

    def append_to_head(self, markup: str) -> None:
        """Append *markup* as the last child of ``<head>``.

        Inserted before the first ``</head>``. A document without a head
        gets one, right after ``<html ...>`` or at the very start.
        """
        match = _HEAD_CLOSE.search(self._html)
        if match is not None:
            pos = match.start()
            self._html = self._html[:pos] + markup + self._html[pos:]
        else:
            opening = _HTML_OPEN.search(self._html)
            pos = opening.end() if opening is not None else 0
            self._html = self._html[:pos] + f"<head>{markup}</head>" + self._html[pos:]
        self._head_markup.append(markup)

    @property
    def html(self) -> str:
        return self._html

    def __str__(self) -> str:
        return self._html


@dataclass(slots=True)
class IndexHtmlResponse:
    """The index page being generated for one request.

    *path* is the requested client route, kept for listeners that vary
    the document per route.
    """

    document: IndexDocument
    path: str = "/"
