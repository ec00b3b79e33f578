"""Parse raw HTML into a BeautifulSoup tree that supports scoped selectors."""

from __future__ import annotations

try:
    from bs4 import BeautifulSoup, Tag
except ImportError as exc:  # pragma: no cover - surfaced at runtime
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install "
        "beautifulsoup4"
    ) from exc

DEFAULT_PARSER = "lxml"


def insert_implied_tbody(soup: BeautifulSoup) -> BeautifulSoup:
    """Wrap each run of ``<tr>`` sitting directly under ``<table>``.

    Browsers place such rows in an implied ``<tbody>``; lxml leaves them
    where they are, which would hide them from ``tbody tr`` selectors.
    Whitespace between rows does not end a run.
    """

    for table in soup.find_all("table"):
        current_body = None
        for child in list(table.children):
            if not isinstance(child, Tag):
                continue
            if child.name != "tr":
                current_body = None
                continue
            if current_body is None:
                current_body = soup.new_tag("tbody")
                child.insert_before(current_body)
            current_body.append(child)
    return soup


def parse_html(
    html_text: str, *, parser: str = DEFAULT_PARSER
) -> BeautifulSoup:
    """Return a document tree for ``html_text`` using ``parser``."""

    return insert_implied_tbody(BeautifulSoup(html_text or "", parser))


__all__ = ["DEFAULT_PARSER", "insert_implied_tbody", "parse_html"]
