"""Shared HTML fixtures for the extraction tests."""

from __future__ import annotations

from typing import Optional, Sequence

import pytest


def build_container(
    rows: Sequence[Sequence[str]],
    *,
    headers: Sequence[str] = ("Device", "OS &amp; Browser", "Useragent"),
    heading: Optional[str] = "Latest Ipod Useragents",
    heading_id: Optional[str] = "latest-ipod-useragents",
    with_table: bool = True,
) -> str:
    """Return one ``div.container`` block laid out like useragents.me."""

    parts: list[str] = ['<div class="container">']
    if heading is not None:
        id_attr = f' id="{heading_id}"' if heading_id else ""
        parts.append(f"<h2{id_attr}>{heading}</h2>")
    if with_table:
        parts.append('<div class="table-responsive"><table>')
        parts.append("<thead><tr>")
        parts.extend(f"<th>{header}</th>" for header in headers)
        parts.append("</tr></thead><tbody>")
        for row in rows:
            parts.append("<tr>")
            parts.extend(f"<td>{cell}</td>" for cell in row)
            parts.append("</tr>")
        parts.append("</tbody></table></div>")
    parts.append("</div>")
    return "".join(parts)


def build_document(*containers: str) -> str:
    return f"<html><body>{''.join(containers)}</body></html>"


IPOD_ROWS = (
    (
        "iPod touch",
        "iOS 15 + Safari",
        "Mozilla/5.0 (iPod touch; CPU iPhone 15_7 like Mac OS X)",
    ),
    (
        "iPod touch",
        "iOS 14 + Safari",
        "Mozilla/5.0 (iPod touch; CPU iPhone 14_8 like Mac OS X)",
    ),
)


@pytest.fixture
def ipod_html() -> str:
    return build_document(build_container(IPOD_ROWS))
