"""Convert scoped HTML tables into records keyed by table identifier."""

from __future__ import annotations

from typing import Any, List, Optional

from bs4 import Tag

from .dom import parse_html
from .models import (
    DEFAULT_OPTIONS,
    ExtractionOptions,
    ExtractionResult,
    RowRecord,
)


def _resolve_options(
    options: Optional[ExtractionOptions], overrides: dict[str, Any]
) -> ExtractionOptions:
    return (options or DEFAULT_OPTIONS).merge(**overrides)


def convert_table_to_records(
    table: Tag, options: ExtractionOptions = DEFAULT_OPTIONS
) -> List[RowRecord]:
    """Return one record per body row whose cell count matches the headers.

    Header keys are not deduplicated; a repeated key keeps the value of its
    last cell. Rows with a different number of cells are left out.
    """

    headers = [
        options.header_key_converter(header, index)
        for index, header in enumerate(table.select(options.header_selector))
    ]
    rows = [
        row.select(options.cell_selector)
        for row in table.select(options.row_selector)
    ]
    return [
        options.keys_and_elements_mapper(
            headers, cells, options.cell_value_converter
        )
        for cells in rows
        if len(cells) == len(headers)
    ]


def get_tables_as_record(
    root: Tag,
    options: Optional[ExtractionOptions] = None,
    **overrides: Any,
) -> ExtractionResult:
    """Extract every scoped table under ``root`` into a keyed mapping.

    Each container matched by ``scope_selector`` contributes one entry keyed
    by ``table_key_converter(id_element, container_index)``. Containers
    without a table are skipped and a later container replaces an earlier
    one that produced the same key.
    """

    resolved = _resolve_options(options, overrides)
    result: ExtractionResult = {}
    for index, container in enumerate(root.select(resolved.scope_selector)):
        key = resolved.table_key_converter(
            container.select_one(resolved.id_element_selector), index
        )
        table = container.select_one(resolved.table_selector)
        if table is None:
            continue
        result[key] = convert_table_to_records(table, resolved)
    return result


def get_tables_as_record_from_html(
    html_text: str,
    options: Optional[ExtractionOptions] = None,
    **overrides: Any,
) -> ExtractionResult:
    """Parse ``html_text`` and run :func:`get_tables_as_record` on it."""

    return get_tables_as_record(parse_html(html_text), options, **overrides)


__all__ = [
    "convert_table_to_records",
    "get_tables_as_record",
    "get_tables_as_record_from_html",
]
