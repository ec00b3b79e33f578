"""Configuration dataclass and type aliases for table extraction."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Sequence

from bs4 import Tag

from .converters import (
    id_to_camel_case_converter,
    keys_and_elements_mapper,
    text_content_converter,
    text_content_to_camel_case_converter,
)

ElementToStringConverter = Callable[[Optional[Tag], int], str]
RowRecord = Dict[str, str]
KeysAndElementsMapper = Callable[
    [Sequence[str], Sequence[Tag], ElementToStringConverter], RowRecord
]
ExtractionResult = Dict[str, List[RowRecord]]


@dataclass(frozen=True, slots=True)
class ExtractionOptions:
    """Selectors and converters that drive table extraction.

    ``scope_selector`` runs against the root node, ``id_element_selector``
    and ``table_selector`` against each matched container, the header and
    row selectors against the table and ``cell_selector`` against each row.
    """

    scope_selector: str = "div.container"
    id_element_selector: str = ":scope > h2"
    table_selector: str = ":scope > div.table-responsive > table"
    header_selector: str = "thead th"
    row_selector: str = "tbody tr"
    cell_selector: str = "td"
    header_key_converter: ElementToStringConverter = (
        text_content_to_camel_case_converter
    )
    cell_value_converter: ElementToStringConverter = text_content_converter
    table_key_converter: ElementToStringConverter = id_to_camel_case_converter
    keys_and_elements_mapper: KeysAndElementsMapper = keys_and_elements_mapper

    def merge(self, **overrides: Any) -> "ExtractionOptions":
        """Return a copy with ``overrides`` applied on top of these values."""

        if not overrides:
            return self
        return replace(self, **overrides)


DEFAULT_OPTIONS = ExtractionOptions()
