"""Generic HTML table to JSON record extraction."""

from .converters import (
    id_to_camel_case_converter,
    kebab_case_to_camel_case,
    keys_and_elements_mapper,
    text_content_converter,
    text_content_to_camel_case_converter,
)
from .dom import parse_html
from .extraction import (
    convert_table_to_records,
    get_tables_as_record,
    get_tables_as_record_from_html,
)
from .models import (
    DEFAULT_OPTIONS,
    ElementToStringConverter,
    ExtractionOptions,
    ExtractionResult,
    KeysAndElementsMapper,
    RowRecord,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "ElementToStringConverter",
    "ExtractionOptions",
    "ExtractionResult",
    "KeysAndElementsMapper",
    "RowRecord",
    "convert_table_to_records",
    "get_tables_as_record",
    "get_tables_as_record_from_html",
    "id_to_camel_case_converter",
    "kebab_case_to_camel_case",
    "keys_and_elements_mapper",
    "parse_html",
    "text_content_converter",
    "text_content_to_camel_case_converter",
]
