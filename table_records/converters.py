"""Element-to-string converters and the key/value row mapper.

Every converter takes ``(element, index)`` where ``element`` may be ``None``
and always returns a string. ``index`` is the element's position among its
siblings in the current selection (header index, cell index or container
index) and is only used by converters that need a positional fallback.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional, Sequence

from bs4 import Tag

RE_WHITESPACE_RUN = re.compile(r"\s+")
RE_KEBAB_BOUNDARY = re.compile(r"-([a-z])")
# Both "+" and "&" in a label become the word "and".
RE_CONJUNCTION = re.compile(r"[+&]")


def kebab_case_to_camel_case(value: str) -> str:
    """Convert ``value`` from kebab-case to camelCase after trimming it."""

    return RE_KEBAB_BOUNDARY.sub(
        lambda match: match.group(1).upper(), value.strip().lower()
    )


def text_content_converter(element: Optional[Tag], index: int = 0) -> str:
    """Return the trimmed text content of ``element`` or ``""``."""

    if element is None:
        return ""
    return element.get_text().strip()


def text_content_to_camel_case_converter(
    element: Optional[Tag], index: int = 0
) -> str:
    """Turn a header label such as ``OS + Browser`` into ``osAndBrowser``."""

    label = RE_WHITESPACE_RUN.sub("-", text_content_converter(element, index))
    return kebab_case_to_camel_case(RE_CONJUNCTION.sub("and", label))


def id_to_camel_case_converter(element: Optional[Tag], index: int) -> str:
    """Return the camelCased ``id`` of ``element`` or ``table<index>``."""

    identifier = element.get("id") if element is not None else None
    if not identifier:
        identifier = f"table{index}"
    return kebab_case_to_camel_case(str(identifier))


def keys_and_elements_mapper(
    keys: Sequence[str],
    elements: Sequence[Tag],
    value_converter: Callable[[Optional[Tag], int], str],
) -> Dict[str, str]:
    """Pair ``keys`` with converted ``elements`` by position.

    Only indices present in both sequences produce an entry. Repeated keys
    keep the value of the last element mapped to them.
    """

    return {
        key: value_converter(element, index)
        for index, (key, element) in enumerate(zip(keys, elements))
    }
