"""Unit tests for the element-to-string converters and the row mapper."""

import pytest
from bs4 import BeautifulSoup

from table_records.converters import (
    id_to_camel_case_converter,
    kebab_case_to_camel_case,
    keys_and_elements_mapper,
    text_content_converter,
    text_content_to_camel_case_converter,
)


def _element(markup: str):
    return BeautifulSoup(markup, "html.parser").find()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("most-common-desktop", "mostCommonDesktop"),
        ("  Latest-IPOD-Useragents  ", "latestIpodUseragents"),
        ("single", "single"),
        ("table-2", "table-2"),
        ("", ""),
    ],
)
def test_kebab_case_to_camel_case(value, expected):
    assert kebab_case_to_camel_case(value) == expected


def test_text_content_converter_trims_nested_text():
    element = _element("<td>\n  <b>Chrome</b> 120 \n</td>")

    assert text_content_converter(element, 0) == "Chrome 120"


def test_text_content_converter_missing_element():
    assert text_content_converter(None, 3) == ""


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Most Common Desktop", "mostCommonDesktop"),
        ("OS + Browser", "osAndBrowser"),
        ("OS &amp; Browser", "osAndBrowser"),
        ("  Share\n\t ", "share"),
        ("Useragent", "useragent"),
    ],
)
def test_text_content_to_camel_case_converter(label, expected):
    element = _element(f"<th>{label}</th>")

    assert text_content_to_camel_case_converter(element, 0) == expected


def test_text_content_to_camel_case_converter_missing_element():
    assert text_content_to_camel_case_converter(None, 0) == ""


class TestIdToCamelCaseConverter:

    def test_uses_id_attribute(self):
        element = _element(
            '<h2 id="most-common-desktop-useragents">Anything</h2>'
        )

        assert (
            id_to_camel_case_converter(element, 0)
            == "mostCommonDesktopUseragents"
        )

    def test_falls_back_to_index_without_element(self):
        assert id_to_camel_case_converter(None, 2) == "table2"

    def test_falls_back_to_index_without_id(self):
        element = _element("<h2>Latest Mac Useragents</h2>")

        assert id_to_camel_case_converter(element, 5) == "table5"

    def test_falls_back_to_index_with_empty_id(self):
        element = _element('<h2 id="">Latest Mac Useragents</h2>')

        assert element.get("id") == ""
        assert id_to_camel_case_converter(element, 4) == "table4"


class TestKeysAndElementsMapper:

    def test_pairs_by_position(self):
        cells = BeautifulSoup(
            "<tr><td> a </td><td>b</td></tr>", "html.parser"
        ).select("td")

        record = keys_and_elements_mapper(
            ["first", "second"], cells, text_content_converter
        )

        assert record == {"first": "a", "second": "b"}

    def test_extra_elements_are_skipped(self):
        cells = BeautifulSoup(
            "<tr><td>a</td><td>b</td><td>c</td></tr>", "html.parser"
        ).select("td")

        record = keys_and_elements_mapper(
            ["only"], cells, text_content_converter
        )

        assert record == {"only": "a"}

    def test_duplicate_keys_keep_last_value(self):
        cells = BeautifulSoup(
            "<tr><td>a</td><td>b</td></tr>", "html.parser"
        ).select("td")

        record = keys_and_elements_mapper(
            ["same", "same"], cells, text_content_converter
        )

        assert record == {"same": "b"}

    def test_converter_receives_index(self):
        cells = BeautifulSoup(
            "<tr><td>a</td><td>b</td></tr>", "html.parser"
        ).select("td")

        record = keys_and_elements_mapper(
            ["x", "y"], cells, lambda element, index: str(index)
        )

        assert record == {"x": "0", "y": "1"}
