"""Fetch a user agents page and print its tables as JSON."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from config_loader import (
    DEFAULT_USERAGENTS_URL,
    ENV_OUTPUT_FILE,
    ENV_PRETTIFY_JSON,
    ENV_URL,
    ConfigError,
    load_environment,
    resolve_runtime_settings,
)
from fetch_html import FetchError, fetch_html
from output_writer import serialize_json, write_output
from table_records import ExtractionResult, get_tables_as_record, parse_html

USAGE_EPILOG = f"""\
Can work from an .env file:
    {ENV_URL} - The URL of the page to fetch. Default: '{DEFAULT_USERAGENTS_URL}'.
    {ENV_OUTPUT_FILE} - The path to the output JSON file. Default: ''.
    {ENV_PRETTIFY_JSON} - Whether to prettify the JSON output. Default: false.
"""


def get_user_agents_json(url: str) -> ExtractionResult:
    """Fetch ``url`` and return its tables keyed by table identifier."""

    html_text = fetch_html(url)
    return get_tables_as_record(parse_html(html_text))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the user agents extractor."""

    parser = argparse.ArgumentParser(
        description=(
            "Fetches the HTML content of a page and extracts the tables "
            "as JSON."
        ),
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p",
        "--pretty",
        action="store_true",
        help="Prettify the JSON output.",
    )
    parser.add_argument(
        "--url",
        help=f"Override {ENV_URL}.",
    )
    parser.add_argument(
        "--output",
        help=f"Override {ENV_OUTPUT_FILE}; prints to stdout when empty.",
    )
    parser.add_argument(
        "--env-file",
        help="Load variables from this file instead of ./.env.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the ``useragents-json`` CLI."""

    args = parse_args(argv)
    try:
        load_environment(args.env_file)
        settings = resolve_runtime_settings(
            url=args.url,
            output_file=args.output,
            pretty=args.pretty,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    try:
        tables = get_user_agents_json(settings.url)
    except FetchError as exc:
        raise SystemExit(f"Error fetching data: {exc.message}") from exc

    payload = serialize_json(tables, indent=settings.json_indent)
    if settings.output_file is None:
        print(payload)
        return

    success, error = write_output(settings.output_file, payload)
    if not success:
        raise SystemExit(f"Error writing output: {error}")


__all__ = ["get_user_agents_json", "main", "parse_args"]


if __name__ == "__main__":
    main()
