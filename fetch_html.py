"""Fetch raw page HTML through Playwright's HTTP request client."""

from __future__ import annotations

from typing import Any, Optional

try:
    from playwright.sync_api import (  # type: ignore[import-not-found]
        Error as PlaywrightError,
        sync_playwright,
    )
except ImportError as exc:  # pragma: no cover - surfacing missing dependency
    raise SystemExit(
        "Missing dependency 'playwright'. Install with pip install playwright"
    ) from exc

DEFAULT_TIMEOUT_MS = 30_000


class FetchError(Exception):
    """Raised when a page cannot be retrieved over the network."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.message = message


def fetch_html(
    url: str,
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    user_agent: Optional[str] = None,
) -> str:
    """Return the body of ``url`` as text.

    Non-2xx responses are not treated as failures; whatever body the server
    sent is returned. Transport errors raise :class:`FetchError`.
    """

    try:
        with sync_playwright() as playwright_context:  # type: ignore[misc]
            request_context: Any = playwright_context.request.new_context(
                user_agent=user_agent,
            )
            try:
                response: Any = request_context.get(url, timeout=timeout_ms)
                return str(response.text())
            finally:
                request_context.dispose()
    except PlaywrightError as exc:
        raise FetchError(url, str(exc)) from exc


__all__ = ["DEFAULT_TIMEOUT_MS", "FetchError", "fetch_html"]
