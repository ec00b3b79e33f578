"""Helpers for resolving runtime settings from the environment and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import dotenv

DEFAULT_ENV_FILE = ".env"
DEFAULT_USERAGENTS_URL = "https://www.useragents.me/"
PRETTY_JSON_INDENT = 4

ENV_URL = "USERAGENTS_URL"
ENV_OUTPUT_FILE = "OUTPUT_FILE"
ENV_PRETTIFY_JSON = "PRETTIFY_JSON"


class ConfigError(Exception):
    """Raised when runtime configuration cannot be resolved."""


@dataclass(slots=True)
class RuntimeSettings:
    """Resolved settings for a single extraction run.

    Uses slots for memory efficiency. Do not inherit from this class
    unless the subclass also uses slots=True.
    """

    url: str
    output_file: Optional[Path] = None
    json_indent: Optional[int] = None

    @property
    def pretty(self) -> bool:
        """Return True when the JSON payload should be indented."""

        return self.json_indent is not None


def load_environment(env_file: Optional[str] = None) -> bool:
    """Load ``.env`` style variables without replacing existing ones."""

    candidate = env_file or DEFAULT_ENV_FILE
    expanded = Path(os.path.expanduser(candidate))
    if not expanded.is_file():
        if env_file:
            raise ConfigError(f"Environment file not found: {candidate}")
        return False
    return dotenv.load_dotenv(expanded, override=False)


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def _resolve_path(value: str) -> Path:
    """Resolve ``value`` into an absolute path relative to the cwd."""

    expanded = Path(os.path.expanduser(value))
    if expanded.is_absolute():
        return expanded
    return Path(os.getcwd()) / expanded


def resolve_runtime_settings(
    *,
    url: Optional[str] = None,
    output_file: Optional[str] = None,
    pretty: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RuntimeSettings:
    """Combine CLI overrides with environment variables and defaults."""

    env = os.environ if environ is None else environ

    resolved_url = (url or env.get(ENV_URL) or DEFAULT_USERAGENTS_URL).strip()
    if not resolved_url:
        raise ConfigError(f"Missing {ENV_URL} configuration.")
    if not resolved_url.startswith(("http://", "https://")):
        raise ConfigError(f"Unsupported URL scheme: {resolved_url}")

    resolved_output = output_file or env.get(ENV_OUTPUT_FILE, "")
    resolved_pretty = pretty or _is_truthy(env.get(ENV_PRETTIFY_JSON))

    return RuntimeSettings(
        url=resolved_url,
        output_file=(
            _resolve_path(resolved_output) if resolved_output.strip() else None
        ),
        json_indent=PRETTY_JSON_INDENT if resolved_pretty else None,
    )
