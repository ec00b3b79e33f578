"""Serialize extraction results and persist them to disk."""

from __future__ import annotations

import errno
import json
from pathlib import Path
from typing import Any, Optional, Tuple

GENERIC_FILE_ERROR = "Error accessing file or directory"

ERROR_EXPLANATIONS = {
    errno.ENOENT: "No such file or directory",
    errno.EACCES: "Permission denied",
    errno.EAGAIN: "Resource temporarily unavailable",
    errno.EBUSY: "Resource busy or locked",
    errno.EEXIST: "File or directory already exists",
    errno.EINVAL: "Invalid argument",
    errno.EIO: "I/O error",
}


def explain_error_code(error: BaseException) -> str:
    """Return a human readable message for the errno carried by ``error``."""

    code = getattr(error, "errno", None)
    return ERROR_EXPLANATIONS.get(code, GENERIC_FILE_ERROR)


def serialize_json(data: Any, *, indent: Optional[int] = None) -> str:
    """Dump ``data`` indented by ``indent`` spaces, or compactly if None."""

    if indent:
        return json.dumps(data, ensure_ascii=False, indent=indent)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def write_output(
    output_path: str | Path, payload: str
) -> Tuple[bool, str | None]:
    """Overwrite ``output_path`` with ``payload`` and report status.

    Missing parent directories are created first.
    """

    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(payload, encoding="utf-8")
    except OSError as exc:
        return False, explain_error_code(exc)

    print(f"✅ JSON written to {destination}")
    return True, None


__all__ = [
    "ERROR_EXPLANATIONS",
    "GENERIC_FILE_ERROR",
    "explain_error_code",
    "serialize_json",
    "write_output",
]
