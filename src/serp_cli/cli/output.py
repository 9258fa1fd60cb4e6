"""Output writer — renders API responses as pretty JSON.

Results go either to stdout, colorized through Rich, or verbatim
(indented, uncolored) to the file given with ``-o/--output``.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from serp_cli.cli.console import stdout
from serp_cli.exceptions import SerpCliError
from serp_cli.utils.logging import get_logger

logger = get_logger(__name__)

JSON_INDENT: int = 4


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return f"<{len(value)} bytes>"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_json(data: Any) -> str:
    """Serialize *data* with a 4-space indent.

    Raises
    ------
    SerpCliError
        If *data* contains values JSON cannot represent.
    """
    try:
        return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as exc:
        raise SerpCliError(f"unable to render response as JSON: {exc}") from exc


def write_text(text: str, output_path: str | Path | None = None) -> None:
    """Write raw *text* to *output_path*, or to stdout when no path is given."""
    if output_path is None:
        stdout.out(text if text.endswith("\n") else f"{text}\n")
        return
    _write_file(Path(output_path), text)


def write_output(data: Any, output_path: str | Path | None = None) -> None:
    """Pretty-print *data* to stdout, or save it uncolored to *output_path*."""
    text = render_json(data)
    if output_path is None:
        stdout.print_json(text)
        return
    _write_file(Path(output_path), text)


def _write_file(path: Path, text: str) -> None:
    path = path.expanduser()
    try:
        path.write_text(text if text.endswith("\n") else f"{text}\n", encoding="utf-8")
    except OSError as exc:
        raise SerpCliError(
            f"unable to write output to {path}: {exc}",
            hint="Check that the directory exists and is writable.",
        ) from exc
    logger.debug("output.written", path=str(path), size=len(text))
