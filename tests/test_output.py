"""Tests for the output writer (cli/output.py)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from serp_cli.cli.output import render_json, write_output, write_text
from serp_cli.core.models import Confidence, Liveness
from serp_cli.exceptions import SerpCliError


class TestRenderJson:
    def test_four_space_indent(self) -> None:
        assert render_json({"a": 1}) == '{\n    "a": 1\n}'

    def test_non_ascii_kept(self) -> None:
        assert "Пётр" in render_json({"name": "Пётр"})

    def test_enums_and_dates(self) -> None:
        rendered = json.loads(
            render_json(
                {
                    "conf": Confidence.EXACT,
                    "liveness": Liveness.PASSED,
                    "at": datetime(2024, 1, 1, tzinfo=timezone.utc),
                },
            ),
        )
        assert rendered == {
            "conf": 2,
            "liveness": "passed",
            "at": "2024-01-01T00:00:00+00:00",
        }

    def test_unserializable(self) -> None:
        with pytest.raises(SerpCliError, match="unable to render"):
            render_json({"x": object()})


class TestWriteOutput:
    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        write_output({"id": 7, "name": "Lobby"})
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"id": 7, "name": "Lobby"}
        assert captured.err == ""

    def test_file_is_uncolored(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        target = tmp_path / "out.json"
        write_output([{"id": 1}], target)
        text = target.read_text(encoding="utf-8")
        assert text == '[\n    {\n        "id": 1\n    }\n]\n'
        assert "\x1b[" not in text
        assert capsys.readouterr().out == ""

    def test_unwritable_path(self, tmp_path: Path) -> None:
        with pytest.raises(SerpCliError) as exc_info:
            write_output({}, tmp_path / "missing" / "out.json")
        assert exc_info.value.hint is not None


class TestWriteText:
    def test_stdout_adds_newline(self, capsys: pytest.CaptureFixture[str]) -> None:
        write_text("serp_up 1")
        assert capsys.readouterr().out == "serp_up 1\n"

    def test_file(self, tmp_path: Path) -> None:
        target = tmp_path / "metrics.txt"
        write_text("a 1\n", target)
        assert target.read_text(encoding="utf-8") == "a 1\n"
