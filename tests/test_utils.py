"""Unit tests for utility functions (gyatt.utils).

Tests cover:
- run_command (inherited streams, exit status, missing executable)
- run_checked (non-zero exit raises CommandError)
- ensure_dir
- Rich output helpers
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from gyatt.errors import CommandError
from gyatt.utils import (
    ensure_dir,
    print_error,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
    run_checked,
    run_command,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_returns_exit_status(self):
        returncode = await run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert returncode == 3

    @pytest.mark.unit
    async def test_streams_inherited(self, mock_subprocess):
        proc = mock_subprocess(returncode=0)
        with patch("asyncio.create_subprocess_exec", return_value=proc) as create:
            await run_command(["git", "init"])
        kwargs = create.call_args.kwargs
        assert kwargs["stdout"] is None
        assert kwargs["stderr"] is None
        assert "stdin" not in kwargs

    @pytest.mark.unit
    async def test_cwd(self, tmp_path: Path):
        returncode = await run_command(
            [sys.executable, "-c", "open('marker', 'w').close()"], cwd=tmp_path
        )
        assert returncode == 0
        assert (tmp_path / "marker").is_file()

    @pytest.mark.unit
    async def test_missing_executable(self):
        with pytest.raises(CommandError) as exc_info:
            await run_command(["nonexistent-binary-12345-xyz"])
        assert exc_info.value.returncode is None


class TestRunChecked:
    @pytest.mark.unit
    async def test_success(self, mock_subprocess):
        with patch("asyncio.create_subprocess_exec", return_value=mock_subprocess()):
            await run_checked(["git", "init"])

    @pytest.mark.unit
    async def test_nonzero_exit(self, mock_subprocess):
        proc = mock_subprocess(returncode=2)
        with patch("asyncio.create_subprocess_exec", return_value=proc):
            with pytest.raises(CommandError) as exc_info:
                await run_checked(["go", "mod", "init", "demo"])
        assert exc_info.value.returncode == 2
        assert exc_info.value.argv == ["go", "mod", "init", "demo"]


# ---------------------------------------------------------------------------
# ensure_dir
# ---------------------------------------------------------------------------


class TestEnsureDir:
    @pytest.mark.unit
    def test_creates_nested(self, tmp_path: Path):
        target = tmp_path / "ui" / "layouts"
        assert ensure_dir(target) == target
        assert target.is_dir()

    @pytest.mark.unit
    def test_existing_ok(self, tmp_path: Path):
        ensure_dir(tmp_path)
        assert tmp_path.is_dir()

    @pytest.mark.unit
    def test_file_in_the_way(self, tmp_path: Path):
        (tmp_path / "db").write_text("x", encoding="utf-8")
        with pytest.raises(OSError):
            ensure_dir(tmp_path / "db")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_messages(self, capsys):
        print_step("step")
        print_success("ok")
        print_error("bad [brackets]")
        print_warning("careful")
        out = capsys.readouterr().out
        for text in ("step", "ok", "bad [brackets]", "careful"):
            assert text in out

    @pytest.mark.unit
    def test_summary_table(self, capsys):
        print_summary_table({"main.go": "written"}, title="init")
        out = capsys.readouterr().out
        assert "main.go" in out
        assert "written" in out
