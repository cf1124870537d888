"""Tests for the ``grocno doctor`` command (cli/doctor.py).

Package lookups are patched where a specific outcome is needed; the
data directory always lives under ``tmp_path``.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from unittest.mock import patch

import pytest

from grocno.cli import exit_codes
from grocno.cli.doctor import (
    _data_dir_check,
    _grocno_version_check,
    _package_check,
    _python_version_check,
    _status_plain,
    run_doctor,
)
from grocno.version import __version__


def _missing(_name: str) -> str:
    raise metadata.PackageNotFoundError


class TestIndividualChecks:
    def test_python_version(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert "OK" in status

    def test_grocno_version(self) -> None:
        assert _grocno_version_check()[1] == __version__

    def test_installed_package(self) -> None:
        label, value, status = _package_check("pytest", required=True)
        assert label == "pytest"
        assert value != "NOT INSTALLED"
        assert "OK" in status

    @patch("grocno.cli.doctor.metadata.version", side_effect=_missing)
    def test_missing_required_package_fails(self, _mock: object) -> None:
        _, value, status = _package_check("pydantic-settings", required=True)
        assert value == "NOT INSTALLED"
        assert "FAIL" in status

    @patch("grocno.cli.doctor.metadata.version", side_effect=_missing)
    def test_missing_optional_package_warns(self, _mock: object) -> None:
        assert "WARN" in _package_check("questionary", required=False)[2]

    def test_missing_data_dir_with_writable_parent(self, tmp_path: Path) -> None:
        assert "OK" in _data_dir_check(tmp_path / "a" / "b")[2]

    def test_file_in_place_of_data_dir(self, tmp_path: Path) -> None:
        path = tmp_path / "data"
        path.write_text("", encoding="utf-8")
        _, value, status = _data_dir_check(path)
        assert "not a directory" in value
        assert "FAIL" in status

    @pytest.mark.parametrize(
        ("markup", "plain"),
        [("[green]OK[/green]", "OK"), ("[yellow]WARN[/yellow]", "WARN"), ("[red]FAIL (x)[/red]", "FAIL")],
    )
    def test_status_plain(self, markup: str, plain: str) -> None:
        assert _status_plain(markup) == plain


class TestRunDoctor:
    def test_all_pass(self, data_dir: Path) -> None:
        with patch("grocno.cli.doctor.metadata.version", return_value="1.0"):
            assert run_doctor(data_dir) == exit_codes.SUCCESS

    def test_failure_returns_general_error(self, data_dir: Path) -> None:
        with patch("grocno.cli.doctor.metadata.version", side_effect=_missing):
            assert run_doctor(data_dir) == exit_codes.GENERAL_ERROR

    @patch.dict("sys.modules", {"rich": None, "rich.table": None, "rich.console": None})
    def test_plain_output_without_rich(
        self, data_dir: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("grocno.cli.doctor.metadata.version", return_value="1.0"):
            code = run_doctor(data_dir)
        err = capsys.readouterr().err
        assert code == exit_codes.SUCCESS
        assert "grocno doctor" in err
        assert "All checks passed." in err
