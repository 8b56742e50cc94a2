# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for the warmups command-line interface."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from warmups import __version__
from warmups.cli import main
from warmups.cli.commands.demo import demo_lines
from warmups.config import Settings

if TYPE_CHECKING:
    from pathlib import Path

    from _pytest.capture import CaptureFixture
    from _pytest.monkeypatch import MonkeyPatch

pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Run each CLI test in an empty directory with no WARMUPS_* variables."""
    for variable in ("WARMUPS_LOG_FORMAT", "WARMUPS_LOG_LEVEL", "WARMUPS_CURRENT_YEAR"):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _stdout(capsys: CaptureFixture[str]) -> str:
    return capsys.readouterr().out.strip()


def test_cli_version(capsys: CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert _stdout(capsys) == f"warmups {__version__}"


def test_cli_requires_a_command() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["sum", "1", "2", "3", "4", "5"], "15"),
        (["sum"], "0"),
        (["sum", "1", "2.5", "-1"], "2.5"),
        (["dedupe", "1", "2", "2", "3", "4", "4", "5"], "1 2 3 4 5"),
        (["dedupe"], ""),
        (["count", "I love typescript TypeScript", "typescript"], "2"),
        (["count", "", "x"], "0"),
        (["property", '{"name": "Alice", "age": 30}', "name"], '"Alice"'),
        (["property", '{"name": "Alice", "age": 30}', "age"], "30"),
        (["car-age", "BMW", "M7", "2018", "--current-year", "2024"], "6"),
        (["car-age", "BMW", "M7", "2030", "--current-year", "2024"], "-6"),
    ],
)
def test_cli_commands_print_results(
    argv: list[str],
    expected: str,
    capsys: CaptureFixture[str],
) -> None:
    assert main(argv) == 0
    assert _stdout(capsys) == expected


def test_cli_rejects_non_numeric_input(capsys: CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = main(["sum", "1", "two"])
    assert excinfo.value.code == 2
    assert "'two' is not a number" in capsys.readouterr().err


def test_cli_property_unknown_field_exits_with_error_code(capsys: CaptureFixture[str]) -> None:
    assert main(["property", '{"name": "Alice"}', "email"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "WU200" in captured.err
    assert "'email' is not a field of dict" in captured.err


def test_cli_property_invalid_json_logs_structured_error(capsys: CaptureFixture[str]) -> None:
    assert main(["--log-format", "json", "property", "{oops", "name"]) == 2
    lines = [line for line in capsys.readouterr().err.splitlines() if line]
    payload = json.loads(lines[-1])
    assert payload["level"] == "error"
    assert payload["component"] == "cli"
    assert payload["operation"] == "property"
    assert payload["error_code"] == "WU100"
    assert payload["exit_code"] == 2


def test_cli_property_rejects_non_object_json(capsys: CaptureFixture[str]) -> None:
    assert main(["property", "[1, 2]", "name"]) == 2
    assert "WU101" in capsys.readouterr().err


def test_cli_car_age_uses_env_year(capsys: CaptureFixture[str], monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("WARMUPS_CURRENT_YEAR", "2020")
    assert main(["car-age", "BMW", "M7", "2018"]) == 0
    assert _stdout(capsys) == "2"


def test_cli_car_age_flag_beats_settings_file(
    capsys: CaptureFixture[str],
    isolated_settings: Path,
) -> None:
    _ = (isolated_settings / "warmups.toml").write_text("current_year = 2019\n", encoding="utf-8")
    assert main(["car-age", "BMW", "M7", "2018"]) == 0
    assert _stdout(capsys) == "1"
    assert main(["car-age", "BMW", "M7", "2018", "--current-year", "2028"]) == 0
    assert _stdout(capsys) == "10"


def test_cli_invalid_env_settings_exit_early(
    capsys: CaptureFixture[str],
    monkeypatch: MonkeyPatch,
) -> None:
    monkeypatch.setenv("WARMUPS_LOG_LEVEL", "chatty")
    assert main(["sum", "1"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "WU114" in captured.err


def test_cli_demo_prints_sample_results(capsys: CaptureFixture[str], isolated_settings: Path) -> None:
    config = isolated_settings / "custom.toml"
    _ = config.write_text("current_year = 2024\n", encoding="utf-8")
    assert main(["--config", str(config), "demo"]) == 0
    assert _stdout(capsys).splitlines() == [
        "sum_array([1, 2, 3, 4, 5]) = 15",
        "remove_duplicates([1, 2, 2, 3, 4, 4, 5]) = [1, 2, 3, 4, 5]",
        "count_word_occurrences('I love typescript TypeScript', 'typescript') = 2",
        "get_property({'name': 'Alice', 'age': 30}, 'name') = 'Alice'",
        "Car('BMW', 'M7', 2018).get_car_age() = 6",
    ]


def test_demo_lines_follow_settings_clock() -> None:
    assert demo_lines(Settings(current_year=2018))[-1].endswith("= 0")
