"""CLI behaviour coverage for the Click command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_buffers import __init__conf__
from lib_log_buffers import cli as cli_mod
from lib_log_buffers import config as log_config
from lib_log_buffers import summary_info


def run_cli(args: list[str]) -> tuple[int, str]:
    result = CliRunner().invoke(cli_mod.cli, args, prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output


@pytest.fixture
def demo_snapshot(tmp_path: Path) -> Path:
    target = tmp_path / "demo.json"
    exit_code, output = run_cli(["demo", "--snapshot", str(target), "--session", "ci"])
    assert exit_code == 0, output
    return target


def test_cli_without_subcommand_prints_summary() -> None:
    """Running without a command prints the summary."""

    assert run_cli([]) == (0, summary_info())


def test_cli_info_command_matches_summary() -> None:
    """``info`` prints the package summary."""

    assert run_cli(["info"]) == (0, summary_info())


def test_cli_version_flag() -> None:
    """``--version`` prints the version."""

    assert run_cli(["--version"]) == (0, f"{__init__conf__.version}\n")


def test_demo_prints_entries_and_summary() -> None:
    """``demo`` echoes entries then the summary."""

    exit_code, output = run_cli(["demo"])

    assert exit_code == 0
    assert "[+] Starting deployment" in output
    assert "Log summary for buffer 'default'" in output
    assert "Total entries  : 7" in output


def test_demo_exports_snapshot(demo_snapshot: Path) -> None:
    """``demo --snapshot`` writes a JSON snapshot."""

    document = json.loads(demo_snapshot.read_text(encoding="utf-8"))

    assert document["Session"] == "ci"
    assert sorted(document["Buffers"]) == ["alerts", "default"]
    assert len(document["Buffers"]["default"]) == 7


def test_buffers_lists_and_excludes(demo_snapshot: Path) -> None:
    """``buffers`` lists ids and honours exclusions."""

    assert run_cli(["buffers", str(demo_snapshot)]) == (0, "alerts\ndefault\n")
    assert run_cli(["buffers", str(demo_snapshot), "-x", "def*"]) == (0, "alerts\n")


def test_show_applies_filters(demo_snapshot: Path) -> None:
    """``show`` prints only filtered lines."""

    exit_code, output = run_cli(["show", str(demo_snapshot), "--buffer", "alerts", "--no-timestamp"])
    assert exit_code == 0
    assert output == "[!] Disk usage at 91%\n[✖] Cache node unreachable\n"

    exit_code, output = run_cli(["show", str(demo_snapshot), "--max-level", "0", "--min-severity", "error"])
    assert exit_code == 0
    assert output.endswith("[✖] Cache node unreachable\n")
    assert output.count("\n") == 1


def test_show_of_empty_buffer_prints_nothing(demo_snapshot: Path) -> None:
    """An empty buffer prints nothing."""

    assert run_cli(["show", str(demo_snapshot), "--buffer", "missing"]) == (0, "")


def test_summary_json(demo_snapshot: Path) -> None:
    """``summary --json`` emits the summary record."""

    exit_code, output = run_cli(["summary", str(demo_snapshot), "--json", "--min-severity", "Warning"])

    assert exit_code == 0
    record = json.loads(output)
    assert record["TotalEntries"] == 2
    assert record["CountsBySeverity"] == {"Debug": 0, "Warning": 1, "Error": 1}
    assert record["IncludedTypes"] == ["Error", "Warning"]


def test_malformed_snapshot_reports_error(tmp_path: Path) -> None:
    """A malformed snapshot ends with a CLI error."""

    broken = tmp_path / "broken.json"
    broken.write_text("[]", encoding="utf-8")

    exit_code, output = run_cli(["summary", str(broken)])

    assert exit_code == 1
    assert "Error: Snapshot document must be an object" in output


def test_missing_snapshot_is_usage_error(tmp_path: Path) -> None:
    """A missing snapshot path is a usage error."""

    exit_code, _ = run_cli(["show", str(tmp_path / "nope.json")])
    assert exit_code == 2


def test_main_returns_exit_codes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """``main`` returns the command exit code."""

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")

    assert cli_mod.main(["info"]) == 0
    assert cli_mod.main(["buffers", str(broken)]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_demo_applies_log_environment() -> None:
    """``LOG_*`` variables shape the demo console output."""

    result = CliRunner().invoke(cli_mod.cli, ["demo"], env={"LOG_INDENT_CHAR": ">", "LOG_SHOW_TIMESTAMP": "0"})

    assert result.exit_code == 0, result.output
    assert " > [-] Loading configuration\n" in result.output
    assert "\n[+] Starting deployment\n" in "\n" + result.output
    assert " | [-]" not in result.output


def test_demo_reads_settings_loaded_from_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """``--use-dotenv`` feeds ``.env`` values into the demo logger."""

    (tmp_path / ".env").write_text("LOG_INDENT_CHAR=#\nLOG_SHOW_TIMESTAMP=0\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    log_config._reset_dotenv_state_for_testing()
    try:
        exit_code, output = run_cli(["--use-dotenv", "demo"])
    finally:
        log_config._reset_dotenv_state_for_testing()
        monkeypatch.delenv("LOG_INDENT_CHAR", raising=False)
        monkeypatch.delenv("LOG_SHOW_TIMESTAMP", raising=False)

    assert exit_code == 0, output
    assert " # [-] Loading configuration\n" in output


def test_demo_reports_invalid_environment() -> None:
    """A malformed ``LOG_INDENT_SIZE`` is reported as a CLI error."""

    result = CliRunner().invoke(cli_mod.cli, ["demo"], env={"LOG_INDENT_SIZE": "wide"})

    assert result.exit_code == 1
    assert "LOG_INDENT_SIZE must be an integer" in result.output
