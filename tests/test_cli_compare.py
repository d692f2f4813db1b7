import importlib
import re
import sys
from pathlib import Path

import yaml
from typer.testing import CliRunner

import yamldiff
from yamldiffpack.cli.app import app, main

BANNER = (
    "\n"
    "==============================\n"
    "Differing Values from First File\n"
    "==============================\n"
    "\n"
)


def _write_pair(tmp_path: Path, first: str, second: str) -> tuple[str, str]:
    first_path = tmp_path / "first.yaml"
    second_path = tmp_path / "second.yaml"
    first_path.write_text(first, encoding="utf-8")
    second_path.write_text(second, encoding="utf-8")
    return str(first_path), str(second_path)


def test_cli_default_prints_notices_only(tmp_path: Path) -> None:
    first, second = _write_pair(
        tmp_path,
        "a: 1\nb:\n  c: 2\n  d: 3\n",
        "a: 1\nb:\n  c: 9\n  d: 3\n",
    )
    runner = CliRunner()
    result = runner.invoke(app, [first, second])

    assert result.exit_code == 0
    assert result.stdout == "\nDifference at: .b.c\n  First file:  2\n  Second file: 9\n"


def test_cli_yaml_output_has_no_notices_or_banner(tmp_path: Path) -> None:
    first, second = _write_pair(
        tmp_path,
        "a: 1\nb:\n  c: 2\n  d: 3\n",
        "a: 1\nb:\n  c: 9\n  d: 3\n",
    )
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "-o", "yaml"])

    assert result.exit_code == 0
    assert result.stdout == "b:\n  c: 2\n\n"
    assert yaml.safe_load(result.stdout) == {"b": {"c": 2}}


def test_cli_yamldiff_output_prints_notices_then_banner(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "a: [1, 2, 3]\n", "a: [1, 2, 4]\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "--output", "yamldiff"])

    assert result.exit_code == 0
    assert result.stdout == (
        "\nDifference at: .a\n  First file:  [1, 2, 3]\n  Second file: [1, 2, 4]\n"
        + BANNER
        + "a:\n- 1\n- 2\n- 3\n\n"
    )


def test_cli_yamldiff_identical_files_prints_empty_document(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "a: 1\n", "a: 1\nb: 2\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "-o", "yamldiff"])

    assert result.exit_code == 0
    assert result.stdout == BANNER + "{}\n\n"


def test_cli_output_mode_from_environment(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "a: 1\n", "a: 2\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second], env={"YAMLDIFF_OUTPUT": "yaml"})

    assert result.exit_code == 0
    assert result.stdout == "a: 1\n\n"


def test_cli_quiet_suppresses_output(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "a: 1\n", "a: 2\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "--quiet", "-o", "yamldiff"])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_missing_first_file_exits_one(tmp_path: Path) -> None:
    _, second = _write_pair(tmp_path, "a: 1\n", "a: 1\n")
    runner = CliRunner()
    result = runner.invoke(app, [str(tmp_path / "nope.yaml"), second])

    assert result.exit_code == 1
    assert "Error loading first file:" in result.output


def test_cli_invalid_second_file_exits_one(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "a: 1\n", "a: [1\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second])

    assert result.exit_code == 1
    assert "Error loading second file:" in result.output


def test_cli_quiet_still_prints_errors(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "- 1\n", "a: 1\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "--quiet"])

    assert result.exit_code == 1
    assert "Error loading first file:" in result.output


def test_cli_requires_exactly_two_paths(tmp_path: Path) -> None:
    first, _ = _write_pair(tmp_path, "a: 1\n", "a: 1\n")
    runner = CliRunner()

    assert runner.invoke(app, [first]).exit_code == 2
    assert runner.invoke(app, [first, first, first]).exit_code == 2


def test_cli_rejects_unknown_output_mode(tmp_path: Path) -> None:
    first, second = _write_pair(tmp_path, "a: 1\n", "a: 2\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "-o", "json"])

    assert result.exit_code == 2


def test_cli_serialization_error_exits_one(tmp_path: Path, monkeypatch) -> None:
    first, second = _write_pair(tmp_path, "a: 1\n", "a: 2\n")
    trees = {first: {"a": object()}, second: {"a": 2}}
    monkeypatch.setattr("yamldiffpack.cli.app.load_document", lambda path: trees[str(path)])
    runner = CliRunner()
    result = runner.invoke(app, [first, second, "-o", "yaml"])

    assert result.exit_code == 1
    assert "Error printing YAML:" in result.output


def test_cli_too_deep_document_reports_load_error(tmp_path: Path) -> None:
    depth = sys.getrecursionlimit() * 2
    first, second = _write_pair(tmp_path, "a: " + "[" * depth + "]" * depth + "\n", "a: 1\n")
    runner = CliRunner()
    result = runner.invoke(app, [first, second])

    assert result.exit_code == 1
    assert "Error loading first file:" in result.output
    assert "nested too deeply" in result.output
    assert not isinstance(result.exception, RecursionError)


def test_cli_version_matches_package_metadata() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    declared = re.search(r'^version = "([^"]+)"$', pyproject.read_text(encoding="utf-8"), re.M)
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert declared is not None
    assert result.output.strip() == declared.group(1) == yamldiff.__version__


def test_cli_main_module_import_does_not_run_app() -> None:
    module = importlib.import_module("yamldiffpack.cli.__main__")

    assert module.main is main
