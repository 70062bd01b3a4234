"""Tests for the textsim command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

import textsim
from textsim.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _write(path: Path, *lines: str) -> str:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_pairwise_mode(runner: CliRunner, tmp_path: Path) -> None:
    combfile = _write(tmp_path / "comb.txt", "a", "", "  b", "c\t")
    result = runner.invoke(main, [combfile])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "0.5\t1\t1\t2\ta\tb",
        "0.5\t1\t1\t3\ta\tc",
        "0.5\t1\t2\t3\tb\tc",
    ]


def test_reference_mode(runner: CliRunner, tmp_path: Path) -> None:
    reffile = _write(tmp_path / "ref.txt", "cat", "cart", "car")
    testfile = _write(tmp_path / "test.txt", "care", "", "dog")
    result = runner.invoke(main, [reffile, testfile])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[:4] == [
        "0.125\t1\t1\t2\tcare\tcart",
        "0.1429\t1\t1\t3\tcare\tcar",
        "0.2857\t2\t1\t1\tcare\tcat",
        "----",
    ]
    assert len(lines) == 8
    assert lines[-1] == "----"
    assert all(line.split("\t")[2] == "2" for line in lines[4:7])


def test_reference_mode_top_k(runner: CliRunner, tmp_path: Path) -> None:
    reffile = _write(tmp_path / "ref.txt", "cat", "cart", "car")
    testfile = _write(tmp_path / "test.txt", "care")
    result = runner.invoke(main, ["--top-k", "1", reffile, testfile])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["0.125\t1\t1\t2\tcare\tcart", "----"]


def test_invalid_top_k(runner: CliRunner, tmp_path: Path) -> None:
    reffile = _write(tmp_path / "ref.txt", "cat")
    result = runner.invoke(main, ["--top-k", "0", reffile, reffile])
    assert result.exit_code != 0


@pytest.mark.parametrize("argc", [0, 3])
def test_usage_on_other_arity(runner: CliRunner, tmp_path: Path, argc: int) -> None:
    args = [_write(tmp_path / f"f{i}.txt", "x") for i in range(argc)]
    result = runner.invoke(main, args)

    assert result.exit_code == 0
    assert "SYNOPSIS" in result.output
    assert "\t" not in result.output


def test_missing_file(runner: CliRunner, tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.txt")
    result = runner.invoke(main, [missing])

    assert result.exit_code == 1
    assert f"!! Unable to open the input file: {missing}" in result.output


def test_missing_second_file_prints_nothing(runner: CliRunner, tmp_path: Path) -> None:
    reffile = _write(tmp_path / "ref.txt", "cat")
    missing = str(tmp_path / "missing.txt")
    result = runner.invoke(main, [reffile, missing])

    assert result.exit_code == 1
    assert "----" not in result.output
    assert missing in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert textsim.__version__ in result.output


@pytest.mark.parametrize("args", [["--bogus"], ["--top-k"], ["--top-k", "many", "f.txt"]])
def test_usage_on_unparsable_arguments(runner: CliRunner, args: list[str]) -> None:
    result = runner.invoke(main, args)

    assert result.exit_code == 0
    assert "SYNOPSIS" in result.output


def test_undecodable_bytes_pass_through(runner: CliRunner, tmp_path: Path) -> None:
    combfile = tmp_path / "latin.txt"
    combfile.write_bytes(b"caf\xe9\nbar\n")
    result = runner.invoke(main, [str(combfile)])

    assert result.exit_code == 0
    assert result.stdout_bytes == b"0.4286\t3\t1\t2\tcaf\xe9\tbar\n"


def test_unknown_encoding(runner: CliRunner, tmp_path: Path) -> None:
    combfile = _write(tmp_path / "comb.txt", "a", "b")
    result = runner.invoke(main, ["--encoding", "no-such-codec", combfile])

    assert result.exit_code == 1
    assert "!! Unable to decode the input file" in result.output
