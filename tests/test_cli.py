from __future__ import annotations

import json

import pytest

from lodastats import cli
from lodastats.report import creation_dates

from conftest import FakeHistory


@pytest.fixture
def fake_git(monkeypatch):
    history = FakeHistory({"00045.asm": "1984-12-30T20:12:09+01:00"})
    monkeypatch.setattr(creation_dates, "GitHistory", lambda root: history)
    return history


def test_creation_dates_writes_default_output(make_programs, tmp_path, monkeypatch, capsys, fake_git) -> None:
    root = make_programs(["00045.asm", "bogus.asm"])
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    code = cli.main(
        ["--config-dir", str(tmp_path / "cfg"), "creation-dates", "--rootdir", str(root)]
    )

    assert code == 0
    output = workdir / "data" / "program_creation_dates.csv"
    assert output.read_text(encoding="utf-8") == "program id;creation date\n45;19841230\n"
    out = capsys.readouterr().out
    assert "progress: 0/2, %0.00  rows: 0" in out
    assert "number of rows written to csv file: 1" in out
    assert "Skipped        : 1" in out


def test_creation_dates_uses_configured_rootdir(make_programs, tmp_path, capsys, fake_git) -> None:
    root = make_programs(["00045.asm"])
    cfg = tmp_path / "cfg"
    output = tmp_path / "dates.csv"
    assert cli.main(["--config-dir", str(cfg), "config", "set-rootdir", str(root)]) == 0

    code = cli.main(["--config-dir", str(cfg), "creation-dates", "--output", str(output)])

    assert code == 0
    assert output.read_text(encoding="utf-8").splitlines()[1] == "45;19841230"


def test_creation_dates_without_rootdir_fails(tmp_path, capsys) -> None:
    code = cli.main(["--config-dir", str(tmp_path / "cfg"), "creation-dates"])

    assert code == 1
    assert "Error: LODA program rootdir is not configured" in capsys.readouterr().out


def test_creation_dates_missing_rootdir_fails(tmp_path, capsys) -> None:
    code = cli.main(
        [
            "--config-dir",
            str(tmp_path / "cfg"),
            "creation-dates",
            "--rootdir",
            str(tmp_path / "missing"),
            "--output",
            str(tmp_path / "out.csv"),
        ]
    )

    assert code == 1
    assert "does not exist" in capsys.readouterr().out
    assert not (tmp_path / "out.csv").exists()


def test_set_rootdir_rejects_missing_directory(tmp_path, capsys) -> None:
    cfg = tmp_path / "cfg"

    code = cli.main(["--config-dir", str(cfg), "config", "set-rootdir", str(tmp_path / "nope")])

    assert code == 1
    assert not (cfg / "config.json").exists()


def test_config_show_reports_settings(make_programs, tmp_path, capsys) -> None:
    root = make_programs([])
    cfg = tmp_path / "cfg"
    cli.main(["--config-dir", str(cfg), "config", "set-rootdir", str(root)])
    capsys.readouterr()

    cli.main(["--config-dir", str(cfg), "config", "show"])

    out = capsys.readouterr().out
    assert str(root.resolve()) in out
    assert json.loads((cfg / "config.json").read_text(encoding="utf-8"))["program_extension"] == ".asm"


def test_limit_must_be_positive(tmp_path) -> None:
    with pytest.raises(SystemExit):
        cli.main(["creation-dates", "--limit", "0"])


def test_non_object_config_file_does_not_break_commands(tmp_path, capsys) -> None:
    cfg = tmp_path / "cfg"
    cfg.mkdir()
    (cfg / "config.json").write_text("[]", encoding="utf-8")

    assert cli.main(["--config-dir", str(cfg), "config", "show"]) == 0
    assert "(not set)" in capsys.readouterr().out


def test_resolve_config_applies_command_line_overrides(make_programs, tmp_path) -> None:
    root = make_programs([])
    args = cli._build_parser().parse_args(
        [
            "--config-dir",
            str(tmp_path / "cfg"),
            "creation-dates",
            "--rootdir",
            str(root),
            "--output",
            str(tmp_path / "dates.csv"),
            "--extension",
            ".loda",
        ]
    )

    config = cli._resolve_config(args)

    assert config.loda_program_rootdir == root
    assert config.output_path == tmp_path / "dates.csv"
    assert config.program_extension == ".loda"
