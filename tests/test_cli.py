import io
import os
import subprocess
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gts import cli

SOURCE = 'package main\n\nfunc main() {\n\tprintln("hi")\n}\n'


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["gts", *argv])
    cli.main()


def test_speaks_a_file_quietly(tmp_path, monkeypatch, capsys):
    source = tmp_path / "main.go"
    source.write_text(SOURCE)

    run_cli(monkeypatch, "-q", str(source))

    out = capsys.readouterr().out
    assert f"--- Speaking {source} ---" in out
    assert "Spoke" in out
    assert "Total Execution Time" in out


def test_speech_command_options(tmp_path, monkeypatch):
    source = tmp_path / "main.go"
    source.write_text(SOURCE)
    runs = []

    def fake_run(cmd, check=False, **kwargs):
        runs.append(cmd)
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    run_cli(monkeypatch, "--noimports", "--voice", "Alex", "--rate", "200", str(source))

    assert runs[0] == ["say", "-v", "Alex", "-r", "200", "package main"]
    assert runs[1][-1] == "declarations"


def test_missing_file_exits_with_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "-q", "missing.go")

    assert excinfo.value.code == 1
    assert "File missing.go does not exist" in capsys.readouterr().err


def test_batch_continues_after_a_failure(tmp_path, monkeypatch, capsys):
    good = tmp_path / "good.go"
    good.write_text(SOURCE)
    bad = tmp_path / "bad.go"
    bad.write_text("package main\nfunc 1() {}\n")

    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "-q", str(bad), str(good))

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert "SYNTAX ERROR" in captured.err
    assert "Spoke" in captured.out


def test_batch_continues_after_an_unreadable_file(tmp_path, monkeypatch, capsys):
    bad = tmp_path / "bad.go"
    bad.write_bytes(b"package main\n// \xff\n")
    good = tmp_path / "good.go"
    good.write_text(SOURCE)

    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "-q", str(bad), str(good))

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert f"Could not read '{bad}'" in captured.err
    assert f"--- Spoke {good}:" in captured.out


def test_dump_stage(tmp_path, monkeypatch, capsys):
    source = tmp_path / "main.go"
    source.write_text(SOURCE)

    run_cli(monkeypatch, "-q", "-d", "1", str(source))

    assert (tmp_path / "main.ast.json").exists()
    assert "Stopped after stage '1 (Abstract Syntax Tree)'" in capsys.readouterr().out


def test_reads_stdin_when_piped(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SOURCE))

    run_cli(monkeypatch, "-q", "-v")

    out = capsys.readouterr().out
    assert "--- Speaking stdin ---" in out
    assert "Spoke stdin" in out
