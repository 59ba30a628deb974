import os
import sys

import pytest

from pipex.pipeline import (
    PipeFiles,
    PipexError,
    build_argv,
    main,
    open_files,
    run_pipeline,
)

UPPER = f"{sys.executable} -c 'import sys; sys.stdout.write(sys.stdin.read().upper())'"
REVERSE = f"{sys.executable} -c 'import sys; sys.stdout.write(sys.stdin.read()[::-1])'"


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello world\nsecond line\n")
    return path


def test_run_pipeline_chains_commands(infile, tmp_path):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(infile, UPPER, REVERSE, out, dict(os.environ))
    assert statuses == [0, 0]
    assert out.read_text() == infile.read_text().upper()[::-1]


def test_run_pipeline_truncates_outfile(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("old content that is much longer than the result" * 10)
    run_pipeline(infile, UPPER, UPPER, out, dict(os.environ))
    assert out.read_text() == infile.read_text().upper()


def test_run_pipeline_missing_first_command(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    env = {"PATH": str(tmp_path)}
    statuses = run_pipeline(infile, "no_such_command", UPPER, out, env)
    assert statuses == [1, 0]
    assert out.read_text() == ""
    assert "Error - cmd_path" in capsys.readouterr().err


def test_run_pipeline_missing_infile(tmp_path):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError, match="open_files fd.in"):
        run_pipeline(tmp_path / "missing", UPPER, UPPER, out, {})
    assert not out.exists()


def test_open_files_missing_infile(tmp_path):
    with pytest.raises(PipexError):
        open_files(tmp_path / "missing", tmp_path / "out")


def test_open_files_bad_outfile(infile, tmp_path):
    with pytest.raises(PipexError, match="open files fd.out"):
        open_files(infile, tmp_path / "no_dir" / "out")


def test_pipe_files_context_closes(infile, tmp_path):
    out = tmp_path / "out.txt"
    with open_files(infile, out) as files:
        assert isinstance(files, PipeFiles)
        assert files.infile.read() == infile.read_bytes()
    assert files.infile.closed and files.outfile.closed


def test_open_files_creates_empty_outfile(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("previous")
    open_files(infile, out).close()
    assert out.read_bytes() == b""


def test_build_argv_absolute_command():
    executable, args = build_argv(f"{sys.executable} -c pass", {})
    assert executable == sys.executable
    assert args == [sys.executable, "-c", "pass"]


def test_build_argv_uses_path(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("#!/bin/sh\n")
    os.chmod(tool, 0o755)
    executable, args = build_argv("tool 'a b'", {"PATH": str(tmp_path)})
    assert executable == f"{tmp_path}/tool"
    assert args == ["tool", "a b"]


@pytest.mark.parametrize("command", ["", "   ", "not_there"])
def test_build_argv_unknown(command, tmp_path):
    with pytest.raises(PipexError, match="cmd_path"):
        build_argv(command, {"PATH": str(tmp_path)})


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error\n2 files and 2 cmd needed\n"


def test_main_missing_infile(tmp_path, capsys):
    assert main([str(tmp_path / "missing"), UPPER, UPPER, str(tmp_path / "o")]) == 1
    assert "Error - open_files fd.in" in capsys.readouterr().err


def test_main_success(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), UPPER, REVERSE, str(out)]) == 0
    assert out.read_text() == infile.read_text().upper()[::-1]