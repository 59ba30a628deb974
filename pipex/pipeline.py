"""Run ``infile | cmd1 | cmd2 > outfile`` between two files."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import BinaryIO

from pipex.path import find_command_path
from pipex.split import split_quoted

USAGE = "Error\n2 files and 2 cmd needed"


class PipexError(Exception):
    """Raised when the pipeline cannot be set up."""


@dataclass
class PipeFiles:
    """The input and output files at the two ends of the pipeline."""

    infile: BinaryIO
    outfile: BinaryIO

    def close(self) -> None:
        """Close both files."""
        self.infile.close()
        self.outfile.close()

    def __enter__(self) -> PipeFiles:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_files(infile: str | os.PathLike, outfile: str | os.PathLike) -> PipeFiles:
    """Open ``infile`` for reading and create or truncate ``outfile``."""
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError("open_files fd.in") from exc
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        source.close()
        raise PipexError("open files fd.out") from exc
    return PipeFiles(source, os.fdopen(fd, "wb"))


def build_argv(command: str, env: Mapping[str, str]) -> tuple[str, list[str]]:
    """Split ``command`` and resolve its program.

    Returns the executable path and the argument list, whose first item is
    the program name as written.
    """
    args = split_quoted(command, " ")
    executable = find_command_path(args[0] if args else None, env)
    if executable is None:
        raise PipexError("cmd_path")
    return executable, args


def _report(message: str) -> None:
    print(f"Error - {message}", file=sys.stderr)


def _start(command, env, stdin, stdout) -> subprocess.Popen | None:
    try:
        executable, args = build_argv(command, env)
    except PipexError as exc:
        _report(str(exc))
        return None
    try:
        return subprocess.Popen(
            args, executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError:
        _report("execve failed")
        return None


def run_pipeline(
    infile: str | os.PathLike,
    first: str,
    second: str,
    outfile: str | os.PathLike,
    env: Mapping[str, str] | None = None,
) -> list[int]:
    """Run ``first`` reading ``infile`` piped into ``second`` writing ``outfile``.

    A command that cannot be started is reported on standard error and counts
    as exit status 1. Returns the exit statuses of both commands.
    """
    env = dict(os.environ) if env is None else dict(env)
    with open_files(infile, outfile) as files:
        try:
            read_end, write_end = os.pipe()
        except OSError as exc:
            raise PipexError("pipe") from exc
        try:
            processes = [_start(first, env, files.infile, write_end)]
            processes.append(_start(second, env, read_end, files.outfile))
        finally:
            os.close(read_end)
            os.close(write_end)
        return [1 if process is None else process.wait() for process in processes]


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE)
        return 1
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile)
    except PipexError as exc:
        _report(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())