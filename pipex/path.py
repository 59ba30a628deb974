"""Resolution of command names against the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.split import split_words


def join_path(directory: str, command: str) -> str:
    """Join a directory and a command name with a slash."""
    return f"{directory}/{command}"


def search_path(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in ``env['PATH']``."""
    path = env.get("PATH")
    if path is None:
        return []
    return split_words(path, ":")


def find_command_path(command: str | None, env: Mapping[str, str]) -> str | None:
    """Return an executable path for ``command``, or None if none is found.

    A command containing a slash is used as given; otherwise each directory
    of PATH is tried in order.
    """
    if not command:
        return None
    if "/" in command:
        return command if os.access(command, os.X_OK) else None
    for directory in search_path(env):
        candidate = join_path(directory, command)
        if os.access(candidate, os.X_OK):
            return candidate
    return None