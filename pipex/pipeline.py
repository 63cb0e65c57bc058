"""Run two commands joined by a pipe, reading one file and writing another.

``pipex infile "cmd1 args" "cmd2 args" outfile`` behaves like the shell
line ``< infile cmd1 args | cmd2 args > outfile``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable, Mapping, Optional, Sequence, Union

from pipex.strings import split

Environment = Union[Mapping[str, str], Iterable[str]]

FIRST_FAILURE = 1
SECOND_FAILURE = 2
_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o777


def _entries(env: Environment) -> list[str]:
    if isinstance(env, Mapping):
        return [f"{key}={value}" for key, value in env.items()]
    return list(env)


def _as_dict(env: Environment) -> dict[str, str]:
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result[key] = value
    return result


def split_paths(env: Environment) -> list[str]:
    """Return the directories of the first PATH entry, each ending in '/'.

    ``env`` is a mapping or a sequence of ``KEY=VALUE`` strings. The first
    entry beginning with ``PATH`` is used. Raises LookupError if none does.
    """
    for entry in _entries(env):
        if entry.startswith("PATH"):
            return [directory + "/" for directory in split(entry[5:], ":")]
    raise LookupError("no PATH entry in the environment")


def find_path(paths: Sequence[str], cmd: str) -> Optional[str]:
    """Locate ``cmd``: as given if it exists, otherwise in the first directory holding it."""
    if os.access(cmd, os.F_OK):
        return cmd
    for directory in paths:
        candidate = directory + cmd
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def _start(
    command: str,
    paths: Sequence[str],
    env: dict[str, str],
    stdin: Optional[int],
    stdout: Optional[int],
) -> Optional[subprocess.Popen]:
    """Start ``command``; return None if it could not be started.

    When the program is not found, a single newline is written to ``stdout``.
    """
    argv = split(command, " ")
    if not argv:
        return None
    full_path = find_path(paths, argv[0])
    if full_path is None:
        if stdout is None:
            sys.stdout.write("\n")
            sys.stdout.flush()
        else:
            os.write(stdout, b"\n")
        return None
    try:
        return subprocess.Popen(argv, executable=full_path, stdin=stdin, stdout=stdout, env=env)
    except OSError:
        return None


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Environment] = None,
) -> tuple[int, int]:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return both exit statuses.

    Commands are split on spaces and looked up in the environment's PATH.
    A command that cannot be started reports status 1 for the first and 2
    for the second. If ``infile`` cannot be opened the first command is not
    run. If ``outfile`` cannot be opened the second command writes to
    standard output.
    """
    environment = _as_dict(os.environ if env is None else env)
    paths = split_paths(environment)
    read_end, write_end = os.pipe()
    first: Optional[subprocess.Popen] = None
    second: Optional[subprocess.Popen] = None
    try:
        try:
            in_fd: Optional[int] = os.open(infile, os.O_RDONLY)
        except OSError:
            in_fd = None
        if in_fd is not None:
            try:
                first = _start(cmd1, paths, environment, in_fd, write_end)
            finally:
                os.close(in_fd)
        os.close(write_end)
        write_end = -1

        try:
            out_fd: Optional[int] = os.open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
        except OSError:
            out_fd = None
        try:
            second = _start(cmd2, paths, environment, read_end, out_fd)
        finally:
            if out_fd is not None:
                os.close(out_fd)
    finally:
        if write_end >= 0:
            os.close(write_end)
        os.close(read_end)

    first_status = first.wait() if first is not None else FIRST_FAILURE
    second_status = second.wait() if second is not None else SECOND_FAILURE
    return first_status, second_status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline when given exactly four arguments; always return 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 4:
        infile, cmd1, cmd2, outfile = args
        run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    return 0


if __name__ == "__main__":
    sys.exit(main())