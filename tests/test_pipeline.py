import os

import pytest

from pipex.pipeline import find_path, main, run_pipeline, split_paths


def test_split_paths_from_mapping():
    assert split_paths({"HOME": "/home/x", "PATH": "/bin:/usr/bin"}) == ["/bin/", "/usr/bin/"]


def test_split_paths_from_entries_drops_empty_pieces():
    assert split_paths(["HOME=/home/x", "PATH=/a::/b"]) == ["/a/", "/b/"]


def test_split_paths_uses_first_path_like_entry():
    result = split_paths(["PATH=/first", "PATH=/second"])
    assert result == ["/first/"]


def test_split_paths_without_path():
    with pytest.raises(LookupError):
        split_paths({"HOME": "/home/x"})


def test_find_path_searches_directories(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    full = tmp_path / "full"
    full.mkdir()
    (full / "tool_xyz").write_text("")
    paths = [str(empty) + "/", str(full) + "/"]
    assert find_path(paths, "tool_xyz") == str(full) + "/tool_xyz"


def test_find_path_returns_existing_path_unchanged(tmp_path):
    target = tmp_path / "prog"
    target.write_text("")
    assert find_path([], str(target)) == str(target)


def test_find_path_missing(tmp_path):
    assert find_path([str(tmp_path) + "/"], "no_such_tool_xyz") is None


def _files(tmp_path, content=b"hello\nworld\n"):
    infile = tmp_path / "in.txt"
    infile.write_bytes(content)
    return str(infile), str(tmp_path / "out.txt")


def test_pipeline_runs_both_commands(tmp_path):
    infile, outfile = _files(tmp_path)
    statuses = run_pipeline(infile, "cat", "tr a-z A-Z", outfile, os.environ)
    assert statuses == (0, 0)
    assert (tmp_path / "out.txt").read_bytes() == b"HELLO\nWORLD\n"


def test_pipeline_truncates_outfile(tmp_path):
    infile, outfile = _files(tmp_path, b"ab\n")
    (tmp_path / "out.txt").write_bytes(b"x" * 100)
    statuses = run_pipeline(infile, "cat", "cat", outfile, os.environ)
    assert statuses == (0, 0)
    assert (tmp_path / "out.txt").read_bytes() == b"ab\n"


def test_pipeline_second_command_missing(tmp_path):
    infile, outfile = _files(tmp_path)
    statuses = run_pipeline(infile, "cat", "no_such_tool_xyz", outfile, os.environ)
    assert statuses[1] == 2
    assert (tmp_path / "out.txt").read_bytes() == b"\n"


def test_pipeline_first_command_missing(tmp_path):
    infile, outfile = _files(tmp_path)
    statuses = run_pipeline(infile, "no_such_tool_xyz", "cat", outfile, os.environ)
    assert statuses == (1, 0)
    assert (tmp_path / "out.txt").read_bytes() == b"\n"


def test_pipeline_missing_infile(tmp_path):
    outfile = str(tmp_path / "out.txt")
    statuses = run_pipeline(str(tmp_path / "absent"), "cat", "cat", outfile, os.environ)
    assert statuses == (1, 0)
    assert (tmp_path / "out.txt").read_bytes() == b""


def test_pipeline_requires_path(tmp_path):
    infile, outfile = _files(tmp_path)
    with pytest.raises(LookupError):
        run_pipeline(infile, "cat", "cat", outfile, {"HOME": "/"})


def test_main_runs_pipeline(tmp_path):
    infile, outfile = _files(tmp_path, b"data\n")
    assert main([infile, "cat", "cat", outfile]) == 0
    assert (tmp_path / "out.txt").read_bytes() == b"data\n"


def test_main_wrong_argument_count(tmp_path):
    infile, outfile = _files(tmp_path)
    assert main([infile, "cat", outfile]) == 0
    assert not (tmp_path / "out.txt").exists()