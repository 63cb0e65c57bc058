# pipex

`pipex` runs two commands that are connected by a pipe. The first command
reads its input from a file. The second command writes its output to another
file. It works like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also run it as `python -m pipex.pipeline` with the same arguments.

You must give exactly four arguments. With any other number, `pipex` does
nothing. It always exits with status 0.

How the arguments are handled:

- Each command string is split on spaces, and empty pieces are dropped. Quotes
  are not interpreted.
- If the command name is the path of an existing file, that file is run.
  Otherwise it is looked up in the directories of the first environment entry
  that begins with `PATH`.
- If a command cannot be found, a single newline is written where that command's
  output would have gone, and the command is not run.
- If `infile` cannot be opened, the first command is not run.
- The output file is created with mode `0777` (subject to the umask), or
  truncated if it already exists. If it cannot be opened, the second command
  writes to standard output.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

## Library

The pipeline can also be driven from Python through `pipex.pipeline`:

```python
import os
from pipex.pipeline import run_pipeline, split_paths, find_path

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
print(statuses)  # exit status of each command, e.g. (0, 0)

paths = split_paths(dict(os.environ))  # directories, each ending in "/"
print(find_path(paths, "ls"))          # full path, or None
```

- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` returns a tuple of the
  two exit statuses. A command that could not be started reports `1` for the
  first command and `2` for the second. `env` may be a mapping or a sequence of
  `KEY=VALUE` strings. It defaults to `os.environ`.
- `split_paths(env)` raises `LookupError` when there is no `PATH` entry.
- `main(argv=None)` is the command-line entry point.

### Helpers

The package also includes some small helpers:

- `pipex.chars`: ASCII character classes and case mapping: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`.
  These functions accept an integer code or a one-character string.
- `pipex.numbers`: `atoi` (a lenient parse that wraps to 32 bits), `atol` (the
  digits must be followed by the end of the text or a space, otherwise the
  result is 0; wraps to 64 bits), and `itoa`.
- `pipex.memory`: `memchr` and `memcmp` over the first `n` bytes of a buffer.
- `pipex.strings`: `split`, `strtrim`, `strnstr`, `substr`, `strjoin`,
  `strchr`, `strrchr`, `strncmp`, `strlcpy`, `strlcat`, `strmapi`, `striteri`.
  Functions that search return indices, or `None` when nothing is found.
  `strlcpy` and `strlcat` return the resulting text together with the length
  they tried to create.
- `pipex.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. These write to a
  text stream, an integer file descriptor, or standard output when the stream
  is `None`.
- `pipex.printf`: `sprintf` and `printf` for the conversions
  `%c %s %p %d %i %u %x %X %%`. Integers are reduced to C widths. `None` prints
  as `(null)` for `%s` and `(nil)` for `%p`. An unknown conversion produces no
  output. `printf` returns the number of characters written.
- `pipex.linereader`: `LineReader(fd, buffer_size=10)` reads a file descriptor
  one line at a time, in chunks of `buffer_size` bytes. `read_line()` returns
  `bytes` that include the newline, or `None` at end of input. The reader is
  also an iterator.

```python
from pipex.printf import sprintf
from pipex.linereader import LineReader

print(sprintf("%s has %d items (%x)", "list", 42, 255))

with open("input.txt", "rb") as handle:
    for line in LineReader(handle.fileno(), 10):
        print(line)
```

## What it does not do

`pipex` connects exactly two commands. It does not run longer pipelines. It
does not support here-documents, appending to the output file, shell quoting,
globbing or variable expansion.

## Running the tests

```sh
pip install ".[test]"
pytest
```