# pipex

`pipex` runs two commands connected by a pipe. The first command reads
its standard input from one file. The second command writes its standard
output to another file. It behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command-line use

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same command is also available as `python -m pipex.pipeline`.

It takes exactly four arguments: an input file, two commands and an
output file. If it gets any other number, it prints
`Error` and `2 files and 2 cmd needed` on standard output and exits with
status 1.

- The input file must exist and be readable. If it cannot be opened,
  `Error - open_files fd.in` is printed on standard error, the output
  file is left untouched, and the exit status is 1.
- The output file is created if it is missing and truncated if it
  already exists. New files get mode `0644`. If it cannot be opened,
  `Error - open files fd.out` is printed and the exit status is 1.
- Each command is split on spaces. A space inside single quotes does not
  split the command, and all single-quote characters are removed. So
  `"grep 'a b'"` becomes `["grep", "a b"]`.
- A command name that contains a `/` is used as a path exactly as given.
  Any other name is looked up in the directories listed in `PATH`, and
  the first executable match is used.
- If a command cannot be found, or is empty, `Error - cmd_path` is
  printed on standard error. If it cannot be executed,
  `Error - execve failed` is printed instead. In both cases the other
  command still runs.

Once both files are open, the command exits with status 0, even if one
of the commands could not be started or failed.

Example:

```sh
pipex input.txt "grep 'hello world'" "wc -l" count.txt
```

## Library use

```python
from pipex.split import split_quoted, split_words, count_words
from pipex.path import find_command_path, search_path, join_path
from pipex.pipeline import run_pipeline, build_argv, open_files, PipexError

split_quoted("echo 'a b' c", " ")         # ['echo', 'a b', 'c']
split_words("a::b:", ":")                 # ['a', 'b']
count_words("a::b:", ":")                 # 2

search_path({"PATH": "/bin::/usr/bin"})   # ['/bin', '/usr/bin']
join_path("/bin", "ls")                   # '/bin/ls'
find_command_path("ls", {"PATH": "/bin:/usr/bin"})   # e.g. '/bin/ls', or None

build_argv("ls -l", {"PATH": "/bin:/usr/bin"})       # e.g. ('/bin/ls', ['ls', '-l'])

try:
    statuses = run_pipeline("input.txt", "cat", "wc -l", "count.txt", None)
except PipexError as err:
    print(err)
```

- `run_pipeline(infile, first, second, outfile, env)` returns a list of
  the two commands' exit statuses. A command that could not be started
  is reported on standard error and counts as status 1. When `env` is
  `None`, the current environment is used, both for the `PATH` lookup
  and for the commands themselves.
- `build_argv(command, env)` returns the executable path and the
  argument list. The first item of the argument list is the program name
  as written. It raises `PipexError("cmd_path")` when no executable is
  found.
- `open_files(infile, outfile)` returns a `PipeFiles` holding the opened
  `infile` and `outfile`. It can be used as a context manager, and its
  `close()` method closes both files. It raises `PipexError` if either
  file cannot be opened.

## Limitations

Exactly two commands are supported, with one input file and one output
file. There is no support for longer pipelines, here-documents or
appending to the output file. Double quotes and backslash escapes are
not treated specially when commands are split.

## Running the tests

```sh
pip install ".[test]"
pytest
```