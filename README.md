# minishell

The core pieces of a small interactive shell for POSIX systems, as a Python
library. It has no command of its own. You build your read–eval loop from these
parts:

| Module | What it provides |
| --- | --- |
| `minishell.alias` | `AliasTable`: define, remove, list and expand command aliases (at most 50) |
| `minishell.history` | `History`: the last 20 commands, with re-execution by number |
| `minishell.path` | `PathList`: the shell's own list of directories (`path`, `path + dir`, `path - dir`), at most 100 |
| `minishell.cd` | `change_directory`: change the working directory and keep `PWD` up to date |
| `minishell.exit_command` | `should_exit`: reports whether any `;`-separated command on a line is `exit` |
| `minishell.redirection` | `parse_redirection` and `Redirection`: handle `<` and `>` in an argument list |
| `minishell.pipeline` | `split_pipeline` and `execute_pipeline`: run up to three commands joined by `\|` |
| `minishell.signals` | `JobControl`: ignore Ctrl+C and Ctrl+Z in the shell and pass the terminal to foreground children |

Errors are raised as exceptions: `AliasError`, `HistoryError`, `PathError`,
`CdError` and `RedirectionError`, each in its own module. The message of each
exception is the text a shell would print.

## Aliases

```python
import sys
from minishell.alias import AliasTable

aliases = AliasTable()
aliases.handle(["alias", "ll='ls -l'"], sys.stdout)
aliases.handle(["alias"], sys.stdout)          # prints: alias ll='ls -l'
print(aliases.substitute("ll /tmp"))           # ls -l /tmp
aliases.handle(["alias", "-r", "ll"])          # same as aliases.remove("ll")
aliases.handle(["alias", "-c"])                # same as aliases.clear()
```

`handle` takes the whole argument list, with `args[0]` the command name. A
definition has the form `name='command'`. Defining an existing name replaces
its command. When the table holds 50 aliases, new names are ignored.

An alias is expanded only when it is the first word on the line.
`AliasError` is raised for a badly formed definition, for the removal of an
unknown alias, and for any other argument list.

## History

```python
import sys
from minishell.history import History

history = History()
history.add("echo one")
history.add("echo two")
history.handle(["myhistory"], print, sys.stdout)          # 0  echo one / 1  echo two
history.handle(["myhistory", "-e", "0"], print, sys.stdout)
history.entries()                                         # ['echo one', 'echo two']
history.get(1)                                            # 'echo two'
```

The history holds the last 20 commands and drops the oldest when it is full.
Entries are numbered from 0, oldest first. `myhistory -e N` writes
`Executing: <command>` and passes the command to the `execute` callable you
supply. `myhistory -c` clears the history. An out-of-range number or any other
argument list raises `HistoryError`.

## Search path

```python
import sys
from minishell.path import PathList

paths = PathList()
paths.handle_command("path + /usr/bin", sys.stdout)
paths.handle_command("path + /bin", sys.stdout)
paths.handle_command("path", sys.stdout)       # prints: /usr/bin:/bin
paths.handle_command("path - /bin", sys.stdout)
list(paths)                                    # ['/usr/bin']
```

Removing a directory that is not in the list does nothing. `path +` or
`path -` without a directory, or an unknown operator, raises `PathError`.

## Exit and cd

```python
from minishell.exit_command import should_exit
from minishell.cd import change_directory

should_exit("ls; exit")                  # True
should_exit("exited")                    # False
change_directory("/tmp")                 # returns the new directory, sets PWD
```

`change_directory` raises `CdError` for an empty argument or a directory it
cannot enter.

## Redirection

```python
from minishell.redirection import parse_redirection

redirection = parse_redirection(["sort", "<", "in.txt", ">", "out.txt"])
redirection.args            # ['sort']
redirection.input_file      # 'in.txt'
redirection.output_file     # 'out.txt'
```

The command's arguments end at the first operator. A later operator of the
same kind replaces an earlier one. A `<` or `>` with no file name after it
raises `RedirectionError`.

`open_input()` and `open_output()` return raw file descriptors; the output
file is created or truncated with mode `0644`. `apply()` points standard
input and output of the current process at the files, so call it in a
process that is about to run the command, such as a forked child.

## Pipelines

```python
from minishell.pipeline import split_pipeline, execute_pipeline

split_pipeline("ls -l | grep py | wc -l")
# [['ls', '-l'], ['grep', 'py'], ['wc', '-l']]
execute_pipeline("ls -l | grep py | wc -l")   # list of exit statuses, in order
```

A pipeline runs at most three commands, and any stages after the third are
dropped. Each command keeps at most 19 arguments. Commands are looked up
through the process's `PATH` environment variable. A command that cannot be
started writes `exec failed: ...` to standard error and gets status 1. The
next command in the pipeline then reads empty input.

## Job control

`JobControl.setup_shell()` ignores SIGINT and SIGTSTP, puts the shell in its
own process group and makes that group the terminal's foreground group.
`JobControl.wait_in_foreground(child_pid)` puts a child in its own group,
gives it the terminal and waits for it. It then takes the terminal back and
returns the child's exit code. Failures to hand over the terminal, as when
standard input is not a terminal, are ignored.

## What this package does not do

There is no shell program and no read–eval loop. Nothing reads input lines,
splits them on `;`, dispatches builtins or chains these pieces together; that
is left to your code. The directories kept by `PathList` are not used to find
commands. `execute_pipeline` does not apply `<` or `>` redirections.