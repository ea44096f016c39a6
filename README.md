# minish

The pieces of a small shell: splitting and tidying command lines,
keeping a table of variables, expanding `$NAME` references,
parsing a line into a tree at pipes and redirections, and running
the built-in commands.

## Installing

```
pip install .
```

## Modules

- `minish.text`: `split_args(line, delimiter)` splits on a
  delimiter but keeps quoted runs together; `squeeze_spaces(text)`
  trims leading blanks and collapses runs of blanks, returning
  `None` when nothing is left; `quotes_balanced(text)` checks that
  every quote is closed. `is_special_char` and `is_echo_printable`
  classify single characters. `QuoteError` is raised for unclosed
  quotes.
- `minish.environment`: `Environment` holds named string variables.
  `Environment.from_entries` builds one from `NAME=value` strings.
  It has `set`, `set_entry`, `get`, `lookup`, `unset` and `items`
  (newest first). `env_lines()` gives `NAME=value` lines and
  `export_lines()` gives `declare -x NAME="value"` lines sorted by
  name. A variable set without a value holds `''`.
- `minish.expand`: `expand(text, env)` replaces `$NAME` outside
  single quotes. Unknown names expand to nothing, and quote
  characters are kept. It raises `QuoteError` on unclosed quotes.
- `minish.tree`: `parse_line(line)` builds a tree of `Node`s. `|`
  binds loosest, then `>>`, `<<`, `>` and `<`, and each operator
  splits at its first occurrence. `tree_size`, `inorder`,
  `number_nodes` and `describe` walk the tree left to right.
- `minish.builtins`: `run_builtin(args, line, env, out)` runs
  `echo` (with `-n`), `cd`, `pwd`, `export`, `unset`, `env` and
  `exit`, and returns `False` for anything else. `exit` raises
  `ShellExit`. `echo_output(line)` gives what `echo` prints.
  `change_directory(path, env)` also sets `PWD`.

## Example

```python
import io

from minish.builtins import run_builtin
from minish.environment import Environment
from minish.expand import expand
from minish.tree import describe, parse_line

env = Environment.from_entries(["HOME=/home/user", "USER=user"])
print(expand('echo "$HOME" \'$USER\'', env))
# echo "/home/user" '$USER'

print(describe(parse_line("ls -l | grep py > out.txt")))
# ['Command:ls -l$', 'Operator:|$', 'Command:grep py$',
#  'Operator:>$', 'Command:out.txt$']

out = io.StringIO()
run_builtin(["echo", "hi"], "echo  hi   there", env, out)
print(repr(out.getvalue()))
# 'hi there\n'
```

## What it does not do

The package has no interactive prompt and installs no command.
It does not start external programs. It parses pipes,
redirections and here-documents into a tree, but it does not run
them: no processes are connected and no files are opened for
redirection. To get a working shell, you need to write that loop
and the execution of the tree yourself, on top of these modules.

## Tests

```
pip install .[test]
pytest
```