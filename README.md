# minishell

This is the front end of a small POSIX-style command shell. It splits a line of input
into tokens. It also provides the helpers that a shell needs around that step:

- identifier and field-separator checks
- the shell's error messages
- temporary files for here-documents
- signal descriptions

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `minishell.token`

This module has the `TokenType` enumeration and the frozen `Token` dataclass. A `Token` holds a `type` and an optional `value`.

### `minishell.lexer`

`tokenize(text)` splits one input line into a list of `Token`s.

- Blanks (space and tab) separate words.
- Quotes, single or double, are kept inside the word they belong to. Blanks and operators inside quotes do not split the word.
- These operators become their own tokens: `&&`, `||`, `|`, `(`, `)`, `<`, `<<`, `>` and `>>`.
- A single `&` is part of a word.
- A `#` at the start of a word begins a comment. The comment runs to the end of the line.
- The list always ends with exactly one terminal token. That token is either:
  - `TokenType.EOF`, or
  - `TokenType.UNTERMINATED_QUOTE`, whose value is the text from the unclosed quote onwards.

### `minishell.utils`

- `is_identifier(text)` tells whether `text` is a valid variable name.
- `is_ifs(char)` tells whether `char` is a space, a tab or a newline.
- `print_error`, `print_syntax_error`, `print_heredoc_warning` and `print_signal_info` write the shell's messages to standard error.
- `create_tmpfile(target)` creates a new file named `target`, opened for binary writing with mode `0600`.
  - It tries `/tmp/`, `/var/tmp/`, `/usr/tmp/` and the current directory, in that order.
  - If every directory fails, it raises the last `OSError`.
- `StringCursor` is a `[left, right)` window over a string. Its methods are `consume_char`, `trim` and `trim_till`.

### `minishell.signals`

- `create_siglist()` returns a list of descriptions indexed by signal number, for example `"Interrupt"` for `SIGINT`.
- `signal_description(signum)` returns the description of a single signal number. It returns `"Unknown signal"` for numbers it does not know.

## Example

```python
from minishell.lexer import tokenize

for token in tokenize("ls -l | wc > out.txt"):
    print(token.type.name, token.value)
# WORD ls
# WORD -l
# PIPE |
# WORD wc
# GREAT >
# WORD out.txt
# EOF None
```

## What this package does not do

The package stops at tokens. It has no parser and no syntax tree. It does not read here-documents, expand variables or run commands. It has no interactive prompt and installs no command.