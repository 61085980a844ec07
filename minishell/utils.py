"""Small helpers shared across the shell: identifiers, errors, temp files."""

from __future__ import annotations

import os
import string
import sys
from dataclasses import dataclass
from typing import BinaryIO

_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_IFS = frozenset(" \t\n")

_TMP_DIRS = ("/tmp/", "/var/tmp/", "/usr/tmp/", "./")


def is_identifier(text: str) -> bool:
    """Return True if text is a valid shell variable name."""
    if not text or text[0] not in _IDENT_START:
        return False
    return all(c in _IDENT_CHARS for c in text)


def is_ifs(char: str) -> bool:
    """Return True if char is one of the field separators (space, tab, newline)."""
    return char in _IFS and len(char) == 1


def print_error(func: str, desc: str) -> None:
    """Report an error on standard error."""
    sys.stdout.flush()
    sys.stderr.write(f"minishell: {func}: {desc}\n")
    sys.stderr.flush()


def print_syntax_error(token_value: str | None) -> None:
    """Report a syntax error near the given token."""
    sys.stderr.write(
        f"minishell: syntax error near unexpected token `{token_value}'\n"
    )
    sys.stderr.flush()


def print_heredoc_warning(delimiter: str) -> None:
    """Warn that a here-document ended at end of input instead of its delimiter."""
    sys.stderr.write(
        "minishell: warning: here-document delimited by end-of-file "
        f"(wanted `{delimiter}')\n"
    )
    sys.stderr.flush()


def print_signal_info(sig_detail: str, signum: int) -> None:
    """Print a signal description followed by its number."""
    sys.stderr.write(f"{sig_detail}: {signum}\n")
    sys.stderr.flush()


def _private_opener(path: str, flags: int) -> int:
    return os.open(path, flags, 0o600)


def create_tmpfile(target: str) -> BinaryIO:
    """Exclusively create a file named target in the first usable temp directory.

    The directories tried, in order, are /tmp/, /var/tmp/, /usr/tmp/ and the
    current directory. The file is created with owner read/write permission
    only and returned open for binary writing; its ``name`` is the path.
    The error from the last attempt is raised if every directory fails.
    """
    error: OSError | None = None
    for directory in _TMP_DIRS:
        path = directory + target
        try:
            return open(path, "xb", opener=_private_opener)
        except OSError as exc:
            error = exc
    assert error is not None
    raise error


@dataclass
class StringCursor:
    """A window [left, right) sliding over a string."""

    text: str
    left: int = 0
    right: int = 0

    def consume_char(self) -> None:
        """Skip one character, moving both ends of the window."""
        self.left += 1
        self.right += 1

    def trim(self) -> str:
        """Return the text in the window and close the window at its right end."""
        result = self.text[self.left:self.right]
        self.left = self.right
        return result

    def trim_till(self, charset: str) -> str:
        """Extend the window up to the next character in charset, then trim."""
        while self.right < len(self.text) and self.text[self.right] not in charset:
            self.right += 1
        return self.trim()