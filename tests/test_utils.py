import os
import stat

import pytest

from minishell.utils import (
    StringCursor,
    create_tmpfile,
    is_identifier,
    is_ifs,
    print_error,
    print_heredoc_warning,
    print_signal_info,
    print_syntax_error,
)


@pytest.mark.parametrize("name", ["_abc", "a1", "HOME", "_", "x_y_9"])
def test_is_identifier_accepts_valid_names(name):
    assert is_identifier(name) is True


@pytest.mark.parametrize("name", ["", "1a", "a-b", "a b", "=value", "é"])
def test_is_identifier_rejects_invalid_names(name):
    assert is_identifier(name) is False


@pytest.mark.parametrize("char", [" ", "\t", "\n"])
def test_is_ifs_accepts_separators(char):
    assert is_ifs(char) is True


@pytest.mark.parametrize("char", ["a", "\r", "", "  "])
def test_is_ifs_rejects_others(char):
    assert is_ifs(char) is False


def test_print_error_writes_to_stderr(capsys):
    print_error("cd", "No such file or directory")
    captured = capsys.readouterr()
    assert captured.err == "minishell: cd: No such file or directory\n"
    assert captured.out == ""


def test_print_syntax_error(capsys):
    print_syntax_error("|")
    assert capsys.readouterr().err == (
        "minishell: syntax error near unexpected token `|'\n"
    )


def test_print_heredoc_warning(capsys):
    print_heredoc_warning("EOF")
    assert capsys.readouterr().err == (
        "minishell: warning: here-document delimited by end-of-file "
        "(wanted `EOF')\n"
    )


def test_print_signal_info(capsys):
    print_signal_info("Quit", 3)
    assert capsys.readouterr().err == "Quit: 3\n"


def _unique_target(tmp_path):
    return f"minishell-test-{os.getpid()}-{tmp_path.name}"


def test_create_tmpfile_is_private_and_writable(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _unique_target(tmp_path)
    with create_tmpfile(target) as handle:
        path = handle.name
        handle.write(b"data\n")
    try:
        assert os.path.basename(path) == target
        with open(path, "rb") as reread:
            assert reread.read() == b"data\n"
        assert stat.S_IMODE(os.stat(path).st_mode) & 0o077 == 0
    finally:
        os.unlink(path)


def test_create_tmpfile_falls_back_when_name_taken(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = _unique_target(tmp_path)
    first = create_tmpfile(target)
    first.close()
    try:
        second = create_tmpfile(target)
        second.close()
        try:
            assert second.name != first.name
            assert os.path.basename(second.name) == target
        finally:
            os.unlink(second.name)
    finally:
        os.unlink(first.name)


def test_create_tmpfile_raises_when_every_directory_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        create_tmpfile("no-such-subdir-for-minishell/file")


def test_string_cursor_trim_till_walks_words():
    cursor = StringCursor("echo hello")
    assert cursor.trim_till(" ") == "echo"
    assert cursor.left == cursor.right == 4
    cursor.consume_char()
    assert (cursor.left, cursor.right) == (5, 5)
    assert cursor.trim_till(" ") == "hello"
    assert cursor.trim() == ""


def test_string_cursor_trim_till_without_match_returns_rest():
    cursor = StringCursor("abc$def")
    cursor.consume_char()
    assert cursor.trim_till("#") == "bc$def"
    assert cursor.left == len("abc$def")


def test_string_cursor_trim_till_stops_at_first_of_set():
    cursor = StringCursor("ab'cd\"ef")
    assert cursor.trim_till("\"'") == "ab"
    assert cursor.text[cursor.right] == "'"


def test_string_cursor_pieces_rebuild_text():
    text = "a b  c"
    cursor = StringCursor(text)
    pieces = []
    while cursor.right < len(text):
        pieces.append(cursor.trim_till(" "))
        if cursor.right < len(text):
            cursor.consume_char()
            pieces.append(" ")
    assert "".join(pieces) == text