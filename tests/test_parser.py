import pytest

from pebble.core import RedirectMode, Redirection, Stream, parse_line


def test_quoted_tokens_keep_spaces() -> None:
    parsed = parse_line("echo 'a b' \"c d\"")
    assert parsed.tokens == ("echo", "a b", "c d")
    assert parsed.redirection is None


def test_stdout_redirection() -> None:
    parsed = parse_line("cat file.txt > out.txt")
    assert parsed.tokens == ("cat", "file.txt")
    assert parsed.redirection == Redirection(Stream.STDOUT, RedirectMode.TRUNCATE, "out.txt")


def test_stderr_append_redirection() -> None:
    parsed = parse_line("ls 2>> err.log")
    assert parsed.tokens == ("ls",)
    assert parsed.redirection == Redirection(Stream.STDERR, RedirectMode.APPEND, "err.log")


@pytest.mark.parametrize(
    ("line", "stream", "mode"),
    [
        ("echo hi >out", Stream.STDOUT, RedirectMode.TRUNCATE),
        ("echo hi 1>out", Stream.STDOUT, RedirectMode.TRUNCATE),
        ("echo hi >>out", Stream.STDOUT, RedirectMode.APPEND),
        ("echo hi 1>> out", Stream.STDOUT, RedirectMode.APPEND),
        ("echo hi 2> out", Stream.STDERR, RedirectMode.TRUNCATE),
    ],
)
def test_operator_forms(line: str, stream: Stream, mode: RedirectMode) -> None:
    parsed = parse_line(line)
    assert parsed.tokens == ("echo", "hi")
    assert parsed.redirection == Redirection(stream, mode, "out")


def test_escaped_quote_inside_double_quotes() -> None:
    assert parse_line('echo "a\\"b"').tokens == ("echo", 'a"b')


def test_backslash_is_literal_inside_single_quotes() -> None:
    assert parse_line("echo 'a\\b'").tokens == ("echo", "a\\b")


def test_backslash_kept_before_ordinary_char_in_double_quotes() -> None:
    assert parse_line('echo "a\\nb" "x\\\\y" "\\$HOME"').tokens == ("echo", "a\\nb", "x\\y", "$HOME")


def test_unquoted_escape_takes_next_char_literally() -> None:
    assert parse_line("echo a\\ b \\'c\\' \\>x").tokens == ("echo", "a b", "'c'", ">x")


def test_adjacent_quoted_parts_join_into_one_token() -> None:
    assert parse_line("echo 'he'\"llo\"world").tokens == ("echo", "helloworld")


def test_other_quote_is_literal_inside_quotes() -> None:
    assert parse_line("echo \"it's\" 'say \"hi\"'").tokens == ("echo", "it's", 'say "hi"')


def test_repeated_spaces_do_not_create_empty_tokens() -> None:
    assert parse_line("  echo   a    b  ").tokens == ("echo", "a", "b")


def test_empty_quotes_produce_empty_token() -> None:
    assert parse_line("echo '' x").tokens == ("echo", "", "x")


def test_unterminated_quote_is_tolerated() -> None:
    assert parse_line("echo 'abc def").tokens == ("echo", "abc def")


def test_trailing_backslash_is_kept() -> None:
    assert parse_line("echo abc\\").tokens == ("echo", "abc\\")


def test_operator_flushes_preceding_word() -> None:
    parsed = parse_line("echo hi>out")
    assert parsed.tokens == ("echo", "hi")
    assert parsed.redirection == Redirection(Stream.STDOUT, RedirectMode.TRUNCATE, "out")


def test_quoted_digit_is_not_a_descriptor() -> None:
    parsed = parse_line("echo '2'>out")
    assert parsed.tokens == ("echo", "2")
    assert parsed.redirection is not None
    assert parsed.redirection.stream is Stream.STDOUT


def test_operator_without_path_yields_empty_path() -> None:
    parsed = parse_line("echo hi >")
    assert parsed.tokens == ("echo", "hi")
    assert parsed.redirection == Redirection(Stream.STDOUT, RedirectMode.TRUNCATE, "")


def test_path_chunks_are_concatenated() -> None:
    parsed = parse_line("echo hi > out file")
    assert parsed.redirection is not None
    assert parsed.redirection.path == "outfile"


def test_quoted_path_may_contain_spaces() -> None:
    parsed = parse_line("echo hi > 'my out'")
    assert parsed.redirection is not None
    assert parsed.redirection.path == "my out"


def test_later_operator_replaces_pending_operator() -> None:
    parsed = parse_line("echo hi > 2> err")
    assert parsed.redirection == Redirection(Stream.STDERR, RedirectMode.TRUNCATE, "err")


def test_completed_target_is_not_replaced() -> None:
    parsed = parse_line("echo hi > first 2>> second")
    assert parsed.tokens == ("echo", "hi")
    assert parsed.redirection == Redirection(Stream.STDOUT, RedirectMode.TRUNCATE, "first")


def test_empty_line_has_no_tokens() -> None:
    parsed = parse_line("")
    assert parsed.tokens == ()
    assert parsed.name == ""
    assert parsed.args == []


@pytest.mark.parametrize(
    "tokens",
    [
        ["echo"],
        ["echo", "hello", "world"],
        ["ls", "-la", "/tmp/dir", "file.txt"],
        ["cmd", "a=b", "x.y_z", "1", "--flag"],
    ],
)
def test_plain_tokens_round_trip(tokens: list[str]) -> None:
    assert list(parse_line(" ".join(tokens)).tokens) == tokens
