"""Unit tests for command tokenizing."""

from flowexec.tokenizer import tokenize


class TestBasicTokenizing:
    """Whitespace separated tokens."""

    def test_single_word(self):
        assert tokenize("echo") == ["echo"]

    def test_empty_string(self):
        assert tokenize("") == []

    def test_only_whitespace(self):
        assert tokenize(" \t  ") == []

    def test_spaces_and_tabs(self):
        assert tokenize("ls\t-l   /tmp ") == ["ls", "-l", "/tmp"]

    def test_newline_is_not_a_separator(self):
        assert tokenize("a\nb") == ["a\nb"]


class TestQuoting:
    """Single and double quoted tokens."""

    def test_mixed_quotes(self):
        assert tokenize("ab \"c d\" 'e f' g") == ["ab", "c d", "e f", "g"]

    def test_other_quote_kept_inside(self):
        assert tokenize("echo \"it's\"") == ["echo", "it's"]

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize("echo 'hello world") == ["echo", "hello world"]

    def test_empty_quotes_give_empty_token(self):
        assert tokenize('printf ""') == ["printf", ""]

    def test_no_escape_processing(self):
        assert tokenize(r'echo "a\"b"') == ["echo", "a\\", "b\""]

    def test_quote_inside_word_is_literal(self):
        assert tokenize("a'b c") == ["a'b", "c"]

    def test_token_after_closing_quote_needs_no_separator(self):
        assert tokenize('"ab"cd') == ["ab", "cd"]

    def test_shell_snippet(self):
        assert tokenize('sh -c "echo oops >&2"') == ["sh", "-c", "echo oops >&2"]


class TestLimits:
    def test_default_limit_truncates_silently(self):
        command = " ".join(str(i) for i in range(100))
        tokens = tokenize(command)
        assert len(tokens) == 63
        assert tokens[-1] == "62"

    def test_custom_limit(self):
        assert tokenize("a b c d", max_tokens=2) == ["a", "b"]
