import pytest

from cubscene.textutil import find, find_unquoted, split_words, strip_comments


@pytest.mark.parametrize(
    "text, needle",
    [("hello world", "world"), ("abcabc", "cab"), ("abc", "x"), ('"a"', '"')],
)
def test_find_matches_str_find(text, needle):
    assert find(text, needle, len(text)) == text.find(needle)


def test_find_respects_limit():
    assert find("hello world", "world", 4) == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = '"/*" /*'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")


def test_find_unquoted_without_quotes_matches_find():
    text = "a /* b */ c"
    assert find_unquoted(text, "/*", len(text)) == find(text, "/*", len(text))


def test_find_unquoted_only_quoted_match():
    text = '"x//y"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment():
    assert strip_comments("a /* b */ c") == "a " + " " * len("/* b */") + " c"


def test_strip_line_comment_through_newline():
    text = '"x//y" // z\n'
    assert strip_comments(text) == '"x//y"' + " " * len(" // z\n")


def test_strip_comments_keeps_length():
    text = '/* XPM */\nstatic char *x[] = {\n"1 1 1 1", // header\n};\n'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result and "//" not in result
    assert '"1 1 1 1"' in result


def test_strip_comments_without_comments_is_identity():
    text = '"a c #FF0000",\n"b c None"\n'
    assert strip_comments(text) == text