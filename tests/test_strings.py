import pytest

from ftkit.strings import (
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    s = "banana"
    assert strchr(s, "a") == s.index("a")
    assert strchr(s, "z") is None


def test_strchr_nul_finds_end():
    s = "abc"
    assert strchr(s, "\0") == len(s)


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    s = "banana"
    assert strrchr(s, "a") == len(s) - 1
    assert strrchr(s, "q") is None
    assert strrchr(s, "\0") == len(s)


def test_strnstr_basic():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay)) == hay.index("world")
    assert strnstr(hay, "", 0) == 0


def test_strnstr_respects_length():
    hay = "hello world"
    pos = hay.index("world")
    assert strnstr(hay, "world", pos + len("world") - 1) is None
    assert strnstr(hay, "world", pos + len("world")) == pos


def test_strnstr_missing():
    assert strnstr("abc", "abcd", 10) is None


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strlcpy_truncates_and_reports_length():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)


def test_strlcpy_full_and_zero():
    src = "hello"
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_appends_within_size():
    dst, src = "foo", "bar"
    result, total = strlcat(dst, src, 100)
    assert result == dst + src
    assert total == len(dst) + len(src)


def test_strlcat_truncates():
    dst, src = "foo", "barbaz"
    result, total = strlcat(dst, src, 6)
    assert len(result) == 5
    assert result.startswith(dst)
    assert total == len(dst) + len(src)


def test_strlcat_buffer_already_full():
    dst, src = "foobar", "xyz"
    result, total = strlcat(dst, src, 4)
    assert result == dst
    assert total == 4 + len(src)


def test_substr_cases():
    s = "abcdef"
    assert substr(s, 2, 3) == s[2:5]
    assert substr(s, 4, 100) == s[4:]
    assert substr(s, 10, 2) == ""
    assert substr(s, len(s), 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("  xx hello xx  ", " x") == "hello"
    assert strtrim("aaaa", "a") == ""
    assert strtrim("abc", "") == "abc"


def test_split_drops_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split(",,,", ",") == []
    assert split("one", ",") == ["one"]


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_split_join_roundtrip():
    words = ["alpha", "beta", "gamma"]
    assert split(";".join(words), ";") == words


def test_strmapi_index_and_char():
    s = "abcd"
    result = strmapi(s, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"
    assert strmapi("", lambda i, c: c) == ""
    assert len(strmapi(s, lambda i, c: c)) == len(s)


def test_strmapi_requires_function():
    with pytest.raises(TypeError):
        strmapi("abc", None)