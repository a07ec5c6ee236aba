import pytest

from ftlib.strings import (
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

SAMPLE = "the quick brown fox jumps"


def test_strlen_matches_len():
    assert strlen(SAMPLE) == len(SAMPLE)
    assert strlen("") == 0


def test_strlen_rejects_none():
    with pytest.raises(TypeError):
        strlen(None)


@pytest.mark.parametrize("ch", ["t", "q", "x", "s", " "])
def test_strchr_finds_first(ch):
    index = strchr(SAMPLE, ch)
    assert SAMPLE[index] == ch
    assert ch not in SAMPLE[:index]


def test_strchr_missing_and_nul():
    assert strchr(SAMPLE, "z") is None
    assert strchr(SAMPLE, 0) == len(SAMPLE)
    assert strchr(SAMPLE, ord("q")) == SAMPLE.index("q")


def test_strchr_int_taken_modulo_256():
    assert strchr(SAMPLE, ord("q") + 256) == SAMPLE.index("q")


@pytest.mark.parametrize("ch", ["t", "o", "u", "s"])
def test_strrchr_finds_last(ch):
    index = strrchr(SAMPLE, ch)
    assert SAMPLE[index] == ch
    assert ch not in SAMPLE[index + 1 :]


def test_strrchr_first_char_and_nul():
    assert strrchr("abc", "a") == 0
    assert strrchr("abc", "\0") == 3
    assert strrchr("abc", "z") is None


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strnstr_empty_needle():
    assert strnstr(SAMPLE, "", 0) == 0


def test_strnstr_within_and_beyond_length():
    pos = SAMPLE.index("brown")
    assert strnstr(SAMPLE, "brown", len(SAMPLE)) == pos
    assert strnstr(SAMPLE, "brown", pos + len("brown")) == pos
    assert strnstr(SAMPLE, "brown", pos + len("brown") - 1) is None
    assert strnstr(SAMPLE, "cat", len(SAMPLE)) is None


def test_strnstr_length_larger_than_text():
    assert strnstr("abc", "c", 100) == 2


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strdup_copy_equals():
    assert strdup(SAMPLE) == SAMPLE
    assert strdup("") == ""


def test_strlcpy_fits():
    text, total = strlcpy("hello", 10)
    assert text == "hello"
    assert total == len("hello")


def test_strlcpy_truncates():
    for size in range(1, 6):
        text, total = strlcpy("hello", size)
        assert text == "hello"[: size - 1]
        assert total == 5


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_appends():
    text, total = strlcat("foo", "bar", 20)
    assert text == "foo" + "bar"
    assert total == 6


def test_strlcat_truncates_to_size():
    text, total = strlcat("foo", "bar", 5)
    assert len(text) == 4
    assert text.startswith("foo")
    assert total == 6


def test_strlcat_size_not_larger_than_dest():
    assert strlcat("foo", "bar", 2) == ("foo", 2 + 3)
    assert strlcat("foo", "bar", 3) == ("foo", 3 + 3)


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string_ends_with_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_is_antisymmetric():
    pairs = [("apple", "apricot"), ("x", ""), ("same", "same"), ("\x80", "a")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_substr_basic():
    assert substr(SAMPLE, 4, 5) == SAMPLE[4:9]
    assert substr(SAMPLE, 0, len(SAMPLE)) == SAMPLE


def test_substr_clamps_and_empties():
    assert substr("hello", 3, 100) == "hello"[3:]
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 1, 0) == ""


def test_substr_errors():
    with pytest.raises(TypeError):
        substr(None, 0, 1)
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"


def test_strjoin_both_missing():
    with pytest.raises(TypeError):
        strjoin(None, None)


def test_strtrim_removes_set_from_both_ends():
    result = strtrim("xxyhello worldyx", "xy")
    assert result == "hello world"
    assert strtrim("  pad  ", " ") == "pad"


def test_strtrim_empty_set_and_all_trimmed():
    assert strtrim("  pad  ", "") == "  pad  "
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_ends_not_in_set():
    trimmed = strtrim("--a-b--", "-")
    assert trimmed[0] != "-" and trimmed[-1] != "-"
    assert trimmed in "--a-b--"


def test_strtrim_rejects_none():
    with pytest.raises(TypeError):
        strtrim(None, "a")


def test_strmapi_uses_index_and_char():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch.upper()

    assert strmapi("abc", record) == "ABC"
    assert seen == list(enumerate("abc"))


def test_strmapi_identity_round_trip():
    assert strmapi(SAMPLE, lambda i, ch: ch) == SAMPLE


def test_strmapi_bad_return():
    with pytest.raises(ValueError):
        strmapi("abc", lambda i, ch: ch * 2)


def test_striteri_replaces_and_keeps():
    result = striteri("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result == "AbCd"


def test_striteri_no_function():
    assert striteri("abc", None) == "abc"


def test_striteri_visits_in_order():
    seen = []
    striteri(SAMPLE, lambda i, ch: seen.append(i))
    assert seen == list(range(len(SAMPLE)))


def test_striteri_bad_return():
    with pytest.raises(ValueError):
        striteri("abc", lambda i, ch: "")