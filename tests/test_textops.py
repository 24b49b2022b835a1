import pytest

from fdfkit import textops


def test_split_drops_empty_fields():
    assert textops.split("  10 20   30 ", " ") == ["10", "20", "30"]


def test_split_only_separators():
    assert textops.split("    ", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(TypeError):
        textops.split("a,b", ",,")


def test_split_rejoins_to_original_without_repeats():
    text = "a,b,c"
    assert ",".join(textops.split(text, ",")) == text


def test_strlen_stops_at_nul():
    assert textops.strlen("abc\0def") == 3
    assert textops.strlen(b"xy\0z") == 2
    assert textops.strlen("hello") == len("hello")


def test_strchr_finds_first():
    s = "map.fdf.fdf"
    assert textops.strchr(s, ".") == s.index(".")


def test_strchr_missing():
    assert textops.strchr("abc", "z") is None


def test_strchr_nul_matches_end():
    assert textops.strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    s = "map.fdf.fdf"
    index = textops.strrchr(s, ".")
    assert s[index:] == ".fdf"


def test_strrchr_missing_and_nul():
    assert textops.strrchr("abc", "q") is None
    assert textops.strrchr("abc", "\0") == len("abc")


def test_strcmp_equal_and_sign():
    assert textops.strcmp("abc", "abc") == 0
    assert textops.strcmp("abc", "abd") < 0
    assert textops.strcmp("abd", "abc") > 0


def test_strcmp_prefix_is_smaller():
    assert textops.strcmp("ab", "abc") == -ord("c")
    assert textops.strcmp("abc", "ab") == ord("c")


def test_strcmp_antisymmetric():
    pairs = [("x", "y"), ("hello", "help"), ("", "a")]
    for a, b in pairs:
        assert textops.strcmp(a, b) == -textops.strcmp(b, a)


def test_strncmp_limits_comparison():
    assert textops.strncmp("abcX", "abcY", 3) == 0
    assert textops.strncmp("abcX", "abcY", 4) < 0
    assert textops.strncmp("anything", "other", 0) == 0


def test_strncmp_with_short_string():
    assert textops.strncmp(".fdf", ".fd", 5) == ord("f")


def test_strncmp_negative_rejected():
    with pytest.raises(ValueError):
        textops.strncmp("a", "b", -1)


def test_strdup_equal_copy():
    assert textops.strdup("FDF - map") == "FDF - map"


def test_strndup_truncates():
    assert textops.strndup("abcdef", 3) == "abc"
    assert textops.strndup("ab", 10) == "ab"


def test_strndup_negative_rejected():
    with pytest.raises(ValueError):
        textops.strndup("abc", -2)


def test_striteri_replaces_in_place():
    buf = list("abcd")
    textops.striteri(buf, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert buf == ["A", "b", "C", "d"]


def test_striteri_passes_indices():
    seen = []
    buf = bytearray(b"xyz")
    textops.striteri(buf, lambda i, v: seen.append(i))
    assert seen == [0, 1, 2]
    assert buf == bytearray(b"xyz")


def test_strjoin():
    assert textops.strjoin("FDF - ", "test.fdf") == "FDF - test.fdf"


def test_strlcpy_fits():
    dst = bytearray(8)
    assert textops.strlcpy(dst, b"hello", 8) == 5
    assert dst[:6] == b"hello\0"


def test_strlcpy_truncates():
    dst = bytearray(b"zzzzzz")
    assert textops.strlcpy(dst, b"hello", 3) == 5
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"zzz"


def test_strlcpy_zero_size_leaves_buffer():
    dst = bytearray(b"keep")
    assert textops.strlcpy(dst, b"hello", 0) == 5
    assert dst == bytearray(b"keep")


def test_strlcpy_size_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        textops.strlcpy(bytearray(2), b"abc", 5)


def test_strlcat_appends():
    dst = bytearray(b"ab\0\0\0\0")
    assert textops.strlcat(dst, b"cd", 6) == 4
    assert dst[:5] == b"abcd\0"


def test_strlcat_truncates():
    dst = bytearray(b"ab\0\0\0\0")
    assert textops.strlcat(dst, b"cd", 4) == 4
    assert dst[:4] == b"abc\0"


def test_strlcat_size_smaller_than_dst():
    dst = bytearray(b"ab\0\0")
    assert textops.strlcat(dst, b"cd", 1) == len(b"cd") + 1
    assert dst == bytearray(b"ab\0\0")


def test_strlcat_zero_size():
    dst = bytearray(b"ab\0\0")
    assert textops.strlcat(dst, b"xyz", 0) == 3


def test_strmapi():
    result = textops.strmapi("abc", lambda i, ch: ch * (i + 1))
    assert result == "abbccc"


def test_strmapi_preserves_length_for_identity():
    s = "10,0xFF"
    assert textops.strmapi(s, lambda i, ch: ch) == s


def test_strnstr_found_within_length():
    hay = "map.fdf"
    index = textops.strnstr(hay, ".fdf", len(hay))
    assert hay[index:] == ".fdf"


def test_strnstr_not_within_length():
    assert textops.strnstr("map.fdf", ".fdf", 6) is None


def test_strnstr_empty_needle_and_zero_length():
    assert textops.strnstr("abc", "", 0) == 0
    assert textops.strnstr("abc", "a", 0) is None


def test_strnstr_missing():
    assert textops.strnstr("abcabc", "cab", 3) is None
    assert textops.strnstr("abcabc", "cab", 6) == 2


def test_strtrim():
    assert textops.strtrim("  \n10 20\n ", " \n") == "10 20"


def test_strtrim_all_trimmed_and_empty_set():
    assert textops.strtrim("aaaa", "a") == ""
    assert textops.strtrim(" x ", "") == " x "


def test_strtrim_none_charset():
    with pytest.raises(TypeError):
        textops.strtrim(" x ", None)


def test_substr():
    assert textops.substr("FDF - map", 6, 3) == "map"
    assert textops.substr("FDF - map", 6, 100) == "map"


def test_substr_start_past_end():
    assert textops.substr("abc", 3, 2) == ""
    assert textops.substr("abc", 10, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        textops.substr("abc", -1, 2)
    with pytest.raises(ValueError):
        textops.substr("abc", 0, -2)