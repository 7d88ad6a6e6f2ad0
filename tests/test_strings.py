import pytest

from solong import strings


SAMPLE = "Hallo, World!"


def test_strlen_matches_len():
    assert strings.strlen(SAMPLE) == len(SAMPLE)


def test_strlen_stops_at_nul():
    assert strings.strlen("ab\0cd") == strings.strlen("ab")


def test_strlen_empty():
    assert strings.strlen("") == 0


def test_strlcpy_fits():
    copied, total = strings.strlcpy("World", 10)
    assert copied == "World"
    assert total == len("World")


def test_strlcpy_truncates_to_size_minus_one():
    copied, total = strings.strlcpy("World", 3)
    assert copied == "World"[:2]
    assert total == len("World")


def test_strlcpy_zero_size_copies_nothing():
    copied, total = strings.strlcpy("World", 0)
    assert copied == ""
    assert total == len("World")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strings.strlcpy("World", -1)


def test_strlcat_truncates_to_buffer():
    dest, src = "Hallo,", "world!"
    result, total = strings.strlcat(dest, src, 10)
    assert result == dest + src[:3]
    assert len(result) == 10 - 1
    assert total == len(dest) + len(src)


def test_strlcat_enough_room():
    result, total = strings.strlcat("ab", "cd", 20)
    assert result == "abcd"
    assert total == len(result)


def test_strlcat_dest_fills_buffer():
    result, total = strings.strlcat("Hallo", "xy", 3)
    assert result == "Hallo"
    assert total == 3 + len("xy")


def test_strlcat_zero_size():
    result, total = strings.strlcat("Hallo", "xy", 0)
    assert result == "Hallo"
    assert total == len("xy")


def test_strchr_first_occurrence():
    assert strings.strchr(SAMPLE, "o") == SAMPLE.index("o")


def test_strchr_accepts_code():
    assert strings.strchr(SAMPLE, ord("W")) == SAMPLE.index("W")


def test_strchr_nul_is_terminator():
    assert strings.strchr(SAMPLE, 0) == len(SAMPLE)


def test_strchr_missing():
    assert strings.strchr(SAMPLE, "z") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strings.strchr(SAMPLE, "ab")


def test_strrchr_last_occurrence():
    assert strings.strrchr(SAMPLE, "o") == SAMPLE.rindex("o")


def test_strrchr_nul_and_missing():
    assert strings.strrchr(SAMPLE, "\0") == len(SAMPLE)
    assert strings.strrchr(SAMPLE, "q") is None


def test_strnstr_found_within_length():
    big = "Hello, World! Nice to meet you!"
    assert strings.strnstr(big, "World", 20) == big.index("World")


def test_strnstr_match_must_end_within_length():
    big = "Hello, World! Nice to meet you!"
    end = big.index("World") + len("World")
    assert strings.strnstr(big, "World", end) == big.index("World")
    assert strings.strnstr(big, "World", end - 1) is None


def test_strnstr_empty_needle():
    assert strings.strnstr("Hello", "", 0) == 0


def test_strncmp_equal():
    assert strings.strncmp("abc", "abc", 3) == 0


def test_strncmp_difference_sign():
    assert strings.strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strings.strncmp("abd", "abc", 3) > 0


def test_strncmp_limited_prefix():
    assert strings.strncmp("abc", "abd", 2) == 0
    assert strings.strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string():
    assert strings.strncmp("abc", "ab", 3) == ord("c")
    assert strings.strncmp("ab", "abc", 3) == -ord("c")


def test_strdup_copy():
    assert strings.strdup(SAMPLE) == SAMPLE
    assert strings.strdup("ab\0cd") == "ab"


def test_strjoin():
    assert strings.strjoin("Hello, ", "World") == "Hello, World"


def test_substr_middle():
    assert strings.substr(SAMPLE, 3, 5) == SAMPLE[3:8]


def test_substr_clamped_and_past_end():
    assert strings.substr(SAMPLE, 7, 100) == SAMPLE[7:]
    assert strings.substr(SAMPLE, len(SAMPLE), 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        strings.substr(SAMPLE, -1, 3)


def test_strtrim_both_ends():
    assert strings.strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything_and_nothing():
    assert strings.strtrim("aaaa", "a") == ""
    assert strings.strtrim(SAMPLE, "") == SAMPLE


def test_strtrim_result_has_no_set_chars_at_edges():
    charset = "lHmdmm,ao"
    result = strings.strtrim(SAMPLE, charset)
    assert result[0] not in charset
    assert result[-1] not in charset
    assert result in SAMPLE


def test_split_skips_empty_pieces():
    assert strings.split("-aab---cdgewa---d-", "-") == ["aab", "cdgewa", "d"]


def test_split_join_round_trip():
    words = ["one", "two", "three"]
    assert strings.split("  ".join(words), " ") == words


def test_split_only_separators():
    assert strings.split("----", "-") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        strings.split("a,b", ",,")


def test_strmapi_upper():
    text = "hello world"
    assert strings.strmapi(text, lambda i, c: c.upper()) == text.upper()


def test_strmapi_passes_indices():
    seen = []
    strings.strmapi("abc", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striteri_replaces_and_keeps():
    result = strings.striteri("Hallo", lambda i, c: c.upper() if i % 2 == 0 else None)
    assert result == "HaLlO"


def test_striteri_visits_in_order():
    visited = []
    strings.striteri("Hallo", lambda i, c: visited.append((i, c)))
    assert visited == list(enumerate("Hallo"))