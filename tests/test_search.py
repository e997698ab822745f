import pytest

from fractview.libft.search import strchr, strlen, strncmp, strnstr, strrchr

SAMPLE = "Mais si je suis tres net !"


@pytest.mark.parametrize("text", ["", "a", "Bonjour les terriens !", SAMPLE])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


@pytest.mark.parametrize("char", ["E", "A", "G", "t", "M"])
def test_strchr_matches_find(char):
    text = "ABCDEFG" + SAMPLE
    assert strchr(text, char) == text.find(char)
    assert strchr(text, ord(char)) == text.find(char)


def test_strchr_missing_returns_none():
    assert strchr("ABCDEFG", "L") is None


def test_strchr_nul_finds_terminator():
    assert strchr("ABCDEFG", 0) == len("ABCDEFG")
    assert strchr("", "\0") == 0


def test_strchr_ignores_text_after_nul():
    assert strchr("ab\0c", "c") is None


def test_strchr_masks_int_to_byte():
    assert strchr("ABC", ord("B") + 256) == "ABC".find("B")


def test_strchr_rejects_multi_char_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("char", ["s", "e", "M", "!"])
def test_strrchr_matches_rfind(char):
    assert strrchr(SAMPLE, char) == SAMPLE.rfind(char)


def test_strrchr_missing_and_terminator():
    assert strrchr("ABCDEFG", "L") is None
    assert strrchr("", "A") is None
    assert strrchr("ABCDEFG", "\0") == len("ABCDEFG")


def test_strrchr_not_before_strchr():
    for char in set(SAMPLE):
        assert strrchr(SAMPLE, char) >= strchr(SAMPLE, char)


def test_strncmp_equal_prefix():
    assert strncmp("123 tu es une oie.", "123 tu es une loi.", 10) == 0


def test_strncmp_sign_follows_ordering():
    result = strncmp("Ceci est un test.", "Un test est ceci.", 10)
    assert result == ord("C") - ord("U")
    assert result < 0
    assert strncmp("Un test est ceci.", "Ceci est un test.", 10) > 0


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_empty_strings():
    assert strncmp("", "", 10) == 0
    assert strncmp("", "test", 10) == -ord("t")
    assert strncmp("test", "", 10) == ord("t")


def test_strncmp_stops_at_nul():
    assert strncmp("ab\0x", "ab\0y", 10) == 0


def test_strncmp_antisymmetric():
    pairs = [("apple", "apply"), ("abc", "abcd"), ("same", "same")]
    for a, b in pairs:
        assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncmp_negative_count_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    text = "Foo Bar Baz"
    assert strnstr(text, "Bar", 8) == text.find("Bar")


def test_strnstr_not_fully_inside_length():
    assert strnstr("Foo Bar Baz", "Bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("Foo Bar Baz", "", 8) == 0
    assert strnstr("", "", 0) == 0


def test_strnstr_empty_haystack():
    assert strnstr("", "Bar", 8) is None


def test_strnstr_matches_find_for_full_length():
    text = "abracadabra"
    for needle in ["a", "bra", "cad", "zzz", "abracadabra"]:
        expected = text.find(needle)
        assert strnstr(text, needle, len(text)) == (None if expected < 0 else expected)


def test_strnstr_negative_length_raises():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)