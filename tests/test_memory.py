import pytest

from pipex.memory import memchr, memcmp


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"abcdef"
    assert memchr(data, ord("e"), 3) is None
    assert memchr(data, ord("e"), len(data)) == data.index(b"e")


def test_memchr_missing_value():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_zero_length():
    assert memchr(b"abc", ord("a"), 0) is None


def test_memchr_uses_low_byte_of_value():
    data = bytes([1, 2, 255, 3])
    assert memchr(data, -1, len(data)) == 2
    assert memchr(data, 0x100 + 2, len(data)) == 1


def test_memchr_finds_zero_bytes():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(0)


def test_memchr_accepts_bytearray_and_memoryview():
    data = bytearray(b"xyz")
    assert memchr(data, ord("z"), 3) == memchr(memoryview(data), ord("z"), 3)
    assert memchr(data, ord("z"), 3) == data.index(b"z")


def test_memchr_rejects_length_past_end():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 3)


def test_memcmp_equal_buffers():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_only_compares_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_returns_byte_difference():
    first, second = b"abcd", b"abzd"
    assert memcmp(first, second, 4) == first[2] - second[2]


def test_memcmp_is_antisymmetric():
    pairs = [(b"apple", b"apply"), (b"\x00\x01", b"\x00\x02"), (b"zz", b"aa")]
    for a, b in pairs:
        assert memcmp(a, b, len(a)) == -memcmp(b, a, len(a))


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0
    assert memcmp(b"\x01", b"\xff", 1) < 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_rejects_negative_length():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)


def test_memcmp_rejects_length_past_end():
    with pytest.raises(ValueError):
        memcmp(b"abc", b"ab", 3)