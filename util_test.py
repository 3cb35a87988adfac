import pytest

import util


def test_chunks():
    assert util.chunks(b"abcdefg", 3) == [b"abc", b"def", b"g"]
    assert util.chunks(b"") == []


def test_entropy_words():
    words = util.entropy_words(10, 64)
    assert len(words) == 10
    assert all(0 <= x < 2**64 for x in words)
    words = util.entropy_words(624)
    assert len(words) == 624
    assert all(0 <= x < 2**32 for x in words)
    assert words != util.entropy_words(624)


def test_entropy_words_little_endian(monkeypatch):
    monkeypatch.setattr(util, "get_random_bytes", lambda n: bytes(range(n)))
    assert util.entropy_words(2, 32) == [0x03020100, 0x07060504]


def test_entropy_words_needs_whole_bytes():
    with pytest.raises(ValueError):
        util.entropy_words(4, 12)
