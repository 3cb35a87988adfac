"""Conversions from raw generator words to bytes, ranges and floats.

These helpers only use the public extraction methods of a generator
(get_number and word_size), so they work with either engine in
mersenne_twister.
"""

import struct
from itertools import count as count_up

_WORD_FORMATS = {32: "<L", 64: "<Q"}


def iter_words(rng, count=None):
    iterator = count_up() if count is None else range(count)
    for _ in iterator:
        yield rng.get_number()


def fill_bytes(rng, buffer):
    """Fill a writable buffer with little-endian generator words.

    A trailing partial word is truncated to the bytes that fit. Returns the
    buffer.
    """
    word_format = _WORD_FORMATS[rng.word_size]
    word_bytes = rng.word_size // 8
    length = len(buffer)
    for start in range(0, length, word_bytes):
        end = min(start + word_bytes, length)
        buffer[start:end] = struct.pack(word_format, rng.get_number())[: end - start]
    return buffer


def random_bytes(rng, n):
    return bytes(fill_bytes(rng, bytearray(n)))


def getrandbits(rng, k):
    """Return an int with k random bits.

    For k up to the word size this is the top k bits of one word. Longer
    results are built from whole words, least significant word first, with
    the last word shifted down to the bits still needed.
    """
    if k < 0:
        raise ValueError("number of bits must be non-negative")
    word_size = rng.word_size
    if k <= word_size:
        return rng.get_number() >> (word_size - k) if k else 0
    result = 0
    shift = 0
    while k > 0:
        word = rng.get_number()
        if k < word_size:
            word >>= word_size - k
        result |= word << shift
        shift += word_size
        k -= word_size
    return result


def randbelow(rng, n):
    """Return a uniformly distributed int in [0, n)."""
    if n <= 0:
        raise ValueError("upper bound must be positive")
    k = n.bit_length()
    r = getrandbits(rng, k)
    while r >= n:
        r = getrandbits(rng, k)
    return r


def randint(rng, a, b):
    """Return a uniformly distributed int in [a, b], including both end points."""
    if b < a:
        raise ValueError("empty range for randint({}, {})".format(a, b))
    return a + randbelow(rng, b - a + 1)


def random_float(rng):
    """Return a float in [0, 1) with 53-bit resolution."""
    if rng.word_size == 64:
        return (rng.get_number() >> 11) * (1.0 / 9007199254740992.0)
    a = rng.get_number() >> 5
    b = rng.get_number() >> 6
    return (a * 67108864.0 + b) * (1.0 / 9007199254740992.0)


def shuffle(rng, items):
    """Shuffle a mutable sequence in place (Fisher-Yates)."""
    for i in reversed(range(1, len(items))):
        j = randbelow(rng, i + 1)
        items[i], items[j] = items[j], items[i]


def choice(rng, seq):
    if not seq:
        raise IndexError("cannot choose from an empty sequence")
    return seq[randbelow(rng, len(seq))]
