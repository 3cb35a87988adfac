"""Mersenne Twister random number generators, 32-bit and 64-bit.

Both engines share one implementation of the algorithm. Everything that
differs between the widths lives in a TwisterParams table.

This is not a cryptographically secure generator: its full state can be
recovered from N consecutive outputs.
"""

from collections import namedtuple
from numbers import Integral

import util

DEFAULT_SEED = 5489
# seed used by the array seeder to initialize the buffer before mixing in the key
ARRAY_SEED = 19650218

TwisterParams = namedtuple("TwisterParams", [
    "word_size", "n", "m", "matrix_a", "upper_mask", "lower_mask",
    "init_multiplier", "init_shift", "array_factor1", "array_factor2",
    "temper_u", "temper_d", "temper_s", "temper_b", "temper_t", "temper_c", "temper_l",
])

MT19937_PARAMS = TwisterParams(
    word_size=32, n=624, m=397, matrix_a=0x9908b0df,
    upper_mask=0x80000000, lower_mask=0x7fffffff,
    init_multiplier=1812433253, init_shift=30,
    array_factor1=1664525, array_factor2=1566083941,
    temper_u=11, temper_d=0xffffffff,
    temper_s=7, temper_b=0x9d2c5680,
    temper_t=15, temper_c=0xefc60000,
    temper_l=18,
)

MT19937_64_PARAMS = TwisterParams(
    word_size=64, n=312, m=156, matrix_a=0xb5026f5aa96619e9,
    # The 64-bit variant splits off the upper 33 bits, not just the top one.
    upper_mask=0xffffffff80000000, lower_mask=0x7fffffff,
    init_multiplier=6364136223846793005, init_shift=62,
    array_factor1=3935559000370003845, array_factor2=2862933555777941757,
    temper_u=29, temper_d=0x5555555555555555,
    temper_s=17, temper_b=0x71d67fffeda60000,
    temper_t=37, temper_c=0xfff7eee000000000,
    temper_l=43,
)


class InvalidSeed(ValueError):
    pass


def temper(x, params=MT19937_PARAMS):
    x ^= (x >> params.temper_u) & params.temper_d
    x ^= (x << params.temper_s) & params.temper_b
    x ^= (x << params.temper_t) & params.temper_c
    x ^= (x >> params.temper_l)
    return x


class _MersenneTwister:
    """Generic Mersenne Twister. Subclasses only choose the params table.

    The buffer always holds exactly params.n words. self.index is the
    position of the next word to temper; when it reaches n the whole buffer
    is twisted before the next word is handed out.
    """

    params = None

    def __init__(self, seed=DEFAULT_SEED):
        self.word_size = self.params.word_size
        self.word_mask = (1 << self.word_size) - 1
        self.buffer = [0] * self.params.n
        self.reseed(seed)

    @classmethod
    def from_seed(cls, seed):
        return cls(_check_word(seed))

    @classmethod
    def from_seed_array(cls, key):
        return cls(_check_key(key))

    @classmethod
    def default(cls):
        return cls(DEFAULT_SEED)

    @classmethod
    def from_entropy(cls):
        """Create a generator seeded with a full buffer's worth of OS entropy."""
        return cls.from_seed_array(util.entropy_words(cls.params.n, cls.params.word_size))

    @classmethod
    def from_rng(cls, rng):
        """Create a generator seeded with a key drawn from another generator."""
        next_key_word = rng.next_u32 if cls.params.word_size == 32 else rng.next_u64
        key = [next_key_word() for _ in range(cls.params.n)]
        return cls.from_seed_array(key)

    def reseed(self, seed):
        """Reset the generator from an int seed or a sequence of ints."""
        if _is_int(seed):
            self.seed(seed)
        elif isinstance(seed, (str, bytes, bytearray)):
            raise InvalidSeed("seed must be an int or a sequence of ints, not {}"
                              .format(type(seed).__name__))
        else:
            try:
                key = list(seed)
            except TypeError:
                raise InvalidSeed("seed must be an int or a sequence of ints, not {}"
                                  .format(type(seed).__name__)) from None
            self.seed_array(key)

    def seed(self, seed):
        p = self.params
        mask = self.word_mask
        buffer = self.buffer
        prev = buffer[0] = _check_word(seed) & mask
        for i in range(1, p.n):
            prev = buffer[i] = mask & (p.init_multiplier * (prev ^ (prev >> p.init_shift)) + i)
        self.index = p.n

    def seed_array(self, key):
        key = [k & self.word_mask for k in _check_key(key)]
        p = self.params
        n, mask, shift = p.n, self.word_mask, p.init_shift
        self.seed(ARRAY_SEED)
        buffer = self.buffer

        i, j = 1, 0
        for _ in range(max(n, len(key))):
            prev = buffer[i - 1]
            buffer[i] = mask & ((buffer[i] ^ ((prev ^ (prev >> shift)) * p.array_factor1))
                                + key[j] + j)
            i += 1
            j += 1
            if i >= n:
                buffer[0] = buffer[n - 1]
                i = 1
            if j >= len(key):
                j = 0

        for _ in range(n - 1):
            prev = buffer[i - 1]
            buffer[i] = mask & ((buffer[i] ^ ((prev ^ (prev >> shift)) * p.array_factor2)) - i)
            i += 1
            if i >= n:
                buffer[0] = buffer[n - 1]
                i = 1

        # MSB is 1, so the initial buffer is never all zeros
        buffer[0] = 1 << (self.word_size - 1)
        self.index = n

    def twist(self):
        # Entries are rewritten in place in increasing order. Near the end of
        # the pass, buffer[(i + m) % n] and buffer[0] already hold new values,
        # which is what the algorithm requires.
        p = self.params
        n, m = p.n, p.m
        upper_mask, lower_mask, matrix_a = p.upper_mask, p.lower_mask, p.matrix_a
        buffer = self.buffer
        for i in range(n):
            y = (buffer[i] & upper_mask) | (buffer[(i + 1) % n] & lower_mask)
            buffer[i] = buffer[(i + m) % n] ^ (y >> 1)
            if y & 1:
                buffer[i] ^= matrix_a
        self.index = 0

    def get_number(self):
        if self.index >= self.params.n:
            self.twist()
        result = temper(self.buffer[self.index], self.params)
        self.index += 1
        return result

    next_word = get_number

    def next_u32(self):
        return self.get_number() & 0xffffffff

    def next_u64(self):
        if self.word_size == 64:
            return self.get_number()
        high = self.get_number()
        return (high << 32) | self.get_number()

    def clone(self):
        """Return an independent copy that continues the same sequence."""
        result = self.__class__.__new__(self.__class__)
        result.__dict__.update(self.__dict__)
        result.buffer = list(self.buffer)
        return result

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def getstate(self):
        return tuple(self.buffer), self.index

    def setstate(self, state):
        buffer, index = state
        buffer = list(buffer)
        if len(buffer) != self.params.n:
            raise ValueError("state must contain exactly {} words".format(self.params.n))
        if any(not _is_int(x) or not 0 <= x <= self.word_mask for x in buffer):
            raise ValueError("state words must be {}-bit unsigned ints".format(self.word_size))
        if not _is_int(index) or not 0 <= index <= self.params.n:
            raise ValueError("state index must be an int in [0, {}], not {!r}".format(self.params.n, index))
        self.buffer = [int(x) for x in buffer]
        self.index = int(index)

    def __iter__(self):
        return self

    def __next__(self):
        return self.get_number()

    def __repr__(self):
        return "<{} index={}>".format(self.__class__.__name__, self.index)


class MT19937_RNG(_MersenneTwister):
    """Mersenne Twister random number generator (MT19937, 32-bit words)"""
    params = MT19937_PARAMS


class MT19937_64_RNG(_MersenneTwister):
    """Mersenne Twister random number generator (MT19937-64, 64-bit words)"""
    params = MT19937_64_PARAMS


def _is_int(x):
    return isinstance(x, Integral) and not isinstance(x, bool)


def _check_word(seed):
    if not _is_int(seed):
        raise TypeError("seed must be an int, not {}".format(type(seed).__name__))
    return int(seed)


def _check_key(key):
    key = [_check_word(k) for k in key]
    if not key:
        raise InvalidSeed("seed key must not be empty")
    return key
