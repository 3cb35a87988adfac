from Cryptodome.Random import get_random_bytes


def chunks(x, chunk_size=16):
    return [x[i : i + chunk_size] for i in range(0, len(x), chunk_size)]


def entropy_words(count, word_size=32):
    """Return a list of count unsigned ints of word_size bits from the OS entropy source."""
    if word_size % 8:
        raise ValueError("word size must be a whole number of bytes")
    word_bytes = word_size // 8
    random_bytes = get_random_bytes(count * word_bytes)
    return [int.from_bytes(chunk, byteorder="little") for chunk in chunks(random_bytes, word_bytes)]
