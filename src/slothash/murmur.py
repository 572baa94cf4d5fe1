"""MurmurHash3, x86 32-bit variant.

Output is bit-for-bit identical to the reference implementation (and to
``mmh3.hash(data, seed, signed=True)``), so ring positions computed here
agree with any other Murmur3-32 implementation.
"""

C1 = 0xCC9E2D51
C2 = 0x1B873593
R1 = 15
R2 = 13
M = 5
N = 0xE6546B64

RING_SEED = 42

_MASK32 = 0xFFFFFFFF


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _MASK32


def _to_signed32(x: int) -> int:
    return x - 0x100000000 if x & 0x80000000 else x


def _fmix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def murmur3_32(data: bytes, seed: int = 0) -> int:
    """Return the signed 32-bit Murmur3 hash of *data*."""
    h = seed & _MASK32
    length = len(data)
    rounded_end = length & ~0x03

    for i in range(0, rounded_end, 4):
        k = int.from_bytes(data[i : i + 4], "little")
        k = (k * C1) & _MASK32
        k = _rotl32(k, R1)
        k = (k * C2) & _MASK32

        h ^= k
        h = _rotl32(h, R2)
        h = (h * M + N) & _MASK32

    # tail: 0-3 bytes, folded highest index first
    tail = length & 0x03
    if tail:
        k1 = 0
        if tail == 3:
            k1 ^= data[rounded_end + 2] << 16
        if tail >= 2:
            k1 ^= data[rounded_end + 1] << 8
        k1 ^= data[rounded_end]

        k1 = (k1 * C1) & _MASK32
        k1 = _rotl32(k1, R1)
        k1 = (k1 * C2) & _MASK32
        h ^= k1

    h ^= length & _MASK32
    return _to_signed32(_fmix32(h))


def murmur3_32_str(key: str, seed: int = RING_SEED) -> int:
    """Hash the UTF-8 encoding of *key*.

    Defaults to the seed used for every ring-index computation.
    """
    return murmur3_32(key.encode("utf-8"), seed)
