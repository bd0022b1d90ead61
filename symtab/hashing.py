"""String hash functions that map a name onto a bucket index."""

from __future__ import annotations

from typing import Callable

HashFunction = Callable[[str, int], int]

_MASK32 = 0xFFFFFFFF
_FNV_PRIME = 16777619
_FNV_OFFSET = 2166136261


def _chars(text: str):
    """Yield the bytes of ``text`` as signed 8-bit values."""
    for byte in text.encode("utf-8"):
        yield byte - 256 if byte >= 128 else byte


def sdbm_hash(text: str, num_buckets: int) -> int:
    """SDBM hash, reduced modulo ``num_buckets`` at every step."""
    value = 0
    for char in _chars(text):
        value = ((char + (value << 6) + (value << 16) - value) & _MASK32) % num_buckets
    return value


def djb2_hash(text: str, num_buckets: int) -> int:
    """DJB2 hash (``hash * 33 + c``), reduced modulo ``num_buckets`` at every step."""
    value = 5381
    for char in _chars(text):
        value = (((value << 5) + value + char) & _MASK32) % num_buckets
    return value


def fnv_hash(text: str, num_buckets: int) -> int:
    """32-bit FNV-1 hash, reduced modulo ``num_buckets`` at the end."""
    value = _FNV_OFFSET
    for char in _chars(text):
        value = ((value * _FNV_PRIME) & _MASK32) ^ (char & _MASK32)
    return value % num_buckets


_HASH_FUNCTIONS: dict[str, HashFunction] = {
    "sdbm": sdbm_hash,
    "djb2": djb2_hash,
    "fnv": fnv_hash,
}


def get_hash_function(name: str) -> HashFunction:
    """Return the hash function registered under ``name``."""
    try:
        return _HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError("Invalid hash function") from None