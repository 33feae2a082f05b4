"""32-bit FNV-1a, shared bit-for-bit with the JavaScript digest producer."""

from __future__ import annotations

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def fnv1a(data: str | bytes) -> int:
    """FNV-1a hash function (32-bit).

    Strings are hashed over their UTF-8 bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    hash_val = FNV_OFFSET_BASIS
    for byte in data:
        hash_val ^= byte
        hash_val = (hash_val * FNV_PRIME) & 0xFFFFFFFF
    return hash_val
