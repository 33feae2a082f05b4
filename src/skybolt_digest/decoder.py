"""
Decoder for base64-encoded cache digests.

The helpers here raise DigestError on any malformed input. Callers outside
this package should go through skybolt_digest.cache_digest.decode, which
turns every failure into an invalid digest.
"""

from __future__ import annotations

import base64
import binascii

from skybolt_digest.wire import (
    BUCKET_SIZE,
    HEADER_SIZE,
    SLOT_SIZE,
    VERSION,
    header_struct,
    slot_struct,
)


class DigestError(ValueError):
    """Raised when a digest cannot be parsed."""


def normalize_base64(value: str) -> str:
    """Map the URL-safe alphabet onto the standard one and re-pad to a multiple of 4."""
    normalized = value.replace("-", "+").replace("_", "/")
    padding = (4 - len(normalized) % 4) % 4
    return normalized + "=" * padding


def decode_base64(value: str) -> bytes:
    if not value:
        raise DigestError("empty digest")
    try:
        return base64.b64decode(normalize_base64(value), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DigestError(f"invalid base64: {e}") from e


def unpack_slots(data: bytes, num_buckets: int) -> tuple[int, ...]:
    """
    Read num_buckets * BUCKET_SIZE fingerprint slots following the header.

    Slots missing from a short buffer are left empty (0) and a dangling
    odd byte is ignored.
    """
    num_slots = num_buckets * BUCKET_SIZE
    available = min(num_slots, (len(data) - HEADER_SIZE) // SLOT_SIZE)
    slots = [
        slot_struct.unpack_from(data, HEADER_SIZE + i * SLOT_SIZE)[0]
        for i in range(available)
    ]
    slots.extend([0] * (num_slots - available))
    return tuple(slots)


def parse_bytes(data: bytes) -> tuple[int, tuple[int, ...]]:
    """Parse a decoded digest into (num_buckets, slots)."""
    if len(data) < HEADER_SIZE:
        raise DigestError(f"digest too short: {len(data)} bytes")

    version, num_buckets, _reserved = header_struct.unpack_from(data)
    if version != VERSION:
        raise DigestError(f"unsupported version {version}")

    return num_buckets, unpack_slots(data, num_buckets)


def parse_digest(value: str) -> tuple[int, tuple[int, ...]]:
    """Parse a base64-encoded digest into (num_buckets, slots)."""
    return parse_bytes(decode_base64(value))
