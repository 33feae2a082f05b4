"""
Fingerprint and bucket index derivation for the cuckoo filter.

An item lives in one of two buckets. The alternate bucket is derived from
the other one and the fingerprint alone (partial-key cuckoo hashing), so a
reader can check both without knowing which one the producer used.
"""

from __future__ import annotations

from skybolt_digest.hashing import fnv1a
from skybolt_digest.wire import FINGERPRINT_MASK


def fingerprint(item: str) -> int:
    """Generate the 12-bit fingerprint of an item, in [1, 4095]."""
    fp = fnv1a(item) & FINGERPRINT_MASK
    # 0 marks an empty slot
    return fp if fp != 0 else 1


def primary_bucket(item: str, num_buckets: int) -> int:
    """Compute primary bucket index."""
    return fnv1a(item) % num_buckets


def compute_alternate_bucket(bucket: int, fp: int, num_buckets: int) -> int:
    """
    Compute the alternate bucket for a fingerprint.

    Applying this twice returns the original bucket. Assumes num_buckets is
    a power of two; the producer guarantees this and it is not checked here.
    """
    fp_hash = fnv1a(str(fp))
    bucket_mask = num_buckets - 1
    offset = (fp_hash | 1) & bucket_mask
    return (bucket ^ offset) & bucket_mask
