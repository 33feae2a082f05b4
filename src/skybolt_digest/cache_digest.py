"""
Cache Digest - read-only Cuckoo filter of the assets a client has cached

The client encodes its cache state as a compact cuckoo filter and sends it
base64-encoded. This module decodes it and answers membership queries so the
server can skip assets the client already holds.

Key properties:
- No false negatives: if an asset is cached, the filter will always report it
- Small false positive rate (~1-3%): occasionally reports uncached assets as cached
- Fail-safe: a missing or malformed digest reports nothing as cached
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from skybolt_digest.decoder import DigestError, parse_digest
from skybolt_digest.indexing import (
    compute_alternate_bucket,
    fingerprint,
    primary_bucket,
)
from skybolt_digest.wire import BUCKET_SIZE


@dataclass(frozen=True)
class CacheDigest:
    """
    Decoded cache digest.

    Immutable once built; share it freely between threads. An invalid digest
    carries no buckets and every lookup on it returns False.
    """

    valid: bool = False
    num_buckets: int = 0
    buckets: tuple[int, ...] = ()

    @classmethod
    def from_base64(cls, digest: str) -> "CacheDigest":
        """Create a CacheDigest from a base64-encoded cookie value."""
        try:
            num_buckets, buckets = parse_digest(digest)
        except DigestError as e:
            logger.debug("Rejecting cache digest: {}", e)
            return cls()

        logger.debug("Parsed cache digest with {} buckets", num_buckets)
        return cls(valid=True, num_buckets=num_buckets, buckets=buckets)

    def is_valid(self) -> bool:
        """Check if the digest was successfully parsed."""
        return self.valid

    def lookup(self, item: str) -> bool:
        """
        Check if an item might be in the filter.

        Args:
            item: The item to look up (e.g., "src/css/main.css:Pw3rT8vL")

        Returns:
            True if item might be present (possible false positive),
            False if item is definitely not present
        """
        if not self.valid or self.num_buckets == 0:
            return False

        fp = fingerprint(item)
        i1 = primary_bucket(item, self.num_buckets)
        if self._bucket_contains(i1, fp):
            return True
        i2 = compute_alternate_bucket(i1, fp, self.num_buckets)
        return self._bucket_contains(i2, fp)

    def _bucket_contains(self, bucket_index: int, fp: int) -> bool:
        offset = bucket_index * BUCKET_SIZE
        return fp in self.buckets[offset:offset + BUCKET_SIZE]


def decode(digest: str) -> CacheDigest:
    """Decode a base64 digest; any malformed input yields an invalid digest."""
    return CacheDigest.from_base64(digest)
