"""
Wire format of a Skybolt cache digest.

The digest is produced by the client and arrives base64-encoded (standard or
URL-safe alphabet, padding optional). Decoded, it is laid out big-endian:

    byte 0      version, must be VERSION
    bytes 1-2   number of buckets, unsigned short
    bytes 3-4   reserved
    bytes 5+    num_buckets * BUCKET_SIZE fingerprint slots, unsigned short each,
                bucket by bucket

Fingerprint width and bucket size are not carried in the header and must
match the producer.
"""

import struct

VERSION = 1

FINGERPRINT_BITS = 12
FINGERPRINT_MASK = (1 << FINGERPRINT_BITS) - 1
BUCKET_SIZE = 4

# Big endian (>)
# byte 0: version, as an unsigned char
# bytes 1-2: number of buckets, as an unsigned short
# bytes 3-4: reserved, as an unsigned short
header_struct = struct.Struct(">BHH")
HEADER_SIZE = header_struct.size

# Big endian (>)
# bytes 0-1: one fingerprint slot, as an unsigned short (0 = empty)
slot_struct = struct.Struct(">H")
SLOT_SIZE = slot_struct.size
