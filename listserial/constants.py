"""
Constants used across the listserial modules.

Consolidates the wire-format values shared by both stream formats so the
encoders and parsers agree on them byte for byte.
"""

import struct

# Every integer field (link id, payload length, random link) is a signed
# 32-bit little-endian value
INT32_FORMAT = '<i'
INT32_SIZE = struct.calcsize(INT32_FORMAT)

# Reserved value meaning "null", "absent" or "end of section"
NULL_SENTINEL = -1
NULL_REFERENCE_BYTES = b'\xff\xff\xff\xff'

# Payload text is stored as 16-bit code units, little-endian, no BOM.
# surrogatepass keeps lone surrogates intact across a round trip.
TEXT_ENCODING = 'utf-16-le'
TEXT_ERRORS = 'surrogatepass'
TEXT_UNIT_SIZE = 2

# Format names accepted by get_serializer()
FORMAT_V1 = 'v1'
FORMAT_V2 = 'v2'
DEFAULT_FORMAT = FORMAT_V1
