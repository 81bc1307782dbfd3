"""Time-ordered UUID (version 7) generation.

Layout (RFC 9562):
- 48 bits: unix timestamp in milliseconds
- 4 bits: version (7)
- 12 bits: sequence, randomly seeded each millisecond and incremented
  within it so ids from one process sort in creation order
- 2 bits: variant (0b10)
- 62 bits: random
"""

import secrets
import threading
import time
from uuid import UUID

_lock = threading.Lock()
_last_ms = 0
_sequence = 0

_MAX_SEQUENCE = 0xFFF


def uuid7() -> UUID:
    """Generate a new version 7 UUID."""
    global _last_ms, _sequence

    with _lock:
        now_ms = time.time_ns() // 1_000_000
        if now_ms > _last_ms:
            _last_ms = now_ms
            # Leave headroom so the sequence rarely overflows
            _sequence = secrets.randbits(11)
        else:
            _sequence += 1
            if _sequence > _MAX_SEQUENCE:
                # Borrow the next millisecond rather than going backwards
                _last_ms += 1
                _sequence = 0
        timestamp_ms = _last_ms
        sequence = _sequence

    value = (timestamp_ms & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76
    value |= sequence << 64
    value |= 0b10 << 62
    value |= secrets.randbits(62)
    return UUID(int=value)


def timestamp_ms(value: UUID) -> int:
    """Extract the millisecond timestamp embedded in a version 7 UUID."""
    return value.int >> 80
