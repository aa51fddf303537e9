"""Primitive value helpers built on a ``RandomSource``.

Wide integer and floating-point values are produced by filling a byte buffer
and reinterpreting its bits, so every bit pattern (including NaN and the
infinities for floats) is reachable.
"""

import calendar
import struct
import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

from fixture_engine.randomness.base import RandomSource

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def next_boolean(rng: RandomSource) -> bool:
    return rng.next_int(0, 2) == 0


def next_byte(rng: RandomSource) -> int:
    return rng.next_int(0, 256)


def next_char(rng: RandomSource) -> str:
    """A single UTF-16 code unit; lone surrogates become U+FFFD."""
    return rng.next_bytes(2).decode("utf-16-le", errors="replace")


def next_int16(rng: RandomSource) -> int:
    return rng.next_int(-(2**15), 2**15)


def next_int32(rng: RandomSource) -> int:
    return rng.next_int(INT32_MIN, INT32_MAX)


def next_int64(rng: RandomSource) -> int:
    return int.from_bytes(rng.next_bytes(8), "little", signed=True)


def next_uint16(rng: RandomSource) -> int:
    return rng.next_int(0, 2**16)


def next_uint32(rng: RandomSource) -> int:
    return int.from_bytes(rng.next_bytes(4), "little")


def next_uint64(rng: RandomSource) -> int:
    return int.from_bytes(rng.next_bytes(8), "little")


def next_float(rng: RandomSource) -> float:
    """A single-precision value widened to a Python float."""
    return struct.unpack("<f", rng.next_bytes(4))[0]


def next_double(rng: RandomSource) -> float:
    return struct.unpack("<d", rng.next_bytes(8))[0]


def next_complex(rng: RandomSource) -> complex:
    return complex(next_double(rng), next_double(rng))


def next_decimal(rng: RandomSource) -> Decimal:
    """A 96-bit coefficient with a random sign and a scale in [0, 28]."""
    coefficient = int.from_bytes(rng.next_bytes(12), "little")
    negative = next_boolean(rng)
    scale = rng.next_int(0, 29)
    return Decimal((int(negative), tuple(int(d) for d in str(coefficient)), -scale))


def next_date(rng: RandomSource) -> date:
    year = rng.next_int(1, 10000)
    month = rng.next_int(1, 13)
    _, days = calendar.monthrange(year, month)
    return date(year, month, rng.next_int(1, days + 1))


def next_time(rng: RandomSource) -> time:
    return time(
        rng.next_int(0, 24),
        rng.next_int(0, 60),
        rng.next_int(0, 60),
        rng.next_int(0, 1_000_000),
    )


def next_datetime(rng: RandomSource) -> datetime:
    return datetime.combine(next_date(rng), next_time(rng))


def next_aware_datetime(rng: RandomSource) -> datetime:
    """A datetime carrying a UTC offset within fourteen hours of UTC."""
    offset = timedelta(hours=rng.next_int(-13, 14), minutes=rng.next_int(0, 60))
    return next_datetime(rng).replace(tzinfo=timezone(offset))


def next_timedelta(rng: RandomSource) -> timedelta:
    """Up to roughly 29,000 years either side of zero, in microseconds."""
    return timedelta(microseconds=next_int64(rng) // 10)


def next_uuid(rng: RandomSource) -> uuid.UUID:
    return uuid.UUID(bytes=rng.next_bytes(16), version=4)
