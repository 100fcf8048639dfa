"""
totp.py — Time-based one-time password (RFC 6238).

TOTP is HOTP with counter = floor(t / period). The time step travels as a
16-character hex string (the 8-byte counter), the form produced by
``time_in_hex`` and stored by existing callers; ``create`` decodes it back to
the integer moving factor before truncation.
"""

import logging
import re
import struct
import time
from typing import Optional

from otpcore.config import DEFAULT_ALGORITHM, DEFAULT_PERIOD, DYNAMIC_TRUNCATION
from otpcore.exceptions import InvalidArgument
from otpcore.truncate import generate_otp

logger = logging.getLogger(__name__)

LABEL = "totp"

HEX_WIDTH = 16  # 8 bytes

_HEX_RE = re.compile(r"[0-9a-fA-F]{1,%d}" % HEX_WIDTH)


def now_millis() -> int:
    """Wall clock in milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def time_step(unix_time_millis: int, period: int = DEFAULT_PERIOD) -> int:
    """
    floor(round(unix_time_millis / 1000) / period).

    Seconds are rounded half-up and the division is done on integers, so two
    timestamps in the same ``period`` bucket always share a step. A period
    below 1 is treated as 1.

    Raises:
        InvalidArgument: negative or non-integer time
    """
    if not isinstance(unix_time_millis, int) or unix_time_millis < 0:
        raise InvalidArgument(f"Time must be non-negative milliseconds since the epoch: {unix_time_millis!r}")
    seconds = (unix_time_millis + 500) // 1000
    return seconds // max(period, 1)


def remaining_seconds(unix_time_millis: int, period: int = DEFAULT_PERIOD) -> int:
    """Seconds until the code for ``unix_time_millis`` rolls over."""
    period = max(period, 1)
    seconds = (unix_time_millis + 500) // 1000
    return period - seconds % period


def time_in_hex(unix_time_millis: Optional[int] = None, period: int = DEFAULT_PERIOD) -> str:
    """
    Current (or given) time step as 16 lowercase hex characters.

    Arguments:
        unix_time_millis: milliseconds since the epoch; None reads the clock
        period: seconds per step (default 30)
    """
    if unix_time_millis is None:
        unix_time_millis = now_millis()
    step = time_step(unix_time_millis, period)
    logger.debug("TOTP: time=%dms period=%ds step=%d", unix_time_millis, period, step)
    return struct.pack(">Q", step).hex()


def moving_factor(time_hex: str) -> int:
    """
    Decode a hex time step, left-padded with '0' to 8 bytes, to an integer.

    Raises:
        InvalidArgument: empty, non-hex, or wider than 16 hex characters
    """
    if not isinstance(time_hex, str) or not _HEX_RE.fullmatch(time_hex):
        raise InvalidArgument(f"Time base must be 1-{HEX_WIDTH} hex characters: {time_hex!r}")
    msg = bytes.fromhex(time_hex.zfill(HEX_WIDTH))
    return struct.unpack(">Q", msg)[0]


def create(secret: bytes, time_hex: str, digits: int,
           algorithm: str = DEFAULT_ALGORITHM, add_checksum: bool = False) -> str:
    """
    Generate the TOTP code for a hex time step.

    Arguments:
        secret: raw key bytes (already Base32-decoded)
        time_hex: time step from ``time_in_hex``
        digits: code length (commonly 6)
        algorithm: "sha1", "sha256" or "sha512"
        add_checksum: append a Luhn check digit (code length digits + 1)
    """
    step = moving_factor(time_hex)
    return generate_otp(
        secret,
        step,
        digits,
        add_checksum=add_checksum,
        truncation_offset=DYNAMIC_TRUNCATION,
        algorithm=algorithm,
    )
