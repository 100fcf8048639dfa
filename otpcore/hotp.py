"""
hotp.py — HMAC-based one-time password (RFC 4226).

The counter is the caller's business: it is passed in as decimal text and is
never advanced here, so the same (secret, counter, digits) always yields the
same code.
"""

import logging
import re

from otpcore.config import DEFAULT_ALGORITHM, DYNAMIC_TRUNCATION
from otpcore.exceptions import InvalidArgument
from otpcore.truncate import MAX_MOVING_FACTOR, generate_otp

logger = logging.getLogger(__name__)

LABEL = "hotp"

_COUNTER_RE = re.compile(r"\+?[0-9]+")


def moving_factor(counter: str) -> int:
    """
    Parse an HOTP counter ("0", "42", "+7") into the 64-bit moving factor.

    Raises:
        InvalidArgument: empty, non-decimal, negative or larger than 2^64 - 1
    """
    if isinstance(counter, int) and not isinstance(counter, bool):
        value = counter
    elif isinstance(counter, str) and _COUNTER_RE.fullmatch(counter):
        value = int(counter, 10)
    else:
        raise InvalidArgument(f"Counter must be a non-negative decimal integer: {counter!r}")

    if not 0 <= value <= MAX_MOVING_FACTOR:
        raise InvalidArgument(f"Counter out of range [0, 2^64): {counter!r}")
    return value


def create(secret: bytes, counter: str, digits: int,
           algorithm: str = DEFAULT_ALGORITHM, add_checksum: bool = False) -> str:
    """
    Generate the HOTP code for ``counter``.

    Steps:
    1. counter text -> 8-byte big-endian message
    2. HMAC(key=secret, msg=message), SHA1 unless ``algorithm`` says otherwise
    3. dynamic truncation, mod 10^digits, zero-pad

    Arguments:
        secret: raw key bytes (already Base32-decoded)
        counter: decimal counter text
        digits: code length (commonly 6)
        algorithm: "sha1", "sha256" or "sha512"
        add_checksum: append a Luhn check digit (code length digits + 1)
    """
    value = moving_factor(counter)
    logger.debug("HOTP: counter=%d digits=%d", value, digits)
    return generate_otp(
        secret,
        value,
        digits,
        add_checksum=add_checksum,
        truncation_offset=DYNAMIC_TRUNCATION,
        algorithm=algorithm,
    )
