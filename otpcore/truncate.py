"""
truncate.py — The HMAC truncation shared by HOTP and TOTP (RFC 4226 §5.3).

Every code this package produces comes out of ``generate_otp``:

1. moving factor -> 8-byte big-endian message
2. HMAC(key=secret, msg=message) with SHA1 / SHA256 / SHA512
3. dynamic truncation -> 31-bit unsigned integer
4. mod 10^digits, optional Luhn-style check digit
5. zero-pad to the full width

Functions are pure: nothing is cached and the key is never kept or logged.
"""

import hmac
import logging
import struct

from otpcore.config import (
    DEFAULT_ALGORITHM,
    DYNAMIC_TRUNCATION,
    SUPPORTED_ALGORITHMS,
)
from otpcore.exceptions import CryptoUnavailable, InvalidArgument, InvalidKey

logger = logging.getLogger(__name__)

MAX_MOVING_FACTOR = 0xFFFFFFFFFFFFFFFF

# Doubled digit d -> digit sum of 2*d, used by the check digit
DOUBLE_DIGITS = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(i: int) -> bytes:
    """
    Convert a moving factor to the 8-byte big-endian message RFC 4226 requires.

    Example: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        InvalidArgument: if ``i`` does not fit an unsigned 64-bit integer
    """
    if not isinstance(i, int) or not 0 <= i <= MAX_MOVING_FACTOR:
        raise InvalidArgument(f"Moving factor must be an integer in [0, 2^64): {i!r}")
    return struct.pack(">Q", i)


def normalize_algorithm(name: str) -> str:
    """
    Map an HMAC algorithm selector to its hashlib name.

    Accepts "sha1", "SHA-256", "HmacSHA512" and similar spellings.

    Raises:
        InvalidArgument: empty or unrecognized selector
    """
    if not name or not isinstance(name, str):
        raise InvalidArgument("Algorithm cannot be null or empty.")
    key = name.strip().lower().replace("-", "").replace("_", "")
    if key.startswith("hmac"):
        key = key[len("hmac"):]
    if key not in SUPPORTED_ALGORITHMS:
        raise InvalidArgument(f"HMAC algorithm not recognized: {name!r}")
    return key


def hmac_digest(key: bytes, msg: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Compute HMAC(algorithm, key, msg) with a fresh, single-use HMAC object.

    Raises:
        InvalidArgument: unknown algorithm selector
        InvalidKey: key is not bytes or is empty
        CryptoUnavailable: hashlib of this runtime does not provide the hash
    """
    name = normalize_algorithm(algorithm)
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidKey("HMAC key must be bytes.")
    if not key:
        raise InvalidKey("HMAC key cannot be empty.")
    try:
        mac = hmac.new(bytes(key), msg, name)
    except ValueError as e:
        raise CryptoUnavailable(f"HMAC-{name.upper()} is not available in this runtime") from e
    return mac.digest()


def dynamic_truncate(hmac_digest: bytes, truncation_offset: int = DYNAMIC_TRUNCATION) -> int:
    """
    Apply RFC 4226 dynamic truncation.

    - offset = last_byte & 0x0F, unless ``truncation_offset`` names a valid
      fixed window (0 <= truncation_offset < len(digest) - 4)
    - take 4 bytes from offset, clear the MSB (0x7F) of the first one
    - return the 31-bit unsigned integer

    Arguments:
        hmac_digest: HMAC digest (SHA1 -> 20 bytes, SHA256 -> 32, SHA512 -> 64)
        truncation_offset: fixed window start; anything out of range means dynamic
    """
    offset = hmac_digest[-1] & 0x0F
    if 0 <= truncation_offset < len(hmac_digest) - 4:
        offset = truncation_offset
    code = (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )
    return code


def checksum(num: int, digits: int) -> int:
    """
    Luhn ("credit card") check digit over the ``digits`` low decimal places of ``num``.

    Detects any single mistyped digit and any single transposition of adjacent
    digits. The least significant digit is the first one doubled.
    """
    double_digit = True
    total = 0
    for _ in range(digits):
        digit = num % 10
        num //= 10
        if double_digit:
            digit = DOUBLE_DIGITS[digit]
        total += digit
        double_digit = not double_digit
    return (10 - total % 10) % 10


def generate_otp(
    secret: bytes,
    moving_factor: int,
    digits: int,
    add_checksum: bool = False,
    truncation_offset: int = DYNAMIC_TRUNCATION,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Generate one code for a key and a moving factor.

    Arguments:
        secret: raw key bytes
        moving_factor: counter (HOTP) or time step (TOTP), 0 <= x < 2^64
        digits: code length before the optional check digit
        add_checksum: append one Luhn check digit (code length digits + 1)
        truncation_offset: fixed truncation window, -1 for dynamic truncation
        algorithm: "sha1" (default), "sha256" or "sha512"

    Returns:
        str: zero-padded decimal code

    Raises:
        InvalidArgument, InvalidKey, CryptoUnavailable
    """
    if not isinstance(digits, int) or digits <= 0:
        raise InvalidArgument("Digits must be a positive integer (e.g. '6').")

    msg = int_to_bytes(moving_factor)
    digest = hmac_digest(secret, msg, algorithm)

    binary = dynamic_truncate(digest, truncation_offset)
    otp = binary % (10 ** digits)
    if add_checksum:
        otp = otp * 10 + checksum(otp, digits)

    width = digits + 1 if add_checksum else digits
    code = str(otp).zfill(width)
    logger.debug(
        "HMAC-%s(msg=%d) truncated=%d -> %d-char code",
        normalize_algorithm(algorithm).upper(), moving_factor, binary, width,
    )
    return code
