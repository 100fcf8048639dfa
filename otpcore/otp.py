"""
otp.py — Create and verify one-time passwords from a Base32 secret.

This is the entry point most callers want:

    >>> from otpcore import otp, totp
    >>> code = otp.create("JBSWY3DPEHPK3PXP", totp.time_in_hex(), 6, "totp")
    >>> otp.verify("JBSWY3DPEHPK3PXP", totp.time_in_hex(), code, 6, "totp")
    True

For HOTP the base is the counter ("0", "1", ...); persisting and incrementing
it is up to the caller. For TOTP the base is the hex time step.

Invalid input raises ``InvalidArgument`` before any HMAC is computed. A code
that does not match, including one of the wrong length, is just ``False``.
"""

import hmac
import logging

from otpcore.config import DEFAULT_ALGORITHM
from otpcore.encoding import decode_secret
from otpcore.exceptions import InvalidArgument
from otpcore.truncate import normalize_algorithm
from otpcore.types import Type

logger = logging.getLogger(__name__)


def validate_parameters(secret: str, base: str, digits: int, type,
                        algorithm: str = DEFAULT_ALGORITHM) -> Type:
    """
    Check the inputs shared by ``create`` and ``verify``.

    Returns:
        Type: the parsed OTP type

    Raises:
        InvalidArgument: empty secret or base, non-positive digits, bad type,
            unknown algorithm, or a base the type cannot parse
    """
    if not secret:
        raise InvalidArgument("Secret cannot be null or empty.")
    if not base:
        raise InvalidArgument("Base cannot be null or empty.")
    if not isinstance(digits, int) or digits <= 0:
        raise InvalidArgument("Digits must be a positive integer (e.g. '6').")
    kind = Type.parse(type)
    normalize_algorithm(algorithm)
    kind.moving_factor(base)
    return kind


def create(
    secret: str,
    base: str,
    digits: int,
    type,
    algorithm: str = DEFAULT_ALGORITHM,
    checksum: bool = False,
) -> str:
    """
    Create a one-time password.

    Arguments:
        secret: Base32 secret (case-insensitive)
        base: counter (HOTP) or hex time step (TOTP)
        digits: length of the code (commonly 6)
        type: Type.HOTP / Type.TOTP or "hotp" / "totp"
        algorithm: "sha1" (default), "sha256" or "sha512"
        checksum: append a Luhn check digit

    Returns:
        str: the code, ``digits`` characters (+1 with checksum)
    """
    kind = validate_parameters(secret, base, digits, type, algorithm)
    key = decode_secret(secret)
    return kind.generator(key, base, digits, algorithm=algorithm, add_checksum=checksum)


def verify(
    secret: str,
    base: str,
    code: str,
    digits: int,
    type,
    algorithm: str = DEFAULT_ALGORITHM,
    checksum: bool = False,
) -> bool:
    """
    Return True if ``code`` is the one-time password for ``secret`` and ``base``.

    Codes of the wrong length are rejected without computing an HMAC. The
    comparison itself runs in constant time (hmac.compare_digest).

    Raises:
        InvalidArgument: same rules as ``create``, plus an empty code
    """
    kind = validate_parameters(secret, base, digits, type, algorithm)
    if not code:
        raise InvalidArgument("Code cannot be null or empty.")

    expected_length = digits + 1 if checksum else digits
    if len(code) != expected_length:
        logger.debug("%s code length %d != %d", kind.value, len(code), expected_length)
        return False

    key = decode_secret(secret)
    expected = kind.generator(key, base, digits, algorithm=algorithm, add_checksum=checksum)
    return hmac.compare_digest(expected.encode("utf-8"), code.encode("utf-8"))
