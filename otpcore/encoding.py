"""
encoding.py — Secret text and enrollment URLs around the OTP core.

- Generate random secrets (Base32 / hex via pyotp, arbitrary alphabets via secrets)
- Decode a Base32 secret to the raw key bytes the generators take
- Build otpauth:// URIs for authenticator apps (Google Authenticator, Authy, ...)
"""

import base64
import binascii
import secrets
from urllib.parse import quote

import pyotp

from otpcore.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_PERIOD,
    HEX_SECRET_LENGTH,
    SECRET_BYTES,
    SECRET_LENGTH,
)
from otpcore.exceptions import InvalidArgument
from otpcore.truncate import normalize_algorithm
from otpcore.types import Type


# --- Secret generation -----------------------------------------------------
def random_base32(length: int = SECRET_LENGTH) -> str:
    """
    Random Base32 secret of ``length`` characters (default 32 = 160 bits).

    A length below 1 falls back to the default.

    Raises:
        InvalidArgument: pyotp refuses lengths weaker than 160 bits
    """
    if length < 1:
        length = SECRET_LENGTH
    try:
        return pyotp.random_base32(length=length)
    except ValueError as e:
        raise InvalidArgument(str(e)) from e


def random_hex(length: int = HEX_SECRET_LENGTH) -> str:
    """Random lowercase hex secret of ``length`` characters (default 40 = 160 bits)."""
    if length < 1:
        length = HEX_SECRET_LENGTH
    try:
        return pyotp.random_hex(length=length).lower()
    except ValueError as e:
        raise InvalidArgument(str(e)) from e


def random(characters: str, length: int = SECRET_BYTES) -> str:
    """Random string of ``length`` characters drawn from ``characters`` (CSPRNG)."""
    if not characters:
        raise InvalidArgument("Characters cannot be null or empty.")
    if length < 1:
        length = SECRET_BYTES
    return "".join(secrets.choice(characters) for _ in range(length))


# --- Decoding --------------------------------------------------------------
def decode_secret(secret: str) -> bytes:
    """
    Base32-decode a secret (RFC 4648) to raw key bytes.

    - case-insensitive: the text is uppercased first
    - padding '=' is optional; spaces between groups are ignored

    Raises:
        InvalidArgument: empty or not valid Base32
    """
    if not secret or not isinstance(secret, str):
        raise InvalidArgument("Secret cannot be null or empty.")
    text = "".join(secret.split()).upper().rstrip("=")
    text += "=" * (-len(text) % 8)
    try:
        return base64.b32decode(text)
    except binascii.Error as e:
        raise InvalidArgument("Invalid Base32 secret") from e


# --- Enrollment URL --------------------------------------------------------
def get_url(
    secret: str,
    digits: int,
    type: str,
    issuer: str,
    account: str,
    period: int = DEFAULT_PERIOD,
    algorithm: str = DEFAULT_ALGORITHM,
    counter: int = 0,
) -> str:
    """
    Build the otpauth:// URI an authenticator app scans as a QR code.

    - TOTP: otpauth://totp/{issuer}:{account}?secret=...&issuer=...&algorithm=...&digits=...&period=...
    - HOTP: otpauth://hotp/{issuer}:{account}?secret=...&issuer=...&algorithm=...&digits=...&counter=...

    Issuer and account are percent-encoded; the secret is uppercased with
    padding stripped.

    Raises:
        InvalidArgument: empty secret/issuer/account, bad digits, type, algorithm,
            period below 1 or negative counter
    """
    if not secret:
        raise InvalidArgument("Secret cannot be null or empty.")
    if not issuer:
        raise InvalidArgument("Issuer cannot be null or empty.")
    if not account:
        raise InvalidArgument("Account cannot be null or empty.")
    if not isinstance(digits, int) or digits <= 0:
        raise InvalidArgument("Digits must be a positive integer (e.g. '6').")
    kind = Type.parse(type)
    algorithm = normalize_algorithm(algorithm)
    if kind is Type.TOTP and (not isinstance(period, int) or period < 1):
        raise InvalidArgument(f"Period must be a positive number of seconds: {period!r}")
    if kind is Type.HOTP and (not isinstance(counter, int) or counter < 0):
        raise InvalidArgument(f"Counter must be a non-negative integer: {counter!r}")
    label_secret = "".join(secret.split()).upper().rstrip("=")

    label_issuer = quote(issuer, safe="")
    label_account = quote(account, safe="@")
    uri = (
        f"otpauth://{kind.value}/{label_issuer}:{label_account}?secret={label_secret}"
        f"&issuer={label_issuer}&algorithm={algorithm.upper()}&digits={digits}"
    )
    if kind is Type.TOTP:
        uri += f"&period={period}"
    else:
        uri += f"&counter={counter}"
    return uri
