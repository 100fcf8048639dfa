"""
otpcore package
===============

One-time passwords (HOTP/TOTP) per RFC 4226 & RFC 6238.

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- HOTP (HMAC-based One-Time Password):
  code = Truncate(HMAC-SHA1(key=secret, msg=counter)) mod 10^digits
  → the counter is kept and incremented by the caller.

- TOTP (Time-based One-Time Password):
  HOTP with counter = floor(timestamp / period)
  → default period = 30 seconds; RFC 6238 recommends 6 digits, SHA-1, 30s.

- Dynamic Truncation:
  4 bytes taken from the HMAC at offset (last byte & 0x0F), top bit cleared.

──────────────────────────────────────────────
Quick example
──────────────────────────────────────────────
>>> from otpcore import create, verify, random_base32, time_in_hex, get_url
>>> secret = random_base32()
>>> code = create(secret, time_in_hex(), 6, "totp")
>>> verify(secret, time_in_hex(), code, 6, "totp")
True
>>> uri = get_url(secret, 6, "totp", "MyService", "alice@example.com")
"""
from otpcore.encoding import decode_secret, get_url, random, random_base32, random_hex
from otpcore.exceptions import CryptoUnavailable, InvalidArgument, InvalidKey, OTPError
from otpcore.otp import create, verify
from otpcore.totp import time_in_hex, time_step
from otpcore.truncate import checksum, generate_otp
from otpcore.types import Type

__all__ = [
    "CryptoUnavailable",
    "InvalidArgument",
    "InvalidKey",
    "OTPError",
    "Type",
    "checksum",
    "create",
    "decode_secret",
    "generate_otp",
    "get_url",
    "random",
    "random_base32",
    "random_hex",
    "time_in_hex",
    "time_step",
    "verify",
]
