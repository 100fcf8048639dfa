"""Errors raised by otpcore.

A code that simply does not match is never an error: ``verify`` returns False.
"""


class OTPError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(OTPError, ValueError):
    """Bad caller input, detected before any HMAC is computed."""


class CryptoUnavailable(OTPError):
    """The requested HMAC hash is not provided by this Python runtime."""


class InvalidKey(OTPError, ValueError):
    """The key bytes cannot be used as an HMAC key (e.g. empty)."""
