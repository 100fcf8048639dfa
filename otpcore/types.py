"""OTP type: which moving factor a ``base`` string stands for."""

from enum import Enum
from typing import Callable

from otpcore import hotp, totp
from otpcore.exceptions import InvalidArgument


class Type(str, Enum):
    """
    HOTP: ``base`` is a decimal counter.
    TOTP: ``base`` is a hex time step (see ``totp.time_in_hex``).

    Both variants end in the same ``truncate.generate_otp``.
    """

    HOTP = hotp.LABEL
    TOTP = totp.LABEL

    @classmethod
    def parse(cls, value) -> "Type":
        """Accept a Type or a case-insensitive "hotp" / "totp"."""
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            raise InvalidArgument("Type cannot be null or empty.")
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise InvalidArgument(f"OTP type not recognized: {value!r}") from e

    def moving_factor(self, base: str) -> int:
        """Parse ``base`` as this type's moving factor (counter or hex time step)."""
        if self is Type.HOTP:
            return hotp.moving_factor(base)
        return totp.moving_factor(base)

    @property
    def generator(self) -> Callable[..., str]:
        return hotp.create if self is Type.HOTP else totp.create
