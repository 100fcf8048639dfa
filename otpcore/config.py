"""
config.py — Defaults shared by the generators, the encoding helpers and the CLI.

Everything here is a plain constant; callers override per call (or per CLI flag).
"""

# --- Config / constants ----------------------------------------------------
DEFAULT_DIGITS = 6          # standard: 6 digits
DEFAULT_PERIOD = 30         # TOTP step (seconds)
SECRET_BYTES = 20           # 160-bit secret (common practice)
SECRET_LENGTH = 32          # SECRET_BYTES as Base32 characters
HEX_SECRET_LENGTH = 40      # SECRET_BYTES as hex characters

DEFAULT_ALGORITHM = "sha1"
SUPPORTED_ALGORITHMS = ("sha1", "sha256", "sha512")

# No fixed truncation window: use the low nibble of the last digest byte
DYNAMIC_TRUNCATION = -1

DEFAULT_ISSUER = "otp-tool"
DEFAULT_ACCOUNT = "user@example"
