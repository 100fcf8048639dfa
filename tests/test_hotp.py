"""Tests for HOTP generation (RFC 4226)."""

import pyotp
import pytest

from otpcore import hotp
from otpcore.encoding import decode_secret, random_base32
from otpcore.exceptions import InvalidArgument


RFC4226_KEY = b"12345678901234567890"
RFC4226_CODES = ["755224", "287082", "359152", "969429", "338314",
                 "254676", "287922", "162583", "399871", "520489"]


@pytest.mark.parametrize("counter, expected_code", list(enumerate(RFC4226_CODES)))
def test_rfc4226_test_vectors(counter, expected_code):
    assert hotp.create(RFC4226_KEY, str(counter), 6) == expected_code


def test_same_counter_same_code():
    code1 = hotp.create(RFC4226_KEY, "1", 6)
    code2 = hotp.create(RFC4226_KEY, "1", 6)
    assert code1 == code2


def test_next_counter_gives_different_code():
    assert hotp.create(RFC4226_KEY, "1", 6) != hotp.create(RFC4226_KEY, "2", 6)


def test_different_digits_share_suffix():
    code_6 = hotp.create(RFC4226_KEY, "0", 6)
    code_8 = hotp.create(RFC4226_KEY, "0", 8)
    assert len(code_8) == 8
    assert code_8.endswith(code_6)


def test_pad_left():
    code = hotp.create(RFC4226_KEY, "1", 16)
    # e.g. 0000001094287082
    assert len(code) == 16
    assert code.startswith("0")


def test_checksum_adds_a_digit():
    assert hotp.create(RFC4226_KEY, "0", 6, add_checksum=True) == "7552243"


@pytest.mark.parametrize(
    "counter, expected",
    [("0", 0), ("42", 42), ("+7", 7), (5, 5), ("18446744073709551615", 2 ** 64 - 1)],
)
def test_moving_factor(counter, expected):
    assert hotp.moving_factor(counter) == expected


@pytest.mark.parametrize(
    "counter",
    ["", "-1", "abc", " 1", "1_000", "1.0", "18446744073709551616", None, -3, True],
)
def test_moving_factor_rejects_bad_counters(counter):
    with pytest.raises(InvalidArgument):
        hotp.moving_factor(counter)


@pytest.mark.parametrize("digits", [6, 8])
def test_interoperates_with_pyotp(digits):
    secret = random_base32()
    reference = pyotp.HOTP(secret, digits=digits)
    key = decode_secret(secret)
    for counter in range(20):
        assert hotp.create(key, str(counter), digits) == reference.at(counter)


def test_sha256_interoperates_with_pyotp():
    import hashlib

    secret = random_base32()
    reference = pyotp.HOTP(secret, digest=hashlib.sha256)
    key = decode_secret(secret)
    for counter in range(5):
        assert hotp.create(key, str(counter), 6, algorithm="sha256") == reference.at(counter)
