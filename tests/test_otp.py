"""Tests for create / verify over Base32 secrets."""

import pytest

from otpcore import otp
from otpcore.encoding import random_base32
from otpcore.exceptions import InvalidArgument, InvalidKey
from otpcore.totp import time_in_hex
from otpcore.types import Type


# Base32 of b"12345678901234567890"
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_hotp_rfc_codes():
    assert otp.create(RFC_SECRET, "0", 6, Type.HOTP) == "755224"
    assert otp.create(RFC_SECRET, "9", 6, "hotp") == "520489"


def test_totp_rfc_code():
    assert otp.create(RFC_SECRET, time_in_hex(59_000), 8, "TOTP") == "94287082"


def test_hotp_create_and_verify():
    for _ in range(5):
        secret = random_base32()
        code1 = otp.create(secret, "1", 6, Type.HOTP)

        # Using same counter should get the same code
        code2 = otp.create(secret, "1", 6, Type.HOTP)
        assert code1 == code2
        assert otp.verify(secret, "1", code2, 6, Type.HOTP)


def test_default_period():
    time = 1573788090000
    code1 = otp.create(RFC_SECRET, time_in_hex(time), 6, Type.TOTP)

    one_second_later = time + 1000
    code2 = otp.create(RFC_SECRET, time_in_hex(one_second_later), 6, Type.TOTP)
    assert code1 == code2
    assert otp.verify(RFC_SECRET, time_in_hex(one_second_later), code2, 6, Type.TOTP)

    thirty_one_seconds_later = time + 31000
    code3 = otp.create(RFC_SECRET, time_in_hex(thirty_one_seconds_later), 6, Type.TOTP)
    assert code1 != code3
    assert otp.verify(RFC_SECRET, time_in_hex(thirty_one_seconds_later), code3, 6, Type.TOTP)


def test_custom_period():
    time = 1600637701000
    period = 60
    code1 = otp.create(RFC_SECRET, time_in_hex(time, period), 6, Type.TOTP)

    # still inside the same 60s window
    code2 = otp.create(RFC_SECRET, time_in_hex(time + 31000, period), 6, Type.TOTP)
    assert code1 == code2

    code3 = otp.create(RFC_SECRET, time_in_hex(time + 61000, period), 6, Type.TOTP)
    assert code1 != code3
    assert otp.verify(RFC_SECRET, time_in_hex(time + 61000, period), code3, 6, Type.TOTP)


def test_pad_left():
    secret = random_base32()
    code = otp.create(secret, time_in_hex(1470610800000), 16, Type.TOTP)
    assert len(code) == 16
    assert code.startswith("0")


def test_uppercase_secret():
    time = time_in_hex(1573788090000)
    t1 = otp.create("MFRGGZDFMZTWQ2LK", time, 6, Type.TOTP)
    t2 = otp.create("mfrggzdfmztwq2lk", time, 6, Type.TOTP)
    assert t1 == t2


def test_checksum_round_trip():
    code = otp.create(RFC_SECRET, "0", 6, "hotp", checksum=True)
    assert code == "7552243"
    assert otp.verify(RFC_SECRET, "0", code, 6, "hotp", checksum=True)
    assert not otp.verify(RFC_SECRET, "0", "755224", 6, "hotp", checksum=True)


def test_algorithm_selection():
    sha1 = otp.create(RFC_SECRET, "0", 6, "hotp")
    sha256 = otp.create(RFC_SECRET, "0", 6, "hotp", algorithm="sha256")
    assert otp.verify(RFC_SECRET, "0", sha256, 6, "hotp", algorithm="HmacSHA256")
    assert sha1 != sha256


def test_wrong_code_is_false():
    assert not otp.verify(RFC_SECRET, "0", "000000", 6, "hotp")
    assert not otp.verify(RFC_SECRET, "1", "755224", 6, "hotp")


def test_non_ascii_code_is_false():
    assert not otp.verify(RFC_SECRET, "0", "७५५२२४", 6, "hotp")


@pytest.mark.parametrize("code", ["12345", "1234567", "7552240"])
def test_bad_code_length_is_false(code):
    assert otp.verify(RFC_SECRET, "0", code, 6, Type.HOTP) is False


def test_bad_code_length_short_circuits_before_decoding():
    # "123" is not Base32, but the length check comes first
    assert otp.verify("123", time_in_hex(), "12345", 6, Type.TOTP) is False


@pytest.mark.parametrize("secret", [None, ""])
def test_bad_secret(secret):
    with pytest.raises(InvalidArgument):
        otp.create(secret, time_in_hex(), 6, Type.TOTP)


def test_undecodable_secret():
    with pytest.raises(InvalidArgument):
        otp.create("123", time_in_hex(), 6, Type.TOTP)


def test_empty_key():
    with pytest.raises(InvalidKey):
        otp.create("========", "1", 6, Type.HOTP)


@pytest.mark.parametrize("base", [None, ""])
def test_bad_base(base):
    with pytest.raises(InvalidArgument):
        otp.create(RFC_SECRET, base, 6, Type.TOTP)


@pytest.mark.parametrize("digits", [0, -6])
def test_bad_digits(digits):
    with pytest.raises(InvalidArgument):
        otp.create(RFC_SECRET, time_in_hex(), digits, Type.TOTP)


@pytest.mark.parametrize("kind", [None, "", "xotp"])
def test_bad_type(kind):
    with pytest.raises(InvalidArgument):
        otp.create(RFC_SECRET, time_in_hex(), 6, kind)


@pytest.mark.parametrize("code", [None, ""])
def test_bad_code(code):
    with pytest.raises(InvalidArgument):
        otp.verify(RFC_SECRET, time_in_hex(), code, 6, Type.TOTP)


def test_bad_counter_for_hotp():
    with pytest.raises(InvalidArgument):
        otp.create(RFC_SECRET, "not-a-counter", 6, Type.HOTP)


def test_unknown_algorithm_raises_even_for_wrong_length_code():
    with pytest.raises(InvalidArgument):
        otp.verify(RFC_SECRET, "0", "12345", 6, Type.HOTP, algorithm="md5")


@pytest.mark.parametrize("kind, base", [(Type.HOTP, "abc"), (Type.TOTP, "xyz")])
def test_bad_base_raises_even_for_wrong_length_code(kind, base):
    with pytest.raises(InvalidArgument):
        otp.verify(RFC_SECRET, base, "12345", 6, kind)


def test_type_parse():
    assert Type.parse("HOTP") is Type.HOTP
    assert Type.parse(" totp ") is Type.TOTP
    assert Type.parse(Type.TOTP) is Type.TOTP
    assert Type.HOTP.value == "hotp"
