"""
cli.py — Command line wrapper around otpcore.

Subcommands:
- random : print a new secret (Base32, or hex with --hex)
- time   : print the TOTP hex time step
- hotp   : HOTP code for a counter
- totp   : TOTP code for now (or --time-ms), with seconds remaining
- create : code for an explicit base (counter or hex time step)
- verify : check a code; exit status 0 = valid, 1 = invalid
- uri    : otpauth:// URI to import into authenticator apps

eg..:
    otpcore random
    otpcore totp --secret JBSWY3DPEHPK3PXP --digits 8 --period 60
    otpcore hotp --secret JBSWY3DPEHPK3PXP --counter 42
    otpcore verify --secret JBSWY3DPEHPK3PXP --type hotp --base 42 --code 123456
    otpcore uri --secret JBSWY3DPEHPK3PXP --account alice@example --issuer MyService
"""

import argparse
import logging
import sys
from typing import List, Optional

from otpcore import config, encoding, hotp, otp, totp
from otpcore.exceptions import OTPError

logger = logging.getLogger(__name__)


# --- CLI command handlers ---
def cmd_help(args):
    print("'otpcore -h' for help.")
    return 0


def cmd_random(args):
    if args.hex:
        print(encoding.random_hex(args.length or config.HEX_SECRET_LENGTH))
    else:
        print(encoding.random_base32(args.length or config.SECRET_LENGTH))
    return 0


def cmd_time(args):
    print(totp.time_in_hex(args.time_ms, args.period))
    return 0


def cmd_hotp(args):
    key = encoding.decode_secret(args.secret)
    code = hotp.create(key, args.counter, args.digits, algorithm=args.algorithm)
    print(f"HOTP({args.digits}d, counter={args.counter}): {code}")
    return 0


def cmd_totp(args):
    now = args.time_ms if args.time_ms is not None else totp.now_millis()
    base = totp.time_in_hex(now, args.period)
    key = encoding.decode_secret(args.secret)
    code = totp.create(key, base, args.digits, algorithm=args.algorithm)
    remaining = totp.remaining_seconds(now, args.period)
    print(f"TOTP ({args.digits}d): {code}  (valid ~{remaining:2d}s)")
    return 0


def cmd_create(args):
    code = otp.create(args.secret, args.base, args.digits, args.type,
                      algorithm=args.algorithm, checksum=args.checksum)
    print(code)
    return 0


def cmd_verify(args):
    ok = otp.verify(args.secret, args.base, args.code, args.digits, args.type,
                    algorithm=args.algorithm, checksum=args.checksum)
    if ok:
        print(f"[+] {args.type.upper()} code is VALID")
        return 0
    print(f"[-] {args.type.upper()} code is INVALID")
    return 1


def cmd_uri(args):
    uri = encoding.get_url(args.secret, args.digits, args.type, args.issuer, args.account,
                           period=args.period, algorithm=args.algorithm, counter=args.counter)
    print(uri)
    return 0


# --- Argparse builder ---
def _add_code_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--digits", type=int, default=config.DEFAULT_DIGITS, help="Number of OTP digits")
    p.add_argument("--algorithm", default=config.DEFAULT_ALGORITHM,
                   help="HMAC hash: sha1, sha256 or sha512")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="otpcore", description="HOTP/TOTP generator and verifier (RFC 4226 / RFC 6238)")
    p.add_argument("--verbose", action="store_true", help="Verbose output")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # random
    pr = sub.add_parser("random", help="Generate a new random secret")
    pr.add_argument("--length", type=int, help="Secret length in characters")
    pr.add_argument("--hex", action="store_true", help="Hex instead of Base32")
    pr.set_defaults(func=cmd_random)

    # time
    pti = sub.add_parser("time", help="Print the TOTP time step in hex")
    pti.add_argument("--time-ms", type=int, help="Unix time in milliseconds (default: now)")
    pti.add_argument("--period", type=int, default=config.DEFAULT_PERIOD, help="TOTP period (seconds)")
    pti.set_defaults(func=cmd_time)

    # hotp
    ph = sub.add_parser("hotp", help="Generate HOTP code for a specific counter")
    ph.add_argument("--secret", required=True, help="Base32 secret")
    ph.add_argument("--counter", required=True, help="HOTP counter")
    _add_code_options(ph)
    ph.set_defaults(func=cmd_hotp)

    # totp
    pt = sub.add_parser("totp", help="Generate the current TOTP code")
    pt.add_argument("--secret", required=True, help="Base32 secret")
    pt.add_argument("--time-ms", type=int, help="Unix time in milliseconds (default: now)")
    pt.add_argument("--period", type=int, default=config.DEFAULT_PERIOD, help="TOTP period (seconds)")
    _add_code_options(pt)
    pt.set_defaults(func=cmd_totp)

    # create
    pc = sub.add_parser("create", help="Generate a code for an explicit base")
    pc.add_argument("--secret", required=True, help="Base32 secret")
    pc.add_argument("--base", required=True, help="Counter (hotp) or hex time step (totp)")
    pc.add_argument("--type", default=totp.LABEL, help="hotp or totp")
    pc.add_argument("--checksum", action="store_true", help="Append a Luhn check digit")
    _add_code_options(pc)
    pc.set_defaults(func=cmd_create)

    # verify
    pv = sub.add_parser("verify", help="Verify an OTP code (TOTP or HOTP)")
    pv.add_argument("--secret", required=True, help="Base32 secret")
    pv.add_argument("--base", required=True, help="Counter (hotp) or hex time step (totp)")
    pv.add_argument("--code", required=True, help="OTP code to verify")
    pv.add_argument("--type", default=totp.LABEL, help="hotp or totp")
    pv.add_argument("--checksum", action="store_true", help="Code carries a Luhn check digit")
    _add_code_options(pv)
    pv.set_defaults(func=cmd_verify)

    # uri
    pu = sub.add_parser("uri", help="Print otpauth URI for TOTP/HOTP")
    pu.add_argument("--secret", required=True, help="Base32 secret")
    pu.add_argument("--account", default=config.DEFAULT_ACCOUNT, help="Account label for otpauth URI")
    pu.add_argument("--issuer", default=config.DEFAULT_ISSUER, help="Issuer label for otpauth URI")
    pu.add_argument("--type", default=totp.LABEL, help="hotp or totp")
    pu.add_argument("--period", type=int, default=config.DEFAULT_PERIOD, help="TOTP period (seconds)")
    pu.add_argument("--counter", type=int, default=0, help="Initial HOTP counter")
    _add_code_options(pu)
    pu.set_defaults(func=cmd_uri)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except OTPError as e:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"[!] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
