#!/usr/bin/env python3
"""
otp_cli.py — CLI wrapper around otp_core.py

Subcommands (the secret is always passed as Base32):
- code  : print the TOTP code for now or for --timestamp
- watch : show the TOTP code in real time
- hotp  : HOTP code for a specific counter
- uri   : print the otpauth:// provisioning URI
"""

import argparse
import logging
import sys
import time

from . import otp_core
from .config import DIGITS, STEP_SECONDS, Settings, configure_logging
from .display import decode_secret, format_otpauth_uri
from .errors import OtpError
from .hmac_primitive import get_hmac

logger = logging.getLogger(__name__)


# --- CLI command handlers ---
def cmd_code(args):
    key = decode_secret(args.secret)
    now = int(time.time()) if args.timestamp is None else args.timestamp
    code = otp_core.generate_code(key, now, get_hmac(args.algorithm))
    logger.debug("step=%d remaining=%ds", otp_core.time_step(now), otp_core.seconds_remaining(now))
    print(code)


def cmd_watch(args):
    key = decode_secret(args.secret)
    hmac_fn = get_hmac(args.algorithm)
    print(f"Press Ctrl+C to quit. Generating {DIGITS}-digit TOTP every {STEP_SECONDS}s...\n")
    last_code = None
    try:
        while True:
            now = int(time.time())
            code = otp_core.generate_code(key, now, hmac_fn)
            remaining = otp_core.seconds_remaining(now)
            if code != last_code:
                print(f"TOTP: {code}  (valid ~{remaining:2d}s)")
                logger.debug("new step %d", otp_core.time_step(now))
                last_code = code
            else:
                print(f".. {remaining:2d}s left", end="\r", flush=True)
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nBye.")


def cmd_hotp(args):
    key = decode_secret(args.secret)
    code = otp_core.hotp(key, args.counter, args.digits, get_hmac(args.algorithm))
    print(f"HOTP({args.digits}d, counter={args.counter}): {code}")


def cmd_uri(args):
    key = decode_secret(args.secret)
    uri = format_otpauth_uri(key, args.account, args.issuer, algo=args.algorithm)
    print(uri)


def cmd_help(args):
    print("'otp-code -h' for help.")


# --- Argparse builder ---
def build_parser(settings: Settings = None) -> argparse.ArgumentParser:
    settings = settings or Settings()
    p = argparse.ArgumentParser(description="TOTP/HOTP code generator (RFC 4226 / RFC 6238)")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    p.add_argument("--algorithm", default=settings.hash_name,
                   help="HMAC hash: sha1, sha256 or sha512 (default from OTP_HASH)")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # code
    pc = sub.add_parser("code", help="Print the current TOTP code")
    pc.add_argument("--secret", required=True, help="Base32 secret")
    pc.add_argument("--timestamp", type=int, help="Epoch seconds (default: now)")
    pc.set_defaults(func=cmd_code)

    # watch
    pw = sub.add_parser("watch", help="Show TOTP code in real time")
    pw.add_argument("--secret", required=True, help="Base32 secret")
    pw.set_defaults(func=cmd_watch)

    # hotp
    ph = sub.add_parser("hotp", help="Generate HOTP code for a specific counter")
    ph.add_argument("--secret", required=True, help="Base32 secret")
    ph.add_argument("--counter", type=int, required=True)
    ph.add_argument("--digits", type=int, default=DIGITS, help="Number of digits")
    ph.set_defaults(func=cmd_hotp)

    # uri
    pu = sub.add_parser("uri", help="Print the otpauth URI for authenticator apps")
    pu.add_argument("--secret", required=True, help="Base32 secret")
    pu.add_argument("--account", required=True, help="Account label, e.g. alice@example")
    pu.add_argument("--issuer", default=settings.issuer, help="Issuer label (default from OTP_ISSUER)")
    pu.set_defaults(func=cmd_uri)

    return p


def main(argv=None) -> int:
    settings = Settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else settings.log_level)
    try:
        args.func(args)
    except OtpError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
