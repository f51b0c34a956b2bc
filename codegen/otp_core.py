#!/usr/bin/env python3
"""
otp_core.py — Core library for TOTP / HOTP code generation (RFC 4226 / RFC 6238).

Goals:
- Pure functions only: no file I/O, no logging, no global state. The CLI and
  the Flask backend wrap these.
- Pipeline: epoch time -> 8-byte counter -> HMAC digest -> 31-bit integer ->
  zero-padded decimal string.

Security notes:
- The shared secret is read, never copied into long-lived structures and
  never logged. Keep it out of exception messages too.
- HMAC-SHA1 per RFC 4226/6238 is the default (what Google Authenticator uses);
  pass another HmacFunction from hmac_primitive to change it.
"""

from typing import Optional, Tuple
import struct
import time

from .config import DIGITS, MAX_COUNTER, STEP_SECONDS
from .display import decode_secret
from .errors import EmptySecret, InvalidCounter, InvalidDigestLength, InvalidDigits
from .hmac_primitive import HmacFunction, hmac_sha1


# --- Time-step encoder -----------------------------------------------------
def time_step(epoch_seconds: int, step_seconds: int = STEP_SECONDS) -> int:
    """
    Number of completed steps since the epoch: floor(epoch_seconds / step_seconds).

    Fractional steps are truncated, never rounded.
    """
    if step_seconds <= 0:
        raise ValueError("step_seconds must be positive")
    return int(epoch_seconds) // step_seconds


def int_to_bytes(counter: int) -> bytes:
    """
    Encode a counter as the 8-byte big-endian HOTP message.

    Example: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        InvalidCounter: if counter is outside [0, 2^64 - 1]
    """
    if counter < 0 or counter > MAX_COUNTER:
        raise InvalidCounter(f"Counter {counter} is outside the unsigned 64-bit range")
    return struct.pack(">Q", counter)


def encode_time_step(epoch_seconds: int, step_seconds: int = STEP_SECONDS) -> bytes:
    """Counter bytes for the step containing epoch_seconds."""
    return int_to_bytes(time_step(epoch_seconds, step_seconds))


def seconds_remaining(epoch_seconds: int, step_seconds: int = STEP_SECONDS) -> int:
    """Seconds until the current step ends (1..step_seconds)."""
    return step_seconds - (int(epoch_seconds) % step_seconds)


# --- Dynamic truncation ----------------------------------------------------
def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Dynamic truncation per RFC 4226 section 5.3.

    - offset = low nibble of the last byte (0..15)
    - read 4 bytes at offset as a big-endian unsigned integer
    - clear the top bit -> 31-bit value

    Arguments:
        hmac_digest: HMAC output (20 bytes for SHA-1)
    Raises:
        InvalidDigestLength: if the digest is shorter than offset + 4
    """
    if not hmac_digest:
        raise InvalidDigestLength(0, 0)
    offset = hmac_digest[-1] & 0x0F
    if len(hmac_digest) < offset + 4:
        raise InvalidDigestLength(len(hmac_digest), offset)
    (value,) = struct.unpack(">I", hmac_digest[offset:offset + 4])
    return value & 0x7FFFFFFF


# --- Decimal formatting ----------------------------------------------------
def format_code(value: int, digits: int = DIGITS) -> str:
    """value mod 10^digits, left-padded with '0' to exactly `digits` characters."""
    if digits < 1:
        raise InvalidDigits(f"digits must be at least 1, got {digits}")
    return str(value % (10 ** digits)).zfill(digits)


# --- Code generator --------------------------------------------------------
def hotp(
    secret: bytes,
    counter: int,
    digits: int = DIGITS,
    hmac_fn: HmacFunction = hmac_sha1,
) -> str:
    """
    HOTP code per RFC 4226.

    Steps:
    1. message = 8-byte big-endian counter
    2. digest = HMAC(key=secret, message)
    3. dbc = dynamic_truncate(digest)
    4. code = dbc mod 10^digits, zero-padded

    Raises:
        EmptySecret: if secret is empty
        InvalidCounter: if counter does not fit in 64 bits
        InvalidDigestLength: if hmac_fn returns a short digest
    """
    if not secret:
        raise EmptySecret()
    digest = hmac_fn(bytes(secret), int_to_bytes(counter))
    return format_code(dynamic_truncate(digest), digits)


def generate_code(
    secret: bytes,
    epoch_seconds: int,
    hmac_fn: HmacFunction = hmac_sha1,
) -> str:
    """
    6-digit TOTP code for `secret` at `epoch_seconds` (30-second steps).

    Identical inputs always give the identical code, and any two times inside
    the same 30-second window give the same code.
    """
    return hotp(secret, time_step(epoch_seconds, STEP_SECONDS), DIGITS, hmac_fn)


def totp(
    secret_b32: str,
    timestamp: Optional[int] = None,
    timestep: int = STEP_SECONDS,
    t0: int = 0,
    digits: int = DIGITS,
    hmac_fn: HmacFunction = hmac_sha1,
) -> Tuple[str, int]:
    """
    TOTP for a Base32 secret, counter = floor((timestamp - T0) / X).

    Arguments:
        secret_b32: Base32 secret (case-insensitive, padding optional)
        timestamp: epoch seconds (None -> time.time())
        timestep: X in seconds, default 30
        t0: start offset, default 0
        digits: code length

    Returns:
        (code, remaining_seconds)

    Raises:
        InvalidSecret: if secret_b32 is not valid Base32
    """
    if timestamp is None:
        timestamp = int(time.time())
    key = decode_secret(secret_b32)
    elapsed = int(timestamp) - t0
    code = hotp(key, time_step(elapsed, timestep), digits, hmac_fn)
    return code, seconds_remaining(elapsed, timestep)
