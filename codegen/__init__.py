"""
codegen package
===============

TOTP/HOTP code generation per RFC 4226 & RFC 6238.

- HOTP: code = Truncate(HMAC-SHA1(key=secret, msg=counter)) mod 10^6
- TOTP: HOTP with counter = floor(epoch_seconds / 30)
- Dynamic truncation: 4 bytes at offset (last byte & 0x0F), top bit cleared.

Quick use:

>>> from codegen import generate_code
>>> generate_code(b"12345678901234567890", 59)
'287082'
"""

from .config import DIGITS, STEP_SECONDS
from .display import decode_secret, format_otpauth_uri, google_auth_compat
from .errors import (
    EmptySecret,
    InvalidCounter,
    InvalidDigestLength,
    InvalidDigits,
    InvalidSecret,
    OtpError,
    UnsupportedAlgorithm,
)
from .hmac_primitive import cryptography_hmac, get_hmac, hmac_sha1, hmac_sha256, hmac_sha512
from .otp_core import (
    dynamic_truncate,
    encode_time_step,
    format_code,
    generate_code,
    hotp,
    int_to_bytes,
    seconds_remaining,
    time_step,
    totp,
)

__all__ = [
    "DIGITS",
    "STEP_SECONDS",
    "EmptySecret",
    "InvalidCounter",
    "InvalidDigestLength",
    "InvalidDigits",
    "InvalidSecret",
    "OtpError",
    "UnsupportedAlgorithm",
    "cryptography_hmac",
    "decode_secret",
    "dynamic_truncate",
    "encode_time_step",
    "format_code",
    "format_otpauth_uri",
    "generate_code",
    "get_hmac",
    "google_auth_compat",
    "hmac_sha1",
    "hmac_sha256",
    "hmac_sha512",
    "hotp",
    "int_to_bytes",
    "seconds_remaining",
    "time_step",
    "totp",
]
