"""
display.py — secret encoding and provisioning URIs for authenticator apps.

The generator works on raw bytes; humans and authenticator apps see the
secret as unpadded Base32 inside an otpauth:// URI. Nothing here renders QR
codes: hand the URI to whatever renderer the caller uses.
"""

from urllib.parse import quote, urlencode
import base64
import binascii

from .config import DEFAULT_HASH, DIGITS, STEP_SECONDS
from .errors import EmptySecret, InvalidSecret


def google_auth_compat(secret: bytes) -> str:
    """Base32-encode a raw secret and strip the '=' padding."""
    if not secret:
        raise EmptySecret()
    return base64.b32encode(bytes(secret)).decode("ascii").rstrip("=")


def decode_secret(secret_b32: str) -> bytes:
    """
    Decode Base32 secret text back to raw bytes.

    Accepts lower case, missing padding and the spaces/dashes apps insert
    when displaying secrets in groups.

    Raises:
        InvalidSecret: if the text is not Base32
        EmptySecret: if it decodes to nothing
    """
    if not isinstance(secret_b32, str):
        raise InvalidSecret("Base32 secret must be a string")
    cleaned = secret_b32.replace(" ", "").replace("-", "").rstrip("=").upper()
    cleaned += "=" * (-len(cleaned) % 8)
    try:
        key = base64.b32decode(cleaned, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSecret("Invalid Base32 secret") from e
    if not key:
        raise EmptySecret()
    return key


def format_otpauth_uri(
    secret: bytes,
    account: str,
    issuer: str,
    algo: str = DEFAULT_HASH,
    digits: int = DIGITS,
    period: int = STEP_SECONDS,
) -> str:
    """
    otpauth://totp/{issuer}:{account}?secret=...&issuer=...&algorithm=...&digits=...&period=...

    Labels are percent-encoded; the secret goes in unpadded Base32.
    """
    label = f"{quote(issuer, safe='')}:{quote(account, safe='@')}"
    params = urlencode(
        {
            "secret": google_auth_compat(secret),
            "issuer": issuer,
            "algorithm": algo.upper(),
            "digits": digits,
            "period": period,
        },
        quote_via=quote,
    )
    return f"otpauth://totp/{label}?{params}"
