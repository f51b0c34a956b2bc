"""
hmac_primitive.py — HMAC functions the code generator consumes.

An HmacFunction is any callable (key, message) -> digest implementing RFC 2104.
The generator only sees that callable, so swapping SHA-1 for SHA-256/512, or
the stdlib for the `cryptography` backend, never touches truncation or
formatting.
"""

from typing import Callable, Dict
import hashlib
import hmac

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from .errors import UnsupportedAlgorithm

HmacFunction = Callable[[bytes, bytes], bytes]


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """HMAC-SHA1(key, message) -> 20-byte digest."""
    return hmac.new(key, message, hashlib.sha1).digest()


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    return hmac.new(key, message, hashlib.sha256).digest()


def hmac_sha512(key: bytes, message: bytes) -> bytes:
    return hmac.new(key, message, hashlib.sha512).digest()


_STDLIB: Dict[str, HmacFunction] = {
    "sha1": hmac_sha1,
    "sha256": hmac_sha256,
    "sha512": hmac_sha512,
}

_CRYPTOGRAPHY_HASHES = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}


def _normalize(name: str) -> str:
    key = str(name).lower().replace("-", "")
    if key not in _STDLIB:
        raise UnsupportedAlgorithm(f"Unsupported algorithm: {name}")
    return key


def get_hmac(name: str = "sha1") -> HmacFunction:
    """
    Resolve a hash name ("SHA1", "sha-256", ...) to a stdlib HMAC function.

    Raises:
        UnsupportedAlgorithm: for anything other than SHA-1/256/512
    """
    return _STDLIB[_normalize(name)]


def cryptography_hmac(name: str = "sha1") -> HmacFunction:
    """
    Same contract as get_hmac(), backed by the `cryptography` package.

    The digests are byte-for-byte identical to the stdlib ones; this exists for
    deployments that must route all primitives through one audited provider.
    """
    algorithm = _CRYPTOGRAPHY_HASHES[_normalize(name)]

    def _hmac(key: bytes, message: bytes) -> bytes:
        h = crypto_hmac.HMAC(key, algorithm())
        h.update(message)
        return h.finalize()

    _hmac.__name__ = f"cryptography_hmac_{name.lower()}"
    return _hmac
