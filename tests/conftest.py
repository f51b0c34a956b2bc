import base64

import pytest

# RFC 4226 Appendix D / RFC 6238 Appendix B seeds
RFC_SECRET_SHA1 = b"12345678901234567890"
RFC_SECRET_SHA256 = b"12345678901234567890123456789012"
RFC_SECRET_SHA512 = b"1234567890" * 6 + b"1234"


@pytest.fixture
def rfc_secret():
    return RFC_SECRET_SHA1


@pytest.fixture
def rfc_secret_b32():
    return base64.b32encode(RFC_SECRET_SHA1).decode("ascii")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("OTP_ISSUER", "OTP_LOG_LEVEL", "OTP_HOST", "OTP_PORT", "OTP_HASH"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
