import pytest

from codegen.display import decode_secret, format_otpauth_uri, google_auth_compat
from codegen.errors import EmptySecret, InvalidSecret

RFC_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


def test_google_auth_compat(rfc_secret):
    assert google_auth_compat(rfc_secret) == RFC_B32


def test_google_auth_compat_strips_padding():
    assert google_auth_compat(b"hi") == "NBUQ"


def test_google_auth_compat_empty():
    with pytest.raises(EmptySecret):
        google_auth_compat(b"")


@pytest.mark.parametrize("text", ["NBUQ", "nbuq", "NBUQ===="])
def test_decode_secret_tolerates_case_and_padding(text):
    assert decode_secret(text) == b"hi"


def test_decode_secret_grouped(rfc_secret):
    assert decode_secret("gezd gnbv gy3t qojq gezd-gnbv-gy3t-qojq") == rfc_secret


def test_decode_secret_invalid():
    with pytest.raises(InvalidSecret):
        decode_secret("ABC!")


def test_decode_secret_not_a_string():
    with pytest.raises(InvalidSecret):
        decode_secret(b"NBUQ")


def test_decode_secret_empty():
    with pytest.raises(EmptySecret):
        decode_secret("")


def test_otpauth_uri(rfc_secret):
    uri = format_otpauth_uri(rfc_secret, "alice@example.com", "My App")
    assert uri == (
        "otpauth://totp/My%20App:alice@example.com"
        f"?secret={RFC_B32}&issuer=My%20App&algorithm=SHA1&digits=6&period=30"
    )


def test_otpauth_uri_algorithm(rfc_secret):
    uri = format_otpauth_uri(rfc_secret, "bob", "otp-tool", algo="sha256")
    assert "algorithm=SHA256" in uri


@pytest.mark.parametrize("text", ["ÄBCD", "GEZDGNBVé"])
def test_decode_secret_non_ascii(text):
    with pytest.raises(InvalidSecret):
        decode_secret(text)
