import pytest

from backend.app import create_app
from backend.config import TestingConfig


@pytest.fixture
def client():
    app = create_app(TestingConfig)
    return app.test_client()


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "POST /totp" in resp.get_json()["endpoints"]


def test_totp(client, rfc_secret_b32):
    resp = client.post("/totp", json={"secret": rfc_secret_b32, "timestamp": 59})
    assert resp.status_code == 200
    assert resp.get_json() == {"code": "287082", "remaining": 1, "period": 30}


def test_totp_defaults_to_now(client, rfc_secret_b32):
    resp = client.post("/totp", json={"secret": rfc_secret_b32})
    body = resp.get_json()
    assert resp.status_code == 200
    assert len(body["code"]) == 6 and body["code"].isdigit()
    assert 1 <= body["remaining"] <= 30


def test_totp_missing_secret(client):
    resp = client.post("/totp", json={})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Secret is required"


def test_totp_bad_timestamp(client, rfc_secret_b32):
    resp = client.post("/totp", json={"secret": rfc_secret_b32, "timestamp": "soon"})
    assert resp.status_code == 400


def test_totp_invalid_secret(client):
    resp = client.post("/totp", json={"secret": "ABC!", "timestamp": 59})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid Base32 secret"


def test_hotp(client, rfc_secret_b32):
    resp = client.post("/hotp", json={"secret": rfc_secret_b32, "counter": 1})
    assert resp.status_code == 200
    assert resp.get_json() == {"code": "287082"}


def test_hotp_missing_counter(client, rfc_secret_b32):
    resp = client.post("/hotp", json={"secret": rfc_secret_b32})
    assert resp.status_code == 400


def test_hotp_negative_counter(client, rfc_secret_b32):
    resp = client.post("/hotp", json={"secret": rfc_secret_b32, "counter": -1})
    assert resp.status_code == 400
    assert "64-bit" in resp.get_json()["error"]


def test_otpauth_uri(client, rfc_secret_b32):
    resp = client.post("/otpauth_uri", json={"secret": rfc_secret_b32, "account": "alice"})
    assert resp.status_code == 200
    uri = resp.get_json()["totp_uri"]
    assert uri.startswith("otpauth://totp/otp-test:alice?secret=GEZDGNBV")
    assert uri.endswith("&algorithm=SHA1&digits=6&period=30")


def test_otpauth_uri_requires_account(client, rfc_secret_b32):
    resp = client.post("/otpauth_uri", json={"secret": rfc_secret_b32})
    assert resp.status_code == 400


def test_totp_non_ascii_secret(client):
    resp = client.post("/totp", json={"secret": "ÄBCD", "timestamp": 59})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid Base32 secret"


@pytest.mark.parametrize("path", ["/totp", "/hotp", "/otpauth_uri"])
@pytest.mark.parametrize("body", [[1, 2], "GEZDGNBV", 42])
def test_non_object_body_is_bad_request(client, path, body):
    resp = client.post(path, json=body)
    assert resp.status_code == 400
    assert "required" in resp.get_json()["error"]


def test_hotp_zero_digits(client, rfc_secret_b32):
    resp = client.post("/hotp", json={"secret": rfc_secret_b32, "counter": 1, "digits": 0})
    assert resp.status_code == 400
    assert "digits must be at least 1" in resp.get_json()["error"]


@pytest.mark.parametrize(
    "extra",
    [{"counter": True}, {"counter": False}, {"counter": 1, "digits": True}],
)
def test_hotp_rejects_booleans(client, rfc_secret_b32, extra):
    resp = client.post("/hotp", json={"secret": rfc_secret_b32, **extra})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Counter and digits must be integers"


def test_totp_rejects_boolean_timestamp(client, rfc_secret_b32):
    resp = client.post("/totp", json={"secret": rfc_secret_b32, "timestamp": True})
    assert resp.status_code == 400
