"""
OTP BACKEND API ROUTES - FLASK BLUEPRINT

Every endpoint takes the Base32 secret in the JSON body (never the query
string, so it stays out of access logs).

EXAMPLES:
curl -X POST http://localhost:5000/totp -H "Content-Type: application/json" -d '{"secret": "JBSWY3DPEHPK3PXP"}'
curl -X POST http://localhost:5000/hotp -H "Content-Type: application/json" -d '{"secret": "JBSWY3DPEHPK3PXP", "counter": 1}'
"""

import logging
import time

from flask import Blueprint, current_app, jsonify, request

from codegen import otp_core
from codegen.display import decode_secret, format_otpauth_uri
from codegen.hmac_primitive import get_hmac

logger = logging.getLogger(__name__)

otp_bp = Blueprint("otp", __name__)


def _json_body():
    """JSON object body; anything else (arrays, scalars, bad JSON) reads as empty."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _secret_from(data):
    """Base32 secret from the body, or None if missing."""
    secret = data.get("secret")
    if not secret:
        return None
    return decode_secret(secret)


@otp_bp.route("/totp", methods=["POST"])
def get_totp():
    """
    CURRENT TOTP CODE

    Input (JSON body):
      {"secret": "JBSWY3DPEHPK3PXP", "timestamp": 1111111109}   # timestamp optional

    Output:
      {"code": "081804", "remaining": 1, "period": 30}
    """
    data = _json_body()
    key = _secret_from(data)
    if key is None:
        return jsonify({"error": "Secret is required"}), 400

    timestamp = data.get("timestamp")
    if timestamp is None:
        timestamp = int(time.time())
    elif not _is_int(timestamp):
        return jsonify({"error": "Timestamp must be an integer"}), 400

    hmac_fn = get_hmac(current_app.config["OTP_HASH"])
    code = otp_core.generate_code(key, timestamp, hmac_fn)
    logger.info("Generated TOTP for step %d", otp_core.time_step(timestamp))
    return jsonify({
        "code": code,
        "remaining": otp_core.seconds_remaining(timestamp),
        "period": current_app.config["OTP_PERIOD"],
    })


@otp_bp.route("/hotp", methods=["POST"])
def get_hotp():
    """
    HOTP CODE FOR A COUNTER

    Input:
      {"secret": "...", "counter": 1, "digits": 6}   # counter required, digits optional
    """
    data = _json_body()
    key = _secret_from(data)
    if key is None or "counter" not in data:
        return jsonify({"error": "Secret and counter are required"}), 400

    counter = data["counter"]
    digits = data.get("digits", current_app.config["OTP_DIGITS"])
    if not _is_int(counter) or not _is_int(digits):
        return jsonify({"error": "Counter and digits must be integers"}), 400

    hmac_fn = get_hmac(current_app.config["OTP_HASH"])
    code = otp_core.hotp(key, counter, digits, hmac_fn)
    logger.info("Generated HOTP for counter %d", counter)
    return jsonify({"code": code})


@otp_bp.route("/otpauth_uri", methods=["POST"])
def get_otpauth_uri():
    """
    PROVISIONING URI FOR AUTHENTICATOR APPS

    Input:
      {"secret": "...", "account": "alice@example.com", "issuer": "MyApp"}   # issuer optional

    Render the returned URI as a QR code on the client side.
    """
    data = _json_body()
    key = _secret_from(data)
    account = data.get("account")
    if key is None or not account:
        return jsonify({"error": "Secret and account are required"}), 400

    issuer = data.get("issuer") or current_app.config["OTP_ISSUER"]
    uri = format_otpauth_uri(
        key,
        account,
        issuer,
        algo=current_app.config["OTP_HASH"],
        digits=current_app.config["OTP_DIGITS"],
        period=current_app.config["OTP_PERIOD"],
    )
    logger.info("Built provisioning URI for account %s", account)
    return jsonify({"totp_uri": uri})
