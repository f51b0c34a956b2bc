"""
FLASK APP MAIN ENTRY POINT - OTP CODE SERVER
============================================

Sets up the Flask app, enables CORS and registers the code-generation routes.

MAIN FEATURES
- JSON API over the pure functions in codegen.otp_core
- CORS enabled for frontend integration
- OtpError surfaces as HTTP 400 with {"error": "..."}
"""
import logging

from flask import Flask, jsonify
from flask_cors import CORS

from codegen.config import configure_logging
from codegen.errors import OtpError

from .config import Config
from .routes import otp_bp

logger = logging.getLogger(__name__)


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app.config["OTP_LOG_LEVEL"])

    # Frontends on another origin call the API directly
    CORS(app)

    app.register_blueprint(otp_bp)

    @app.errorhandler(OtpError)
    def handle_otp_error(e):
        # message never contains secret material
        logger.warning("Rejected request: %s", e)
        return jsonify({"error": str(e)}), 400

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "service": "otp-code",
            "endpoints": {
                "POST /totp": "current TOTP code for a Base32 secret",
                "POST /hotp": "HOTP code for a Base32 secret and counter",
                "POST /otpauth_uri": "provisioning URI for authenticator apps",
            },
        })

    return app


app = create_app()


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])
