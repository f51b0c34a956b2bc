"""
config.py — constants and runtime settings shared by the core, CLI and backend.

The algorithm parameters are fixed (RFC 6238 defaults, the values every
authenticator app expects). The runtime settings only affect the outer layers
(CLI defaults, Flask server, logging) and are read from the environment after
loading an optional `.env` file.
"""

import logging
import os

from dotenv import load_dotenv

# --- Algorithm constants ---------------------------------------------------
STEP_SECONDS = 30           # TOTP step X (seconds)
DIGITS = 6                  # code length
COUNTER_BYTES = 8           # HOTP counter width, big-endian
DEFAULT_HASH = "sha1"       # RFC 6238 default, Google Authenticator compatible
MAX_COUNTER = 2 ** 64 - 1

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_int(env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


class Settings:
    """Runtime settings for the CLI and the HTTP backend."""

    def __init__(self, environ=None):
        if environ is None:
            load_dotenv()
            env = os.environ
        else:
            env = environ
        self.issuer = env.get("OTP_ISSUER", "otp-tool")
        self.log_level = env.get("OTP_LOG_LEVEL", "INFO").upper()
        self.host = env.get("OTP_HOST", "127.0.0.1")
        self.hash_name = env.get("OTP_HASH", DEFAULT_HASH).lower()
        self.port = _env_int(env, "OTP_PORT", 5000)

    def __repr__(self) -> str:
        return (
            f"Settings(issuer={self.issuer!r}, log_level={self.log_level!r}, "
            f"host={self.host!r}, port={self.port}, hash_name={self.hash_name!r})"
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
