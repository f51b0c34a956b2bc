from codegen.config import DIGITS, STEP_SECONDS, Settings

_settings = Settings()


class Config:
    OTP_ISSUER = _settings.issuer
    OTP_HASH = _settings.hash_name
    OTP_LOG_LEVEL = _settings.log_level
    OTP_DIGITS = DIGITS
    OTP_PERIOD = STEP_SECONDS
    HOST = _settings.host
    PORT = _settings.port


class TestingConfig(Config):
    TESTING = True
    OTP_ISSUER = "otp-test"
    OTP_HASH = "sha1"
