"""Error types raised by the code engine.

Everything derives from OtpError, which is itself a ValueError, so callers
that already catch ValueError around code generation keep working.
"""


class OtpError(ValueError):
    """Base class for code-generation failures."""


class InvalidDigestLength(OtpError):
    """The HMAC digest is too short for the offset its last byte selects."""

    def __init__(self, length: int, offset: int):
        self.length = length
        self.offset = offset
        super().__init__(
            f"HMAC digest of {length} bytes cannot be truncated at offset {offset} "
            f"(need at least {offset + 4} bytes)"
        )


class EmptySecret(OtpError):
    """A zero-length shared secret was supplied."""

    def __init__(self):
        super().__init__("Shared secret must not be empty")


class InvalidSecret(OtpError):
    """Base32 secret text could not be decoded."""


class InvalidCounter(OtpError):
    """Counter or epoch time outside the unsigned 64-bit range."""


class UnsupportedAlgorithm(OtpError):
    """Unknown HMAC hash name."""


class InvalidDigits(OtpError):
    """Code length below one digit."""
