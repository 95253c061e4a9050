class TokenError(ValueError):
    """Base class for every token rejection raised by this package."""


class ParseError(TokenError):
    """Raised when a token is not three dot-separated base64url segments."""


class HeaderError(TokenError):
    """Raised when the header segment is not the single supported header."""


class SignatureError(TokenError):
    """Raised when the signature segment does not match the recomputed one."""


class PayloadError(TokenError):
    """Raised when the payload segment does not hold a JSON claims object."""


class SerializationError(TokenError):
    """Raised when a claims value cannot be serialized for signing."""


class ExpiredError(TokenError):
    """Raised by ``ensure_live`` for claims whose expiration has passed."""
