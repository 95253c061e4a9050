from hsjwt.core.config import Settings, get_settings
from hsjwt.core.exceptions import (
    ExpiredError,
    HeaderError,
    ParseError,
    PayloadError,
    SerializationError,
    SignatureError,
    TokenError,
)
from hsjwt.core.logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "TokenError",
    "ParseError",
    "HeaderError",
    "SignatureError",
    "PayloadError",
    "SerializationError",
    "ExpiredError",
    "configure_logging",
]
