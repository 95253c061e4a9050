"""Fixed-algorithm HS256 tokens: encode, decode, and expiration checks."""

from hsjwt.core import (
    ExpiredError,
    HeaderError,
    ParseError,
    PayloadError,
    SerializationError,
    Settings,
    SignatureError,
    TokenError,
    configure_logging,
    get_settings,
)
from hsjwt.core.expiry import ensure_live, is_live
from hsjwt.core.segments import HEADER, SEPARATOR, decode_segment, encode_segment, message, split_token
from hsjwt.core.signing import sign, verify, verify_parts
from hsjwt.core.tokens import decode, encode, issue, peek, stamp
from hsjwt.models import Claims

__all__ = [
    "HEADER",
    "SEPARATOR",
    "Claims",
    "Settings",
    "get_settings",
    "configure_logging",
    "TokenError",
    "ParseError",
    "HeaderError",
    "SignatureError",
    "PayloadError",
    "SerializationError",
    "ExpiredError",
    "encode_segment",
    "decode_segment",
    "split_token",
    "message",
    "sign",
    "verify",
    "verify_parts",
    "encode",
    "decode",
    "peek",
    "stamp",
    "issue",
    "is_live",
    "ensure_live",
]
