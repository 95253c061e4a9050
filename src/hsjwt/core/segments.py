"""Base64url segment codec and the three-part token layout.

A token is ``header.payload.signature`` where every part is base64url
without padding. The header is never built at runtime: it is the fixed
encoding of ``{"alg":"HS256","typ":"JWT"}`` and is compared byte for byte.
"""

from __future__ import annotations

import base64
import binascii
import re

from hsjwt.core.exceptions import ParseError

HEADER = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
SEPARATOR = "."
SEGMENT_COUNT = 3

_SEGMENT_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode_segment(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_segment(segment: str | bytes) -> bytes:
    if isinstance(segment, (bytes, bytearray)):
        try:
            segment = bytes(segment).decode("ascii")
        except UnicodeDecodeError as exc:
            raise ParseError("Segment must be ASCII.") from exc
    if not _SEGMENT_ALPHABET.fullmatch(segment):
        raise ParseError("Segment contains characters outside the base64url alphabet.")
    if len(segment) % 4 == 1:
        raise ParseError("Segment has an impossible base64url length.")
    padding = "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(segment + padding)
    except (binascii.Error, ValueError) as exc:
        raise ParseError("Segment is not valid base64url.") from exc


def split_token(token: str | bytes) -> tuple[str, str, str]:
    if isinstance(token, (bytes, bytearray)):
        try:
            token = bytes(token).decode("ascii")
        except UnicodeDecodeError as exc:
            raise ParseError("Token must be ASCII.") from exc
    elif not token.isascii():
        raise ParseError("Token must be ASCII.")
    parts = token.split(SEPARATOR)
    if len(parts) != SEGMENT_COUNT:
        raise ParseError(f"Wrong number of segments: expected {SEGMENT_COUNT}, got {len(parts)}.")
    header_segment, payload_segment, signature_segment = parts
    return header_segment, payload_segment, signature_segment


def message(header_segment: str, payload_segment: str) -> bytes:
    """Return the exact bytes covered by the signature."""
    joined = f"{header_segment}{SEPARATOR}{payload_segment}"
    if not joined.isascii():
        raise ParseError("Segments must be ASCII.")
    return joined.encode("ascii")
