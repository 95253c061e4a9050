from __future__ import annotations

import hashlib
import hmac
from collections.abc import Sequence

from hsjwt.core.segments import HEADER, SEGMENT_COUNT, encode_segment, message


def _secret_bytes(secret: bytes | str) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    return bytes(secret)


def sign(payload_segment: str, secret: bytes | str) -> str:
    """HMAC-SHA256 over ``HEADER.payload_segment``, base64url encoded."""
    digest = hmac.new(_secret_bytes(secret), message(HEADER, payload_segment), hashlib.sha256).digest()
    return encode_segment(digest)


def verify(header_segment: str, payload_segment: str, signature_segment: str, secret: bytes | str) -> bool:
    if not (header_segment.isascii() and payload_segment.isascii() and signature_segment.isascii()):
        return False
    # Signatures only ever cover the fixed header, so any other header fails.
    header_ok = hmac.compare_digest(header_segment.encode("ascii"), HEADER.encode("ascii"))
    expected = sign(payload_segment, secret).encode("ascii")
    signature_ok = hmac.compare_digest(expected, signature_segment.encode("ascii"))
    return header_ok and signature_ok


def verify_parts(parts: Sequence[str], secret: bytes | str) -> bool:
    if len(parts) != SEGMENT_COUNT:
        return False
    header_segment, payload_segment, signature_segment = parts
    return verify(header_segment, payload_segment, signature_segment, secret)
