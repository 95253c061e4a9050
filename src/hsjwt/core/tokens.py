"""Encode and decode pipeline for fixed-header HS256 tokens.

``decode`` checks, in order: segment count, header, signature, then the
payload. Nothing from the payload is parsed until the signature matches.
Expiration is left to :func:`hsjwt.core.expiry.is_live`.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from pydantic import ValidationError

from hsjwt.core.config import Settings, get_settings
from hsjwt.core.exceptions import HeaderError, PayloadError, SerializationError, SignatureError
from hsjwt.core.expiry import epoch_seconds
from hsjwt.core.segments import HEADER, SEPARATOR, decode_segment, encode_segment, split_token
from hsjwt.core.signing import sign, verify
from hsjwt.models import Claims

logger = logging.getLogger(__name__)


def _coerce_claims(claims: Claims | Mapping[str, Any]) -> Claims:
    if isinstance(claims, Claims):
        return claims
    try:
        return Claims.model_validate(dict(claims))
    except (ValidationError, TypeError, ValueError) as exc:
        raise SerializationError("Claims value cannot be serialized.") from exc


def _serialize(claims: Claims) -> bytes:
    try:
        return json.dumps(
            claims.to_payload(),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError("Claims value cannot be serialized.") from exc


def _deserialize(raw: bytes) -> Claims:
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as exc:
        raise PayloadError("Payload is not valid JSON.") from exc
    if not isinstance(data, dict):
        raise PayloadError("Payload is not a JSON object.")
    try:
        return Claims.model_validate(data)
    except ValidationError as exc:
        raise PayloadError("Payload does not match the claims schema.") from exc


def encode(claims: Claims | Mapping[str, Any], secret: bytes | str) -> str:
    payload_segment = encode_segment(_serialize(_coerce_claims(claims)))
    signature_segment = sign(payload_segment, secret)
    return SEPARATOR.join((HEADER, payload_segment, signature_segment))


def decode(token: str | bytes, secret: bytes | str) -> Claims:
    header_segment, payload_segment, signature_segment = split_token(token)
    if header_segment != HEADER:
        logger.debug("Rejected token with unsupported header")
        raise HeaderError(f"Header must be {HEADER}.")
    if not verify(header_segment, payload_segment, signature_segment, secret):
        logger.debug("Rejected token with invalid signature")
        raise SignatureError("Signature verification failed.")
    return _deserialize(decode_segment(payload_segment))


def peek(token: str | bytes) -> Claims:
    """Read the claims of a token WITHOUT checking its signature.

    Only for diagnostics; never use the result for an authorization decision.
    """
    header_segment, payload_segment, _ = split_token(token)
    if header_segment != HEADER:
        raise HeaderError(f"Header must be {HEADER}.")
    return _deserialize(decode_segment(payload_segment))


def stamp(
    claims: Claims,
    duration: timedelta | int,
    now: int | datetime | None = None,
) -> Claims:
    issued_at = epoch_seconds(now)
    if isinstance(duration, timedelta):
        term = int(duration.total_seconds())
    else:
        term = int(duration)
    return claims.model_copy(update={"iat": issued_at, "exp": issued_at + term})


def issue(
    claims: Claims | Mapping[str, Any],
    secret: bytes | str,
    settings: Settings | None = None,
    now: int | datetime | None = None,
) -> str:
    settings = settings or get_settings()
    claims = _coerce_claims(claims)
    defaults: dict[str, Any] = {}
    if claims.iss is None and settings.issuer:
        defaults["iss"] = settings.issuer
    if claims.aud is None and settings.audience:
        defaults["aud"] = settings.audience
    if defaults:
        claims = claims.model_copy(update=defaults)
    stamped = stamp(claims, settings.token_ttl_seconds, now=now)
    logger.debug("Issuing token sub=%s exp=%s", stamped.sub, stamped.exp)
    return encode(stamped, secret)
