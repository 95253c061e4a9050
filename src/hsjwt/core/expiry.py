from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from hsjwt.core.exceptions import ExpiredError
from hsjwt.models import Claims

logger = logging.getLogger(__name__)


def epoch_seconds(now: int | datetime | None = None) -> int:
    """Normalize a reference time to whole seconds since the epoch.

    ``None`` means the current wall clock. Naive datetimes are read as UTC.
    """
    if now is None:
        return int(time.time())
    if isinstance(now, datetime):
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return int(now.timestamp())
    return int(now)


def is_live(claims: Claims, now: int | datetime | None = None) -> bool:
    if claims.exp is None:
        return False
    return epoch_seconds(now) <= claims.exp


def ensure_live(claims: Claims, now: int | datetime | None = None) -> Claims:
    if not is_live(claims, now):
        logger.debug("Claims expired at exp=%s", claims.exp)
        raise ExpiredError("Token has expired.")
    return claims
