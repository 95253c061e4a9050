from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Claims(BaseModel):
    """Registered claims carried in a token payload.

    Field order is the wire order. Unset fields are left out of the payload
    entirely rather than written as ``null`` or ``0``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    iss: str | None = None
    aud: str | None = None
    exp: int | None = None
    iat: int | None = None
    sub: str | None = None
    nbf: str | None = None
    jti: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
