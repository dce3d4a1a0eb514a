"""Optional shared-key guard for the /engine routes.

The engine holds no user data, so the key only identifies trusted
callers (the app backend, the coach prompt builders). With no key
configured every request is let through as an anonymous caller.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Literal

from fastapi import Header, HTTPException

from app.config import settings

_logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True, slots=True)
class EngineCaller:
    """Who passed the key check, and how the key was presented."""

    credential: Literal["none", "api_key", "bearer"]

    @property
    def authenticated(self) -> bool:
        return self.credential != "none"


ANONYMOUS = EngineCaller(credential="none")


def _presented_key(x_api_key: str | None, authorization: str | None) -> tuple[str | None, str]:
    if x_api_key is not None:
        return x_api_key, "api_key"
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip(), "bearer"
    return None, "none"


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> EngineCaller:
    """Resolve the caller from X-API-Key or Authorization: Bearer.

    Raises 401 when ENGINE_API_KEY is set and the presented key is
    missing or wrong.
    """
    expected = settings.engine_api_key
    if expected is None:
        return ANONYMOUS

    key, credential = _presented_key(x_api_key, authorization)
    if key is None or not secrets.compare_digest(key.encode(), expected.encode()):
        _logger.warning("Rejected engine request (credential=%s)", credential)
        raise HTTPException(status_code=401, detail="Invalid or missing API key")

    _logger.debug("Engine request accepted (credential=%s)", credential)
    return EngineCaller(credential=credential)
