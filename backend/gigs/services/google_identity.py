"""Google ID token verification through the tokeninfo endpoint."""

import logging
from typing import Any, Dict

import httpx

from ..core.config import settings
from ..utils.errors import AuthError, ServerError

logger = logging.getLogger(__name__)


async def verify_google_id_token(credential: str, audience: str) -> Dict[str, Any]:
    """Return the verified token claims.

    Raises ``AuthError`` when Google rejects the token or it was issued for
    another client, and ``ServerError`` when Google cannot be reached.
    """
    try:
        async with httpx.AsyncClient(timeout=settings.GOOGLE_VERIFY_TIMEOUT) as client:
            resp = await client.get(
                settings.GOOGLE_TOKENINFO_URL,
                params={"id_token": credential},
            )
    except httpx.HTTPError as exc:
        logger.error("Google verification failed: %s", exc)
        raise ServerError("Failed to verify Google token.") from exc

    if resp.status_code != 200:
        logger.warning("Google rejected ID token: status=%s", resp.status_code)
        raise AuthError("Invalid Google token.", details=resp.text)

    try:
        payload = resp.json()
    except ValueError as exc:
        logger.error("Invalid tokeninfo response: %s", exc)
        raise ServerError("Failed to verify Google token.") from exc

    if payload.get("aud") != audience:
        logger.warning("Google token audience mismatch")
        raise AuthError("Google token audience mismatch.")
    return payload
