"""
Session cookie signing.

The cookie carries nothing but the session ID, signed with the server
secret so a forged or edited cookie is rejected before any store lookup.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from jose import jwt, JWTError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def sign_session_id(sid: str, secret: str, expires_at: datetime) -> str:
    """
    Produce the cookie value for a session.

    Args:
        sid: Opaque session ID from the session store
        secret: Server-side signing secret
        expires_at: When the session expires

    Returns:
        Signed token to put in the cookie
    """
    claims = {
        "sid": sid,
        "iat": datetime.now(timezone.utc),
        "exp": expires_at,
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def read_session_id(token: Optional[str], secret: str) -> Optional[str]:
    """
    Extract the session ID from a cookie value.

    Returns:
        The session ID, or None if the cookie is missing, forged or expired
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.debug("Session cookie expired")
        return None
    except JWTError:
        logger.debug("Rejected invalid session cookie")
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) else None
