"""
Shared-secret bearer authentication.

Every project and report endpoint requires an ``Authorization`` header
of the form ``Bearer <token>`` whose token equals
``settings.api_token``.  Requests without the header, with another
scheme, or with any other token are rejected with HTTP 401.
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)

# auto_error is disabled so that a missing header yields 401 from
# ``require_api_token`` instead of FastAPI's default 403.
security = HTTPBearer(auto_error=False, description="Static API token")


def token_matches(token: Optional[str], expected: str) -> bool:
    """Return ``True`` only if ``token`` is present and equal to ``expected``."""
    if not token or not expected:
        return False
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))


def require_api_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Dependency rejecting requests that do not carry the shared secret.

    Returns the accepted token on success so handlers may depend on it.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not token_matches(credentials.credentials, settings.api_token):
        logger.warning("Rejected request with invalid API token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials
