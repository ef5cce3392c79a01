# utils/security.py

"""
API key check for admin endpoints.
"""

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


def require_admin_api_key(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> None:
    """
    Require "Authorization: Bearer <admin_api_key>" when a key is configured.

    Raises:
        HTTPException: 401 when no key is sent, 403 when the key is wrong
    """
    if not settings.admin_api_key:
        return

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API key required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # compare_digest rejects non-ASCII str
    if not secrets.compare_digest(
        credentials.credentials.encode("utf-8"), settings.admin_api_key.encode("utf-8")
    ):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid API key")
