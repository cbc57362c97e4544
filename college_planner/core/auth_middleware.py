"""Authentication dependencies for FastAPI."""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from college_planner.core.logging import get_logger

logger = get_logger(__name__)

# HTTP Bearer scheme for Authorization header
security = HTTPBearer(auto_error=False)


@dataclass
class AuthContext:
    """The signed-in student."""

    user_id: str
    email: str
    token: str


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[AuthContext]:
    """
    Resolve the Supabase access token in the Authorization header.

    Returns None if no valid token is present.
    """
    if not credentials:
        return None

    token = credentials.credentials

    try:
        from college_planner.db.supabase_client import get_supabase

        # Validates the JWT signature and expiration with Supabase Auth
        auth_response = get_supabase().auth.get_user(token)
    except Exception as e:
        logger.warning(f"Auth error: {e}")
        return None

    if not auth_response or not auth_response.user or not auth_response.user.email:
        return None

    user = auth_response.user
    return AuthContext(user_id=str(user.id), email=user.email.lower(), token=token)


async def require_auth(
    auth: Optional[AuthContext] = Depends(get_current_user),
) -> AuthContext:
    """Require authentication. Raises 401 if not authenticated."""
    if not auth:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth

