"""Shared FastAPI dependencies: storage session, auth client and the current user."""
import logging
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, Header, Request
from skillmatch.config.constants import AUTH_HEADER_MALFORMED, AUTH_TOKEN_INVALID, BEARER_SCHEME
from skillmatch.core.errors import UnauthorizedError
from skillmatch.db.session import get_db
from skillmatch.infrastructure.clients.supabase_auth import SupabaseAuthClient

logger = logging.getLogger(__name__)

__all__ = ["AuthUser", "get_db", "get_auth_client", "parse_bearer_token", "require_user"]


@dataclass
class AuthUser:
    id: str
    email: Optional[str] = None


def get_auth_client(request: Request) -> SupabaseAuthClient:
    return request.app.state.auth_client


def parse_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of an ``Authorization: Bearer <token>`` header, or None."""
    parts = (authorization or "").split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        return None
    return parts[1]


async def require_user(
    authorization: Optional[str] = Header(None),
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> AuthUser:
    token = parse_bearer_token(authorization)
    if not token:
        raise UnauthorizedError(AUTH_HEADER_MALFORMED)

    user = await auth_client.get_user(token)
    if not user:
        logger.warning("Rejected bearer token")
        raise UnauthorizedError(AUTH_TOKEN_INVALID)

    return AuthUser(id=user["id"], email=user.get("email"))
