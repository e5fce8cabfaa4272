"""Admin gate dependency (composition root).

Tokens come from the hosted auth service; admin rights come from the
user_roles table, never from token claims.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront_admin.domain.enums import AppRole
from storefront_admin.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
)
from storefront_admin.infrastructure.persistence.repositories import UserRoleRepository
from storefront_admin.infrastructure.security.jwt import verify_token
from storefront_admin.shared.context import set_current_user
from storefront_admin.shared.utils.identifiers import is_uuid

from .repos import get_user_role_repo

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the user id (sub) from the bearer token.

    Raises 401 when the token is missing or invalid, or when sub is not a
    uuid (user ids are auth-service uuids).
    """
    if not credentials:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.info("Rejected bearer token: %s", e)
        raise AuthenticationException("Invalid or expired token") from e
    user_id = payload["sub"]
    if not isinstance(user_id, str) or not is_uuid(user_id):
        logger.info("Rejected bearer token: sub is not a user id")
        raise AuthenticationException("Invalid or expired token")
    return user_id


async def require_admin(
    user_id: Annotated[str, Depends(get_current_user_id)],
    role_repo: Annotated[UserRoleRepository, Depends(get_user_role_repo)],
) -> str:
    """Require an authenticated user holding the admin role; returns the user id."""
    if not await role_repo.has_role(user_id, AppRole.ADMIN.value):
        raise AuthorizationException(role=AppRole.ADMIN.value)
    set_current_user(user_id)
    return user_id
