"""JWT verification for tokens issued by the hosted auth service.

This service never issues tokens; it only checks signature, expiry,
audience and the presence of a subject.
"""

from typing import Any

from jose import JWTError, jwt

from storefront_admin.core.config import get_settings


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub. Audience is checked when
    settings.jwt_audience is set.

    Raises:
        ValueError: If the token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    options = {"require_exp": True, "require_sub": True}
    if not settings.jwt_audience:
        options["verify_aud"] = False
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e}") from e
    if not payload.get("sub"):
        raise ValueError("Invalid token: missing sub")
    return payload
