"""Request context management using contextvars.

Holds request-scoped values (request ID, authenticated admin) so that
logging and services can read them without threading them through every
call. Context is scoped to the current async task.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


def set_request_id(request_id: str | None) -> Token:
    """Set the request ID for this task; returns a token for reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def set_current_user(user_id: str | None) -> None:
    """Record the authenticated user for this request (set by the admin gate)."""
    _current_user_id.set(user_id)


def get_current_user_id() -> str | None:
    """Return the authenticated user ID, or None if not authenticated."""
    return _current_user_id.get()
