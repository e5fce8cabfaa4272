"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings are read from settings on
each request so importing a route module does not trigger Settings validation.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from storefront_admin.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _search_limit() -> str:
    return get_settings().search_rate_limit


limit_search = limiter.limit(_search_limit)
