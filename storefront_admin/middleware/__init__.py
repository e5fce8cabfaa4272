"""HTTP middleware. Applied in storefront_admin.main; last added = outermost."""

from storefront_admin.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
