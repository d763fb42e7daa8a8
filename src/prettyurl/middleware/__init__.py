"""Middleware — ASGI wrappers that apply a rule table to incoming requests.

Built-in middleware:
    RewriteMiddleware -- Rewrite pretty paths into entry-path query strings
"""

from prettyurl.middleware.rewrite import RewriteMiddleware

__all__ = ["RewriteMiddleware"]
