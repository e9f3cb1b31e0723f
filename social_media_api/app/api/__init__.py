"""
API package.

``router`` aggregates the domain routers defined in ``endpoints`` and
``deps`` provides the service dependencies injected into each handler.
"""
