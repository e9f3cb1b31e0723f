"""
Service layer.

Services sit between the API handlers and the DAO classes.  They add no
rules of their own; handlers depend on a service so the persistence
implementation can be swapped (or overridden in tests) without touching
the routes.
"""
