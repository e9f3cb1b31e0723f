"""
Pydantic schema definitions for API payloads.

Request models keep every field optional so that handlers, not the
framework, decide which payloads are rejected.  Response models mirror
the database rows one to one.
"""
