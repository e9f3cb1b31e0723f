"""
Application package initializer.

The project is organised into layers: ``core`` (configuration, logging
and the SQLite connection helpers), ``dao`` (one class per table issuing
parameterized SQL), ``services`` (thin pass‑through used by handlers),
``schemas`` (Pydantic request/response models) and ``api`` (FastAPI
routers).  A request flows handler → service → DAO and back.
"""

from .main import app  # noqa: F401
