"""
Top-level package for the Northwind API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``northwind_api.app.main:app``.
"""

__all__ = []
