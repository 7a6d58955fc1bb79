"""
Application package initializer.

The application is split into layers: ``api`` (HTTP routes),
``services``, ``repositories`` and ``core`` (configuration, logging and
the in-memory data context).  Each layer only depends on the one below
it, and ``main.create_app`` wires them together.
"""

from .main import app  # noqa: F401
