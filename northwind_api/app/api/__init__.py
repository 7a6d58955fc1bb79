"""
HTTP API package.

``router`` in ``api/router.py`` collects the resource routers; handlers
live in ``api/endpoints`` and resolve their services through the
dependencies in ``api/deps.py``.
"""
