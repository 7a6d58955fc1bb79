"""
Service layer abstraction.

Services receive their repositories through the constructor and are
built once in ``create_app``.  API handlers only ever talk to services.
"""
