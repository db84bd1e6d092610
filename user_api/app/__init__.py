"""
Application package.

``core`` holds configuration, logging and database wiring; ``models``
the ORM mapping; ``repositories`` and ``services`` the data access
and service layers; ``api`` the versioned HTTP routes.
"""

from .main import app, create_app  # noqa: F401
