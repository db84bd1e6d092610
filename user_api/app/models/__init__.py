"""
ORM models.

Importing this package registers every model on ``Base.metadata`` so
that ``init_db`` can create their tables.
"""

from .user import User

__all__ = ["User"]
