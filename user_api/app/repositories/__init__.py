"""
Repository layer.

Repositories own all database access.  They accept and return ORM
models and translate driver errors into ``core.errors`` types.
"""
