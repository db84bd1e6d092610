"""
Top-level package for the User API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
