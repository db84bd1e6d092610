"""
Endpoint modules for API v1.

Each module defines an ``APIRouter`` that is aggregated in
``api/v1/router.py``.
"""
