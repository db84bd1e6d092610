"""
Service layer abstraction.

Services sit between the API handlers and the repositories so that
persistence concerns can change without touching the handlers.
"""
