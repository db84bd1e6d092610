"""
FastAPI dependencies shared by endpoint modules.

Services are built once in ``create_app`` and stored on
``app.state``; these helpers hand them to request handlers.
"""

from fastapi import Request

from user_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
