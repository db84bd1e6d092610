"""
Pydantic models for user data.

``UserCreate`` describes the request body of ``POST /users/`` and
``UserRead`` a single element of the ``GET /users/`` response.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_USER_ID = 2**63 - 1


class UserBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Alice"])


class UserCreate(UserBase):
    """Schema for saving a user.

    ``id`` is normally omitted so that the database assigns one.  When
    it is present the stored row with that identifier is overwritten;
    it must lie in ``1..MAX_USER_ID``.  Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    # Identifiers are stored as signed 64-bit integers.
    id: Optional[int] = Field(None, ge=1, le=MAX_USER_ID)


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
