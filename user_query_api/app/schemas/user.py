"""
Pydantic model for user records.

Users are created once from seed data when the application starts and
never change afterwards, so the model is frozen: code receiving a
``User`` from the store cannot modify the stored record.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """A single queryable user record."""

    id: str = Field(..., example="1", description="Opaque identifier, unique within the store")
    name: str = Field(..., example="Alice")
    email: Optional[str] = Field(None, example="alice@example.com")

    model_config = {
        "frozen": True,
    }
