"""User Schemas — public shape of user records."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public user record."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(gt=0)
    name: str
