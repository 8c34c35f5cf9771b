"""Display name schemas."""

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    display_name: str = Field("", max_length=100, description="Name attached to saved sessions")


class ProfileResponse(BaseModel):
    display_name: str
