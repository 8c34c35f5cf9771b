"""
Profile database model.

A single row holding the display name attached to saved sessions.
"""

from sqlmodel import Field, SQLModel

PROFILE_ROW_ID = 1


class Profile(SQLModel, table=True):
    __tablename__ = "profile"

    id: int = Field(default=PROFILE_ROW_ID, primary_key=True)
    display_name: str = Field(default="", max_length=100)
