from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

DEFAULT_GROUP = "Crustaceans"


def utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


class Crustacean(SQLModel, table=True):
    """Crustacean model for storing species records."""

    __tablename__ = "crustaceans"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100)
    group: str = Field(
        default=DEFAULT_GROUP,
        max_length=50,
        index=True,
        sa_column_kwargs={"name": "group_name"},
    )
    sub_group: str = Field(max_length=50, index=True)
    description: str = Field(max_length=500)
    habitat: str = Field(max_length=200)
    average_size: float
    scientific_name: str = Field(max_length=100)

    created_at: datetime = Field(
        default_factory=utc_now, index=True, sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    class Config:
        json_schema_extra = {
            "example": {
                "name": "American Lobster",
                "group": "Crustaceans",
                "sub_group": "Lobster",
                "description": "Large marine crustacean with large claws",
                "habitat": "North Atlantic Ocean",
                "average_size": 25,
                "scientific_name": "Homarus americanus",
            }
        }
