"""
Client data model.
"""

from pydantic import BaseModel, ConfigDict, Field


class Client(BaseModel):
    """A registered bank client."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    full_name: str = Field(alias="fullName")
    phone: str
    username: str
    password: str = Field(exclude=True, repr=False)
