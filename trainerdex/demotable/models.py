"""Pydantic request schemas for the demo table."""

from pydantic import BaseModel, ConfigDict, Field


class DemoInsert(BaseModel):
    id: int
    name: str = Field(..., max_length=20)


class DemoRename(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_name: str = Field(..., alias="oldName")
    new_name: str = Field(..., alias="newName", max_length=20)
