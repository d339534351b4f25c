from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    username: str
    password: str


class TrainerCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., max_length=30)
    name: str = Field(..., max_length=50)
    password: str
    start_date: date = Field(default_factory=date.today, alias="startdate")
    zipcode: str = Field(..., max_length=10)
    timezone: Optional[str] = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Username cannot be empty")
        return v

    @field_validator("zipcode")
    @classmethod
    def normalize_zipcode(cls, v):
        return v.replace(" ", "").upper()


class NameUpdate(BaseModel):
    username: str
    name: str = Field(..., max_length=50)


class PasswordUpdate(BaseModel):
    username: str
    password: str


class ZipcodeUpdate(BaseModel):
    username: str
    zipcode: str = Field(..., max_length=10)
    timezone: Optional[str] = None

    @field_validator("zipcode")
    @classmethod
    def normalize_zipcode(cls, v):
        return v.replace(" ", "").upper()
