from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

BATTLE_DATE_FORMAT = "%d/%m/%Y"


class BadgeAward(BaseModel):
    gym: str
    username: str
    badge: str


class BattleCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    battle_date: date = Field(..., alias="date", description="dd/mm/yyyy")
    winner: str = Field(..., min_length=1, max_length=30)

    @field_validator("battle_date", mode="before")
    @classmethod
    def parse_battle_date(cls, v):
        if isinstance(v, str):
            try:
                return datetime.strptime(v.strip(), BATTLE_DATE_FORMAT).date()
            except ValueError:
                raise ValueError("date must be formatted dd/mm/yyyy")
        return v


class GymChallenge(BaseModel):
    gym: str
    username: str
    battle: int = Field(..., gt=0)
