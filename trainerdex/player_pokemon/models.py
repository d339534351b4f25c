from pydantic import BaseModel, Field


class PlayerPokemonKey(BaseModel):
    name: str
    nickname: str = Field(..., max_length=30)
    tr_username: str


class CatchRequest(PlayerPokemonKey):
    pp_level: int = Field(1, ge=1, le=100)


class LevelUpdate(PlayerPokemonKey):
    pp_level: int = Field(..., ge=1, le=100)


class LearnedMoveRequest(PlayerPokemonKey):
    move: str
