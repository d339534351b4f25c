from pydantic import BaseModel, Field


class Purchase(BaseModel):
    name: str
    username: str
    quantity: int = Field(1, gt=0)
