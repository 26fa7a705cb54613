from pydantic import BaseModel, ConfigDict


class LevelRead(BaseModel):
    level: int
    tier: str
    rows: int
    cols: int
    hidden_rate: float
    obstacle_count: int

    model_config = ConfigDict(from_attributes=True)
