from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridpath.util import DIAGONAL_COST


class Settings(BaseSettings):
    log_level: str = "WARNING"

    diagonal_cost: float = Field(default=DIAGONAL_COST, ge=0)

    # World units per cell, used for world <-> grid conversion.
    cell_width: int = Field(default=16, gt=0)
    cell_height: int = Field(default=16, gt=0)

    wall_tags: str = "#"

    model_config = SettingsConfigDict(env_prefix="GRIDPATH_", env_file="gridpath.env")


settings = Settings()
