from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='POLYDIST_')
    log_level: str = "INFO"
    query_class: str = "fibre"
    boundary_classes: List[str] = ["endo", "epi"]
    unit: str = "µm"
    distance_n_digits: int = 1
    default_unit_scale: float = 1.0
    point_radius: float = 8.0


settings = Settings()
