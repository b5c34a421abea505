from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = 8765
    log_level: str = "INFO"
    reload: bool = False

    # Form
    default_role: Literal["Developer", "Manager", "Designer"] = "Developer"

    model_config = {"env_prefix": "JOBFORM_"}


settings = Settings()
