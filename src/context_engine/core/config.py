from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CONTEXT_ENGINE_", env_file=".env", extra="ignore"
    )

    config_path: Optional[str] = None
    input_template: Optional[str] = None
    # Unset leaves logging to the host application.
    log_level: Optional[str] = None
    debug: bool = False
