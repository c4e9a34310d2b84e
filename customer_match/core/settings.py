from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Customer Match Preprocessor", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    operation_type: str = Field(default="create", alias="OPERATION_TYPE")
    user_identifier_source: str = Field(default="UNSPECIFIED", alias="USER_IDENTIFIER_SOURCE")
    preprocessed_parameters_key: str = Field(
        default="preprocessed.parameters",
        alias="PREPROCESSED_PARAMETERS_KEY",
    )
    normalized_parameters_key: str = Field(
        default="normalized.parameters",
        alias="NORMALIZED_PARAMETERS_KEY",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
