from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DispenserSettings(BaseSettings):
    dispenser_host: str = Field("127.0.0.1", validation_alias="DISPENSER_HOST")
    dispenser_port: int = Field(10290, validation_alias="DISPENSER_PORT")
    dispenser_scheme: str = Field("http", validation_alias="DISPENSER_SCHEME")
    dispenser_timeout: float = Field(10.0, validation_alias="DISPENSER_TIMEOUT")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DispenserSettings:
    return DispenserSettings()
