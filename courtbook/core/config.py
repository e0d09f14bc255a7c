from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    app_name: str = Field(default="Courtbook", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    data_dir: str = Field(default="./data", alias="DATA_DIR")
    store_backend: str = Field(default="json", alias="STORE_BACKEND")  # 'json' | 'sql'
    database_url: str = Field(default="sqlite:///./courtbook.db", alias="DATABASE_URL")
    mock_mode: bool = Field(default=False, alias="MOCK_MODE")
    currency: str = Field(default="PHP", alias="CURRENCY")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


settings = Settings()
