"""Service settings for the bank account API, read from BANK_ACCOUNT_* variables or .env"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Names the service in logs and /health, and sets where the account routes mount"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_ACCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = "bank-account"
    log_level: str = "INFO"

    # Account routes live under this prefix, e.g. /v1/account
    api_prefix: str = "/v1"


settings = Settings()
