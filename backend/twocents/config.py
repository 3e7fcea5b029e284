from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SQLSERVER_CONN_STRING: str = ""
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # Share of the CDI the fixed-income instrument pays (100 = full index).
    FIXED_INCOME_PARTICIPATION_PERCENT: float = 100.0
    # "linear" or "reject"; see compute_savings_monthly.
    SAVINGS_ZERO_RATE_POLICY: str = "linear"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
