from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from uvicorn.config import LOG_LEVELS


class AppConfig(BaseSettings):
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")
    service_error_status: int = Field(
        default=204, description="HTTP status returned when the add service fails"
    )
    random_seed: int | None = Field(default=None, description="Seed for bid prices")

    model_config = SettingsConfigDict(
        env_prefix="ADD_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    def normalize_log_level(cls, v: str) -> str:
        # only names uvicorn can configure
        level = str(v).lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level.upper()

    @field_validator("service_error_status")
    def check_service_error_status(cls, v: int) -> int:
        # 204 keeps compatibility with existing clients, 5xx reports a real failure
        if v != 204 and not 500 <= v <= 599:
            raise ValueError("service_error_status must be 204 or a 5xx status")
        return v


app_config = AppConfig()
