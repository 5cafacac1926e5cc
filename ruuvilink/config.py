from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

from ruuvilink.parsing.advertisement.manufacturer import RUUVI_COMPANY_ID


class DecoderSettings(BaseSettings):
    json_only: bool = Field(False, validation_alias="RUUVI_JSON_ONLY")

    log_level: str = Field("INFO", validation_alias="RUUVI_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="RUUVI_LOG_RING_SIZE")

    company_id: int = Field(RUUVI_COMPANY_ID, validation_alias="RUUVI_COMPANY_ID")
    copy_payloads: bool = Field(True, validation_alias="RUUVI_COPY_PAYLOADS")

    scan_adapter: Optional[str] = Field(None, validation_alias="RUUVI_SCAN_ADAPTER")
    # None scans until interrupted
    scan_duration: Optional[float] = Field(None, validation_alias="RUUVI_SCAN_DURATION")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("company_id", mode="before")
    @classmethod
    def _parse_company_id(cls, value: Any) -> Any:
        if isinstance(value, str):
            return int(value, 0)
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
