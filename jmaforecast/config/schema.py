"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, Field


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://www.jma.go.jp"
    forecast_path: str = "/bosai/forecast/data/forecast/{code}.json"
    user_agent: str = "jmaforecast/0.1.0"
    # None means the request blocks until the response is complete
    timeout_seconds: Annotated[float, Field(gt=0.0)] | None = None


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_region_code: str = Field(default="270000", pattern=r"^[0-9]{6}$")
    date_format: str = "%Y/%m/%d"
    output_format: OutputFormat = OutputFormat.TEXT


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = Field(
        default="WARNING", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    forecast: ForecastConfig = ForecastConfig()
    logging: LoggingConfig = LoggingConfig()
