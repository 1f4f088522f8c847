"""
Configuration settings for the Payments API.

Uses Pydantic Settings to load environment variables for backend selection,
the DynamoDB table binding, the local JSON document and logging. The hosted
marker (`AWS_LAMBDA_FUNCTION_NAME`) is the single signal that switches the
data source from the local document to the remote table.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "payments-test.json"


class Settings(BaseSettings):
    # Hosted execution marker
    aws_lambda_function_name: Optional[str] = Field(None, alias="AWS_LAMBDA_FUNCTION_NAME")

    # Remote table
    payments_table_name: str = Field("PaymentsTable", alias="PAYMENTS_TABLE_NAME")
    aws_region: str = Field("us-east-1", alias="AWS_REGION")
    dynamodb_endpoint_url: Optional[str] = Field(None, alias="DYNAMODB_ENDPOINT_URL")

    # Local document
    local_data_path: Path = Field(DEFAULT_DATA_PATH, alias="PAYMENTS_DATA_PATH")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_hosted(self) -> bool:
        """True when running inside the managed (Lambda) environment."""
        return bool(self.aws_lambda_function_name)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_DATA_PATH", "Settings", "get_settings"]
