"""Runtime configuration for the S3 maven resource loader."""

from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_cache_dir() -> str:
    return str(Path(tempfile.gettempdir()) / "s3maven-cache")


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field("S3 Maven Resource Loader")
    version: str = Field("1.0.0")
    log_level: str = Field("INFO")

    # AWS credentials; when absent the default boto3 credential chain is used
    aws_access_key_id: Optional[str] = Field(None)
    aws_secret_access_key: Optional[str] = Field(None)
    aws_region: Optional[str] = Field(None)
    s3_endpoint_url: Optional[str] = Field(None)
    # unsigned requests for public buckets, no credentials are looked up
    s3_anonymous: bool = Field(False)

    # S3 maven repository, usually s3://<bucket>/snapshot or s3://<bucket>/release
    s3_maven_repository: str = Field("s3://empty/empty")
    s3_maven_metadata_workers: int = Field(1, ge=1)
    s3_maven_listing_timeout: Optional[float] = Field(None, gt=0)

    # Remote maven repository backing the maven:// scheme
    maven_remote_repository: str = Field("https://repo.maven.apache.org/maven2")
    maven_username: Optional[str] = Field(None)
    maven_password: Optional[str] = Field(None)

    resource_cache_dir: str = Field(default_factory=_default_cache_dir)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
