"""Configuration management for bucketfs."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Hard limit on keys per delete call imposed by S3-compatible stores.
MAX_DELETE_BATCH = 1000


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "bucketfs"
    otel_exporter_endpoint: str = "http://localhost:4317"

    delete_chunk_size: int = Field(MAX_DELETE_BATCH, gt=0)
    browse_page_limit: int = Field(100, gt=0)
    bindings_file: Optional[str] = None

    model_config = {
        "env_prefix": "BUCKETFS_",
        "case_sensitive": False,
    }

    @field_validator("delete_chunk_size")
    @classmethod
    def _cap_chunk_size(cls, value: int) -> int:
        return min(value, MAX_DELETE_BATCH)


settings = Settings()
