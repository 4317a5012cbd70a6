"""Bucket binding configuration schemas for bucketfs."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from bucketfs.objectstorage.clients import S3ClientConfig


class S3BucketBinding(S3ClientConfig):
    """An S3-compatible bucket exposed under a binding name."""

    type: Literal["s3"] = "s3"
    bucket_name: str = Field(..., min_length=1, description="Bucket name in the store")
    public_domain: Optional[str] = Field(
        default=None, description="Public domain serving the bucket's objects"
    )

    def client_config(self) -> S3ClientConfig:
        """Connection settings without the binding-specific fields."""
        return S3ClientConfig(
            **self.model_dump(include=set(S3ClientConfig.model_fields))
        )


class GatewayConfig(BaseModel):
    """Binding names mapped to bucket configurations."""

    model_config = ConfigDict(extra="forbid")

    bindings: dict[str, S3BucketBinding] = Field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str) -> "GatewayConfig":
        """Load a gateway configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
