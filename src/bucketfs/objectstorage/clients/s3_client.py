"""S3 client configuration and management.

This module provides S3 client configuration and management functionality
with support for multiple authentication methods and S3-compatible services.

The S3ClientManager handles the complexity of boto3 client creation with
different credential sources.

Authentication Methods Supported:
    1. Explicit credentials (access_key_id, secret_access_key)
    2. AWS CLI profiles (aws_profile)
    3. IAM roles / environment variables (no explicit credentials)
    4. Temporary credentials (session_token)

S3-Compatible Services:
    Cloudflare R2, MinIO and other S3-compatible providers are reached through
    endpoint_url. R2 expects the region "auto" and SigV4 signatures.
"""

from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from pydantic import BaseModel, ConfigDict, Field

from bucketfs.core import get_logger

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Authentication Priority:
        1. If aws_profile is provided, use profile-based authentication
        2. If explicit credentials are provided, use them
        3. Otherwise, fall back to default AWS credential chain

    Example:
        # Cloudflare R2
        config = S3ClientConfig(
            endpoint_url="https://<account>.r2.cloudflarestorage.com",
            access_key_id="...",
            secret_access_key="...",
        )

        # AWS profile
        config = S3ClientConfig(aws_profile="my-profile", region_name="eu-west-1")
    """

    model_config = ConfigDict(extra="forbid")

    access_key_id: Optional[str] = Field(None, description="Access key ID")
    secret_access_key: Optional[str] = Field(None, description="Secret access key")
    session_token: Optional[str] = Field(
        None, description="Session token for temporary credentials"
    )
    region_name: str = Field("auto", description="Region name ('auto' for R2)")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )
    max_attempts: int = Field(3, ge=1, description="Retry attempts per request")


class S3ClientManager:
    """Manages S3 client connections."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.debug("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
            "config": Config(
                signature_version="s3v4",
                retries={"max_attempts": self.config.max_attempts, "mode": "standard"},
            ),
        }

        # Add endpoint URL for S3-compatible services
        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        # Use profile if specified, otherwise use explicit credentials
        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            if self.config.access_key_id and self.config.secret_access_key:
                kwargs.update(
                    {
                        "aws_access_key_id": self.config.access_key_id,
                        "aws_secret_access_key": self.config.secret_access_key,
                    }
                )
                if self.config.session_token:
                    kwargs["aws_session_token"] = self.config.session_token
                logger.info("S3 client created with explicit credentials")
            else:
                logger.info("S3 client created with default credential chain")

            client = boto3.client("s3", **kwargs)  # type: ignore

        return client
