"""S3 client management and the boto3-backed store handle."""

from .s3_client import S3ClientConfig, S3ClientManager
from .s3_store import S3StoreHandle

__all__ = ["S3ClientConfig", "S3ClientManager", "S3StoreHandle"]
