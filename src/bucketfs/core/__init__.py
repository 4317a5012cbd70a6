"""Core utilities and shared components for bucketfs."""

from .config import settings
from .exceptions import BucketFSError, InvalidInput, ValidationError
from .observability import get_logger

__all__ = ["settings", "BucketFSError", "InvalidInput", "ValidationError", "get_logger"]
