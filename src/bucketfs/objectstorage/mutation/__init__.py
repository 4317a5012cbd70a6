"""Operations that change bucket contents."""

from .bulk_delete import BulkDeleter, chunked, delete_objects
from .upload import DEFAULT_CONTENT_TYPE, upload_object

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "BulkDeleter",
    "chunked",
    "delete_objects",
    "upload_object",
]
