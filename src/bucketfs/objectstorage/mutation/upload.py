"""Write a single object."""

from typing import Optional

from bucketfs.core import get_logger
from bucketfs.core.events import EventSink, LogLevel, default_sink
from bucketfs.objectstorage.store import Body, Writer
from bucketfs.path.keys import validate_key

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def upload_object(
    store: Writer,
    key: str,
    body: Body,
    content_type: Optional[str] = None,
    sink: Optional[EventSink] = None,
) -> str:
    """Store ``body`` under ``key`` and return the key.

    Raises:
        InvalidInput: If the key is malformed
        WriteRejected: If the store refuses the object
        StoreUnavailable: If the store cannot be reached
    """
    validate_key(key)
    content_type = content_type or DEFAULT_CONTENT_TYPE
    sink = default_sink(sink)

    sink.emit(LogLevel.NETWORK, "Uploading object", key=key, content_type=content_type)
    try:
        await store.put(key, body, content_type)
    except Exception as e:
        sink.emit(LogLevel.ERROR, "Upload failed", key=key, error=str(e))
        raise

    logger.info("Object uploaded", key=key, content_type=content_type)
    return key
