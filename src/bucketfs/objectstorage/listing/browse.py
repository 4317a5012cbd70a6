"""Single-level folder browsing."""

from typing import Optional

from bucketfs.core import get_logger
from bucketfs.core.events import EventSink
from bucketfs.core.exceptions import InvalidInput, ListingFailed
from bucketfs.objectstorage.models import FolderListing, ListingCursor
from bucketfs.objectstorage.store import Lister
from bucketfs.path.keys import DELIMITER, validate_prefix

from .pager import PaginatedLister

logger = get_logger(__name__)


async def browse_folder(
    store: Lister,
    prefix: str = "",
    cursor: Optional[ListingCursor] = None,
    limit: Optional[int] = None,
    sink: Optional[EventSink] = None,
) -> FolderListing:
    """List the files and sub-folders directly under ``prefix``.

    Objects and folders keep the order the store returned them in. The
    returned cursor, if any, only continues this same prefix.

    Args:
        store: Store to list
        prefix: Folder prefix, ``""`` for the bucket root
        cursor: Cursor from a previous call for the same prefix
        limit: Maximum objects per page

    Raises:
        InvalidInput: If the prefix is malformed or the cursor was issued for
            a different listing
        ListingFailed: If the store call fails or reports a truncated page
            without a cursor
    """
    validate_prefix(prefix, allow_root=True)
    if cursor is not None and not cursor.matches(prefix, DELIMITER):
        raise InvalidInput(
            f"Cursor was issued for prefix '{cursor.prefix}', not '{prefix}'"
        )

    lister = PaginatedLister(store, sink=sink)
    page = await lister.list_page(
        prefix,
        cursor=cursor.token if cursor else None,
        delimiter=DELIMITER,
        limit=limit,
    )

    next_cursor = None
    if page.truncated:
        if not page.cursor:
            raise ListingFailed(
                prefix, 1, "store reported a truncated page without a cursor"
            )
        next_cursor = ListingCursor(prefix=prefix, delimiter=DELIMITER, token=page.cursor)

    # Folder marker objects (the prefix itself) are not files of the folder.
    objects = tuple(entry for entry in page.objects if entry.key != prefix)

    logger.info(
        "Folder listed",
        prefix=prefix,
        object_count=len(objects),
        folder_count=len(page.delimited_prefixes),
        truncated=next_cursor is not None,
    )
    return FolderListing(
        prefix=prefix,
        objects=objects,
        folders=page.delimited_prefixes,
        cursor=next_cursor,
    )
