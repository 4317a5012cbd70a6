"""Bucket operations addressed by binding name.

Each function resolves the binding through a ``StoreGateway`` and runs the
matching core operation on the resulting handle. Typed errors from the core
propagate unchanged so callers can tell retryable failures from bad input.
"""

from typing import Iterable, Optional

from bucketfs.core import get_logger
from bucketfs.core.events import EventSink
from bucketfs.core.exceptions import BucketFSError
from bucketfs.objectstorage import (
    BindingReport,
    BulkDeleter,
    DeleteResult,
    FolderListing,
    ListingCursor,
    StoreGateway,
    browse_folder,
    export_urls,
    fetch_project_tree,
    list_folder_paths,
    upload_object,
)
from bucketfs.objectstorage.store import Body
from bucketfs.path import ProjectTreeNode, partition_selection

logger = get_logger(__name__)


def list_bindings(gateway: StoreGateway) -> BindingReport:
    """Report which configured bindings are usable buckets."""
    report = gateway.report()
    logger.info(
        "Bindings listed", usable=len(report.buckets), skipped=len(report.debug_keys)
    )
    return report


async def browse(
    gateway: StoreGateway,
    binding: str,
    prefix: str = "",
    cursor: Optional[ListingCursor] = None,
    limit: Optional[int] = None,
    sink: Optional[EventSink] = None,
) -> FolderListing:
    """
    List the files and folders directly under a prefix.

    Args:
        gateway: Gateway holding the bindings
        binding: Binding name
        prefix: Folder prefix, "" for the bucket root
        cursor: Cursor returned by the previous page of the same prefix
        limit: Maximum objects per page

    Returns:
        FolderListing with objects, folders and the next cursor

    Raises:
        BindingNotFound: If the binding is unknown
        InvalidInput: If the prefix or cursor is invalid
        ListingFailed: If the store call fails
    """
    logger.info("Browsing folder", binding=binding, prefix=prefix)
    store = gateway.resolve(binding)
    return await browse_folder(store, prefix, cursor=cursor, limit=limit, sink=sink)


async def list_folders(
    gateway: StoreGateway, binding: str, sink: Optional[EventSink] = None
) -> list[str]:
    """Every folder prefix in the bucket, sorted."""
    store = gateway.resolve(binding)
    return await list_folder_paths(store, sink=sink)


async def project_tree(
    gateway: StoreGateway, binding: str, sink: Optional[EventSink] = None
) -> list[ProjectTreeNode]:
    """Folder tree of the bucket, rebuilt from a fresh listing."""
    logger.info("Refreshing project tree", binding=binding)
    store = gateway.resolve(binding)
    return await fetch_project_tree(store, sink=sink)


async def delete_items(
    gateway: StoreGateway,
    binding: str,
    items: Iterable[str],
    chunk_size: Optional[int] = None,
    sink: Optional[EventSink] = None,
) -> DeleteResult:
    """
    Delete a selection of files and folders.

    Items ending in "/" are folders and are deleted recursively; anything
    else is a single object key.

    Raises:
        BindingNotFound: If the binding is unknown
        InvalidInput: If an item is malformed
        ListingFailed: If expanding a folder fails (nothing was deleted)
        DeletePartial: If deletion stopped partway
    """
    keys, prefixes = partition_selection(items)
    logger.info(
        "Deleting selection",
        binding=binding,
        key_count=len(keys),
        prefix_count=len(prefixes),
    )

    store = gateway.resolve(binding)
    try:
        return await BulkDeleter(store, chunk_size=chunk_size, sink=sink).delete(
            keys, prefixes
        )
    except BucketFSError as e:
        logger.error("Failed to delete selection", binding=binding, error=str(e))
        raise


async def export_selection_urls(
    gateway: StoreGateway,
    binding: str,
    items: Iterable[str],
    public_domain: Optional[str] = None,
    sink: Optional[EventSink] = None,
) -> list[str]:
    """
    Public URLs for a selection of files and folders.

    Args:
        gateway: Gateway holding the bindings
        binding: Binding name
        items: Keys and folder prefixes
        public_domain: Overrides the domain configured for the binding

    Raises:
        BindingNotFound: If the binding is unknown
        InvalidInput: If no public domain is known or an item is malformed
        ListingFailed: If expanding a folder fails
    """
    keys, prefixes = partition_selection(items)
    store = gateway.resolve(binding)
    domain = public_domain or gateway.public_domain(binding)
    return await export_urls(store, domain, keys, prefixes, sink=sink)


async def upload_file(
    gateway: StoreGateway,
    binding: str,
    key: str,
    body: Body,
    content_type: Optional[str] = None,
    sink: Optional[EventSink] = None,
) -> str:
    """Upload one object and return its key."""
    store = gateway.resolve(binding)
    return await upload_object(store, key, body, content_type=content_type, sink=sink)
