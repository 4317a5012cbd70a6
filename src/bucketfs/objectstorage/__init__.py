"""Virtual filesystem operations over S3-compatible object storage."""

from .clients import S3ClientConfig, S3ClientManager, S3StoreHandle
from .gateway import NotFound, Resolution, Resolved, StoreGateway
from .listing import (
    PaginatedLister,
    PrefixResolver,
    browse_folder,
    fetch_project_tree,
    list_folder_paths,
    resolve_prefixes,
)
from .models import (
    BindingReport,
    DeleteResult,
    FolderListing,
    KeySet,
    ListingCursor,
    ObjectEntry,
    Page,
)
from .mutation import BulkDeleter, delete_objects, upload_object
from .store import Deleter, Lister, StoreHandle, Writer
from .urls import build_public_url, export_urls

__all__ = [
    "BindingReport",
    "BulkDeleter",
    "DeleteResult",
    "Deleter",
    "FolderListing",
    "KeySet",
    "ListingCursor",
    "Lister",
    "NotFound",
    "ObjectEntry",
    "Page",
    "PaginatedLister",
    "PrefixResolver",
    "Resolution",
    "Resolved",
    "S3ClientConfig",
    "S3ClientManager",
    "S3StoreHandle",
    "StoreGateway",
    "StoreHandle",
    "Writer",
    "browse_folder",
    "build_public_url",
    "delete_objects",
    "export_urls",
    "fetch_project_tree",
    "list_folder_paths",
    "resolve_prefixes",
    "upload_object",
]
