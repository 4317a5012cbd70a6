"""A virtual filesystem over S3-compatible object storage.

Object stores such as Cloudflare R2 or S3 are flat: keys map to bytes and
folders exist only as shared key prefixes. This package presents such a
bucket as a foldered file system and provides bulk operations over it.

Key Features:
    - Folder browsing with prefix-bound cursors
    - Exhaustive, deduplicated listing and recursive prefix expansion
    - Folder tree construction for navigation
    - Chunked bulk deletion with partial-failure reporting
    - Public URL export and streaming upload
    - CLI interface

Recommended Usage:
    Use the unified interface with a gateway built from configuration:

    >>> from bucketfs import GatewayConfig, StoreGateway, browse
    >>> gateway = StoreGateway.from_config(GatewayConfig.from_file("buckets.json"))
    >>> listing = await browse(gateway, "MEDIA", "photos/")

Advanced Usage:
    Core operations take a store handle directly:

    >>> from bucketfs.objectstorage import PaginatedLister, BulkDeleter
    >>> from bucketfs.path import build_project_tree
"""

__version__ = "0.1.0"

# Core operations on store handles
from .core.events import LogEntry, LogLevel, LoggingSink, MemorySink
from .objectstorage import (
    BindingReport,
    BulkDeleter,
    DeleteResult,
    FolderListing,
    ListingCursor,
    ObjectEntry,
    Page,
    PaginatedLister,
    PrefixResolver,
    S3StoreHandle,
    StoreGateway,
    StoreHandle,
)
from .path import ProjectTreeNode, build_project_tree

# Binding configuration
from .schemas import GatewayConfig, S3BucketBinding

# Unified interface (recommended)
from .unified import (
    browse,
    delete_items,
    export_selection_urls,
    list_bindings,
    list_folders,
    project_tree,
    upload_file,
)

__all__ = [
    # Configuration
    "GatewayConfig",
    "S3BucketBinding",
    # Unified interface
    "browse",
    "delete_items",
    "export_selection_urls",
    "list_bindings",
    "list_folders",
    "project_tree",
    "upload_file",
    # Core
    "BindingReport",
    "BulkDeleter",
    "DeleteResult",
    "FolderListing",
    "ListingCursor",
    "ObjectEntry",
    "Page",
    "PaginatedLister",
    "PrefixResolver",
    "ProjectTreeNode",
    "S3StoreHandle",
    "StoreGateway",
    "StoreHandle",
    "build_project_tree",
    # Events
    "LogEntry",
    "LogLevel",
    "LoggingSink",
    "MemorySink",
]
