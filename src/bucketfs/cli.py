"""Command-line interface for bucketfs.

This module exposes bucket operations from a shell.

Commands:
    - buckets: Show configured bindings
    - ls: List the files and folders directly under a prefix
    - folders: List every folder in a bucket
    - tree: Show the folder tree of a bucket
    - rm: Delete files and folders (recursively)
    - urls: Print public URLs for files and folders
    - put: Upload a local file

Bindings come from a JSON configuration file (--config or
BUCKETFS_BINDINGS_FILE) and/or an ad-hoc binding described by --bucket and
the S3 options.
"""

import asyncio
import mimetypes
from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    AccessKeyOption,
    BindingArgument,
    BucketOption,
    ChunkSizeOption,
    ConfigOption,
    ContentTypeOption,
    CursorOption,
    EndpointUrlOption,
    ItemsArgument,
    LimitOption,
    PrefixArgument,
    ProfileOption,
    PublicDomainOption,
    RegionOption,
    SecretKeyOption,
    SessionTokenOption,
    YesOption,
)
from .core.config import settings
from .core.exceptions import DeletePartial
from .objectstorage import ListingCursor, StoreGateway
from .path import render_tree
from .schemas import GatewayConfig, S3BucketBinding
from .unified import (
    browse,
    delete_items,
    export_selection_urls,
    list_bindings,
    list_folders,
    project_tree,
    upload_file,
)

app = typer.Typer(
    name="bucketfs",
    help="Browse and manage S3-compatible buckets as folders.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"bucketfs {__version__}")
        raise typer.Exit()


def _create_gateway(
    config_path: Optional[str] = None,
    bucket: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
    region_name: str = "auto",
    aws_profile: Optional[str] = None,
) -> StoreGateway:
    """Create the gateway from the configuration file and command-line options."""
    path = config_path or settings.bindings_file
    config = GatewayConfig.from_file(path) if path else GatewayConfig()

    if bucket:
        config.bindings[bucket] = S3BucketBinding(
            bucket_name=bucket,
            endpoint_url=endpoint_url,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            region_name=region_name,
            aws_profile=aws_profile,
        )

    return StoreGateway.from_config(config)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    bucket: BucketOption = None,
    endpoint_url: EndpointUrlOption = None,
    access_key_id: AccessKeyOption = None,
    secret_access_key: SecretKeyOption = None,
    session_token: SessionTokenOption = None,
    region_name: RegionOption = "auto",
    aws_profile: ProfileOption = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    bucketfs: a foldered view of flat object storage.
    """
    ctx.obj = {
        "config_path": config_path,
        "bucket": bucket,
        "endpoint_url": endpoint_url,
        "access_key_id": access_key_id,
        "secret_access_key": secret_access_key,
        "session_token": session_token,
        "region_name": region_name,
        "aws_profile": aws_profile,
    }


def _gateway(ctx: typer.Context) -> StoreGateway:
    return _create_gateway(**ctx.obj)


@app.command("buckets")
def buckets_cmd(ctx: typer.Context) -> None:
    """
    Show configured bindings and whether they are usable.
    """
    try:
        report = list_bindings(_gateway(ctx))

        typer.echo(f"bucketfs {report.version}")
        if report.buckets:
            typer.echo(f"Found {len(report.buckets)} bucket(s):")
            for name in report.buckets:
                typer.echo(f"  {name}")
        else:
            typer.echo("No buckets configured.")
        for name in report.debug_keys:
            typer.echo(f"  (skipped) {name}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("ls")
def ls_cmd(
    ctx: typer.Context,
    binding: BindingArgument,
    prefix: PrefixArgument = "",
    cursor: CursorOption = None,
    limit: LimitOption = None,
) -> None:
    """
    List the files and folders directly under a prefix.

    Examples:
        bucketfs --config buckets.json ls MEDIA photos/
        bucketfs --config buckets.json ls MEDIA photos/ --cursor <cursor>
    """
    try:
        listing_cursor = ListingCursor.decode(cursor) if cursor else None

        listing = asyncio.run(
            browse(_gateway(ctx), binding, prefix, cursor=listing_cursor, limit=limit)
        )

        if not listing.folders and not listing.objects:
            typer.echo("Empty folder.")
        for folder in listing.folders:
            typer.echo(f"  {folder}")
        for entry in listing.objects:
            typer.echo(f"  {entry.key}  {entry.size:,} bytes")
        if listing.cursor is not None:
            typer.echo(f"Next cursor: {listing.cursor.encode()}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("folders")
def folders_cmd(ctx: typer.Context, binding: BindingArgument) -> None:
    """
    List every folder in a bucket.
    """
    try:
        paths = asyncio.run(list_folders(_gateway(ctx), binding))

        if paths:
            typer.echo(f"Found {len(paths)} folder(s):")
            for path in paths:
                typer.echo(f"  {path}")
        else:
            typer.echo("No folders found.")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("tree")
def tree_cmd(ctx: typer.Context, binding: BindingArgument) -> None:
    """
    Show the folder tree of a bucket.
    """
    try:
        tree = asyncio.run(project_tree(_gateway(ctx), binding))

        if not tree:
            typer.echo("No folders found.")
        for line in render_tree(tree):
            typer.echo(line)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("rm")
def rm_cmd(
    ctx: typer.Context,
    binding: BindingArgument,
    items: ItemsArgument,
    chunk_size: ChunkSizeOption = None,
    yes: YesOption = False,
) -> None:
    """
    Delete files and folders. Folders (ending in '/') are deleted recursively.

    Examples:
        bucketfs --config buckets.json rm MEDIA photos/trip/ docs/readme.txt
    """
    if not yes:
        typer.confirm(f"Delete {len(items)} item(s) from {binding}?", abort=True)

    try:
        result = asyncio.run(
            delete_items(_gateway(ctx), binding, items, chunk_size=chunk_size)
        )
        typer.echo(
            f"Deleted {result.deleted_count:,} object(s) "
            f"in {result.chunk_count} request(s)."
        )

    except DeletePartial as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Re-run the same command to delete the remaining objects.", err=True)
        raise typer.Exit(1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("urls")
def urls_cmd(
    ctx: typer.Context,
    binding: BindingArgument,
    items: ItemsArgument,
    public_domain: PublicDomainOption = None,
) -> None:
    """
    Print public URLs for files and folders, one per line.

    Examples:
        bucketfs --config buckets.json urls MEDIA photos/trip/
        bucketfs --bucket media urls media photos/ --public-domain cdn.example.com
    """
    try:
        urls = asyncio.run(
            export_selection_urls(
                _gateway(ctx), binding, items, public_domain=public_domain
            )
        )

        if not urls:
            typer.echo("No files found (selected folders may be empty).", err=True)
        for url in urls:
            typer.echo(url)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("put")
def put_cmd(
    ctx: typer.Context,
    binding: BindingArgument,
    key: Annotated[str, typer.Argument(help="Object key to write")],
    file: Annotated[typer.FileBinaryRead, typer.Argument(help="Local file to upload")],
    content_type: ContentTypeOption = None,
) -> None:
    """
    Upload a local file to a key.
    """
    try:
        content_type = content_type or mimetypes.guess_type(file.name)[0]
        uploaded = asyncio.run(
            upload_file(_gateway(ctx), binding, key, file, content_type=content_type)
        )
        typer.echo(f"Uploaded {uploaded}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
