"""Shared CLI parameter definitions.

Reusable ``Annotated`` option types keep names, types and help text
consistent across commands.

Parameter Categories:
    - Gateway parameters: where bindings come from
    - S3 parameters: an ad-hoc binding built from the command line
    - Operation parameters: for specific command behaviors
"""

from typing import Annotated, Optional

import typer

# Gateway parameters
ConfigOption = Annotated[
    Optional[str],
    typer.Option(
        "--config",
        "-c",
        help="JSON file mapping binding names to buckets "
        "(defaults to BUCKETFS_BINDINGS_FILE)",
    ),
]

# S3 parameters
BucketOption = Annotated[
    Optional[str],
    typer.Option(
        "--bucket", help="Bucket name; adds a binding named after the bucket"
    ),
]
EndpointUrlOption = Annotated[
    Optional[str], typer.Option("--endpoint-url", help="Custom S3 endpoint URL")
]
AccessKeyOption = Annotated[
    Optional[str], typer.Option("--access-key-id", help="Access key ID")
]
SecretKeyOption = Annotated[
    Optional[str], typer.Option("--secret-access-key", help="Secret access key")
]
SessionTokenOption = Annotated[
    Optional[str], typer.Option("--session-token", help="Session token")
]
RegionOption = Annotated[
    str, typer.Option("--region", help="Region name ('auto' for R2)")
]
ProfileOption = Annotated[
    Optional[str], typer.Option("--aws-profile", help="AWS CLI profile name")
]

# Operation parameters
BindingArgument = Annotated[str, typer.Argument(help="Binding name of the bucket")]
PrefixArgument = Annotated[
    str, typer.Argument(help="Folder prefix ending in '/', empty for the root")
]
ItemsArgument = Annotated[
    list[str],
    typer.Argument(help="Object keys, or folder prefixes ending in '/'"),
]
CursorOption = Annotated[
    Optional[str],
    typer.Option("--cursor", help="Cursor printed by the previous page"),
]
PublicDomainOption = Annotated[
    Optional[str],
    typer.Option(
        "--public-domain", help="Public domain serving the bucket (overrides the binding)"
    ),
]
LimitOption = Annotated[
    Optional[int], typer.Option("--limit", help="Maximum objects per page")
]
ChunkSizeOption = Annotated[
    Optional[int], typer.Option("--chunk-size", help="Keys per delete call (max 1000)")
]
YesOption = Annotated[
    bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")
]
ContentTypeOption = Annotated[
    Optional[str],
    typer.Option("--content-type", help="MIME type (guessed from the file name)"),
]
