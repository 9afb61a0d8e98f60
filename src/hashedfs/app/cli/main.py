"""CLI main entry point."""

import shutil
import sys
from dataclasses import replace

import click

from ...core import HashedFS, HashedFSConfig, HashedFSError, NotFoundError
from ...factory import create_hashed_fs


@click.group()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    help="Directory to serve (default: $HFS_ROOT or current directory)",
)
@click.option("--s3", "s3_url", help="Serve objects under s3://bucket/prefix instead")
@click.option("--endpoint-url", help="S3 endpoint URL")
@click.option("--region", help="AWS region")
@click.option("--profile", help="AWS profile")
@click.option("--algorithm", help="Digest algorithm (default: sha256)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    root: str | None,
    s3_url: str | None,
    endpoint_url: str | None,
    region: str | None,
    profile: str | None,
    algorithm: str | None,
    debug: bool,
) -> None:
    """hashedfs - Content-hashed filenames over a read-only file tree."""
    overrides: dict[str, str] = {}
    if debug:
        overrides["log_level"] = "DEBUG"
    if s3_url:
        overrides.update(storage="s3", s3_url=s3_url)
    elif root:
        overrides.update(storage="local", root=root)
    if algorithm:
        overrides["algorithm"] = algorithm

    try:
        config = HashedFSConfig.from_env(
            endpoint_url=endpoint_url,
            region=region,
            profile=profile,
        )
        config = replace(config, **overrides)
        ctx.obj = create_hashed_fs(config)
    except HashedFSError as e:
        raise click.UsageError(str(e)) from e


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def digest(hfs: HashedFS, paths: tuple[str, ...]) -> None:
    """Print the digest token of each file."""
    failed = False
    for path in paths:
        token = hfs.digest(path)
        if not token:
            click.echo(f"Error: Cannot digest {path}", err=True)
            failed = True
            continue
        click.echo(f"{token}  {path}")
    if failed:
        sys.exit(1)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def name(hfs: HashedFS, paths: tuple[str, ...]) -> None:
    """Print the hashed name of each file."""
    failed = False
    for path in paths:
        hashed = hfs.hashed_name(path)
        if not hashed:
            click.echo(f"Error: Cannot digest {path}", err=True)
            failed = True
            continue
        click.echo(hashed)
    if failed:
        sys.exit(1)


@cli.command()
@click.argument("hashed_path")
@click.pass_obj
def cat(hfs: HashedFS, hashed_path: str) -> None:
    """Write the verified content of a hashed path to stdout."""
    try:
        f = hfs.open(hashed_path)
    except NotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    with f:
        shutil.copyfileobj(f, click.get_binary_stream("stdout"))


def main() -> None:
    """Main entry point."""
    cli()
