"""コマンドラインインターフェース"""
import sys

import click

from . import Upload3r, __version__
from .models.config import (
    CANNED_ACLS,
    Config,
    DEFAULT_CONCURRENCY,
    DEFAULT_ENDPOINT,
    DEFAULT_PERMISSIONS,
    DEFAULT_REGION,
)

# 実行が中断された場合の終了コード
EXIT_FATAL = 1


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="upload3r")
@click.option("--uri", default=DEFAULT_ENDPOINT, show_default=True, help="S3 endpoint.")
@click.option("--region", default=DEFAULT_REGION, show_default=True, help="S3 region.")
@click.option("--key-id", default="", envvar="AWS_ACCESS_KEY_ID", help="Access key id.")
@click.option(
    "--secret", default="", envvar="AWS_SECRET_ACCESS_KEY", help="Secret access key."
)
@click.option(
    "--permissions",
    default=DEFAULT_PERMISSIONS,
    show_default=True,
    help=f"Canned ACL for uploaded objects ({', '.join(CANNED_ACLS)}).",
)
@click.option("--source", default="", help="File or directory to upload.")
@click.option("--bucket", default="", help="Destination bucket.")
@click.option("--bucket-prefix", default="", help="Prefix prepended to every object key.")
@click.option(
    "--thread-num",
    type=int,
    default=DEFAULT_CONCURRENCY,
    show_default=True,
    help="Maximum number of simultaneous uploads.",
)
@click.option("--dry-run", is_flag=True, help="Log what would be uploaded without uploading.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also log to this file.")
def main(uri, region, key_id, secret, permissions, source, bucket, bucket_prefix,
         thread_num, dry_run, log_level, log_file):
    """Upload a file or a directory tree to S3-compatible storage."""
    try:
        config = Config.from_options(
            source=source,
            bucket=bucket,
            uri=uri,
            region=region,
            key_id=key_id,
            secret=secret,
            permissions=permissions,
            bucket_prefix=bucket_prefix,
            thread_num=thread_num,
            dry_run=dry_run,
            log_level=log_level,
            log_file=log_file,
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    result = Upload3r(config).run()
    if result.aborted:
        sys.exit(EXIT_FATAL)


if __name__ == "__main__":
    main()
