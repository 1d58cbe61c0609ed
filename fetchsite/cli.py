import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from fetchsite.archive import (
    SCHEME_DIRS,
    ArchiveReadError,
    FetchError,
    Page,
    fetch_page,
    read_archive,
)
from fetchsite.archive.fetch_page import DEFAULT_TIMEOUT
from fetchsite.metadata import OUTPUT_FORMATS, report_metadata

try:
    __version__ = version("fetchsite")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

logger = logging.getLogger(__name__)

FLAG_PREFIX = "--"
METADATA_FLAG = "--metadata"
USAGE_MESSAGE = (
    "Error running fetch: Add URLs to fetch! "
    "e.g. fetchsite <url1> <url2> ..."
)
UNRECOGNIZED_MESSAGE = (
    "Unrecognized argument, will process URLs with default configuration."
)


def _configure_logging(
    debug: bool, trace: bool, log_file: Optional[str] = None
) -> None:
    """Configure logging for the command.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")


def _split_flag(args: tuple[str, ...]) -> tuple[bool, list[str]]:
    """Separate the optional leading flag from the endpoints.

    Only the first argument is inspected. ``--metadata`` enables the report;
    any other argument starting with ``--`` is consumed with a warning.

    Returns:
        Whether metadata is wanted and the list of endpoints.
    """

    endpoints = list(args)
    if not endpoints or not endpoints[0].startswith(FLAG_PREFIX):
        return False, endpoints

    flag = endpoints.pop(0)
    if flag == METADATA_FLAG:
        return True, endpoints

    logger.debug("Ignoring unrecognized flag %s", flag)
    click.echo(UNRECOGNIZED_MESSAGE)
    return False, endpoints


def create_directories(base_dir: Path) -> None:
    """Create the per-scheme archive directories under ``base_dir``."""

    for directory in SCHEME_DIRS.values():
        (base_dir / directory).mkdir(parents=True, exist_ok=True)


def process_endpoint(
    endpoint: str,
    base_dir: Path,
    wants_metadata: bool = False,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    metadata_format: str = "text",
) -> Optional[Page]:
    """Serve ``endpoint`` from the archive or fetch and archive it.

    Failures are reported on standard output and do not propagate.

    Args:
        endpoint: Endpoint supplied by the user.
        base_dir: Archive root directory.
        wants_metadata: Whether to print the metadata report.
        timeout: Request timeout in seconds.
        metadata_format: Output format of the metadata report.

    Returns:
        The page that was read or fetched, or ``None`` on failure.
    """

    click.echo(f"Getting HTML file at {endpoint}...")

    page: Optional[Page] = None
    try:
        page = read_archive(endpoint, base_dir)
    except ArchiveReadError as exc:
        # Fall back to a live fetch when the archived copy is unreadable.
        click.echo(str(exc))

    if page is None:
        try:
            page = fetch_page(endpoint, base_dir, timeout=timeout)
        except FetchError as exc:
            logger.debug("Skipping %s", endpoint, exc_info=exc)
            click.echo(str(exc))
            return None

    action = "read" if page.from_archive else "wrote"
    click.echo(f"Successfully {action} file {page.path}!\n")

    report_metadata(page, wants_metadata, metadata_format)
    return page


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="FETCHSITE_LOG_FILE",
)
@click.option(
    "--archive-dir",
    type=click.Path(file_okay=False, dir_okay=True),
    envvar="FETCHSITE_ARCHIVE_DIR",
    default=".",
    show_default=True,
    help="Directory holding the http/ and https/ archives.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    envvar="FETCHSITE_TIMEOUT",
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Request timeout in seconds.",
)
@click.option(
    "--metadata-format",
    type=click.Choice(OUTPUT_FORMATS),
    envvar="FETCHSITE_METADATA_FORMAT",
    default="text",
    show_default=True,
    help="Format of the --metadata report.",
)
@click.version_option(__version__, prog_name="fetchsite")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    args: tuple[str, ...],
    debug: bool,
    trace: bool,
    log_file: Optional[str] = None,
    archive_dir: str = ".",
    timeout: float = DEFAULT_TIMEOUT,
    metadata_format: str = "text",
) -> None:
    """Fetch HTML pages and archive them under http/ and https/.

    Usage: fetchsite [OPTIONS] [--metadata] URL [URL ...]

    Pages already archived are read from disk instead of being downloaded
    again. ``--metadata`` must come first and prints link and image counts
    for every page.
    """
    _configure_logging(debug, trace, log_file)

    if not args:
        click.echo(USAGE_MESSAGE)
        ctx.exit(1)

    base_dir = Path(archive_dir)
    create_directories(base_dir)

    wants_metadata, endpoints = _split_flag(args)
    for endpoint in endpoints:
        process_endpoint(
            endpoint,
            base_dir,
            wants_metadata=wants_metadata,
            timeout=timeout,
            metadata_format=metadata_format,
        )


def main() -> None:
    """Load ``.env`` settings and run the command."""

    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
