# main.py
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import Settings, get_settings
from .exceptions import PermanentError
from .gdrive import GoogleDriveFilesystem


def setup_logging(settings: Settings):
    """Configures logging to file and console explicitly."""
    log_level_name = settings.LOG_LEVEL.upper()

    # Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level_name)

    # Clear any existing handlers to prevent duplicate logs on re-runs or implicit configs
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Logs go to stderr so that `read` output on stdout stays clean
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if settings.LOG_FILE:
        try:
            file_handler = logging.FileHandler(settings.LOG_FILE)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except IOError as e:
            root_logger.error(f"Failed to set up file logging to {settings.LOG_FILE}: {e}")

    # Reducing "noise" from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google.auth").setLevel(logging.WARNING)


def initialize_filesystem(settings: Settings) -> Optional[GoogleDriveFilesystem]:
    """Initializes and returns a GoogleDriveFilesystem, or None if the configuration is invalid."""
    try:
        return GoogleDriveFilesystem(settings.drive_config())
    except ValueError as e:
        logging.error(f"Failed to initialize Google Drive filesystem. Error: {e}")
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse and edit Google Drive through slash-delimited paths."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    stat_parser = commands.add_parser("stat", help="List the entries of a folder.")
    stat_parser.add_argument("path")

    read_parser = commands.add_parser("read", help="Write a file's content to stdout.")
    read_parser.add_argument("path")

    write_parser = commands.add_parser(
        "write", help="Upload a local file (or stdin) to a Drive path."
    )
    write_parser.add_argument("path")
    write_parser.add_argument("source", nargs="?", type=argparse.FileType("rb"))
    return parser


def run_command(filesystem: GoogleDriveFilesystem, args: argparse.Namespace) -> None:
    if args.command == "stat":
        result = filesystem.stat(args.path)
        for entry in result.entries:
            sys.stdout.write(f"{entry.type}\t{entry.name}\n")

    elif args.command == "read":
        response = filesystem.read(args.path)
        for chunk in response.iter_content(chunk_size=64 * 1024):
            sys.stdout.buffer.write(chunk)
        sys.stdout.flush()

    elif args.command == "write":
        if args.source:
            with args.source:
                content = args.source.read()
        else:
            content = sys.stdin.buffer.read()
        filesystem.write(args.path, content)
        logging.info(f"Wrote {len(content)} bytes to {args.path}.")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        logging.critical(f"Invalid Google Drive configuration. Error: {e}")
        return 1
    setup_logging(settings)

    filesystem = initialize_filesystem(settings)
    if filesystem is None:
        logging.critical("Could not establish a connection to Google Drive.")
        return 1

    try:
        run_command(filesystem, args)
    except PermanentError as e:
        logging.error(f"{args.command} {args.path} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
