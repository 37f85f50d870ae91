"""
Entry point for kvschema.

Usage:
    python -m kvschema /path/to/app.conf /path/to/app.schema
    cat app.conf | python -m kvschema - app.schema
    python -m kvschema --help
"""

import argparse
import sys

from . import __version__
from .config.loader import ConfigError, ConfigLoader
from .const import EXIT_ERROR, EXIT_INVALID, EXIT_OK
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def check(config_path: str, schema_path: str) -> int:
    """Load both files, validate, and print every problem."""
    loader = ConfigLoader()

    try:
        if config_path == "-":
            config = loader.load_config_string(sys.stdin.read(), "<stdin>")
        else:
            config = loader.load_config_file(config_path)
        schema = loader.load_schema_file(schema_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    result = loader.validate(config, schema)

    if not result:
        for error in result.errors:
            print(f"error: {error}", file=sys.stderr)
        print(f"{config.filename}: {len(result.errors)} error(s)")
        return EXIT_INVALID

    print(f"{config.filename}: OK")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="kvschema",
        description="Validate a key/value config file against a schema",
    )

    parser.add_argument(
        "config",
        help="Path to config file ('-' reads from stdin)",
    )

    parser.add_argument(
        "schema",
        help="Path to schema file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_enabled = True
        log_config.file_path = args.log_file

    setup_logging(log_config)

    logger.debug(f"Checking {args.config} against {args.schema}")
    return check(args.config, args.schema)


if __name__ == "__main__":
    sys.exit(main())
