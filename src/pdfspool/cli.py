"""Command-line interface for pdfspool."""

import argparse
import os
import sys
from pathlib import Path

from pdfspool import __version__
from pdfspool.config import (
    Defaults,
    InvocationConfig,
    load_defaults,
    parse_backend,
    parse_paper_size,
    parse_scaling,
    split_file_args,
)
from pdfspool.constants import ENV_BACKEND
from pdfspool.exceptions import (
    ConfigError,
    PrinterError,
    PrinterResolutionError,
    UsageError,
    ValidationError,
)
from pdfspool.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

HELP_FLAGS = ("-h", "--help", "--Help")

# Options that take a value, mapped to the long form used to mark them unset
VALUE_OPTIONS = {
    "-f": "--file", "--file": "--file", "--File": "--file",
    "-d": "--printer", "--printer": "--printer", "--Printer": "--printer",
    "-s": "--scaling", "--scaling": "--scaling", "--Scaling": "--scaling",
    "-p": "--papersize", "--papersize": "--papersize", "--Papersize": "--papersize",
}

USAGE = (
    "%(prog)s -f <path>[,<path2>...] -d <printer> -s <fit|actual> [-p <size>] [--fast-fail]\n"
    "       %(prog)s -h | --help"
)


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def create_parser() -> ArgumentParser:
    """Create the argument parser."""
    parser = ArgumentParser(
        prog="pdfspool",
        usage=USAGE,
        description="Silently print PDF documents to a named printer.",
        add_help=False,
        allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Paper sizes:
  a0-a10, b0-b10, c0-c10, letter, legal, tabloid, ledger, executive,
  statement, photo4x6, photo5x7, photo8x10, pdf (each document's own
  first-page size, the default)

Examples:
  pdfspool -f report.pdf -d "Office LaserJet" -s fit
  pdfspool -f a.pdf,b.pdf -d Office_LaserJet -s actual -p a4
  pdfspool -f a.pdf -f b.pdf --printer=Office --scaling=FIT --fast-fail
  pdfspool --list-printers
""",
    )

    parser.add_argument(
        "-f", "--file", "--File",
        dest="files",
        action="append",
        nargs="?",
        metavar="PATH[,PATH...]",
        help="PDF file(s) to print; repeat the flag or separate paths with commas",
    )

    parser.add_argument(
        "-d", "--printer", "--Printer",
        dest="printer",
        nargs="?",
        metavar="PRINTER",
        help="Printer name (underscores may stand in for spaces)",
    )

    parser.add_argument(
        "-s", "--scaling", "--Scaling",
        dest="scaling",
        nargs="?",
        metavar="fit|actual",
        help="Scale content to the paper (fit) or print at native size (actual)",
    )

    parser.add_argument(
        "-p", "--papersize", "--Papersize",
        dest="papersize",
        nargs="?",
        metavar="SIZE",
        help="Paper size token (default: pdf)",
    )

    parser.add_argument(
        "--fast-fail",
        action="store_true",
        help="Stop at the first file that fails instead of continuing",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be printed without submitting any job",
    )

    parser.add_argument(
        "--backend",
        metavar="NAME",
        help=f"Print backend: auto, cups, sumatra or mock (default: ${ENV_BACKEND} or auto)",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML file with default printer, scaling, papersize, fast_fail, backend",
    )

    parser.add_argument(
        "--list-printers",
        action="store_true",
        help="List available printers and exit",
    )

    parser.add_argument(
        "--list-papersizes",
        action="store_true",
        help="List paper size tokens with their dimensions and exit",
    )

    parser.add_argument(
        "-V", "--version",
        action="store_true",
        help="Show version information and exit",
    )

    parser.add_argument(
        "-h", "--help", "--Help",
        action="store_true",
        help="Show this help message and exit",
    )

    # Logging options
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Show debug output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file (includes all levels)",
    )

    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv: list[str]):
    """Parse arguments, never taking a token that begins with "-" as an option value.

    argparse still consumes dash-prefixed tokens that look like negative numbers
    or contain spaces, so a value option followed by such a token is rewritten
    to its empty "--option=" form. The token itself is then reported as unknown.

    Returns:
        (namespace, unrecognized tokens) as from parse_known_args
    """
    args = list(argv)
    for i, arg in enumerate(args[:-1]):
        if arg in VALUE_OPTIONS and args[i + 1].startswith("-"):
            args[i] = f"{VALUE_OPTIONS[arg]}="
    return parser.parse_known_args(args)


def print_usage_block(parser: argparse.ArgumentParser) -> None:
    """Write the full usage text to stderr."""
    parser.print_help(sys.stderr)


def build_config(parsed: argparse.Namespace, defaults: Defaults | None = None) -> InvocationConfig:
    """Turn parsed arguments (plus optional file defaults) into an InvocationConfig.

    Raises:
        UsageError: If files, printer or scaling mode are missing
        ValidationError: If scaling mode or paper size is not recognized
        ConfigError: If the backend name is not recognized
    """
    defaults = defaults or Defaults()

    files = split_file_args(parsed.files or [])
    if not files:
        raise UsageError("No PDF files given. Use -f/--file <path>[,<path2>...]")

    printer = parsed.printer or defaults.printer
    if not printer:
        raise UsageError("No printer given. Use -d/--printer <printer>")

    scaling_value = parsed.scaling or defaults.scaling
    if not scaling_value:
        raise UsageError("No scaling mode given. Use -s/--scaling <fit|actual>")
    scaling = parse_scaling(scaling_value)

    papersize_value = parsed.papersize or defaults.papersize
    paper_size = parse_paper_size(papersize_value) if papersize_value else "pdf"

    backend = parsed.backend or defaults.backend or os.environ.get(ENV_BACKEND) or "auto"

    return InvocationConfig(
        files=tuple(files),
        printer=printer,
        scaling=scaling,
        paper_size=paper_size,
        fast_fail=parsed.fast_fail or defaults.fast_fail,
        dry_run=parsed.dry_run,
        backend=parse_backend(backend),
    )


def cmd_list_printers(backend_name: str | None) -> int:
    """List available printers."""
    from pdfspool.printing import get_backend

    backend = get_backend(backend_name)
    printers = backend.list_printers()
    if not printers:
        logger.info("No printers found.")
        return 1
    logger.info("Available printers:")
    for i, printer in enumerate(printers, 1):
        logger.info("  %d. %s", i, printer)
    return 0


def cmd_list_papersizes() -> int:
    """List paper size tokens and their dimensions."""
    from pdfspool.papersize import PAPER_SIZES, PDF_SENTINEL

    for token, size in PAPER_SIZES.items():
        logger.info("  %-10s %s", token, size)
    logger.info("  %-10s first page of each document", PDF_SENTINEL)
    return 0


def report_unresolved_printer(e: PrinterResolutionError) -> None:
    listing = "\n".join(f"  {name}" for name in e.available) or "  (none)"
    logger.error("Printer not found: %s\nAvailable printers:\n%s", e.requested, listing)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if args is None else list(args)
    parser = create_parser()

    if not argv:
        sys.stderr.write(f"Missing arguments. Run '{parser.prog} --help' for usage.\n")
        return 1

    if any(arg in HELP_FLAGS for arg in argv):
        print_usage_block(parser)
        return 0

    setup_logging()

    try:
        parsed, unknown = parse_arguments(parser, argv)
    except UsageError as e:
        logger.error("%s", e)
        print_usage_block(parser)
        return 1

    setup_logging(
        verbosity=parsed.verbose,
        quiet=parsed.quiet,
        log_file=parsed.log_file,
    )

    for token in unknown:
        logger.warning("Ignoring unrecognized argument: %s", token)

    if parsed.version:
        logger.info("pdfspool %s", __version__)
        return 0

    if parsed.list_papersizes:
        return cmd_list_papersizes()

    try:
        defaults = load_defaults(parsed.config) if parsed.config else None

        if parsed.list_printers:
            backend_name = parsed.backend or (defaults.backend if defaults else None)
            return cmd_list_printers(backend_name)

        config = build_config(parsed, defaults)

        from pdfspool.driver import run_batch
        from pdfspool.printing import get_backend

        return run_batch(config, get_backend(config.backend))
    except UsageError as e:
        logger.error("%s", e)
        print_usage_block(parser)
        return 1
    except (ValidationError, ConfigError) as e:
        logger.error("%s", e)
        return 1
    except PrinterResolutionError as e:
        report_unresolved_printer(e)
        return 1
    except PrinterError as e:
        logger.error("%s", e)
        return 1


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
