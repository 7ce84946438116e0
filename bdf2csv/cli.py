"""Command-line interface: bdf2csv -i <in> -o <out> [-e] [-v] [-h]."""

import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from bdf2csv import __version__
from bdf2csv.config import load_config, load_yaml_config
from bdf2csv.errors import Bdf2CsvError, UsageError
from bdf2csv.pipeline import convert

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

EXAMPLES = """\
Example:
  bdf2csv -i bodyfile.txt -o bodyfile.csv
  bdf2csv -i bodyfile.txt -o bodyfile.csv -e
"""


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="bdf2csv",
        description="Linux Bodyfile to CSV Converter",
        epilog=EXAMPLES,
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-i", "--input",
        metavar="PATH",
        help="Input bodyfile path (required)",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="PATH",
        help="Output CSV file path (required)",
    )
    timestamps = parser.add_mutually_exclusive_group()
    timestamps.add_argument(
        "-e", "--epoch",
        action="store_true",
        default=None,
        help="Keep timestamps in epoch format only (default is human-readable; "
             "BDF2CSV_EPOCH_ONLY or epoch_only in the config file also enable it)",
    )
    timestamps.add_argument(
        "--human",
        dest="epoch",
        action="store_false",
        default=None,
        help="Force human-readable timestamps, overriding env and config file",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s v{__version__}",
        help="Show version and exit",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="Optional YAML config file (epoch_only, repair_names, log_level)",
    )
    parser.add_argument(
        "--repair-names",
        action="store_true",
        default=None,
        help="Rejoin names containing '|' when the trailing fields fit the bodyfile layout",
    )
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input or not args.output:
        print("Error: Both input and output file paths are required", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    try:
        config = load_config(args, load_yaml_config(args.config))
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    setup_logging(config.log_level)

    try:
        convert(config)
    except Bdf2CsvError as e:
        logger.error("Error converting bodyfile: %s", e)
        return 1

    print(f"Successfully converted {config.input_path} to {config.output_path}")
    return 0


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
    except BrokenPipeError:
        sys.exit(0)


if __name__ == "__main__":
    run()
