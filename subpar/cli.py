"""Command-line interface for subpar.

WHY: subpar is used as a text filter — from an editor (e.g. `!}subpar` in
vi), a shell pipeline, or on a file — so it reads a whole text, reformats
every paragraph and writes the result to stdout.

HOW: Uses argparse to accept an optional input path, --width, --last and
--ruler. Options left out on the command line fall back to SUBPAR_WIDTH and
SUBPAR_LAST (config.load_width/load_full_last_line), so a .env file or
exported variables can change them. The environment is only consulted
after parsing, so --help and an explicit --width never depend on it. The
input is read in one go, decoded as UTF-8, and each rendered paragraph is
written followed by one blank line.

RULES:
- Input "-" (the default) means stdin.
- If the input cannot be read, print "subpar: Error reading stdin." to
  stdout, write nothing else, and exit with status 1. The status is
  deliberately non-zero, not the 0 of a filter that merely prints the
  message, so shell pipelines and editors notice nothing was reformatted.
- An invalid SUBPAR_WIDTH is reported as "Error: ..." on stderr (status 1)
  only when --width is not given.
- Reformatted text goes to stdout; log records go to stderr.
- --width must be a positive integer; argparse rejects anything else.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__, format_text
from .config import DEFAULT_WIDTH, load_full_last_line, load_width, parse_width
from .models import FormatConfig

logger = logging.getLogger(__name__)

READ_ERROR_MESSAGE = "subpar: Error reading stdin."


def _width_arg(value: str) -> int:
    """argparse type for --width."""
    try:
        return parse_width(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser(defaults: Optional[FormatConfig] = None) -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Args:
        defaults: Option defaults. When None, --width and --last default to
            None and main() fills them in from the environment.
    """
    parser = argparse.ArgumentParser(
        prog="subpar",
        description="Subpar is a filter for paragraph reformatting.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help="Text file to reformat (default: stdin).",
    )

    parser.add_argument(
        "-w", "--width",
        type=_width_arg,
        default=defaults.width if defaults is not None else None,
        help="No line in the output may contain more than WIDTH characters "
             "(newline excluded) (default: SUBPAR_WIDTH or {}).".format(DEFAULT_WIDTH),
    )

    parser.add_argument(
        "-l", "--last",
        action="store_true",
        default=defaults.full_last_line if defaults is not None else None,
        help="Make the last line as long as the others.",
    )

    parser.add_argument(
        "--ruler",
        action="store_true",
        help="Pad every line to the width and mark the right margin.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log line breaking details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def read_input(input_file: str) -> str:
    """Read the whole input as UTF-8 text.

    Raises:
        OSError: If the input cannot be read.
        UnicodeDecodeError: If the input is not valid UTF-8.
    """
    if input_file == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(input_file, "rb") as f:
            data = f.read()
    return data.decode("utf-8")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    args = build_parser().parse_args(argv)

    if args.width is None:
        try:
            args.width = load_width()
        except ValueError as e:
            print("Error: {}".format(e), file=sys.stderr)
            sys.exit(1)
    if args.last is None:
        args.last = load_full_last_line()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        text = read_input(args.input_file)
    except (OSError, UnicodeDecodeError):
        logger.debug("Failed to read %s", args.input_file, exc_info=True)
        print(READ_ERROR_MESSAGE)
        sys.exit(1)

    config = FormatConfig(width=args.width, full_last_line=args.last)
    for paragraph in format_text(text, config=config, ruler=args.ruler):
        sys.stdout.write(paragraph + "\n")


if __name__ == "__main__":
    main()
