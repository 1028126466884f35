"""Main CLI entry point for the qmd-history uninstaller."""

import argparse
import logging
import sys
from typing import List, Optional

from qmd_history.commands import cmd_uninstall
from qmd_history.constants import PRODUCT_NAME, VERSION
from qmd_history.output import Colors, error, supports_color, warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qmd-history-uninstall",
        description=f"{PRODUCT_NAME} - interactive uninstaller",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Removes the auto-update LaunchAgent, converter script and skill files, then
offers to clean AI assistant configs and the converted history cache.
Original JSONL history and QMD collections are left in place.
""",
    )
    parser.add_argument("--version", "-V", action="version", version=f"qmd-history-uninstall {VERSION}")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug details to stderr")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the uninstaller. Returns the exit status."""
    args = build_parser().parse_args(argv)

    # Handle --no-color flag globally
    if args.no_color or not supports_color():
        Colors.disable()
    setup_logging(args.verbose)

    try:
        cmd_uninstall(args)
    except KeyboardInterrupt:
        print()
        print(warning("Uninstallation interrupted."))
        return 130
    except Exception as e:
        logging.getLogger(__name__).debug("Unhandled error", exc_info=True)
        print(f"{error('Error:')} {e}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
