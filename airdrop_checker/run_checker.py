"""
run_checker.py - Main Application Entry Point
=============================================
Command-line interface for the airdrop eligibility checker.

Usage:
------
    python -m airdrop_checker.run_checker check 0xABC... 0xDEF...
    python -m airdrop_checker.run_checker file addresses.txt results.xlsx
    python -m airdrop_checker.run_checker file wallets.csv results.csv --debug
    python -m airdrop_checker.run_checker help

Commands:
---------
    check <address...>      : Check the given addresses
    file <input> [output]   : Check addresses from a file, optionally export
                              (.csv output writes CSV, anything else .xlsx)
    help                    : Show usage
    --debug                 : Enable debug logging

Exit codes: 0 on success, 1 on fatal errors (missing file, oversized batch,
bad configuration, unknown command), 130 when interrupted.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api_client import ApiClient
from .checker import EligibilityChecker
from .config import load_settings
from .console import ConsoleReporter


# =============================================================================
# LOGGING SETUP
# =============================================================================

LOG_LEVEL = logging.INFO

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )


# =============================================================================
# COMMAND LINE ARGUMENT PARSING
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='airdrop-checker',
        description='Check wallet addresses for 0G airdrop eligibility',
        add_help=False,
    )
    parser.add_argument('-h', '--help', action='store_true', help='Show help')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    # --debug may also follow the subcommand; SUPPRESS keeps the subparser
    # from resetting a flag given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--debug', action='store_true', default=argparse.SUPPRESS)

    sub = parser.add_subparsers(dest='command')

    check = sub.add_parser('check', parents=[common], help='Check specific addresses')
    check.add_argument('addresses', nargs='*', help='Wallet addresses (0x...)')

    file_cmd = sub.add_parser('file', parents=[common], help='Check addresses from a file')
    file_cmd.add_argument('input', nargs='?', help='Input file (.txt, .csv, .xlsx, .xls)')
    file_cmd.add_argument('output', nargs='?', help='Optional output file (.xlsx or .csv)')

    sub.add_parser('help', help='Show help')

    return parser


# =============================================================================
# COMMANDS
# =============================================================================

def write_export(checker: EligibilityChecker, results, output_path: Path):
    """Write results to .csv (text) or, for any other suffix, .xlsx."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() == ".csv":
        output_path.write_text(checker.export_to_csv(results), encoding="utf-8")
    else:
        output_path.write_bytes(checker.export_to_xlsx(results))
    logger.info(f"Results exported to {output_path.resolve()}")


def cmd_check(checker: EligibilityChecker, reporter: ConsoleReporter, addresses: List[str]) -> int:
    if not addresses:
        logger.error("No addresses provided")
        reporter.show_help()
        return 0

    reporter.show_banner()
    reporter.show_check_banner(len(addresses))

    results = checker.check_addresses(addresses)
    reporter.show_results(results)
    return 0


def cmd_file(checker: EligibilityChecker, reporter: ConsoleReporter,
             input_file: Optional[str], output_file: Optional[str]) -> int:
    if not input_file:
        logger.error("No file path provided")
        reporter.show_help()
        return 0

    input_path = Path(input_file).resolve()
    reporter.show_banner()
    logger.info(f"Reading addresses from: {input_path}")

    results = checker.check_addresses_from_file(input_path)
    reporter.show_results(results)

    if output_file:
        write_export(checker, results, Path(output_file).resolve())
    return 0


# =============================================================================
# MAIN EXECUTION FUNCTION
# =============================================================================

def main(argv: Optional[List[str]] = None, reporter: Optional[ConsoleReporter] = None) -> int:
    """
    Run the CLI and return the process exit code.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        reporter: Console output sink (default: prints with colours)
    """
    reporter = reporter or ConsoleReporter()
    parser = build_parser()

    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as e:
        # argparse already printed the problem (e.g. an unknown command)
        reporter.show_help()
        return 1 if e.code else 0

    setup_logging(args.debug)

    if unknown:
        logger.error(f"Unknown arguments: {' '.join(unknown)}")
        reporter.show_help()
        return 1

    if args.help or args.command in (None, 'help'):
        reporter.show_help()
        return 0

    client = None
    try:
        settings = load_settings()
        logger.debug(f"Base URL: {settings.base_url}{settings.endpoint}")

        client = ApiClient(settings)
        checker = EligibilityChecker(client, max_batch=settings.max_batch)

        if args.command == 'check':
            return cmd_check(checker, reporter, args.addresses)
        return cmd_file(checker, reporter, args.input, args.output)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    except (RuntimeError, OSError) as e:
        # Missing file, oversized batch, bad configuration, export failure
        logger.error(f"Fatal error: {e}")
        return 1

    finally:
        if client:
            client.close()


def run_checker():
    """Console-script entry point."""
    sys.exit(main())


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    run_checker()
