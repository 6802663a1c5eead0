#!/usr/bin/env python3
"""
Command line interface for the contract wizard.

Examples:
    # Print a Cairo ERC20 with some features enabled
    wizard print cairo erc20 --option mintable=true --option access=roles

    # Print an account contract validating Ethereum signatures
    wizard print cairo account --option type=eth

    # Write every Solidity kind with default options
    wizard write solidity ./contracts

    # Start the API server
    wizard serve --port 8000
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .core.errors import WizardError
from .server.client import WizardClient


def parse_option_value(value: str) -> Any:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


def parse_options(pairs: List[str]) -> Dict[str, Any]:
    """Turn repeated key=value flags into an options dict"""
    options: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got '{pair}'")
        options[key.strip()] = parse_option_value(value.strip())
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wizard",
        description="Generate Cairo and Solidity contract sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    print_parser = subparsers.add_parser("print", help="Print one contract to stdout")
    print_parser.add_argument("language", help="cairo or solidity")
    print_parser.add_argument("kind", help="Contract kind, e.g. erc20")
    print_parser.add_argument("-o", "--option", action="append", default=[], metavar="KEY=VALUE",
                              help="Option value (repeatable)")
    print_parser.add_argument("--save", action="store_true", help="Also write the source to the output directory")
    print_parser.add_argument("--output-dir", help="Output directory (or WIZARD_OUTPUT_DIR env var)")

    write_parser = subparsers.add_parser("write", help="Write every kind of a language with default options")
    write_parser.add_argument("language", help="cairo or solidity")
    write_parser.add_argument("directory", nargs="?", help="Output directory (or WIZARD_OUTPUT_DIR env var)")
    write_parser.add_argument("-v", "--verbose", action="store_true", help="Log each written file")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (or WIZARD_HOST env var)")
    serve_parser.add_argument("--port", type=int, help="Port (or WIZARD_PORT env var)")

    return parser


def run_print(args: argparse.Namespace) -> int:
    client = WizardClient(output_dir=args.output_dir)
    result = client.generate(args.language, args.kind, parse_options(args.option), save=args.save)
    print(result.source, end="")
    if result.file:
        print(f"✅ Saved {result.name} to {result.file}", file=sys.stderr)
    return 0


def run_write(args: argparse.Namespace) -> int:
    client = WizardClient()
    summary = client.write_all(args.language, args.directory, logs_enabled=args.verbose)
    print(f"✅ Wrote {len(summary.files)} files to {summary.directory}")
    return 0


def run_serve(args: argparse.Namespace) -> int:
    from .server.app import run
    run(host=args.host, port=args.port)
    return 0


COMMANDS = {
    "print": run_print,
    "write": run_write,
    "serve": run_serve,
}


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return COMMANDS[args.command](args)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except WizardError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    sys.exit(main())
