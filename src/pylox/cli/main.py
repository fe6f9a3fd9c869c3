# Copyright 2026 pylox Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the pylox command-line interface."""

import argparse
import sys
from pathlib import Path

from pylox.session.config import CONFIG_NAME, SessionConfig, SessionConfigError, load_session_config
from pylox.session.session import Session, render_tokens

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the pylox CLI."""
    parser = argparse.ArgumentParser(
        prog="pylox",
        description="pylox - scanner for the Lox scripting language",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to a session configuration file (default: ./{CONFIG_NAME} if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # repl subcommand
    subparsers.add_parser(
        "repl",
        help="Start the interactive prompt",
        description="Read lines interactively and print the tokens scanned from each.",
    )

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a source file and print its tokens",
        description="Scan a Lox source file, print its tokens and report lexical errors.",
    )
    scan_parser.add_argument("file", help="Path to the Lox source file")
    scan_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Token output format (default: from configuration, else text)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "repl":
        return _cmd_repl(args)
    if args.command == "scan":
        return _cmd_scan(args)
    return 0


def _load_config(args: argparse.Namespace) -> SessionConfig:
    """Load the configuration named on the command line, else the local default file."""
    if args.config is not None:
        return load_session_config(Path(args.config))
    default_path = Path.cwd() / CONFIG_NAME
    if default_path.exists():
        return load_session_config(default_path)
    return SessionConfig()


def _cmd_repl(args: argparse.Namespace) -> int:
    """Handle the repl subcommand."""
    from pylox.session.repl import run_prompt

    try:
        config = _load_config(args)
    except SessionConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    run_prompt(Session(config))
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    try:
        config = _load_config(args)
    except SessionConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    path = Path(args.file)
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    output_format = args.format if args.format is not None else config.output_format
    session = Session(config)
    tokens = session.run(source)
    print(render_tokens(tokens, output_format))

    return 1 if session.had_error else 0
