"""
cli/ - Command Line Interface

    capship validate DESIGN.json --catalog CATALOG.json [--format text|markdown|json]
    capship attributes DESIGN.json --catalog CATALOG.json

Exit codes: 0 legal, 1 illegal, 2 structural error.
"""

from __future__ import annotations
from typing import List, Optional
import sys

from .core import (
    CLIContext,
    CommandResult,
    CommandRegistry,
    CLICommand,
    EXIT_LEGAL,
    EXIT_ILLEGAL,
    EXIT_STRUCTURAL,
)
from .commands import ValidateCommand, AttributesCommand
from capship.bootstrap import load_config, setup_logging


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(ValidateCommand())
    registry.register(AttributesCommand())
    return registry


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point; returns the process exit code."""
    registry = build_registry()
    args = registry.build_parser().parse_args(argv)

    config = load_config(args.config)
    setup_logging(
        level="DEBUG" if args.verbose else config.logging.level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )

    ctx = CLIContext(config=config, verbose=args.verbose)
    command = registry.get(args.command)
    result = command.execute(ctx, args)

    if result.success:
        sys.stdout.write(result.message)
        if not result.message.endswith("\n"):
            sys.stdout.write("\n")
    else:
        sys.stderr.write(f"Error: {result.error}\n")
    return result.exit_code


__all__ = [
    # Core
    "CLIContext",
    "CommandResult",
    "CommandRegistry",
    "CLICommand",
    "EXIT_LEGAL",
    "EXIT_ILLEGAL",
    "EXIT_STRUCTURAL",
    # Commands
    "ValidateCommand",
    "AttributesCommand",
    # Entry point
    "build_registry",
    "main",
]
