"""
cli/core.py - Core CLI infrastructure

Command base class, result type and registry shared by every subcommand.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
from dataclasses import dataclass
from abc import ABC, abstractmethod
from pathlib import Path
import argparse
import json
import logging

from capship.bootstrap.config import CapshipConfig
from capship.catalog import ReferenceCatalog
from capship.core.design import UnitDesign
from capship.errors import CatalogLoadError, MalformedDesignError

logger = logging.getLogger("cli")

# Exit codes
EXIT_LEGAL = 0
EXIT_ILLEGAL = 1
EXIT_STRUCTURAL = 2


@dataclass
class CLIContext:
    """Context for CLI operations."""

    config: CapshipConfig
    verbose: bool = False

    def load_catalog(self, path: Optional[str] = None) -> ReferenceCatalog:
        """
        Load the reference catalog from ``path`` or the configured location.

        Raises:
            CatalogLoadError: no catalog configured, or the file is unusable
        """
        catalog_path = path or self.config.catalog.catalog_path
        if not catalog_path:
            raise CatalogLoadError(
                "No reference catalog given (use --catalog or CAPSHIP_CATALOG)",
                source="cli",
                path="catalog_path",
            )
        return ReferenceCatalog.from_file(catalog_path)

    def load_design(self, path: str) -> UnitDesign:
        """
        Load a design from a JSON file.

        Raises:
            MalformedDesignError: file missing, not JSON, or not a design
        """
        design_path = Path(path)
        if not design_path.exists():
            raise MalformedDesignError(
                f"Design file not found: {path}", source="cli", path=path
            )
        try:
            with open(design_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedDesignError(
                f"Design file is not valid JSON: {e}", source="cli", path=path
            ) from e
        if not isinstance(data, dict):
            raise MalformedDesignError(
                "Design file must hold a JSON object", source="cli", path=path
            )
        design = UnitDesign.from_dict(data)
        logger.debug(f"Loaded design {design.display_name} from {path}")
        return design


@dataclass
class CommandResult:
    """Result of a CLI command execution."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[str] = None
    exit_code: int = EXIT_LEGAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error,
            "exit_code": self.exit_code,
        }


class CLICommand(ABC):
    """Base class for CLI commands."""

    name: str = "command"
    description: str = "Base command"
    aliases: List[str] = []

    @abstractmethod
    def execute(self, ctx: CLIContext, args: argparse.Namespace) -> CommandResult:
        """Execute the command."""

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure argument parser for this command."""


class CommandRegistry:
    """Registry for CLI commands."""

    def __init__(self):
        self._commands: Dict[str, CLICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: CLICommand) -> None:
        """Register a command."""
        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[CLICommand]:
        """Get command by name or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def list_commands(self) -> List[str]:
        return list(self._commands.keys())

    def build_parser(self, prog: str = "capship") -> argparse.ArgumentParser:
        """Top-level parser with one subparser per registered command."""
        parser = argparse.ArgumentParser(
            prog=prog, description="Capital ship construction validator"
        )
        parser.add_argument("--config", help="Path to JSON config file")
        parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
        subparsers = parser.add_subparsers(dest="command", required=True)
        for command in self._commands.values():
            sub = subparsers.add_parser(
                command.name, aliases=command.aliases, help=command.description
            )
            command.configure_parser(sub)
        return parser
