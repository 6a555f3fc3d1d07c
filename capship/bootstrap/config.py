"""
bootstrap/config.py - Application configuration

Provides configuration loading from JSON files, environment variables and
defaults.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

from capship.core.enums import TechBase

logger = logging.getLogger("bootstrap.config")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class ValidationConfig:
    """Validation behaviour."""

    allow_overweight_construction: bool = False
    print_size: int = 40  # Ledger column width
    default_year: int = 3145
    tech_base: str = TechBase.ALL.value
    allow_unofficial: bool = False

    @classmethod
    def from_env(cls) -> "ValidationConfig":
        return cls(
            allow_overweight_construction=_env_flag("CAPSHIP_ALLOW_OVERWEIGHT"),
            print_size=int(os.getenv("CAPSHIP_PRINT_SIZE", "40")),
            default_year=int(os.getenv("CAPSHIP_YEAR", "3145")),
            tech_base=os.getenv("CAPSHIP_TECH_BASE", TechBase.ALL.value),
            allow_unofficial=_env_flag("CAPSHIP_ALLOW_UNOFFICIAL"),
        )


@dataclass
class CatalogConfig:
    """Reference catalog location."""

    catalog_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(catalog_path=os.getenv("CAPSHIP_CATALOG"))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=os.getenv("CAPSHIP_LOG_LEVEL", "WARNING"),
            format=os.getenv("CAPSHIP_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            log_file=os.getenv("CAPSHIP_LOG_FILE"),
            json_logs=_env_flag("CAPSHIP_JSON_LOGS"),
        )


@dataclass
class CapshipConfig:
    """Root configuration."""

    version: str = "1.0.0"

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "CapshipConfig":
        """Create configuration from environment variables."""
        return cls(
            validation=ValidationConfig.from_env(),
            catalog=CatalogConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "CapshipConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "CapshipConfig":
        """Environment values overridden by file values; unknown keys ignored."""
        config = cls.from_env()

        for section in ("validation", "catalog", "logging"):
            target = getattr(config, section)
            for key, value in data.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "version": self.version,
            "validation": {
                "allow_overweight_construction": self.validation.allow_overweight_construction,
                "print_size": self.validation.print_size,
                "default_year": self.validation.default_year,
                "tech_base": self.validation.tech_base,
                "allow_unofficial": self.validation.allow_unofficial,
            },
            "catalog": {
                "catalog_path": self.catalog.catalog_path,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[CapshipConfig] = None


def load_config(filepath: str = None) -> CapshipConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        CapshipConfig instance
    """
    global _config

    if filepath:
        _config = CapshipConfig.from_file(filepath)
    else:
        default_paths = [
            "./capship.json",
            os.path.expanduser("~/.capship/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = CapshipConfig.from_file(path)
                return _config

        _config = CapshipConfig.from_env()

    logger.debug(f"Configuration loaded: {_config.to_dict()}")
    return _config


def get_config() -> CapshipConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None
