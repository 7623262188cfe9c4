"""
Configuration for library-archive.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class StorageConfig:
    """Where the catalog archive file lives."""

    archive_path: Path = field(default_factory=lambda: Path("archive.db"))


@dataclass
class LoggingConfig:
    """Logging level and format for the CLI."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class ArchiveConfig:
    """Complete library-archive configuration."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArchiveConfig":
        """Create config from a dictionary (e.g., from YAML)."""
        config = cls()

        if "storage" in data:
            storage = data["storage"] or {}
            if "archive_path" in storage:
                config.storage = StorageConfig(archive_path=Path(storage["archive_path"]))

        if "logging" in data:
            log = data["logging"] or {}
            level = str(log.get("level", "INFO")).upper()
            if level not in logging.getLevelNamesMapping():
                logger.warning(f"Unknown log level {level!r}, using INFO")
                level = "INFO"
            config.logging = LoggingConfig(
                level=level,
                format=log.get("format", DEFAULT_LOG_FORMAT),
            )

        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "ArchiveConfig":
        """Load config from a YAML file; a missing file gives the defaults."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("library_archive") or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a plain dictionary, e.g. for logging a snapshot."""
        return {
            "storage": {
                "archive_path": str(self.storage.archive_path),
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }
