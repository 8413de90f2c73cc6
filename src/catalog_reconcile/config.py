"""Configuration management for the catalog reconciliation tool."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file from config directory or project root
config_env = Path(__file__).parent.parent.parent / "config" / ".env"
if config_env.exists():
    load_dotenv(config_env)
else:
    load_dotenv()

DEFAULT_SOURCES = "Spotify,TIDAL,Qobuz"
DEFAULT_EXPORT_FILENAME = "My {source} Library.csv"


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Export files
        self.export_directory = Path(
            os.getenv("CATALOG_RECONCILE_EXPORT_DIRECTORY", str(Path.cwd()))
        )
        self.export_filename = os.getenv(
            "CATALOG_RECONCILE_EXPORT_FILENAME", DEFAULT_EXPORT_FILENAME
        )
        self.csv_encoding = os.getenv("CATALOG_RECONCILE_CSV_ENCODING", "utf-8-sig")

        # Comparison settings, reference source first
        self.sources = parse_sources(
            os.getenv("CATALOG_RECONCILE_SOURCES", DEFAULT_SOURCES)
        )
        self.plan = os.getenv("CATALOG_RECONCILE_PLAN", "three-source")

        remap_file = os.getenv("CATALOG_RECONCILE_REMAP_FILE")
        self.remap_file: Optional[Path] = Path(remap_file) if remap_file else None

        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        if "{source}" not in self.export_filename:
            raise ConfigurationError(
                "CATALOG_RECONCILE_EXPORT_FILENAME must contain '{source}', "
                f"got '{self.export_filename}'"
            )

    def export_path(self, source: str) -> Path:
        """Get the export file path for a source."""
        return self.export_directory / self.export_filename.format(source=source)


def parse_sources(value: str) -> List[str]:
    """Split a comma separated source list.

    Raises:
        ConfigurationError: If no source name is given
    """
    sources = [name.strip() for name in value.split(",") if name.strip()]
    if not sources:
        raise ConfigurationError("At least one source name is required")
    return sources


def get_config() -> Config:
    """Get application configuration."""
    return Config()
