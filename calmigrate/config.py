"""Configuration for calendar migration."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from calmigrate.constants import DEFAULT_PRODID, DEFAULT_REFRESH_INTERVAL


class MigrationConfig(BaseModel):
    """Migration configuration with Pydantic validation."""

    # Storage paths
    store_dir: Path = Field(default=Path("data/store"))
    export_dir: Path = Field(default=Path("data/exports"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    log_filename: str = Field(default="calendar_migrate.log")

    # Export defaults
    default_refresh_interval: str = Field(default=DEFAULT_REFRESH_INTERVAL)
    prodid: str = Field(default=DEFAULT_PRODID)

    def user_export_dir(self, user: str) -> Path:
        """Per-user destination directory for exported files."""
        return self.export_dir / user

    @classmethod
    def from_env(cls) -> "MigrationConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        # Storage paths
        if "CALMIGRATE_STORE_DIR" in os.environ:
            config_dict["store_dir"] = Path(os.environ["CALMIGRATE_STORE_DIR"])
        if "EXPORT_DIR" in os.environ:
            config_dict["export_dir"] = Path(os.environ["EXPORT_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Export defaults
        if "DEFAULT_REFRESH_INTERVAL" in os.environ:
            config_dict["default_refresh_interval"] = os.environ[
                "DEFAULT_REFRESH_INTERVAL"
            ]
        if "PRODID" in os.environ:
            config_dict["prodid"] = os.environ["PRODID"]

        return cls(**config_dict)
