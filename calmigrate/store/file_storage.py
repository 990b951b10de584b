"""Local filesystem access for exported and imported calendar files."""

import logging
from pathlib import Path

from calmigrate.exceptions import StorageIOError

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """Read and write migration files on the local filesystem."""

    def read_bytes(self, directory: Path, filename: str) -> bytes:
        """
        Read a calendar file.

        Args:
            directory: Source directory
            filename: File name inside the directory

        Returns:
            File content

        Raises:
            StorageIOError: If the file cannot be read
        """
        path = Path(directory) / filename
        logger.info(f"Reading calendar file: {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"Invalid path: {path}") from e

    def write_bytes(self, directory: Path, filename: str, data: bytes) -> Path:
        """
        Write a calendar file, creating the directory if needed.

        Args:
            directory: Destination directory
            filename: File name inside the directory
            data: Content to write

        Returns:
            Path to the written file

        Raises:
            StorageIOError: If the file cannot be written
        """
        path = Path(directory) / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
            size = path.stat().st_size
        except OSError as e:
            # Remove empty file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink(missing_ok=True)
            raise StorageIOError(f"Could not export calendar to {path}") from e

        if data and size == 0:
            raise StorageIOError(f"File was created but is empty: {path}")

        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return path
