"""File storage utility for JSON documents."""

import json
import logging
import os
import tempfile
from typing import Any, Optional

logger = logging.getLogger(__name__)


class StoreError(IOError):
    """Raised when a JSON collection file cannot be read or written."""


class FileStorage:
    """Utility class for handling JSON file storage operations."""

    @staticmethod
    def _path(directory: str, filename: str) -> str:
        if not filename.endswith(".json"):
            filename = f"{filename}.json"
        return os.path.join(directory, filename)

    @staticmethod
    def save_json(data: Any, directory: str, filename: str) -> str:
        """
        Save data as JSON to specified directory.

        The file is written to a uniquely named temporary sibling first and
        then renamed, so readers never observe a half-written collection and
        overlapping writers never share a temp file.

        Args:
            data: JSON-compatible data to save
            directory: Target directory path
            filename: Name of the file (without extension)

        Returns:
            Full path to the saved file

        Raises:
            StoreError: If file cannot be written
        """
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            file_path = FileStorage._path(directory, filename)

            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
            ) as f:
                tmp_path = f.name
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, file_path)
            tmp_path = None

            logger.debug(f"Saved JSON to: {file_path}")
            return file_path

        except Exception as e:
            logger.error(f"Error saving JSON to {directory}/{filename}: {str(e)}")
            raise StoreError(f"Failed to save JSON: {str(e)}")
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

    @staticmethod
    def load_json(directory: str, filename: str) -> Optional[Any]:
        """
        Load JSON data from specified file.

        Args:
            directory: Source directory path
            filename: Name of the file (without extension)

        Returns:
            Loaded data or None if file not found

        Raises:
            StoreError: If file exists but cannot be read or parsed
        """
        file_path = FileStorage._path(directory, filename)
        if not os.path.exists(file_path):
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)

            logger.debug(f"Loaded JSON from: {file_path}")
            return data

        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {directory}/{filename}: {str(e)}")
            raise StoreError(f"Invalid JSON file: {str(e)}")
        except Exception as e:
            logger.error(f"Error loading JSON from {directory}/{filename}: {str(e)}")
            raise StoreError(f"Failed to load JSON: {str(e)}")

    @staticmethod
    def delete_json(directory: str, filename: str) -> bool:
        """
        Remove a JSON file if present.

        Returns:
            True if a file was removed
        """
        file_path = FileStorage._path(directory, filename)
        try:
            os.remove(file_path)
            logger.info(f"Deleted JSON file: {file_path}")
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"Error deleting {file_path}: {str(e)}")
            raise StoreError(f"Failed to delete JSON: {str(e)}")
