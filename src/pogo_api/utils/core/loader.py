"""
Helper utilities for loading the game master and translation tables from disk.
"""

from pathlib import Path
from typing import Any

import orjson
from dacite import Config, DaciteError, from_dict

from pogo_api.utils.core.logger import get_logger
from pogo_api.utils.data.translations import TranslationCollection

logger = get_logger(__name__)


class GameMasterLoader:
    """
    Utility class for reading the game master export and translation files.

    The game master is a single JSON array of records, each holding at least a
    ``templateId`` and a ``data`` payload. Failing to read or parse it is fatal
    for a run, so errors are logged and re-raised.
    """

    # Translation files are plain JSON maps; strict type checks catch a broken export early
    _dacite_config = Config(check_types=True)

    @staticmethod
    def _read_json(file_path: Path) -> Any:
        """Read and parse a JSON file.

        Args:
            file_path (Path): The file to read

        Raises:
            FileNotFoundError: If the file doesn't exist
            orjson.JSONDecodeError: If the file is not valid JSON (a ValueError subclass)

        Returns:
            Any: The parsed JSON document
        """
        if not file_path.exists():
            logger.error(f"File not found: {file_path}")
            raise FileNotFoundError(f"File not found: {file_path}")

        logger.debug(f"Loading JSON file: {file_path}")
        try:
            with open(file_path, "rb") as f:
                return orjson.loads(f.read())
        except orjson.JSONDecodeError as e:
            logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
            raise
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
            raise

    @classmethod
    def load_records(cls, file_path: Path) -> list[Any]:
        """Load the records of a game master file.

        Args:
            file_path (Path): Path to the game master JSON file

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid JSON or its top level is not an array

        Returns:
            list[Any]: The records in file order
        """
        document = cls._read_json(Path(file_path))

        if not isinstance(document, list):
            logger.error(
                f"Game master {file_path} must contain a JSON array, got {type(document).__name__}"
            )
            raise ValueError(f"Game master {file_path} must contain a JSON array")

        logger.info(f"Loaded {len(document)} records from {file_path}")
        return document

    @classmethod
    def load_translation(cls, file_path: Path) -> TranslationCollection:
        """Load one language's translation table.

        Args:
            file_path (Path): Path to the translation JSON file

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid JSON or doesn't match the table layout

        Returns:
            TranslationCollection: The translation table
        """
        data = cls._read_json(Path(file_path))

        try:
            return from_dict(data_class=TranslationCollection, data=data, config=cls._dacite_config)
        except (DaciteError, TypeError) as e:
            logger.error(f"Error deserializing translation file {file_path}: {e}", exc_info=True)
            raise ValueError(f"Invalid translation file {file_path}: {e}") from e

    @classmethod
    def load_translations(cls, translations_dir: Path, languages: list[str]) -> list[TranslationCollection]:
        """Load the translation tables of the configured languages.

        Files are looked up as ``<translations_dir>/<language>.json``. Missing
        languages are logged and skipped so a run can still render the
        languages that are available.

        Args:
            translations_dir (Path): Directory holding the translation files
            languages (list[str]): Languages to load, in output order

        Returns:
            list[TranslationCollection]: The loaded tables in the order of ``languages``
        """
        translations = []
        for language in languages:
            file_path = Path(translations_dir) / f"{language}.json"
            if not file_path.exists():
                logger.warning(f"No translation file for language '{language}' at {file_path}")
                continue
            translations.append(cls.load_translation(file_path))

        logger.info(f"Loaded {len(translations)}/{len(languages)} translation tables")
        return translations
