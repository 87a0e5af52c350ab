"""
Output sink that stores named JSON blobs in a directory.
"""

from pathlib import Path
from typing import Any

import orjson

from pogo_api.utils.core.logger import get_logger

logger = get_logger(__name__)


class JsonBlobWriter:
    """Stores rendered output as ``<output_dir>/<name>.json``."""

    def __init__(self, output_dir: Path, indent: bool = True):
        """Initialize the writer.

        Args:
            output_dir (Path): Directory where blobs are written
            indent (bool, optional): Pretty-print the JSON output. Defaults to True.
        """
        self.output_dir = Path(output_dir)
        self.option = orjson.OPT_INDENT_2 if indent else 0

    def store(self, name: str, content: Any) -> Path:
        """Serialize and store a blob.

        Args:
            name (str): Blob name, without extension
            content (Any): JSON-serializable content (dataclasses are supported)

        Raises:
            OSError: If the file cannot be written

        Returns:
            Path: Path to the written file
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.output_dir / f"{name}.json"

        try:
            with open(file_path, "wb") as f:
                f.write(orjson.dumps(content, option=self.option))
        except OSError as e:
            logger.error(f"Error writing {file_path}: {e}", exc_info=True)
            raise

        logger.info(f"Saved {name} to {file_path}")
        return file_path
