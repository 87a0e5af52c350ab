"""
Game master initializer to download the latest export from a remote source.
"""

import os
from pathlib import Path

import orjson
import requests

from pogo_api.utils.core.logger import get_logger

logger = get_logger(__name__)


class GameMasterInitializer:
    """Downloads the game master JSON into the configured location."""

    def __init__(self, config):
        """Initialize the game master initializer with configuration.

        Args:
            config: ApiConfig instance with game master settings
        """
        self.config = config
        self.url = config.game_master_url
        self.timeout = config.download_timeout
        self.game_master_file = Path(config.game_master_file)

    def _download(self) -> bytes:
        """Download the game master document.

        Raises:
            requests.exceptions.RequestException: If the request fails
            ValueError: If the response is not a JSON array

        Returns:
            bytes: The raw response body
        """
        logger.info(f"Downloading game master from {self.url}...")

        try:
            # Import version to keep User-Agent in sync with package version
            from pogo_api import __version__

            response = requests.get(
                self.url,
                timeout=self.timeout,
                headers={"User-Agent": f"pogo-api/{__version__}"},
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP error downloading game master: {e.response.status_code}", exc_info=True)
            raise
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error downloading game master: {e}", exc_info=True)
            raise
        except requests.exceptions.Timeout as e:
            logger.error(
                f"Timeout downloading game master after {self.timeout} seconds: {e}", exc_info=True
            )
            raise

        content = response.content
        if not isinstance(orjson.loads(content), list):
            raise ValueError("Downloaded game master is not a JSON array")

        return content

    def run(self, force: bool = False) -> Path:
        """Make sure the game master file exists, downloading it if needed.

        Args:
            force (bool, optional): Download even if the file already exists. Defaults to False.

        Raises:
            RuntimeError: If the download or the write fails.

        Returns:
            Path: Path to the game master file
        """
        if self.game_master_file.exists() and not force:
            logger.info(f"Game master '{self.game_master_file}' already exists, skipping download")
            return self.game_master_file

        try:
            content = self._download()
            self.game_master_file.parent.mkdir(parents=True, exist_ok=True)

            # Write next to the target and swap, so a failed write keeps the old file
            temp_path = self.game_master_file.with_suffix(".tmp")
            temp_path.write_bytes(content)
            os.replace(temp_path, self.game_master_file)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error during download: {e}", exc_info=True)
            raise RuntimeError(f"Failed to download game master: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid game master data: {e}", exc_info=True)
            raise RuntimeError(f"Failed to process game master: {e}") from e
        except OSError as e:
            logger.error(f"File system error writing game master: {e}", exc_info=True)
            raise RuntimeError(f"Failed to write game master: {e}") from e

        logger.info(f"Game master saved to '{self.game_master_file}'")
        return self.game_master_file
