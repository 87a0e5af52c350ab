"""
Generator that runs the full game master to API pipeline.
"""

from pathlib import Path
from typing import Any, Optional

from pogo_api.parsers.master_data_parser import MasterDataParser
from pogo_api.renderers.pokemon_renderer import PokemonRenderer
from pogo_api.utils.core.config_registry import set_config
from pogo_api.utils.core.initializer import GameMasterInitializer
from pogo_api.utils.core.loader import GameMasterLoader
from pogo_api.utils.core.logger import LogContext, get_logger
from pogo_api.utils.core.writer import JsonBlobWriter


class ApiGenerator:
    """
    Parses the game master, renders every creature and stores the result.

    The generator is the main entry point of a run. It orchestrates:
    1. Downloading the game master if requested or missing
    2. Parsing records into linked collections
    3. Loading translation tables
    4. Rendering creatures
    5. Writing the output blob
    """

    def __init__(self, config, download: bool = False, force_download: bool = False):
        """Initialize the generator.

        Args:
            config: ApiConfig instance with project settings
            download (bool, optional): Download the game master if the file is missing. Defaults to False.
            force_download (bool, optional): Always download a fresh game master. Defaults to False.
        """
        self.config = config
        set_config(config)

        self.download = download or force_download
        self.force_download = force_download
        self.logger = get_logger(self.__class__.__module__)
        self.writer = JsonBlobWriter(Path(config.output_dir))
        self.output: dict[str, dict[str, Any]] = {}

        self.logger.debug(
            f"Initializing generator: {self.__class__.__name__}",
            extra={"output_dir": str(config.output_dir)},
        )

    def generate(self) -> Optional[Path]:
        """Execute the full generation process.

        Raises:
            FileNotFoundError: If the game master file is missing and not downloaded
            ValueError: If the game master is invalid or a creature is declared twice
            RuntimeError: If the download fails

        Returns:
            Optional[Path]: Path to the written output, or None if nothing was rendered
        """
        game_master_file = Path(self.config.game_master_file)
        if self.download:
            game_master_file = GameMasterInitializer(self.config).run(force=self.force_download)

        parser = MasterDataParser(self.config)
        with LogContext(self.logger, f"parsing {game_master_file}"):
            parser.parse_file(game_master_file)

        pokemon_collection = parser.get_pokemon_collection()
        if len(pokemon_collection) == 0:
            self.logger.error("No pokemon were parsed from the game master")
            return None

        translations = GameMasterLoader.load_translations(
            Path(self.config.translations_dir), self.config.languages
        )
        renderer = PokemonRenderer(translations, self.config.assets_base_url)

        with LogContext(self.logger, f"rendering {len(pokemon_collection)} pokemon"):
            self.output = renderer.render_all(pokemon_collection, parser.get_attacks_collection())

        return self.writer.store(self.config.output_name, self.output)

    def run(self) -> bool:
        """Execute the full generation pipeline.

        Returns:
            bool: True if generation succeeded, False if it failed
        """
        try:
            output_path = self.generate()
        except Exception as e:
            self.logger.error(f"Generation failed: {e}", exc_info=True)
            return False

        if output_path is None:
            return False

        self.logger.info(f"Successfully generated {len(self.output)} pokemon to {output_path}")
        return True
