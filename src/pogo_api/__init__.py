"""pogo-api - Game master parser and API generator for Pokemon GO data."""

from .config import ApiConfig
from .parsers import MasterDataParser, PokemonIdCollisionError
from .renderers import PokemonRenderer

__version__ = "1.0.0"
__all__ = ["ApiConfig", "MasterDataParser", "PokemonIdCollisionError", "PokemonRenderer"]
