"""Pokemon-specific domain utilities."""

from .collections import AttacksCollection, PokemonCollection
from .models import (
    Pokemon,
    PokemonCombatMove,
    PokemonCombatMoveBuffs,
    PokemonForm,
    PokemonFormCollection,
    PokemonMove,
    PokemonStats,
    PokemonType,
    TemporaryEvolution,
)
from .pokemon import determine_generation, get_asset_image_url
from .translations import TranslationCollection

__all__ = [
    # Collections
    "AttacksCollection",
    "PokemonCollection",
    # Pokemon calculations
    "determine_generation",
    "get_asset_image_url",
    # Models
    "Pokemon",
    "PokemonCombatMove",
    "PokemonCombatMoveBuffs",
    "PokemonForm",
    "PokemonFormCollection",
    "PokemonMove",
    "PokemonStats",
    "PokemonType",
    "TemporaryEvolution",
    # Translations
    "TranslationCollection",
]
