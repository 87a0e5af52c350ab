"""Renderers for creating the API structure from parsed collections."""

from .pokemon_renderer import PokemonRenderer

__all__ = ["PokemonRenderer"]
