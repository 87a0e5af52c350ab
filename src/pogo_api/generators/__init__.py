"""
Generators for running the full game master to API pipeline.
"""

from .api_generator import ApiGenerator

__all__ = ["ApiGenerator"]
