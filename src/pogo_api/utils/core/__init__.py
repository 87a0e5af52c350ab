"""Core infrastructure utilities."""

from .initializer import GameMasterInitializer
from .loader import GameMasterLoader
from .logger import LogContext, get_logger
from .writer import JsonBlobWriter

__all__ = [
    "get_logger",
    "LogContext",
    "GameMasterInitializer",
    "GameMasterLoader",
    "JsonBlobWriter",
]
