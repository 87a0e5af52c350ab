"""Parsers for classifying and linking game master records."""

from .master_data_parser import MasterDataParser, ParseSummary, PokemonIdCollisionError
from .record_classifier import ClassifiedRecord, RecordKind, classify_record, classify_records

__all__ = [
    "MasterDataParser",
    "ParseSummary",
    "PokemonIdCollisionError",
    "ClassifiedRecord",
    "RecordKind",
    "classify_record",
    "classify_records",
]
