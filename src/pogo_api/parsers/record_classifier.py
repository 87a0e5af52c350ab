"""
Classification of game master records by their template id.

Each record is matched once against an ordered table of templates. The result
is a ClassifiedRecord carrying the record kind, the numeric key and name
fragment embedded in the template id, and the raw record. Records that match
no template are not an error; they are simply not classified.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from pogo_api.utils.data.constants import (
    COMBAT_MOVE_TEMPLATE,
    FORMS_TEMPLATE,
    MOVE_TEMPLATE,
    POKEMON_TEMPLATE,
    TEMPORARY_EVOLUTION_TEMPLATE,
)


class RecordKind(Enum):
    """The record shapes the parser understands."""

    POKEMON = "pokemon"
    MOVE = "move"
    COMBAT_MOVE = "combat_move"
    TEMPORARY_EVOLUTION = "temporary_evolution"
    FORMS = "forms"


# First match wins; the literal prefixes keep the templates disjoint
TEMPLATES: tuple[tuple[RecordKind, re.Pattern[str]], ...] = (
    (RecordKind.POKEMON, re.compile(POKEMON_TEMPLATE, re.IGNORECASE)),
    (RecordKind.MOVE, re.compile(MOVE_TEMPLATE, re.IGNORECASE)),
    (RecordKind.COMBAT_MOVE, re.compile(COMBAT_MOVE_TEMPLATE, re.IGNORECASE)),
    (RecordKind.TEMPORARY_EVOLUTION, re.compile(TEMPORARY_EVOLUTION_TEMPLATE, re.IGNORECASE)),
    (RecordKind.FORMS, re.compile(FORMS_TEMPLATE, re.IGNORECASE)),
)


@dataclass(slots=True, frozen=True)
class ClassifiedRecord:
    """A record together with what its template id says about it."""

    kind: RecordKind
    numeric_key: int
    name: str
    record: dict[str, Any]

    @property
    def template_id(self) -> str:
        return self.record["templateId"]

    @property
    def data(self) -> Any:
        """The record payload, or None if the record has none."""
        return self.record.get("data")


def classify_template_id(template_id: str) -> Optional[tuple[RecordKind, int, str]]:
    """Classify a template id.

    Args:
        template_id (str): The template id, e.g. "V0021_MOVE_FLAME_WHEEL"

    Returns:
        Optional[tuple[RecordKind, int, str]]: (kind, numeric key, name fragment),
            or None if no template matches
    """
    for kind, pattern in TEMPLATES:
        match = pattern.match(template_id)
        if match is not None:
            return kind, int(match.group("numeric_key")), match.group("name")
    return None


def classify_record(record: Any) -> Optional[ClassifiedRecord]:
    """Classify a single game master record.

    Args:
        record (Any): One element of the game master array

    Returns:
        Optional[ClassifiedRecord]: The classification, or None for records
            without a string template id or matching no template
    """
    if not isinstance(record, dict):
        return None

    template_id = record.get("templateId")
    if not isinstance(template_id, str):
        return None

    classification = classify_template_id(template_id)
    if classification is None:
        return None

    kind, numeric_key, name = classification
    return ClassifiedRecord(kind=kind, numeric_key=numeric_key, name=name, record=record)


def classify_records(records: Iterable[Any]) -> dict[RecordKind, list[ClassifiedRecord]]:
    """Classify all records once, grouped by kind in input order.

    Args:
        records (Iterable[Any]): The game master records

    Returns:
        dict[RecordKind, list[ClassifiedRecord]]: Classified records per kind;
            every kind is present, possibly with an empty list
    """
    grouped: dict[RecordKind, list[ClassifiedRecord]] = {kind: [] for kind in RecordKind}

    for record in records:
        classified = classify_record(record)
        if classified is not None:
            grouped[classified.kind].append(classified)

    return grouped
