"""
Per-language translation tables used by the renderer.

A translation table is stored as one JSON file per language:

    {
        "language_name": "English",
        "pokemon_names": {"3": ["Venusaur", "Mega Venusaur"]},
        "type_names": {"Grass": "Grass"},
        "move_names": {"21": "Flame Wheel"},
        "form_names": {"ALOLA": "Alolan Form"}
    }

JSON object keys are always strings, so numeric keys are normalized to strings
on lookup. Unknown keys return None (or an empty list for creature names).
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class TranslationCollection:
    """Translated names for one language."""

    language_name: str
    pokemon_names: dict[str, list[str]] = field(default_factory=dict)
    type_names: dict[str, str] = field(default_factory=dict)
    move_names: dict[str, str] = field(default_factory=dict)
    form_names: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Validate the language name."""
        if not isinstance(self.language_name, str) or not self.language_name.strip():
            raise ValueError(f"language_name must be a non-empty string, got: {self.language_name}")

    def get_language_name(self) -> str:
        return self.language_name

    def get_pokemon_names(self, dex_nr: int) -> list[str]:
        """Get the candidate names for a dex number.

        Index 0 is the creature's own name; further entries name its
        temporary evolutions in declaration order.

        Args:
            dex_nr (int): The national dex number

        Returns:
            list[str]: The names, or an empty list if there is no translation
        """
        return list(self.pokemon_names.get(str(dex_nr), []))

    def get_pokemon_name(self, dex_nr: int, index: int = 0) -> Optional[str]:
        """Get a single candidate name by position, or None if there is none."""
        names = self.pokemon_names.get(str(dex_nr), [])
        if 0 <= index < len(names):
            return names[index]
        return None

    def get_type_name(self, type_name: str) -> Optional[str]:
        return self.type_names.get(type_name)

    def get_move_name(self, move_id: int) -> Optional[str]:
        return self.move_names.get(str(move_id))

    def get_pokemon_form_name(self, form_type: str, form_id: str) -> Optional[str]:
        """Get a form name, preferring the full form id over the bare form type.

        Args:
            form_type (str): The variant suffix without species id (e.g. "ALOLA")
            form_id (str): The full form id (e.g. "RATTATA_ALOLA")

        Returns:
            Optional[str]: The translated form name, or None if there is no translation
        """
        if form_id in self.form_names:
            return self.form_names[form_id]
        return self.form_names.get(form_type)
