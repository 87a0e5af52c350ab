"""
Parser that turns the game master export into linked creature and move collections.

The parser classifies every record once and then runs five passes in a fixed
order:

1. moves
2. creatures (folding regional and cosmetic variants into their base entry)
3. combat move overlays onto moves
4. temporary evolution asset ids onto creatures
5. forms onto creatures and their regional variants

A pass never needs results of a later pass. Overlays are matched through the
numeric key embedded in their template id, so they may appear anywhere in the
input. Records that match a template but lack the expected payload are
skipped; the only fatal conditions are an unreadable input document and two
top-level creatures sharing the same id and form.
"""

import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from pogo_api.parsers.record_classifier import ClassifiedRecord, RecordKind, classify_records
from pogo_api.utils.core.config_registry import get_config, has_config
from pogo_api.utils.core.loader import GameMasterLoader
from pogo_api.utils.core.logger import LogContext, get_logger
from pogo_api.utils.data.collections import AttacksCollection, PokemonCollection
from pogo_api.utils.data.constants import (
    NORMAL_FORM_SUFFIX,
    SUPPRESSED_FORM_MARKERS,
    SUPPRESSED_FORM_SUFFIX_PATTERN,
    TEMP_EVOLUTION_PREFIX_LENGTH,
)
from pogo_api.utils.data.models import (
    Pokemon,
    PokemonCombatMove,
    PokemonFormCollection,
    PokemonMove,
)

logger = get_logger(__name__)

_SUPPRESSED_SUFFIX_RE = re.compile(SUPPRESSED_FORM_SUFFIX_PATTERN)

# Errors raised by the entity constructors for payloads missing required fields
_PAYLOAD_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


class PokemonIdCollisionError(ValueError):
    """Raised when two top-level creature records share the same id and form id."""

    def __init__(self, pokemon_id: str, form_id: str):
        super().__init__(f"Pokemon '{pokemon_id}' with form '{form_id}' was declared twice")
        self.pokemon_id = pokemon_id
        self.form_id = form_id


@dataclass
class ParseSummary:
    """Counters collected during a parser run."""

    records: int = 0
    classified: dict[str, int] = field(default_factory=dict)
    moves_added: int = 0
    moves_skipped: int = 0
    pokemon_added: int = 0
    pokemon_skipped: int = 0
    region_forms_added: int = 0
    variants_dropped: int = 0
    combat_moves_linked: int = 0
    combat_moves_skipped: int = 0
    temporary_evolutions_linked: int = 0
    temporary_evolutions_skipped: int = 0
    forms_linked: int = 0
    forms_skipped: int = 0


def is_suppressed_variant(form_id: str) -> bool:
    """Check whether a form id marks a cosmetic copy of a species.

    Shadow, purified, normal and copy entries as well as numbered costume
    entries (e.g. ``PIKACHU_2019``) are never top-level creatures.

    Args:
        form_id (str): The form id of a creature record

    Returns:
        bool: True if the creature must be folded into its base entry
    """
    if any(marker in form_id for marker in SUPPRESSED_FORM_MARKERS):
        return True
    return _SUPPRESSED_SUFFIX_RE.search(form_id) is not None


def _payload(classified: ClassifiedRecord, settings_key: str) -> Optional[dict[str, Any]]:
    """Get the payload of a record if it carries a non-empty settings object.

    The template id is copied into the payload when the export omits it there,
    so entity constructors can always read it.
    """
    data = classified.data
    if not isinstance(data, dict) or not data.get(settings_key):
        return None
    if "templateId" not in data:
        data = {**data, "templateId": classified.template_id}
    return data


class MasterDataParser:
    """
    Builds the creature and move collections from game master records.

    Each parser instance owns its collections for the duration of a run.
    Callers should treat the collections as read-only once parsing completes.
    """

    def __init__(self, config=None, merge_orphan_variants: Optional[bool] = None):
        """Initialize the parser.

        Args:
            config: ApiConfig instance. If None, the global config is used when set.
            merge_orphan_variants (Optional[bool], optional): Group entries by
                species before folding variants, independent of record order.
                Defaults to the config value, or False without a config.
        """
        if config is None and has_config():
            config = get_config()
        self.config = config

        if merge_orphan_variants is None:
            merge_orphan_variants = bool(config.merge_orphan_variants) if config is not None else False
        self.merge_orphan_variants = merge_orphan_variants

        self.pokemon_collection = PokemonCollection()
        self.attacks_collection = AttacksCollection()
        self.summary = ParseSummary()

    def parse_file(self, game_master_file: Path) -> ParseSummary:
        """Load a game master file and parse its records.

        Args:
            game_master_file (Path): Path to the game master JSON file

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a JSON array of records
            PokemonIdCollisionError: If a creature is declared twice

        Returns:
            ParseSummary: Counters of the run
        """
        records = GameMasterLoader.load_records(Path(game_master_file))
        return self.parse_records(records)

    def parse_records(self, records: list[Any]) -> ParseSummary:
        """Parse game master records into linked collections.

        Args:
            records (list[Any]): The game master records in file order

        Raises:
            PokemonIdCollisionError: If a creature is declared twice

        Returns:
            ParseSummary: Counters of the run
        """
        self.summary = ParseSummary(records=len(records))

        with LogContext(logger, f"parsing {len(records)} game master records"):
            classified = classify_records(records)
            self.summary.classified = {kind.value: len(items) for kind, items in classified.items()}
            logger.debug(f"Classified records: {self.summary.classified}")

            self.attacks_collection = self._parse_moves(classified[RecordKind.MOVE])
            self.pokemon_collection = self._parse_pokemon(classified[RecordKind.POKEMON])

            self._add_combat_moves(classified[RecordKind.COMBAT_MOVE], self.attacks_collection)
            self._add_temporary_evolutions(
                classified[RecordKind.TEMPORARY_EVOLUTION], self.pokemon_collection
            )
            self._add_forms(classified[RecordKind.FORMS], self.pokemon_collection)

        logger.info(
            f"Parsed {len(self.pokemon_collection)} pokemon and {len(self.attacks_collection)} moves",
            extra={"summary": asdict(self.summary)},
        )
        return self.summary

    def get_attacks_collection(self) -> AttacksCollection:
        return self.attacks_collection

    def get_pokemon_collection(self) -> PokemonCollection:
        return self.pokemon_collection

    def _parse_moves(self, records: list[ClassifiedRecord]) -> AttacksCollection:
        """Construct a move for every move record."""
        attacks_collection = AttacksCollection()

        for classified in records:
            payload = _payload(classified, "moveSettings")
            if payload is None:
                self.summary.moves_skipped += 1
                continue

            try:
                move = PokemonMove.from_game_master(payload)
            except _PAYLOAD_ERRORS as e:
                logger.debug(f"Skipping move record {classified.template_id}: {e}")
                self.summary.moves_skipped += 1
                continue

            if move.id in attacks_collection:
                logger.warning(f"Duplicate move id {move.id} in {classified.template_id}, skipping")
                self.summary.moves_skipped += 1
                continue

            attacks_collection.add(move)
            self.summary.moves_added += 1

        logger.debug(f"Added {self.summary.moves_added} moves")
        return attacks_collection

    def _parse_pokemon(self, records: list[ClassifiedRecord]) -> PokemonCollection:
        """Construct creatures and fold variants into their base entries.

        Raises:
            PokemonIdCollisionError: If two top-level records share id and form id
        """
        constructed: list[Pokemon] = []

        for classified in records:
            payload = _payload(classified, "pokemonSettings")
            if payload is None:
                self.summary.pokemon_skipped += 1
                continue

            try:
                constructed.append(Pokemon.from_game_master(payload))
            except _PAYLOAD_ERRORS as e:
                logger.debug(f"Skipping pokemon record {classified.template_id}: {e}")
                self.summary.pokemon_skipped += 1

        if self.merge_orphan_variants:
            pokemon_collection = self._fold_by_species(constructed)
        else:
            pokemon_collection = self._fold_in_order(constructed)

        logger.debug(
            f"Added {self.summary.pokemon_added} pokemon with {self.summary.region_forms_added} region forms"
        )
        return pokemon_collection

    def _fold_in_order(self, constructed: list[Pokemon]) -> PokemonCollection:
        """Fold variants in a single forward pass.

        The first non-variant entry of a species becomes its base. Variants
        listed before that base are dropped.
        """
        pokemon_collection = PokemonCollection()

        for pokemon in constructed:
            base_pokemon = pokemon_collection.get(pokemon.id)

            if is_suppressed_variant(pokemon.form_id):
                if base_pokemon is None:
                    logger.debug(f"Dropping variant {pokemon.form_id}: base '{pokemon.id}' not seen yet")
                    self.summary.variants_dropped += 1
                    continue
                base_pokemon.add_pokemon_region_form(pokemon)
                self.summary.region_forms_added += 1
                continue

            if base_pokemon is not None:
                self._add_region_form(base_pokemon, pokemon)
                continue

            pokemon_collection.add(pokemon)
            self.summary.pokemon_added += 1

        return pokemon_collection

    def _fold_by_species(self, constructed: list[Pokemon]) -> PokemonCollection:
        """Fold variants after grouping all entries by species id.

        The base of a species is the entry whose form id equals the species id,
        falling back to its first non-variant entry. The result does not
        depend on where the base appears among its variants. Species with
        only variant entries are dropped.
        """
        species: dict[str, list[Pokemon]] = {}
        for pokemon in constructed:
            species.setdefault(pokemon.id, []).append(pokemon)

        pokemon_collection = PokemonCollection()

        for pokemon_id, entries in species.items():
            candidates = [pokemon for pokemon in entries if not is_suppressed_variant(pokemon.form_id)]
            if not candidates:
                logger.debug(f"Dropping {len(entries)} variants: no base '{pokemon_id}'")
                self.summary.variants_dropped += len(entries)
                continue

            base_pokemon = next(
                (pokemon for pokemon in candidates if pokemon.form_id == pokemon_id), candidates[0]
            )
            pokemon_collection.add(base_pokemon)
            self.summary.pokemon_added += 1

            for pokemon in entries:
                if pokemon is base_pokemon:
                    continue
                self._add_region_form(base_pokemon, pokemon)

        return pokemon_collection

    def _add_region_form(self, base_pokemon: Pokemon, pokemon: Pokemon) -> None:
        """Append a variant of the same species to its base.

        Raises:
            PokemonIdCollisionError: If the variant repeats the base's form id
        """
        if base_pokemon.form_id == pokemon.form_id:
            logger.error(f"Pokemon '{pokemon.id}' with form '{pokemon.form_id}' declared twice")
            raise PokemonIdCollisionError(pokemon.id, pokemon.form_id)

        # Same species under a new form id: a regional form such as RATTATA_ALOLA
        base_pokemon.add_pokemon_region_form(pokemon)
        self.summary.region_forms_added += 1

    def _add_combat_moves(
        self, records: list[ClassifiedRecord], attacks_collection: AttacksCollection
    ) -> None:
        """Attach combat overlays to the moves sharing their move number."""
        for classified in records:
            payload = _payload(classified, "combatMove")
            combat_move = payload["combatMove"] if payload is not None else None
            if not isinstance(combat_move, dict) or "power" not in combat_move:
                self.summary.combat_moves_skipped += 1
                continue

            move = attacks_collection.get_by_id(classified.numeric_key)
            if move is None:
                logger.debug(f"No move {classified.numeric_key} for {classified.template_id}")
                self.summary.combat_moves_skipped += 1
                continue

            try:
                move.set_combat_move(PokemonCombatMove.from_game_master(payload))
            except _PAYLOAD_ERRORS as e:
                logger.debug(f"Skipping combat move record {classified.template_id}: {e}")
                self.summary.combat_moves_skipped += 1
                continue

            self.summary.combat_moves_linked += 1

    def _add_temporary_evolutions(
        self, records: list[ClassifiedRecord], pokemon_collection: PokemonCollection
    ) -> None:
        """Set asset bundle ids on the temporary evolutions creatures declared."""
        for classified in records:
            payload = _payload(classified, "temporaryEvolutionSettings")
            pokemon = pokemon_collection.get_by_dex_id(classified.numeric_key)
            if payload is None or pokemon is None:
                self.summary.temporary_evolutions_skipped += 1
                continue

            temporary_evolutions = {
                temporary_evolution.id: temporary_evolution
                for temporary_evolution in pokemon.temporary_evolutions
            }

            settings = payload["temporaryEvolutionSettings"]
            entries = settings.get("temporaryEvolutions") if isinstance(settings, dict) else None
            if not isinstance(entries, list):
                logger.debug(f"Skipping temporary evolution record {classified.template_id}: no entries")
                self.summary.temporary_evolutions_skipped += 1
                continue

            for entry in entries:
                temporary_evolution_id = entry.get("temporaryEvolutionId") if isinstance(entry, dict) else None
                if not isinstance(temporary_evolution_id, str):
                    self.summary.temporary_evolutions_skipped += 1
                    continue

                # e.g. VENUSAUR + TEMP_EVOLUTION_MEGA[14:] -> VENUSAUR_MEGA
                key = pokemon.id + temporary_evolution_id[TEMP_EVOLUTION_PREFIX_LENGTH:]
                temporary_evolution = temporary_evolutions.get(key)
                if temporary_evolution is None:
                    logger.debug(f"Pokemon '{pokemon.id}' declares no temporary evolution '{key}'")
                    self.summary.temporary_evolutions_skipped += 1
                    continue

                try:
                    asset_bundle_id = int(entry.get("assetBundleValue", 0))
                except _PAYLOAD_ERRORS as e:
                    logger.debug(f"Skipping temporary evolution '{key}' in {classified.template_id}: {e}")
                    self.summary.temporary_evolutions_skipped += 1
                    continue

                temporary_evolution.set_asset_bundle_id(asset_bundle_id)
                self.summary.temporary_evolutions_linked += 1

    def _add_forms(self, records: list[ClassifiedRecord], pokemon_collection: PokemonCollection) -> None:
        """Assign forms to creatures and to their regional variants."""
        for classified in records:
            payload = _payload(classified, "formSettings")
            pokemon = pokemon_collection.get_by_dex_id(classified.numeric_key)
            if payload is None or pokemon is None:
                self.summary.forms_skipped += 1
                continue

            try:
                form_collection = PokemonFormCollection.from_game_master(payload)
            except _PAYLOAD_ERRORS as e:
                logger.debug(f"Skipping form record {classified.template_id}: {e}")
                self.summary.forms_skipped += 1
                continue

            for pokemon_form in form_collection.pokemon_forms:
                if pokemon_form.id == pokemon.id + NORMAL_FORM_SUFFIX:
                    pokemon.set_pokemon_form(pokemon_form)
                    self.summary.forms_linked += 1
                    continue

                region_form = next(
                    (
                        region_form
                        for region_form in pokemon.pokemon_region_forms
                        if region_form.form_id == pokemon_form.id
                    ),
                    None,
                )
                if region_form is None:
                    self.summary.forms_skipped += 1
                    continue

                region_form.set_pokemon_form(pokemon_form)
                self.summary.forms_linked += 1
