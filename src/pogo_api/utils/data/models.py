"""
Game master data structures for creatures, moves and their overlays.

This module defines dataclasses that correspond to the record payloads of the
game master export. Each entity offers a ``from_game_master`` constructor that
reads the raw payload dict; missing required fields raise ``KeyError`` or
``ValueError`` and are treated by the parser as "record does not apply".

Entities are fixed in identity (id, dex number) once constructed. Only the
overlay fields (combat move, asset bundle id, form, regional forms) are filled
in by later parser passes.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from pogo_api.utils.data.constants import (
    FAST_MOVE_SUFFIX,
    MOVE_TEMPLATE,
    POKEMON_TEMPLATE,
    POKEMON_TYPE_PREFIX,
    TEMP_EVOLUTION_PREFIX_LENGTH,
)

_POKEMON_TEMPLATE_RE = re.compile(POKEMON_TEMPLATE, re.IGNORECASE)
_MOVE_TEMPLATE_RE = re.compile(MOVE_TEMPLATE, re.IGNORECASE)


# region Value Types
@dataclass(slots=True, frozen=True)
class PokemonType:
    """Represents an elemental type (e.g., POKEMON_TYPE_FIRE)."""

    game_master_type_name: str

    def __post_init__(self):
        """Validate the type name."""
        if not isinstance(self.game_master_type_name, str) or not self.game_master_type_name.startswith(
            POKEMON_TYPE_PREFIX
        ):
            raise ValueError(
                f"type must be a string starting with {POKEMON_TYPE_PREFIX}, got: {self.game_master_type_name}"
            )

    @classmethod
    def create(cls, game_master_type_name: str) -> "PokemonType":
        """Create a PokemonType from its game master name."""
        return cls(game_master_type_name)

    @property
    def type_name(self) -> str:
        """The canonical type id without prefix, e.g. "Fire"."""
        return self.game_master_type_name[len(POKEMON_TYPE_PREFIX) :].capitalize()


@dataclass(slots=True)
class PokemonStats:
    """Represents the base stats of a creature."""

    stamina: int
    attack: int
    defense: int

    def __post_init__(self):
        """Validate stats are non-negative integers."""
        for field_name in ("stamina", "attack", "defense"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{field_name} must be a non-negative integer, got: {value}")

    @classmethod
    def from_game_master(cls, stats: Optional[dict[str, Any]]) -> Optional["PokemonStats"]:
        """Create stats from a ``stats`` payload.

        Entries that are not released yet carry an empty stats object, for
        which None is returned.
        """
        if not isinstance(stats, dict) or "baseStamina" not in stats:
            return None
        return cls(
            stamina=stats["baseStamina"],
            attack=stats.get("baseAttack", 0),
            defense=stats.get("baseDefense", 0),
        )

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary."""
        return {"stamina": self.stamina, "attack": self.attack, "defense": self.defense}


# endregion


# region Move Structure
@dataclass(slots=True)
class PokemonCombatMoveBuffs:
    """Stat stage changes a combat move may apply."""

    activation_chance: int
    attacker_attack_stat_stage_change: Optional[int] = None
    attacker_defense_stat_stage_change: Optional[int] = None
    target_attack_stat_stage_change: Optional[int] = None
    target_defense_stat_stage_change: Optional[int] = None

    def __post_init__(self):
        if not 0 <= self.activation_chance <= 100:
            raise ValueError(
                f"activation_chance must be between 0 and 100, got: {self.activation_chance}"
            )

    @classmethod
    def from_game_master(cls, buffs: dict[str, Any]) -> "PokemonCombatMoveBuffs":
        """Create buffs from a ``combatMove.buffs`` payload.

        The activation chance is stored as a fraction and converted to percent.
        """
        return cls(
            activation_chance=int(round(buffs.get("buffActivationChance", 0) * 100)),
            attacker_attack_stat_stage_change=buffs.get("attackerAttackStatStageChange"),
            attacker_defense_stat_stage_change=buffs.get("attackerDefenseStatStageChange"),
            target_attack_stat_stage_change=buffs.get("targetAttackStatStageChange"),
            target_defense_stat_stage_change=buffs.get("targetDefenseStatStageChange"),
        )


@dataclass(slots=True)
class PokemonCombatMove:
    """Trainer battle overlay of a move (power, energy and buffs)."""

    power: float
    energy: float
    buffs: Optional[PokemonCombatMoveBuffs] = None

    @classmethod
    def from_game_master(cls, data: dict[str, Any]) -> "PokemonCombatMove":
        """Create a combat move from a ``COMBAT_V####_MOVE_*`` record payload.

        Raises:
            KeyError: If the payload has no ``combatMove.power``.
        """
        combat_move = data["combatMove"]
        buffs = None
        if isinstance(combat_move.get("buffs"), dict):
            buffs = PokemonCombatMoveBuffs.from_game_master(combat_move["buffs"])

        return cls(
            power=float(combat_move["power"]),
            energy=float(combat_move.get("energyDelta", 0)),
            buffs=buffs,
        )


@dataclass(slots=True)
class PokemonMove:
    """Represents a move (e.g., FLAME_WHEEL)."""

    id: int
    name: str
    pokemon_type: PokemonType
    duration_ms: float
    is_fast: bool
    power: float
    energy: float
    combat_move: Optional[PokemonCombatMove] = None

    def __post_init__(self):
        """Validate move fields."""
        if not isinstance(self.id, int) or self.id < 0:
            raise ValueError(f"id must be a non-negative integer, got: {self.id}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"name must be a non-empty string, got: {self.name}")
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be non-negative, got: {self.duration_ms}")

    @classmethod
    def from_game_master(cls, data: dict[str, Any]) -> "PokemonMove":
        """Create a move from a ``V####_MOVE_*`` record payload.

        Args:
            data (dict[str, Any]): The ``data`` object of the record, holding
                ``templateId`` and ``moveSettings``.

        Raises:
            KeyError: If ``moveSettings`` or its type is missing.
            ValueError: If the template id is not a move template.

        Returns:
            PokemonMove: The constructed move.
        """
        match = _MOVE_TEMPLATE_RE.match(data["templateId"])
        if match is None:
            raise ValueError(f"Not a move template: {data['templateId']}")

        move_settings = data["moveSettings"]
        name = match.group("name").upper()

        return cls(
            id=int(match.group("numeric_key")),
            name=name,
            pokemon_type=PokemonType.create(move_settings["pokemonType"]),
            duration_ms=float(move_settings.get("durationMs", 0)),
            is_fast=name.endswith(FAST_MOVE_SUFFIX),
            power=float(move_settings.get("power", 0)),
            energy=float(move_settings.get("energyDelta", 0)),
        )

    def set_combat_move(self, combat_move: PokemonCombatMove) -> None:
        """Attach the combat overlay, replacing any previous one."""
        self.combat_move = combat_move


# endregion


# region Pokemon Structure
# region Pokemon Helper Classes
@dataclass(slots=True)
class PokemonForm:
    """A visual variant of a creature (e.g., RATTATA_ALOLA)."""

    id: str
    asset_bundle_value: int = 0
    asset_bundle_suffix: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError(f"id must be a non-empty string, got: {self.id}")

    @classmethod
    def from_game_master(cls, form: dict[str, Any]) -> "PokemonForm":
        """Create a form from one ``formSettings.forms`` entry."""
        return cls(
            id=form["form"],
            asset_bundle_value=int(form.get("assetBundleValue", 0)),
            asset_bundle_suffix=form.get("assetBundleSuffix"),
        )


@dataclass(slots=True)
class PokemonFormCollection:
    """All forms declared by a ``FORMS_V####_POKEMON_*`` record."""

    pokemon_id: str
    pokemon_forms: list[PokemonForm] = field(default_factory=list)

    @classmethod
    def from_game_master(cls, data: dict[str, Any]) -> "PokemonFormCollection":
        """Create the collection from a form record payload.

        Entries without a ``form`` id (e.g. costume-only flags) and entries
        with an unusable form id or asset bundle value are skipped; the
        remaining forms of the record are kept.

        Raises:
            KeyError: If ``formSettings`` is missing.
            TypeError: If ``forms`` is not a list.
        """
        form_settings = data["formSettings"]
        forms = []
        for form in form_settings.get("forms", []):
            if not isinstance(form, dict) or not form.get("form"):
                continue
            try:
                forms.append(PokemonForm.from_game_master(form))
            except (TypeError, ValueError):
                continue
        return cls(pokemon_id=form_settings.get("pokemon", ""), pokemon_forms=forms)


@dataclass(slots=True)
class TemporaryEvolution:
    """A temporary (mega) evolution declared in a creature's ``tempEvoOverrides``."""

    id: str
    type_primary: PokemonType
    type_secondary: Optional[PokemonType] = None
    stats: Optional[PokemonStats] = None
    asset_bundle_id: int = 0

    @classmethod
    def from_game_master(cls, override: dict[str, Any], pokemon_id: str) -> "TemporaryEvolution":
        """Create a temporary evolution from one ``tempEvoOverrides`` entry.

        The id is the owning species id followed by the evolution id without
        its ``TEMP_EVOLUTION`` prefix, e.g. ``VENUSAUR`` + ``_MEGA``.

        Raises:
            KeyError: If ``tempEvoId`` or ``typeOverride1`` is missing.
        """
        type_secondary = None
        if override.get("typeOverride2"):
            type_secondary = PokemonType.create(override["typeOverride2"])

        return cls(
            id=pokemon_id + override["tempEvoId"][TEMP_EVOLUTION_PREFIX_LENGTH:],
            type_primary=PokemonType.create(override["typeOverride1"]),
            type_secondary=type_secondary,
            stats=PokemonStats.from_game_master(override.get("stats")),
        )

    def set_asset_bundle_id(self, asset_bundle_id: int) -> None:
        self.asset_bundle_id = asset_bundle_id


# endregion Pokemon Helper Classes


@dataclass(slots=True)
class Pokemon:
    """Represents a creature entry (e.g., VENUSAUR or RATTATA_ALOLA)."""

    dex_nr: int
    id: str
    form_id: str
    type_primary: PokemonType
    type_secondary: Optional[PokemonType] = None
    stats: Optional[PokemonStats] = None
    quick_move_names: list[str] = field(default_factory=list)
    cinematic_move_names: list[str] = field(default_factory=list)
    elite_quick_move_names: list[str] = field(default_factory=list)
    elite_cinematic_move_names: list[str] = field(default_factory=list)
    temporary_evolutions: list[TemporaryEvolution] = field(default_factory=list)
    pokemon_form: Optional[PokemonForm] = None
    pokemon_region_forms: list["Pokemon"] = field(default_factory=list)

    def __post_init__(self):
        """Validate Pokemon fields."""
        if not isinstance(self.dex_nr, int) or self.dex_nr < 0:
            raise ValueError(f"dex_nr must be a non-negative integer, got: {self.dex_nr}")
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError(f"id must be a non-empty string, got: {self.id}")
        if not isinstance(self.form_id, str) or not self.form_id.strip():
            raise ValueError(f"form_id must be a non-empty string, got: {self.form_id}")

    @classmethod
    def from_game_master(cls, data: dict[str, Any]) -> "Pokemon":
        """Create a creature from a ``V####_POKEMON_*`` record payload.

        Args:
            data (dict[str, Any]): The ``data`` object of the record, holding
                ``templateId`` and ``pokemonSettings``.

        Raises:
            KeyError: If ``pokemonSettings``, its ``pokemonId`` or ``type`` is missing.
            ValueError: If the template id is not a creature template.

        Returns:
            Pokemon: The constructed creature, without overlays.
        """
        match = _POKEMON_TEMPLATE_RE.match(data["templateId"])
        if match is None:
            raise ValueError(f"Not a pokemon template: {data['templateId']}")

        settings = data["pokemonSettings"]
        pokemon_id = settings["pokemonId"]

        type_secondary = None
        if settings.get("type2"):
            type_secondary = PokemonType.create(settings["type2"])

        temporary_evolutions = [
            TemporaryEvolution.from_game_master(override, pokemon_id)
            for override in settings.get("tempEvoOverrides", [])
            if isinstance(override, dict) and override.get("tempEvoId")
        ]

        return cls(
            dex_nr=int(match.group("numeric_key")),
            id=pokemon_id,
            form_id=match.group("name").upper(),
            type_primary=PokemonType.create(settings["type"]),
            type_secondary=type_secondary,
            stats=PokemonStats.from_game_master(settings.get("stats")),
            quick_move_names=list(settings.get("quickMoves", [])),
            cinematic_move_names=list(settings.get("cinematicMoves", [])),
            elite_quick_move_names=list(settings.get("eliteQuickMove", [])),
            elite_cinematic_move_names=list(settings.get("eliteCinematicMove", [])),
            temporary_evolutions=temporary_evolutions,
        )

    @property
    def has_temporary_evolutions(self) -> bool:
        return len(self.temporary_evolutions) > 0

    def set_pokemon_form(self, pokemon_form: PokemonForm) -> None:
        """Assign the visual form record of this entry."""
        self.pokemon_form = pokemon_form

    def add_pokemon_region_form(self, pokemon_region_form: "Pokemon") -> None:
        """Fold a regional or cosmetic variant into this base entry."""
        self.pokemon_region_forms.append(pokemon_region_form)


# endregion
