"""
Renderer that turns parsed creatures into the public API structure.

The renderer is read-only: it never mutates the creatures, moves or
translation tables it is given.
"""

from typing import Any, Optional

from pogo_api.utils.data.collections import AttacksCollection, PokemonCollection
from pogo_api.utils.data.constants import ASSETS_BASE_URL
from pogo_api.utils.data.models import Pokemon, PokemonForm, PokemonType
from pogo_api.utils.data.pokemon import determine_generation, get_asset_image_url
from pogo_api.utils.data.translations import TranslationCollection


class PokemonRenderer:
    """Renders creatures with localized names, moves, forms and evolutions."""

    def __init__(
        self,
        translations: list[TranslationCollection],
        assets_base_url: str = ASSETS_BASE_URL,
    ):
        """Initialize the renderer.

        Args:
            translations (list[TranslationCollection]): One table per output language
            assets_base_url (str, optional): URL template for asset images.
        """
        self.translations = translations
        self.assets_base_url = assets_base_url

    def render_all(
        self, pokemon_collection: PokemonCollection, attacks_collection: AttacksCollection
    ) -> dict[str, dict[str, Any]]:
        """Render every top-level creature, keyed by creature id."""
        return {
            pokemon.id: self.render(pokemon, attacks_collection) for pokemon in pokemon_collection
        }

    def render(self, pokemon: Pokemon, attacks_collection: AttacksCollection) -> dict[str, Any]:
        """Render a single creature, including its regional variants.

        Args:
            pokemon (Pokemon): The creature to render
            attacks_collection (AttacksCollection): Moves used to resolve move names

        Returns:
            dict[str, Any]: The API structure of the creature
        """
        names = {
            translation.get_language_name(): translation.get_pokemon_name(pokemon.dex_nr, 0)
            for translation in self.translations
        }

        forms = [pokemon.pokemon_form] if pokemon.pokemon_form is not None else []
        asset_bundle_id = forms[0].asset_bundle_value if forms else 0

        return {
            "id": pokemon.id,
            "formId": pokemon.form_id,
            "dexNr": pokemon.dex_nr,
            "generation": determine_generation(pokemon.dex_nr),
            "names": names,
            "stats": pokemon.stats.to_dict() if pokemon.stats is not None else None,
            "primaryType": self._render_type(pokemon.type_primary),
            "secondaryType": self._render_type(pokemon.type_secondary),
            "quickMoves": self._render_attacks(pokemon.quick_move_names, attacks_collection),
            "cinematicMoves": self._render_attacks(pokemon.cinematic_move_names, attacks_collection),
            "eliteQuickMoves": self._render_attacks(pokemon.elite_quick_move_names, attacks_collection),
            "eliteCinematicMoves": self._render_attacks(
                pokemon.elite_cinematic_move_names, attacks_collection
            ),
            "assets": {"image": self._image_url(pokemon.dex_nr, asset_bundle_id)},
            "forms": self._render_forms(pokemon, forms),
            "regionForms": [
                self.render(region_form, attacks_collection)
                for region_form in pokemon.pokemon_region_forms
            ],
            "hasMegaEvolution": pokemon.has_temporary_evolutions,
            "megaEvolutions": self._render_mega_evolutions(pokemon),
        }

    def _image_url(self, dex_nr: int, asset_bundle_id: int) -> str:
        return get_asset_image_url(dex_nr, asset_bundle_id, self.assets_base_url)

    def _render_mega_evolutions(self, pokemon: Pokemon) -> dict[str, dict[str, Any]]:
        """Render temporary evolutions with their overflow names.

        Evolution ``i`` is named by entry ``i + 1`` of the dex number's name
        list, entry 0 being the creature's own name.
        """
        output = {}
        for index, temporary_evolution in enumerate(pokemon.temporary_evolutions):
            names = {
                translation.get_language_name(): translation.get_pokemon_name(pokemon.dex_nr, index + 1)
                for translation in self.translations
            }

            output[temporary_evolution.id] = {
                "id": temporary_evolution.id,
                "names": names,
                "stats": (
                    temporary_evolution.stats.to_dict()
                    if temporary_evolution.stats is not None
                    else None
                ),
                "primaryType": self._render_type(temporary_evolution.type_primary),
                "secondaryType": self._render_type(temporary_evolution.type_secondary),
                "assets": {
                    "image": self._image_url(pokemon.dex_nr, temporary_evolution.asset_bundle_id)
                },
            }

        return output

    def _render_type(self, pokemon_type: Optional[PokemonType]) -> Optional[dict[str, Any]]:
        if pokemon_type is None:
            return None

        return {
            "type": pokemon_type.type_name,
            "names": {
                translation.get_language_name(): translation.get_type_name(pokemon_type.type_name)
                for translation in self.translations
            },
        }

    def _render_attacks(
        self, move_names: list[str], attacks_collection: AttacksCollection
    ) -> dict[str, dict[str, Any]]:
        """Render moves by name; names without a parsed move are left out."""
        output = {}
        for move_name in move_names:
            attack = attacks_collection.get_by_name(move_name)
            if attack is None:
                continue

            combat = None
            if attack.combat_move is not None:
                combat = {
                    "energy": attack.combat_move.energy,
                    "power": attack.combat_move.power,
                }

            output[move_name] = {
                "id": move_name,
                "power": attack.power,
                "energy": attack.energy,
                "durationMs": attack.duration_ms,
                "type": self._render_type(attack.pokemon_type),
                "names": {
                    translation.get_language_name(): translation.get_move_name(attack.id)
                    for translation in self.translations
                },
                "combat": combat,
            }

        return output

    def _render_forms(self, pokemon: Pokemon, forms: list[PokemonForm]) -> list[dict[str, Any]]:
        output = []
        for form in forms:
            # RATTATA_ALOLA -> ALOLA
            form_type_only = form.id[len(pokemon.id) + 1 :]
            output.append(
                {
                    "id": form.id,
                    "names": {
                        translation.get_language_name(): translation.get_pokemon_form_name(
                            form_type_only, form.id
                        )
                        for translation in self.translations
                    },
                    "assets": {"image": self._image_url(pokemon.dex_nr, form.asset_bundle_value)},
                }
            )

        return output
