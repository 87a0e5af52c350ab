"""Tests for the API renderer."""

import copy
from pathlib import Path

import pytest

from pogo_api.parsers.master_data_parser import MasterDataParser
from pogo_api.renderers.pokemon_renderer import PokemonRenderer
from pogo_api.utils.core.loader import GameMasterLoader
from pogo_api.utils.data.collections import AttacksCollection
from pogo_api.utils.data.models import Pokemon, PokemonType, TemporaryEvolution
from pogo_api.utils.data.translations import TranslationCollection

IMAGE_URL = "https://assets.example/{dex_nr:03d}_{asset_bundle_id:02d}.png"


@pytest.fixture
def parser(game_master_records: list) -> MasterDataParser:
    parser = MasterDataParser()
    parser.parse_records(game_master_records)
    return parser


@pytest.fixture
def renderer(fixtures_dir: Path) -> PokemonRenderer:
    translations = GameMasterLoader.load_translations(
        fixtures_dir / "translations", ["English", "German"]
    )
    return PokemonRenderer(translations, IMAGE_URL)


@pytest.fixture
def rendered(parser: MasterDataParser, renderer: PokemonRenderer) -> dict:
    return renderer.render_all(parser.get_pokemon_collection(), parser.get_attacks_collection())


class TestRenderAll:
    """Test rendering of the sample export."""

    def test_keys_are_top_level_ids(self, rendered: dict) -> None:
        """Test only top-level creatures appear, keyed by id."""
        assert list(rendered) == ["VENUSAUR", "RATTATA"]

    def test_identity_and_names(self, rendered: dict) -> None:
        """Test identity fields and localized names."""
        venusaur = rendered["VENUSAUR"]

        assert venusaur["id"] == "VENUSAUR"
        assert venusaur["formId"] == "VENUSAUR"
        assert venusaur["dexNr"] == 3
        assert venusaur["generation"] == 1
        assert venusaur["names"] == {"English": "Venusaur", "German": "Bisaflor"}
        assert venusaur["stats"] == {"stamina": 190, "attack": 198, "defense": 189}

    def test_types(self, rendered: dict) -> None:
        """Test types render with their localized names."""
        venusaur = rendered["VENUSAUR"]

        assert venusaur["primaryType"] == {
            "type": "Grass",
            "names": {"English": "Grass", "German": "Pflanze"},
        }
        assert venusaur["secondaryType"]["type"] == "Poison"
        assert rendered["RATTATA"]["secondaryType"] is None

    def test_moves(self, rendered: dict) -> None:
        """Test move maps carry move values and the combat overlay."""
        quick_moves = rendered["VENUSAUR"]["quickMoves"]

        assert quick_moves == {
            "VINE_WHIP_FAST": {
                "id": "VINE_WHIP_FAST",
                "power": 7.0,
                "energy": 6.0,
                "durationMs": 600.0,
                "type": {"type": "Grass", "names": {"English": "Grass", "German": "Pflanze"}},
                "names": {"English": "Vine Whip", "German": "Rankenhieb"},
                "combat": {"energy": 8.0, "power": 5.0},
            }
        }

    def test_move_without_combat_overlay(self, rendered: dict) -> None:
        """Test moves without an overlay render combat as None."""
        assert rendered["RATTATA"]["quickMoves"]["QUICK_ATTACK_FAST"]["combat"] is None

    def test_unknown_moves_are_left_out(self, rendered: dict) -> None:
        """Test move names without a parsed move are omitted."""
        assert rendered["VENUSAUR"]["eliteCinematicMoves"] == {}
        assert rendered["VENUSAUR"]["eliteQuickMoves"] == {}

    def test_mega_evolutions(self, rendered: dict) -> None:
        """Test temporary evolutions take the overflow names of their dex number."""
        venusaur = rendered["VENUSAUR"]

        assert venusaur["hasMegaEvolution"] is True
        assert venusaur["megaEvolutions"] == {
            "VENUSAUR_MEGA": {
                "id": "VENUSAUR_MEGA",
                "names": {"English": "Mega Venusaur", "German": "Mega-Bisaflor"},
                "stats": {"stamina": 190, "attack": 241, "defense": 246},
                "primaryType": {"type": "Grass", "names": {"English": "Grass", "German": "Pflanze"}},
                "secondaryType": {"type": "Poison", "names": {"English": "Poison", "German": "Gift"}},
                "assets": {"image": "https://assets.example/003_51.png"},
            }
        }

    def test_no_mega_evolutions(self, rendered: dict) -> None:
        """Test creatures without temporary evolutions render an empty map."""
        assert rendered["RATTATA"]["hasMegaEvolution"] is False
        assert rendered["RATTATA"]["megaEvolutions"] == {}

    def test_forms_and_assets(self, rendered: dict) -> None:
        """Test the base form and its image."""
        rattata = rendered["RATTATA"]

        assert rattata["assets"] == {"image": "https://assets.example/019_00.png"}
        assert rattata["forms"] == [
            {
                "id": "RATTATA_NORMAL",
                "names": {"English": "Normal", "German": None},
                "assets": {"image": "https://assets.example/019_00.png"},
            }
        ]

    def test_region_forms_render_recursively(self, rendered: dict) -> None:
        """Test regional variants render with the same structure."""
        region_forms = rendered["RATTATA"]["regionForms"]

        assert len(region_forms) == 1
        alola = region_forms[0]
        assert alola["id"] == "RATTATA"
        assert alola["formId"] == "RATTATA_ALOLA"
        assert alola["primaryType"]["type"] == "Dark"
        assert alola["assets"] == {"image": "https://assets.example/019_61.png"}
        assert alola["forms"][0]["names"] == {"English": "Alolan Form", "German": "Alola-Form"}
        assert alola["regionForms"] == []

    def test_render_does_not_mutate(self, parser: MasterDataParser, renderer: PokemonRenderer) -> None:
        """Test rendering leaves creatures untouched and is repeatable."""
        venusaur = parser.get_pokemon_collection().get("VENUSAUR")
        before = copy.deepcopy(venusaur)

        first = renderer.render(venusaur, parser.get_attacks_collection())
        second = renderer.render(venusaur, parser.get_attacks_collection())

        assert venusaur == before
        assert first == second


class TestRenderWithoutTranslations:
    """Test rendering with missing translation data."""

    def test_missing_names_are_none(self) -> None:
        """Test unknown names render as None per language."""
        pokemon = Pokemon(
            dex_nr=9999,
            id="MISSINGNO",
            form_id="MISSINGNO",
            type_primary=PokemonType.create("POKEMON_TYPE_NORMAL"),
        )
        renderer = PokemonRenderer([TranslationCollection(language_name="English")], IMAGE_URL)

        output = renderer.render(pokemon, AttacksCollection())

        assert output["names"] == {"English": None}
        assert output["generation"] == 0
        assert output["stats"] is None
        assert output["forms"] == []

    def test_evolutions_beyond_names_are_none(self) -> None:
        """Test evolutions without an overflow name get None."""
        pokemon = Pokemon(
            dex_nr=6,
            id="CHARIZARD",
            form_id="CHARIZARD",
            type_primary=PokemonType.create("POKEMON_TYPE_FIRE"),
            temporary_evolutions=[
                TemporaryEvolution(id="CHARIZARD_MEGA_X", type_primary=PokemonType.create("POKEMON_TYPE_FIRE")),
                TemporaryEvolution(id="CHARIZARD_MEGA_Y", type_primary=PokemonType.create("POKEMON_TYPE_FIRE")),
            ],
        )
        translation = TranslationCollection(
            language_name="English", pokemon_names={"6": ["Charizard", "Mega Charizard X"]}
        )

        output = PokemonRenderer([translation], IMAGE_URL).render(pokemon, AttacksCollection())

        assert output["names"] == {"English": "Charizard"}
        assert output["megaEvolutions"]["CHARIZARD_MEGA_X"]["names"] == {"English": "Mega Charizard X"}
        assert output["megaEvolutions"]["CHARIZARD_MEGA_Y"]["names"] == {"English": None}
