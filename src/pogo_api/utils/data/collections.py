"""
Ordered, key-addressable containers for parsed game master entities.

Both collections keep insertion order for iteration and maintain a secondary
index on the numeric key (dex number / move number) so linking passes can
resolve their targets in constant time. The index keeps the first entity added
for a numeric key.
"""

from typing import Iterator, Optional

from pogo_api.utils.data.models import Pokemon, PokemonMove


class PokemonCollection:
    """Creatures keyed by species id, with a dex number index."""

    def __init__(self):
        self._pokemon: dict[str, Pokemon] = {}
        self._by_dex_nr: dict[int, Pokemon] = {}

    def add(self, pokemon: Pokemon) -> None:
        """Add a creature.

        Args:
            pokemon (Pokemon): The creature to add

        Raises:
            ValueError: If a creature with the same id was already added
        """
        if pokemon.id in self._pokemon:
            raise ValueError(f"Pokemon '{pokemon.id}' is already in the collection")

        self._pokemon[pokemon.id] = pokemon
        self._by_dex_nr.setdefault(pokemon.dex_nr, pokemon)

    def get(self, pokemon_id: str) -> Optional[Pokemon]:
        return self._pokemon.get(pokemon_id)

    def get_by_dex_id(self, dex_nr: int) -> Optional[Pokemon]:
        """Get the first creature added with the given dex number."""
        return self._by_dex_nr.get(dex_nr)

    def to_list(self) -> list[Pokemon]:
        return list(self._pokemon.values())

    def __contains__(self, pokemon_id: object) -> bool:
        return pokemon_id in self._pokemon

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self._pokemon.values())

    def __len__(self) -> int:
        return len(self._pokemon)


class AttacksCollection:
    """Moves keyed by move number, with a name index."""

    def __init__(self):
        self._attacks: dict[int, PokemonMove] = {}
        self._by_name: dict[str, PokemonMove] = {}

    def add(self, attack: PokemonMove) -> None:
        """Add a move.

        Args:
            attack (PokemonMove): The move to add

        Raises:
            ValueError: If a move with the same id was already added
        """
        if attack.id in self._attacks:
            raise ValueError(f"Move {attack.id} ('{attack.name}') is already in the collection")

        self._attacks[attack.id] = attack
        self._by_name.setdefault(attack.name, attack)

    def get_by_id(self, move_id: int) -> Optional[PokemonMove]:
        return self._attacks.get(move_id)

    def get_by_name(self, name: str) -> Optional[PokemonMove]:
        return self._by_name.get(name)

    def to_list(self) -> list[PokemonMove]:
        return list(self._attacks.values())

    def __contains__(self, move_id: object) -> bool:
        return move_id in self._attacks

    def __iter__(self) -> Iterator[PokemonMove]:
        return iter(self._attacks.values())

    def __len__(self) -> int:
        return len(self._attacks)
