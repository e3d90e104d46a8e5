"""Random Pokédex card: fetches one Pokémon from PokeAPI and assembles it into a card record."""
