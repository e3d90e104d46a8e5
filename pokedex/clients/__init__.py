"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient
from pokedex.errors import FetchFailed

__all__ = [
    'PokeAPIClient',
    'FetchFailed',
]
