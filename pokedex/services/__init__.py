"""Fetch-and-assemble services."""
from .pokedex_service import PokedexService, random_identifier, to_card
from .record_assembler import assemble_record

__all__ = [
    'PokedexService',
    'assemble_record',
    'random_identifier',
    'to_card',
]
