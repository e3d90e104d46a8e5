from pokedex.clients import PokeAPIClient
from pokedex.config import PokedexSettings
from pokedex.services import PokedexService
from pokedex.shell import PokedexShell
from fastapi import Depends

_settings = None
_poke_client = None
_shell = None

def get_settings() -> PokedexSettings:
    global _settings
    if _settings is None:
        _settings = PokedexSettings.from_env()
    return _settings

def get_poke_client(settings: PokedexSettings = Depends(get_settings)) -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient(settings)
    return _poke_client

def get_pokedex_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    settings: PokedexSettings = Depends(get_settings),
) -> PokedexService:
    return PokedexService(poke_client=poke_client, settings=settings)

def get_shell(service: PokedexService = Depends(get_pokedex_service)) -> PokedexShell:
    # One shell per process: it holds the card currently on display
    global _shell
    if _shell is None:
        _shell = PokedexShell(service)
    return _shell

async def close_poke_client():
    """Close the shared PokeAPI client (called on app shutdown)."""
    global _poke_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
