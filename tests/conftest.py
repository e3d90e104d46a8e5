import pytest
from pokedex.errors import SubOperation
from pokedex.models import RawPayloads

POKEAPI_URL = "https://pokeapi.co/api/v2"
SPRITES_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites"

PNG_BYTES = b"\x89PNG\r\n\x1a\nnormal-sprite"
SHINY_PNG_BYTES = b"\x89PNG\r\n\x1a\nshiny-sprite"


@pytest.fixture
def bulbasaur_json():
    return {
        "id": 1,
        "name": "bulbasaur",
        "height": 7,
        "weight": 69,
        "types": [
            {"slot": 1, "type": {"name": "grass", "url": "https://pokeapi.co/api/v2/type/12/"}},
            {"slot": 2, "type": {"name": "poison", "url": "https://pokeapi.co/api/v2/type/4/"}},
        ],
        "stats": [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "attack"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "defense"}},
            {"base_stat": 65, "effort": 1, "stat": {"name": "special-attack"}},
            {"base_stat": 65, "effort": 0, "stat": {"name": "special-defense"}},
            {"base_stat": 45, "effort": 0, "stat": {"name": "speed"}},
        ],
    }


@pytest.fixture
def bulbasaur_species_json():
    return {
        "name": "bulbasaur",
        "flavor_text_entries": [
            {"flavor_text": "Une étrange graine a été plantée sur son dos.", "language": {"name": "fr"}},
            {"flavor_text": "A strange seed was\nplanted on its\fback at birth.", "language": {"name": "en"}},
            {"flavor_text": "It can go for days without eating.", "language": {"name": "en"}},
        ],
    }


@pytest.fixture
def raw_bulbasaur(bulbasaur_json, bulbasaur_species_json):
    return RawPayloads(
        image=PNG_BYTES,
        shiny_image=SHINY_PNG_BYTES,
        pokemon=bulbasaur_json,
        species=bulbasaur_species_json,
    )


@pytest.fixture
def mock_pokeapi(httpx_mock, bulbasaur_json, bulbasaur_species_json):
    """Registers the four PokeAPI responses for one fetch; `failing` answers with a 500 instead."""
    def register(identifier=1, failing=None, pokemon=None, species=None):
        responses = {
            SubOperation.IMAGE: (f"{SPRITES_URL}/pokemon/{identifier}.png", {"content": PNG_BYTES}),
            SubOperation.SHINY_IMAGE: (f"{SPRITES_URL}/pokemon/shiny/{identifier}.png", {"content": SHINY_PNG_BYTES}),
            SubOperation.POKEMON: (f"{POKEAPI_URL}/pokemon/{identifier}", {"json": pokemon or bulbasaur_json}),
            SubOperation.SPECIES: (f"{POKEAPI_URL}/pokemon-species/{identifier}", {"json": species or bulbasaur_species_json}),
        }
        for operation, (url, body) in responses.items():
            if operation == failing:
                httpx_mock.add_response(url=url, status_code=500, json={"error": "Internal error"})
            else:
                httpx_mock.add_response(url=url, status_code=200, **body)
    return register
