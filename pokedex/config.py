import os
from pydantic import BaseModel, Field


class PokedexSettings(BaseModel):
    """Runtime settings. Every field can be overridden through a POKEDEX_* environment variable."""
    api_base_url: str = "https://pokeapi.co/api/v2"
    image_base_url: str = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites"
    # Size of the catalog random identifiers are drawn from
    total: int = Field(default=893, ge=2)
    language: str = Field(default="en", min_length=1)
    timeout: float = Field(default=5.0, gt=0)

    @classmethod
    def from_env(cls) -> "PokedexSettings":
        overrides = {
            "api_base_url": os.getenv("POKEDEX_API_BASE_URL"),
            "image_base_url": os.getenv("POKEDEX_IMAGE_BASE_URL"),
            "total": os.getenv("POKEDEX_TOTAL"),
            "language": os.getenv("POKEDEX_LANGUAGE"),
            "timeout": os.getenv("POKEDEX_TIMEOUT"),
        }
        return cls(**{key: value for key, value in overrides.items() if value is not None})
