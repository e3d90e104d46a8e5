from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

# --- Raw PokeAPI documents (Internal Contract) ---
# Unknown keys in the responses are ignored.

class NamedResource(BaseModel):
    name: str

class TypeSlot(BaseModel):
    type: NamedResource

class StatEntry(BaseModel):
    base_stat: int = Field(ge=0)
    stat: NamedResource

# /pokemon/{id}
class PokemonDocument(BaseModel):
    id: int
    name: str
    types: list[TypeSlot]
    stats: list[StatEntry]
    height: int = Field(ge=0)  # decimeters
    weight: int = Field(ge=0)  # hectograms

class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource

# /pokemon-species/{id}
class SpeciesDocument(BaseModel):
    flavor_text_entries: list[FlavorTextEntry]

# Everything one fetch brings back, before assembly
class RawPayloads(BaseModel):
    image: bytes
    shiny_image: bytes
    pokemon: PokemonDocument
    species: SpeciesDocument


class StatName(str, Enum):
    """Stat keys the card models. Any other name in a stat list is ignored."""
    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    SPECIAL_ATTACK = "special-attack"
    SPECIAL_DEFENSE = "special-defense"
    SPEED = "speed"

    @property
    def field(self) -> str:
        return self.value.replace("-", "_")

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").replace("defense", "defence")


# --- Unified record ---

class CreatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: int = Field(ge=1)
    name: str
    types: tuple[str, ...] = Field(min_length=1, max_length=2)
    description: str = Field(min_length=1)
    height_meters: float = Field(ge=0)
    weight_grams: float = Field(ge=0)
    hp: float = Field(default=0.0, ge=0)
    attack: float = Field(default=0.0, ge=0)
    defense: float = Field(default=0.0, ge=0)
    special_attack: float = Field(default=0.0, ge=0)
    special_defense: float = Field(default=0.0, ge=0)
    speed: float = Field(default=0.0, ge=0)
    portrait_image: bytes = Field(repr=False)
    shiny_portrait_image: bytes = Field(repr=False)

    def stat(self, name: StatName) -> float:
        return getattr(self, name.field)


# --- Public API responses ---

class StatBar(BaseModel):
    label: str
    value: float
    fraction: float  # fill of the bar, 0.0 to 1.0

class CreatureCardResponse(BaseModel):
    id: int
    name: str
    display_name: str
    types: list[str]
    description: str
    height_meters: float
    weight_grams: float
    height: str
    weight: str
    stats: list[StatBar]
    # base64-encoded PNG bytes
    portrait_image: str
    shiny_portrait_image: str

class PokedexStateResponse(BaseModel):
    status: str
    title: str
    card: CreatureCardResponse | None = None
    error: str | None = None
