import base64
import logging
import secrets
from typing import Callable
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.config import PokedexSettings
from pokedex.errors import IdentifierOutOfRange, InvalidRecord
from pokedex.models import CreatureCardResponse, CreatureRecord, StatBar, StatName
from pokedex.services.record_assembler import assemble_record

logger = logging.getLogger(__name__)

# Upper bound of a full stat bar on the card
STAT_BAR_MAX = 200.0


def random_identifier(total: int) -> int:
    """Draws uniformly from [1, total) using the OS entropy source."""
    return secrets.randbelow(total - 1) + 1


def format_weight(weight_grams: float) -> str:
    if weight_grams >= 1000:
        return f"{weight_grams / 1000:.1f}kg"
    return f"{weight_grams:g}g"


def to_card(record: CreatureRecord) -> CreatureCardResponse:
    """Maps the internal record to the public card model."""
    return CreatureCardResponse(
        id=record.identifier,
        name=record.name,
        display_name=record.name.replace("-", " ").title(),
        types=list(record.types),
        description=record.description,
        height_meters=record.height_meters,
        weight_grams=record.weight_grams,
        height=f"{record.height_meters:.1f}m",
        weight=format_weight(record.weight_grams),
        stats=[
            StatBar(
                label=name.label,
                value=record.stat(name),
                fraction=min(record.stat(name) / STAT_BAR_MAX, 1.0),
            )
            for name in StatName
        ],
        portrait_image=base64.b64encode(record.portrait_image).decode("ascii"),
        shiny_portrait_image=base64.b64encode(record.shiny_portrait_image).decode("ascii"),
    )


class PokedexService:
    # The identifier picker is injectable so tests stay deterministic
    def __init__(
        self,
        poke_client: PokeAPIClient,
        settings: PokedexSettings | None = None,
        pick_identifier: Callable[[int], int] = random_identifier,
    ):
        self._poke_client = poke_client
        self._settings = settings or PokedexSettings()
        self._pick_identifier = pick_identifier

    async def fetch_record(self, identifier: int | None = None) -> CreatureRecord:
        """
        Fetches and assembles one record. A random identifier is drawn when none is given.
        Raises FetchFailed, DescriptionUnavailable, InvalidRecord or IdentifierOutOfRange.
        """
        total = self._settings.total
        if identifier is None:
            identifier = self._pick_identifier(total)
        if not 1 <= identifier <= total:
            raise IdentifierOutOfRange(identifier, total)

        raw = await self._poke_client.fetch_raw(identifier)
        record = assemble_record(raw, self._settings.language)

        if record.identifier != identifier:
            raise InvalidRecord(f"Requested Pokemon #{identifier} but received #{record.identifier}.")

        logger.info(f"Assembled Pokemon #{record.identifier} ({record.name})")
        return record

    async def get_card(self, identifier: int | None = None) -> CreatureCardResponse:
        record = await self.fetch_record(identifier)
        return to_card(record)
