import asyncio
import logging
import httpx
from pydantic import BaseModel
from pokedex.config import PokedexSettings
from pokedex.errors import FetchFailed, SubOperation
from pokedex.models import PokemonDocument, RawPayloads, SpeciesDocument

logger = logging.getLogger(__name__)


class PokeAPIClient:
    def __init__(self, settings: PokedexSettings | None = None):
        self.settings = settings or PokedexSettings()
        self.client = httpx.AsyncClient(base_url=self.settings.api_base_url, timeout=self.settings.timeout)
        # The sprite host answers with redirects for some assets
        self.sprites = httpx.AsyncClient(
            base_url=self.settings.image_base_url,
            timeout=self.settings.timeout,
            follow_redirects=True,
        )

    async def _get(self, client: httpx.AsyncClient, url: str, operation: SubOperation) -> httpx.Response:
        """Performs one GET and maps every transport or HTTP failure to FetchFailed."""
        try:
            response = await client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"PokeAPI {operation.value} request failed with status {status_code}")
            raise FetchFailed(operation, f"status {status_code}", status_code=status_code)

        except httpx.RequestError as e:
            # Network failures and timeouts
            logger.error(f"PokeAPI {operation.value} network error: {str(e)}")
            raise FetchFailed(operation, f"network error: {str(e)}")

    async def _get_document(self, url: str, operation: SubOperation, model: type[BaseModel]):
        response = await self._get(self.client, url, operation)
        try:
            document = model.model_validate(response.json())
        except ValueError as e:
            # Covers both JSONDecodeError and pydantic's ValidationError
            logger.error(f"PokeAPI {operation.value} response could not be decoded: {str(e)}")
            raise FetchFailed(operation, "unexpected response format")

        logger.debug(f"{url} response: {document!r}")
        return document

    async def fetch_image(self, identifier: int, shiny: bool = False) -> bytes:
        """Downloads the normal or shiny portrait PNG."""
        if shiny:
            url, operation = f"/pokemon/shiny/{identifier}.png", SubOperation.SHINY_IMAGE
        else:
            url, operation = f"/pokemon/{identifier}.png", SubOperation.IMAGE
        response = await self._get(self.sprites, url, operation)
        return response.content

    async def fetch_pokemon(self, identifier: int) -> PokemonDocument:
        return await self._get_document(f"/pokemon/{identifier}", SubOperation.POKEMON, PokemonDocument)

    async def fetch_species(self, identifier: int) -> SpeciesDocument:
        return await self._get_document(f"/pokemon-species/{identifier}", SubOperation.SPECIES, SpeciesDocument)

    async def fetch_raw(self, identifier: int) -> RawPayloads:
        """
        Issues the four requests concurrently and joins on all of them.
        The first failure cancels whatever is still in flight and is raised as is.
        """
        image, shiny_image, pokemon, species = await _join_all(
            self.fetch_image(identifier),
            self.fetch_image(identifier, shiny=True),
            self.fetch_pokemon(identifier),
            self.fetch_species(identifier),
        )
        return RawPayloads(image=image, shiny_image=shiny_image, pokemon=pokemon, species=species)

    async def close(self):
        """Close both HTTP clients (call on app shutdown)."""
        await self.client.aclose()
        await self.sprites.aclose()


async def _join_all(*operations):
    tasks = [asyncio.ensure_future(operation) for operation in operations]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # Drain the cancelled tasks so no exception is left unretrieved
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
