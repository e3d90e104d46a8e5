"""
State machine for the card shell.

The shell moves wholesale between four states and never edits a shown record in place:

    no_record -> loading -> loaded | failed -> loading -> ...

Only one search may be outstanding at a time.
"""
import asyncio
import logging
from enum import Enum
from pydantic import BaseModel, ConfigDict
from pokedex.errors import IdentifierOutOfRange, PokedexError
from pokedex.models import CreatureRecord
from pokedex.services.pokedex_service import PokedexService

logger = logging.getLogger(__name__)


class ShellStatus(str, Enum):
    NO_RECORD = "no_record"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class ShellState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ShellStatus
    record: CreatureRecord | None = None
    error: str | None = None


class SearchInProgress(PokedexError):
    def __init__(self):
        super().__init__("A search is already in progress.")


class PokedexShell:
    def __init__(self, service: PokedexService):
        self._service = service
        self._state = ShellState(status=ShellStatus.NO_RECORD)

    @property
    def state(self) -> ShellState:
        return self._state

    @property
    def title(self) -> str:
        if self._state.status is ShellStatus.LOADING:
            return "Loading - Pokédex"
        if self._state.status is ShellStatus.LOADED:
            return f"{self._state.record.name} - Pokédex"
        if self._state.status is ShellStatus.FAILED:
            return "Failed - Pokédex"
        return "Pokédex"

    async def search(self, identifier: int | None = None) -> ShellState:
        if self._state.status is ShellStatus.LOADING:
            raise SearchInProgress()

        previous = self._state
        self._state = ShellState(status=ShellStatus.LOADING)
        logger.info("Searching for a Pokemon...")

        try:
            record = await self._service.fetch_record(identifier)
        except (IdentifierOutOfRange, asyncio.CancelledError):
            # Nothing was fetched, so the previous card stays up
            self._state = previous
            raise
        except PokedexError as e:
            logger.warning(f"Search failed: {e.detail}")
            self._state = ShellState(status=ShellStatus.FAILED, error=e.detail)
            return self._state
        except Exception as e:
            # Unexpected errors still leave the loading state so later searches are accepted
            logger.exception("Search failed unexpectedly")
            self._state = ShellState(status=ShellStatus.FAILED, error=f"Unexpected error: {e}")
            raise

        self._state = ShellState(status=ShellStatus.LOADED, record=record)
        logger.info(f"Showing Pokemon #{record.identifier} ({record.name})")
        return self._state
