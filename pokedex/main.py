from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, HTTPException, Path, Query, status
from pokedex.dependencies import close_poke_client, get_pokedex_service, get_shell
from pokedex.errors import (
    DescriptionUnavailable,
    FetchFailed,
    IdentifierOutOfRange,
    InvalidRecord,
    PokedexError,
)
from pokedex.models import CreatureCardResponse, PokedexStateResponse
from pokedex.services import PokedexService, to_card
from pokedex.shell import PokedexShell, SearchInProgress


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_poke_client()


app = FastAPI(
    lifespan=lifespan,
    title="Random Pokédex",
    description="Fetches a random Pokémon from PokeAPI and serves it as a card.",
)


def to_http_error(error: PokedexError) -> HTTPException:
    """Maps core errors to the status codes exposed to API consumers."""
    if isinstance(error, FetchFailed):
        # Upstream outage, timeout or garbage response
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif isinstance(error, (DescriptionUnavailable, IdentifierOutOfRange)):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, InvalidRecord):
        status_code = status.HTTP_502_BAD_GATEWAY
    elif isinstance(error, SearchInProgress):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=error.detail)


def to_state_response(shell: PokedexShell) -> PokedexStateResponse:
    state = shell.state
    return PokedexStateResponse(
        status=state.status.value,
        title=shell.title,
        card=to_card(state.record) if state.record is not None else None,
        error=state.error,
    )


# Endpoint 1: Random card
@app.get(
    "/pokemon/random",
    response_model=CreatureCardResponse,
    summary="Returns the card of a randomly chosen Pokemon",
)
async def get_random_card(service: PokedexService = Depends(get_pokedex_service)):
    try:
        return await service.get_card()
    except PokedexError as e:
        raise to_http_error(e)


# Endpoint 2: Card by identifier
@app.get(
    "/pokemon/{identifier}",
    response_model=CreatureCardResponse,
    summary="Returns the card of the Pokemon with the given National Pokédex number",
)
async def get_card(
    identifier: int = Path(ge=1),
    service: PokedexService = Depends(get_pokedex_service),
):
    try:
        return await service.get_card(identifier)
    except PokedexError as e:
        raise to_http_error(e)


# Endpoint 3: What the shell is showing right now
@app.get("/pokedex", response_model=PokedexStateResponse, summary="Returns the card currently on display")
async def get_pokedex_state(shell: PokedexShell = Depends(get_shell)):
    return to_state_response(shell)


# Endpoint 4: "Keep searching!"
@app.post(
    "/pokedex/search",
    response_model=PokedexStateResponse,
    summary="Replaces the displayed card with a freshly fetched one",
)
async def search(
    identifier: int | None = Query(default=None, ge=1),
    shell: PokedexShell = Depends(get_shell),
):
    """Fetch failures end in the 'failed' state rather than an error response."""
    try:
        await shell.search(identifier)
    except (SearchInProgress, IdentifierOutOfRange) as e:
        raise to_http_error(e)
    return to_state_response(shell)
