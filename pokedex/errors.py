from enum import Enum


class SubOperation(str, Enum):
    """The four requests that make up one fetch."""
    IMAGE = "image"
    SHINY_IMAGE = "shiny_image"
    POKEMON = "pokemon"
    SPECIES = "species"


class PokedexError(Exception):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class FetchFailed(PokedexError):
    """A sub-operation failed at the transport, HTTP or decoding level."""
    def __init__(self, operation: SubOperation, detail: str, status_code: int | None = None):
        super().__init__(f"{operation.value} fetch failed: {detail}")
        self.operation = operation
        self.status_code = status_code


class DescriptionUnavailable(PokedexError):
    def __init__(self, language: str):
        super().__init__(f"No '{language}' description available.")
        self.language = language


class InvalidRecord(PokedexError):
    pass


class IdentifierOutOfRange(PokedexError):
    def __init__(self, identifier: int, total: int):
        super().__init__(f"Pokemon #{identifier} is outside the catalog range 1..{total}.")
        self.identifier = identifier
        self.total = total
