import logging
import unicodedata
from pydantic import ValidationError
from pokedex.errors import DescriptionUnavailable, InvalidRecord
from pokedex.models import CreatureRecord, RawPayloads, SpeciesDocument, StatEntry, StatName

logger = logging.getLogger(__name__)


def sanitize_description(text: str) -> str:
    """Replaces every control character with a space, keeping the length unchanged."""
    return "".join(" " if unicodedata.category(char) == "Cc" else char for char in text)


def select_description(species: SpeciesDocument, language: str) -> str:
    # First entry in the target language wins.
    # An entry with empty text is returned as is; CreatureRecord rejects it as InvalidRecord.
    entry = next(
        (entry for entry in species.flavor_text_entries if entry.language.name == language),
        None,
    )
    if entry is None:
        logger.warning(f"No flavor text entry for language '{language}'")
        raise DescriptionUnavailable(language)
    return sanitize_description(entry.flavor_text)


def collect_stats(stats: list[StatEntry]) -> dict[str, float]:
    values = {name.field: 0.0 for name in StatName}
    for entry in stats:
        try:
            name = StatName(entry.stat.name)
        except ValueError:
            continue  # stat not shown on the card
        values[name.field] = float(entry.base_stat)
    return values


def assemble_record(raw: RawPayloads, language: str = "en") -> CreatureRecord:
    """
    Merges one completed fetch into a CreatureRecord.
    Either the whole record is built or an error is raised; nothing partial escapes.
    """
    pokemon = raw.pokemon
    description = select_description(raw.species, language)

    try:
        return CreatureRecord(
            identifier=pokemon.id,
            name=pokemon.name,
            types=tuple(slot.type.name for slot in pokemon.types),
            description=description,
            height_meters=pokemon.height / 10,
            weight_grams=float(pokemon.weight * 100),
            portrait_image=raw.image,
            shiny_portrait_image=raw.shiny_image,
            **collect_stats(pokemon.stats),
        )
    except ValidationError as e:
        logger.error(f"Pokemon #{pokemon.id} breaks record invariants: {e.error_count()} error(s)")
        raise InvalidRecord(f"Pokemon #{pokemon.id} could not be assembled: {e}")
