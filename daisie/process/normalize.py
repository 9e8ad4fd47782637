"""Stateless functions normalizing DAISIE free text to Darwin Core values.

Every function is deterministic and depends only on its arguments and the
constant recode tables in daisie.common.vocabulary.  A value outside an
enumerated table, or a date that cannot be reduced to a standard shape, raises
a daisie.common.errors.NormalizationError subclass for the caller to collect.
"""
import datetime as DT
import re

from daisie.common.constants import LOCATION, LOCATION_SEPARATOR, REMARKS_SEPARATOR
from daisie.common.errors import DateParseError, VocabularyError
from daisie.common.vocabulary import (
    ABSENT_ABUNDANCE, COUNTRY_CODES, ESTABLISHMENT_MEANS, EXTINCT_POPULATION,
    LANGUAGE_CODES, OCCURRENCE_STATUS, RANK_MARKERS)

# Literal values meaning "no date", for the first and last year of an interval
START_YEAR_EMPTY = ("unknown", ".", "?", "since long", "")
END_YEAR_EMPTY = ("unknown", ".", "?", "present", "still present", "")
# Leftover values found by inspecting what the year extraction does not catch
RESIDUAL_YEARS = {
    "20. century": "1900",
    "19. century": "1800",
    "18. century": "1700",
}

NEGATIVE_PATTERN = re.compile(r"^-\s*\d")
UNCERTAIN_CHARS = re.compile(r"[<>?]")
INTERVAL_PATTERN = re.compile(r"^\d{4}(-\d{2}-\d{2})?/\d{4}(-\d{2}-\d{2})?$")
INTERVAL_SEPARATOR = "/"
DMY_PATTERN = re.compile(r"^(\d{1,2})[/.](\d{1,2})[/.](\d{4})$")
YEAR_PATTERN = re.compile(r"(?<!\d)\d{4}(?!\d)")
NORMALIZED_DATE_PATTERN = re.compile(r"^\d{4}(-\d{2}-\d{2})?$")
NEWLINE_PATTERN = re.compile(r"[\r\n]+")

REMARKS_KEY_SEPARATOR = ": "


# .............................................................................
def _lower_keys(table):
    return {key.lower(): val for key, val in table.items()}


_COUNTRY_LOOKUP = _lower_keys(COUNTRY_CODES)
_LANGUAGE_LOOKUP = _lower_keys(LANGUAGE_CODES)
_OCCURRENCE_LOOKUP = _lower_keys(OCCURRENCE_STATUS)
_ESTABLISHMENT_LOOKUP = _lower_keys(ESTABLISHMENT_MEANS)
_RANK_LOOKUP = _lower_keys(RANK_MARKERS)


# .............................................................................
def clean_text(value):
    """Put a free-text value on one line.

    Args:
        value (str): source text, possibly None.

    Returns:
        the text with every run of carriage returns and newlines replaced by a
        single space, trimmed; an empty string for None.
    """
    if value is None:
        return ""
    return NEWLINE_PATTERN.sub(" ", str(value)).strip()


# .............................................................................
def recode(value, lookup, vocabulary):
    """Map a value through a case-insensitive recode table.

    Args:
        value (str): source value.
        lookup (dict): lowercase source value to target code.
        vocabulary (str): name of the table, used in the error message.

    Returns:
        the target code, or an empty string for an empty value.

    Raises:
        VocabularyError: on a non-empty value missing from the table.
    """
    value = clean_text(value)
    if not value:
        return ""
    try:
        return lookup[value.lower()]
    except KeyError:
        raise VocabularyError(value, vocabulary)


# .............................................................................
def recode_country(name):
    """Get the ISO 3166-1 alpha-2 code for a DAISIE country or region name."""
    return recode(name, _COUNTRY_LOOKUP, "country")


# .............................................................................
def recode_language(name):
    """Get the ISO 639-1 code for a language name."""
    return recode(name, _LANGUAGE_LOOKUP, "language")


# .............................................................................
def recode_abundance(abundance):
    """Get the Darwin Core occurrenceStatus for a DAISIE abundance value."""
    return recode(abundance, _OCCURRENCE_LOOKUP, "occurrence_status")


# .............................................................................
def recode_establishment_means(population_status):
    """Get the Darwin Core establishmentMeans for a DAISIE population status."""
    return recode(population_status, _ESTABLISHMENT_LOOKUP, "establishment_means")


# .............................................................................
def recode_rank_marker(rank_marker):
    """Get the Darwin Core taxonRank for a GBIF parser rank marker."""
    return recode(rank_marker, _RANK_LOOKUP, "rank_marker")


# .............................................................................
def compose_occurrence_status(abundance, population_status):
    """Combine abundance and population status into an occurrenceStatus.

    An extinct population wins over any abundance value; an abundance of
    "Absent or extinct" gives "absent"; any other abundance is recoded.

    Args:
        abundance (str): DAISIE abundance descriptor.
        population_status (str): DAISIE population status.

    Returns:
        occurrenceStatus, or an empty string when abundance is absent.

    Raises:
        VocabularyError: on an abundance missing from the recode table.
    """
    abundance = clean_text(abundance)
    if clean_text(population_status).lower() == EXTINCT_POPULATION.lower():
        return "extinct"
    if abundance.lower() == ABSENT_ABUNDANCE.lower():
        return "absent"
    return recode_abundance(abundance)


# .............................................................................
def parse_year(text, empty_tokens=START_YEAR_EMPTY):
    """Reduce free text to a year, a full ISO 8601 date, or an empty string.

    Steps, first match wins:
        1. literal non-date tokens give an empty string
        2. a negative number gives an empty string
        3. the characters <, > and ? are removed
        4. a year or a valid ISO date is kept; an interval or an impossible
           ISO date fails
        5. a D/M/Y or D.M.Y date becomes YYYY-MM-DD
        6. the first run of exactly four digits is the year
        7. known leftover phrases are replaced by a year

    Args:
        text (str): free-text year or date.
        empty_tokens (tuple): lowercase literals meaning "no date".

    Returns:
        "", "YYYY" or "YYYY-MM-DD".

    Raises:
        DateParseError: if the text survives all steps without matching,
            holds an interval, or is an impossible ISO date.
    """
    original = clean_text(text)
    value = original
    if value.lower() in empty_tokens:
        return ""
    if NEGATIVE_PATTERN.match(value):
        return ""
    value = UNCERTAIN_CHARS.sub("", value).strip()
    if value.lower() in empty_tokens:
        return ""
    if INTERVAL_PATTERN.match(value):
        # One field holds one end of an interval
        raise DateParseError(original, value)
    if NORMALIZED_DATE_PATTERN.match(value):
        if len(value) > 4:
            try:
                DT.date.fromisoformat(value)
            except ValueError:
                raise DateParseError(original, value)
        return value

    match = DMY_PATTERN.match(value)
    if match is not None:
        day, month, year = (int(part) for part in match.groups())
        try:
            return DT.date(year, month, day).isoformat()
        except ValueError:
            # Not a calendar date, fall back to the year
            pass

    match = YEAR_PATTERN.search(value)
    if match is not None:
        return match.group(0)

    value = RESIDUAL_YEARS.get(value.lower(), value)
    if not NORMALIZED_DATE_PATTERN.match(value):
        raise DateParseError(original, value)
    return value


# .............................................................................
def compose_interval(start, end):
    """Join two normalized dates into an ISO 8601 interval.

    Args:
        start (str): normalized first date, or empty.
        end (str): normalized last date, or empty.

    Returns:
        "" if both are empty, the non-empty one if only one is present, or
        "start/end".

    Raises:
        DateParseError: if either date already holds an interval.
    """
    for part in (start, end):
        if INTERVAL_SEPARATOR in part:
            raise DateParseError(part, part)
    if start and end:
        return f"{start}{INTERVAL_SEPARATOR}{end}"
    return start or end


# .............................................................................
def parse_event_date(start_year, end_year):
    """Normalize the first and last year of an introduction into an eventDate.

    A composed interval in the first year with an empty last year is split and
    normalized again, so an eventDate passes through unchanged.

    Args:
        start_year (str): free-text first year.
        end_year (str): free-text last year.

    Returns:
        Darwin Core eventDate.

    Raises:
        DateParseError: if either value cannot be normalized, or the first
            year holds an interval while a last year is also given.
    """
    start_year = clean_text(start_year)
    end_year = clean_text(end_year)
    if INTERVAL_PATTERN.match(start_year):
        if end_year:
            raise DateParseError(start_year, start_year)
        start_year, end_year = start_year.split(INTERVAL_SEPARATOR)
    start = parse_year(start_year, empty_tokens=START_YEAR_EMPTY)
    end = parse_year(end_year, empty_tokens=END_YEAR_EMPTY)
    return compose_interval(start, end)


# .............................................................................
def compose_location(country, country_code, coast="", coast_code=""):
    """Build locationID and locality from country and coastal components.

    Args:
        country (str): country or region name.
        country_code (str): ISO 3166-1 code for the country, may be empty.
        coast (str): name of the coastal area, if any.
        coast_code (str): Marine Regions identifier of the coastal area, if any.

    Returns:
        locationID (str): "ISO_3166-1:{code}", followed by " | mrgid:{coast_code}"
            for a coastal record.
        locality (str): "{country}", followed by " | {coast}" for a coastal record.
    """
    ids = []
    names = []
    country = clean_text(country)
    coast = clean_text(coast)
    if country_code:
        ids.append(f"{LOCATION.COUNTRY_SYSTEM}:{country_code}")
    if country:
        names.append(country)
    coast_code = clean_text(coast_code)
    if coast_code:
        ids.append(f"{LOCATION.COAST_SYSTEM}:{coast_code}")
    if coast:
        names.append(coast)
    return LOCATION_SEPARATOR.join(ids), LOCATION_SEPARATOR.join(names)


# .............................................................................
def clean_remark_value(value):
    """Make a value safe for a remarks field.

    The separator character "|" is replaced by "/" so that a remarks string can
    always be split back into its fields.
    """
    return clean_text(value).replace("|", "/")


# .............................................................................
def assemble_remarks(record, fields):
    """Concatenate named fields into a single-line remarks string.

    Every field in fields is included, in order, even when its value is empty.

    Args:
        record (dict): source values keyed by fieldname.
        fields (tuple of str): ordered fieldnames to include.

    Returns:
        remarks string like "field1: value1 | field2:  | field3: value3".
    """
    segments = []
    for fld in fields:
        segments.append(
            f"{fld}{REMARKS_KEY_SEPARATOR}{clean_remark_value(record.get(fld))}")
    return REMARKS_SEPARATOR.join(segments)


# .............................................................................
def split_remarks(remarks):
    """Split a remarks string built by assemble_remarks back into its fields.

    Args:
        remarks (str): remarks string.

    Returns:
        list of (fieldname, value) tuples, in the original order.
    """
    pairs = []
    for segment in remarks.split(REMARKS_SEPARATOR):
        fld, _sep, val = segment.partition(REMARKS_KEY_SEPARATOR)
        pairs.append((fld, val))
    return pairs


# .............................................................................
def compose_scientific_name(
        genus, species="", species_author="", subtaxon="", subtaxon_author=""):
    """Construct a scientific name from its DAISIE components.

    An infraspecific name carries only the author of the subtaxon.

    Returns:
        scientific name with empty components skipped.
    """
    if clean_text(subtaxon):
        parts = [genus, species, subtaxon, subtaxon_author]
    else:
        parts = [genus, species, species_author]
    return " ".join(clean_text(part) for part in parts if clean_text(part))


# .............................................................................
def subtaxon_rank_marker(subtaxon):
    """Get the leading rank marker of a DAISIE subtaxon value, e.g. "subsp."."""
    parts = clean_text(subtaxon).split()
    if parts and parts[0].lower() in _RANK_LOOKUP:
        return parts[0]
    return ""


# .............................................................................
def infraspecific_epithet(subtaxon):
    """Get the infraspecific epithet from a DAISIE subtaxon value.

    Args:
        subtaxon (str): subtaxon, possibly led by a rank marker, e.g.
            "subsp. maritima".

    Returns:
        the epithet without a leading rank marker.
    """
    parts = clean_text(subtaxon).split()
    if subtaxon_rank_marker(subtaxon):
        parts = parts[1:]
    return " ".join(parts)


# .............................................................................
__all__ = [
    "assemble_remarks",
    "clean_text",
    "compose_interval",
    "compose_location",
    "compose_occurrence_status",
    "compose_scientific_name",
    "infraspecific_epithet",
    "parse_event_date",
    "parse_year",
    "recode",
    "recode_abundance",
    "recode_country",
    "recode_establishment_means",
    "recode_language",
    "recode_rank_marker",
    "split_remarks",
    "subtaxon_rank_marker",
]
