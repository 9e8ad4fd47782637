"""Resolve DAISIE literature references into one citation string per key."""
import logging
import re

import pandas

from daisie.common.constants import DWC, REPORT, SOURCE_SEPARATOR
from daisie.common.log import logit
from daisie.process.normalize import clean_text
from daisie.provider.constants import DAISIE_DATA, DISTRIBUTION_SOURCE_FIELDS

# Citation numbering artifact at the start of a long reference.  Only a single
# digit is removed, so "12, 28 Smith" keeps its "2".
LONGREF_NUMBER_PATTERN = re.compile(r"^[0-9]")
URL_PATTERN = re.compile(r"^http")


# .............................................................................
def clean_longref(longref):
    """Remove a leading citation-number digit from a long reference.

    Args:
        longref (str): long reference text.

    Returns:
        the reference without its first character if that is a digit, trimmed.
    """
    return LONGREF_NUMBER_PATTERN.sub("", clean_text(longref)).strip()


# .............................................................................
def clean_url(url):
    """Keep a URL only if it looks like one.

    Many url values in DAISIE are mis-entered scientific names.

    Args:
        url (str): url text.

    Returns:
        the url if it starts with "http", else an empty string.
    """
    url = clean_text(url)
    if URL_PATTERN.match(url):
        return url
    return ""


# .............................................................................
def compose_citation(longref="", shortref="", url=""):
    """Construct the canonical citation from the three reference components.

    Components are cleaned first.  A long reference always wins over the short
    one, and a valid URL is appended in parentheses.

    Args:
        longref (str): full reference.
        shortref (str): short reference.
        url (str): link to the reference.

    Returns:
        canonical citation, an empty string if all components are empty.
    """
    longref = clean_longref(longref)
    shortref = clean_text(shortref)
    url = clean_url(url)
    if longref:
        citation = longref
    elif shortref:
        citation = shortref
    else:
        return url
    if url:
        citation = f"{citation}({url})"
    return citation


# .............................................................................
class ReferenceResolver:
    """Class building the citation indexes used by all table assemblers.

    Attributes:
        by_source_id (dict): sourceid to citation, first record per sourceid.
        by_region_field (dict): id_sp_region to {field_name: citation}, for
            references that cite one field of one distribution record.
    """

    # ...............................................
    def __init__(self, references_df, logger=None):
        """Constructor.

        Args:
            references_df (pandas.DataFrame): DAISIE literature references table.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        self._references = references_df
        self._log = logger
        self.by_source_id = None
        self.by_region_field = None
        self.duplicate_count = 0
        self.empty_count = 0

    # ...............................................
    def resolve(self):
        """Build the citation indexes.

        Returns:
            report (dict): counts of indexed, duplicated and empty citations.
        """
        refname = self.__class__.__name__
        self.by_source_id = {}
        self.by_region_field = {}
        self.duplicate_count = 0
        self.empty_count = 0

        for rec in self._references.to_dict("records"):
            citation = compose_citation(
                longref=rec[DAISIE_DATA.LONGREF], shortref=rec[DAISIE_DATA.SHORTREF],
                url=rec[DAISIE_DATA.URL])
            if not citation:
                self.empty_count += 1

            source_id = rec[DAISIE_DATA.SOURCE_KEY]
            if source_id:
                if source_id in self.by_source_id:
                    self.duplicate_count += 1
                else:
                    self.by_source_id[source_id] = citation

            region_id = rec[DAISIE_DATA.REGION_KEY]
            field_name = rec[DAISIE_DATA.FIELD_NAME]
            if region_id and field_name:
                fields = self.by_region_field.setdefault(region_id, {})
                if field_name not in fields:
                    fields[field_name] = citation

        logit(
            f"Resolved {len(self.by_source_id)} citations by sourceid, "
            f"{len(self.by_region_field)} distribution records with field "
            f"citations, ignored {self.duplicate_count} repeated sourceids",
            logger=self._log, refname=refname)
        if self.empty_count:
            logit(
                f"{self.empty_count} references have no longref, shortref or url",
                logger=self._log, refname=refname, log_level=logging.DEBUG)
        return {
            REPORT.REFERENCE_COUNT: len(self.by_source_id),
            REPORT.REFERENCE_FIELD_COUNT: sum(
                len(fields) for fields in self.by_region_field.values()),
            REPORT.DUPLICATE_ROWS: self.duplicate_count,
            REPORT.EMPTY_CITATIONS: self.empty_count,
        }

    # ...............................................
    def _confirm_resolved(self):
        if self.by_source_id is None:
            self.resolve()

    # ...............................................
    def get_citation(self, source_id):
        """Get the citation for a sourceid.

        Args:
            source_id (str): DAISIE sourceid.

        Returns:
            the citation, an empty string for an empty or unknown sourceid.
        """
        self._confirm_resolved()
        return self.by_source_id.get(source_id, "")

    # ...............................................
    def get_region_citations(self, region_id):
        """Get the citations for each field of one distribution record.

        Args:
            region_id (str): DAISIE id_sp_region.

        Returns:
            dictionary of field_name to citation, empty if none.
        """
        self._confirm_resolved()
        return self.by_region_field.get(region_id, {})

    # ...............................................
    def compose_region_source(self, region_id, fields=DISTRIBUTION_SOURCE_FIELDS):
        """Concatenate the citations of a distribution record's fields.

        Args:
            region_id (str): DAISIE id_sp_region.
            fields (tuple of str): field_names to include, in output order.

        Returns:
            citations joined with " | ", without empty or repeated citations.
        """
        citations = self.get_region_citations(region_id)
        parts = []
        for fld in fields:
            citation = citations.get(fld, "")
            if citation and citation not in parts:
                parts.append(citation)
        return SOURCE_SEPARATOR.join(parts)

    # ...............................................
    def references_dataframe(self):
        """Get the citation index by sourceid as a table.

        Returns:
            pandas.DataFrame with columns sourceid, source.
        """
        self._confirm_resolved()
        return pandas.DataFrame(
            list(self.by_source_id.items()),
            columns=[DAISIE_DATA.SOURCE_KEY, DWC.SOURCE])

    # ...............................................
    def reference_fields_dataframe(self):
        """Get the citation index by (id_sp_region, field_name) as a table.

        Returns:
            pandas.DataFrame with columns id_sp_region, field_name, source.
        """
        self._confirm_resolved()
        rows = []
        for region_id, fields in self.by_region_field.items():
            for field_name, citation in fields.items():
                rows.append((region_id, field_name, citation))
        return pandas.DataFrame(
            rows, columns=[DAISIE_DATA.REGION_KEY, DAISIE_DATA.FIELD_NAME, DWC.SOURCE])


# .............................................................................
__all__ = [
    "ReferenceResolver",
    "clean_longref",
    "clean_url",
    "compose_citation",
]
