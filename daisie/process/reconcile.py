"""Establish the authoritative set of DAISIE taxon identifiers."""
import logging

import pandas

from daisie.common.constants import DWC, GBIF, REPORT
from daisie.common.log import logit
from daisie.common.vocabulary import DUPLICATE_TAXA
from daisie.process.normalize import compose_scientific_name
from daisie.provider.constants import DAISIE_DATA

REPLACEMENT_KEY = "replacement_idspecies"
NAME_ISSUE_HEADER = [
    DAISIE_DATA.TAXON_KEY, DWC.SCINAME, GBIF.TYPE_FLD, GBIF.PARSED_FLD,
    GBIF.PARTIAL_FLD, GBIF.RANK_MARKER_FLD]


# .............................................................................
def taxon_scientific_name(rec):
    """Compose the scientific name of a DAISIE taxon record.

    Args:
        rec (dict): DAISIE taxon record.

    Returns:
        scientific name string.
    """
    return compose_scientific_name(
        rec[DAISIE_DATA.GENUS], species=rec[DAISIE_DATA.SPECIES],
        species_author=rec[DAISIE_DATA.SPECIES_AUTHOR],
        subtaxon=rec[DAISIE_DATA.SUBTAXON],
        subtaxon_author=rec[DAISIE_DATA.SUBTAXON_AUTHOR])


# .............................................................................
def has_name_issue(parsed):
    """Test whether a name parser result points to a nomenclatural problem.

    Args:
        parsed (dict): result with keys type, parsed, parsedPartially.

    Returns:
        True if the name is not a fully parsed scientific name.
    """
    return (
        parsed[GBIF.TYPE_FLD] != GBIF.SCIENTIFIC_TYPE
        or parsed[GBIF.PARSED_FLD] is not True
        or parsed[GBIF.PARTIAL_FLD] is True)


# .............................................................................
class TaxonReconciler:
    """Class computing core_taxa and remove_taxa from the DAISIE taxon table.

    Duplicates are not inferred: they come from a curated table of
    {duplicate idspecies: retained idspecies}.  Removed ids are excluded by
    membership only, nothing recorded under them is moved to the retained id.
    """

    # ...............................................
    def __init__(
            self, taxa_df, name_parser=None, logger=None, duplicate_taxa=None):
        """Constructor.

        Args:
            taxa_df (pandas.DataFrame): DAISIE taxon table.
            name_parser (object): name parser with a parse_names(names) method
                returning {name: {type, parsed, parsedPartially, rankMarker}}, or
                None to skip name checks.
            logger (daisie.common.log.Logger): logger for processing messages.
            duplicate_taxa (dict): {duplicate idspecies: retained idspecies},
                defaults to daisie.common.vocabulary.DUPLICATE_TAXA
        """
        if duplicate_taxa is None:
            duplicate_taxa = DUPLICATE_TAXA
        self._taxa_df = taxa_df
        self._parser = name_parser
        self._log = logger
        self._duplicates = duplicate_taxa

        self.taxa = None
        self.names = None
        self.parsed_names = None
        self.name_issues = None
        self.core_taxa = None
        self.remove_taxa = None

    # ...............................................
    def _select_unique_taxa(self):
        """Keep one record per non-empty idspecies, the first one.

        Returns:
            count of records dropped.
        """
        refname = self.__class__.__name__
        df = self._taxa_df
        no_key = df[DAISIE_DATA.TAXON_KEY] == ""
        if no_key.any():
            logit(
                f"Ignoring {int(no_key.sum())} taxon records without idspecies",
                logger=self._log, refname=refname, log_level=logging.WARNING)
        df = df[~no_key]
        repeated = df.duplicated(subset=[DAISIE_DATA.TAXON_KEY], keep="first")
        for taxon_id in df.loc[repeated, DAISIE_DATA.TAXON_KEY]:
            logit(
                f"Ignoring repeated taxon record for idspecies {taxon_id}",
                logger=self._log, refname=refname, log_level=logging.WARNING)
        self.taxa = df[~repeated]
        return int(no_key.sum() + repeated.sum())

    # ...............................................
    def _check_names(self):
        """Parse every distinct scientific name once and record problems."""
        refname = self.__class__.__name__
        self.parsed_names = {}
        self.name_issues = []
        if self._parser is None:
            logit(
                "No name parser given, scientific names are not checked",
                logger=self._log, refname=refname, log_level=logging.WARNING)
            return

        self.parsed_names = self._parser.parse_names(self.names.values())
        for taxon_id, name in self.names.items():
            parsed = self.parsed_names[name]
            if has_name_issue(parsed):
                issue = {
                    DAISIE_DATA.TAXON_KEY: taxon_id,
                    DWC.SCINAME: name,
                }
                issue.update(parsed)
                self.name_issues.append(issue)
                logit(
                    f"Name issue for idspecies {taxon_id}, {name}: type "
                    f"{parsed[GBIF.TYPE_FLD]}, parsed {parsed[GBIF.PARSED_FLD]}, "
                    f"partially {parsed[GBIF.PARTIAL_FLD]}", logger=self._log,
                    refname=refname, log_level=logging.WARNING)

    # ...............................................
    def reconcile(self):
        """Compute the authoritative and the removed taxon identifiers.

        Returns:
            report (dict): counts of core, removed, repeated and problem taxa.
        """
        refname = self.__class__.__name__
        dropped = self._select_unique_taxa()
        self.names = {
            rec[DAISIE_DATA.TAXON_KEY]: taxon_scientific_name(rec)
            for rec in self.taxa.to_dict("records")}
        self._check_names()

        self.core_taxa = set()
        self.remove_taxa = {}
        for taxon_id, name in self.names.items():
            if taxon_id in self._duplicates:
                self.remove_taxa[taxon_id] = {
                    DWC.SCINAME: name,
                    REPLACEMENT_KEY: self._duplicates[taxon_id],
                }
            else:
                self.core_taxa.add(taxon_id)

        for taxon_id in self._duplicates:
            if taxon_id not in self.names:
                logit(
                    f"Curated duplicate idspecies {taxon_id} is not in the taxon "
                    "table", logger=self._log, refname=refname,
                    log_level=logging.WARNING)

        logit(
            f"Reconciled {len(self.names)} taxa: {len(self.core_taxa)} core, "
            f"{len(self.remove_taxa)} removed as duplicates, "
            f"{len(self.name_issues)} with name issues",
            logger=self._log, refname=refname)
        return {
            REPORT.CORE_TAXA: len(self.core_taxa),
            REPORT.REMOVE_TAXA: len(self.remove_taxa),
            REPORT.DUPLICATE_ROWS: dropped,
            REPORT.NAMES_PARSED: len(self.parsed_names),
            REPORT.NAME_ISSUES: len(self.name_issues),
        }

    # ...............................................
    def _confirm_reconciled(self):
        if self.core_taxa is None:
            self.reconcile()

    # ...............................................
    def is_core(self, taxon_id):
        """Test whether an idspecies belongs to the authoritative set.

        Args:
            taxon_id (str): DAISIE idspecies.

        Returns:
            True if taxon_id is in core_taxa.
        """
        self._confirm_reconciled()
        return taxon_id in self.core_taxa

    # ...............................................
    def get_rank_marker(self, taxon_id):
        """Get the parser rank marker for a taxon's scientific name.

        Args:
            taxon_id (str): DAISIE idspecies.

        Returns:
            rank marker, e.g. "subsp.", or an empty string if unknown.
        """
        self._confirm_reconciled()
        try:
            parsed = self.parsed_names[self.names[taxon_id]]
        except KeyError:
            return ""
        return parsed[GBIF.RANK_MARKER_FLD]

    # ...............................................
    def core_taxa_dataframe(self):
        """Get core_taxa as a table sorted by numeric idspecies.

        Returns:
            pandas.DataFrame with column idspecies.
        """
        self._confirm_reconciled()
        ids = sorted(self.core_taxa, key=_numeric_key)
        return pandas.DataFrame({DAISIE_DATA.TAXON_KEY: ids})

    # ...............................................
    def remove_taxa_dataframe(self):
        """Get remove_taxa as a table sorted by numeric idspecies.

        Returns:
            pandas.DataFrame with columns idspecies, scientificName,
                replacement_idspecies.
        """
        self._confirm_reconciled()
        rows = []
        for taxon_id in sorted(self.remove_taxa, key=_numeric_key):
            vals = self.remove_taxa[taxon_id]
            rows.append((taxon_id, vals[DWC.SCINAME], vals[REPLACEMENT_KEY]))
        return pandas.DataFrame(
            rows, columns=[DAISIE_DATA.TAXON_KEY, DWC.SCINAME, REPLACEMENT_KEY])

    # ...............................................
    def name_issues_dataframe(self):
        """Get the names with nomenclatural problems as a table.

        Returns:
            pandas.DataFrame with columns NAME_ISSUE_HEADER.
        """
        self._confirm_reconciled()
        return pandas.DataFrame(self.name_issues, columns=NAME_ISSUE_HEADER)


# .............................................................................
def _numeric_key(taxon_id):
    try:
        return (0, int(taxon_id), taxon_id)
    except ValueError:
        return (1, 0, taxon_id)


# .............................................................................
__all__ = ["TaxonReconciler", "has_name_issue", "taxon_scientific_name"]
