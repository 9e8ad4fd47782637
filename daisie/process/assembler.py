"""Base class for building one Darwin Core table from DAISIE source tables."""
import logging

import pandas

from daisie.common.constants import DWC, MULTIVALUE_SEPARATOR, REPORT
from daisie.common.errors import Diagnostics, NormalizationError
from daisie.common.log import logit
from daisie.process.normalize import clean_text
from daisie.provider.constants import DAISIE_DATA


# .............................................................................
def join_satellite_values(df, field, keys=(DAISIE_DATA.TAXON_KEY, DAISIE_DATA.REGION_KEY)):
    """Collapse the values of a satellite table per natural key.

    Args:
        df (pandas.DataFrame): satellite table, e.g. donor area or pathways.
        field (str): fieldname holding the values to collapse.
        keys (tuple of str): fieldnames forming the natural key.

    Returns:
        dictionary of key tuple to the distinct non-empty values, in source
            order, joined with "; ".
    """
    values = {}
    for rec in df.to_dict("records"):
        val = clean_text(rec[field])
        if not val:
            continue
        key = tuple(rec[k] for k in keys)
        vals = values.setdefault(key, [])
        if val not in vals:
            vals.append(val)
    return {key: MULTIVALUE_SEPARATOR.join(vals) for key, vals in values.items()}


# .............................................................................
def sort_by_taxon_id(df):
    """Sort a table by ascending numeric taxonID, keeping the order of ties.

    Args:
        df (pandas.DataFrame): table with a taxonID column.

    Returns:
        sorted pandas.DataFrame with a fresh index.
    """
    df = df.sort_values(
        by=DWC.TAXON_ID, kind="stable",
        key=lambda col: pandas.to_numeric(col, errors="coerce"))
    return df.reset_index(drop=True)


# .............................................................................
class TableAssembler:
    """Base class for the assemblers of the four Darwin Core tables.

    Subclasses set `table` and `header` and implement `_assemble_records`.
    Values that cannot be normalized are recorded in a shared Diagnostics
    collector and left empty, so that one run reports all of them.
    """
    table = None
    header = None

    # ...............................................
    def __init__(self, core_taxa, diagnostics=None, logger=None):
        """Constructor.

        Args:
            core_taxa (set of str): idspecies allowed in the output table.
            diagnostics (daisie.common.errors.Diagnostics): collector shared by all
                assemblers, a new one if None.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        self._core_taxa = core_taxa
        self._log = logger
        if diagnostics is None:
            diagnostics = Diagnostics(logger=logger)
        self.diagnostics = diagnostics
        self.read_count = 0
        self.dropped_count = 0
        self.output_count = 0

    # ...............................................
    def filter_core_taxa(self, df, source):
        """Drop records whose idspecies is not a core taxon.

        Args:
            df (pandas.DataFrame): source table with an idspecies column.
            source (str): name of the source table, for logging.

        Returns:
            pandas.DataFrame with only records of core taxa.
        """
        is_core = df[DAISIE_DATA.TAXON_KEY].isin(self._core_taxa)
        dropped = int((~is_core).sum())
        self.read_count += len(df)
        self.dropped_count += dropped
        if dropped:
            logit(
                f"Dropped {dropped} of {len(df)} {source} records for taxa outside "
                "the checklist", logger=self._log, refname=self.__class__.__name__)
        return df[is_core]

    # ...............................................
    def normalize(self, func, record_key, field, *args):
        """Apply a normalizer, recording a failure instead of raising it.

        Args:
            func (function): normalizer from daisie.process.normalize.
            record_key (str): natural key of the source record.
            field (str): source fieldname, for the diagnostic.
            *args: arguments to func.

        Returns:
            the normalized value, or an empty string on failure.
        """
        try:
            return func(*args)
        except NormalizationError as e:
            self.diagnostics.add(self.table, record_key, field, e)
            return ""

    # ...............................................
    def finalize(self, records):
        """Project, fill and sort output records into the output table.

        Args:
            records (list of dict): output records keyed by Darwin Core term.

        Returns:
            pandas.DataFrame with columns in header order, "" for missing values.
        """
        df = pandas.DataFrame(records, columns=self.header)
        df = df.fillna("")
        return sort_by_taxon_id(df)

    # ...............................................
    def _assemble_records(self):
        raise NotImplementedError

    # ...............................................
    def assemble(self):
        """Build the output table.

        Returns:
            pandas.DataFrame of the Darwin Core table.
        """
        before = len(self.diagnostics)
        df = self.finalize(self._assemble_records())
        self.output_count = len(df)
        errors = len(self.diagnostics) - before
        logit(
            f"Assembled {self.output_count} {self.table} records from "
            f"{self.read_count} source records, {errors} values not normalized",
            logger=self._log, refname=self.__class__.__name__,
            log_level=logging.WARNING if errors else logging.INFO)
        return df

    # ...............................................
    def report(self):
        """Summarize the assembly.

        Returns:
            report (dict): counts of records read, dropped and output.
        """
        return {
            REPORT.RECORDS_READ: self.read_count,
            REPORT.RECORDS_DROPPED: self.dropped_count,
            REPORT.RECORDS_OUTPUT: self.output_count,
        }


# .............................................................................
__all__ = ["TableAssembler", "join_satellite_values", "sort_by_taxon_id"]
