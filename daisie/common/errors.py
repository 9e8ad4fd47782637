"""Exceptions and the diagnostic collector for the DAISIE checklist workflow."""
import logging

import pandas

from daisie.common.log import logit


# .............................................................................
class InputError(Exception):
    """A required input table or required column is missing."""


# .............................................................................
class NameParserError(Exception):
    """The scientific name parser failed or returned an unusable response."""


# .............................................................................
class ChecklistError(Exception):
    """The checklist cannot be written without corrupting the output dataset."""


# .............................................................................
class NormalizationError(ValueError):
    """Base class for a source value a normalizer cannot map.

    Attributes:
        value (str): the offending source value.
        category (str): short name of the diagnostic category.
    """
    category = "normalization"

    def __init__(self, value, message):
        """Constructor.

        Args:
            value (str): the source value that could not be normalized.
            message (str): description of the failure.
        """
        super().__init__(message)
        self.value = value


# .............................................................................
class VocabularyError(NormalizationError):
    """A source value is not present in an enumerated recode table."""
    category = "unmappable_vocabulary_value"

    def __init__(self, value, vocabulary):
        """Constructor.

        Args:
            value (str): the source value missing from the recode table.
            vocabulary (str): name of the recode table.
        """
        super().__init__(value, f"Value '{value}' is not in vocabulary {vocabulary}")
        self.vocabulary = vocabulary


# .............................................................................
class DateParseError(NormalizationError):
    """A free-text date does not reduce to a year, a full date, or an interval."""
    category = "unparseable_date"

    def __init__(self, value, remainder):
        """Constructor.

        Args:
            value (str): the original source text.
            remainder (str): what was left after the normalization steps.
        """
        super().__init__(
            value, f"Date '{value}' could not be normalized (left '{remainder}')")
        self.remainder = remainder


# .............................................................................
class Diagnostics:
    """Collect normalization failures from all table assemblers.

    Failures are collected rather than raised, so that one run reports every
    unmapped value at once.  The pipeline decides at its boundary whether a
    non-empty collection fails the run.
    """
    HEADER = ["table", "record_key", "field", "category", "value", "message"]

    # ...............................................
    def __init__(self, logger=None):
        """Constructor.

        Args:
            logger (daisie.common.log.Logger): logger for reporting each failure.
        """
        self._log = logger
        self.records = []

    # ...............................................
    def __len__(self):
        return len(self.records)

    # ...............................................
    def __bool__(self):
        return len(self.records) > 0

    # ...............................................
    def add(self, table, record_key, field, err):
        """Record a normalization failure.

        Args:
            table (str): basename of the output table being assembled.
            record_key (str): natural key of the source record.
            field (str): source field holding the value.
            err (daisie.common.errors.NormalizationError): the failure.
        """
        self.records.append({
            "table": table,
            "record_key": record_key,
            "field": field,
            "category": err.category,
            "value": err.value,
            "message": str(err),
        })
        logit(
            f"{table} record {record_key}, field {field}: {err}", logger=self._log,
            refname=self.__class__.__name__, log_level=logging.ERROR)

    # ...............................................
    def summarize(self):
        """Summarize failures by category and distinct value.

        Returns:
            summary (dict): {category: {value: count}}, suitable for a JSON report.
        """
        summary = {}
        for rec in self.records:
            by_value = summary.setdefault(rec["category"], {})
            by_value[rec["value"]] = by_value.get(rec["value"], 0) + 1
        return summary

    # ...............................................
    def to_dataframe(self):
        """Return all failures as a table.

        Returns:
            pandas.DataFrame with one row per failure, columns Diagnostics.HEADER.
        """
        return pandas.DataFrame(self.records, columns=self.HEADER)


# .............................................................................
__all__ = [
    "ChecklistError",
    "DateParseError",
    "Diagnostics",
    "InputError",
    "NameParserError",
    "NormalizationError",
    "VocabularyError",
]
