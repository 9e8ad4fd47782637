"""Read and validate the tables of a DAISIE inventory export."""
import logging
import os

from daisie.common.constants import ERR_SEPARATOR
from daisie.common.errors import InputError
from daisie.common.log import logit
from daisie.common.util import read_csv_table
from daisie.provider.constants import DAISIE_DATA, INPUT


# .............................................................................
class DaisieData:
    """Class for reading the flat tables of one DAISIE dataset snapshot.

    Each table is read with every field as text.  Required fields must be
    present in the header; missing optional fields are added as empty columns.
    Fields not expected for a table are kept and ignored downstream.
    """

    # ...............................................
    def __init__(self, input_path, logger=None):
        """Constructor.

        Args:
            input_path (str): directory containing one CSV file per input table.
            logger (daisie.common.log.Logger): logger for processing messages.

        Raises:
            InputError: on missing input directory.
        """
        if not os.path.isdir(input_path):
            raise InputError(f"Input directory {input_path} does not exist")
        self._input_path = input_path
        self._log = logger
        self.tables = {}

    # ...............................................
    def get_filename(self, table):
        """Get the full filename for an input table.

        Args:
            table (str): basename of an input table, e.g. INPUT.TAXON

        Returns:
            full filename of the CSV file for the table.
        """
        return os.path.join(self._input_path, f"{table}.{DAISIE_DATA.DATA_EXT}")

    # ...............................................
    def _check_header(self, table, df):
        """Confirm required fields exist and add absent optional fields.

        Args:
            table (str): basename of an input table.
            df (pandas.DataFrame): table as read from file.

        Returns:
            df (pandas.DataFrame): table with every expected field present.

        Raises:
            InputError: on a missing required field.
        """
        refname = self.__class__.__name__
        missing = [
            fld for fld in INPUT.FIELDS[table]["required"] if fld not in df.columns]
        if missing:
            logit(ERR_SEPARATOR, logger=self._log, refname=refname,
                  log_level=logging.ERROR)
            raise InputError(
                f"Table {table} is missing required fields {missing}")
        for fld in INPUT.FIELDS[table]["optional"]:
            if fld not in df.columns:
                logit(
                    f"Table {table} has no field {fld}, using empty values",
                    logger=self._log, refname=refname, log_level=logging.WARNING)
                df[fld] = ""
        return df

    # ...............................................
    def read_table(self, table):
        """Read one input table.

        Args:
            table (str): basename of an input table, e.g. INPUT.TAXON

        Returns:
            df (pandas.DataFrame): the table with all expected fields, as text.

        Raises:
            InputError: on missing file or missing required field.
        """
        fname = self.get_filename(table)
        if not os.path.exists(fname):
            raise InputError(f"Input file {fname} does not exist")
        df = read_csv_table(fname, delimiter=DAISIE_DATA.DELIMITER)
        df = self._check_header(table, df)
        logit(
            f"Read {len(df)} records from {fname}", logger=self._log,
            refname=self.__class__.__name__)
        self.tables[table] = df
        return df

    # ...............................................
    def read_all(self, tables=None):
        """Read input tables, all of them by default.

        Args:
            tables (list of str): basenames of tables to read; None for all.

        Returns:
            dictionary of table basename to pandas.DataFrame
        """
        if tables is None:
            tables = INPUT.tables()
        for table in tables:
            self.read_table(table)
        return self.tables

    # ...............................................
    def get_table(self, table):
        """Get a table, reading it if it has not been read yet.

        Args:
            table (str): basename of an input table.

        Returns:
            pandas.DataFrame for the table.
        """
        try:
            df = self.tables[table]
        except KeyError:
            df = self.read_table(table)
        return df

    # ...............................................
    @property
    def record_counts(self):
        """Count records in each table read so far.

        Returns:
            dictionary of table basename to record count.
        """
        return {table: len(df) for table, df in self.tables.items()}


# .............................................................................
__all__ = ["DaisieData"]
