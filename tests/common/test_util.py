"""Tests for reading and writing flat text tables."""
import os

import pandas
import pytest

from daisie.common.util import (
    delete_file, read_csv_table, ready_filename, write_csv_table)


# .............................................................................
class TestCsvTables:
    """Class for testing CSV table I/O with text values only."""

    # .....................................
    def test_read_keeps_text(self, tmp_path):
        """Test that NA-like tokens and numbers stay text, and cells are stripped."""
        fname = str(tmp_path / "in.csv")
        with open(fname, mode="w", encoding="utf-8") as outf:
            outf.write(" idspecies ,notes,year\n007, NA ,\n12,None,1889\n")
        df = read_csv_table(fname)
        assert(list(df.columns) == ["idspecies", "notes", "year"])
        assert(df.loc[0, "idspecies"] == "007")
        assert(df.loc[0, "notes"] == "NA")
        assert(df.loc[0, "year"] == "")
        assert(df.loc[1, "notes"] == "None")

    # .....................................
    def test_read_missing_file(self, tmp_path):
        """Test that reading a missing file fails."""
        with pytest.raises(FileNotFoundError):
            read_csv_table(str(tmp_path / "missing.csv"))

    # .....................................
    def test_write(self, tmp_path):
        """Test writing a table with empty values."""
        fname = str(tmp_path / "sub" / "out.csv")
        df = pandas.DataFrame({"taxonID": ["1", "2"], "source": ["", "Smith"]})
        count = write_csv_table(df, fname)
        assert(count == 2)
        with open(fname, encoding="utf-8") as inf:
            assert(inf.read() == "taxonID,source\n1,\n2,Smith\n")

    # .....................................
    def test_write_no_overwrite(self, tmp_path):
        """Test that an existing file is kept when overwrite is False."""
        fname = str(tmp_path / "out.csv")
        df = pandas.DataFrame({"taxonID": ["1"]})
        write_csv_table(df, fname)
        with pytest.raises(FileExistsError):
            write_csv_table(df, fname, overwrite=False)
        assert(ready_filename(fname, overwrite=True))
        assert(not os.path.exists(fname))

    # .....................................
    def test_delete_file(self, tmp_path):
        """Test deleting a file, and a file that is not there."""
        fname = str(tmp_path / "sub" / "out.csv")
        write_csv_table(pandas.DataFrame({"taxonID": ["1"]}), fname)
        success, msg = delete_file(fname)
        assert(success)
        assert(msg == "")
        assert(not os.path.exists(fname))
        success, _msg = delete_file(None)
        assert(success)
