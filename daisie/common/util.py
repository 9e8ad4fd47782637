"""Tools for reading and writing the flat tables of the DAISIE checklist."""
import datetime as DT
import os

import pandas

from daisie.common.constants import CSV_DELIMITER, ENCODING


# ----------------------------------------------------
def get_today_str():
    """Get a string representation of the current date.

    Returns:
        date_str(str): string representing date in YYYY_MM_DD format.
    """
    n = DT.datetime.now()
    date_str = f"{n.year}_{n.month:02d}_{n.day:02d}"
    return date_str


# ...............................................
def delete_file(file_name, delete_dir=False):
    """Delete file if it exists, optionally delete newly empty directory.

    Args:
        file_name (str): full path to the file to delete
        delete_dir (bool): flag - True to delete parent directory if it becomes empty

    Returns:
        success (bool): True if file was not found, or file was successfully deleted.
            If file deletion results in an empty parent directory, directory is also
            successfully deleted.  False if failed to delete file (and parent
            directories).
        msg (str): message describing a failure, or an empty string.
    """
    success = True
    msg = ''
    if file_name is None:
        msg = "Cannot delete file 'None'"
    else:
        pth, _ = os.path.split(file_name)
        if os.path.exists(file_name):
            try:
                os.remove(file_name)
            except Exception as e:
                success = False
                msg = f"Failed to remove {file_name}, {e}"
            if delete_dir and len(os.listdir(pth)) == 0:
                try:
                    os.removedirs(pth)
                except Exception as e:
                    success = False
                    msg = f"Failed to remove {pth}, {e}"
    return success, msg


# ...............................................
def ready_filename(fullfilename, overwrite=True):
    """Delete file if it exists, create missing parent directories.

    Args:
        fullfilename (str): full path of the file to check
        overwrite (bool): flag indicating to delete the file if it already exists

    Returns:
        boolean: True if file does not yet exist, or file was successfully deleted.
            False if the file exists and overwrite is False.

    Raises:
        PermissionError: if unable to delete existing file when overwrite is true
        Exception: on other delete errors or failure to create directories
    """
    is_ready = True
    if os.path.exists(fullfilename):
        if overwrite:
            success, msg = delete_file(fullfilename)
            if not success:
                raise Exception(f"Unable to delete {fullfilename} ({msg})")
        else:
            is_ready = False
    else:
        pth, _ = os.path.split(fullfilename)
        if pth:
            os.makedirs(pth, exist_ok=True)
            if not os.path.isdir(pth):
                raise Exception(f"Failed to create directories {pth}")
    return is_ready


# .............................................................................
def read_csv_table(csvfile, delimiter=CSV_DELIMITER, encoding=ENCODING):
    """Read a CSV file into a DataFrame of text values.

    Every column is read as text, and no value is converted to a missing-value
    marker, so an empty cell is an empty string.  Whitespace around header
    fieldnames and cell values is removed.

    Args:
        csvfile (str): CSV filename to read.
        delimiter (str): field separator.
        encoding (str): encoding of the file.

    Returns:
        df (pandas.DataFrame): table with one text column per header field.

    Raises:
        FileNotFoundError: on missing csvfile
    """
    if not os.path.exists(csvfile):
        raise FileNotFoundError(f"File {csvfile} does not exist")
    df = pandas.read_csv(
        csvfile, sep=delimiter, dtype=str, keep_default_na=False,
        encoding=encoding)
    df.columns = [str(col).strip() for col in df.columns]
    for col in df.columns:
        df[col] = df[col].str.strip()
    return df


# .............................................................................
def write_csv_table(
        df, csvfile, delimiter=CSV_DELIMITER, encoding=ENCODING, overwrite=True):
    """Write a DataFrame to a CSV file with a header and no index.

    Missing values are written as empty strings.

    Args:
        df (pandas.DataFrame): table to write.
        csvfile (str): output CSV filename.
        delimiter (str): field separator.
        encoding (str): encoding for the output file.
        overwrite (bool): True to delete an existing file before write.

    Returns:
        count of records written.

    Raises:
        FileExistsError: on existing file if overwrite is False
    """
    if not ready_filename(csvfile, overwrite=overwrite):
        raise FileExistsError(f"File {csvfile} exists and overwrite is False")
    df.to_csv(
        csvfile, sep=delimiter, index=False, encoding=encoding, na_rep="",
        lineterminator="\n")
    return len(df)


# .............................................................................
__all__ = [
    "delete_file",
    "get_today_str",
    "read_csv_table",
    "ready_filename",
    "write_csv_table",
]
