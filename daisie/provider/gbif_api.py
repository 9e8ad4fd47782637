"""Module to query the GBIF name parser for scientific name structure."""
import logging

import requests

from daisie.common.constants import GBIF
from daisie.common.errors import NameParserError
from daisie.common.log import logit


# .............................................................................
def standardize_parse(rec):
    """Reduce a GBIF parser record to the fields used for reconciliation.

    Args:
        rec (dict): one record returned by the GBIF name parser.

    Returns:
        dict with keys type, parsed, parsedPartially and rankMarker.
    """
    return {
        GBIF.TYPE_FLD: rec.get(GBIF.TYPE_FLD) or "",
        GBIF.PARSED_FLD: bool(rec.get(GBIF.PARSED_FLD, False)),
        GBIF.PARTIAL_FLD: bool(rec.get(GBIF.PARTIAL_FLD, False)),
        GBIF.RANK_MARKER_FLD: rec.get(GBIF.RANK_MARKER_FLD) or "",
    }


# .............................................................................
class GbifNameParser:
    """Client for the GBIF name parser, memoized per distinct name string.

    Every distinct name is sent to GBIF at most once for the lifetime of the
    client; repeated names are answered from the cache.
    """

    # ...............................................
    def __init__(
            self, url=GBIF.PARSER_URL, batch_size=GBIF.PARSER_BATCH_SIZE,
            timeout=GBIF.REQUEST_TIMEOUT, logger=None):
        """Constructor.

        Args:
            url (str): URL of the GBIF name parser service.
            batch_size (int): maximum number of names sent in one request.
            timeout (int): seconds to wait for a response.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        self._url = url
        self._batch_size = batch_size
        self._timeout = timeout
        self._log = logger
        self._cache = {}
        self.request_count = 0

    # ...............................................
    def _post_json_to_parser(self, names):
        """Send a list of names to the parser and return its records.

        Args:
            names (list of str): scientific names to parse.

        Returns:
            list of parser records, one per name, in the same order.

        Raises:
            NameParserError: on connection failure, non-OK response, or a response
                that is not a list of one record per name.
        """
        self.request_count += 1
        try:
            response = requests.post(self._url, json=names, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            raise NameParserError(f"Failed on URL {self._url} ({e})")
        if not response.ok:
            raise NameParserError(
                f"Failed on URL {self._url} ({response.status_code}: "
                f"{response.reason})")
        try:
            output = response.json()
        except ValueError as e:
            raise NameParserError(f"Failed to interpret output of {self._url} ({e})")
        if not isinstance(output, list) or len(output) != len(names):
            raise NameParserError(
                f"Expected {len(names)} parsed records from {self._url}, got "
                f"{len(output) if isinstance(output, list) else type(output)}")
        return output

    # ...............................................
    def parse_names(self, names):
        """Parse scientific names, querying GBIF only for names not yet parsed.

        Args:
            names (iterable of str): scientific names, repeats allowed.

        Returns:
            dictionary of each distinct name to its parse result.
        """
        distinct = list(dict.fromkeys(names))
        uncached = [name for name in distinct if name not in self._cache]
        for start in range(0, len(uncached), self._batch_size):
            batch = uncached[start:start + self._batch_size]
            output = self._post_json_to_parser(batch)
            for name, rec in zip(batch, output):
                self._cache[name] = standardize_parse(rec)
            logit(
                f"Parsed {start + len(batch)} of {len(uncached)} new names",
                logger=self._log, refname=self.__class__.__name__,
                log_level=logging.DEBUG)
        return {name: self._cache[name] for name in distinct}


# .............................................................................
__all__ = ["GbifNameParser", "standardize_parse"]
