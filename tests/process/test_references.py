"""Tests for resolving literature references into citations."""
import pandas

from daisie.common.constants import REPORT
from daisie.process.references import (
    ReferenceResolver, clean_longref, clean_url, compose_citation)
from daisie.provider.constants import INPUT


# .............................................................................
class TestCitation:
    """Class for testing the citation precedence rules."""

    # .....................................
    def test_empty(self):
        """Test that a reference without components is an empty citation."""
        assert(compose_citation() == "")
        assert(compose_citation(longref=" ", shortref="", url="not a url") == "")

    # .....................................
    def test_longref_wins(self):
        """Test that the short reference never appears next to a long one."""
        citation = compose_citation(
            longref="1, 28 Smith & Jones 2001", shortref="Smith2001",
            url="Scientificus namus")
        assert(citation == ", 28 Smith & Jones 2001")
        citation = compose_citation(
            longref="Smith & Jones 2001", shortref="Smith2001",
            url="http://example.org/sj")
        assert("Smith2001" not in citation)
        assert(citation == "Smith & Jones 2001(http://example.org/sj)")

    # .....................................
    def test_shortref_and_url(self):
        """Test the fallbacks without a long reference."""
        assert(compose_citation(shortref="Brown 1999", url="http://x.org") ==
               "Brown 1999(http://x.org)")
        assert(compose_citation(shortref="Brown 1999", url="Aus bus") == "Brown 1999")
        assert(compose_citation(url="https://x.org/a") == "https://x.org/a")

    # .....................................
    def test_cleaning(self):
        """Test that only a single leading digit is removed from a long reference."""
        assert(clean_longref("1 Smith 2001") == "Smith 2001")
        assert(clean_longref("12, Smith 2001") == "2, Smith 2001")
        assert(clean_url("www.example.org") == "")
        assert(clean_url("http://example.org") == "http://example.org")


# .............................................................................
class TestReferenceResolver:
    """Class for testing the citation indexes."""

    # .....................................
    def test_resolve(self, daisie_table, logger):
        """Test the indexes built from the fixture references."""
        resolver = ReferenceResolver(
            daisie_table(INPUT.LITERATURE_REFERENCES), logger=logger)
        report = resolver.resolve()
        assert(report[REPORT.REFERENCE_COUNT] == 5)
        assert(report[REPORT.REFERENCE_FIELD_COUNT] == 3)
        assert(resolver.get_citation("s1") == ", 28 Smith & Jones 2001")
        assert(resolver.get_citation("s2") == "Brown 1999(http://example.org/brown)")
        assert(resolver.get_citation("") == "")
        assert(resolver.get_citation("unknown") == "")
        assert(resolver.get_region_citations("r1") == {
            "country": "Country atlas 2005", "start_year": "Year note"})

    # .....................................
    def test_first_occurrence_wins(self, logger):
        """Test that a repeated sourceid keeps its first citation."""
        df = pandas.DataFrame([
            {"sourceid": "s1", "id_sp_region": "r1", "field_name": "country",
             "shortref": "First", "longref": "", "url": ""},
            {"sourceid": "s1", "id_sp_region": "r1", "field_name": "country",
             "shortref": "Second", "longref": "", "url": ""},
        ])
        resolver = ReferenceResolver(df, logger=logger)
        report = resolver.resolve()
        assert(report[REPORT.DUPLICATE_ROWS] == 1)
        assert(resolver.get_citation("s1") == "First")
        assert(resolver.get_region_citations("r1") == {"country": "First"})

    # .....................................
    def test_region_source(self, daisie_table, logger):
        """Test concatenating the citations of a distribution record."""
        resolver = ReferenceResolver(
            daisie_table(INPUT.LITERATURE_REFERENCES), logger=logger)
        assert(resolver.compose_region_source("r1") == "Country atlas 2005 | Year note")
        assert(resolver.compose_region_source("r2") == "Country atlas 2005")
        assert(resolver.compose_region_source("r9") == "")

    # .....................................
    def test_region_source_drops_repeats(self, logger):
        """Test that repeated and empty field citations are dropped."""
        df = pandas.DataFrame([
            {"sourceid": "a", "id_sp_region": "r1", "field_name": "end_year",
             "shortref": "Atlas", "longref": "", "url": ""},
            {"sourceid": "b", "id_sp_region": "r1", "field_name": "country",
             "shortref": "Atlas", "longref": "", "url": ""},
            {"sourceid": "c", "id_sp_region": "r1", "field_name": "coast",
             "shortref": "", "longref": "", "url": ""},
        ])
        resolver = ReferenceResolver(df, logger=logger)
        assert(resolver.compose_region_source("r1") == "Atlas")

    # .....................................
    def test_dataframes(self, daisie_table, logger):
        """Test the intermediate tables."""
        resolver = ReferenceResolver(
            daisie_table(INPUT.LITERATURE_REFERENCES), logger=logger)
        refs = resolver.references_dataframe()
        fields = resolver.reference_fields_dataframe()
        assert(list(refs.columns) == ["sourceid", "source"])
        assert(len(refs) == 5)
        assert(list(fields.columns) == ["id_sp_region", "field_name", "source"])
        assert(len(fields) == 3)
