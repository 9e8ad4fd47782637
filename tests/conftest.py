"""Shared fixtures: a small DAISIE export and an offline name parser."""
import os

import pandas
import pytest

from daisie.common.constants import GBIF
from daisie.common.log import Logger
from daisie.provider.constants import INPUT

SCIENTIFIC_PARSE = {
    GBIF.TYPE_FLD: GBIF.SCIENTIFIC_TYPE,
    GBIF.PARSED_FLD: True,
    GBIF.PARTIAL_FLD: False,
    GBIF.RANK_MARKER_FLD: "sp.",
}

# One complete, internally consistent DAISIE export.  Taxon 10195 is a curated
# duplicate, so none of its records may reach the checklist.
DAISIE_TABLES = {
    INPUT.LITERATURE_REFERENCES: [
        {"sourceid": "s1", "id_sp_region": "", "field_name": "",
         "shortref": "Smith2001", "longref": "1, 28 Smith & Jones 2001",
         "url": "Scientificus namus"},
        {"sourceid": "s2", "id_sp_region": "", "field_name": "",
         "shortref": "Brown 1999", "longref": "", "url": "http://example.org/brown"},
        {"sourceid": "s3", "id_sp_region": "r1", "field_name": "country",
         "shortref": "", "longref": "Country atlas 2005", "url": ""},
        {"sourceid": "s4", "id_sp_region": "r1", "field_name": "start_year",
         "shortref": "Year note", "longref": "", "url": ""},
        {"sourceid": "s5", "id_sp_region": "r2", "field_name": "country",
         "shortref": "", "longref": "Country atlas 2005", "url": ""},
    ],
    INPUT.TAXON: [
        {"idspecies": "100", "kingdom": "Plantae", "phylum": "Tracheophyta",
         "class": "Magnoliopsida", "order": "Asterales", "family": "Asteraceae",
         "genus": "Solidago", "species": "canadensis", "species_author": "L.",
         "subtaxon": "", "subtaxon_author": "", "notes": "Tall\ngoldenrod"},
        {"idspecies": "200", "kingdom": "Animalia", "phylum": "Chordata",
         "class": "Mammalia", "order": "Rodentia", "family": "Myocastoridae",
         "genus": "Myocastor", "species": "coypus",
         "species_author": "(Molina 1782)", "subtaxon": "",
         "subtaxon_author": "", "notes": ""},
        {"idspecies": "10195", "kingdom": "Plantae", "phylum": "", "class": "",
         "order": "", "family": "", "genus": "Genusx", "species": "dup",
         "species_author": "Auth", "subtaxon": "", "subtaxon_author": "",
         "notes": ""},
        {"idspecies": "30", "kingdom": "Plantae", "phylum": "Tracheophyta",
         "class": "Magnoliopsida", "order": "Caryophyllales",
         "family": "Amaranthaceae", "genus": "Beta", "species": "vulgaris",
         "species_author": "L.", "subtaxon": "subsp. maritima",
         "subtaxon_author": "(L.) Arcang.", "notes": ""},
    ],
    INPUT.DISTRIBUTION: [
        {"id_sp_region": "r1", "idspecies": "100", "country": "Åland", "coast": "",
         "coast_code": "", "start_year": "1889-1892", "end_year": "present",
         "abundance": "Common", "population_status": "Established",
         "invasiveness": "", "notes": "Garden escape"},
        {"id_sp_region": "r2", "idspecies": "200", "country": "France",
         "coast": "Atlantic coast", "coast_code": "3141", "start_year": "<1950",
         "end_year": "2001", "abundance": "Absent or extinct",
         "population_status": "Extinct", "invasiveness": "", "notes": ""},
        {"id_sp_region": "r3", "idspecies": "10195", "country": "Germany",
         "coast": "", "coast_code": "", "start_year": "", "end_year": "",
         "abundance": "", "population_status": "", "invasiveness": "",
         "notes": ""},
        {"id_sp_region": "r4", "idspecies": "30", "country": "Europe", "coast": "",
         "coast_code": "", "start_year": "unknown", "end_year": "",
         "abundance": "Rare", "population_status": "Casual", "invasiveness": "",
         "notes": ""},
    ],
    INPUT.DONOR_AREA: [
        {"id_sp_region": "r1", "idspecies": "100", "donor_area": "Asia",
         "sourceid": "s2"},
        {"id_sp_region": "r1", "idspecies": "100", "donor_area": "North America",
         "sourceid": ""},
        {"id_sp_region": "r1", "idspecies": "100", "donor_area": "Asia",
         "sourceid": "s2"},
        {"id_sp_region": "r3", "idspecies": "10195", "donor_area": "Asia",
         "sourceid": ""},
    ],
    INPUT.PATHWAYS: [
        {"id_sp_region": "r1", "idspecies": "100", "pathway": "Horticulture",
         "sourceid": "s1"},
    ],
    INPUT.IMPACT: [
        {"id_sp_region": "r2", "idspecies": "200",
         "impact": "Damage to river banks", "sourceid": ""},
    ],
    INPUT.HABITAT: [
        {"idspecies": "100", "habitat": "Grassland", "sourceid": "s1"},
        {"idspecies": "200", "habitat": "Wetland", "sourceid": ""},
        {"idspecies": "10195", "habitat": "Forest", "sourceid": ""},
    ],
    INPUT.NATIVE_RANGE: [
        {"idspecies": "100", "native_range": "North America", "sourceid": "s2"},
        {"idspecies": "100", "native_range": "North America", "sourceid": "s2"},
    ],
    INPUT.VERNACULAR_NAMES: [
        {"idspecies": "100", "vernacular_name": "Canada goldenrod",
         "language": "English", "sourceid": "s2"},
        {"idspecies": "100", "vernacular_name": "Kanadische Goldrute",
         "language": "German", "sourceid": ""},
        {"idspecies": "200", "vernacular_name": "", "language": "English",
         "sourceid": ""},
        {"idspecies": "200", "vernacular_name": "Coypu", "language": "English",
         "sourceid": ""},
        {"idspecies": "10195", "vernacular_name": "Foo", "language": "English",
         "sourceid": ""},
    ],
}


# .............................................................................
class FakeNameParser:
    """Offline stand-in for GbifNameParser, counting the names it is asked for."""

    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    def parse_names(self, names):
        names = list(names)
        self.calls.append(names)
        parsed = {}
        for name in names:
            rec = dict(SCIENTIFIC_PARSE)
            rec.update(self.results.get(name, {}))
            parsed[name] = rec
        return parsed


# .............................................................................
def make_table(table, changes=None):
    """Get a fixture table as a DataFrame of text, optionally with changed cells.

    Args:
        table (str): input table basename.
        changes (dict): {row index: {field: value}} to apply.

    Returns:
        pandas.DataFrame
    """
    rows = [dict(rec) for rec in DAISIE_TABLES[table]]
    for idx, vals in (changes or {}).items():
        rows[idx].update(vals)
    return pandas.DataFrame(rows, dtype=str)


# .............................................................................
def write_daisie_inputs(path, changes=None):
    """Write the fixture export as CSV files.

    Args:
        path (str): destination directory.
        changes (dict): {table: {row index: {field: value}}} to apply.

    Returns:
        path
    """
    changes = changes or {}
    os.makedirs(path, exist_ok=True)
    for table in DAISIE_TABLES:
        df = make_table(table, changes.get(table))
        df.to_csv(os.path.join(path, f"{table}.csv"), index=False, encoding="utf-8")
    return path


# .............................................................................
@pytest.fixture
def logger():
    log = Logger("test_daisie", log_console=False)
    yield log
    log.close()


@pytest.fixture
def name_parser():
    return FakeNameParser(results={
        "Beta vulgaris subsp. maritima (L.) Arcang.": {
            GBIF.RANK_MARKER_FLD: "subsp."},
        "Genusx dup Auth": {GBIF.TYPE_FLD: "DOUBTFUL"},
    })


@pytest.fixture
def input_path(tmp_path):
    return write_daisie_inputs(str(tmp_path / "input"))


@pytest.fixture
def daisie_table():
    return make_table


@pytest.fixture
def write_inputs():
    return write_daisie_inputs


@pytest.fixture
def fake_parser():
    return FakeNameParser
