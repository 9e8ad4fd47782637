"""Tests for assembling the Distribution extension."""
from daisie.common.constants import DWC, REPORT
from daisie.process.distribution import DistributionAssembler, LocationReference
from daisie.process.normalize import split_remarks
from daisie.process.references import ReferenceResolver
from daisie.provider.constants import DISTRIBUTION_REMARKS_FIELDS, INPUT

CORE_TAXA = {"30", "100", "200"}


# .............................................................................
def _assembler(daisie_table, logger, distribution=None):
    if distribution is None:
        distribution = daisie_table(INPUT.DISTRIBUTION)
    return DistributionAssembler(
        distribution, daisie_table(INPUT.DONOR_AREA), daisie_table(INPUT.PATHWAYS),
        daisie_table(INPUT.IMPACT),
        ReferenceResolver(daisie_table(INPUT.LITERATURE_REFERENCES), logger=logger),
        CORE_TAXA, logger=logger)


# .............................................................................
class TestDistributionAssembler:
    """Class for testing Distribution records."""

    # .....................................
    def test_records(self, daisie_table, logger):
        """Test records for core taxa only, sorted, with the full header."""
        assembler = _assembler(daisie_table, logger)
        df = assembler.assemble()
        assert(list(df.columns) == DWC.DISTRIBUTION_HEADER)
        assert(list(df[DWC.TAXON_ID]) == ["30", "100", "200"])
        assert(not assembler.diagnostics)
        assert(assembler.report()[REPORT.RECORDS_OUTPUT] == 3)

    # .....................................
    def test_country_record(self, daisie_table, logger):
        """Test normalized values of a country record."""
        df = _assembler(daisie_table, logger).assemble()
        rec = df.set_index(DWC.TAXON_ID).loc["100"]
        assert(rec[DWC.LOCATION_ID] == "ISO_3166-1:AX")
        assert(rec[DWC.LOCALITY] == "Åland")
        assert(rec[DWC.COUNTRY_CODE] == "AX")
        assert(rec[DWC.OCCURRENCE_STATUS] == "common")
        assert(rec[DWC.ESTABLISHMENT_MEANS] == "naturalised")
        assert(rec[DWC.EVENT_DATE] == "1889")
        assert(rec[DWC.SOURCE] == "Country atlas 2005 | Year note")

    # .....................................
    def test_coastal_extinct_record(self, daisie_table, logger):
        """Test a coastal record of an extinct population."""
        df = _assembler(daisie_table, logger).assemble()
        rec = df.set_index(DWC.TAXON_ID).loc["200"]
        assert(rec[DWC.LOCATION_ID] == "ISO_3166-1:FR | mrgid:3141")
        assert(rec[DWC.LOCALITY] == "France | Atlantic coast")
        assert(rec[DWC.OCCURRENCE_STATUS] == "extinct")
        assert(rec[DWC.EVENT_DATE] == "1950/2001")

    # .....................................
    def test_region_without_code(self, daisie_table, logger):
        """Test that Europe has a locality but no locationID."""
        df = _assembler(daisie_table, logger).assemble()
        rec = df.set_index(DWC.TAXON_ID).loc["30"]
        assert(rec[DWC.LOCATION_ID] == "")
        assert(rec[DWC.LOCALITY] == "Europe")
        assert(rec[DWC.COUNTRY_CODE] == "")
        assert(rec[DWC.EVENT_DATE] == "")

    # .....................................
    def test_remarks(self, daisie_table, logger):
        """Test that remarks split back into the fixed fields, with satellite values."""
        df = _assembler(daisie_table, logger).assemble()
        remarks = df.set_index(DWC.TAXON_ID).loc["100", DWC.OCCURRENCE_REMARKS]
        pairs = split_remarks(remarks)
        assert([fld for fld, _val in pairs] == list(DISTRIBUTION_REMARKS_FIELDS))
        values = dict(pairs)
        assert(values["donor_area"] == "Asia; North America")
        assert(values["pathway"] == "Horticulture")
        assert(values["impact"] == "")
        assert(values["notes"] == "Garden escape")
        for remarks in df[DWC.OCCURRENCE_REMARKS]:
            assert(len(split_remarks(remarks)) == len(DISTRIBUTION_REMARKS_FIELDS))

    # .....................................
    def test_diagnostics(self, daisie_table, logger):
        """Test that unmappable values are diagnosed and left empty."""
        distribution = daisie_table(INPUT.DISTRIBUTION, {
            0: {"country": "Atlantis", "start_year": "sometime"}})
        assembler = _assembler(daisie_table, logger, distribution=distribution)
        df = assembler.assemble()
        rec = df.set_index(DWC.TAXON_ID).loc["100"]
        assert(rec[DWC.COUNTRY_CODE] == "")
        assert(rec[DWC.LOCATION_ID] == "")
        assert(rec[DWC.LOCALITY] == "Atlantis")
        assert(rec[DWC.EVENT_DATE] == "")
        summary = assembler.diagnostics.summarize()
        assert(summary == {
            "unmappable_vocabulary_value": {"Atlantis": 1},
            "unparseable_date": {"sometime": 1},
        })

    # .....................................
    def test_malformed_dates(self, daisie_table, logger):
        """Test that an interval or impossible date in a year field is diagnosed."""
        distribution = daisie_table(INPUT.DISTRIBUTION, {
            0: {"start_year": "1990/1995", "end_year": "2000"},
            1: {"start_year": "2001-13-45"}})
        assembler = _assembler(daisie_table, logger, distribution=distribution)
        df = assembler.assemble()
        event_dates = df.set_index(DWC.TAXON_ID)[DWC.EVENT_DATE]
        assert(event_dates.loc["100"] == "2000")
        assert(event_dates.loc["200"] == "2001")
        assert(assembler.diagnostics.summarize() == {
            "unparseable_date": {"1990/1995": 1, "2001-13-45": 1},
        })

    # .....................................
    def test_location_reference(self, daisie_table, logger):
        """Test the locations recorded for the Description assembler."""
        assembler = _assembler(daisie_table, logger)
        assembler.assemble()
        locations = assembler.location_reference
        assert(len(locations) == 3)
        assert("r3" not in locations)
        assert(locations.get("r2") == ("ISO_3166-1:FR | mrgid:3141", "France | Atlantic coast"))
        assert(locations.get_locality("r9") == "")
        assert(list(locations.to_dataframe().columns) == LocationReference.HEADER)
