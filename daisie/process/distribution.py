"""Assemble the Darwin Core Distribution extension from DAISIE regional records."""
import pandas

from daisie.common.constants import DWC, OUTPUT
from daisie.process.assembler import TableAssembler, join_satellite_values
from daisie.process.normalize import (
    END_YEAR_EMPTY, START_YEAR_EMPTY, assemble_remarks, compose_interval,
    compose_location, compose_occurrence_status, parse_year, recode_country,
    recode_establishment_means)
from daisie.provider.constants import (
    DAISIE_DATA, DISTRIBUTION_REMARKS_FIELDS, INPUT)


# .............................................................................
class LocationReference:
    """Lookup of the location of each distribution record, by id_sp_region.

    Filled by the DistributionAssembler and read by the DescriptionAssembler to
    annotate region-scoped descriptions.
    """
    HEADER = [DAISIE_DATA.REGION_KEY, DWC.LOCATION_ID, DWC.LOCALITY]

    # ...............................................
    def __init__(self):
        self._locations = {}

    # ...............................................
    def __len__(self):
        return len(self._locations)

    # ...............................................
    def __contains__(self, region_id):
        return region_id in self._locations

    # ...............................................
    def add(self, region_id, location_id, locality):
        """Record the location of a distribution record, keeping the first one.

        Args:
            region_id (str): DAISIE id_sp_region.
            location_id (str): Darwin Core locationID.
            locality (str): Darwin Core locality.
        """
        if region_id not in self._locations:
            self._locations[region_id] = (location_id, locality)

    # ...............................................
    def get(self, region_id):
        """Get the (locationID, locality) of a distribution record.

        Returns:
            tuple of locationID and locality, both empty for an unknown record.
        """
        return self._locations.get(region_id, ("", ""))

    # ...............................................
    def get_locality(self, region_id):
        """Get the locality of a distribution record, empty if unknown."""
        return self.get(region_id)[1]

    # ...............................................
    def to_dataframe(self):
        """Return the lookup as a table with columns HEADER."""
        rows = [
            (region_id, loc[0], loc[1]) for region_id, loc in self._locations.items()]
        return pandas.DataFrame(rows, columns=self.HEADER)


# .............................................................................
class DistributionAssembler(TableAssembler):
    """Build one Distribution record per DAISIE species-in-region record.

    Donor area, pathway and impact values recorded for the same species and
    region are carried into the occurrence remarks.
    """
    table = OUTPUT.DISTRIBUTION
    header = DWC.DISTRIBUTION_HEADER

    # ...............................................
    def __init__(
            self, distribution_df, donor_area_df, pathways_df, impact_df,
            references, core_taxa, diagnostics=None, logger=None):
        """Constructor.

        Args:
            distribution_df (pandas.DataFrame): DAISIE distribution table.
            donor_area_df (pandas.DataFrame): DAISIE donor area table.
            pathways_df (pandas.DataFrame): DAISIE pathways table.
            impact_df (pandas.DataFrame): DAISIE impact table.
            references (daisie.process.references.ReferenceResolver): citations.
            core_taxa (set of str): idspecies allowed in the output table.
            diagnostics (daisie.common.errors.Diagnostics): shared collector.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        TableAssembler.__init__(
            self, core_taxa, diagnostics=diagnostics, logger=logger)
        self._distribution = distribution_df
        self._satellites = {
            DAISIE_DATA.DONOR_AREA: (donor_area_df, INPUT.DONOR_AREA),
            DAISIE_DATA.PATHWAY: (pathways_df, INPUT.PATHWAYS),
            DAISIE_DATA.IMPACT: (impact_df, INPUT.IMPACT),
        }
        self._references = references
        self.location_reference = LocationReference()

    # ...............................................
    def _join_satellites(self):
        joined = {}
        for fld, (df, source) in self._satellites.items():
            joined[fld] = join_satellite_values(
                self.filter_core_taxa(df, source), fld)
        return joined

    # ...............................................
    def _get_event_date(self, region_id, rec):
        start = self.normalize(
            parse_year, region_id, DAISIE_DATA.START_YEAR,
            rec[DAISIE_DATA.START_YEAR], START_YEAR_EMPTY)
        end = self.normalize(
            parse_year, region_id, DAISIE_DATA.END_YEAR,
            rec[DAISIE_DATA.END_YEAR], END_YEAR_EMPTY)
        return compose_interval(start, end)

    # ...............................................
    def _assemble_records(self):
        satellites = self._join_satellites()
        distribution = self.filter_core_taxa(self._distribution, INPUT.DISTRIBUTION)
        records = []
        for rec in distribution.to_dict("records"):
            taxon_id = rec[DAISIE_DATA.TAXON_KEY]
            region_id = rec[DAISIE_DATA.REGION_KEY]
            country_code = self.normalize(
                recode_country, region_id, DAISIE_DATA.COUNTRY,
                rec[DAISIE_DATA.COUNTRY])
            location_id, locality = compose_location(
                rec[DAISIE_DATA.COUNTRY], country_code, coast=rec[DAISIE_DATA.COAST],
                coast_code=rec[DAISIE_DATA.COAST_CODE])
            self.location_reference.add(region_id, location_id, locality)

            remarks_rec = dict(rec)
            for fld, values in satellites.items():
                remarks_rec[fld] = values.get((taxon_id, region_id), "")

            records.append({
                DWC.TAXON_ID: taxon_id,
                DWC.LOCATION_ID: location_id,
                DWC.LOCALITY: locality,
                DWC.COUNTRY_CODE: country_code,
                DWC.OCCURRENCE_STATUS: self.normalize(
                    compose_occurrence_status, region_id, DAISIE_DATA.ABUNDANCE,
                    rec[DAISIE_DATA.ABUNDANCE], rec[DAISIE_DATA.POPULATION_STATUS]),
                DWC.ESTABLISHMENT_MEANS: self.normalize(
                    recode_establishment_means, region_id,
                    DAISIE_DATA.POPULATION_STATUS,
                    rec[DAISIE_DATA.POPULATION_STATUS]),
                DWC.EVENT_DATE: self._get_event_date(region_id, rec),
                DWC.OCCURRENCE_REMARKS: assemble_remarks(
                    remarks_rec, DISTRIBUTION_REMARKS_FIELDS),
                DWC.SOURCE: self._references.compose_region_source(region_id),
            })
        return records


# .............................................................................
__all__ = ["DistributionAssembler", "LocationReference"]
