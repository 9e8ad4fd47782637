"""Assemble the Darwin Core Description extension from DAISIE descriptor tables."""
from daisie.common.constants import DWC, OUTPUT
from daisie.process.assembler import TableAssembler
from daisie.process.normalize import clean_text
from daisie.provider.constants import DAISIE_DATA, INPUT

# Description type for each DAISIE descriptor field, in output order
DESCRIPTION_TYPES = {
    DAISIE_DATA.HABITAT: "habitat",
    DAISIE_DATA.NATIVE_RANGE: "native range",
    DAISIE_DATA.DONOR_AREA: "donor area",
    DAISIE_DATA.PATHWAY: "pathway",
    DAISIE_DATA.IMPACT: "impact",
}


# .............................................................................
def annotate_locality(value, locality):
    """Qualify a region-scoped description with the region it applies to.

    Args:
        value (str): description text.
        locality (str): locality of the distribution record, may be empty.

    Returns:
        "{value} ({locality})", or value alone for an empty locality.
    """
    if locality:
        return f"{value} ({locality})"
    return value


# .............................................................................
class DescriptionAssembler(TableAssembler):
    """Build Description records for habitat, native range and regional descriptors.

    Donor area, pathway and impact are recorded per species and region; their
    values are annotated with the locality found by the DistributionAssembler.
    """
    table = OUTPUT.DESCRIPTION
    header = DWC.DESCRIPTION_HEADER

    # ...............................................
    def __init__(
            self, habitat_df, native_range_df, donor_area_df, pathways_df, impact_df,
            references, location_reference, core_taxa, diagnostics=None,
            logger=None):
        """Constructor.

        Args:
            habitat_df (pandas.DataFrame): DAISIE habitat table.
            native_range_df (pandas.DataFrame): DAISIE native range table.
            donor_area_df (pandas.DataFrame): DAISIE donor area table.
            pathways_df (pandas.DataFrame): DAISIE pathways table.
            impact_df (pandas.DataFrame): DAISIE impact table.
            references (daisie.process.references.ReferenceResolver): citations.
            location_reference (daisie.process.distribution.LocationReference):
                locations of distribution records, filled by a DistributionAssembler.
            core_taxa (set of str): idspecies allowed in the output table.
            diagnostics (daisie.common.errors.Diagnostics): shared collector.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        TableAssembler.__init__(
            self, core_taxa, diagnostics=diagnostics, logger=logger)
        self._descriptors = {
            DAISIE_DATA.HABITAT: (habitat_df, INPUT.HABITAT),
            DAISIE_DATA.NATIVE_RANGE: (native_range_df, INPUT.NATIVE_RANGE),
            DAISIE_DATA.DONOR_AREA: (donor_area_df, INPUT.DONOR_AREA),
            DAISIE_DATA.PATHWAY: (pathways_df, INPUT.PATHWAYS),
            DAISIE_DATA.IMPACT: (impact_df, INPUT.IMPACT),
        }
        self._references = references
        self._locations = location_reference

    # ...............................................
    def _assemble_records(self):
        records = []
        for fld, desc_type in DESCRIPTION_TYPES.items():
            df, source = self._descriptors[fld]
            df = self.filter_core_taxa(df, source)
            is_regional = DAISIE_DATA.REGION_KEY in df.columns
            for rec in df.to_dict("records"):
                value = clean_text(rec[fld])
                if not value:
                    continue
                if is_regional:
                    value = annotate_locality(
                        value, self._locations.get_locality(rec[DAISIE_DATA.REGION_KEY]))
                records.append({
                    DWC.TAXON_ID: rec[DAISIE_DATA.TAXON_KEY],
                    DWC.DESCRIPTION: value,
                    DWC.TYPE: desc_type,
                    DWC.SOURCE: self._references.get_citation(
                        rec.get(DAISIE_DATA.SOURCE_KEY, "")),
                })
        return records

    # ...............................................
    def finalize(self, records):
        """Drop exact duplicate descriptions before sorting.

        Returns:
            pandas.DataFrame of the Description extension.
        """
        df = TableAssembler.finalize(self, records)
        return df.drop_duplicates(keep="first").reset_index(drop=True)


# .............................................................................
__all__ = ["DESCRIPTION_TYPES", "DescriptionAssembler", "annotate_locality"]
