"""Constants describing the tables of the DAISIE inventory export."""


# .............................................................................
class DAISIE_DATA:
    """Fieldnames and natural keys of the DAISIE input tables."""
    DATA_EXT = "csv"
    DELIMITER = ","
    # Natural keys
    TAXON_KEY = "idspecies"
    REGION_KEY = "id_sp_region"
    SOURCE_KEY = "sourceid"
    FIELD_NAME = "field_name"
    # Literature references
    SHORTREF = "shortref"
    LONGREF = "longref"
    URL = "url"
    # Taxa
    KINGDOM = "kingdom"
    PHYLUM = "phylum"
    CLASS = "class"
    ORDER = "order"
    FAMILY = "family"
    GENUS = "genus"
    SPECIES = "species"
    SPECIES_AUTHOR = "species_author"
    SUBTAXON = "subtaxon"
    SUBTAXON_AUTHOR = "subtaxon_author"
    NOTES = "notes"
    # Distribution
    COUNTRY = "country"
    COAST = "coast"
    COAST_CODE = "coast_code"
    START_YEAR = "start_year"
    END_YEAR = "end_year"
    ABUNDANCE = "abundance"
    POPULATION_STATUS = "population_status"
    INVASIVENESS = "invasiveness"
    # Satellite tables
    DONOR_AREA = "donor_area"
    PATHWAY = "pathway"
    IMPACT = "impact"
    HABITAT = "habitat"
    NATIVE_RANGE = "native_range"
    VERNACULAR_NAME = "vernacular_name"
    LANGUAGE = "language"


# .............................................................................
class INPUT:
    """Basenames of the DAISIE input tables with their required/optional fields."""
    LITERATURE_REFERENCES = "input_literature_references"
    TAXON = "input_taxon"
    DISTRIBUTION = "input_distribution"
    DONOR_AREA = "input_donor_area"
    PATHWAYS = "input_pathways"
    IMPACT = "input_impact"
    HABITAT = "input_habitat"
    NATIVE_RANGE = "input_native_range"
    VERNACULAR_NAMES = "input_vernacular_names"

    FIELDS = {
        LITERATURE_REFERENCES: {
            "required": [DAISIE_DATA.SOURCE_KEY],
            "optional": [
                DAISIE_DATA.REGION_KEY, DAISIE_DATA.FIELD_NAME, DAISIE_DATA.SHORTREF,
                DAISIE_DATA.LONGREF, DAISIE_DATA.URL],
        },
        TAXON: {
            "required": [DAISIE_DATA.TAXON_KEY, DAISIE_DATA.GENUS],
            "optional": [
                DAISIE_DATA.KINGDOM, DAISIE_DATA.PHYLUM, DAISIE_DATA.CLASS,
                DAISIE_DATA.ORDER, DAISIE_DATA.FAMILY, DAISIE_DATA.SPECIES,
                DAISIE_DATA.SPECIES_AUTHOR, DAISIE_DATA.SUBTAXON,
                DAISIE_DATA.SUBTAXON_AUTHOR, DAISIE_DATA.NOTES],
        },
        DISTRIBUTION: {
            "required": [DAISIE_DATA.REGION_KEY, DAISIE_DATA.TAXON_KEY],
            "optional": [
                DAISIE_DATA.COUNTRY, DAISIE_DATA.COAST, DAISIE_DATA.COAST_CODE,
                DAISIE_DATA.START_YEAR, DAISIE_DATA.END_YEAR, DAISIE_DATA.ABUNDANCE,
                DAISIE_DATA.POPULATION_STATUS, DAISIE_DATA.INVASIVENESS,
                DAISIE_DATA.NOTES],
        },
        DONOR_AREA: {
            "required": [
                DAISIE_DATA.REGION_KEY, DAISIE_DATA.TAXON_KEY, DAISIE_DATA.DONOR_AREA],
            "optional": [DAISIE_DATA.SOURCE_KEY],
        },
        PATHWAYS: {
            "required": [
                DAISIE_DATA.REGION_KEY, DAISIE_DATA.TAXON_KEY, DAISIE_DATA.PATHWAY],
            "optional": [DAISIE_DATA.SOURCE_KEY],
        },
        IMPACT: {
            "required": [
                DAISIE_DATA.REGION_KEY, DAISIE_DATA.TAXON_KEY, DAISIE_DATA.IMPACT],
            "optional": [DAISIE_DATA.SOURCE_KEY],
        },
        HABITAT: {
            "required": [DAISIE_DATA.TAXON_KEY, DAISIE_DATA.HABITAT],
            "optional": [DAISIE_DATA.SOURCE_KEY],
        },
        NATIVE_RANGE: {
            "required": [DAISIE_DATA.TAXON_KEY, DAISIE_DATA.NATIVE_RANGE],
            "optional": [DAISIE_DATA.SOURCE_KEY],
        },
        VERNACULAR_NAMES: {
            "required": [DAISIE_DATA.TAXON_KEY, DAISIE_DATA.VERNACULAR_NAME],
            "optional": [DAISIE_DATA.LANGUAGE, DAISIE_DATA.SOURCE_KEY],
        },
    }

    # ...........................
    @classmethod
    def tables(cls):
        """Get the basenames of all input tables.

        Returns:
            (list of str): input table basenames.
        """
        return list(cls.FIELDS.keys())


# .............................................................................
# Literature field_name values, in DAISIE, that cite a distribution record.
# Citations for these fields are concatenated, in this order, into the
# distribution source.
DISTRIBUTION_SOURCE_FIELDS = (
    DAISIE_DATA.COUNTRY,
    DAISIE_DATA.COAST,
    DAISIE_DATA.START_YEAR,
    DAISIE_DATA.END_YEAR,
    DAISIE_DATA.ABUNDANCE,
    DAISIE_DATA.POPULATION_STATUS,
    DAISIE_DATA.INVASIVENESS,
)

# Source fields preserved, in this order, in occurrenceRemarks
DISTRIBUTION_REMARKS_FIELDS = (
    DAISIE_DATA.POPULATION_STATUS,
    DAISIE_DATA.ABUNDANCE,
    DAISIE_DATA.INVASIVENESS,
    DAISIE_DATA.DONOR_AREA,
    DAISIE_DATA.PATHWAY,
    DAISIE_DATA.IMPACT,
    DAISIE_DATA.NOTES,
)
