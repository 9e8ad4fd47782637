"""Constants for transforming the DAISIE inventory into a Darwin Core checklist."""

# .............................................................................
LOG_FORMAT = " ".join(["%(asctime)s", "%(levelname)-8s", "%(message)s"])
LOG_DATE_FORMAT = "%d %b %Y %H:%M"
LOGFILE_MAX_BYTES = 52000000
LOGFILE_BACKUP_COUNT = 5

ENCODING = "utf-8"
ERR_SEPARATOR = "------------"
CSV_DELIMITER = ","
CSV_EXTENSION = ".csv"

# Separators used when collapsing several values into one output field
REMARKS_SEPARATOR = " | "
SOURCE_SEPARATOR = " | "
LOCATION_SEPARATOR = " | "
MULTIVALUE_SEPARATOR = "; "


# .............................................................................
class COMMAND:
    """Processes available from the command line."""
    RESOLVE_REFERENCES = "resolve_references"
    RECONCILE_TAXA = "reconcile_taxa"
    BUILD_CHECKLIST = "build_checklist"


COMMANDS = (
    COMMAND.RESOLVE_REFERENCES, COMMAND.RECONCILE_TAXA, COMMAND.BUILD_CHECKLIST)


# .............................................................................
class CONFIG_PARAM:
    """Keys used to describe parameters in a tool configuration file."""
    FILE = "config_file"
    COMMAND = "command"
    TYPE = "type"
    CHOICES = "choices"
    HELP = "help"
    DEFAULT = "default"
    IS_INPUT_DIR = "is_input_dir"
    IS_OUPUT_DIR = "is_output_dir"


# .............................................................................
class REPORT:
    """Common keys for process report dictionary."""
    PROCESS = "process"
    INPATH = "input_path"
    OUTPATH = "output_path"
    PROCESS_PATH = "process_path"
    INPUT_COUNTS = "input_record_counts"
    REFERENCE_COUNT = "references"
    REFERENCE_FIELD_COUNT = "reference_fields"
    EMPTY_CITATIONS = "empty_citations"
    CORE_TAXA = "core_taxa"
    REMOVE_TAXA = "remove_taxa"
    NAME_ISSUES = "name_issues"
    NAMES_PARSED = "names_parsed"
    DUPLICATE_ROWS = "duplicate_rows"
    RECORDS_READ = "records_read"
    RECORDS_DROPPED = "records_dropped"
    RECORDS_OUTPUT = "records_output"
    OUTFILE = "output_filename"
    OUTFILES = "output_filenames"
    DIAGNOSTICS = "diagnostics"
    DIAGNOSTICS_FILE = "diagnostics_filename"
    ERROR = "error"


# .............................................................................
class DWC:
    """Darwin Core terms and the headers of the four output tables."""
    TAXON_ID = "taxonID"
    SCINAME = "scientificName"
    KINGDOM = "kingdom"
    PHYLUM = "phylum"
    CLASS = "class"
    ORDER = "order"
    FAMILY = "family"
    GENUS = "genus"
    SPECIFIC_EPITHET = "specificEpithet"
    INFRASPECIFIC_EPITHET = "infraspecificEpithet"
    RANK = "taxonRank"
    TAXON_REMARKS = "taxonRemarks"
    LANGUAGE = "language"
    LICENSE = "license"
    RIGHTS_HOLDER = "rightsHolder"
    DATASET_ID = "datasetID"
    INSTITUTION_CODE = "institutionCode"
    DATASET_NAME = "datasetName"
    LOCATION_ID = "locationID"
    LOCALITY = "locality"
    COUNTRY_CODE = "countryCode"
    OCCURRENCE_STATUS = "occurrenceStatus"
    ESTABLISHMENT_MEANS = "establishmentMeans"
    EVENT_DATE = "eventDate"
    OCCURRENCE_REMARKS = "occurrenceRemarks"
    SOURCE = "source"
    DESCRIPTION = "description"
    TYPE = "type"
    VERNACULAR_NAME = "vernacularName"

    TAXON_HEADER = [
        TAXON_ID, SCINAME, KINGDOM, PHYLUM, CLASS, ORDER, FAMILY, GENUS,
        SPECIFIC_EPITHET, INFRASPECIFIC_EPITHET, RANK, TAXON_REMARKS, LANGUAGE,
        LICENSE, RIGHTS_HOLDER, DATASET_ID, INSTITUTION_CODE, DATASET_NAME]
    DISTRIBUTION_HEADER = [
        TAXON_ID, LOCATION_ID, LOCALITY, COUNTRY_CODE, OCCURRENCE_STATUS,
        ESTABLISHMENT_MEANS, EVENT_DATE, OCCURRENCE_REMARKS, SOURCE]
    DESCRIPTION_HEADER = [TAXON_ID, DESCRIPTION, TYPE, SOURCE]
    VERNACULAR_HEADER = [TAXON_ID, VERNACULAR_NAME, SOURCE, LANGUAGE]


# .............................................................................
class OUTPUT:
    """Basenames of the output tables and the intermediate artifacts."""
    TAXON = "taxon"
    DISTRIBUTION = "distribution"
    DESCRIPTION = "description"
    VERNACULAR = "vernacularname"
    REFERENCES = "references"
    REFERENCE_FIELDS = "reference_fields"
    CORE_TAXA = "core_taxa"
    REMOVE_TAXA = "remove_taxa"
    LOCATION_REFERENCE = "location_reference"
    NAME_ISSUES = "name_issues"
    DIAGNOSTICS = "diagnostics"

    # ...........................
    @classmethod
    def tables(cls):
        """Get the basenames of the four Darwin Core tables.

        Returns:
            (tuple of str): basenames in the order they are written.
        """
        return (cls.TAXON, cls.DISTRIBUTION, cls.DESCRIPTION, cls.VERNACULAR)


# .............................................................................
class DATASET:
    """Default dataset-level metadata for the taxon core, overridable in config."""
    LANGUAGE = "en"
    LICENSE = "http://creativecommons.org/publicdomain/zero/1.0/"
    RIGHTS_HOLDER = "DAISIE"
    DATASET_ID = ""
    INSTITUTION_CODE = "DAISIE"
    DATASET_NAME = "DAISIE - Inventory of alien invasive species in Europe"

    # ...........................
    @classmethod
    def defaults(cls):
        """Get the default metadata, keyed by Darwin Core term.

        Returns:
            (dict): Darwin Core term to default value.
        """
        return {
            DWC.LANGUAGE: cls.LANGUAGE,
            DWC.LICENSE: cls.LICENSE,
            DWC.RIGHTS_HOLDER: cls.RIGHTS_HOLDER,
            DWC.DATASET_ID: cls.DATASET_ID,
            DWC.INSTITUTION_CODE: cls.INSTITUTION_CODE,
            DWC.DATASET_NAME: cls.DATASET_NAME,
        }


# .............................................................................
class LOCATION:
    """Identifier systems used to build Darwin Core locationIDs."""
    COUNTRY_SYSTEM = "ISO_3166-1"
    COAST_SYSTEM = "mrgid"


# .............................................................................
class GBIF:
    """Constants for the GBIF name parser API."""
    URL = "https://api.gbif.org/v1"
    PARSER_URL = f"{URL}/parser/name"
    PARSER_BATCH_SIZE = 1000
    REQUEST_TIMEOUT = 60
    TYPE_FLD = "type"
    PARSED_FLD = "parsed"
    PARTIAL_FLD = "parsedPartially"
    RANK_MARKER_FLD = "rankMarker"
    SCIENTIFIC_TYPE = "SCIENTIFIC"
