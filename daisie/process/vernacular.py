"""Assemble the Darwin Core Vernacular Names extension."""
from daisie.common.constants import DWC, OUTPUT
from daisie.process.assembler import TableAssembler
from daisie.process.normalize import clean_text, recode_language
from daisie.provider.constants import DAISIE_DATA, INPUT


# .............................................................................
class VernacularAssembler(TableAssembler):
    """Build one Vernacular Names record per distinct common name of a core taxon."""
    table = OUTPUT.VERNACULAR
    header = DWC.VERNACULAR_HEADER

    # ...............................................
    def __init__(
            self, vernacular_df, references, core_taxa, diagnostics=None,
            logger=None):
        """Constructor.

        Args:
            vernacular_df (pandas.DataFrame): DAISIE vernacular names table.
            references (daisie.process.references.ReferenceResolver): citations.
            core_taxa (set of str): idspecies allowed in the output table.
            diagnostics (daisie.common.errors.Diagnostics): shared collector.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        TableAssembler.__init__(
            self, core_taxa, diagnostics=diagnostics, logger=logger)
        self._vernacular = vernacular_df
        self._references = references

    # ...............................................
    def _assemble_records(self):
        df = self.filter_core_taxa(self._vernacular, INPUT.VERNACULAR_NAMES)
        records = []
        for rec in df.to_dict("records"):
            name = clean_text(rec[DAISIE_DATA.VERNACULAR_NAME])
            if not name:
                continue
            taxon_id = rec[DAISIE_DATA.TAXON_KEY]
            records.append({
                DWC.TAXON_ID: taxon_id,
                DWC.VERNACULAR_NAME: name,
                DWC.SOURCE: self._references.get_citation(
                    rec[DAISIE_DATA.SOURCE_KEY]),
                DWC.LANGUAGE: self.normalize(
                    recode_language, taxon_id, DAISIE_DATA.LANGUAGE,
                    rec[DAISIE_DATA.LANGUAGE]),
            })
        return records

    # ...............................................
    def finalize(self, records):
        """Drop exact duplicate names before sorting."""
        df = TableAssembler.finalize(self, records)
        return df.drop_duplicates(keep="first").reset_index(drop=True)


# .............................................................................
__all__ = ["VernacularAssembler"]
