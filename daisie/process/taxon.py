"""Assemble the Darwin Core Taxon Core from the DAISIE taxon table."""
from daisie.common.constants import DATASET, DWC, OUTPUT
from daisie.process.assembler import TableAssembler
from daisie.process.normalize import (
    clean_text, infraspecific_epithet, recode_rank_marker, subtaxon_rank_marker)
from daisie.provider.constants import DAISIE_DATA, INPUT

SPECIES_RANK = "species"
GENUS_RANK = "genus"


# .............................................................................
class TaxonAssembler(TableAssembler):
    """Build one Taxon Core record per core taxon."""
    table = OUTPUT.TAXON
    header = DWC.TAXON_HEADER

    # ...............................................
    def __init__(self, reconciler, metadata=None, diagnostics=None, logger=None):
        """Constructor.

        Args:
            reconciler (daisie.process.reconcile.TaxonReconciler): reconciled taxa,
                holding one record per idspecies, scientific names and parses.
            metadata (dict): Darwin Core term to value, overriding the dataset
                defaults in daisie.common.constants.DATASET.
            diagnostics (daisie.common.errors.Diagnostics): shared collector.
            logger (daisie.common.log.Logger): logger for processing messages.
        """
        if reconciler.core_taxa is None:
            reconciler.reconcile()
        TableAssembler.__init__(
            self, reconciler.core_taxa, diagnostics=diagnostics, logger=logger)
        self._reconciler = reconciler
        self.metadata = DATASET.defaults()
        if metadata:
            for key, val in metadata.items():
                if key in self.metadata and val is not None:
                    self.metadata[key] = val

    # ...............................................
    def _get_rank(self, rec):
        taxon_id = rec[DAISIE_DATA.TAXON_KEY]
        marker = self._reconciler.get_rank_marker(taxon_id)
        if not marker:
            marker = subtaxon_rank_marker(rec[DAISIE_DATA.SUBTAXON])
        if marker:
            rank = self.normalize(
                recode_rank_marker, taxon_id, "rankMarker", marker)
            if rank:
                return rank
        if clean_text(rec[DAISIE_DATA.SPECIES]):
            return SPECIES_RANK
        return GENUS_RANK

    # ...............................................
    def _assemble_records(self):
        taxa = self.filter_core_taxa(self._reconciler.taxa, INPUT.TAXON)
        records = []
        for rec in taxa.to_dict("records"):
            taxon_id = rec[DAISIE_DATA.TAXON_KEY]
            out = {
                DWC.TAXON_ID: taxon_id,
                DWC.SCINAME: self._reconciler.names[taxon_id],
                DWC.KINGDOM: clean_text(rec[DAISIE_DATA.KINGDOM]),
                DWC.PHYLUM: clean_text(rec[DAISIE_DATA.PHYLUM]),
                DWC.CLASS: clean_text(rec[DAISIE_DATA.CLASS]),
                DWC.ORDER: clean_text(rec[DAISIE_DATA.ORDER]),
                DWC.FAMILY: clean_text(rec[DAISIE_DATA.FAMILY]),
                DWC.GENUS: clean_text(rec[DAISIE_DATA.GENUS]),
                DWC.SPECIFIC_EPITHET: clean_text(rec[DAISIE_DATA.SPECIES]),
                DWC.INFRASPECIFIC_EPITHET: infraspecific_epithet(
                    rec[DAISIE_DATA.SUBTAXON]),
                DWC.RANK: self._get_rank(rec),
                DWC.TAXON_REMARKS: clean_text(rec[DAISIE_DATA.NOTES]),
            }
            out.update(self.metadata)
            records.append(out)
        return records


# .............................................................................
__all__ = ["TaxonAssembler"]
