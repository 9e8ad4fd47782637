"""Run the DAISIE to Darwin Core checklist workflow in dependency order."""
import logging
import os

from daisie.common.constants import (
    COMMAND, CSV_EXTENSION, DWC, ERR_SEPARATOR, OUTPUT, REPORT)
from daisie.common.errors import ChecklistError, Diagnostics
from daisie.common.log import logit
from daisie.common.util import write_csv_table
from daisie.process.description import DescriptionAssembler
from daisie.process.distribution import DistributionAssembler
from daisie.process.reconcile import TaxonReconciler
from daisie.process.references import ReferenceResolver
from daisie.process.taxon import TaxonAssembler
from daisie.process.vernacular import VernacularAssembler
from daisie.provider.constants import INPUT
from daisie.provider.daisie_data import DaisieData


# .............................................................................
def _write_table(df, path, basename, logger, refname):
    filename = os.path.join(path, f"{basename}{CSV_EXTENSION}")
    count = write_csv_table(df, filename, overwrite=True)
    logit(
        f"Wrote {count} records to {filename}", logger=logger, refname=refname)
    return filename


# .............................................................................
def resolve_references(data, process_path=None, logger=None):
    """Build the citation indexes from the literature references table.

    Args:
        data (daisie.provider.daisie_data.DaisieData): DAISIE input tables.
        process_path (str): directory for intermediate files, None to skip them.
        logger (daisie.common.log.Logger): logger for processing messages.

    Returns:
        resolver (daisie.process.references.ReferenceResolver): citation indexes.
        report (dict): summary of the resolution.
    """
    refname = COMMAND.RESOLVE_REFERENCES
    resolver = ReferenceResolver(
        data.get_table(INPUT.LITERATURE_REFERENCES), logger=logger)
    report = resolver.resolve()
    if process_path is not None:
        report[REPORT.OUTFILES] = [
            _write_table(
                resolver.references_dataframe(), process_path, OUTPUT.REFERENCES,
                logger, refname),
            _write_table(
                resolver.reference_fields_dataframe(), process_path,
                OUTPUT.REFERENCE_FIELDS, logger, refname),
        ]
    return resolver, report


# .............................................................................
def reconcile_taxa(data, name_parser=None, process_path=None, logger=None):
    """Compute core and removed taxa from the taxon table.

    Args:
        data (daisie.provider.daisie_data.DaisieData): DAISIE input tables.
        name_parser (daisie.provider.gbif_api.GbifNameParser): parser for
            checking scientific names, None to skip the check.
        process_path (str): directory for intermediate files, None to skip them.
        logger (daisie.common.log.Logger): logger for processing messages.

    Returns:
        reconciler (daisie.process.reconcile.TaxonReconciler): reconciled taxa.
        report (dict): summary of the reconciliation.
    """
    refname = COMMAND.RECONCILE_TAXA
    reconciler = TaxonReconciler(
        data.get_table(INPUT.TAXON), name_parser=name_parser, logger=logger)
    report = reconciler.reconcile()
    if process_path is not None:
        report[REPORT.OUTFILES] = [
            _write_table(
                reconciler.core_taxa_dataframe(), process_path, OUTPUT.CORE_TAXA,
                logger, refname),
            _write_table(
                reconciler.remove_taxa_dataframe(), process_path,
                OUTPUT.REMOVE_TAXA, logger, refname),
            _write_table(
                reconciler.name_issues_dataframe(), process_path,
                OUTPUT.NAME_ISSUES, logger, refname),
        ]
    return reconciler, report


# .............................................................................
def check_referential_integrity(tables, core_taxa):
    """Confirm every taxonID in the output tables is a core taxon.

    Args:
        tables (dict): output basename to pandas.DataFrame.
        core_taxa (set of str): authoritative idspecies.

    Raises:
        ChecklistError: if any table references an id outside core_taxa.
    """
    for basename, df in tables.items():
        dangling = set(df[DWC.TAXON_ID]) - core_taxa
        if dangling:
            raise ChecklistError(
                f"Table {basename} references {len(dangling)} taxonIDs outside the "
                f"checklist, e.g. {sorted(dangling)[:5]}")


# .............................................................................
def assemble_tables(
        data, resolver, reconciler, metadata=None, diagnostics=None, logger=None):
    """Build the four Darwin Core tables from reconciled inputs.

    Args:
        data (daisie.provider.daisie_data.DaisieData): DAISIE input tables.
        resolver (daisie.process.references.ReferenceResolver): citations.
        reconciler (daisie.process.reconcile.TaxonReconciler): reconciled taxa.
        metadata (dict): Darwin Core term to value for dataset-level fields.
        diagnostics (daisie.common.errors.Diagnostics): collector for values that
            could not be normalized.
        logger (daisie.common.log.Logger): logger for processing messages.

    Returns:
        tables (dict): output basename to pandas.DataFrame.
        assemblers (dict): output basename to the assembler that built it.
        location_reference (daisie.process.distribution.LocationReference): the
            locations of distribution records.
    """
    core_taxa = reconciler.core_taxa
    taxon = TaxonAssembler(
        reconciler, metadata=metadata, diagnostics=diagnostics, logger=logger)
    # Distribution fills the location reference used by Description
    distribution = DistributionAssembler(
        data.get_table(INPUT.DISTRIBUTION), data.get_table(INPUT.DONOR_AREA),
        data.get_table(INPUT.PATHWAYS), data.get_table(INPUT.IMPACT), resolver,
        core_taxa, diagnostics=diagnostics, logger=logger)
    assemblers = {
        OUTPUT.TAXON: taxon,
        OUTPUT.DISTRIBUTION: distribution,
    }
    tables = {
        OUTPUT.TAXON: taxon.assemble(),
        OUTPUT.DISTRIBUTION: distribution.assemble(),
    }
    assemblers[OUTPUT.DESCRIPTION] = DescriptionAssembler(
        data.get_table(INPUT.HABITAT), data.get_table(INPUT.NATIVE_RANGE),
        data.get_table(INPUT.DONOR_AREA), data.get_table(INPUT.PATHWAYS),
        data.get_table(INPUT.IMPACT), resolver, distribution.location_reference,
        core_taxa, diagnostics=diagnostics, logger=logger)
    assemblers[OUTPUT.VERNACULAR] = VernacularAssembler(
        data.get_table(INPUT.VERNACULAR_NAMES), resolver, core_taxa,
        diagnostics=diagnostics, logger=logger)
    for basename in (OUTPUT.DESCRIPTION, OUTPUT.VERNACULAR):
        tables[basename] = assemblers[basename].assemble()
    return tables, assemblers, distribution.location_reference


# .............................................................................
def build_checklist(
        input_path, output_path, process_path=None, name_parser=None,
        metadata=None, strict=True, logger=None):
    """Transform a DAISIE export into the four Darwin Core checklist tables.

    Args:
        input_path (str): directory with the DAISIE input tables.
        output_path (str): directory for the Darwin Core tables.
        process_path (str): directory for intermediate files, None to skip them.
        name_parser (daisie.provider.gbif_api.GbifNameParser): parser for
            checking scientific names, None to skip the check.
        metadata (dict): Darwin Core term to value for dataset-level fields.
        strict (bool): True to fail when any source value cannot be normalized.
        logger (daisie.common.log.Logger): logger for processing messages.

    Returns:
        report (dict): summary of every stage, JSON-serializable.

    Raises:
        ChecklistError: in strict mode, if any value could not be normalized, or
            if an output table references a taxon outside the checklist.
        InputError: on a missing input table or required field.
    """
    refname = COMMAND.BUILD_CHECKLIST
    report = {
        REPORT.PROCESS: refname,
        REPORT.INPATH: input_path,
        REPORT.OUTPATH: output_path,
        REPORT.PROCESS_PATH: process_path,
    }
    data = DaisieData(input_path, logger=logger)
    data.read_all()
    report[REPORT.INPUT_COUNTS] = data.record_counts

    resolver, report[COMMAND.RESOLVE_REFERENCES] = resolve_references(
        data, process_path=process_path, logger=logger)
    reconciler, report[COMMAND.RECONCILE_TAXA] = reconcile_taxa(
        data, name_parser=name_parser, process_path=process_path, logger=logger)

    diagnostics = Diagnostics(logger=logger)
    tables, assemblers, locations = assemble_tables(
        data, resolver, reconciler, metadata=metadata, diagnostics=diagnostics,
        logger=logger)
    for basename, assembler in assemblers.items():
        report[basename] = assembler.report()
    if process_path is not None:
        _write_table(
            locations.to_dataframe(), process_path, OUTPUT.LOCATION_REFERENCE,
            logger, refname)

    report[REPORT.DIAGNOSTICS] = diagnostics.summarize()
    if diagnostics:
        diag_path = process_path if process_path is not None else output_path
        report[REPORT.DIAGNOSTICS_FILE] = _write_table(
            diagnostics.to_dataframe(), diag_path, OUTPUT.DIAGNOSTICS, logger,
            refname)
        if strict:
            msg = (
                f"{len(diagnostics)} source values could not be normalized, see "
                f"{report[REPORT.DIAGNOSTICS_FILE]}")
            report[REPORT.ERROR] = msg
            logit(ERR_SEPARATOR, logger=logger, refname=refname,
                  log_level=logging.ERROR)
            logit(msg, logger=logger, refname=refname, log_level=logging.ERROR)
            raise ChecklistError(msg)
        logit(
            f"Writing checklist with {len(diagnostics)} values not normalized",
            logger=logger, refname=refname, log_level=logging.WARNING)

    check_referential_integrity(tables, reconciler.core_taxa)

    for basename in OUTPUT.tables():
        report[basename][REPORT.OUTFILE] = _write_table(
            tables[basename], output_path, basename, logger, refname)
    return report


# .............................................................................
__all__ = [
    "assemble_tables",
    "build_checklist",
    "check_referential_integrity",
    "reconcile_taxa",
    "resolve_references",
]
