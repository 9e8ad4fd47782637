"""Tests for the complete checklist workflow."""
import os

import pandas
import pytest

from daisie.common.constants import COMMAND, DWC, OUTPUT, REPORT
from daisie.common.errors import ChecklistError
from daisie.common.util import read_csv_table
from daisie.process.checklist import (
    build_checklist, check_referential_integrity, reconcile_taxa,
    resolve_references)
from daisie.provider.constants import INPUT
from daisie.provider.daisie_data import DaisieData


# .............................................................................
class TestStages:
    """Class for testing the stages run separately."""

    # .....................................
    def test_resolve_references(self, input_path, tmp_path, logger):
        """Test that the citation indexes are written as intermediates."""
        process_path = str(tmp_path / "process")
        data = DaisieData(input_path, logger=logger)
        resolver, report = resolve_references(
            data, process_path=process_path, logger=logger)
        assert(resolver.get_citation("s1") == ", 28 Smith & Jones 2001")
        assert(len(report[REPORT.OUTFILES]) == 2)
        refs = read_csv_table(os.path.join(process_path, "references.csv"))
        assert(len(refs) == 5)

    # .....................................
    def test_reconcile_taxa(self, input_path, tmp_path, name_parser, logger):
        """Test that core, removed and problem taxa are written as intermediates."""
        process_path = str(tmp_path / "process")
        data = DaisieData(input_path, logger=logger)
        reconciler, report = reconcile_taxa(
            data, name_parser=name_parser, process_path=process_path, logger=logger)
        assert(report[REPORT.CORE_TAXA] == 3)
        core = read_csv_table(os.path.join(process_path, "core_taxa.csv"))
        assert(list(core["idspecies"]) == ["30", "100", "200"])
        removed = read_csv_table(os.path.join(process_path, "remove_taxa.csv"))
        assert(list(removed["idspecies"]) == ["10195"])
        issues = read_csv_table(os.path.join(process_path, "name_issues.csv"))
        assert(list(issues["idspecies"]) == ["10195"])

    # .....................................
    def test_referential_integrity(self):
        """Test that a taxonID outside the core taxa fails the check."""
        tables = {OUTPUT.TAXON: pandas.DataFrame({DWC.TAXON_ID: ["1", "2"]})}
        check_referential_integrity(tables, {"1", "2", "3"})
        with pytest.raises(ChecklistError):
            check_referential_integrity(tables, {"1"})


# .............................................................................
class TestBuildChecklist:
    """Class for testing the complete workflow."""

    # .....................................
    def test_build(self, input_path, tmp_path, name_parser, logger):
        """Test writing the four tables with only core taxa."""
        output_path = str(tmp_path / "dwc")
        process_path = str(tmp_path / "process")
        report = build_checklist(
            input_path, output_path, process_path=process_path,
            name_parser=name_parser, logger=logger)

        assert(report[REPORT.INPUT_COUNTS][INPUT.TAXON] == 4)
        assert(report[COMMAND.RECONCILE_TAXA][REPORT.REMOVE_TAXA] == 1)
        assert(report[REPORT.DIAGNOSTICS] == {})
        expected_counts = {
            OUTPUT.TAXON: 3, OUTPUT.DISTRIBUTION: 3, OUTPUT.DESCRIPTION: 7,
            OUTPUT.VERNACULAR: 3}
        for basename, count in expected_counts.items():
            fname = os.path.join(output_path, f"{basename}.csv")
            assert(report[basename][REPORT.OUTFILE] == fname)
            assert(report[basename][REPORT.RECORDS_OUTPUT] == count)
            df = read_csv_table(fname)
            assert(len(df) == count)
            assert(set(df[DWC.TAXON_ID]) <= {"30", "100", "200"})
            ids = [int(taxon_id) for taxon_id in df[DWC.TAXON_ID]]
            assert(ids == sorted(ids))

        taxa = read_csv_table(os.path.join(output_path, "taxon.csv"))
        assert(list(taxa.columns) == DWC.TAXON_HEADER)
        assert(os.path.exists(os.path.join(process_path, "location_reference.csv")))
        assert(not os.path.exists(os.path.join(process_path, "diagnostics.csv")))

    # .....................................
    def test_strict_failure(self, write_inputs, tmp_path, name_parser, logger):
        """Test that diagnostics fail a strict run before any table is written."""
        input_path = write_inputs(str(tmp_path / "input"), changes={
            INPUT.DISTRIBUTION: {0: {"country": "Atlantis"}}})
        output_path = str(tmp_path / "dwc")
        process_path = str(tmp_path / "process")
        with pytest.raises(ChecklistError):
            build_checklist(
                input_path, output_path, process_path=process_path,
                name_parser=name_parser, logger=logger)
        assert(not os.path.exists(os.path.join(output_path, "taxon.csv")))
        diagnostics = read_csv_table(os.path.join(process_path, "diagnostics.csv"))
        assert(list(diagnostics["value"]) == ["Atlantis"])
        assert(list(diagnostics["record_key"]) == ["r1"])

    # .....................................
    def test_lenient(self, write_inputs, tmp_path, name_parser, logger):
        """Test that a non-strict run writes tables and reports diagnostics."""
        input_path = write_inputs(str(tmp_path / "input"), changes={
            INPUT.DISTRIBUTION: {0: {"start_year": "sometime"}},
            INPUT.VERNACULAR_NAMES: {0: {"language": "Klingon"}}})
        output_path = str(tmp_path / "dwc")
        report = build_checklist(
            input_path, output_path, name_parser=name_parser, strict=False,
            logger=logger)
        assert(report[REPORT.DIAGNOSTICS] == {
            "unparseable_date": {"sometime": 1},
            "unmappable_vocabulary_value": {"Klingon": 1},
        })
        assert(report[REPORT.DIAGNOSTICS_FILE] == os.path.join(
            output_path, "diagnostics.csv"))
        distribution = read_csv_table(os.path.join(output_path, "distribution.csv"))
        assert(len(distribution) == 3)
        # No intermediates without a process path
        assert(not os.path.exists(os.path.join(output_path, "references.csv")))
