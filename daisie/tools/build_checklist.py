"""Tool for transforming a DAISIE inventory export into a Darwin Core checklist."""
import json
import os

from daisie.common.constants import COMMAND, CONFIG_PARAM, DATASET, DWC, GBIF, REPORT
from daisie.process.checklist import (
    build_checklist, reconcile_taxa, resolve_references)
from daisie.provider.daisie_data import DaisieData
from daisie.provider.gbif_api import GbifNameParser
from daisie.tools._config_parser import get_common_arguments

DESCRIPTION = """\
Transform the flat CSV tables of the DAISIE inventory of alien species in Europe
into Darwin Core Taxon, Distribution, Description and Vernacular Names tables.
Commands resolve_references and reconcile_taxa run a single stage and write its
intermediate tables; build_checklist runs the complete workflow. """
# Options to be placed in a configuration file for the command
PARAMETERS = {
    "required":
        {
            "input_path":
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.IS_INPUT_DIR: True,
                    CONFIG_PARAM.HELP:
                        "Directory containing the DAISIE input CSV tables."
                },
            "output_path":
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.IS_OUPUT_DIR: True,
                    CONFIG_PARAM.HELP:
                        "Destination directory for the Darwin Core tables."
                },
        },
    "optional":
        {
            "process_path":
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.IS_OUPUT_DIR: True,
                    CONFIG_PARAM.HELP:
                        "Directory for intermediate tables, defaults to output_path."
                },
            "log_path":
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.HELP: "Directory to write the logfile."
                },
            "log_console":
                {
                    CONFIG_PARAM.TYPE: bool,
                    CONFIG_PARAM.DEFAULT: True,
                    CONFIG_PARAM.HELP: "Flag indicating to log to the console."
                },
            "report_filename":
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.HELP: "Filename to write summary metadata."
                },
            "strict":
                {
                    CONFIG_PARAM.TYPE: bool,
                    CONFIG_PARAM.DEFAULT: True,
                    CONFIG_PARAM.HELP:
                        "Fail without writing the checklist if any source value "
                        "cannot be normalized."
                },
            "parse_names":
                {
                    CONFIG_PARAM.TYPE: bool,
                    CONFIG_PARAM.DEFAULT: True,
                    CONFIG_PARAM.HELP:
                        "Check scientific names with the GBIF name parser."
                },
            "parser_url":
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: GBIF.PARSER_URL,
                    CONFIG_PARAM.HELP: "URL of the GBIF name parser."
                },
            DWC.LANGUAGE:
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: DATASET.LANGUAGE,
                    CONFIG_PARAM.HELP: "Language of the taxon records."
                },
            DWC.LICENSE:
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: DATASET.LICENSE,
                    CONFIG_PARAM.HELP: "License of the dataset."
                },
            DWC.RIGHTS_HOLDER:
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: DATASET.RIGHTS_HOLDER,
                    CONFIG_PARAM.HELP: "Rights holder of the dataset."
                },
            DWC.DATASET_ID:
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: DATASET.DATASET_ID,
                    CONFIG_PARAM.HELP: "Identifier of the dataset."
                },
            DWC.INSTITUTION_CODE:
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: DATASET.INSTITUTION_CODE,
                    CONFIG_PARAM.HELP: "Code of the publishing institution."
                },
            DWC.DATASET_NAME:
                {
                    CONFIG_PARAM.TYPE: str,
                    CONFIG_PARAM.DEFAULT: DATASET.DATASET_NAME,
                    CONFIG_PARAM.HELP: "Name of the dataset."
                },
        }
}


# .....................................................................................
def get_metadata(config):
    """Get the dataset-level Darwin Core values from a configuration.

    Args:
        config (dict): tool configuration.

    Returns:
        dictionary of Darwin Core term to value.
    """
    return {term: config.get(term, default) for term, default in DATASET.defaults().items()}


# .....................................................................................
def execute_command(config, logger):
    """Run the command named in the configuration.

    Args:
        config (dict): tool configuration, including the command.
        logger (daisie.common.log.Logger): logger for processing messages.

    Returns:
        report (dict): summary of the process.
    """
    command = config[CONFIG_PARAM.COMMAND]
    process_path = config["process_path"] or config["output_path"]
    name_parser = None
    if config["parse_names"]:
        name_parser = GbifNameParser(url=config["parser_url"], logger=logger)

    if command == COMMAND.BUILD_CHECKLIST:
        report = build_checklist(
            config["input_path"], config["output_path"], process_path=process_path,
            name_parser=name_parser, metadata=get_metadata(config),
            strict=config["strict"], logger=logger)
    else:
        data = DaisieData(config["input_path"], logger=logger)
        if command == COMMAND.RESOLVE_REFERENCES:
            _resolver, stage_report = resolve_references(
                data, process_path=process_path, logger=logger)
        else:
            _reconciler, stage_report = reconcile_taxa(
                data, name_parser=name_parser, process_path=process_path,
                logger=logger)
        report = {
            REPORT.PROCESS: command,
            REPORT.INPATH: config["input_path"],
            REPORT.PROCESS_PATH: process_path,
            REPORT.INPUT_COUNTS: data.record_counts,
            command: stage_report,
        }
    return report


# .....................................................................................
def cli():
    """Command-line interface to build the DAISIE Darwin Core checklist.

    Raises:
        OSError: on failure to write to report_filename.
    """
    script_name = os.path.splitext(os.path.basename(__file__))[0]
    config, logger, report_filename = get_common_arguments(
        script_name, DESCRIPTION, PARAMETERS)

    try:
        report = execute_command(config, logger)

        # If the output report was requested, write it
        if report_filename:
            os.makedirs(
                os.path.dirname(os.path.abspath(report_filename)), exist_ok=True)
            with open(report_filename, mode='wt', encoding="utf-8") as out_file:
                json.dump(report, out_file, indent=4)
            logger.log(
                f"Wrote report file to {report_filename}", refname=script_name)
    finally:
        logger.close()


# .....................................................................................
__all__ = ["cli", "execute_command", "get_metadata"]


# .....................................................................................
if __name__ == '__main__':  # pragma: no cover
    cli()
