"""Module containing a tool for parsing a configuration file for argparse."""
import argparse
import json
import os

from daisie.common.constants import COMMANDS, CONFIG_PARAM
from daisie.common.log import Logger


# .....................................................................................
def _build_parser(command, description):
    """Build an argparse.ArgumentParser object for the tool.

    Args:
        command (str): Command for argument parser.
        description (str): Description of command processes.

    Returns:
        argparse.ArgumentParser: An argument parser for the tool's parameter_meta.
    """
    parser = argparse.ArgumentParser(prog=command, description=description)
    parser.add_argument(
        f"--{CONFIG_PARAM.FILE}", type=str, help='Path to configuration file.')
    parser.add_argument(
        "command", type=str, choices=COMMANDS, help="Process to execute on data."
    )
    return parser


# .....................................................................................
def _get_command_config_file_arguments(parser, args=None):
    """Retrieve the command and configuration file passed through an ArgumentParser.

    Args:
        parser (argparse.ArgumentParser): An argparse.ArgumentParser with parameter_meta.
        args (list of str): arguments to parse, None for sys.argv.

    Returns:
        cmd: the command argument passed through the command line
        config_filename: the configuration file argument passed through the command line
    """
    config_filename = None
    args = parser.parse_args(args)
    if hasattr(args, CONFIG_PARAM.FILE):
        config_filename = getattr(args, CONFIG_PARAM.FILE)
    cmd = getattr(args, CONFIG_PARAM.COMMAND)
    return cmd, config_filename


# .....................................................................................
def _confirm_val(key, val, paramdict):
    # First check for boolean values
    expected_type = paramdict[CONFIG_PARAM.TYPE]
    if expected_type is bool:
        valtmp = str(val).lower()
        val = False
        if (valtmp in ("yes", "y", "true", "t", "1")):
            val = True
    else:
        try:
            options = paramdict[CONFIG_PARAM.CHOICES]
        except KeyError:
            pass
        else:
            if val not in options:
                raise Exception(
                    f"Value {val} is not in valid options {options} for {key}.")
        if paramdict.get(CONFIG_PARAM.IS_INPUT_DIR) and not os.path.isdir(val):
            raise Exception(f"Input directory {val} for {key} does not exist.")
    return val


# .....................................................................................
def process_arguments_from_file(config_filename, parameter_meta):
    """Process arguments provided by configuration file.

    Args:
        config_filename (str): Full filename of a JSON file with parameter_meta and values.
        parameter_meta (dict): Dictionary of optional and required arguments with expected
            value, and help string.

    Returns:
        config (dict): parameter names and values from the configuration file, with
            defaults for absent optional parameters.

    Raises:
        Exception: on config_filename is None.
        FileNotFoundError: on missing config_filename.
        json.decoder.JSONDecodeError: on badly constructed JSON file
        Exception: on missing required parameter in configuration file.
        Exception: on invalid value for a parameter.
    """
    if config_filename is None:
        raise Exception("Missing required configuration file")

    with open(config_filename, mode='rt', encoding="utf-8") as in_json:
        config = json.load(in_json)

    # Test that required arguments are present in configuration file
    req_meta = parameter_meta.get("required", {})
    for rkey, p_meta in req_meta.items():
        try:
            val = config[rkey]
        except KeyError:
            raise Exception(f"Missing required argument {rkey} in {config_filename}")
        config[rkey] = _confirm_val(rkey, val, p_meta)

    opt_meta = parameter_meta.get("optional", {})
    for okey, p_meta in opt_meta.items():
        try:
            val = config[okey]
        except KeyError:
            # Add optional argument with default or empty value to config dictionary
            if CONFIG_PARAM.DEFAULT in p_meta:
                config[okey] = p_meta[CONFIG_PARAM.DEFAULT]
            elif p_meta[CONFIG_PARAM.TYPE] is list:
                config[okey] = []
            else:
                config[okey] = None
        else:
            config[okey] = _confirm_val(okey, val, p_meta)

    return config


# .....................................................................................
def get_common_arguments(script_name, description, parameter_meta, args=None):
    """Get configuration dictionary, logger and report filename for a tool.

    Args:
        script_name (str): basename of the script being executed.
        description (str): Help string for the script being executed.
        parameter_meta (dict): Dictionary of optional and required arguments with expected
            value, and help string.
        args (list of str): command line arguments, None for sys.argv.

    Returns:
        config: A parameter/argument dictionary contained in the config_filename.
        logger (daisie.common.log.Logger): logger for saving relevant processing messages
        report_filename: filename for saving summary process information.

    Raises:
        Exception: on missing --config_file argument
    """
    parser = _build_parser(script_name, description)
    command, config_filename = _get_command_config_file_arguments(parser, args=args)
    if command not in COMMANDS:
        raise Exception(f"{command} is not in valid commands: {COMMANDS}")
    if not config_filename:
        raise Exception(f"Script {script_name} requires value for config_file")
    config = process_arguments_from_file(config_filename, parameter_meta)
    config[CONFIG_PARAM.COMMAND] = command
    meta_basename = f"{script_name}_{command}"

    report_filename = config.get("report_filename")
    if not report_filename:
        report_filename = os.path.join(config["output_path"], f"{meta_basename}.rpt")

    logger = Logger(
        meta_basename, log_path=config.get("log_path"),
        log_console=config.get("log_console", True))

    return config, logger, report_filename


# .....................................................................................
__all__ = ["get_common_arguments", "process_arguments_from_file"]
