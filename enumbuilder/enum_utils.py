import importlib as _importlib
import logging as _logging
import sys as _sys
from typing import Optional, Union

import click as _click
import pandas as _pd

from .registry import REGISTRY, EnumRegistry


def configure_logging(verbose: bool, output_logger: bool = False) -> Union[_logging.Logger, None]:
    """Configure the logger object with the level of verbosity requested and output if desired

    :param bool verbose: Verbosity of logger object to use for encoding logging strings, True: DEBUG, False: INFO
    :param bool output_logger: Flag to indicate whether to output the Logger object, defaults to False
    :return _logging.Logger | None: Return the logger object or None (based on output_logger)
    """
    if verbose:
        logging_level = _logging.DEBUG
    else:
        logging_level = _logging.INFO
    _logging.basicConfig(format="%(asctime)s [%(funcName)s] %(levelname)s: %(message)s")
    _logging.getLogger().setLevel(logging_level)
    if output_logger:
        return _logging.getLogger()
    else:
        return None


def registry_to_df(registry: EnumRegistry = REGISTRY, enum_name: Optional[str] = None) -> _pd.DataFrame:
    """Tabulates a registry: one row per enum (name, member count), or one row per member of enum_name.

    :param EnumRegistry registry: Registry to read, defaults to the process-wide one
    :param str enum_name: If given, list the members (key, value) of this enum instead of the enum names
    :return _pd.DataFrame: The table
    """
    if enum_name is None:
        enum_names = registry.names()
        return _pd.DataFrame(
            {"enum": enum_names, "members": [len(registry.get_keys(name)) for name in enum_names]},
            columns=["enum", "members"],
        )
    table = registry.deep_clone(enum_name)
    return _pd.DataFrame({"key": list(table.keys()), "value": list(table.values())}, columns=["key", "value"])


@_click.command()
@_click.option(
    "-m",
    "--module",
    "modules",
    multiple=True,
    required=True,
    type=str,
    help="dotted name of a module which registers enums when imported. Can be given several times",
)
@_click.option(
    "-e",
    "--enum",
    "enum_name",
    type=str,
    default=None,
    help="name of the enum to list the members of. Default is to list the registered enums",
)
@_click.option(
    "--csv_separation",
    nargs=1,
    type=str,
    required=False,
    default="\t",
    help="Separation used in the output table. Default is tab separation: '\t'",
)
@_click.option(
    "--header",
    nargs=1,
    type=bool,
    required=False,
    default=True,
    help="Flag to include the header row in the output table. Default: True",
)
@_click.option("--verbose", is_flag=True)
def enumq(modules, enum_name, csv_separation, header, verbose):
    """
    Print the enums registered by the given modules, or the members of one of them
    """
    logger = configure_logging(verbose=verbose, output_logger=True)

    for module in modules:
        logger.debug(f":enumq importing '{module}'")
        try:
            _importlib.import_module(module)
        except ImportError as exc:
            logger.error(f":enumq couldn't import '{module}': {exc}")
            _sys.exit(1)

    if enum_name is not None and not REGISTRY.exists(enum_name):
        logger.error(f":enumq no enum named '{enum_name}'. Registered: {', '.join(REGISTRY.names())}")
        _sys.exit(1)

    df = registry_to_df(REGISTRY, enum_name)
    # to_csv already ends each row, including the last, with a newline
    _click.echo(df.to_csv(sep=csv_separation, index=False, header=header), nl=False)
