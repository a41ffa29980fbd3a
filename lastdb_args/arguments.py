from typing import Sequence, Union

from nbitk.logger import get_formatted_logger

from .config.schema_config import LastdbConfig
from .errors import MissingPositionalError
from .handlers import OPTION_HANDLERS
from .outcome import Halt, ParsedArguments
from .resolver import resolve_defaults
from .scanner import ScanState, next_option
from .usage import render_usage


def parse_arguments(argv: Sequence[str]) -> Union[ParsedArguments, Halt]:
    """
    Interpret a lastdb argument vector.

    Options are applied to a fresh configuration record in command line order.
    When they run out, dependent defaults are resolved, the first positional
    token becomes the output name and the remaining tokens are the input files.

    :param argv: Full argument vector, argv[0] being the program name
    :return: ParsedArguments on success, or a Halt if -h/--help or -V/--version was given
    :raises ArgumentError: If an option or its value is invalid, or no output name is given
    """
    argv = list(argv)
    config = LastdbConfig()

    applied = []
    state = ScanState()
    while True:
        scanned, state = next_option(argv, state)
        if scanned is None:
            break
        halt = OPTION_HANDLERS[scanned.option](config, scanned.option, scanned.value)
        if halt is not None:
            return halt
        applied.append(scanned)

    # the logging level depends on -v, so it is only known once all options are applied
    resolve_defaults(config)
    logger = get_formatted_logger(__name__, config)
    for scanned in applied:
        logger.debug(f"Option -{scanned.option} {scanned.value if scanned.value is not None else ''}")
    logger.debug(f"Resolved index step: {config.get('index_step')}")

    cursor = state.cursor
    if cursor >= len(argv):
        raise MissingPositionalError(render_usage())
    config.finalize()
    return ParsedArguments(config=config, output_name=argv[cursor], input_start=cursor + 1, argv=argv)
