"""
One handler per lastdb option character.

A handler receives the configuration record being built and the raw option
value (None for flags), and either mutates the record or returns a Halt for
options that end the parse successfully (-h, -V). Values that fail their
validation raise BadOptionValueError carrying the option and the raw value.
"""

import re
from typing import Callable, Dict, Optional

from .config.schema_config import LastdbConfig
from .constants import SIZE_SUFFIXES, ChildTableType, SequenceFormat
from .errors import BadOptionValueError
from .outcome import Halt
from .usage import render_help, render_version

Handler = Callable[[LastdbConfig, str, Optional[str]], Optional[Halt]]

INTEGER_PATTERN = re.compile(r'\s*([+-]?[0-9]+)\s*', re.ASCII)
SIZE_PATTERN = re.compile(r'\s*([0-9]+)\s*([A-Za-z]?)\s*', re.ASCII)


def parse_integer(option: str, value: str) -> int:
    """
    Parse a whole decimal integer, surrounding whitespace allowed.

    :param option: Option character, for error reporting
    :param value: Raw option value
    :return: Parsed integer
    :raises BadOptionValueError: If value is not an integer
    """
    match = INTEGER_PATTERN.fullmatch(value)
    if not match:
        raise BadOptionValueError(option, value)
    return int(match.group(1))


def parse_unsigned(option: str, value: str) -> int:
    """Parse a non-negative decimal integer."""
    number = parse_integer(option, value)
    if number < 0:
        raise BadOptionValueError(option, value)
    return number


def parse_size(option: str, value: str) -> int:
    """
    Parse a human-readable byte size such as 500, 64K or 2G.

    A single suffix letter multiplies by a power of 1024: K=1024, M=1024**2, and
    so on through Y.

    :param option: Option character, for error reporting
    :param value: Raw option value
    :return: Size in bytes
    :raises BadOptionValueError: If value is not a size
    """
    match = SIZE_PATTERN.fullmatch(value)
    if not match:
        raise BadOptionValueError(option, value)
    number, suffix = int(match.group(1)), match.group(2)
    if suffix:
        power = SIZE_SUFFIXES.find(suffix)
        if power < 0:
            raise BadOptionValueError(option, value)
        number *= 1024 ** (power + 1)
    return number


def show_help(config: LastdbConfig, option: str, value: Optional[str]) -> Halt:
    return Halt(0, render_help())


def show_version(config: LastdbConfig, option: str, value: Optional[str]) -> Halt:
    return Halt(0, render_version())


def set_protein(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('is_protein', True)


def set_repeat_marking(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    """
    -R takes two digits: keep lowercase (0 or 1), then tantan setting (0, 1 or 2).
    """
    if len(value) < 1 or value[0] not in '01':
        raise BadOptionValueError(option, value)
    if len(value) < 2 or value[1] not in '012':
        raise BadOptionValueError(option, value)
    if len(value) > 2:
        raise BadOptionValueError(option, value)
    config.set('is_keep_lowercase', value[0] == '1')
    config.set('tantan_setting', int(value[1]))


def set_case_sensitive(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('is_case_sensitive', True)


def add_seed_pattern(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.append('seed_patterns', value)


def set_volume_size(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('volume_size', parse_size(option, value))


def set_index_step(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    step = parse_integer(option, value)
    if step < 1:
        raise BadOptionValueError(option, value)
    config.set('index_step', step)


def add_subset_seed_file(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.append('subset_seed_files', value)


def set_user_alphabet(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('user_alphabet', value)


def set_min_seed_limit(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('min_seed_limit', parse_integer(option, value))


def set_bucket_depth(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('bucket_depth', parse_unsigned(option, value))


def set_child_table_type(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    table_type = parse_integer(option, value)
    if table_type < ChildTableType.NONE or table_type > ChildTableType.FULL:
        raise BadOptionValueError(option, value)
    config.set('child_table_type', table_type)


def set_counts_only(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('is_counts_only', True)


def increase_verbosity(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    config.set('verbosity', config.get('verbosity') + 1)


def set_input_format(config: LastdbConfig, option: str, value: Optional[str]) -> None:
    input_format = parse_integer(option, value)
    if input_format < 0 or input_format >= SequenceFormat.first_internal():
        raise BadOptionValueError(option, value)
    config.set('input_format', input_format)


OPTION_HANDLERS: Dict[str, Handler] = {
    'h': show_help,
    'V': show_version,
    'p': set_protein,
    'R': set_repeat_marking,
    'c': set_case_sensitive,
    'm': add_seed_pattern,
    's': set_volume_size,
    'w': set_index_step,
    'u': add_subset_seed_file,
    'a': set_user_alphabet,
    'i': set_min_seed_limit,
    'b': set_bucket_depth,
    'C': set_child_table_type,
    'x': set_counts_only,
    'v': increase_verbosity,
    'Q': set_input_format,
}
