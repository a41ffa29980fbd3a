"""
getopt-style scanning of the lastdb argument vector.

The scanner is a pure function of the argument vector and a ScanState: each
call to next_option() returns the next option (or None once the options are
exhausted) together with the state to continue from. Nothing is kept between
calls, so every parse starts from a fresh ScanState at position 1.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .constants import HELP_LONG_OPTION, OPTION_GRAMMAR, VERSION_LONG_OPTION
from .errors import MissingOptionValueError, UnrecognizedOptionError


@dataclass(frozen=True)
class ScanState:
    """Position of the scanner: the token index and, inside a clustered token, the character offset."""
    cursor: int = 1
    offset: int = 0


@dataclass(frozen=True)
class ScannedOption:
    option: str
    value: Optional[str] = None


def parse_grammar(grammar: str = OPTION_GRAMMAR) -> Dict[str, bool]:
    """
    Turn a getopt option string into a table of option character to arity.

    :param grammar: Option string, a trailing ':' marks an option that takes a value
    :return: Mapping of option character to whether it requires a value
    """
    table = {}
    for i, char in enumerate(grammar):
        if char == ':':
            continue
        table[char] = i + 1 < len(grammar) and grammar[i + 1] == ':'
    return table


GRAMMAR_TABLE = parse_grammar()


def next_option(argv: Sequence[str], state: ScanState,
                grammar: Dict[str, bool] = GRAMMAR_TABLE) -> Tuple[Optional[ScannedOption], ScanState]:
    """
    Scan the next option from the argument vector.

    At a token boundary, a next token that is literally --help or --version
    is reported as -h or -V. Scanning stops at the first positional token
    (one that does not start with '-', or a lone '-') and after a '--'
    token, which is consumed.

    :param argv: Full argument vector, argv[0] being the program name
    :param state: Where to continue scanning
    :param grammar: Mapping of option character to whether it requires a value
    :return: The option found (None when options are exhausted) and the new state
    :raises UnrecognizedOptionError: For an option character outside the grammar
    :raises MissingOptionValueError: When a value-taking option is last on the command line
    """
    cursor, offset = state.cursor, state.offset
    if offset == 0:
        if cursor >= len(argv):
            return None, ScanState(cursor)
        token = argv[cursor]
        if token == HELP_LONG_OPTION:
            return ScannedOption('h'), ScanState(cursor + 1)
        if token == VERSION_LONG_OPTION:
            return ScannedOption('V'), ScanState(cursor + 1)
        if token == '--':
            return None, ScanState(cursor + 1)
        if not token.startswith('-') or token == '-':
            return None, ScanState(cursor)
        if token.startswith('--'):
            raise UnrecognizedOptionError(token)
        offset = 1

    token = argv[cursor]
    char = token[offset]
    rest = token[offset + 1:]
    if char not in grammar:
        raise UnrecognizedOptionError(token)

    if not grammar[char]:
        if rest:
            return ScannedOption(char), ScanState(cursor, offset + 1)
        return ScannedOption(char), ScanState(cursor + 1)

    if rest:
        return ScannedOption(char, rest), ScanState(cursor + 1)
    if cursor + 1 >= len(argv):
        raise MissingOptionValueError(char)
    return ScannedOption(char, argv[cursor + 1]), ScanState(cursor + 2)
