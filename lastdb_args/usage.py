"""
Rendering of the lastdb usage, help and version texts.

The advertised defaults come from the schema default table, the same one a
new configuration record is built from. Nothing here writes to a stream;
the caller decides where the text goes.
"""

from typing import Any, Dict, Optional

from . import __version__
from .config.schema_config import LastdbConfig
from .constants import PROGRAM_NAME

HOME_PAGE = "http://last.cbrc.jp/"
BUG_REPORTS = "last-align (ATmark) googlegroups (dot) com"


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _advertised(config: Optional[LastdbConfig]) -> Dict[str, Any]:
    """Values to show as defaults: the schema defaults, or the given record's values."""
    if config is None:
        return LastdbConfig().defaults()
    return config.as_dict()


def render_usage(config: Optional[LastdbConfig] = None) -> str:
    """
    Build the short usage block, used in error messages and at the top of the help.

    :param config: Record whose values are advertised as defaults; the schema defaults if omitted
    :return: Usage text, without a trailing newline
    """
    values = _advertised(config)
    repeat_default = _flag(values['is_keep_lowercase']) + str(int(values['tantan_setting']))
    return (
        f"Usage: {PROGRAM_NAME} [options] output-name fasta-sequence-file(s)\n"
        "Prepare sequences for subsequent alignment with lastal.\n"
        "\n"
        "Main Options:\n"
        "-h, --help: show all options and their default settings, and exit\n"
        "-p: interpret the sequences as proteins\n"
        f"-R: repeat-marking options (default={repeat_default})\n"
        "-c: soft-mask lowercase letters"
    )


def render_help(config: Optional[LastdbConfig] = None) -> str:
    """
    Build the full help text: the usage block followed by the advanced options
    with their default settings.

    :param config: Record whose values are advertised as defaults; the schema defaults if omitted
    :return: Help text, ending with a newline
    """
    values = _advertised(config)
    return (
        render_usage(config) + "\n"
        "\n"
        "Advanced Options (default settings):\n"
        "-Q: input format: 0=fasta, 1=fastq-sanger, 2=fastq-solexa, 3=fastq-illumina "
        f"({int(values['input_format'])})\n"
        "-s: volume size (unlimited)\n"
        "-m: seed pattern\n"
        "-u: subset seed (yass.seed)\n"
        "-w: index step\n"
        "-a: user-defined alphabet\n"
        "-i: minimum limit on initial matches per query position "
        f"({values['min_seed_limit']})\n"
        "-b: bucket depth\n"
        "-C: child table type: 0=none, 1=byte-size, 2=short-size, 3=full "
        f"({int(values['child_table_type'])})\n"
        "-x: just count sequences and letters\n"
        f"-v: be verbose: write messages about what {PROGRAM_NAME} is doing\n"
        "-V, --version: show version information, and exit\n"
        "\n"
        f"Report bugs to: {BUG_REPORTS}\n"
        f"LAST home page: {HOME_PAGE}\n"
    )


def render_version() -> str:
    """Return the version line."""
    return f"{PROGRAM_NAME} {__version__}\n"
