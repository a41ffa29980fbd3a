from enum import IntEnum

# Option characters, the values they accept and the defaults they fall back to
# are anchored here and in config/schema.yaml. Handlers translate raw option
# strings into these types, so code downstream of the parser should never see
# a raw option value.

PROGRAM_NAME = "lastdb"

# getopt-style grammar: a trailing colon means the option requires a value
OPTION_GRAMMAR = "hVpR:cm:s:w:u:a:i:b:C:xvQ:"

HELP_LONG_OPTION = "--help"
VERSION_LONG_OPTION = "--version"

BISULFITE_SEEDS = ("BISF", "BISR")

SIZE_SUFFIXES = "KMGTPEZY"


class SequenceFormat(IntEnum):
    FASTA = 0
    FASTQ_SANGER = 1
    FASTQ_SOLEXA = 2
    FASTQ_ILLUMINA = 3
    PRB = 4
    PSSM = 5

    @classmethod
    def first_internal(cls) -> "SequenceFormat":
        """Return the first format that users may not select with -Q."""
        return cls.PRB


class ChildTableType(IntEnum):
    NONE = 0
    BYTE = 1
    SHORT = 2
    FULL = 3


def verbosity_to_log_level(verbosity: int) -> str:
    """Map the number of -v flags onto a logging level name."""
    if verbosity <= 0:
        return "WARNING"
    if verbosity == 1:
        return "INFO"
    return "DEBUG"
