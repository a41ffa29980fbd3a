import sys
import logging
from typing import List, Optional

from nbitk.logger import get_formatted_logger

from .arguments import parse_arguments
from .constants import PROGRAM_NAME
from .errors import ArgumentError
from .outcome import Halt, ParsedArguments


class LastdbCLI:
    """
    Command Line Interface for lastdb option handling.

    The overall program flow is as follows:
    1. Interpret the argument vector into a configuration record
    2. For -h/--help or -V/--version, write the text to stdout and exit with status 0
    3. For an invalid command line, write 'lastdb: <message>' to stderr and exit with status 1
    4. Otherwise, log the finalized configuration and hand back the parsed arguments,
       whose input files are left for the database builder to open
    """

    def __init__(self, argv: Optional[List[str]] = None) -> None:
        """
        Initialize the LastdbCLI.

        :param argv: Full argument vector; sys.argv if omitted
        """
        self.argv: List[str] = list(sys.argv if argv is None else argv)
        self.parsed: Optional[ParsedArguments] = None
        self.logger: Optional[logging.Logger] = None

    def parse_args(self) -> ParsedArguments:
        """
        Parse the argument vector, exiting on help, version or error.

        :return: Parsed command line arguments
        """
        try:
            outcome = parse_arguments(self.argv)
        except ArgumentError as e:
            sys.stderr.write(f"{PROGRAM_NAME}: {e}\n")
            sys.exit(1)

        if isinstance(outcome, Halt):
            sys.stdout.write(outcome.text)
            sys.stdout.flush()
            sys.exit(outcome.status)

        self.parsed = outcome
        self.logger = get_formatted_logger(__name__, outcome.config)
        return outcome

    def run(self) -> ParsedArguments:
        """Parse the command line and report what the database builder will be given."""
        parsed = self.parse_args()
        self.logger.info(f"Output name: {parsed.output_name}")
        for key, value in parsed.config.as_dict().items():
            self.logger.debug(f"{key}: {value}")
        if parsed.input_files:
            self.logger.info(f"Input files: {', '.join(parsed.input_files)}")
        else:
            self.logger.info("No input files given, sequences will be read from standard input")
        return parsed


def main():
    """Main entry point for the CLI."""
    cli = LastdbCLI()
    cli.run()


if __name__ == "__main__":
    main()
