from dataclasses import dataclass, field
from typing import List

from .config.schema_config import LastdbConfig


@dataclass
class ParsedArguments:
    """A finalized parse: the configuration, the output name and where the input files start in argv."""
    config: LastdbConfig
    output_name: str
    input_start: int
    argv: List[str] = field(default_factory=list, repr=False)

    @property
    def input_files(self) -> List[str]:
        """The sequence file names following the output name, unvalidated."""
        return list(self.argv[self.input_start:])


@dataclass
class Halt:
    """Parsing stopped early and successfully (help or version); text is to be written to stdout."""
    status: int
    text: str
