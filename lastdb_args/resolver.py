from typing import List

from .config.schema_config import LastdbConfig
from .constants import BISULFITE_SEEDS, verbosity_to_log_level

UNSET_INDEX_STEP = 0


def is_bisulfite(subset_seed_files: List[str]) -> bool:
    """True if the only subset seed is one of the bisulfite seeds."""
    return len(subset_seed_files) == 1 and subset_seed_files[0] in BISULFITE_SEEDS


def resolve_defaults(config: LastdbConfig) -> None:
    """
    Fix the settings whose default depends on other options. Runs once, after
    all options have been scanned.

    :param config: Configuration record, updated in place
    """
    # The bisulfite recipe builds two indexes at once, so a step of 2 halves
    # the memory needed; in tests this did not reduce sensitivity.
    if config.get('index_step') == UNSET_INDEX_STEP:
        config.set('index_step', 2 if is_bisulfite(config.get('subset_seed_files')) else 1)
    config.set('log_level', verbosity_to_log_level(config.get('verbosity')))
