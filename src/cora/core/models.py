from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from cora.constants import DEFAULT_PATH_PREFIX, DEFAULT_SEPARATOR
from cora.errors import ConfigError


class EntryDecision(str, Enum):
    """Outcome of filtering a single traversal entry."""

    EXCLUDED = 'excluded'
    INCLUDED = 'included'
    SKIPPED = 'skipped'


@dataclass(frozen=True)
class CoraConfig:
    """Validated settings for one concatenation run."""
    source_directory: str
    output_file: str
    exclude_patterns: Tuple[str, ...] = ()
    include_patterns: Tuple[str, ...] = ()
    separator: str = DEFAULT_SEPARATOR
    path_prefix: str = DEFAULT_PATH_PREFIX
    debug: bool = False
    json_logs: bool = False
    report: bool = False

    def validate(self) -> 'CoraConfig':
        if not self.source_directory:
            raise ConfigError('source directory is required')
        if not self.output_file:
            raise ConfigError('output file is required')
        return self
