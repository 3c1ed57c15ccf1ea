from __future__ import annotations

from cora.cli import Cora, main
from cora.constants import DEFAULT_BUFFER_SIZE, DEFAULT_PATH_PREFIX, DEFAULT_SEPARATOR
from cora.core.models import CoraConfig, EntryDecision
from cora.core.report import RunReport
from cora.errors import ConcatError, ConfigError, CoraError, GlobPatternError, WalkError
from cora.io.concatenator import Concatenator
from cora.io.walker import Walker, classify_entry
from cora.runtime.runner import CoraRunner

__version__ = '0.3.0'

__all__ = [
    'Cora',
    'main',
    'CoraConfig',
    'CoraRunner',
    'Concatenator',
    'Walker',
    'classify_entry',
    'EntryDecision',
    'RunReport',
    'CoraError',
    'ConfigError',
    'WalkError',
    'GlobPatternError',
    'ConcatError',
    'DEFAULT_SEPARATOR',
    'DEFAULT_PATH_PREFIX',
    'DEFAULT_BUFFER_SIZE',
]
