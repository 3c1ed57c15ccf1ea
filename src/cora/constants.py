from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public defaults to reduce cross-module coupling.
"""

# Written between consecutive file blocks, never before the first one.
DEFAULT_SEPARATOR: str = '\n---\n'

# Written right before each file path in its header line.
DEFAULT_PATH_PREFIX: str = '## '

# Copy buffer used when streaming input files into the output.
DEFAULT_BUFFER_SIZE: int = 64 * 1024
