"""
listops – Small, shared list and string operations for cora's CLI layer.

Kept intentionally minimal and dependency-free.
"""
import re
from typing import List, Optional

_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', '\\': '\\'}
_ESCAPE_RX = re.compile(r'\\(.)', re.S)


def split_list(raw: Optional[List[str]]) -> List[str]:
    """Return a flat list splitting comma-separated tokens.

    Examples
    --------
    >>> split_list(["*.log,build", "node_modules"])
    ['*.log', 'build', 'node_modules']

    Whitespace around items is stripped; empty items are removed. Order
    is preserved and duplicates are kept.
    """
    if not raw:
        return []
    out: List[str] = []
    for itm in raw:
        out.extend([x.strip() for x in itm.split(',') if x.strip()])
    return out


def decode_escapes(value: str) -> str:
    """Expand ``\\n``, ``\\t``, ``\\r`` and ``\\\\``; leave other escapes untouched.

    >>> decode_escapes('\\\\n---\\\\n')
    '\\n---\\n'
    """
    return _ESCAPE_RX.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), value)
