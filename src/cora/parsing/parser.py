# cora/parsing/parser.py
from __future__ import annotations

import argparse

from cora.constants import DEFAULT_PATH_PREFIX, DEFAULT_SEPARATOR


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - -e/-i are repeatable and also accept comma-separated values.
        - Required values (-s, -o) are checked by CoraConfig.validate() so
          that programmatic callers get the same ConfigError as the CLI.
    """
    p = argparse.ArgumentParser(
        prog="cora",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s -s DIR -o FILE [OPTIONS]",
        description="cora – concatenate files in a directory into a single file.",
    )

    g_loc = p.add_argument_group("Discovery")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "-s",
        "--source",
        metavar="DIR",
        dest="source",
        default="",
        help="Source directory to concatenate files from.",
    )
    g_loc.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERN",
        action="append",
        dest="exclude",
        help=(
            "Glob pattern to exclude. Repeatable; commas separate several patterns.\n"
            "A pattern without '/' matches the entry's base name at any depth;\n"
            "an excluded directory is skipped together with its whole subtree."
        ),
    )
    g_loc.add_argument(
        "-i",
        "--include",
        metavar="PATTERN",
        action="append",
        dest="include",
        help=(
            "Glob pattern to include. Repeatable; commas separate several patterns.\n"
            "When present, only files matching at least one pattern are kept.\n"
            "Exclusions always win."
        ),
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        default="",
        help="Output file to write concatenated files to (parent dirs are created).",
    )
    g_out.add_argument(
        "-p",
        "--separator",
        metavar="STR",
        dest="separator",
        default=DEFAULT_SEPARATOR,
        help="Separator written between files (default: '\\n---\\n'). Escapes \\n \\t \\r \\\\ are decoded.",
    )
    g_out.add_argument(
        "-x",
        "--path-prefix",
        metavar="STR",
        dest="path_prefix",
        default=DEFAULT_PATH_PREFIX,
        help="Prefix written before each file path (default: '## '). Escapes \\n \\t \\r \\\\ are decoded.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "-d",
        "--debug",
        action="store_true",
        dest="debug",
        help="Log every include/exclude/skip decision (also CORA_DEBUG=1).",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (also CORA_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print a JSON run report to stderr after a successful run.",
    )
    g_misc.add_argument(
        "-V",
        "--version",
        action="store_true",
        dest="show_version",
        help="Print the version and exit.",
    )
    return p
