from __future__ import annotations

import argparse
import os
import sys
from typing import NoReturn, Optional, Sequence

from cora.core.models import CoraConfig
from cora.core.report import RunReport
from cora.errors import CoraError
from cora.core.interfaces.logging import LoggerFactoryProtocol
from cora.logging.factory import CoraLoggerFactory
from cora.logging.helpers import get_logger, is_debug_enabled
from cora.parsing.list_ops import decode_escapes, split_list
from cora.parsing.parser import _build_parser
from cora.runtime.runner import CoraRunner


logger = get_logger('cora')


def _configure_logging(cfg: CoraConfig) -> LoggerFactoryProtocol:
    """Configure process-wide logging (JSON or plain text) for *cfg*."""
    factory: LoggerFactoryProtocol = CoraLoggerFactory(json_logs=cfg.json_logs, debug=cfg.debug)
    global logger
    logger = factory.get_logger('cora')
    return factory


def config_from_namespace(ns: argparse.Namespace) -> CoraConfig:
    """Translate parsed CLI flags into a CoraConfig (not yet validated)."""
    return CoraConfig(
        source_directory=ns.source or '',
        output_file=ns.output or '',
        exclude_patterns=tuple(split_list(ns.exclude)),
        include_patterns=tuple(split_list(ns.include)),
        separator=decode_escapes(ns.separator),
        path_prefix=decode_escapes(ns.path_prefix),
        debug=bool(ns.debug) or is_debug_enabled(),
        json_logs=bool(ns.json_logs) or os.getenv('CORA_JSON_LOGS') == '1',
        report=bool(ns.report),
    )


class Cora:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> Optional[RunReport]:
        """Run the tool with an argv-like sequence; return the run report.

        Returns None when only the version was requested.
        """
        ns = _build_parser().parse_args(list(argv))
        if ns.show_version:
            from cora import __version__
            print(f'cora {__version__}')
            return None

        cfg = config_from_namespace(ns)
        factory = _configure_logging(cfg)

        runner = CoraRunner(logger=factory.get_logger('runner'), debug_sink=factory.debug_sink())
        report = runner.run(cfg)
        if cfg.report:
            print(report.to_json(), file=sys.stderr)
        return report


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `python -m cora` and the `cora` console script."""
    try:
        Cora.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except CoraError as exc:
        logger.error('Error: %s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
