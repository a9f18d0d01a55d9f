from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional, Sequence, TextIO

from codeflat.core.errors import FlattenError
from codeflat.core.models import FlattenConfig, FlattenReport
from codeflat.logging.factory import DefaultLoggerFactory
from codeflat.logging.helpers import get_logger
from codeflat.parsing.parser import _build_parser
from codeflat.runtime.runner import flatten


logger = get_logger('codeflat')


def _configure_logging(cfg: FlattenConfig, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure process-wide logging for one run and return the base logger."""
    factory = DefaultLoggerFactory(json_logs=cfg.json_logs, verbose=cfg.verbose, stream=stream)
    global logger
    logger = factory.get_logger('codeflat')
    return logger


class CodeFlat:
    """Top-level façade for command-style execution."""

    @staticmethod
    def parse(argv: Sequence[str]) -> FlattenConfig:
        ns: argparse.Namespace = _build_parser().parse_args(list(argv))
        return FlattenConfig.from_namespace(ns)

    @staticmethod
    def run(argv: Sequence[str], *, stream: Optional[TextIO] = None) -> FlattenReport:
        """Parse *argv*, configure logging and flatten. Errors propagate."""
        cfg = CodeFlat.parse(argv)
        _configure_logging(cfg, stream)
        return flatten(cfg, logger=get_logger('runtime'))


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Entry point for the `codeflat` console script and `python -m codeflat`."""
    try:
        CodeFlat.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except (FlattenError, OSError) as exc:
        logger.error('%s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
