from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from codeflat.core.errors import FlattenError
from codeflat.core.models import FlattenConfig, FlattenReport
from codeflat.io.concat import Concatenator
from codeflat.io.ignore import IgnoreRuleSet
from codeflat.io.walker import DirectoryWalker
from codeflat.logging.helpers import get_logger


def flatten_into(
    sink: BinaryIO,
    cfg: FlattenConfig,
    *,
    exclude_files: Iterable[Path] = (),
    logger: Optional[logging.Logger] = None,
) -> FlattenReport:
    """Walk ``cfg.root`` and stream every selected file into *sink*.

    The caller owns *sink*; nothing is flushed or closed here.
    """
    cfg.validate()
    log = logger or get_logger('runtime')
    report = FlattenReport()
    matcher = IgnoreRuleSet(cfg.root, logger=get_logger('io.ignore'))
    walker = DirectoryWalker(
        cfg.root,
        matcher=matcher,
        exclude_files=exclude_files,
        logger=get_logger('io.walker'),
        report=report,
    )
    concat = Concatenator(
        sink,
        include_binary=cfg.include_binary,
        logger=get_logger('io.concat'),
        report=report,
    )
    concat.write_all(walker.walk())
    log.info('%s', report.summary())
    return report


def flatten(cfg: FlattenConfig, *, logger: Optional[logging.Logger] = None) -> FlattenReport:
    """Run a complete flatten: validate, create the output, stream, flush and close.

    The output is truncated on open. If the run fails midway the partially
    written file stays on disk.
    """
    log = logger or get_logger('runtime')
    cfg.validate()
    log.info("Flattening '%s' → '%s' (binary: %s)", cfg.root, cfg.output, str(cfg.include_binary).lower())

    try:
        sink = open(cfg.output, 'wb')
    except OSError as exc:
        raise FlattenError(f'cannot create {cfg.output}: {exc.strerror or exc}') from exc

    with sink:
        report = flatten_into(sink, cfg, exclude_files=[cfg.output], logger=log)
        sink.flush()

    log.info('✅ Done!')
    return report
