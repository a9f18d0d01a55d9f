from __future__ import annotations
import logging
import shutil
from typing import BinaryIO, Iterable, Optional

from codeflat.constants import SEPARATOR
from codeflat.core.errors import FlattenError
from codeflat.core.interfaces.sniffer import BinarySnifferProtocol
from codeflat.core.interfaces.walker import ConcatenatorProtocol
from codeflat.core.models import Entry, FlattenReport
from codeflat.io.sniffer import Utf8BinarySniffer
from codeflat.logging.helpers import get_logger


def render_header(relpath: str, separator: str = SEPARATOR) -> bytes:
    """Return the header line written before a file's content, newline included."""
    return (separator.replace('{path}', relpath) + '\n').encode('utf-8')


class Concatenator(ConcatenatorProtocol):
    """Writes a header and the content of each entry into a binary *sink*.

    With ``include_binary`` every file is copied byte for byte and no sniffing
    happens. Otherwise binary-looking files are skipped and text files are
    re-emitted line by line, each line terminated by ``\\n``.

    Errors reading a selected file propagate and end the run.
    """

    def __init__(
        self,
        sink: BinaryIO,
        *,
        include_binary: bool = False,
        sniffer: Optional[BinarySnifferProtocol] = None,
        separator: str = SEPARATOR,
        logger: Optional[logging.Logger] = None,
        report: Optional[FlattenReport] = None,
    ) -> None:
        self._sink = sink
        self._include_binary = include_binary
        self._sniffer = sniffer or Utf8BinarySniffer()
        self._separator = separator
        self._log = logger or get_logger('io.concat')
        self._report = report or FlattenReport()

    def write_entry(self, entry: Entry) -> bool:
        if not self._include_binary and self._sniffer.is_binary(entry.path):
            self._report.skipped_binary += 1
            self._log.info(
                '(skip – binary) %s', entry.relpath,
                extra={'context': {'path': entry.relpath, 'reason': 'binary'}},
            )
            return False

        self._log.info('%s', entry.relpath)
        self._sink.write(render_header(entry.relpath, self._separator))
        if self._include_binary:
            self._copy_raw(entry)
        else:
            self._copy_lines(entry)
        self._report.written += 1
        return True

    def write_all(self, entries: Iterable[Entry]) -> int:
        count = 0
        for entry in entries:
            if self.write_entry(entry):
                count += 1
        return count

    def _copy_raw(self, entry: Entry) -> None:
        with open(entry.path, 'rb') as fh:
            shutil.copyfileobj(fh, self._sink)

    def _copy_lines(self, entry: Entry) -> None:
        with open(entry.path, 'rb') as fh:
            for raw in fh:
                if raw.endswith(b'\n'):
                    raw = raw[:-1]
                    if raw.endswith(b'\r'):
                        raw = raw[:-1]
                try:
                    line = raw.decode('utf-8')
                except UnicodeDecodeError as exc:
                    raise FlattenError(f'cannot read {entry.relpath} as UTF-8 text: {exc.reason}') from exc
                self._sink.write(line.encode('utf-8') + b'\n')
