from __future__ import annotations

__version__ = '0.3.1'

from codeflat.constants import DEFAULT_OUTPUT, IGNORE_FILENAME, SEPARATOR, VCS_DIRNAME
from codeflat.cli import CodeFlat, main
from codeflat.core.errors import FlattenError
from codeflat.core.models import Entry, FlattenConfig, FlattenReport
from codeflat.io.concat import Concatenator
from codeflat.io.ignore import IgnoreRuleSet
from codeflat.io.sniffer import looks_binary
from codeflat.io.walker import DirectoryWalker
from codeflat.parsing.parser import _build_parser
from codeflat.runtime.runner import flatten, flatten_into

__all__ = [
    'CodeFlat',
    'Concatenator',
    'DEFAULT_OUTPUT',
    'DirectoryWalker',
    'Entry',
    'FlattenConfig',
    'FlattenError',
    'FlattenReport',
    'IGNORE_FILENAME',
    'IgnoreRuleSet',
    'SEPARATOR',
    'VCS_DIRNAME',
    '_build_parser',
    'flatten',
    'flatten_into',
    'looks_binary',
    'main',
]
