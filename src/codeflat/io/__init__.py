from codeflat.io.concat import Concatenator, render_header
from codeflat.io.ignore import Decision, IgnoreLayer, IgnoreRuleSet
from codeflat.io.sniffer import Utf8BinarySniffer, looks_binary
from codeflat.io.walker import DirectoryWalker

__all__ = [
    'Concatenator',
    'Decision',
    'DirectoryWalker',
    'IgnoreLayer',
    'IgnoreRuleSet',
    'Utf8BinarySniffer',
    'looks_binary',
    'render_header',
]
