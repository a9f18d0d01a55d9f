from __future__ import annotations


class FlattenError(Exception):
    """Fatal error: bad source folder, uncreatable output, or a selected file that is not UTF-8 text."""
