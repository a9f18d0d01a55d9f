from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from codeflat.io.sniffer import Utf8BinarySniffer, looks_binary  # noqa: E402


def _file(tmp_path: Path, data: bytes, name: str = "f") -> Path:
    p = tmp_path / name
    p.write_bytes(data)
    return p


def test_plain_ascii_is_text(tmp_path):
    assert looks_binary(_file(tmp_path, b"hello\n")) is False


def test_empty_file_is_text(tmp_path):
    assert looks_binary(_file(tmp_path, b"")) is False


def test_multibyte_utf8_is_text(tmp_path):
    assert looks_binary(_file(tmp_path, "ñandú – 日本語\n".encode("utf-8"))) is False


def test_nul_byte_is_binary(tmp_path):
    assert looks_binary(_file(tmp_path, b"abc\x00def")) is True


def test_invalid_utf8_is_binary(tmp_path):
    assert looks_binary(_file(tmp_path, b"\xff\xfe\xfd")) is True


def test_only_prefix_is_inspected(tmp_path):
    assert looks_binary(_file(tmp_path, b"a" * 512 + b"\x00\xff")) is False


def test_char_split_at_boundary_is_binary(tmp_path):
    data = b"a" * 511 + "é".encode("utf-8")
    assert looks_binary(_file(tmp_path, data)) is True


def test_exact_size_file_with_truncated_tail_is_binary(tmp_path):
    assert looks_binary(_file(tmp_path, b"a" * 511 + b"\xc3")) is True


def test_truncated_char_at_eof_is_binary(tmp_path):
    assert looks_binary(_file(tmp_path, b"abc" + "é".encode("utf-8")[:1])) is True


def test_sniffer_object_delegates(tmp_path):
    sniffer = Utf8BinarySniffer(sample_size=4)
    assert sniffer.is_binary(_file(tmp_path, b"abcd\x00")) is False
    assert Utf8BinarySniffer().is_binary(_file(tmp_path, b"abcd\x00", "g")) is True


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        looks_binary(tmp_path / "missing")


@pytest.mark.skipif(os.name != "posix" or getattr(os, "geteuid", lambda: 0)() == 0,
                    reason="needs POSIX permissions and a non-root user")
def test_unreadable_file_propagates(tmp_path):
    p = _file(tmp_path, b"secret")
    p.chmod(0)
    try:
        with pytest.raises(PermissionError):
            looks_binary(p)
    finally:
        p.chmod(0o600)
