import io
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import codeflat.core.interfaces as I

    assert hasattr(I, "BinarySnifferProtocol")
    assert hasattr(I, "ConcatenatorProtocol")
    assert hasattr(I, "IgnoreMatcherProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "WalkerProtocol")


def test_default_implementations_satisfy_protocols(tmp_path):
    import codeflat.core.interfaces as I
    from codeflat.io import Concatenator, DirectoryWalker, IgnoreRuleSet, Utf8BinarySniffer
    from codeflat.logging import DefaultLoggerFactory

    assert isinstance(Utf8BinarySniffer(), I.BinarySnifferProtocol)
    assert isinstance(IgnoreRuleSet(tmp_path), I.IgnoreMatcherProtocol)
    assert isinstance(DirectoryWalker(tmp_path), I.WalkerProtocol)
    assert isinstance(Concatenator(io.BytesIO()), I.ConcatenatorProtocol)

    factory = DefaultLoggerFactory(stream=io.StringIO())
    assert isinstance(factory, I.LoggerFactoryProtocol)
    assert isinstance(factory.get_logger("io.walker"), I.LoggerLikeProtocol)


def test_logger_names_are_namespaced():
    from codeflat.logging import get_logger

    assert get_logger().name == "codeflat"
    assert get_logger("io.walker").name == "codeflat.io.walker"
    assert get_logger("codeflat.runtime").name == "codeflat.runtime"


def test_quiet_factory_hides_info():
    from codeflat.logging import DefaultLoggerFactory

    stream = io.StringIO()
    log = DefaultLoggerFactory(verbose=False, stream=stream).get_logger("runtime")
    log.info("hidden")
    log.error("shown")
    assert stream.getvalue() == "ERROR: shown\n"


def test_public_surface():
    import codeflat

    assert codeflat.SEPARATOR == "\n\n----- {path} -----\n"
    assert codeflat.DEFAULT_OUTPUT == "flattened_code.txt"
    assert isinstance(codeflat.__version__, str)
    ns = codeflat._build_parser().parse_args(["src", "-b", "-v"])
    cfg = codeflat.FlattenConfig.from_namespace(ns)
    assert cfg.root == Path("src")
    assert cfg.output == Path("flattened_code.txt")
    assert cfg.include_binary and cfg.verbose and not cfg.json_logs
