import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import htmlinliner.core.interfaces as I

    assert hasattr(I, "AssetReaderProtocol")
    assert hasattr(I, "PathResolverProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_default_implementations_satisfy_protocols():
    from htmlinliner.core.interfaces import AssetReaderProtocol, LoggerFactoryProtocol, PathResolverProtocol
    from htmlinliner.io.readers import AssetReader
    from htmlinliner.logging.factory import DefaultLoggerFactory
    from htmlinliner.rendering.path_resolver import DefaultPathResolver

    assert isinstance(AssetReader(), AssetReaderProtocol)
    assert isinstance(DefaultPathResolver(), PathResolverProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)


def test_package_surface():
    import htmlinliner

    assert htmlinliner.IGNORE_ATTR == "x-bundler-ignore"
    assert htmlinliner.DOCTYPE == "<!DOCTYPE html>"
    assert issubclass(htmlinliner.AssetReadError, htmlinliner.InlinerError)
    assert issubclass(htmlinliner.UsageError, htmlinliner.InlinerError)


def test_project_logger_is_logger_like():
    from htmlinliner.core.interfaces import LoggerLikeProtocol
    from htmlinliner.logging.helpers import get_logger

    assert isinstance(get_logger("pipeline"), LoggerLikeProtocol)
