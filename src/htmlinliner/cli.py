from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from htmlinliner.config import load_config
from htmlinliner.core.errors import InlinerError, UsageError
from htmlinliner.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from htmlinliner.logging.factory import DefaultLoggerFactory
from htmlinliner.logging.helpers import get_logger
from htmlinliner.parsing.parser import _build_parser
from htmlinliner.runtime.pipeline import InlinePipeline


logger: LoggerLikeProtocol = get_logger('htmlinliner')


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging; repeated calls with the same mode are no-ops."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('htmlinliner')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    logger.error('Abort.')
    sys.exit(code)


class HtmlInliner:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the output document.

        Raises `InlinerError` on any fatal condition; nothing is written in
        that case.
        """
        parser = _build_parser()
        ns = parser.parse_intermixed_args(list(argv))
        if not 1 <= len(ns.paths) <= 2:
            raise UsageError(
                f'expected 1 or 2 positional arguments, got {len(ns.paths)}\n{parser.format_usage().rstrip()}'
            )

        cfg = load_config(ns)
        _configure_logging(cfg.json_logs, logging.WARNING if cfg.quiet else logging.INFO)

        input_path = Path(ns.paths[0])
        output_path: Optional[Path] = Path(ns.paths[1]) if len(ns.paths) == 2 else None

        out, report = InlinePipeline(cfg).run_file(input_path)

        if cfg.report:
            logger.info('Report:\n%s', report.to_json())

        if output_path is None:
            print(out)
        else:
            try:
                output_path.write_text(out, encoding=cfg.encoding)
            except OSError as exc:
                raise InlinerError(f'Writing file {output_path} failed: {exc!r}') from exc
            logger.info('Wrote %s (%d references inlined)', output_path, report.css_found + report.scripts_found)
        return out


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `htmlinliner` console script and `python -m htmlinliner`."""
    _configure_logging(os.getenv('HTMLINLINER_JSON_LOGS') == '1')
    try:
        HtmlInliner.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except InlinerError as exc:
        _fatal(str(exc))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
