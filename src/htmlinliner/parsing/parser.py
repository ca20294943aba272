# htmlinliner/parsing/parser.py
from __future__ import annotations

import argparse
from typing import NoReturn

from htmlinliner.core.errors import UsageError

USAGE = "%(prog)s [OPTIONS] <input.html> [<output.html>]"


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises `UsageError` instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{message}\n{self.format_usage().rstrip()}")


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Positional arguments are collected with nargs='*' so that the
          1-or-2 count rule is enforced by the caller with exit status 1.
    """
    from htmlinliner import __version__

    p = _RaisingArgumentParser(
        prog="htmlinliner",
        formatter_class=argparse.RawTextHelpFormatter,
        usage=USAGE,
        description=(
            "htmlinliner – embed local stylesheets and scripts into an HTML file\n"
            "Local <link rel=\"stylesheet\"> files are merged into one <style> in <head>;\n"
            "local <script src> files are inlined in place. Each removed tag is kept\n"
            "as a comment. Add the x-bundler-ignore attribute to a tag to keep it."
        ),
    )

    p.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=(
            "<input.html> and optional <output.html>. Relative href/src values "
            "resolve against the input file's directory. Without an output path "
            "the document is printed to stdout."
        ),
    )

    g_out = p.add_argument_group("Output & logging")
    g_out.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log lines as JSON objects (also HTMLINLINER_JSON_LOGS=1).",
    )
    g_out.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        dest="quiet",
        help="Only log warnings and errors.",
    )
    g_out.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Log a JSON summary (references found, bytes inlined, timings) at the end.",
    )

    g_misc = p.add_argument_group("Miscellaneous")
    g_misc.add_argument(
        "--ignore-attr",
        metavar="NAME",
        dest="ignore_attr",
        help=(
            "Attribute that opts a tag out of inlining (default: x-bundler-ignore, "
            "also HTMLINLINER_IGNORE_ATTR). It is stripped from the output."
        ),
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p
