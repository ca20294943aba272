#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates / refreshes the sample sites used by the
htmlinliner test-suite.

Idempotent and pure Python.
"""
from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()
FIX = ROOT  # alias used by the tests


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str, *, dedent: bool = True) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = textwrap.dedent(body).lstrip() if dedent else body
    path.write_text(text, encoding="utf-8")


# ───────────────────── site: every tag kind ─────────────────────
def _populate_site() -> None:
    site = ROOT / "site"

    _write(site / "index.html", """
        <html>
        <head>
        <title>Fixture</title>
        <link rel="stylesheet" href="css/base.css">
        <link rel="stylesheet" href="https://cdn.example.com/cdn.css">
        <link rel="stylesheet" href="css/kept.css" x-bundler-ignore>
        <link rel="icon" href="favicon.css">
        <link rel="stylesheet" href="css/theme.css">
        </head>
        <body>
        <div id="top"><script src="js/app.js" type="module" data-x="1"></script></div>
        <script src="https://cdn.example.com/lib.js"></script>
        <script src="js/vendor.js" x-bundler-ignore></script>
        <script src="js/inline.js">console.log("already inline");</script>
        <script>console.log("no src");</script>
        <p>after</p>
        <script src="./js/../js/tail.js" defer></script>
        </body>
        </html>
    """)

    _write(site / "css/base.css", "body{color:red}", dedent=False)
    _write(site / "css/theme.css", "h1{font-weight:bold}", dedent=False)
    _write(site / "css/kept.css", "p{margin:0}", dedent=False)
    _write(site / "js/app.js", "console.log(1)", dedent=False)
    _write(site / "js/tail.js", "window.done = true;", dedent=False)
    _write(site / "js/vendor.js", "window.vendor = 1;", dedent=False)


# ───────────────────── site: broken reference ─────────────────────
def _populate_broken() -> None:
    broken = ROOT / "broken"

    _write(broken / "index.html", """
        <html>
        <head><link rel="stylesheet" href="missing.css"></head>
        <body><script src="present.js"></script></body>
        </html>
    """)
    _write(broken / "present.js", "console.log('present')", dedent=False)


def main() -> None:
    if ROOT.exists():
        shutil.rmtree(ROOT)
    ROOT.mkdir(parents=True)
    _populate_site()
    _populate_broken()


if __name__ == "__main__":
    main()
