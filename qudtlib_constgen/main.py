# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""
QUDTLib constants generator

Loads the bundled QUDT Turtle datasets, runs one SPARQL SELECT per
category (units, quantity kinds, prefixes) and renders a Java source
file of named constants for each into package io.github.qudtlib.model.

Pipeline: Turtle -> SPARQL -> Constants -> Jinja2

Usage: qudtlib-constgen <output-dir>
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from qudtlib_constgen.bundle import bundled
from qudtlib_constgen.config import load_config
from qudtlib_constgen.logger import get_logger
from qudtlib_constgen.pipeline import run_pipeline

log = get_logger("main")

PROG = "qudtlib-constgen"
USAGE = f"\n\n\tusage: {PROG} <output-dir>\n\n"


class UsageError(Exception):
    """Command line rejected by the argument parser."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Generate Units, QuantityKinds and Prefixes constants from QUDT data",
    )
    # Counted by hand so a wrong count exits 1 with the usage banner.
    parser.add_argument(
        "output_dir",
        nargs="*",
        metavar="output-dir",
        help="Directory under which io/github/qudtlib/model/ is written (put -- before a name starting with -)",
    )
    return parser


def _fail(message: str) -> int:
    log.error(message)
    sys.stderr.write(USAGE)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = _parser().parse_args(argv)
    except UsageError as exc:
        return _fail(str(exc))

    if not args.output_dir:
        return _fail("missing argument")
    if len(args.output_dir) > 1:
        return _fail("too many arguments")

    output_dir = Path(args.output_dir[0]).resolve()
    log.info("Output: %s", output_dir)

    bundle = bundled()
    cfg_result = load_config(bundle)
    if not cfg_result.ok:
        return _fail(cfg_result.error)

    result = run_pipeline(cfg_result.data, output_dir=output_dir, bundle=bundle)
    if not result.ok:
        return _fail(f"Generation failed: {result.error}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
