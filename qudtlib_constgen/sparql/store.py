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

"""Turtle loader — fills a fresh in-memory rdflib Graph per category.

Graphs are never reused between categories; the caller closes each one
when its render is finished.
"""

from __future__ import annotations

from rdflib import Graph

from qudtlib_constgen.bundle import ResourceBundle
from qudtlib_constgen.logger import get_logger
from qudtlib_constgen.result import Fail, Ok, Result

log = get_logger(__name__)


def new_store() -> Graph:
    """Empty in-memory triple store."""
    return Graph(store="Memory")


def load_turtle(graph: Graph, bundle: ResourceBundle, data_path: str) -> Result[int]:
    """Parse a bundled Turtle file into ``graph``; returns the triple count."""
    text = bundle.read_text(data_path)
    if not text.ok:
        return text  # type: ignore[return-value]

    try:
        graph.parse(data=text.data, format="turtle")
    except Exception as exc:  # rdflib raises parser-specific types
        return Fail.from_exc(f"Turtle parse error in {data_path}", exc)

    log.info("Loaded %d triples from %s", len(graph), data_path)
    return Ok(data=len(graph))
