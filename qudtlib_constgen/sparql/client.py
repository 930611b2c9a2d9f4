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

"""SPARQL query runner against an in-memory Graph.

Loads a SELECT query from the bundle and evaluates it. Rows come back in
the order the engine produces them: no sorting, deduplication or
filtering happens here.
"""

from __future__ import annotations

from rdflib import Graph
from rdflib.query import ResultRow

from qudtlib_constgen.bundle import ResourceBundle
from qudtlib_constgen.logger import get_logger
from qudtlib_constgen.result import Fail, Ok, Result

log = get_logger(__name__)

REQUIRED_VARS = ("constName", "localName")


def execute_query(graph: Graph, query: str, query_path: str) -> Result[list[ResultRow]]:
    """Evaluate a SELECT query and materialize its rows."""
    try:
        result = graph.query(query)
        if result.type != "SELECT":
            return Fail(error=f"SPARQL error in {query_path}: expected SELECT, got {result.type}")
        projected = {str(v) for v in result.vars or []}
        rows: list[ResultRow] = list(result)  # type: ignore[arg-type]
    except Exception as exc:  # parse and evaluation errors from rdflib/pyparsing
        return Fail.from_exc(f"SPARQL error in {query_path}", exc, context=query[:200])

    missing = [v for v in REQUIRED_VARS if v not in projected]
    if missing:
        return Fail(
            error=f"SPARQL error in {query_path}: query does not project {', '.join(missing)}",
            context=sorted(projected),
        )

    log.info("SPARQL %s returned %d rows", query_path, len(rows))
    return Ok(data=rows)


def run_query(graph: Graph, bundle: ResourceBundle, query_path: str) -> Result[list[ResultRow]]:
    """Load ``query_path`` from the bundle and run it against ``graph``."""
    query = bundle.read_text(query_path)
    if not query.ok:
        return query  # type: ignore[return-value]
    return execute_query(graph, query.data, query_path)
