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

"""Row collector — turns SPARQL result rows into constant descriptors."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rdflib.query import ResultRow

from qudtlib_constgen.logger import get_logger
from qudtlib_constgen.result import Fail, Ok, Result

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Constant:
    """One generated constant referencing an RDF entity."""

    const_name: str
    local_name: str
    label: str


def _text(bound: dict, name: str) -> str:
    value = bound.get(name)
    return "" if value is None else str(value)


def collect_constants(rows: Iterable[ResultRow], type_plural: str) -> Result[list[Constant]]:
    """Build descriptors in row order.

    ``label`` falls back to ``localName`` when unbound. A row without
    ``constName`` or ``localName``, or a repeated ``constName``, is fatal.
    """
    constants: list[Constant] = []
    seen: dict[str, int] = {}

    for index, row in enumerate(rows, start=1):
        bound = row.asdict()
        const_name = _text(bound, "constName")
        local_name = _text(bound, "localName")
        if not const_name:
            return Fail(error=f"{type_plural} row {index}: missing constName", context=bound)
        if not local_name:
            return Fail(error=f"{type_plural} row {index}: missing localName", context=bound)
        if const_name in seen:
            return Fail(
                error=f"{type_plural} row {index}: duplicate constName '{const_name}' "
                f"(first seen in row {seen[const_name]})",
                context=bound,
            )
        seen[const_name] = index

        label = _text(bound, "label") if "label" in bound else local_name
        constants.append(Constant(const_name=const_name, local_name=local_name, label=label))

    log.info("Collected %d %s", len(constants), type_plural)
    return Ok(data=constants)
