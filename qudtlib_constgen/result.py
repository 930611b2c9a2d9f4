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

"""Step outcomes for the generator: Ok[T] or Fail.

Loading a resource, parsing Turtle, running a query, collecting rows and
rendering a file each return Result[T]. rdflib, Jinja2, PyYAML and OS
errors are turned into a Fail at that step, with the library message kept
intact, and the first Fail ends the run with exit code 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message and optional context."""

    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)

    @classmethod
    def from_exc(cls, prefix: str, exc: BaseException, context: Any = None) -> Fail:
        """Wrap a library exception, keeping its diagnostic verbatim."""
        return cls(error=f"{prefix}: {type(exc).__name__}: {exc}", context=context)


Result = Ok[T] | Fail
