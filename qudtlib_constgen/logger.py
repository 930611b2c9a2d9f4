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

"""Logger setup and per-category generation summary.

Counts constants written per category so the driver can print a
summary block at the end of a run, whether it succeeded or not.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class CategoryCounter:
    """Constants written (or failure) for one category."""

    name: str
    constants: int = 0
    failed: bool = False


@dataclass
class GenerationSummary:
    """Accumulates counters across all categories of one run."""

    categories: dict[str, CategoryCounter] = field(default_factory=dict)

    def counter(self, name: str) -> CategoryCounter:
        if name not in self.categories:
            self.categories[name] = CategoryCounter(name=name)
        return self.categories[name]

    @property
    def total(self) -> int:
        return sum(c.constants for c in self.categories.values())

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Generation Summary", "=" * 40]
        for cat in self.categories.values():
            status = "FAILED" if cat.failed else f"{cat.constants} constants"
            lines.append(f"{cat.name}: {status}")
        lines.append(f"total: {self.total} constants")
        lines.append("=" * 40)
        return "\n".join(lines)
