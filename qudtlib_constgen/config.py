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

"""Loads the bundled generator.yaml into typed dataclasses.

The YAML holds the category table: which query runs against which
dataset, and the type labels each rendered file is bound to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from qudtlib_constgen.bundle import ResourceBundle
from qudtlib_constgen.result import Fail, Ok, Result

CONFIG_FILE = "generator.yaml"


# ── Category ───────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Category:
    """One generated file: query + dataset + type labels."""
    type: str
    type_plural: str
    query: str
    data: str

    @property
    def value_factory(self) -> str:
        """Factory method name, e.g. ``unitFromLocalname`` for ``Unit``."""
        return self.type[:1].lower() + self.type[1:] + "FromLocalname"


# ── Top-level ──────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    destination_package: str
    template: str
    categories: list[Category]


# ── Loader ─────────────────────────────────────────────────────

def _build_categories(raw: list[dict[str, Any]]) -> list[Category]:
    return [
        Category(
            type=c["type"],
            type_plural=c["type_plural"],
            query=c["query"],
            data=c["data"],
        )
        for c in raw
    ]


def load_config(bundle: ResourceBundle) -> Result[GeneratorConfig]:
    """Load generator.yaml from the bundle. No validation beyond structure."""
    text = bundle.read_text(CONFIG_FILE)
    if not text.ok:
        return text  # type: ignore[return-value]

    try:
        raw: dict[str, Any] = yaml.safe_load(text.data)
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=CONFIG_FILE)

    try:
        config = GeneratorConfig(
            destination_package=raw["destination_package"],
            template=raw["template"],
            categories=_build_categories(raw["categories"]),
        )
    except (KeyError, TypeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=CONFIG_FILE)

    plurals = [c.type_plural for c in config.categories]
    if len(set(plurals)) != len(plurals):
        return Fail(error="Config structure error: duplicate type_plural", context=plurals)

    return Ok(data=config)
