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

"""Generation pipeline — one pass per category in the config table.

Per category:
  1. Store: fresh in-memory graph, filled from the category's Turtle file
  2. Query: run the category's SELECT against that graph
  3. Collect: rows → Constant descriptors
  4. Render: shared template → <output>/<package path>/<TypePlural>.<ext>

The graph is closed on every exit path. The first failure stops the run.
"""

from __future__ import annotations

from contextlib import closing
from pathlib import Path

from jinja2 import Environment

from qudtlib_constgen.bundle import ResourceBundle
from qudtlib_constgen.config import Category, GeneratorConfig
from qudtlib_constgen.logger import GenerationSummary, get_logger
from qudtlib_constgen.renderer import make_environment, render_category
from qudtlib_constgen.result import Ok, Result
from qudtlib_constgen.sparql.client import run_query
from qudtlib_constgen.sparql.processor import Constant, collect_constants
from qudtlib_constgen.sparql.store import load_turtle, new_store

log = get_logger(__name__)


def extract_constants(bundle: ResourceBundle, category: Category) -> Result[list[Constant]]:
    """Load the category's dataset into a fresh graph and collect its constants."""
    with closing(new_store()) as graph:
        loaded = load_turtle(graph, bundle, category.data)
        if not loaded.ok:
            return loaded  # type: ignore[return-value]

        rows = run_query(graph, bundle, category.query)
        if not rows.ok:
            return rows  # type: ignore[return-value]

        return collect_constants(rows.data, category.type_plural)


def _run_category(
    bundle: ResourceBundle,
    env: Environment,
    category: Category,
    config: GeneratorConfig,
    output_dir: Path,
    summary: GenerationSummary,
) -> Result[Path]:
    counter = summary.counter(category.type_plural)
    log.info("── Category: %s ──", category.type_plural)

    extracted = extract_constants(bundle, category)
    if not extracted.ok:
        counter.failed = True
        return extracted  # type: ignore[return-value]

    rendered = render_category(env, extracted.data, category, config, output_dir)
    if not rendered.ok:
        counter.failed = True
        return rendered

    counter.constants = len(extracted.data)
    return rendered


def run_pipeline(
    config: GeneratorConfig,
    output_dir: Path,
    bundle: ResourceBundle,
) -> Result[dict[str, Path]]:
    """Generate every category in config order.

    Args:
        config: Category table loaded from generator.yaml.
        output_dir: Root under which the package directory is created.
        bundle: Resource tree holding data, queries and the template.
    """
    summary = GenerationSummary()
    env = make_environment(bundle)
    written: dict[str, Path] = {}

    try:
        for category in config.categories:
            result = _run_category(bundle, env, category, config, output_dir, summary)
            if not result.ok:
                log.error("%s failed: %s", category.type_plural, result.error)
                return result  # type: ignore[return-value]
            written[category.type_plural] = result.data
    finally:
        log.info(summary.report())

    return Ok(data=written)
