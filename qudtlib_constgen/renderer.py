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

"""Template renderer — writes one constants source file per category.

The Jinja2 template is shared by all categories. Its file name declares
the output language: ``constants.java.j2`` renders ``<TypePlural>.java``.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError, TemplateNotFound

from qudtlib_constgen.bundle import ResourceBundle
from qudtlib_constgen.config import Category, GeneratorConfig
from qudtlib_constgen.logger import get_logger
from qudtlib_constgen.result import Fail, Ok, Result
from qudtlib_constgen.sparql.processor import Constant

log = get_logger(__name__)

ENCODING = "utf-8"


class BundleLoader(BaseLoader):
    """Jinja2 loader reading templates from a ResourceBundle."""

    def __init__(self, bundle: ResourceBundle) -> None:
        self.bundle = bundle

    def get_source(self, environment: Environment, template: str) -> tuple[str, str | None, Any]:
        if not self.bundle.locate(template).ok:
            raise TemplateNotFound(template)
        text = self.bundle.read_text(template)
        if not text.ok:
            raise TemplateError(text.error)
        return text.data, None, lambda: True


def java_string(value: str) -> str:
    """Quote ``value`` as a Java string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
    return f'"{escaped}"'


def javadoc(value: str) -> str:
    """Make ``value`` safe inside a /** ... */ comment."""
    return " ".join(value.split()).replace("*/", "*&#47;")


def make_environment(bundle: ResourceBundle) -> Environment:
    env = Environment(
        loader=BundleLoader(bundle),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["java_string"] = java_string
    env.filters["javadoc"] = javadoc
    return env


def output_extension(template_name: str) -> str:
    """``template/constants.java.j2`` -> ``.java``."""
    stem = Path(template_name).name
    if stem.endswith(".j2"):
        stem = stem[: -len(".j2")]
    return Path(stem).suffix


def template_variables(
    constants: list[Constant], category: Category, config: GeneratorConfig,
) -> dict[str, Any]:
    return {
        "constants": constants,
        "type": category.type,
        "typePlural": category.type_plural,
        "package": config.destination_package,
        "valueFactory": category.value_factory,
    }


def ensure_package_dir(output_dir: Path, config: GeneratorConfig) -> Result[Path]:
    """Create ``<output_dir>/<package as path>`` if it is missing."""
    package_dir = output_dir.joinpath(*config.destination_package.split("."))
    try:
        package_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return Fail.from_exc(f"Could not create output dir {package_dir.absolute()}", exc)
    return Ok(data=package_dir)


def _umask() -> int:
    current = os.umask(0)
    os.umask(current)
    return current


def _write_atomic(target: Path, content: str) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=ENCODING, newline="\n") as fh:
            fh.write(content)
        # mkstemp creates 0600; match a plain open() under the current umask
        os.chmod(tmp_name, 0o666 & ~_umask())
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def render_category(
    env: Environment,
    constants: list[Constant],
    category: Category,
    config: GeneratorConfig,
    output_dir: Path,
) -> Result[Path]:
    """Render the shared template for one category and write it to disk.

    The file is rendered fully in memory before anything touches the
    output tree, then written through a temp file and renamed.
    """
    filename = category.type_plural + output_extension(config.template)
    log.info("Generating %s", filename)

    try:
        template = env.get_template(config.template)
        content = template.render(template_variables(constants, category, config))
    except TemplateNotFound as exc:
        return Fail(error=f"Resource not found: {exc.name}", context=config.template)
    except TemplateError as exc:
        return Fail.from_exc("Template error", exc, context=config.template)

    dir_result = ensure_package_dir(output_dir, config)
    if not dir_result.ok:
        return dir_result
    package_dir: Path = dir_result.data
    log.info("output dir: %s", package_dir.absolute())

    target = package_dir / filename
    try:
        _write_atomic(target, content)
    except (OSError, UnicodeEncodeError) as exc:
        return Fail.from_exc(f"Write error: {target}", exc)

    log.info("Wrote %d %s to %s", len(constants), category.type_plural, target)
    return Ok(data=target)
