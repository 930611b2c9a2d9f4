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

"""Bundled resource tree — data files, queries, template, generator.yaml.

All inputs are resolved relative to one root directory. The CLI always
uses the tree shipped inside the package; the pipeline accepts another
root so a test can substitute its own datasets.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from qudtlib_constgen.result import Fail, Ok, Result


@dataclass(frozen=True, slots=True)
class ResourceBundle:
    root: Traversable

    def locate(self, relative: str) -> Result[Traversable]:
        """Resolve a slash-separated resource path, failing if it is absent."""
        node = self.root
        for part in relative.split("/"):
            node = node / part
        if not node.is_file():
            return Fail(error=f"Resource not found: {relative}", context=str(self.root))
        return Ok(data=node)

    def read_text(self, relative: str) -> Result[str]:
        located = self.locate(relative)
        if not located.ok:
            return located  # type: ignore[return-value]
        try:
            return Ok(data=located.data.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            return Fail.from_exc(f"Could not read resource {relative}", exc)


def bundled() -> ResourceBundle:
    """Resource tree shipped with the package."""
    return ResourceBundle(root=files("qudtlib_constgen") / "resources")


def from_directory(path: Path) -> ResourceBundle:
    return ResourceBundle(root=path)
