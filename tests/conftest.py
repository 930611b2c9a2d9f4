import shutil
from pathlib import Path

import pytest

import qudtlib_constgen
from qudtlib_constgen.bundle import from_directory
from qudtlib_constgen.config import load_config

BUNDLED_RESOURCES = Path(qudtlib_constgen.__file__).parent / "resources"

TTL_PREFIXES = """\
@prefix qudt: <http://qudt.org/schema/qudt/> .
@prefix unit: <http://qudt.org/vocab/unit/> .
@prefix quantitykind: <http://qudt.org/vocab/quantitykind/> .
@prefix prefix: <http://qudt.org/vocab/prefix/> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix ex: <http://example.org/> .
"""


@pytest.fixture()
def bundle_dir(tmp_path: Path) -> Path:
    """Writable copy of the bundled resource tree."""
    target = tmp_path / "resources"
    shutil.copytree(BUNDLED_RESOURCES, target)
    return target


@pytest.fixture()
def bundle(bundle_dir):
    return from_directory(bundle_dir)


@pytest.fixture()
def config(bundle):
    result = load_config(bundle)
    assert result.ok, result.error
    return result.data


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out" / "generated-sources"


@pytest.fixture()
def write_resource(bundle_dir):
    def _write(relative: str, text: str) -> Path:
        path = bundle_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
