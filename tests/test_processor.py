from qudtlib_constgen.sparql.client import execute_query
from qudtlib_constgen.sparql.processor import Constant, collect_constants
from qudtlib_constgen.sparql.store import new_store


def _rows(values: str):
    query = (
        "SELECT ?constName ?localName ?label WHERE { "
        "VALUES (?constName ?localName ?label) { " + values + " } }"
    )
    result = execute_query(new_store(), query, "inline.rq")
    assert result.ok, result.error
    return result.data


def test_collects_rows_in_order():
    rows = _rows('("METRE" "M" "Metre") ("GRAM" "GM" "Gram")')
    result = collect_constants(rows, "Units")
    assert result.ok, result.error
    assert result.data == [
        Constant(const_name="METRE", local_name="M", label="Metre"),
        Constant(const_name="GRAM", local_name="GM", label="Gram"),
    ]


def test_unbound_label_falls_back_to_local_name():
    result = collect_constants(_rows('("KILO" "Kilo" UNDEF)'), "Prefixes")
    assert result.ok
    assert result.data == [Constant(const_name="KILO", local_name="Kilo", label="Kilo")]


def test_missing_const_name_is_fatal():
    result = collect_constants(_rows('(UNDEF "M" "Metre")'), "Units")
    assert not result.ok
    assert result.error == "Units row 1: missing constName"


def test_empty_local_name_is_fatal():
    result = collect_constants(_rows('("METRE" "" "Metre")'), "Units")
    assert not result.ok
    assert "missing localName" in result.error


def test_duplicate_const_name_is_fatal():
    result = collect_constants(_rows('("M" "M" UNDEF) ("K" "K" UNDEF) ("M" "M2" UNDEF)'), "Units")
    assert not result.ok
    assert "row 3: duplicate constName 'M'" in result.error
    assert "row 1" in result.error


def test_no_rows_yields_no_constants():
    result = collect_constants([], "QuantityKinds")
    assert result.ok
    assert result.data == []
