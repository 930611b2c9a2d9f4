from qudtlib_constgen.sparql.client import execute_query, run_query
from qudtlib_constgen.sparql.store import load_turtle, new_store


def _units_graph(bundle):
    graph = new_store()
    assert load_turtle(graph, bundle, "qudtlib/qudt-units.ttl").ok
    return graph


def test_units_query_orders_by_const_name(bundle):
    result = run_query(_units_graph(bundle), bundle, "query/units.rq")
    assert result.ok, result.error
    names = [str(row.constName) for row in result.data]
    assert names == sorted(names)
    assert "M__PER__SEC" in names
    assert "KiloGM" in names


def test_units_query_skips_deprecated(bundle):
    result = run_query(_units_graph(bundle), bundle, "query/units.rq")
    assert "MicroIN" not in {str(row.localName) for row in result.data}


def test_units_query_prefers_english_label(bundle):
    result = run_query(_units_graph(bundle), bundle, "query/units.rq")
    labels = {str(row.localName): row.label for row in result.data}
    assert str(labels["M"]) == "Metre"
    assert labels["UNITLESS"] is None


def test_rows_keep_engine_order(bundle):
    query = (
        'SELECT ?constName ?localName WHERE { '
        'VALUES (?constName ?localName) { ("B" "b") ("A" "a") ("C" "c") } }'
    )
    result = execute_query(new_store(), query, "inline.rq")
    assert result.ok, result.error
    assert [str(row.constName) for row in result.data] == ["B", "A", "C"]


def test_missing_query_file_fails(bundle):
    result = run_query(new_store(), bundle, "query/absent.rq")
    assert not result.ok
    assert result.error == "Resource not found: query/absent.rq"


def test_sparql_syntax_error_fails():
    result = execute_query(new_store(), "SELECT ?x WHERE { ?x ", "broken.rq")
    assert not result.ok
    assert result.error.startswith("SPARQL error in broken.rq")


def test_non_select_query_fails():
    result = execute_query(new_store(), "ASK { ?s ?p ?o }", "ask.rq")
    assert not result.ok
    assert "expected SELECT" in result.error


def test_query_must_project_required_variables():
    result = execute_query(new_store(), 'SELECT ?localName WHERE { VALUES ?localName { "M" } }', "q.rq")
    assert not result.ok
    assert "constName" in result.error
