from qudtlib_constgen.bundle import bundled
from qudtlib_constgen.config import Category, load_config


def test_bundled_config_lists_three_categories_in_order():
    result = load_config(bundled())
    assert result.ok, result.error
    cfg = result.data

    assert cfg.destination_package == "io.github.qudtlib.model"
    assert cfg.template == "template/constants.java.j2"
    assert [(c.type, c.type_plural, c.query, c.data) for c in cfg.categories] == [
        ("Unit", "Units", "query/units.rq", "qudtlib/qudt-units.ttl"),
        ("QuantityKind", "QuantityKinds", "query/quantitykinds.rq", "qudtlib/qudt-quantitykinds.ttl"),
        ("Prefix", "Prefixes", "query/prefixes.rq", "qudtlib/qudt-prefixes.ttl"),
    ]


def test_value_factory_lowercases_first_letter(config):
    factories = [c.value_factory for c in config.categories]
    assert factories == ["unitFromLocalname", "quantityKindFromLocalname", "prefixFromLocalname"]


def test_value_factory_for_single_letter_type():
    assert Category(type="X", type_plural="Xs", query="q", data="d").value_factory == "xFromLocalname"


def test_missing_config_file_fails(bundle, bundle_dir):
    (bundle_dir / "generator.yaml").unlink()
    result = load_config(bundle)
    assert not result.ok
    assert "Resource not found: generator.yaml" in result.error


def test_invalid_yaml_fails(bundle, write_resource):
    write_resource("generator.yaml", "categories: [unclosed\n")
    result = load_config(bundle)
    assert not result.ok
    assert result.error.startswith("YAML parse error")


def test_missing_key_is_structure_error(bundle, write_resource):
    write_resource("generator.yaml", "template: template/constants.java.j2\ncategories: []\n")
    result = load_config(bundle)
    assert not result.ok
    assert "Config structure error" in result.error
    assert "destination_package" in result.error


def test_empty_yaml_is_structure_error(bundle, write_resource):
    write_resource("generator.yaml", "")
    result = load_config(bundle)
    assert not result.ok
    assert "Config structure error" in result.error


def test_duplicate_type_plural_rejected(bundle, write_resource):
    write_resource(
        "generator.yaml",
        "destination_package: a.b\n"
        "template: t.java.j2\n"
        "categories:\n"
        "  - {type: Unit, type_plural: Units, query: q1.rq, data: d1.ttl}\n"
        "  - {type: Unit, type_plural: Units, query: q2.rq, data: d2.ttl}\n",
    )
    result = load_config(bundle)
    assert not result.ok
    assert "duplicate type_plural" in result.error
