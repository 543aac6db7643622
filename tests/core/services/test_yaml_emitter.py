import yaml

from validation_builder.core.models import ColumnConfig, ValidationRule
from validation_builder.core.services.yaml_emitter import YAML_HEADER, generate_yaml_config


def test_empty_config_yields_header_and_empty_validations():
    text = generate_yaml_config([])

    assert text == YAML_HEADER
    assert text.startswith("# Validation Configuration\n")
    assert text.rstrip().endswith("validations:")
    assert yaml.safe_load(text) == {"validations": None}


def test_none_behaves_like_empty():
    assert generate_yaml_config(None) == YAML_HEADER


def test_integer_bounds_without_optional_lines():
    configs = [ColumnConfig("zone_name", ValidationRule(type="integer", min=0, max=10))]

    text = generate_yaml_config(configs)

    assert "  zone_name:\n    type: integer\n    min: 0\n    max: 10\n" in text
    assert "regex" not in text
    assert "allowed_values" not in text
    assert yaml.safe_load(text) == {"validations": {"zone_name": {"type": "integer", "min": 0, "max": 10}}}


def test_allowed_values_as_compact_list_literal():
    configs = [ColumnConfig("location", ValidationRule(allowed_values=("a", "b")))]

    text = generate_yaml_config(configs)

    assert '    allowed_values: ["a","b"]\n' in text
    assert yaml.safe_load(text)["validations"]["location"]["allowed_values"] == ["a", "b"]


def test_empty_allowed_values_list_is_still_emitted():
    text = generate_yaml_config([ColumnConfig("location", ValidationRule(allowed_values=()))])
    assert "    allowed_values: []\n" in text


def test_regex_is_double_quoted_and_empty_regex_skipped():
    text = generate_yaml_config([
        ColumnConfig("store_id", ValidationRule(regex="^[a-zA-Z0-9_-]+$")),
        ColumnConfig("sync_dir", ValidationRule(regex="")),
    ])

    assert '    regex: "^[a-zA-Z0-9_-]+$"\n' in text
    assert text.count("regex:") == 1


def test_type_always_present_and_defaults_to_string():
    text = generate_yaml_config([ColumnConfig("sync_repo", ValidationRule(type=""))])
    assert "  sync_repo:\n    type: string\n" in text


def test_preserves_given_order_and_formats_floats():
    configs = [
        ColumnConfig("zone_name", ValidationRule(type="float", min=0.5, max=10.0)),
        ColumnConfig("cluster_name", ValidationRule(type="boolean")),
    ]

    text = generate_yaml_config(configs)

    assert text.index("zone_name:") < text.index("cluster_name:")
    assert "    min: 0.5\n" in text
    assert "    max: 10\n" in text
    assert "    type: boolean\n" in text
