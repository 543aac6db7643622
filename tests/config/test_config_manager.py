import logging

import pytest

from validation_builder.config import ConfigManager


def test_packaged_defaults_are_loaded(tmp_path):
    manager = ConfigManager(user_config_dir=tmp_path, seed_user_configs=False)

    universe = manager.get_column_universe()
    assert len(universe) == 24
    assert universe[0] == "store_id"
    assert universe[-1] == "recreate_on_delete"
    assert manager.get_output_config()["default_filename"] == "validation_config.yaml"
    assert manager.get_logging_config()["version"] == 1


def test_is_a_singleton(tmp_path):
    first = ConfigManager(user_config_dir=tmp_path, seed_user_configs=False)
    assert ConfigManager() is first


def test_seeds_user_directory(tmp_path):
    ConfigManager(user_config_dir=tmp_path)

    assert (tmp_path / "columns.yml").exists()
    assert (tmp_path / "output.yml").exists()
    assert (tmp_path / "logging.yml").exists()


def test_user_override_replaces_sections(tmp_path):
    (tmp_path / "columns.yml").write_text(
        "columns:\n  - alpha\n  - beta\n  - alpha\n  - ''\n", encoding="utf-8"
    )

    manager = ConfigManager(user_config_dir=tmp_path, seed_user_configs=False)

    assert manager.get_column_universe() == ["alpha", "beta"]


def test_invalid_user_file_falls_back_to_packaged(tmp_path, caplog):
    (tmp_path / "columns.yml").write_text("columns: [unclosed\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        manager = ConfigManager(user_config_dir=tmp_path, seed_user_configs=False)

    assert manager.get_column_universe()[0] == "store_id"
    assert "Could not parse user config" in caplog.text


@pytest.mark.parametrize("body", ["columns: 5\n", "columns: store_id\n", "columns:\n  zone: 1\n", "columns:\n  - [a, b]\n"])
def test_malformed_columns_override_keeps_packaged_list(tmp_path, caplog, body):
    (tmp_path / "columns.yml").write_text(body, encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        manager = ConfigManager(user_config_dir=tmp_path, seed_user_configs=False)

    universe = manager.get_column_universe()
    assert len(universe) == 24
    assert universe[0] == "store_id"
    assert "must be a list of column names" in caplog.text
