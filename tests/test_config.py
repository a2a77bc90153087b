"""Tests for JSON config loading, saving and settings snapshots."""
import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cycleautocomplete.config import Config, CompletionSettings, SortOrder, DEFAULT_CONFIG


def test_defaults_when_file_missing(tmp_path):
    config = Config(tmp_path / "missing" / "config.json")
    assert config.sort_order is SortOrder.BY_DISTANCE
    assert config.candidate_limit == 12
    assert config.distance_limit == 0
    assert config.skip_fuzzy_if_exact_found is False
    assert config.strip_trailing_word_on_accept is False
    assert config.snapshot() == CompletionSettings()


def test_stored_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"candidate_limit": 30, "sort_order": "alphabetical"}))
    config = Config(path)
    settings = config.snapshot()
    assert settings.candidate_limit == 30
    assert settings.sort_order is SortOrder.ALPHABETICAL
    assert settings.distance_limit == 0


def test_corrupt_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(path)
    assert config.snapshot() == CompletionSettings()

    path.write_text("[1, 2, 3]")
    assert Config(path).snapshot() == CompletionSettings()


def test_set_persists(tmp_path):
    path = tmp_path / "sub" / "config.json"
    config = Config(path)
    config.set("distance_limit", 4)
    config.update({"skip_fuzzy_if_exact_found": True, "word_chars": "-"})
    assert path.exists()

    reloaded = Config(path)
    assert reloaded.distance_limit == 4
    assert reloaded.skip_fuzzy_if_exact_found is True
    assert reloaded.word_chars == "-"
    assert json.loads(path.read_text())["hotkey_cycle_forward"] == DEFAULT_CONFIG["hotkey_cycle_forward"]


def test_snapshot_clamps_and_falls_back():
    settings = CompletionSettings.from_mapping({
        "candidate_limit": 0,
        "distance_limit": -5,
        "sort_order": "sideways",
    })
    assert settings.candidate_limit == 1
    assert settings.distance_limit == 0
    assert settings.sort_order is SortOrder.BY_DISTANCE

    settings = CompletionSettings.from_mapping({"candidate_limit": 1000, "distance_limit": "7"})
    assert settings.candidate_limit == 100
    assert settings.distance_limit == 7

    settings = CompletionSettings.from_mapping({"candidate_limit": "many", "distance_limit": True})
    assert settings.candidate_limit == DEFAULT_CONFIG["candidate_limit"]
    assert settings.distance_limit == DEFAULT_CONFIG["distance_limit"]


def test_boolean_values_are_validated():
    settings = CompletionSettings.from_mapping({
        "skip_fuzzy_if_exact_found": "false",
        "strip_trailing_word_on_accept": "True",
    })
    assert settings.skip_fuzzy_if_exact_found is False
    assert settings.strip_trailing_word_on_accept is True

    settings = CompletionSettings.from_mapping({
        "skip_fuzzy_if_exact_found": 1,
        "strip_trailing_word_on_accept": "maybe",
    })
    assert settings.skip_fuzzy_if_exact_found is True
    assert settings.strip_trailing_word_on_accept is DEFAULT_CONFIG["strip_trailing_word_on_accept"]


def test_boolean_properties_read_strings(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"debug_logging": "false", "skip_fuzzy_if_exact_found": "true"}))
    config = Config(path)
    assert config.debug_logging is False
    assert config.skip_fuzzy_if_exact_found is True


def test_numeric_sort_order():
    assert CompletionSettings.from_mapping({"sort_order": 0}).sort_order is SortOrder.ALPHABETICAL
    assert CompletionSettings.from_mapping({"sort_order": 1}).sort_order is SortOrder.BY_DISTANCE
    assert CompletionSettings.from_mapping({"sort_order": "Alphabetical"}).sort_order is SortOrder.ALPHABETICAL


def test_snapshot_is_immutable():
    settings = CompletionSettings()
    try:
        settings.candidate_limit = 5
    except AttributeError:
        pass
    else:
        raise AssertionError("CompletionSettings should be frozen")


if __name__ == '__main__':
    import pytest
    sys.exit(pytest.main([__file__]))
