import json
import logging

import pytest

from ease.options import DEFAULT_OPTIONS, load_options, save_options


def test_missing_file_gives_defaults(options_file):
    assert load_options(options_file) == DEFAULT_OPTIONS


def test_loaded_values_override_defaults(options_file):
    options_file.write_text(json.dumps({
        "columns": "3",
        "curve_color": [1, 2, 3, 4],
        "unknown": True,
    }), encoding="utf-8")
    opts = load_options(options_file)
    assert opts["columns"] == 3
    assert opts["curve_color"] == [1, 2, 3]
    assert "unknown" not in opts
    assert opts["samples"] == DEFAULT_OPTIONS["samples"]


def test_malformed_file_logs_warning(options_file, caplog):
    options_file.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="ease.options"):
        opts = load_options(options_file)
    assert opts == DEFAULT_OPTIONS
    assert "Failed to load options" in caplog.text


def test_bad_value_logs_warning(options_file, caplog):
    options_file.write_text(json.dumps({"columns": "many"}), encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="ease.options"):
        opts = load_options(options_file)
    assert opts["columns"] == DEFAULT_OPTIONS["columns"]
    assert "Failed to load options" in caplog.text


@pytest.mark.parametrize("color", [[1], [300, 0, 0], [0, -1, 0], "red"])
def test_malformed_colour_logs_warning(options_file, caplog, color):
    options_file.write_text(json.dumps({"curve_color": color, "columns": 2}), encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="ease.options"):
        opts = load_options(options_file)
    assert opts == DEFAULT_OPTIONS
    assert "Failed to load options" in caplog.text


def test_non_object_file_logs_warning(options_file, caplog):
    options_file.write_text("[1, 2]", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="ease.options"):
        assert load_options(options_file) == DEFAULT_OPTIONS
    assert "expected a JSON object" in caplog.text


def test_save_then_load(tmp_path):
    path = tmp_path / "sub" / "options.json"
    opts = dict(DEFAULT_OPTIONS, columns=2, samples=50, extra="dropped")
    save_options(opts, path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert "extra" not in data
    assert load_options(path)["columns"] == 2
    assert load_options(path)["samples"] == 50
