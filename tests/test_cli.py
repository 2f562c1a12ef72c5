import ast
import json
from unittest.mock import patch

import pygame
import pytest

from ease import EASING_FUNCTIONS
from ease.cli import main


def run_cli(args, options_file):
    return main(["--options", str(options_file)] + args)


def test_list(capsys, options_file):
    assert run_cli(["list"], options_file) == 0
    assert capsys.readouterr().out.split() == list(EASING_FUNCTIONS)


def test_map_defaults(capsys, options_file):
    assert run_cli(["map", "linear"], options_file) == 0
    assert capsys.readouterr().out.strip() == "[1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]"


def test_map_rounds(capsys, options_file):
    run_cli(["map", "ease_in_quad"], options_file)
    out = capsys.readouterr().out.strip()
    assert out == "[1.0, 1.111, 1.444, 2.0, 2.778, 3.778, 5.0, 6.444, 8.111, 10.0]"


def test_map_range_and_no_rounding(capsys, options_file):
    run_cli(["map", "ease_in_quad", "--start", "0", "--stop", "3", "--round", "-1"], options_file)
    values = ast.literal_eval(capsys.readouterr().out.strip())
    assert values == pytest.approx([0.0, 1 / 3, 4 / 3, 3.0])
    assert values[1] != round(values[1], 3)


def test_map_unknown_easing_exits(options_file):
    with pytest.raises(SystemExit) as exc:
        run_cli(["map", "bogus"], options_file)
    assert exc.value.code == 2


def test_preview_writes_image(capsys, tmp_path, options_file):
    out = tmp_path / "all.png"
    assert run_cli(["preview", "-o", str(out)], options_file) == 0
    assert out.exists()
    assert capsys.readouterr().out.strip() == str(out)


def test_preview_unknown_easing_exits(tmp_path, options_file):
    with pytest.raises(SystemExit) as exc:
        run_cli(["preview", "linear", "bogus", "-o", str(tmp_path / "x.png")], options_file)
    assert exc.value.code == 2
    assert not (tmp_path / "x.png").exists()


def test_preview_uses_and_saves_options(tmp_path, options_file):
    options_file.write_text(json.dumps({"cell_width": 50}), encoding="utf-8")
    out = tmp_path / "two.png"
    run_cli(["preview", "linear", "ease_in_quad", "--columns", "1", "--save-options",
             "-o", str(out)], options_file)
    img = pygame.image.load(str(out))
    assert img.get_width() == 50
    saved = json.loads(options_file.read_text(encoding="utf-8"))
    assert saved["columns"] == 1
    assert saved["cell_width"] == 50


@pytest.mark.parametrize("start,stop", [("3", "3"), ("5", "3")])
def test_map_empty_or_constant_range_exits(start, stop, options_file):
    with pytest.raises(SystemExit) as exc:
        run_cli(["map", "linear", "--start", start, "--stop", stop], options_file)
    assert exc.value.code == 2


def test_preview_zero_samples_exits(tmp_path, options_file):
    out = tmp_path / "x.png"
    with pytest.raises(SystemExit) as exc:
        run_cli(["preview", "linear", "--samples", "0", "-o", str(out)], options_file)
    assert exc.value.code == 2
    assert not out.exists()


def test_preview_zero_samples_from_options_exits(tmp_path, options_file):
    options_file.write_text(json.dumps({"samples": 0}), encoding="utf-8")
    out = tmp_path / "x.png"
    with pytest.raises(SystemExit) as exc:
        run_cli(["preview", "linear", "-o", str(out)], options_file)
    assert exc.value.code == 2
    assert not out.exists()


def test_preview_bad_colour_in_options_still_renders(tmp_path, options_file):
    options_file.write_text(json.dumps({"curve_color": [300, 0, 0]}), encoding="utf-8")
    out = tmp_path / "x.png"
    assert run_cli(["preview", "linear", "-o", str(out)], options_file) == 0
    assert out.exists()


def test_preview_save_failure_returns_error(tmp_path, options_file):
    with patch("pygame.image.save", side_effect=pygame.error("disk full")):
        assert run_cli(["preview", "linear", "-o", str(tmp_path / "x.png")], options_file) == 1


def test_log_file_records_preview(tmp_path, options_file):
    log = tmp_path / "ease.log"
    out = tmp_path / "log.png"
    run_cli(["--log-file", str(log), "preview", "linear", "-o", str(out)], options_file)
    text = log.read_text(encoding="utf-8")
    assert "ease.preview - INFO - Saved preview of 1 curves" in text
