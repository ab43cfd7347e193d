"""Tests for render_engine.utils.config."""
import json

from render_engine.utils import Config
from render_engine.utils.config import DEFAULT_CONFIG


def test_defaults_when_file_missing(tmp_path) -> None:
    config = Config(str(tmp_path / "missing.json"))
    assert config.get_all() == DEFAULT_CONFIG
    assert config.get("viewport.width") == 800
    assert config.get("viewport.height") == 600
    assert config.get("parser.html") == "html.parser"


def test_file_values_are_merged_over_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"viewport": {"width": 320}}))

    config = Config(str(path))

    assert config.get("viewport.width") == 320
    assert config.get("viewport.height") == 600
    assert config.get("output.path") == "output.png"


def test_get_missing_key_returns_default(tmp_path) -> None:
    config = Config(str(tmp_path / "missing.json"))
    assert config.get("viewport.depth") is None
    assert config.get("nothing.here", 7) == 7
    assert config.get("viewport.width.px", "x") == "x"


def test_set_creates_nested_keys(tmp_path) -> None:
    config = Config(str(tmp_path / "missing.json"))
    config.set("output.format.name", "png")
    config.set("viewport.width", 1024)
    assert config.get("output.format.name") == "png"
    assert config.get("viewport.width") == 1024


def test_save_and_reload(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))
    config.set("viewport.height", 240)
    config.save()

    reloaded = Config(str(path))

    assert reloaded.get("viewport.height") == 240
    assert json.loads(path.read_text())["viewport"]["height"] == 240


def test_invalid_json_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert Config(str(path)).get_all() == DEFAULT_CONFIG


def test_non_object_json_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    assert Config(str(path)).get_all() == DEFAULT_CONFIG


def test_get_all_returns_a_copy(tmp_path) -> None:
    config = Config(str(tmp_path / "missing.json"))
    config.get_all()["viewport"]["width"] = 1
    assert config.get("viewport.width") == 800
