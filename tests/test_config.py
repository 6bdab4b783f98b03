from pathlib import Path

from expando.core.errors import ConfigError
from expando.core.expand.config import DEFAULT_CONFIG, ExpandConfig, load_and_merge, load_config_file


def _write(tmp_path: Path, text: str) -> str:
    p = tmp_path / "expando.yaml"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_defaults_without_file():
    cfg = load_and_merge(None)
    assert cfg == DEFAULT_CONFIG
    assert cfg.trim_unexpanded is False
    assert cfg.format == "text"


def test_load_example_config(examples_dir: Path):
    cfg = load_and_merge(str(examples_dir / "config.yaml"))
    assert cfg == ExpandConfig(trim_unexpanded=True, encoding="utf-8", format="json")


def test_empty_file_yields_defaults(tmp_path: Path):
    assert load_config_file(_write(tmp_path, "")) == {}
    assert load_and_merge(_write(tmp_path, "")) == DEFAULT_CONFIG


def test_cli_overrides_win_over_file(tmp_path: Path):
    path = _write(tmp_path, "format: json\ntrim_unexpanded: true\n")
    cfg = load_and_merge(path, format="text", trim_unexpanded=None)
    assert cfg.format == "text"
    assert cfg.trim_unexpanded is True


def test_missing_file(tmp_path: Path):
    try:
        load_config_file(str(tmp_path / "nope.yaml"))
        assert False, "expected ConfigError"
    except ConfigError as e:
        assert e.code == "E_CONFIG_NOT_FOUND"


def test_unparseable_yaml(tmp_path: Path):
    try:
        load_config_file(_write(tmp_path, "format: [unclosed\n"))
        assert False, "expected ConfigError"
    except ConfigError as e:
        assert e.code == "E_CONFIG_PARSE"


def test_invalid_configs(tmp_path: Path):
    for text, path in [
        ("- a\n- b\n", None),
        ("colour: red\n", "colour"),
        ("trim_unexpanded: 'yes'\n", "trim_unexpanded"),
        ("encoding: ''\n", "encoding"),
        ("format: xml\n", "format"),
    ]:
        try:
            load_config_file(_write(tmp_path, text))
            assert False, f"expected ConfigError for {text!r}"
        except ConfigError as e:
            assert e.code == "E_CONFIG_INVALID"
            assert e.path == path


def test_error_string_has_location(tmp_path: Path):
    try:
        load_config_file(_write(tmp_path, "format: xml\n"))
        assert False, "expected ConfigError"
    except ConfigError as e:
        assert str(e).endswith(":format: E_CONFIG_INVALID: unknown format: xml (choose one of: text, json)")
