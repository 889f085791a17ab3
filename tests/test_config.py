"""Tests for configuration file loading."""

import pytest

from depscan.config import DEFAULT_CONFIG, load_config
from depscan.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml(self, tmp_path):
        """Test loading a YAML file."""
        path = tmp_path / "lister.yaml"
        path.write_text("format: json\nsuffix: .dep\nverbose: true\n", encoding="utf-8")

        config = load_config(path)

        assert config["format"] == "json"
        assert config["suffix"] == ".dep"
        assert config["verbose"] is True
        assert config["ascii_style"] == DEFAULT_CONFIG["ascii_style"]

    def test_toml(self, tmp_path):
        """Test loading a TOML file, with dashed keys."""
        path = tmp_path / "lister.toml"
        path.write_text('format = "tree"\nascii-style = "ascii"\n', encoding="utf-8")

        config = load_config(path)

        assert config["format"] == "tree"
        assert config["ascii_style"] == "ascii"

    def test_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "lister.json"
        path.write_text('{"output": "deps.txt"}', encoding="utf-8")

        assert load_config(path)["output"] == "deps.txt"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        """Test that an empty file keeps every default."""
        path = tmp_path / "lister.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == DEFAULT_CONFIG

    def test_defaults_not_mutated(self, tmp_path):
        """Test that loading never alters the shared defaults."""
        path = tmp_path / "lister.yaml"
        path.write_text("format: json\n", encoding="utf-8")

        load_config(path)

        assert DEFAULT_CONFIG["format"] == "plain"

    @pytest.mark.parametrize(
        "content, reason",
        [
            ("colour: red\n", "unknown key"),
            ("verbose: maybe\n", "must be of type bool"),
            ("format: xml\n", "'format' must be one of"),
            ("ascii_style: fancy\n", "'ascii_style' must be one of"),
            ("suffix: ''\n", "must not be empty"),
            ("- a\n- b\n", "top level must be a mapping"),
            ("format: [unclosed\n", "cannot be parsed"),
        ],
    )
    def test_invalid(self, tmp_path, content, reason):
        """Test that invalid files raise ConfigError with a reason."""
        path = tmp_path / "lister.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError) as excinfo:
            load_config(path)

        assert reason in excinfo.value.reason
        assert excinfo.value.path == str(path)

    def test_missing_file(self, tmp_path):
        """Test that an unreadable file raises ConfigError."""
        with pytest.raises(ConfigError) as excinfo:
            load_config(tmp_path / "absent.yaml")

        assert "cannot be read" in excinfo.value.reason
