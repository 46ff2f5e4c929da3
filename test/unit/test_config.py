"""Tests for ViewerConfig."""

import pytest

from soltree.config import ACCEPTED_EXTENSIONS, ViewerConfig
from soltree.utils.exceptions import ConfigError


def test_defaults():
    config = ViewerConfig()
    assert config.section_marker == r"Traces:\s*"
    assert config.accepted_extensions == ACCEPTED_EXTENSIONS
    assert config.indent_width == 2


def test_depth_color_alternates_by_row():
    config = ViewerConfig(depth_colors=("a", "b"), depth_colors_alt=("x", "y"))
    assert config.depth_color(0, row_index=0) == "a"
    assert config.depth_color(1, row_index=2) == "b"
    assert config.depth_color(0, row_index=1) == "x"
    assert config.depth_color(3, row_index=3) == "y"


def test_arg_color_cycles():
    config = ViewerConfig(arg_colors=("p", "q"))
    assert [config.arg_color(i) for i in range(3)] == ["p", "q", "p"]


@pytest.mark.parametrize(
    "name, accepted",
    [("run.trace", True), ("RUN.LOG", True), ("out.txt", True), ("trace.json", False), ("trace", False)],
)
def test_is_accepted_file(name, accepted):
    assert ViewerConfig().is_accepted_file(name) is accepted


def test_invalid_values():
    with pytest.raises(ConfigError):
        ViewerConfig(indent_width=-1)
    with pytest.raises(ConfigError):
        ViewerConfig(arg_colors=())


class TestSectionMarker:
    def test_marker_is_compiled(self):
        config = ViewerConfig(section_marker=r"(?:Call )?[Tt]races:\s*")
        assert config.section_pattern.pattern == r"(?:Call )?[Tt]races:\s*"

    @pytest.mark.parametrize("marker", ["(", "[Traces", "Traces:\\"])
    def test_invalid_regex(self, marker):
        with pytest.raises(ConfigError) as excinfo:
            ViewerConfig(section_marker=marker)
        assert "Invalid section_marker" in excinfo.value.message

    def test_capturing_group_rejected(self):
        with pytest.raises(ConfigError) as excinfo:
            ViewerConfig(section_marker=r"(Traces):\s*")
        assert "capturing groups" in excinfo.value.message

    def test_empty_marker_rejected(self):
        with pytest.raises(ConfigError):
            ViewerConfig(section_marker="")

    def test_invalid_marker_from_file(self, tmp_path):
        path = tmp_path / "soltree.toml"
        path.write_text("[soltree]\nsection_marker = '('\n", encoding="utf-8")
        with pytest.raises(ConfigError) as excinfo:
            ViewerConfig.load(str(path), environ={})
        assert excinfo.value.details == {"config_file": str(path)}

    def test_pattern_is_not_a_config_key(self, tmp_path):
        path = tmp_path / "soltree.toml"
        path.write_text("[soltree]\nsection_pattern = 'x'\n", encoding="utf-8")
        with pytest.raises(ConfigError) as excinfo:
            ViewerConfig.load(str(path), environ={})
        assert "section_pattern" in excinfo.value.message


class TestLoad:
    def test_toml_file(self, tmp_path):
        path = tmp_path / "soltree.toml"
        path.write_text(
            '[soltree]\nindent_width = 4\naccepted_extensions = [".out"]\nuse_colors = false\n',
            encoding="utf-8",
        )
        config = ViewerConfig.load(str(path), environ={})
        assert config.indent_width == 4
        assert config.accepted_extensions == (".out",)
        assert config.use_colors is False
        assert config.config_file == str(path)

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "soltree.toml"
        path.write_text("[soltree]\nindent_width = 4\n", encoding="utf-8")
        config = ViewerConfig.load(
            str(path),
            environ={"SOLTREE_INDENT_WIDTH": "1", "SOLTREE_NO_COLOR": "1", "SOLTREE_EXTENSIONS": ".A, .b"},
        )
        assert config.indent_width == 1
        assert config.use_colors is False
        assert config.accepted_extensions == (".a", ".b")

    def test_default_file_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / "soltree.toml").write_text("[soltree]\nindent_width = 3\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert ViewerConfig.load(environ={}).indent_width == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as excinfo:
            ViewerConfig.load(str(tmp_path / "nope.toml"), environ={})
        assert "not found" in excinfo.value.message

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[soltree\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ViewerConfig.load(str(path), environ={})

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "soltree.toml"
        path.write_text("[soltree]\ntheme = 'dark'\n", encoding="utf-8")
        with pytest.raises(ConfigError) as excinfo:
            ViewerConfig.load(str(path), environ={})
        assert "theme" in excinfo.value.message

    def test_list_expected(self, tmp_path):
        path = tmp_path / "soltree.toml"
        path.write_text("[soltree]\narg_colors = 'red'\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ViewerConfig.load(str(path), environ={})

    def test_bad_indent_env(self):
        with pytest.raises(ConfigError):
            ViewerConfig.load(environ={"SOLTREE_INDENT_WIDTH": "wide"})
