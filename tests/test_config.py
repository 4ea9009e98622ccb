from pathlib import Path

import pytest

from termslides.config import Settings, _deep_merge, load_config, load_settings
from termslides.exceptions import ConfigurationError
from termslides.observability import LogConfig
from termslides.timer import PreciseSleeper, ScaledSleeper

pytestmark = [pytest.mark.unit]


class TestDeepMerge:
    def test_shallow_override(self):
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self):
        base = {"playback": {"timer": "precise", "speed": 2.0}}
        override = {"playback": {"speed": 1.0}}
        assert _deep_merge(base, override) == {"playback": {"timer": "precise", "speed": 1.0}}

    def test_empty_base(self):
        assert _deep_merge({}, {"a": 1}) == {"a": 1}

    def test_empty_override(self):
        assert _deep_merge({"a": 1}, {}) == {"a": 1}


class TestLoadConfig:
    def test_project_only(self, tmp_path: Path):
        (tmp_path / "termslides.toml").write_text('[playback]\ntimer = "precise"\n')
        result = load_config(project_dir=tmp_path, global_path=tmp_path / "nonexistent.toml")
        assert result["playback"]["timer"] == "precise"

    def test_merge_project_overrides_global(self, tmp_path: Path):
        global_toml = tmp_path / "defaults.toml"
        global_toml.write_text('[playback]\ntimer = "precise"\nspeed = 2.0\n')
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        (project_dir / "termslides.toml").write_text("[playback]\nspeed = 0.5\n")

        result = load_config(project_dir=project_dir, global_path=global_toml)

        assert result["playback"] == {"timer": "precise", "speed": 0.5}

    def test_no_files_returns_empty_sections(self, tmp_path: Path):
        result = load_config(project_dir=tmp_path / "nope", global_path=tmp_path / "nope.toml")
        assert result == {"playback": {}, "logging": {}}

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "termslides.toml").write_text("[playback\n")
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            load_config(project_dir=tmp_path, global_path=tmp_path / "nope.toml")


class TestLoadSettings:
    def test_defaults(self, tmp_path: Path):
        settings = load_settings(project_dir=tmp_path, global_path=tmp_path / "nope.toml")
        assert settings == Settings()
        assert settings.logging is None

    def test_playback_and_logging(self, tmp_path: Path):
        (tmp_path / "termslides.toml").write_text(
            "[playback]\n"
            'timer = "precise"\n'
            "speed = 4\n"
            "\n"
            "[logging]\n"
            "enabled = true\n"
            'level = "debug"\n'
            'file = "logs/slides.log"\n'
        )
        settings = load_settings(project_dir=tmp_path, global_path=tmp_path / "nope.toml")

        assert settings.timer == "precise"
        assert settings.speed == 4.0
        assert settings.logging == LogConfig(level="DEBUG", file="logs/slides.log")

        sleeper = settings.sleeper()
        assert isinstance(sleeper, ScaledSleeper)
        assert isinstance(sleeper.inner, PreciseSleeper)
        assert sleeper.factor == pytest.approx(0.25)

    def test_logging_disabled_ignores_section(self, tmp_path: Path):
        (tmp_path / "termslides.toml").write_text('[logging]\nlevel = "DEBUG"\n')
        settings = load_settings(project_dir=tmp_path, global_path=tmp_path / "nope.toml")
        assert settings.logging is None

    @pytest.mark.parametrize(
        ("toml", "message"),
        [
            ('[playback]\ntimer = "spin"\n', "Unknown timer"),
            ("[playback]\nspeed = 0\n", "speed"),
            ('[playback]\nspeed = "fast"\n', "speed"),
            ("[playback]\nspeed = true\n", "speed"),
            ("[playback]\nspeed = nan\n", "speed"),
            ("[playback]\nspeed = inf\n", "speed"),
            ('[logging]\nenabled = true\nlevel = "LOUD"\n', "Unknown log level"),
            ("[logging]\nenabled = true\ncolour = true\n", r"Invalid \[logging\]"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, toml: str, message: str):
        (tmp_path / "termslides.toml").write_text(toml)
        with pytest.raises(ConfigurationError, match=message):
            load_settings(project_dir=tmp_path, global_path=tmp_path / "nope.toml")
