import pytest

from context_engine.core.config import EngineSettings
from context_engine.core.types import InputTemplateConfig
from context_engine.defaults import YamlConfigProvider


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("CONTEXT_ENGINE_INPUT_TEMPLATE", "Env: {{ text }}")
    monkeypatch.setenv("CONTEXT_ENGINE_DEBUG", "true")

    settings = EngineSettings()

    assert settings.input_template == "Env: {{ text }}"
    assert settings.debug is True


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CONTEXT_ENGINE_INPUT_TEMPLATE", raising=False)
    settings = EngineSettings(_env_file=None)

    assert settings.input_template is None
    assert settings.log_level is None


def test_input_template_config_accepts_both_field_names():
    assert InputTemplateConfig(inputTemplate="a").input_template == "a"
    assert InputTemplateConfig(input_template="b").input_template == "b"
    assert InputTemplateConfig().input_template is None


class TestYamlConfigProvider:
    def test_loads_processor_config(self, tmp_path):
        path = tmp_path / "engine.yml"
        path.write_text(
            "processors:\n"
            "  input_template:\n"
            "    inputTemplate: 'T: {{ text }}'\n"
        )

        provider = YamlConfigProvider(str(path))

        assert "input_template" in provider.get_processors()
        assert provider.get_input_template_config().input_template == "T: {{ text }}"

    def test_empty_file_disables_template(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        provider = YamlConfigProvider(str(path))

        assert provider.get_processors() == {}
        assert provider.get_input_template_config().input_template is None

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            YamlConfigProvider(str(tmp_path / "missing.yml"))
