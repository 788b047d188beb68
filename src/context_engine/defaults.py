from typing import Any

import yaml

from context_engine.core.protocols import ConfigProvider
from context_engine.core.types import InputTemplateConfig


class YamlConfigProvider(ConfigProvider):
    """Loads processor configuration from a standard YAML file."""

    def __init__(self, config_path: str):
        with open(config_path) as f:
            self.config = yaml.safe_load(f) or {}

    def get_processors(self) -> dict[str, Any]:
        return self.config.get("processors") or {}

    def get_input_template_config(self) -> InputTemplateConfig:
        return InputTemplateConfig.model_validate(
            self.get_processors().get("input_template") or {}
        )
