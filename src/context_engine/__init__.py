from context_engine.core.config import EngineSettings
from context_engine.core.factories import create_input_template_pipeline
from context_engine.defaults import YamlConfigProvider
from context_engine.processors import InputTemplateProcessor

__all__ = [
    "EngineSettings",
    "InputTemplateProcessor",
    "YamlConfigProvider",
    "create_input_template_pipeline",
]
