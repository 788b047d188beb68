from typing import Optional

from context_engine.core.config import EngineSettings
from context_engine.core.logging import LogConfig, setup_logging
from context_engine.core.pipeline import Pipeline
from context_engine.core.protocols import ConfigProvider
from context_engine.core.types import InputTemplateConfig, ProcessorOptions
from context_engine.defaults import YamlConfigProvider
from context_engine.processors.input_template import InputTemplateProcessor


def create_input_template_pipeline(
    settings: Optional[EngineSettings] = None,
    config_provider: Optional[ConfigProvider] = None,
) -> Pipeline:
    """Creates a single-step pipeline that applies the input template."""
    settings = settings or EngineSettings()

    if settings.log_level:
        setup_logging(LogConfig(LOG_LEVEL=settings.log_level))

    if config_provider is None and settings.config_path:
        config_provider = YamlConfigProvider(settings.config_path)

    config = InputTemplateConfig(input_template=settings.input_template)
    if config_provider is not None:
        provided = config_provider.get_input_template_config()
        if provided.input_template:
            config = provided

    return Pipeline(
        [
            InputTemplateProcessor(
                config=config,
                options=ProcessorOptions(debug=settings.debug),
            )
        ]
    )
