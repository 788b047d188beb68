from context_engine.processors.input_template import (
    PROCESSED_COUNT_KEY,
    InputTemplateProcessor,
)

__all__ = ["InputTemplateProcessor", "PROCESSED_COUNT_KEY"]
