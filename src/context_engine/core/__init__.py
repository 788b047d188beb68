# --- Core Protocols ---
from context_engine.core import logging
from context_engine.core.base import BaseProcessor
from context_engine.core.error_handling import (
    ContextEngineError,
    PipelineError,
    TemplateCompileError,
    TemplateError,
    TemplateRenderError,
)
from context_engine.core.pipeline import Pipeline
from context_engine.core.protocols import (
    CompiledTemplate,
    ConfigProvider,
    PipelineStep,
    TemplateCompiler,
)
from context_engine.core.templating import TEXT_INTERPOLATE_PATTERN, compile_template

# --- Core Data Types ---
from context_engine.core.types import (
    ContentPart,
    InputTemplateConfig,
    Message,
    PipelineContext,
    PipelineResult,
    PipelineStats,
    ProcessorOptions,
    Role,
)

# --- Define the public API for this module ---
__all__ = [
    "CompiledTemplate",
    "ConfigProvider",
    "PipelineStep",
    "TemplateCompiler",
    "ContentPart",
    "InputTemplateConfig",
    "Message",
    "PipelineContext",
    "PipelineResult",
    "PipelineStats",
    "ProcessorOptions",
    "Role",
    "BaseProcessor",
    "Pipeline",
    "compile_template",
    "TEXT_INTERPOLATE_PATTERN",
    "ContextEngineError",
    "PipelineError",
    "TemplateCompileError",
    "TemplateError",
    "TemplateRenderError",
    "logging",
]
