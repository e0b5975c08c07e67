"""
Prompted text generation.

Exports: CodeGenerationClient, PromptSpec, TextGenerator, ChatModelTextGenerator,
the generator factories and the post-processors.
"""

from backend.core.agentic_system.generation.client import (
    EMPTY_FALLBACK_REPLY,
    CodeGenerationClient,
)
from backend.core.agentic_system.generation.postprocess import (
    normalize_label,
    strip_code_fences,
    strip_text,
)
from backend.core.agentic_system.generation.prompts import (
    CLEANED_OUTPUT_PATH,
    PLOT_OUTPUT_PATH,
    PromptSpec,
)
from backend.core.agentic_system.generation.text_generator import (
    ChatModelTextGenerator,
    TextGenerator,
    build_gemini_generator,
    build_openai_generator,
)

__all__ = [
    "CodeGenerationClient",
    "EMPTY_FALLBACK_REPLY",
    "PromptSpec",
    "PLOT_OUTPUT_PATH",
    "CLEANED_OUTPUT_PATH",
    "TextGenerator",
    "ChatModelTextGenerator",
    "build_gemini_generator",
    "build_openai_generator",
    "strip_text",
    "strip_code_fences",
    "normalize_label",
]
