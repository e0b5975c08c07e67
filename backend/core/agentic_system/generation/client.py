"""
Code-generation client.

Single call site for every prompted generation: render the prompt, call the
generator, post-process the output. Chat replies fall back to the secondary
generator when the primary fails.

Dependencies: langchain_core, backend.core.agentic_system.generation
System role: Text generation for the intent classifier and the agents
"""

import logging
from typing import Any, Sequence

from backend.core.agentic_system.generation.prompts import (
    CHAT_PROMPT,
    CLASSIFIER_PROMPT,
    CLEANING_CODE_PROMPT,
    PLOT_CODE_PROMPT,
    PromptSpec,
    context_section,
    description_section,
)
from backend.core.agentic_system.generation.text_generator import TextGenerator
from backend.core.exceptions import CodeGenerationError
from backend.observability.log_utils import truncate

logger = logging.getLogger(__name__)

EMPTY_FALLBACK_REPLY = (
    "I encountered an issue generating a response, but I'm here to help. "
    "Could you try again?"
)


def _history_messages(history: Sequence[dict[str, str]] | None) -> list[tuple[str, str]]:
    # Stored roles are user/assistant; anything not from the user is the model's
    return [
        ("human" if item.get("role") == "user" else "ai", item.get("content", ""))
        for item in history or []
    ]


class CodeGenerationClient:
    """Prompted text generation over a primary and optional secondary generator."""

    def __init__(
        self,
        primary: TextGenerator | None,
        secondary: TextGenerator | None = None,
    ) -> None:
        """
        Args:
            primary: Generator for every prompt
            secondary: Chat-only fallback used when the primary raises
        """
        self._primary = primary
        self._secondary = secondary

    @property
    def has_fallback(self) -> bool:
        return self._secondary is not None

    async def prompted_generate(
        self,
        spec: PromptSpec,
        variables: dict[str, Any],
        history: Sequence[dict[str, str]] | None = None,
        generator: TextGenerator | None = None,
    ) -> str:
        """
        Render a prompt, generate, and post-process.

        Args:
            spec: Prompt template and post-processing
            variables: Template variables
            history: Prior turns as {"role", "content"} dicts (chat prompt only)
            generator: Override the primary generator

        Returns:
            str: Post-processed output

        Raises:
            CodeGenerationError: If no generator is configured or the call fails
        """
        generator = generator or self._primary
        if generator is None:
            raise CodeGenerationError("No text generator configured", prompt_name=spec.name)

        if "history" in spec.template.input_variables or "history" in spec.template.optional_variables:
            variables = {**variables, "history": _history_messages(history)}
        messages = spec.template.format_messages(**variables)

        try:
            raw = await generator.generate(messages)
        except Exception as e:
            logger.error(
                f"{__name__}:prompted_generate - {spec.name} failed on {generator.name}: {e}"
            )
            raise CodeGenerationError(
                f"Generation failed: {e}",
                prompt_name=spec.name,
                details={"generator": generator.name},
            ) from e

        output = spec.postprocess(raw)
        logger.debug(f"{__name__}:prompted_generate - {spec.name}: {truncate(output, 200)}")
        return output

    async def classify(self, message: str, context: str = "") -> str:
        """Raw upper-cased classifier label for a message."""
        return await self.prompted_generate(
            CLASSIFIER_PROMPT,
            {"message": message, "context_section": context_section(context)},
        )

    async def generate_plot_code(
        self,
        request: str,
        data_url: str,
        description: str = "",
    ) -> str:
        """
        Generate a plotting script for a dataset.

        Args:
            request: User's visualization request
            data_url: URL the script downloads the CSV from
            description: Optional description of the data

        Returns:
            str: Python source saving the figure to /tmp/plot.png
        """
        return await self.prompted_generate(
            PLOT_CODE_PROMPT,
            {
                "request": request,
                "data_url": data_url,
                "description_section": description_section(description),
            },
        )

    async def generate_cleaning_code(
        self,
        request: str,
        data_url: str,
        description: str = "",
    ) -> str:
        """
        Generate a cleaning script for a dataset.

        Args:
            request: User's cleaning request
            data_url: URL the script downloads the CSV from
            description: Optional description of the data

        Returns:
            str: Python source writing /tmp/cleaned_data.csv
        """
        return await self.prompted_generate(
            CLEANING_CODE_PROMPT,
            {
                "request": request,
                "data_url": data_url,
                "description_section": description_section(description),
            },
        )

    async def generate_chat_response(
        self,
        message: str,
        history: Sequence[dict[str, str]] | None = None,
    ) -> str:
        """
        Conversational reply, with secondary fallback.

        Args:
            message: Latest user message
            history: Prior turns, oldest first

        Returns:
            str: Reply text

        Raises:
            CodeGenerationError: Primary failed and there is no usable secondary
        """
        try:
            return await self.prompted_generate(CHAT_PROMPT, {"message": message}, history=history)
        except CodeGenerationError:
            if self._secondary is None:
                raise

        logger.warning(
            f"{__name__}:generate_chat_response - Primary failed, using {self._secondary.name}"
        )
        reply = await self.prompted_generate(
            CHAT_PROMPT,
            {"message": message},
            history=history,
            generator=self._secondary,
        )
        return reply or EMPTY_FALLBACK_REPLY
