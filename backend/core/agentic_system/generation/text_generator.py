"""
Text generation capability and its LangChain-backed implementation.

Gemini is the primary generator; OpenAI is the secondary used by chat when
Gemini fails. Both are plain LangChain chat models behind one wrapper.

Dependencies: langchain_core, langchain_google_genai, langchain_openai
System role: Model access for the code-generation client
"""

import logging
from typing import Protocol, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage

from backend.configs.llm import LLMSettings

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Produces a completion for a list of chat messages."""

    name: str

    async def generate(self, messages: Sequence[BaseMessage]) -> str:
        ...


class ChatModelTextGenerator:
    """TextGenerator wrapping any LangChain chat model."""

    def __init__(self, model: BaseChatModel, name: str) -> None:
        """
        Args:
            model: LangChain chat model
            name: Label used in logs (gemini, openai)
        """
        self._model = model
        self.name = name

    async def generate(self, messages: Sequence[BaseMessage]) -> str:
        response = await self._model.ainvoke(list(messages))
        # .text joins the text blocks when a provider returns content parts
        return str(response.text)


def build_gemini_generator(settings: LLMSettings) -> ChatModelTextGenerator | None:
    """
    Build the primary Gemini generator.

    Returns:
        ChatModelTextGenerator, or None when no Gemini key is configured
    """
    if not settings.gemini_api_key:
        logger.warning(f"{__name__}:build_gemini_generator - GEMINI_API_KEY not set")
        return None

    from langchain_google_genai import ChatGoogleGenerativeAI

    model = ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        google_api_key=settings.gemini_api_key,
        temperature=settings.temperature,
    )
    return ChatModelTextGenerator(model, name="gemini")


def build_openai_generator(settings: LLMSettings) -> ChatModelTextGenerator | None:
    """
    Build the secondary OpenAI generator.

    Returns:
        ChatModelTextGenerator, or None when no OpenAI key is configured
    """
    if not settings.openai_api_key:
        return None

    from langchain_openai import ChatOpenAI

    model = ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
    )
    return ChatModelTextGenerator(model, name="openai")
